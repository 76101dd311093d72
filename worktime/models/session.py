# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session model mapping a cookie token to the acting user."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from worktime.models.base import Base

if TYPE_CHECKING:
    from worktime.models.user import User


class Session(Base):
    """Cookie token resolving a request to the employee or admin behind it.

    Tokens are issued after the identity provider has verified the user, so
    no credentials are stored here.
    """

    __tablename__ = "sessions"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    user_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    # str(uuid4()), hence 36 characters
    token: Mapped[str] = mapped_column(String(36), unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        nullable=False,
    )

    # Relationships
    user: Mapped[User] = relationship("User", back_populates="sessions")

    __table_args__ = (Index("idx_session_user", "user_id"),)

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token can no longer identify its user."""
        return self.expires_at < (now or datetime.utcnow())
