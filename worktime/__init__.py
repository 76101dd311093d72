# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work-hours computation and leave-accounting service."""

__version__ = "0.1.0"
