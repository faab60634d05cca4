# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for CoursePulse.

This package contains cross-cutting utilities:
- logging: Structured logging with structlog
- datetime: Timezone handling and chart label helpers
"""

from coursepulse.utils.datetime import (
    day_label,
    ensure_utc,
    hour_label,
    month_label,
    shift_month,
    to_zone,
    utc_now,
    weekday_label,
    zone_of,
)
from coursepulse.utils.logging import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "ensure_utc",
    "to_zone",
    "zone_of",
    "shift_month",
    "weekday_label",
    "month_label",
    "day_label",
    "hour_label",
]
