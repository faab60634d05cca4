# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Analytics domain services.

Dashboard-facing entry point over the aggregation engine.

Usage:
    from coursepulse.domains.analytics import AnalyticsService

    service = AnalyticsService()
    report = service.get_popular_courses(snapshot)
"""

from coursepulse.domains.analytics.service import AnalyticsService, PopularCoursesReport

__all__ = [
    "AnalyticsService",
    "PopularCoursesReport",
]
