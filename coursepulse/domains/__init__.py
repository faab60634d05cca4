# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Domain services layer for CoursePulse.

Domains:
    progress: Course relation index, personal progress, cohort popularity
        and learner activity series.
    engagement: Time-bucketed session aggregation for activity charts.
    analytics: Dashboard facade combining the aggregations above.
"""
