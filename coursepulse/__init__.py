"""CoursePulse analytics engine.

Progress and engagement aggregation for learning-platform dashboards:
per-learner course completion, cohort course popularity, and
time-bucketed session activity.

Copyright (C) 2025 Global Digital Labs (gdlabs.io)
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
