"""Environment-variable-based configuration for the planner command line."""

from __future__ import annotations

import os

REST_MODEL: str = os.environ.get("SWIM_REST_MODEL", "percent")
SEND_OFF_STEP: int = int(os.environ.get("SWIM_SEND_OFF_STEP", "5"))
DEFAULT_COURSE: str = os.environ.get("SWIM_DEFAULT_COURSE", "SCY")
LOG_LEVEL: str = os.environ.get("SWIM_LOG_LEVEL", "INFO")
