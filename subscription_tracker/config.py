"""Configuration management for the subscription cost tracker.

This module centralizes configuration values including widget limits,
page labels, and environment variable overrides.
"""

from __future__ import annotations

import logging
import os

# Page
PAGE_TITLE = os.getenv("SUBTRACKER_PAGE_TITLE", "Monthly Subscription Cost Tracker (2026)")
PAGE_SUBTITLE = "Track your total subscription spending"
PAGE_ICON = "💳"

# Amount widgets advise these limits; the state holder does not enforce them.
AMOUNT_MIN = 0.0
AMOUNT_MAX = 1000.0
AMOUNT_STEP = 0.01

# Key of the per-session state holder inside ``st.session_state``
SESSION_STATE_KEY = "subscription_state"

# Logging
LOG_LEVEL = os.getenv("SUBTRACKER_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_log_level() -> int:
    """Resolve ``LOG_LEVEL`` to a numeric level, falling back to WARNING."""
    level = logging.getLevelName(str(LOG_LEVEL).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging() -> None:
    """Configure root logging once for the Streamlit process."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
