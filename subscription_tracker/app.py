"""Streamlit entry point for the subscription cost tracker.

Run with::

    streamlit run subscription_tracker/app.py

or use ``run_tracker.py`` at the project root.
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Add project root to path so the package resolves under ``streamlit run``
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from subscription_tracker import config  # noqa: E402
from subscription_tracker.state import get_session_state  # noqa: E402
from subscription_tracker.ui import SubscriptionTrackerUI  # noqa: E402


def main() -> None:
    """Render the tracker page for the current session."""
    config.configure_logging()
    ui = SubscriptionTrackerUI(get_session_state(st.session_state))
    ui.setup_page_config()
    ui.run()


if __name__ == "__main__":
    main()
