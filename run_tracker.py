#!/usr/bin/env python3
"""Direct launcher for the Subscription Cost Tracker.

This script launches Streamlit on the tracker's entry point.
"""

import sys
import subprocess
from pathlib import Path

project_root = Path(__file__).parent.resolve()
app_path = project_root / "subscription_tracker" / "app.py"

if __name__ == "__main__":
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        str(app_path),
    ])
