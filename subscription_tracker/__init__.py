"""Top-level package for the Subscription Cost Tracker.

The primary modules are:

* ``calculations`` – monthly/annual totals derived from the entered amounts
* ``state`` – the per-session input holder that recomputes on every edit
* ``ui`` – Streamlit panels bound to that holder
* ``app`` – the Streamlit entry point

To run the tracker from the command line you can execute:

```bash
streamlit run subscription_tracker/app.py
```
"""

from .calculations import SubscriptionTotals, breakdown_dataframe, calculate_totals
from .models import BillingFrequency, BreakdownRow, SubscriptionInput
from .state import SubscriptionState, get_session_state

__all__ = [
    "BillingFrequency",
    "BreakdownRow",
    "SubscriptionInput",
    "SubscriptionState",
    "SubscriptionTotals",
    "breakdown_dataframe",
    "calculate_totals",
    "get_session_state",
]
