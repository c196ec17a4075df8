"""Plotly visualisation helpers for the subscription cost tracker.

Functions accept the derived values from :mod:`calculations` and return a
``plotly.graph_objects.Figure`` that Streamlit renders via
``st.plotly_chart``.
"""

from __future__ import annotations

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .calculations import SubscriptionTotals
from .models import CATEGORIES


def create_category_share_chart(totals: SubscriptionTotals, title: str | None = None) -> go.Figure:
    """Donut chart of each category's share of the monthly total.

    Parameters
    ----------
    totals : SubscriptionTotals
        Derived values for the current input.
    title : str, optional
        Chart title.  Defaults to "Monthly Cost by Category".

    Returns
    -------
    plotly.graph_objects.Figure
        Pie chart with a hole, or an empty figure titled
        "No subscriptions entered" when the monthly total is not positive.
    """
    if totals.total_monthly <= 0:
        fig = go.Figure()
        fig.update_layout(title="No subscriptions entered")
        return fig
    df = pd.DataFrame(
        {
            "Category": [spec.label for spec in CATEGORIES],
            "Monthly": [totals.category_monthly[spec.field] for spec in CATEGORIES],
        }
    )
    df = df[df["Monthly"] > 0]
    fig = px.pie(df, names="Category", values="Monthly", hole=0.5)
    fig.update_traces(textinfo="percent+label", hovertemplate="%{label}: $%{value:,.2f}<extra></extra>")
    fig.update_layout(title=title or "Monthly Cost by Category", showlegend=False)
    return fig
