"""Streamlit presentation layer for the subscription cost tracker.

Each ``render_*`` method draws one panel of the page.  Input widgets write
back through :meth:`SubscriptionState.set_field` in their ``on_change``
callbacks; Streamlit then reruns the script and every panel is drawn again
from :attr:`SubscriptionState.totals`.
"""

from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st
from pandas.io.formats.style import Styler
from streamlit.errors import StreamlitAPIException

from . import config
from .calculations import SubscriptionTotals, breakdown_dataframe
from .formatting import format_currency
from .models import (
    CATEGORIES,
    FREQUENCY_FIELD,
    FREQUENCY_LABELS,
    BillingFrequency,
    CategorySpec,
)
from .state import SubscriptionState
from .visualization import create_category_share_chart

SUBSCRIPTION_TIPS: List[str] = [
    "Review subscriptions quarterly to identify unused services",
    "Consider annual billing for frequently used services",
    "Share family plans when possible to reduce costs",
    "Set calendar reminders before free trials end",
]

DISCLAIMER = (
    "This calculator helps you track and estimate your recurring subscription costs. "
    "Enter the amounts you currently pay for each category to see your total monthly "
    "and annual spending. The figures shown are estimates only based on the values you "
    "provide. Actual costs may vary with price changes, promotions, or billing "
    "adjustments. Review your actual statements for precise figures."
)

FOOTER_ITEMS = ["Estimates only", "Simplified tracking", "Free to use"]
FOOTER_COPYRIGHT = "© 2026 Subscription Cost Tracker"

TOTAL_ROW_BACKGROUND = "#F0F9FF"
STRIPE_BACKGROUND = "#F8FAFC"

FREQUENCY_WIDGET_KEY = "billing_frequency_input"


def amount_widget_key(field: str) -> str:
    return f"{field}_input"


def style_breakdown(df: pd.DataFrame) -> Styler:
    """Currency-format the breakdown and highlight the total row.

    ``df`` is the frame from :func:`breakdown_dataframe`; the ``Is Total``
    column drives the highlighting and is dropped from the output.
    """
    df = df.reset_index(drop=True)
    total_flags = df["Is Total"].tolist()
    display = df.drop(columns=["Is Total"])

    def _row_style(row: pd.Series) -> List[str]:
        if total_flags[row.name]:
            css = f"background-color: {TOTAL_ROW_BACKGROUND}; font-weight: 600"
        elif row.name % 2:
            css = f"background-color: {STRIPE_BACKGROUND}"
        else:
            css = ""
        return [css] * len(row)

    return display.style.apply(_row_style, axis=1).format(
        {"Monthly": format_currency, "Annual": format_currency}
    )


class SubscriptionTrackerUI:
    """Page layout bound to one session's :class:`SubscriptionState`."""

    def __init__(self, state: SubscriptionState):
        self.state = state

    def setup_page_config(self) -> None:
        """Configure Streamlit page settings.

        Called at the top of every script run, for every session.
        """
        try:
            st.set_page_config(
                page_title=config.PAGE_TITLE,
                page_icon=config.PAGE_ICON,
                layout="centered",
            )
        except StreamlitAPIException:
            # Already configured earlier in this run; keep reruns smooth.
            pass

    def run(self) -> None:
        """Draw every panel from the current state."""
        self.render_header()
        self.render_inputs()
        totals = self.state.totals
        self.render_results(totals)
        self.render_tips()
        self.render_breakdown(totals)
        self.render_category_chart(totals)
        self.render_disclaimer()
        self.render_footer()

    def render_header(self) -> None:
        st.title(config.PAGE_TITLE)
        st.markdown(config.PAGE_SUBTITLE)

    def render_inputs(self) -> None:
        """Render the frequency selector, amount inputs and the calculate button."""
        with st.container(border=True):
            self._seed_widgets()
            options = [frequency.value for frequency in BillingFrequency]
            st.selectbox(
                "Enter Costs As",
                options=options,
                format_func=lambda value: FREQUENCY_LABELS[BillingFrequency(value)],
                key=FREQUENCY_WIDGET_KEY,
                on_change=self._on_frequency_change,
            )
            for spec in CATEGORIES:
                self._render_amount_input(spec)
            st.button(
                "Calculate Total",
                type="primary",
                on_click=self.state.recalculate,
            )

    def _seed_widgets(self) -> None:
        current = self.state.input
        if FREQUENCY_WIDGET_KEY not in st.session_state:
            st.session_state[FREQUENCY_WIDGET_KEY] = current.billing_frequency.value
        for field, amount in current.amounts().items():
            key = amount_widget_key(field)
            if key not in st.session_state:
                # A zero amount shows as an empty field with its placeholder.
                st.session_state[key] = amount or None

    def _render_amount_input(self, spec: CategorySpec) -> None:
        key = amount_widget_key(spec.field)
        # Streamlit clamps to min/max here; the state holder itself accepts any amount.
        st.number_input(
            f"{spec.label} ($)",
            min_value=config.AMOUNT_MIN,
            max_value=config.AMOUNT_MAX,
            step=config.AMOUNT_STEP,
            value=None,
            format="%.2f",
            placeholder=spec.placeholder,
            key=key,
            on_change=self._on_amount_change,
            args=(spec.field,),
        )
        st.caption(spec.hint)

    def _on_frequency_change(self) -> None:
        self.state.set_field(FREQUENCY_FIELD, st.session_state[FREQUENCY_WIDGET_KEY])

    def _on_amount_change(self, field: str) -> None:
        self.state.set_field(field, st.session_state.get(amount_widget_key(field)))

    def render_results(self, totals: SubscriptionTotals) -> None:
        """Render the monthly headline figure with annual cost and average."""
        with st.container(border=True):
            st.metric("Total Monthly Subscription Cost", format_currency(totals.total_monthly))
            st.caption("per month")
            st.divider()
            col1, col2 = st.columns(2)
            with col1:
                st.metric("Annual Cost", format_currency(totals.total_annual))
            with col2:
                st.metric("Avg Per Category", format_currency(totals.avg_per_service))

    def render_tips(self) -> None:
        with st.container(border=True):
            st.subheader("Money-Saving Tips")
            st.markdown("\n".join(f"- {tip}" for tip in SUBSCRIPTION_TIPS))

    def render_breakdown(self, totals: SubscriptionTotals) -> None:
        """Render the four-row cost table with the total row highlighted."""
        st.subheader("Cost Breakdown")
        styled = style_breakdown(breakdown_dataframe(totals))
        st.dataframe(styled, hide_index=True)

    def render_category_chart(self, totals: SubscriptionTotals) -> None:
        st.plotly_chart(create_category_share_chart(totals))

    def render_disclaimer(self) -> None:
        st.caption(DISCLAIMER)

    def render_footer(self) -> None:
        st.divider()
        st.caption(" · ".join(FOOTER_ITEMS))
        st.caption(FOOTER_COPYRIGHT)
