"""Derived values for the subscription cost tracker.

Everything here is a pure function of a :class:`SubscriptionInput`.  Amounts
entered as annual figures are normalised to their monthly equivalent before
being summed, and the annual total is always twelve times the monthly total.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

import pandas as pd

from .models import (
    CATEGORIES,
    TOTAL_LABEL,
    BillingFrequency,
    BreakdownRow,
    SubscriptionInput,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class SubscriptionTotals:
    """Result of :func:`calculate_totals`."""

    category_monthly: Dict[str, float]
    total_monthly: float
    total_annual: float
    active_categories: int
    avg_per_service: float
    breakdown: Tuple[BreakdownRow, ...]


def monthly_equivalent(amount: float, frequency: BillingFrequency) -> float:
    """Convert ``amount`` entered under ``frequency`` to a monthly figure."""
    if frequency is BillingFrequency.ANNUAL:
        return amount / MONTHS_PER_YEAR
    return amount


def count_active_categories(values: SubscriptionInput) -> int:
    """Number of categories whose raw entered amount is above zero."""
    return sum(1 for amount in values.amounts().values() if amount > 0)


def calculate_totals(values: SubscriptionInput) -> SubscriptionTotals:
    """Compute per-category and overall monthly/annual costs.

    Args:
        values: Current input amounts and billing frequency.

    Returns:
        SubscriptionTotals with the monthly and annual totals, the number of
        active categories, the average monthly cost per active category and
        the four-row breakdown (one row per category plus the total row).

    Example:
        >>> totals = calculate_totals(SubscriptionInput(45.0, 30.0, 50.0))
        >>> totals.total_monthly, totals.total_annual
        (125.0, 1500.0)
    """
    raw = values.amounts()
    category_monthly = {
        spec.field: monthly_equivalent(raw[spec.field], values.billing_frequency)
        for spec in CATEGORIES
    }

    total_monthly = sum(category_monthly.values())
    total_annual = total_monthly * MONTHS_PER_YEAR

    active = count_active_categories(values)
    avg_per_service = total_monthly / active if active > 0 else 0.0

    rows = [
        BreakdownRow(
            category=spec.label,
            monthly=category_monthly[spec.field],
            annual=category_monthly[spec.field] * MONTHS_PER_YEAR,
        )
        for spec in CATEGORIES
    ]
    rows.append(BreakdownRow(TOTAL_LABEL, total_monthly, total_annual, is_total=True))

    logger.debug(
        "Recalculated totals: monthly=%.4f active=%d", total_monthly, active
    )
    return SubscriptionTotals(
        category_monthly=category_monthly,
        total_monthly=total_monthly,
        total_annual=total_annual,
        active_categories=active,
        avg_per_service=avg_per_service,
        breakdown=tuple(rows),
    )


def breakdown_dataframe(totals: SubscriptionTotals) -> pd.DataFrame:
    """Return the breakdown rows as a DataFrame.

    Columns are ``Category``, ``Monthly``, ``Annual`` and ``Is Total``; row
    order matches :attr:`SubscriptionTotals.breakdown`.
    """
    return pd.DataFrame(
        [
            {
                "Category": row.category,
                "Monthly": row.monthly,
                "Annual": row.annual,
                "Is Total": row.is_total,
            }
            for row in totals.breakdown
        ],
        columns=["Category", "Monthly", "Annual", "Is Total"],
    )
