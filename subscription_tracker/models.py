"""Data model for the subscription cost tracker.

``SubscriptionInput`` is the only stateful entity: three category amounts
interpreted under one shared billing frequency.  ``BreakdownRow`` is a
derived record and is never stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class BillingFrequency(str, Enum):
    """How the entered amounts should be interpreted."""

    MONTHLY = "monthly"
    ANNUAL = "annual"

    @classmethod
    def parse(cls, value) -> "BillingFrequency":
        """Return the frequency named by ``value``.

        Raises:
            ValueError: If ``value`` is not ``monthly`` or ``annual``.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Unknown billing frequency: {value!r}")


@dataclass(frozen=True)
class CategorySpec:
    """Static description of one subscription category."""

    field: str
    label: str
    hint: str
    placeholder: str


CATEGORIES: List[CategorySpec] = [
    CategorySpec(
        field="streaming",
        label="Streaming Services",
        hint="Netflix, Spotify, Disney+, etc.",
        placeholder="45.00",
    ),
    CategorySpec(
        field="software",
        label="Software Subscriptions",
        hint="Adobe, Microsoft 365, cloud storage, etc.",
        placeholder="30.00",
    ),
    CategorySpec(
        field="memberships",
        label="Memberships",
        hint="Gym, Amazon Prime, Costco, etc.",
        placeholder="50.00",
    ),
]

AMOUNT_FIELDS = tuple(spec.field for spec in CATEGORIES)
FREQUENCY_FIELD = "billingFrequency"
INPUT_FIELDS = AMOUNT_FIELDS + (FREQUENCY_FIELD,)

FREQUENCY_LABELS: Dict[BillingFrequency, str] = {
    BillingFrequency.MONTHLY: "Monthly Amounts",
    BillingFrequency.ANNUAL: "Annual Amounts",
}

TOTAL_LABEL = "Total"


@dataclass(frozen=True)
class SubscriptionInput:
    """Amounts per category plus the frequency they were entered in."""

    streaming: float = 45.0
    software: float = 30.0
    memberships: float = 50.0
    billing_frequency: BillingFrequency = BillingFrequency.MONTHLY

    def amounts(self) -> Dict[str, float]:
        """Raw entered amounts keyed by category field name."""
        return {name: getattr(self, name) for name in AMOUNT_FIELDS}


@dataclass(frozen=True)
class BreakdownRow:
    category: str
    monthly: float
    annual: float
    is_total: bool = False
