"""Per-session input state with an explicit observer/update cycle.

A :class:`SubscriptionState` owns one :class:`SubscriptionInput`.  Every call
to :meth:`SubscriptionState.set_field` replaces a single field, recomputes the
derived totals and notifies subscribers with the new totals.  One holder is
stored per Streamlit session via :func:`get_session_state`, so separate
browser tabs never share input.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace
from typing import Any, Callable, List, MutableMapping

from . import config
from .calculations import SubscriptionTotals, calculate_totals
from .models import AMOUNT_FIELDS, FREQUENCY_FIELD, BillingFrequency, SubscriptionInput

logger = logging.getLogger(__name__)

Observer = Callable[[SubscriptionTotals], None]

_ATTRIBUTE_NAMES = {name: name for name in AMOUNT_FIELDS}
_ATTRIBUTE_NAMES[FREQUENCY_FIELD] = "billing_frequency"
_ATTRIBUTE_NAMES["billing_frequency"] = "billing_frequency"


def coerce_amount(value: Any) -> float:
    """Convert a raw widget value to an amount.

    Empty, missing, non-numeric and non-finite values become ``0.0``.  No
    range check is applied.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        logger.warning("Non-numeric amount %r coerced to 0", value)
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


class SubscriptionState:
    """Holds the current input and the totals derived from it."""

    def __init__(self, initial: SubscriptionInput | None = None):
        self._input = initial or SubscriptionInput()
        self._observers: List[Observer] = []
        self._totals = calculate_totals(self._input)

    @property
    def input(self) -> SubscriptionInput:
        return self._input

    @property
    def totals(self) -> SubscriptionTotals:
        return self._totals

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` and return a callable that removes it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def set_field(self, field: str, value: Any) -> SubscriptionTotals:
        """Replace one input field and push the recomputed totals.

        Args:
            field: ``streaming``, ``software``, ``memberships`` or
                ``billingFrequency``.
            value: Raw value from the widget.  Amounts are coerced with
                :func:`coerce_amount`; frequencies go through
                :meth:`BillingFrequency.parse`.

        Returns:
            The freshly computed totals.

        Raises:
            KeyError: If ``field`` is not an input field.
            ValueError: If a frequency value is not recognised.
        """
        if field not in _ATTRIBUTE_NAMES:
            raise KeyError(field)
        attribute = _ATTRIBUTE_NAMES[field]
        if attribute == "billing_frequency":
            stored: Any = BillingFrequency.parse(value)
        else:
            stored = coerce_amount(value)

        self._input = replace(self._input, **{attribute: stored})
        logger.debug("Set %s=%r", field, stored)
        return self.recalculate()

    def recalculate(self) -> SubscriptionTotals:
        """Recompute totals from the current input and notify observers."""
        self._totals = calculate_totals(self._input)
        for observer in list(self._observers):
            observer(self._totals)
        logger.debug("Notified %d observer(s)", len(self._observers))
        return self._totals


def get_session_state(session_state: MutableMapping[str, Any]) -> SubscriptionState:
    """Return the holder stored in ``session_state``, creating it on first use.

    ``session_state`` is normally ``st.session_state``; any mutable mapping
    works, which keeps this testable without a running Streamlit server.
    """
    if config.SESSION_STATE_KEY not in session_state:
        session_state[config.SESSION_STATE_KEY] = SubscriptionState()
        logger.info("Created subscription state for new session")
    return session_state[config.SESSION_STATE_KEY]
