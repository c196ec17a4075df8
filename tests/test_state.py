import math

import pytest

from subscription_tracker import config
from subscription_tracker.models import BillingFrequency, SubscriptionInput
from subscription_tracker.state import SubscriptionState, coerce_amount, get_session_state


def test_new_state_uses_defaults():
    state = SubscriptionState()

    assert state.input == SubscriptionInput(45.0, 30.0, 50.0, BillingFrequency.MONTHLY)
    assert state.totals.total_monthly == pytest.approx(125.0)


def test_set_field_replaces_only_that_field():
    state = SubscriptionState()

    state.set_field('software', 12.5)

    assert state.input.software == 12.5
    assert state.input.streaming == 45.0
    assert state.input.memberships == 50.0
    assert state.input.billing_frequency is BillingFrequency.MONTHLY


def test_set_field_recomputes_totals():
    state = SubscriptionState()

    totals = state.set_field('billingFrequency', 'annual')

    assert totals is state.totals
    assert state.totals.total_monthly == pytest.approx(125.0 / 12)
    assert state.totals.total_annual == pytest.approx(125.0)


def test_set_field_accepts_snake_case_frequency():
    state = SubscriptionState()
    state.set_field('billing_frequency', BillingFrequency.ANNUAL)
    assert state.input.billing_frequency is BillingFrequency.ANNUAL


@pytest.mark.parametrize('raw', [None, '', '   ', 'abc', float('nan'), float('inf')])
def test_invalid_amounts_coerce_to_zero(raw):
    assert coerce_amount(raw) == 0.0


def test_numeric_strings_are_parsed():
    assert coerce_amount('19.99') == 19.99
    assert coerce_amount(7) == 7.0


def test_out_of_range_amount_is_kept():
    state = SubscriptionState()
    state.set_field('streaming', 5000)
    assert state.input.streaming == 5000.0


def test_unknown_field_raises_key_error():
    state = SubscriptionState()
    with pytest.raises(KeyError):
        state.set_field('hobbies', 10)


def test_unknown_frequency_raises_value_error():
    state = SubscriptionState()
    with pytest.raises(ValueError):
        state.set_field('billingFrequency', 'weekly')
    assert state.input.billing_frequency is BillingFrequency.MONTHLY


def test_observers_receive_new_totals():
    state = SubscriptionState()
    received = []
    state.subscribe(received.append)

    state.set_field('streaming', 0)
    state.set_field('memberships', 'oops')

    assert len(received) == 2
    assert received[-1].total_monthly == pytest.approx(30.0)
    assert received[-1].active_categories == 1


def test_unsubscribe_stops_notifications():
    state = SubscriptionState()
    received = []
    unsubscribe = state.subscribe(received.append)

    unsubscribe()
    unsubscribe()
    state.set_field('software', 1)

    assert received == []


def test_recalculate_notifies_without_changing_input():
    state = SubscriptionState()
    received = []
    state.subscribe(received.append)
    before = state.input

    state.recalculate()

    assert state.input == before
    assert received == [state.totals]


def test_observer_errors_propagate():
    state = SubscriptionState()

    def broken(_totals):
        raise RuntimeError('render failed')

    state.subscribe(broken)
    with pytest.raises(RuntimeError):
        state.set_field('software', 3)


def test_session_state_is_created_once_per_session():
    session = {}

    first = get_session_state(session)
    second = get_session_state(session)

    assert first is second
    assert session[config.SESSION_STATE_KEY] is first


def test_sessions_are_independent():
    tab_a, tab_b = {}, {}

    get_session_state(tab_a).set_field('streaming', 0)

    assert get_session_state(tab_b).input.streaming == 45.0
    assert not math.isclose(
        get_session_state(tab_a).totals.total_monthly,
        get_session_state(tab_b).totals.total_monthly,
    )
