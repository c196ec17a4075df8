from decimal import Decimal

from subscription_tracker.formatting import format_currency, round_to_cent


def test_format_currency_adds_symbol_and_separators():
    assert format_currency(1500) == '$1,500.00'
    assert format_currency(1234567.891) == '$1,234,567.89'


def test_format_currency_rounds_half_up():
    assert format_currency(41.666666) == '$41.67'
    assert format_currency(1.005) == '$1.01'
    assert format_currency(0.125) == '$0.13'


def test_format_currency_without_sign():
    assert format_currency(10, include_sign=False) == '10.00'


def test_format_currency_negative():
    assert format_currency(-5) == '-$5.00'


def test_format_currency_zero():
    assert format_currency(0) == '$0.00'


def test_round_to_cent():
    assert round_to_cent(2.675) == Decimal('2.68')


def test_format_currency_non_finite_is_not_hidden():
    assert format_currency(float('inf')) == '$∞'
    assert format_currency(float('-inf')) == '-$∞'
    assert format_currency(float('nan')) == '$NaN'
    assert format_currency(1e308 * 12) == '$∞'


def test_overflowing_total_shows_infinity():
    from subscription_tracker.state import SubscriptionState

    state = SubscriptionState()
    state.set_field('streaming', 1e308)

    assert format_currency(state.totals.total_annual) == '$∞'
