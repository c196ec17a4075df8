from subscription_tracker.calculations import calculate_totals
from subscription_tracker.models import SubscriptionInput
from subscription_tracker.visualization import create_category_share_chart


def test_chart_has_one_slice_per_active_category():
    fig = create_category_share_chart(calculate_totals(SubscriptionInput(45.0, 0.0, 50.0)))

    assert len(fig.data) == 1
    assert list(fig.data[0].labels) == ['Streaming Services', 'Memberships']
    assert fig.layout.title.text == 'Monthly Cost by Category'


def test_chart_for_empty_input():
    fig = create_category_share_chart(calculate_totals(SubscriptionInput(0.0, 0.0, 0.0)))

    assert len(fig.data) == 0
    assert fig.layout.title.text == 'No subscriptions entered'
