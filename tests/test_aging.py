"""
Tests for receivables aging, payment summary and LC expiry alerts.
"""

from datetime import date

import pytest

from export_tracker.analytics.aging import (
    AGING_BUCKETS,
    aging_bucket_label,
    calculate_overdue_days,
    days_to_expiry,
    get_aging_analysis,
    get_lc_expiry_alert,
    get_overdue_payments,
    get_payment_summary,
    lc_alert_level,
    parse_date,
)

TODAY = date(2025, 6, 15)


class TestOverdueDays:

    def test_past_due(self):
        assert calculate_overdue_days('2025-05-16', TODAY) == 30

    def test_not_yet_due_is_zero(self):
        assert calculate_overdue_days('2025-07-01', TODAY) == 0

    def test_due_today_is_zero(self):
        assert calculate_overdue_days('2025-06-15', TODAY) == 0

    def test_missing_due_date(self):
        assert calculate_overdue_days(None, TODAY) == 0
        assert calculate_overdue_days('', TODAY) == 0

    def test_timestamp_string(self):
        assert calculate_overdue_days('2025-06-05T18:30:00+00:00', TODAY) == 10

    def test_parse_date_accepts_date(self):
        assert parse_date(TODAY) is TODAY


@pytest.mark.parametrize("days,label", [
    (0, '0-30'), (30, '0-30'), (31, '30-60'), (60, '30-60'),
    (61, '60-90'), (90, '60-90'), (91, '90+'), (400, '90+'),
])
def test_bucket_boundaries(days, label):
    assert aging_bucket_label(days) == label


class TestAgingAnalysis:

    def test_demo_buckets(self, demo_tables, today):
        buckets = get_aging_analysis(demo_tables['payments'], today)

        assert [b['label'] for b in buckets] == AGING_BUCKETS
        assert [b['count'] for b in buckets] == [2, 1, 1, 1]
        assert [b['total_amount'] for b in buckets] == [29600, 21600, 11250, 12000]
        assert {p['id'] for p in buckets[0]['payments']} == {'p4', 'p5'}

    def test_received_payments_are_excluded(self, today):
        payments = [{'status': 'received', 'invoice_amount': 500, 'payment_due_date': '2024-01-01'}]
        buckets = get_aging_analysis(payments, today)
        assert all(b['count'] == 0 for b in buckets)

    def test_empty_input_still_has_four_buckets(self, today):
        buckets = get_aging_analysis([], today)
        assert len(buckets) == 4
        assert all(b['total_amount'] == 0 for b in buckets)

    def test_partial_payment_counts_outstanding_only(self, today):
        payments = [{
            'status': 'partial', 'invoice_amount': 1000, 'amount_received': 400,
            'payment_due_date': '2025-06-01',
        }]
        assert get_aging_analysis(payments, today)[0]['total_amount'] == 600


class TestPaymentSummary:

    def test_demo_summary(self, demo_tables, today):
        summary = get_payment_summary(demo_tables['payments'], today)
        assert summary == {
            'total_invoiced': 140950,
            'total_received': 66500,
            'total_outstanding': 74450,
            'total_overdue': 52450,
        }

    def test_empty(self, today):
        assert get_payment_summary([], today)['total_outstanding'] == 0

    def test_overdue_payments_most_overdue_first(self, demo_tables, today):
        overdue = get_overdue_payments(demo_tables['payments'], today)
        assert [p['id'] for p in overdue] == ['p6', 'p2', 'p3', 'p5']


class TestLcExpiry:

    def test_days_to_expiry_signed(self):
        assert days_to_expiry('2025-06-25', TODAY) == 10
        assert days_to_expiry('2025-06-12', TODAY) == -3
        assert days_to_expiry(None, TODAY) is None

    def test_expired(self):
        alert = get_lc_expiry_alert('2025-06-12', TODAY)
        assert alert == {'color': 'red', 'message': 'LC EXPIRED 3 days ago', 'days': -3}

    def test_critical(self):
        alert = get_lc_expiry_alert('2025-06-20', TODAY)
        assert alert['color'] == 'red'
        assert alert['message'] == 'LC expires in 5 days!'

    def test_expires_today_is_critical(self):
        assert get_lc_expiry_alert('2025-06-15', TODAY)['color'] == 'red'

    def test_soon(self):
        alert = get_lc_expiry_alert('2025-06-25', TODAY)
        assert alert == {'color': 'orange', 'message': 'LC expires in 10 days', 'days': 10}

    def test_within_window(self):
        assert get_lc_expiry_alert('2025-07-10', TODAY)['color'] == 'yellow'
        assert get_lc_expiry_alert('2025-07-15', TODAY)['color'] == 'yellow'

    def test_beyond_window(self):
        assert get_lc_expiry_alert('2025-07-16', TODAY) is None

    def test_no_expiry_date(self):
        assert get_lc_expiry_alert(None, TODAY) is None

    def test_demo_orders(self, demo_tables, today):
        alerts = {
            o['id']: get_lc_expiry_alert(o['lc_expiry_date'], today)
            for o in demo_tables['orders']
        }
        assert alerts['o1']['message'] == 'LC expires in 10 days'
        assert alerts['o3']['color'] == 'yellow'
        assert alerts['o6']['message'] == 'LC EXPIRED 3 days ago'
        assert alerts['o2'] is None


@pytest.mark.parametrize("days,level", [
    (-3, 'URGENT'), (10, 'URGENT'), (14, 'URGENT'),
    (15, 'Warning'), (25, 'Warning'), (29, 'Warning'),
    (30, 'OK'), (None, 'OK'),
])
def test_lc_alert_level(days, level):
    assert lc_alert_level(days) == level
