"""
Tests for dashboard statistics and per-customer totals.
"""

from export_tracker.analytics.stats import count_by_status, get_customer_stats, get_dashboard_stats


class TestDashboardStats:

    def test_demo_stats(self, demo_tables, today):
        stats = get_dashboard_stats(
            demo_tables['orders'], demo_tables['payments'], demo_tables['shipments'],
            demo_tables['customers'], demo_tables['inquiries'], today
        )

        assert stats['total_orders'] == 7
        assert stats['pending_payments'] == 5
        assert stats['overdue_payments'] == 3
        assert stats['shipments_in_transit'] == 2
        assert stats['this_month_revenue'] == 21000
        assert stats['total_customers'] == 5
        assert stats['total_inquiries'] == 5
        assert stats['conversion_rate'] == 20.0

    def test_empty_data(self, today):
        stats = get_dashboard_stats([], [], [], [], [], today)
        assert stats['total_orders'] == 0
        assert stats['this_month_revenue'] == 0
        assert stats['conversion_rate'] == 0

    def test_revenue_ignores_same_month_of_other_year(self, today):
        orders = [
            {'order_date': '2025-06-01', 'total_amount': 100},
            {'order_date': '2024-06-01', 'total_amount': 999},
            {'order_date': None, 'total_amount': 50},
        ]
        stats = get_dashboard_stats(orders, [], [], [], [], today)
        assert stats['this_month_revenue'] == 100

    def test_overdue_needs_more_than_thirty_days(self, today):
        payments = [
            {'status': 'pending', 'payment_due_date': '2025-05-16'},  # 30 days
            {'status': 'pending', 'payment_due_date': '2025-05-15'},  # 31 days
            {'status': 'received', 'payment_due_date': '2024-01-01'},
        ]
        stats = get_dashboard_stats([], payments, [], [], [], today)
        assert stats['overdue_payments'] == 1
        assert stats['pending_payments'] == 2


class TestCustomerStats:

    def test_demo_customer(self, demo_tables):
        stats = get_customer_stats('c1', demo_tables['orders'], demo_tables['payments'])
        assert stats == {
            'customer_id': 'c1',
            'order_count': 2,
            'total_ordered': 73750,
            'total_invoiced': 73750,
            'total_received': 62500,
            'outstanding': 11250,
        }

    def test_customer_without_orders(self, demo_tables):
        stats = get_customer_stats('nobody', demo_tables['orders'], demo_tables['payments'])
        assert stats['order_count'] == 0
        assert stats['outstanding'] == 0


def test_count_by_status_lists_every_status(demo_tables):
    counts = count_by_status(
        demo_tables['shipments'], ['booked', 'loaded', 'in_transit', 'arrived', 'delivered', 'cancelled']
    )
    assert counts == {
        'booked': 0, 'loaded': 1, 'in_transit': 1, 'arrived': 1, 'delivered': 2, 'cancelled': 0
    }
