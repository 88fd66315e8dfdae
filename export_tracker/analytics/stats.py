"""
Dashboard and per-customer statistics.
"""

from datetime import date
from typing import Optional, List, Dict, Any, Iterable

from .aging import calculate_overdue_days, parse_date

PENDING_PAYMENT_STATUSES = ('pending', 'partial', 'overdue')
IN_TRANSIT_STATUSES = ('in_transit', 'loaded')

# Overdue payments on the dashboard are those more than 30 days late
DASHBOARD_OVERDUE_DAYS = 30


def get_dashboard_stats(
    orders: List[Dict[str, Any]],
    payments: List[Dict[str, Any]],
    shipments: List[Dict[str, Any]],
    customers: List[Dict[str, Any]],
    inquiries: List[Dict[str, Any]],
    today: Optional[date] = None
) -> Dict[str, Any]:
    """Headline numbers for the dashboard."""
    today = today or date.today()

    this_month_revenue = 0.0
    for order in orders:
        order_date = parse_date(order.get('order_date'))
        if order_date and order_date.year == today.year and order_date.month == today.month:
            this_month_revenue += order.get('total_amount') or 0

    converted = sum(1 for i in inquiries if i.get('status') == 'converted')
    conversion_rate = converted / len(inquiries) * 100 if inquiries else 0

    return {
        'total_orders': len(orders),
        'pending_payments': sum(1 for p in payments if p.get('status') in PENDING_PAYMENT_STATUSES),
        'overdue_payments': sum(
            1 for p in payments
            if p.get('status') != 'received'
            and calculate_overdue_days(p.get('payment_due_date'), today) > DASHBOARD_OVERDUE_DAYS
        ),
        'shipments_in_transit': sum(1 for s in shipments if s.get('status') in IN_TRANSIT_STATUSES),
        'this_month_revenue': this_month_revenue,
        'total_customers': len(customers),
        'total_inquiries': len(inquiries),
        'conversion_rate': conversion_rate,
    }


def get_customer_stats(
    customer_id: str,
    orders: List[Dict[str, Any]],
    payments: List[Dict[str, Any]]
) -> Dict[str, Any]:
    """Order count and money totals for one customer."""
    customer_orders = [o for o in orders if o.get('customer_id') == customer_id]
    customer_payments = [p for p in payments if p.get('customer_id') == customer_id]

    total_invoiced = sum(p.get('invoice_amount') or 0 for p in customer_payments)
    total_received = sum(p.get('amount_received') or 0 for p in customer_payments)

    return {
        'customer_id': customer_id,
        'order_count': len(customer_orders),
        'total_ordered': sum(o.get('total_amount') or 0 for o in customer_orders),
        'total_invoiced': total_invoiced,
        'total_received': total_received,
        'outstanding': total_invoiced - total_received,
    }


def count_by_status(records: List[Dict[str, Any]], statuses: Iterable[str]) -> Dict[str, int]:
    """Count records per status; every listed status appears, even at zero."""
    counts = {status: 0 for status in statuses}
    for record in records:
        status = record.get('status')
        if status in counts:
            counts[status] += 1
    return counts
