"""
Receivables aging and LC expiry helpers.
"""

from datetime import date
from typing import Optional, List, Dict, Any

AGING_BUCKETS = ['0-30 days', '30-60 days', '60-90 days', '90+ days']

# LC alert thresholds in days
LC_ALERT_WINDOW = 30
LC_CRITICAL_DAYS = 7
LC_SOON_DAYS = 15


def parse_date(value: Any) -> Optional[date]:
    """Parse an ISO date or timestamp string; None for empty values."""
    if not value:
        return None
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def outstanding_amount(payment: Dict[str, Any]) -> float:
    """Invoice amount still to be received."""
    return (payment.get('invoice_amount') or 0) - (payment.get('amount_received') or 0)


def calculate_overdue_days(due_date: Any, today: Optional[date] = None) -> int:
    """Whole days past the due date, never negative. 0 without a due date."""
    due = parse_date(due_date)
    if due is None:
        return 0
    today = today or date.today()
    return max(0, (today - due).days)


def aging_bucket_label(days: int) -> str:
    """Short bucket name used in the aging report."""
    if days <= 30:
        return '0-30'
    if days <= 60:
        return '30-60'
    if days <= 90:
        return '60-90'
    return '90+'


def get_aging_analysis(payments: List[Dict[str, Any]], today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    Group unpaid payments into the four aging buckets.

    Args:
        payments: Payment records
        today: Reference day, defaults to today

    Returns:
        Always four buckets in order, each with label, count, total_amount and payments
    """
    today = today or date.today()
    buckets = [{'label': label, 'count': 0, 'total_amount': 0.0, 'payments': []} for label in AGING_BUCKETS]

    for payment in payments:
        if payment.get('status') == 'received':
            continue
        days = calculate_overdue_days(payment.get('payment_due_date'), today)
        bucket = buckets[AGING_BUCKETS.index(f"{aging_bucket_label(days)} days")]
        bucket['count'] += 1
        bucket['total_amount'] += outstanding_amount(payment)
        bucket['payments'].append(payment)

    return buckets


def get_payment_summary(payments: List[Dict[str, Any]], today: Optional[date] = None) -> Dict[str, float]:
    """Invoiced, received, outstanding and overdue totals."""
    today = today or date.today()
    total_invoiced = sum(p.get('invoice_amount') or 0 for p in payments)
    total_received = sum(p.get('amount_received') or 0 for p in payments)
    total_overdue = sum(
        outstanding_amount(p) for p in payments
        if p.get('status') != 'received' and calculate_overdue_days(p.get('payment_due_date'), today) > 0
    )
    return {
        'total_invoiced': total_invoiced,
        'total_received': total_received,
        'total_outstanding': total_invoiced - total_received,
        'total_overdue': total_overdue,
    }


def get_overdue_payments(payments: List[Dict[str, Any]], today: Optional[date] = None) -> List[Dict[str, Any]]:
    """Unpaid payments past their due date, most overdue first."""
    today = today or date.today()
    overdue = [
        p for p in payments
        if p.get('status') != 'received' and calculate_overdue_days(p.get('payment_due_date'), today) > 0
    ]
    overdue.sort(key=lambda p: calculate_overdue_days(p.get('payment_due_date'), today), reverse=True)
    return overdue


# ==================== LC Expiry ====================

def days_to_expiry(expiry_date: Any, today: Optional[date] = None) -> Optional[int]:
    """Signed days until expiry, None without an expiry date."""
    expiry = parse_date(expiry_date)
    if expiry is None:
        return None
    today = today or date.today()
    return (expiry - today).days


def get_lc_expiry_alert(expiry_date: Any, today: Optional[date] = None) -> Optional[Dict[str, Any]]:
    """
    Warning for an LC that has expired or expires within 30 days.

    Returns:
        Dict with color (red/orange/yellow), message and days, or None
    """
    days = days_to_expiry(expiry_date, today)
    if days is None or days > LC_ALERT_WINDOW:
        return None
    if days < 0:
        return {'color': 'red', 'message': f"LC EXPIRED {abs(days)} days ago", 'days': days}
    if days <= LC_CRITICAL_DAYS:
        return {'color': 'red', 'message': f"LC expires in {days} days!", 'days': days}
    if days <= LC_SOON_DAYS:
        return {'color': 'orange', 'message': f"LC expires in {days} days", 'days': days}
    return {'color': 'yellow', 'message': f"LC expires in {days} days", 'days': days}


def lc_alert_level(days: Optional[int]) -> str:
    """Alert column of the LC tracker report."""
    if days is None:
        return 'OK'
    if days < 15:
        return 'URGENT'
    if days < 30:
        return 'Warning'
    return 'OK'
