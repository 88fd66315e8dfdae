"""
Display helpers for amounts, dates and status badges.
"""

from typing import Optional, Any

from .analytics.aging import parse_date

CURRENCY_SYMBOLS = {'INR': '₹', 'USD': '$'}

STATUS_COLORS = {
    # Order statuses
    'confirmed': 'blue',
    'in_production': 'yellow',
    'ready_to_ship': 'orange',
    'shipped': 'purple',
    'delivered': 'green',
    'completed': 'green',
    'cancelled': 'red',
    # Payment statuses
    'pending': 'yellow',
    'partial': 'orange',
    'received': 'green',
    'overdue': 'red',
    'write_off': 'gray',
    # Shipment statuses
    'booked': 'blue',
    'loaded': 'indigo',
    'in_transit': 'purple',
    'arrived': 'teal',
    # Customer statuses
    'active': 'green',
    'inactive': 'gray',
    'blocked': 'red',
    # Inquiry statuses
    'quoted': 'blue',
    'converted': 'green',
    'lost': 'red',
}

# Background / foreground pairs for badges
BADGE_PALETTE = {
    'blue': ('#dbeafe', '#1e40af'),
    'yellow': ('#fef9c3', '#854d0e'),
    'orange': ('#ffedd5', '#9a3412'),
    'purple': ('#f3e8ff', '#6b21a8'),
    'green': ('#dcfce7', '#166534'),
    'red': ('#fee2e2', '#991b1b'),
    'gray': ('#f3f4f6', '#1f2937'),
    'indigo': ('#e0e7ff', '#3730a3'),
    'teal': ('#ccfbf1', '#115e59'),
}


def _group_indian(digits: str) -> str:
    """Group an integer digit string the Indian way: 12,34,567."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ','.join(groups + [tail])


def format_currency(amount: Optional[float], currency: str = 'USD') -> str:
    """
    Format an amount with Indian digit grouping.
    INR uses the rupee sign; every other currency is shown as USD.
    """
    if amount is None:
        return '-'
    symbol = CURRENCY_SYMBOLS['INR'] if currency == 'INR' else CURRENCY_SYMBOLS['USD']
    sign = '-' if amount < 0 else ''
    whole, fraction = f"{abs(amount):.2f}".split('.')
    return f"{sign}{symbol}{_group_indian(whole)}.{fraction}"


def format_date(value: Any) -> str:
    """DD Mon YYYY, '-' for empty values."""
    parsed = parse_date(value)
    if parsed is None:
        return '-'
    return parsed.strftime('%d %b %Y')


def get_status_color(status: Optional[str]) -> str:
    return STATUS_COLORS.get(status, 'gray')


def get_overdue_color(days: int) -> str:
    if days == 0:
        return 'green'
    if days <= 30:
        return 'yellow'
    if days <= 60:
        return 'orange'
    return 'red'


def status_badge(status: Optional[str]) -> str:
    """HTML badge for a status value."""
    color = get_status_color(status)
    label = (status or 'unknown').replace('_', ' ')
    return f'<span class="status-badge badge-{color}">{label}</span>'


def badge_css() -> str:
    """Stylesheet for status badges and alert text."""
    rules = [
        ".status-badge { padding: 2px 8px; border-radius: 9999px; font-size: 0.75rem; "
        "font-weight: 600; text-transform: capitalize; }"
    ]
    for color, (background, foreground) in BADGE_PALETTE.items():
        rules.append(f".badge-{color} {{ background-color: {background}; color: {foreground}; }}")
        rules.append(f".text-{color} {{ color: {foreground}; font-weight: 600; }}")
    return "<style>\n" + "\n".join(rules) + "\n</style>"
