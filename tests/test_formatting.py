"""
Tests for currency, date and badge formatting.
"""

import pytest

from export_tracker.formatting import (
    BADGE_PALETTE,
    badge_css,
    format_currency,
    format_date,
    get_overdue_color,
    get_status_color,
    status_badge,
)


@pytest.mark.parametrize("amount,currency,expected", [
    (1234567.5, 'INR', '₹12,34,567.50'),
    (100000, 'USD', '$1,00,000.00'),
    (-1500, 'USD', '-$1,500.00'),
    (999, 'USD', '$999.00'),
    (0, 'INR', '₹0.00'),
    (2500, 'EUR', '$2,500.00'),
])
def test_format_currency(amount, currency, expected):
    assert format_currency(amount, currency) == expected


def test_format_currency_none():
    assert format_currency(None) == '-'


def test_format_date():
    assert format_date('2025-01-05') == '05 Jan 2025'
    assert format_date('2025-12-31T23:00:00+00:00') == '31 Dec 2025'
    assert format_date(None) == '-'
    assert format_date('') == '-'


class TestStatusColors:

    def test_known_statuses(self):
        assert get_status_color('in_transit') == 'purple'
        assert get_status_color('overdue') == 'red'
        assert get_status_color('converted') == 'green'

    def test_unknown_status_is_gray(self):
        assert get_status_color('mystery') == 'gray'
        assert get_status_color(None) == 'gray'

    @pytest.mark.parametrize("days,color", [(0, 'green'), (1, 'yellow'), (30, 'yellow'), (31, 'orange'), (61, 'red')])
    def test_overdue_color(self, days, color):
        assert get_overdue_color(days) == color

    def test_badge(self):
        assert status_badge('in_production') == (
            '<span class="status-badge badge-yellow">in production</span>'
        )

    def test_css_covers_palette(self):
        css = badge_css()
        for color in BADGE_PALETTE:
            assert f".badge-{color}" in css
