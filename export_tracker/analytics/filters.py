"""
Search and dropdown filters shared by the list pages and their Excel exports.

A filter value of None, '' or 'all' matches everything. Search is a
case-insensitive substring match over a few text fields per entity.
"""

from typing import Optional, List, Dict, Any, Callable

ALL = 'all'


def _customer_name(record: Dict[str, Any]) -> Optional[str]:
    customer = record.get('customer') or {}
    return customer.get('company_name')


def _matches_search(record: Dict[str, Any], search: Optional[str], fields: List[Callable]) -> bool:
    if not search:
        return True
    needle = search.lower()
    for field in fields:
        value = field(record)
        if value and needle in str(value).lower():
            return True
    return False


def _matches_value(record: Dict[str, Any], key: str, wanted: Optional[str]) -> bool:
    if not wanted or wanted == ALL:
        return True
    return record.get(key) == wanted


def _field(name: str) -> Callable:
    return lambda record: record.get(name)


ORDER_SEARCH_FIELDS = [_field('order_number'), _field('product_description'), _customer_name]
PAYMENT_SEARCH_FIELDS = [_field('payment_reference'), _field('invoice_number'), _customer_name]
CUSTOMER_SEARCH_FIELDS = [
    _field('company_name'), _field('contact_person'), _field('email'), _field('country')
]
SHIPMENT_SEARCH_FIELDS = [
    _field('shipment_number'), _field('vessel_name'), _field('bl_number'), _field('container_number')
]
INQUIRY_SEARCH_FIELDS = [_field('inquiry_number'), _field('product_description'), _customer_name]


def filter_orders(
    orders: List[Dict[str, Any]],
    search: Optional[str] = None,
    status: Optional[str] = None,
    currency: Optional[str] = None
) -> List[Dict[str, Any]]:
    return [
        o for o in orders
        if _matches_search(o, search, ORDER_SEARCH_FIELDS)
        and _matches_value(o, 'status', status)
        and _matches_value(o, 'currency', currency)
    ]


def filter_payments(
    payments: List[Dict[str, Any]],
    search: Optional[str] = None,
    status: Optional[str] = None,
    mode: Optional[str] = None
) -> List[Dict[str, Any]]:
    return [
        p for p in payments
        if _matches_search(p, search, PAYMENT_SEARCH_FIELDS)
        and _matches_value(p, 'status', status)
        and _matches_value(p, 'payment_mode', mode)
    ]


def filter_customers(
    customers: List[Dict[str, Any]],
    search: Optional[str] = None,
    country: Optional[str] = None
) -> List[Dict[str, Any]]:
    return [
        c for c in customers
        if _matches_search(c, search, CUSTOMER_SEARCH_FIELDS)
        and _matches_value(c, 'country', country)
    ]


def filter_shipments(
    shipments: List[Dict[str, Any]],
    search: Optional[str] = None,
    status: Optional[str] = None
) -> List[Dict[str, Any]]:
    return [
        s for s in shipments
        if _matches_search(s, search, SHIPMENT_SEARCH_FIELDS)
        and _matches_value(s, 'status', status)
    ]


def filter_inquiries(
    inquiries: List[Dict[str, Any]],
    search: Optional[str] = None,
    status: Optional[str] = None
) -> List[Dict[str, Any]]:
    return [
        i for i in inquiries
        if _matches_search(i, search, INQUIRY_SEARCH_FIELDS)
        and _matches_value(i, 'status', status)
    ]
