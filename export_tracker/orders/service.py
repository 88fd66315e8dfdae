"""
Order Service.
Applies the derived order totals and fills payment, shipment and quotation
records from the data they reference.
"""

import logging
from datetime import date
from typing import Dict, Any, Optional

from ..core.database import get_database

logger = logging.getLogger(__name__)

# Fields whose change re-derives total_amount and inr_value
TOTAL_INPUTS = ('quantity', 'unit_price', 'exchange_rate')


class RecordNotFoundError(LookupError):
    """Raised when a record references an order that does not exist."""


def calculate_order_totals(quantity: float, unit_price: float, exchange_rate: float) -> Dict[str, float]:
    """total_amount = quantity x unit_price, inr_value = total_amount x exchange_rate."""
    total_amount = round((quantity or 0) * (unit_price or 0), 2)
    inr_value = round(total_amount * (exchange_rate or 0), 2)
    return {'total_amount': total_amount, 'inr_value': inr_value}


class OrderService:
    """Service for creating and updating orders and their dependent records."""

    def __init__(self, db=None):
        self.db = db or get_database()

    def _require_order(self, order_id: str) -> Dict[str, Any]:
        order = self.db.get_order(order_id)
        if order is None:
            logger.warning(f"Referenced order {order_id} does not exist")
            raise RecordNotFoundError(f"Order {order_id} not found")
        return order

    # ==================== Orders ====================

    def create_order(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert an order with derived totals."""
        record = dict(data)
        record.pop('total_amount', None)
        record.pop('inr_value', None)
        if not record.get('order_date'):
            record['order_date'] = date.today().isoformat()
        record.update(calculate_order_totals(
            record.get('quantity'), record.get('unit_price'), record.get('exchange_rate')
        ))
        return self.db.create_order(record)

    def update_order(self, order_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Apply a partial update. When quantity, unit_price or exchange_rate change,
        totals are recomputed from the merged record.
        """
        changes = dict(updates)
        changes.pop('total_amount', None)
        changes.pop('inr_value', None)

        if any(key in changes for key in TOTAL_INPUTS):
            current = self.db.get_order(order_id)
            if current is None:
                return None
            merged = {key: changes.get(key, current.get(key)) for key in TOTAL_INPUTS}
            changes.update(calculate_order_totals(**merged))
            logger.debug(f"Re-derived totals for order {order_id}: {changes['total_amount']}")

        if not changes:
            return self.db.get_order(order_id)
        return self.db.update_order(order_id, changes)

    # ==================== Dependent Records ====================

    def create_payment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Record a payment; the customer defaults to the order's customer."""
        record = dict(data)
        order = self._require_order(record['order_id'])
        if not record.get('customer_id'):
            record['customer_id'] = order.get('customer_id')
        return self.db.create_payment(record)

    def create_shipment(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Book a shipment; customer and ports default to the order's."""
        record = dict(data)
        order = self._require_order(record['order_id'])
        for key in ('customer_id', 'origin_port', 'destination_port'):
            if not record.get(key):
                record[key] = order.get(key)
        return self.db.create_shipment(record)

    def create_quotation(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Issue a quotation, deriving total_amount when it is not given."""
        record = dict(data)
        if record.get('total_amount') is None and record.get('quantity') is not None:
            record['total_amount'] = round(record['quantity'] * (record.get('unit_price') or 0), 2)
        return self.db.create_quotation(record)
