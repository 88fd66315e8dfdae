"""
Database operations for Export Tracker.
Records live in a hosted Supabase project; without credentials an in-memory
demo data set is served instead.
"""

import logging
from contextlib import contextmanager
from typing import Optional, List, Dict, Any

import httpx
from postgrest.exceptions import APIError

from .backends import SupabaseBackend, DemoBackend, DataServiceError
from .demo_data import build_demo_data

logger = logging.getLogger(__name__)

# Table names
CUSTOMERS_TABLE = "customers"
ORDERS_TABLE = "orders"
PAYMENTS_TABLE = "payments"
SHIPMENTS_TABLE = "shipments"
INQUIRIES_TABLE = "inquiries"
QUOTATIONS_TABLE = "quotations"

# Select strings with embedded joins
CUSTOMER_SELECT = "*"
ORDER_SELECT = "*, customer:customers(*)"
PAYMENT_SELECT = "*, order:orders(*), customer:customers(*)"
SHIPMENT_SELECT = "*, order:orders(*), customer:customers(*)"
INQUIRY_SELECT = "*, customer:customers(*)"
QUOTATION_SELECT = "*, customer:customers(*), inquiry:inquiries(*)"


class Database:
    """Entity-level CRUD on top of a table backend."""

    def __init__(self, backend):
        self.backend = backend

    @property
    def backend_name(self) -> str:
        return self.backend.name

    @property
    def is_demo(self) -> bool:
        return self.backend.name == DemoBackend.name

    @contextmanager
    def _operation(self, action: str):
        """Translate backend failures into DataServiceError."""
        try:
            yield
        except APIError as e:
            logger.error(f"Failed to {action}: {e.message}")
            raise DataServiceError(f"Failed to {action}: {e.message}") from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to {action}: {e}")
            raise DataServiceError(f"Failed to {action}: {e}") from e

    # ==================== Generic Operations ====================

    def _list(self, table: str, select: str, order_by: str, descending: bool, label: str) -> List[Dict[str, Any]]:
        with self._operation(f"fetch {label}"):
            rows = self.backend.list(table, select=select, order_by=order_by, descending=descending)
        logger.debug(f"Fetched {len(rows)} {label}")
        return rows

    def _get(self, table: str, record_id: str, select: str, label: str) -> Optional[Dict[str, Any]]:
        with self._operation(f"fetch {label}"):
            return self.backend.get(table, record_id, select=select)

    def _create(self, table: str, record: Dict[str, Any], select: str, label: str) -> Dict[str, Any]:
        with self._operation(f"create {label}"):
            created = self.backend.insert(table, record, select=select)
        logger.info(f"Created {label} {created.get('id')}")
        return created

    def _update(
        self,
        table: str,
        record_id: str,
        updates: Dict[str, Any],
        select: str,
        label: str
    ) -> Optional[Dict[str, Any]]:
        with self._operation(f"update {label}"):
            updated = self.backend.update(table, record_id, updates, select=select)
        if updated:
            logger.info(f"Updated {label} {record_id}: {sorted(updates)}")
        return updated

    def _delete(self, table: str, record_id: str, label: str) -> bool:
        with self._operation(f"delete {label}"):
            deleted = self.backend.delete(table, record_id)
        if deleted:
            logger.info(f"Deleted {label} {record_id}")
        return deleted

    # ==================== Customer Operations ====================

    def get_customers(self) -> List[Dict[str, Any]]:
        """All customers, alphabetical by company name."""
        return self._list(CUSTOMERS_TABLE, CUSTOMER_SELECT, 'company_name', False, "customers")

    def get_customer(self, customer_id: str) -> Optional[Dict[str, Any]]:
        return self._get(CUSTOMERS_TABLE, customer_id, CUSTOMER_SELECT, "customer")

    def create_customer(self, customer: Dict[str, Any]) -> Dict[str, Any]:
        return self._create(CUSTOMERS_TABLE, customer, CUSTOMER_SELECT, "customer")

    def update_customer(self, customer_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._update(CUSTOMERS_TABLE, customer_id, updates, CUSTOMER_SELECT, "customer")

    def delete_customer(self, customer_id: str) -> bool:
        return self._delete(CUSTOMERS_TABLE, customer_id, "customer")

    # ==================== Order Operations ====================

    def get_orders(self) -> List[Dict[str, Any]]:
        """All orders with their customer, newest first."""
        return self._list(ORDERS_TABLE, ORDER_SELECT, 'order_date', True, "orders")

    def get_order(self, order_id: str) -> Optional[Dict[str, Any]]:
        return self._get(ORDERS_TABLE, order_id, ORDER_SELECT, "order")

    def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:
        return self._create(ORDERS_TABLE, order, ORDER_SELECT, "order")

    def update_order(self, order_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._update(ORDERS_TABLE, order_id, updates, ORDER_SELECT, "order")

    def delete_order(self, order_id: str) -> bool:
        return self._delete(ORDERS_TABLE, order_id, "order")

    # ==================== Payment Operations ====================

    def get_payments(self) -> List[Dict[str, Any]]:
        """All payments with order and customer, latest due date first."""
        return self._list(PAYMENTS_TABLE, PAYMENT_SELECT, 'payment_due_date', True, "payments")

    def get_payment(self, payment_id: str) -> Optional[Dict[str, Any]]:
        return self._get(PAYMENTS_TABLE, payment_id, PAYMENT_SELECT, "payment")

    def create_payment(self, payment: Dict[str, Any]) -> Dict[str, Any]:
        return self._create(PAYMENTS_TABLE, payment, PAYMENT_SELECT, "payment")

    def update_payment(self, payment_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._update(PAYMENTS_TABLE, payment_id, updates, PAYMENT_SELECT, "payment")

    def delete_payment(self, payment_id: str) -> bool:
        return self._delete(PAYMENTS_TABLE, payment_id, "payment")

    # ==================== Shipment Operations ====================

    def get_shipments(self) -> List[Dict[str, Any]]:
        """All shipments with order and customer, latest shipment date first."""
        return self._list(SHIPMENTS_TABLE, SHIPMENT_SELECT, 'shipment_date', True, "shipments")

    def get_shipment(self, shipment_id: str) -> Optional[Dict[str, Any]]:
        return self._get(SHIPMENTS_TABLE, shipment_id, SHIPMENT_SELECT, "shipment")

    def create_shipment(self, shipment: Dict[str, Any]) -> Dict[str, Any]:
        return self._create(SHIPMENTS_TABLE, shipment, SHIPMENT_SELECT, "shipment")

    def update_shipment(self, shipment_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._update(SHIPMENTS_TABLE, shipment_id, updates, SHIPMENT_SELECT, "shipment")

    def delete_shipment(self, shipment_id: str) -> bool:
        return self._delete(SHIPMENTS_TABLE, shipment_id, "shipment")

    # ==================== Inquiry Operations ====================

    def get_inquiries(self) -> List[Dict[str, Any]]:
        return self._list(INQUIRIES_TABLE, INQUIRY_SELECT, 'inquiry_date', True, "inquiries")

    def get_inquiry(self, inquiry_id: str) -> Optional[Dict[str, Any]]:
        return self._get(INQUIRIES_TABLE, inquiry_id, INQUIRY_SELECT, "inquiry")

    def create_inquiry(self, inquiry: Dict[str, Any]) -> Dict[str, Any]:
        return self._create(INQUIRIES_TABLE, inquiry, INQUIRY_SELECT, "inquiry")

    def update_inquiry(self, inquiry_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._update(INQUIRIES_TABLE, inquiry_id, updates, INQUIRY_SELECT, "inquiry")

    def delete_inquiry(self, inquiry_id: str) -> bool:
        return self._delete(INQUIRIES_TABLE, inquiry_id, "inquiry")

    # ==================== Quotation Operations ====================

    def get_quotations(self) -> List[Dict[str, Any]]:
        return self._list(QUOTATIONS_TABLE, QUOTATION_SELECT, 'quotation_date', True, "quotations")

    def get_quotation(self, quotation_id: str) -> Optional[Dict[str, Any]]:
        return self._get(QUOTATIONS_TABLE, quotation_id, QUOTATION_SELECT, "quotation")

    def create_quotation(self, quotation: Dict[str, Any]) -> Dict[str, Any]:
        return self._create(QUOTATIONS_TABLE, quotation, QUOTATION_SELECT, "quotation")

    def update_quotation(self, quotation_id: str, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return self._update(QUOTATIONS_TABLE, quotation_id, updates, QUOTATION_SELECT, "quotation")

    def delete_quotation(self, quotation_id: str) -> bool:
        return self._delete(QUOTATIONS_TABLE, quotation_id, "quotation")


# Global database instance
_db_instance: Optional[Database] = None


def create_database(config=None) -> Database:
    """Build a Database for the configured backend."""
    if config is None:
        from .config import get_config
        config = get_config()

    if config.supabase_configured:
        from supabase import create_client
        client = create_client(config.supabase_url, config.supabase_key)
        logger.info(f"Using Supabase backend at {config.supabase_url}")
        return Database(SupabaseBackend(client))

    logger.warning("Supabase credentials not configured, serving demo data")
    return Database(DemoBackend(build_demo_data()))


def get_database() -> Database:
    """Get the global database instance."""
    global _db_instance
    if _db_instance is None:
        _db_instance = create_database()
    return _db_instance
