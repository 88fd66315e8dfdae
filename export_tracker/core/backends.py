"""
Table backends for the data-access layer.

Both backends speak the same small vocabulary (list, get, insert, update,
delete) over a table name and a PostgREST select string such as
``"*, customer:customers(*)"``. SupabaseBackend sends it to the hosted
database; DemoBackend answers from in-memory fixtures and resolves the
embedded ``alias:table(*)`` joins itself.
"""

import copy
import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

logger = logging.getLogger(__name__)

# alias:table(*) inside a select string
EMBED_PATTERN = re.compile(r'(\w+):(\w+)\(\*\)')

# Id prefixes for records created in demo mode
ID_PREFIXES = {
    'customers': 'c',
    'orders': 'o',
    'payments': 'p',
    'shipments': 's',
    'inquiries': 'inq',
    'quotations': 'q',
}


class DataServiceError(Exception):
    """Raised when the database backend rejects or fails a request."""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_embeds(select: str) -> List[tuple]:
    """
    Extract embedded relations from a select string.

    Returns:
        List of (alias, table) tuples, e.g. [('customer', 'customers')]
    """
    return EMBED_PATTERN.findall(select or '')


class SupabaseBackend:
    """Backend that talks to a Supabase project through supabase-py."""

    name = "supabase"

    def __init__(self, client):
        self.client = client

    def list(
        self,
        table: str,
        select: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Dict[str, Any]]:
        query = self.client.table(table).select(select)
        if order_by:
            query = query.order(order_by, desc=descending)
        response = query.execute()
        return response.data or []

    def get(self, table: str, record_id: str, select: str = "*") -> Optional[Dict[str, Any]]:
        response = self.client.table(table).select(select).eq('id', record_id).limit(1).execute()
        rows = response.data or []
        return rows[0] if rows else None

    def insert(self, table: str, record: Dict[str, Any], select: str = "*") -> Dict[str, Any]:
        response = self.client.table(table).insert(record).execute()
        if not response.data:
            # Row-level security can hide the inserted row from the caller
            raise DataServiceError(f"Insert into {table} returned no rows")
        created = response.data[0]
        # Inserts return the bare row; read it back to get the embedded joins
        if parse_embeds(select):
            return self.get(table, created['id'], select) or created
        return created

    def update(
        self,
        table: str,
        record_id: str,
        updates: Dict[str, Any],
        select: str = "*"
    ) -> Optional[Dict[str, Any]]:
        response = self.client.table(table).update(updates).eq('id', record_id).execute()
        rows = response.data or []
        if not rows:
            return None
        if parse_embeds(select):
            return self.get(table, record_id, select) or rows[0]
        return rows[0]

    def delete(self, table: str, record_id: str) -> bool:
        response = self.client.table(table).delete().eq('id', record_id).execute()
        return bool(response.data)


class DemoBackend:
    """
    In-memory backend seeded with demo fixtures.

    Used whenever no Supabase credentials are configured. Each instance owns
    a deep copy of the fixtures, so writes never leak between instances.
    """

    name = "demo"

    def __init__(self, tables: Dict[str, List[Dict[str, Any]]]):
        self.tables = {name: copy.deepcopy(rows) for name, rows in tables.items()}

    def _rows(self, table: str) -> List[Dict[str, Any]]:
        return self.tables.setdefault(table, [])

    def _find(self, table: str, record_id: str) -> Optional[Dict[str, Any]]:
        for row in self._rows(table):
            if row.get('id') == record_id:
                return row
        return None

    def _embed(self, row: Dict[str, Any], select: str) -> Dict[str, Any]:
        """Return a copy of row with alias:table(*) relations attached."""
        result = dict(row)
        for alias, table in parse_embeds(select):
            related = self._find(table, row.get(f"{alias}_id"))
            result[alias] = dict(related) if related else None
        return result

    def list(
        self,
        table: str,
        select: str = "*",
        order_by: Optional[str] = None,
        descending: bool = False
    ) -> List[Dict[str, Any]]:
        rows = list(self._rows(table))
        if order_by:
            present = [r for r in rows if r.get(order_by) is not None]
            missing = [r for r in rows if r.get(order_by) is None]
            present.sort(key=lambda r: r[order_by], reverse=descending)
            rows = present + missing
        return [self._embed(r, select) for r in rows]

    def get(self, table: str, record_id: str, select: str = "*") -> Optional[Dict[str, Any]]:
        row = self._find(table, record_id)
        return self._embed(row, select) if row else None

    def insert(self, table: str, record: Dict[str, Any], select: str = "*") -> Dict[str, Any]:
        now = _now()
        row = dict(record)
        row['id'] = row.get('id') or f"{ID_PREFIXES.get(table, 'r')}{uuid.uuid4().hex[:12]}"
        row['created_at'] = now
        row['updated_at'] = now
        self._rows(table).append(row)
        logger.debug(f"Demo insert into {table}: {row['id']}")
        return self._embed(row, select)

    def update(
        self,
        table: str,
        record_id: str,
        updates: Dict[str, Any],
        select: str = "*"
    ) -> Optional[Dict[str, Any]]:
        row = self._find(table, record_id)
        if row is None:
            return None
        row.update({k: v for k, v in updates.items() if k not in ('id', 'created_at')})
        row['updated_at'] = _now()
        return self._embed(row, select)

    def delete(self, table: str, record_id: str) -> bool:
        rows = self._rows(table)
        for idx, row in enumerate(rows):
            if row.get('id') == record_id:
                rows.pop(idx)
                return True
        return False
