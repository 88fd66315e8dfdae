"""
Tests for the entity-level data-access layer.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import httpx
import pytest
from postgrest.exceptions import APIError

from export_tracker.core import database as database_module
from export_tracker.core.database import Database, DataServiceError, create_database


class TestEntityQueries:
    """List ordering and embedded joins over the demo data."""

    def test_customers_alphabetical(self, db):
        names = [c['company_name'] for c in db.get_customers()]
        assert names == sorted(names)
        assert len(names) == 5

    def test_orders_newest_first_with_customer(self, db):
        orders = db.get_orders()
        assert [o['id'] for o in orders] == ['o4', 'o6', 'o3', 'o2', 'o1', 'o5', 'o7']
        assert orders[0]['customer']['company_name'] == 'Pacific Agro Imports Pty'

    def test_payments_carry_order_and_customer(self, db):
        payment = db.get_payment('p3')
        assert payment['order']['order_number'].endswith('-002')
        assert payment['customer']['country'] == 'Germany'

    def test_shipments_latest_first(self, db):
        assert db.get_shipments()[0]['id'] == 's4'

    def test_quotations_embed_inquiry(self, db):
        quotation = db.get_quotation('q2')
        assert quotation['inquiry']['inquiry_number'] == 'INQ-0002'
        assert quotation['customer']['id'] == 'c3'

    def test_inquiry_without_customer(self, db):
        assert db.get_inquiry('inq5')['customer'] is None


class TestEntityWrites:
    """Create, update and delete through the demo backend."""

    def test_create_and_fetch_customer(self, db):
        created = db.create_customer({'company_name': 'Colombo Spices', 'country': 'Sri Lanka'})
        assert created['id'].startswith('c')
        assert db.get_customer(created['id'])['company_name'] == 'Colombo Spices'

    def test_update_returns_joined_record(self, db):
        updated = db.update_shipment('s1', {'status': 'arrived'})
        assert updated['status'] == 'arrived'
        assert updated['order']['id'] == 'o1'

    def test_update_unknown(self, db):
        assert db.update_inquiry('nope', {'status': 'lost'}) is None

    def test_delete(self, db):
        assert db.delete_quotation('q3') is True
        assert db.get_quotation('q3') is None
        assert db.delete_quotation('q3') is False

    def test_write_is_logged(self, db, caplog):
        with caplog.at_level('INFO', logger='export_tracker.core.database'):
            db.delete_payment('p1')
        assert 'Deleted payment p1' in caplog.text


class TestErrorTranslation:
    """Backend failures surface as DataServiceError."""

    def test_api_error(self):
        backend = MagicMock()
        backend.list.side_effect = APIError({'message': 'relation "orders" does not exist', 'code': '42P01'})

        with pytest.raises(DataServiceError, match='Failed to fetch orders: relation "orders" does not exist'):
            Database(backend).get_orders()

    def test_http_error(self):
        backend = MagicMock()
        backend.insert.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(DataServiceError, match="Failed to create customer: connection refused"):
            Database(backend).create_customer({'company_name': 'X', 'country': 'Y'})


class TestBackendSelection:
    """create_database picks Supabase only when configured."""

    def test_demo_without_credentials(self):
        db = create_database(SimpleNamespace(supabase_configured=False))
        assert db.backend_name == 'demo'
        assert db.is_demo
        assert len(db.get_orders()) == 7

    def test_supabase_with_credentials(self, monkeypatch):
        fake_client = MagicMock()
        calls = []

        def fake_create_client(url, key):
            calls.append((url, key))
            return fake_client

        monkeypatch.setattr("supabase.create_client", fake_create_client)
        config = SimpleNamespace(
            supabase_configured=True, supabase_url="https://demo.supabase.co", supabase_key="anon"
        )

        db = create_database(config)

        assert db.backend_name == 'supabase'
        assert calls == [("https://demo.supabase.co", "anon")]
        assert db.backend.client is fake_client

    def test_get_database_is_cached(self, monkeypatch):
        monkeypatch.setattr(database_module, "_db_instance", None)
        monkeypatch.setattr(
            database_module, "create_database",
            lambda: create_database(SimpleNamespace(supabase_configured=False))
        )
        first = database_module.get_database()
        assert database_module.get_database() is first
