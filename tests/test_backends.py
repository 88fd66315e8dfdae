"""
Tests for the table backends: demo embedding/ordering and the Supabase query chain.
"""

from unittest.mock import MagicMock

import pytest

from export_tracker.core.backends import DataServiceError, DemoBackend, SupabaseBackend, parse_embeds


def test_parse_embeds():
    assert parse_embeds("*, order:orders(*), customer:customers(*)") == [
        ('order', 'orders'), ('customer', 'customers')
    ]
    assert parse_embeds("*") == []
    assert parse_embeds(None) == []


class TestDemoBackend:
    """In-memory backend behaviour."""

    @pytest.fixture
    def backend(self):
        return DemoBackend({
            'customers': [
                {'id': 'c1', 'company_name': 'Zeta Exports', 'country': 'UAE'},
                {'id': 'c2', 'company_name': 'Alpha Imports', 'country': 'Germany'},
            ],
            'orders': [
                {'id': 'o1', 'customer_id': 'c1', 'order_date': '2025-01-10'},
                {'id': 'o2', 'customer_id': 'c2', 'order_date': '2025-03-01'},
                {'id': 'o3', 'customer_id': 'missing', 'order_date': None},
            ],
        })

    def test_list_orders_ascending(self, backend):
        rows = backend.list('customers', order_by='company_name')
        assert [r['company_name'] for r in rows] == ['Alpha Imports', 'Zeta Exports']

    def test_list_descending_puts_missing_values_last(self, backend):
        rows = backend.list('orders', order_by='order_date', descending=True)
        assert [r['id'] for r in rows] == ['o2', 'o1', 'o3']

    def test_embed_resolves_relation(self, backend):
        row = backend.get('orders', 'o1', select="*, customer:customers(*)")
        assert row['customer']['company_name'] == 'Zeta Exports'

    def test_embed_unknown_relation_is_none(self, backend):
        row = backend.get('orders', 'o3', select="*, customer:customers(*)")
        assert row['customer'] is None

    def test_get_unknown_id(self, backend):
        assert backend.get('orders', 'nope') is None

    def test_insert_assigns_prefixed_id_and_timestamps(self, backend):
        row = backend.insert('orders', {'customer_id': 'c2'}, select="*, customer:customers(*)")
        assert row['id'].startswith('o')
        assert len(row['id']) == 13
        assert row['created_at'] == row['updated_at']
        assert row['customer']['id'] == 'c2'
        assert backend.get('orders', row['id']) is not None

    def test_insert_inquiry_prefix(self, backend):
        row = backend.insert('inquiries', {'inquiry_number': 'INQ-9'})
        assert row['id'].startswith('inq')

    def test_update_keeps_id_and_created_at(self, backend):
        created = backend.insert('customers', {'company_name': 'New Co', 'country': 'India'})
        updated = backend.update(
            'customers', created['id'],
            {'id': 'hijack', 'created_at': 'never', 'country': 'Nepal'}
        )
        assert updated['id'] == created['id']
        assert updated['created_at'] == created['created_at']
        assert updated['country'] == 'Nepal'

    def test_update_unknown_id(self, backend):
        assert backend.update('customers', 'nope', {'country': 'India'}) is None

    def test_delete(self, backend):
        assert backend.delete('customers', 'c1') is True
        assert backend.delete('customers', 'c1') is False
        assert backend.get('customers', 'c1') is None

    def test_returned_rows_are_copies(self, backend):
        row = backend.get('customers', 'c1')
        row['company_name'] = 'Changed'
        assert backend.get('customers', 'c1')['company_name'] == 'Zeta Exports'

    def test_instances_do_not_share_fixtures(self):
        tables = {'customers': [{'id': 'c1', 'company_name': 'A', 'country': 'X'}]}
        first = DemoBackend(tables)
        second = DemoBackend(tables)
        first.delete('customers', 'c1')
        assert second.get('customers', 'c1') is not None
        assert tables['customers'][0]['id'] == 'c1'


class TestSupabaseBackend:
    """Query chains sent to a mocked supabase client."""

    @pytest.fixture
    def client(self):
        return MagicMock()

    def test_list_applies_select_and_order(self, client):
        query = client.table.return_value.select.return_value
        query.order.return_value.execute.return_value.data = [{'id': 'o1'}]

        rows = SupabaseBackend(client).list(
            'orders', select="*, customer:customers(*)", order_by='order_date', descending=True
        )

        assert rows == [{'id': 'o1'}]
        client.table.assert_called_with('orders')
        client.table.return_value.select.assert_called_with("*, customer:customers(*)")
        query.order.assert_called_once_with('order_date', desc=True)

    def test_list_without_order(self, client):
        client.table.return_value.select.return_value.execute.return_value.data = None
        assert SupabaseBackend(client).list('customers') == []

    def test_get_returns_first_row(self, client):
        chain = client.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [{'id': 'c1'}]

        assert SupabaseBackend(client).get('customers', 'c1') == {'id': 'c1'}
        client.table.return_value.select.return_value.eq.assert_called_with('id', 'c1')

    def test_get_missing(self, client):
        chain = client.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = []
        assert SupabaseBackend(client).get('customers', 'nope') is None

    def test_insert_rereads_for_embeds(self, client):
        client.table.return_value.insert.return_value.execute.return_value.data = [{'id': 'o9'}]
        chain = client.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value.data = [{'id': 'o9', 'customer': {'id': 'c1'}}]

        row = SupabaseBackend(client).insert('orders', {'customer_id': 'c1'}, select="*, customer:customers(*)")

        assert row['customer'] == {'id': 'c1'}
        client.table.return_value.insert.assert_called_once_with({'customer_id': 'c1'})

    def test_insert_plain_select(self, client):
        client.table.return_value.insert.return_value.execute.return_value.data = [{'id': 'c9'}]
        assert SupabaseBackend(client).insert('customers', {'company_name': 'X'}) == {'id': 'c9'}
        client.table.return_value.select.assert_not_called()

    def test_insert_with_no_rows_returned(self, client):
        client.table.return_value.insert.return_value.execute.return_value.data = []
        with pytest.raises(DataServiceError, match="returned no rows"):
            SupabaseBackend(client).insert('orders', {'customer_id': 'c1'})

    def test_update_unknown_id(self, client):
        client.table.return_value.update.return_value.eq.return_value.execute.return_value.data = []
        assert SupabaseBackend(client).update('customers', 'nope', {'city': 'Pune'}) is None

    def test_delete(self, client):
        chain = client.table.return_value.delete.return_value.eq.return_value
        chain.execute.return_value.data = [{'id': 'c1'}]
        assert SupabaseBackend(client).delete('customers', 'c1') is True

        chain.execute.return_value.data = []
        assert SupabaseBackend(client).delete('customers', 'c1') is False
