"""
Tests for OrderService: derived totals and records filled from their order.
"""

from datetime import date

import pytest

from export_tracker.orders.service import OrderService, RecordNotFoundError, calculate_order_totals


@pytest.fixture
def service(db):
    return OrderService(db)


def test_calculate_order_totals():
    assert calculate_order_totals(25000, 0.85, 84.0) == {'total_amount': 21250.0, 'inr_value': 1785000.0}
    assert calculate_order_totals(3, 0.1, 1) == {'total_amount': 0.3, 'inr_value': 0.3}
    assert calculate_order_totals(None, 2.5, 84) == {'total_amount': 0, 'inr_value': 0}


class TestOrders:

    def test_create_derives_totals_and_ignores_client_values(self, service):
        order = service.create_order({
            'order_number': 'EXP-2025-100', 'customer_id': 'c4',
            'product_description': 'Sesame Seeds', 'quantity': 1000, 'unit_price': 1.5,
            'exchange_rate': 83.5, 'total_amount': 1, 'inr_value': 1,
        })

        assert order['total_amount'] == 1500.0
        assert order['inr_value'] == 125250.0
        assert order['order_date'] == date.today().isoformat()
        assert order['customer']['company_name'] == 'Pacific Agro Imports Pty'

    def test_create_keeps_given_order_date(self, service):
        order = service.create_order({
            'order_number': 'EXP-2025-101', 'customer_id': 'c1', 'product_description': 'Rice',
            'quantity': 10, 'unit_price': 1, 'exchange_rate': 84, 'order_date': '2025-02-01',
        })
        assert order['order_date'] == '2025-02-01'

    def test_update_recomputes_from_merged_record(self, service):
        order = service.update_order('o1', {'quantity': 30000})
        assert order['total_amount'] == 25500.0
        assert order['inr_value'] == 2142000.0

    def test_update_without_total_inputs_leaves_totals(self, service, db):
        order = service.update_order('o1', {'status': 'delivered', 'total_amount': 5})
        assert order['status'] == 'delivered'
        assert order['total_amount'] == 21250

    def test_update_unknown_order(self, service):
        assert service.update_order('nope', {'quantity': 5}) is None
        assert service.update_order('nope', {'status': 'shipped'}) is None

    def test_empty_update_returns_current(self, service):
        assert service.update_order('o2', {})['id'] == 'o2'


class TestDependentRecords:

    def test_payment_takes_customer_from_order(self, service):
        payment = service.create_payment({
            'order_id': 'o3', 'invoice_amount': 30400, 'payment_due_date': '2025-08-01',
        })
        assert payment['customer_id'] == 'c3'
        assert payment['customer']['country'] == 'Nigeria'
        assert payment['order']['id'] == 'o3'

    def test_payment_for_unknown_order(self, service):
        with pytest.raises(RecordNotFoundError, match="Order nope not found"):
            service.create_payment({'order_id': 'nope', 'invoice_amount': 1, 'payment_due_date': '2025-08-01'})

    def test_shipment_defaults_from_order(self, service):
        shipment = service.create_shipment({'order_id': 'o3', 'shipment_number': 'SHP-0100'})
        assert shipment['customer_id'] == 'c3'
        assert shipment['origin_port'] == 'INMUN'
        assert shipment['destination_port'] == 'NGAPP'

    def test_shipment_keeps_explicit_port(self, service):
        shipment = service.create_shipment({
            'order_id': 'o3', 'shipment_number': 'SHP-0101', 'destination_port': 'NGTIN',
        })
        assert shipment['destination_port'] == 'NGTIN'

    def test_shipment_for_unknown_order(self, service):
        with pytest.raises(RecordNotFoundError):
            service.create_shipment({'order_id': 'nope'})

    def test_quotation_total(self, service):
        quotation = service.create_quotation({
            'quotation_number': 'QT-0100', 'customer_id': 'c2', 'product_description': 'Sorbitol',
            'quantity': 20000, 'unit_price': 0.62, 'total_amount': None,
        })
        assert quotation['total_amount'] == 12400.0
        assert quotation['customer']['id'] == 'c2'

    def test_quotation_explicit_total_kept(self, service):
        quotation = service.create_quotation({
            'quotation_number': 'QT-0101', 'quantity': 100, 'unit_price': 1, 'total_amount': 95,
        })
        assert quotation['total_amount'] == 95
