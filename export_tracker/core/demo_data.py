"""
Demo fixtures used when no Supabase credentials are configured.

Dates are expressed relative to the reference day so the dashboard, aging
buckets and LC alerts always have something to show.
"""

from datetime import date, timedelta
from typing import Optional, List, Dict, Any


def build_demo_data(today: Optional[date] = None) -> Dict[str, List[Dict[str, Any]]]:
    """Build the full demo data set, keyed by table name."""
    today = today or date.today()

    def day(offset: int) -> str:
        return (today + timedelta(days=offset)).isoformat()

    def stamp(offset: int) -> str:
        return f"{day(offset)}T09:00:00+00:00"

    year = today.year

    customers = [
        {
            'id': 'c1', 'company_name': 'Al Noor Trading LLC', 'contact_person': 'Omar Haddad',
            'email': 'omar@alnoortrading.ae', 'phone': '+971 4 555 0101', 'country': 'UAE',
            'city': 'Dubai', 'address': 'Office 1204, Al Maktoum Road, Deira', 'gst_number': None,
            'pan_number': None, 'iec_code': None, 'payment_terms': '30 days LC',
            'credit_limit': 100000, 'notes': 'Repeat buyer for caustic soda', 'status': 'active',
        },
        {
            'id': 'c2', 'company_name': 'Hamburg Chemie GmbH', 'contact_person': 'Katrin Vogel',
            'email': 'k.vogel@hamburgchemie.de', 'phone': '+49 40 555 2200', 'country': 'Germany',
            'city': 'Hamburg', 'address': 'Grosse Elbstrasse 145', 'gst_number': None,
            'pan_number': None, 'iec_code': None, 'payment_terms': '60 days DA',
            'credit_limit': 150000, 'notes': None, 'status': 'active',
        },
        {
            'id': 'c3', 'company_name': 'Lagos Industrial Supplies Ltd', 'contact_person': 'Chinedu Okafor',
            'email': 'procurement@lagosindustrial.ng', 'phone': '+234 1 555 3030', 'country': 'Nigeria',
            'city': 'Lagos', 'address': 'Plot 7, Apapa Wharf Road', 'gst_number': None,
            'pan_number': None, 'iec_code': None, 'payment_terms': '20% advance, 80% LC',
            'credit_limit': 50000, 'notes': 'Advance required before production', 'status': 'active',
        },
        {
            'id': 'c4', 'company_name': 'Pacific Agro Imports Pty', 'contact_person': 'Liam Carter',
            'email': 'liam@pacificagro.com.au', 'phone': '+61 2 5550 4040', 'country': 'Australia',
            'city': 'Sydney', 'address': '22 Darling Drive', 'gst_number': None,
            'pan_number': None, 'iec_code': None, 'payment_terms': '30 days TT',
            'credit_limit': 75000, 'notes': None, 'status': 'active',
        },
        {
            'id': 'c5', 'company_name': 'Gulf Star General Trading', 'contact_person': 'Faisal Rahman',
            'email': 'faisal@gulfstar.ae', 'phone': '+971 6 555 5050', 'country': 'UAE',
            'city': 'Sharjah', 'address': 'Warehouse 9, Industrial Area 4', 'gst_number': None,
            'pan_number': None, 'iec_code': None, 'payment_terms': '90 days DA',
            'credit_limit': 25000, 'notes': 'On hold until overdue invoice is cleared', 'status': 'inactive',
        },
    ]
    for idx, customer in enumerate(customers):
        customer['created_at'] = stamp(-400 + idx)
        customer['updated_at'] = stamp(-400 + idx)

    def order(offset: int, **fields) -> Dict[str, Any]:
        record = {
            'quotation_id': None, 'hsn_code': None, 'unit': 'KG', 'currency': 'USD',
            'exchange_rate': 84.0, 'delivery_terms': 'FOB', 'payment_terms': '30 days LC',
            'lc_number': None, 'lc_date': None, 'lc_expiry_date': None, 'lc_amount': None,
            'lc_bank': None, 'destination_port': None, 'origin_port': 'INMUN',
            'shipping_bill_number': None, 'shipping_bill_date': None, 'gst_invoice_number': None,
            'gst_invoice_date': None, 'gst_amount': 0, 'igst_amount': 0, 'rodtep_claim': 0,
            'rodtep_status': 'pending', 'drawback_amount': 0, 'drawback_status': 'pending',
            'remarks': None,
        }
        record.update(fields)
        record['total_amount'] = round(record['quantity'] * record['unit_price'], 2)
        record['inr_value'] = round(record['total_amount'] * record['exchange_rate'], 2)
        record['order_date'] = day(offset)
        record['created_at'] = stamp(offset)
        record['updated_at'] = stamp(offset)
        return record

    orders = [
        order(
            -75, id='o1', order_number=f'EXP-{year}-001', customer_id='c1',
            product_description='Industrial Grade Sodium Hydroxide Flakes', hsn_code='2815.11',
            quantity=25000, unit_price=0.85, lc_number='LC-ENBD-7781', lc_date=day(-70),
            lc_expiry_date=day(10), lc_amount=21250, lc_bank='Emirates NBD',
            destination_port='AEJEA', shipping_bill_number='SB4471203', shipping_bill_date=day(-22),
            gst_invoice_number=f'GST/{year}/0101', gst_invoice_date=day(-23),
            rodtep_claim=12000, rodtep_status='applied', drawback_amount=8500, status='shipped',
        ),
        order(
            -50, id='o2', order_number=f'EXP-{year}-002', customer_id='c2',
            product_description='Citric Acid Monohydrate', hsn_code='2918.14',
            quantity=18000, unit_price=1.2, payment_terms='60 days DA', delivery_terms='CIF',
            destination_port='DEHAM', shipping_bill_number='SB4471388', shipping_bill_date=day(-44),
            rodtep_claim=9500, rodtep_status='received', status='delivered',
        ),
        order(
            -30, id='o3', order_number=f'EXP-{year}-003', customer_id='c3',
            product_description='PVC Suspension Resin K67', hsn_code='3904.10',
            quantity=40000, unit_price=0.95, payment_terms='20% advance, 80% LC',
            delivery_terms='CFR', lc_number='LC-ZEN-0932', lc_date=day(-28),
            lc_expiry_date=day(25), lc_amount=30400, lc_bank='Zenith Bank',
            destination_port='NGAPP', status='in_production',
        ),
        order(
            0, id='o4', order_number=f'EXP-{year}-004', customer_id='c4',
            product_description='Guar Gum Powder 200 Mesh', hsn_code='1302.32',
            quantity=10000, unit_price=2.1, payment_terms='30 days TT',
            destination_port='AUSYD', quotation_id='q1', status='confirmed',
        ),
        order(
            -100, id='o5', order_number=f'EXP-{year}-005', customer_id='c1',
            product_description='Basmati Rice 1121 Sella', hsn_code='1006.30',
            quantity=50000, unit_price=1.05, destination_port='AEJEA',
            shipping_bill_number='SB4470561', shipping_bill_date=day(-92),
            drawback_amount=6200, drawback_status='received', status='completed',
        ),
        order(
            -20, id='o6', order_number=f'EXP-{year}-006', customer_id='c2',
            product_description='Turmeric Fingers Double Polished', hsn_code='0910.30',
            quantity=8000, unit_price=2.75, lc_number='LC-DB-5520', lc_date=day(-18),
            lc_expiry_date=day(-3), lc_amount=22000, lc_bank='Deutsche Bank',
            destination_port='DEHAM', status='ready_to_ship',
        ),
        order(
            -160, id='o7', order_number=f'EXP-{year}-007', customer_id='c5',
            product_description='Cumin Seeds Singapore Quality', hsn_code='0909.31',
            quantity=5000, unit_price=3.2, payment_terms='90 days DA',
            destination_port='AESHJ', status='delivered',
        ),
    ]

    def payment(**fields) -> Dict[str, Any]:
        record = {
            'customer_id': None, 'invoice_date': None, 'invoice_currency': 'USD',
            'payment_received_date': None, 'amount_received': 0, 'received_currency': 'USD',
            'exchange_rate_at_receipt': None, 'inr_realized': 0, 'bank_charges': 0,
            'firc_number': None, 'firc_date': None, 'firc_bank': None, 'payment_mode': 'TT',
            'bank_ref_number': None, 'remarks': None, 'status': 'pending',
            'created_at': stamp(-60), 'updated_at': stamp(-60),
        }
        record.update(fields)
        return record

    payments = [
        payment(
            id='p1', payment_reference='PAY-0001', order_id='o5', customer_id='c1',
            invoice_number=f'INV/{year}/005', invoice_date=day(-95), invoice_amount=52500,
            payment_due_date=day(-65), payment_received_date=day(-66), amount_received=52500,
            exchange_rate_at_receipt=83.4, inr_realized=4378500, bank_charges=1250,
            firc_number='FIRC-HDFC-22817', firc_date=day(-60), firc_bank='HDFC Bank',
            payment_mode='LC', bank_ref_number='HDFC/IR/55012', status='received',
        ),
        payment(
            id='p2', payment_reference='PAY-0002', order_id='o1', customer_id='c1',
            invoice_number=f'INV/{year}/001', invoice_date=day(-100), invoice_amount=21250,
            payment_due_date=day(-70), amount_received=10000, payment_received_date=day(-40),
            exchange_rate_at_receipt=83.9, inr_realized=839000, bank_charges=450,
            payment_mode='LC', status='partial',
        ),
        payment(
            id='p3', payment_reference='PAY-0003', order_id='o2', customer_id='c2',
            invoice_number=f'INV/{year}/002', invoice_date=day(-100), invoice_amount=21600,
            payment_due_date=day(-40), payment_mode='DA', status='overdue',
        ),
        payment(
            id='p4', payment_reference='PAY-0004', order_id='o6', customer_id='c2',
            invoice_number=f'INV/{year}/006', invoice_date=day(-15), invoice_amount=22000,
            payment_due_date=day(15), payment_mode='LC', status='pending',
        ),
        payment(
            id='p5', payment_reference='PAY-0005', order_id='o3', customer_id='c3',
            invoice_number=f'PI/{year}/003', invoice_date=day(-28), invoice_amount=7600,
            payment_due_date=day(-10), payment_mode='advance', status='pending',
        ),
        payment(
            id='p6', payment_reference='PAY-0006', order_id='o7', customer_id='c5',
            invoice_number=f'INV/{year}/007', invoice_date=day(-150), invoice_amount=16000,
            payment_due_date=day(-120), amount_received=4000, payment_received_date=day(-90),
            exchange_rate_at_receipt=83.1, inr_realized=332400, bank_charges=300,
            payment_mode='DA', status='overdue',
        ),
    ]

    def shipment(**fields) -> Dict[str, Any]:
        record = {
            'shipment_date': None, 'etd': None, 'eta': None, 'vessel_name': None,
            'voyage_number': None, 'bl_number': None, 'bl_date': None, 'container_number': None,
            'container_size': '20ft', 'shipping_line': None, 'freight_amount': 0,
            'freight_currency': 'USD', 'insurance_amount': 0, 'origin_port': 'INMUN',
            'destination_port': None, 'cha_name': None, 'cha_reference': None,
            'customs_clearance_date': None, 'let_export_date': None, 'remarks': None,
            'created_at': stamp(-30), 'updated_at': stamp(-30),
        }
        record.update(fields)
        return record

    shipments = [
        shipment(
            id='s1', shipment_number='SHP-0001', order_id='o1', customer_id='c1',
            shipment_date=day(-20), etd=day(-19), eta=day(8), vessel_name='MSC Aurora',
            voyage_number='FA412W', bl_number='MEDU8841207', bl_date=day(-19),
            container_number='MSCU4412078', shipping_line='MSC', freight_amount=1450,
            insurance_amount=120, destination_port='AEJEA', cha_name='Kutch Clearing Agency',
            cha_reference='KCA/2211', customs_clearance_date=day(-21), let_export_date=day(-21),
            status='in_transit',
        ),
        shipment(
            id='s2', shipment_number='SHP-0002', order_id='o2', customer_id='c2',
            shipment_date=day(-44), etd=day(-43), eta=day(-15), vessel_name='Maersk Elba',
            voyage_number='312N', bl_number='MAEU2219034', bl_date=day(-43),
            container_number='MSKU9930214', container_size='40ft', shipping_line='Maersk',
            freight_amount=2800, insurance_amount=180, destination_port='DEHAM',
            status='delivered',
        ),
        shipment(
            id='s3', shipment_number='SHP-0003', order_id='o5', customer_id='c1',
            shipment_date=day(-92), etd=day(-91), eta=day(-84), vessel_name='CMA CGM Indus',
            voyage_number='0KI3RW', bl_number='CMDU5510382', bl_date=day(-91),
            container_number='CMAU7720113', container_size='40ft', shipping_line='CMA CGM',
            freight_amount=3100, insurance_amount=210, destination_port='AEJEA',
            status='delivered',
        ),
        shipment(
            id='s4', shipment_number='SHP-0004', order_id='o6', customer_id='c2',
            shipment_date=day(-2), etd=day(1), eta=day(26), vessel_name='Hapag Leverkusen',
            voyage_number='2207W', container_number='HLXU6612094', shipping_line='Hapag-Lloyd',
            freight_amount=1650, insurance_amount=95, destination_port='DEHAM',
            status='loaded',
        ),
        shipment(
            id='s5', shipment_number='SHP-0005', order_id='o7', customer_id='c5',
            shipment_date=day(-150), etd=day(-149), eta=day(-144), vessel_name='X-Press Godavari',
            voyage_number='24006W', bl_number='XPSL1022871', bl_date=day(-149),
            container_number='XPLU3301947', shipping_line='X-Press Feeders',
            freight_amount=900, insurance_amount=60, destination_port='AESHJ',
            status='arrived',
        ),
    ]

    def inquiry(**fields) -> Dict[str, Any]:
        record = {
            'customer_id': None, 'quantity': None, 'unit': 'KG', 'target_price': None,
            'currency': 'USD', 'delivery_terms': 'FOB', 'destination_port': None,
            'remarks': None, 'status': 'pending', 'follow_up_date': None,
            'created_at': stamp(-45), 'updated_at': stamp(-45),
        }
        record.update(fields)
        return record

    inquiries = [
        inquiry(
            id='inq1', inquiry_number='INQ-0001', customer_id='c4', inquiry_date=day(-20),
            product_description='Guar Gum Powder 200 Mesh', quantity=10000, target_price=2.0,
            destination_port='AUSYD', status='converted',
        ),
        inquiry(
            id='inq2', inquiry_number='INQ-0002', customer_id='c3', inquiry_date=day(-45),
            product_description='PVC Suspension Resin K67', quantity=40000, target_price=0.9,
            delivery_terms='CFR', destination_port='NGAPP', status='quoted',
            follow_up_date=day(2),
        ),
        inquiry(
            id='inq3', inquiry_number='INQ-0003', customer_id='c2', inquiry_date=day(-6),
            product_description='Sorbitol 70% Solution', quantity=20000, target_price=0.65,
            delivery_terms='CIF', destination_port='DEHAM', follow_up_date=day(3),
        ),
        inquiry(
            id='inq4', inquiry_number='INQ-0004', customer_id='c5', inquiry_date=day(-90),
            product_description='Cumin Seeds Europe Quality', quantity=5000, target_price=3.0,
            destination_port='AESHJ', status='lost', remarks='Lost on price',
        ),
        inquiry(
            id='inq5', inquiry_number='INQ-0005', inquiry_date=day(-2),
            product_description='Kachi Ghani Mustard Oil', quantity=12000, unit='LTR',
            remarks='Trade fair lead, customer not registered yet', follow_up_date=day(5),
        ),
    ]

    def quotation(**fields) -> Dict[str, Any]:
        record = {
            'valid_until': None, 'hsn_code': None, 'unit': 'KG', 'currency': 'USD',
            'delivery_terms': 'FOB', 'payment_terms': '30 days LC', 'destination_port': None,
            'remarks': None, 'status': 'draft',
            'created_at': stamp(-40), 'updated_at': stamp(-40),
        }
        record.update(fields)
        record['total_amount'] = round(record['quantity'] * record['unit_price'], 2)
        return record

    quotations = [
        quotation(
            id='q1', quotation_number='QT-0001', inquiry_id='inq1', customer_id='c4',
            quotation_date=day(-18), valid_until=day(12), hsn_code='1302.32',
            product_description='Guar Gum Powder 200 Mesh', quantity=10000, unit_price=2.1,
            payment_terms='30 days TT', destination_port='AUSYD', status='accepted',
        ),
        quotation(
            id='q2', quotation_number='QT-0002', inquiry_id='inq2', customer_id='c3',
            quotation_date=day(-40), valid_until=day(-10), hsn_code='3904.10',
            product_description='PVC Suspension Resin K67', quantity=40000, unit_price=0.95,
            delivery_terms='CFR', payment_terms='20% advance, 80% LC', destination_port='NGAPP',
            status='sent',
        ),
        quotation(
            id='q3', quotation_number='QT-0003', inquiry_id='inq4', customer_id='c5',
            quotation_date=day(-85), valid_until=day(-55), hsn_code='0909.31',
            product_description='Cumin Seeds Europe Quality', quantity=5000, unit_price=3.4,
            destination_port='AESHJ', status='rejected',
        ),
    ]

    return {
        'customers': customers,
        'orders': orders,
        'payments': payments,
        'shipments': shipments,
        'inquiries': inquiries,
        'quotations': quotations,
    }
