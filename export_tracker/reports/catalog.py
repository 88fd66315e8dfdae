"""
Business report catalogue and list-page exports.

Each report turns database records into flat rows ready for export_to_excel.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, List, Dict, Any, Callable

import pandas as pd

from ..analytics.aging import (
    calculate_overdue_days, aging_bucket_label, days_to_expiry, lc_alert_level, outstanding_amount
)
from ..analytics.filters import (
    filter_orders, filter_payments, filter_shipments, filter_customers, filter_inquiries
)
from ..analytics.stats import get_customer_stats
from .excel import export_to_excel

logger = logging.getLogger(__name__)


@dataclass
class ReportDefinition:
    id: str
    title: str
    description: str
    sheet_name: str
    filename: str
    build: Callable


def _customer_field(record: Dict[str, Any], field: str) -> str:
    customer = record.get('customer') or {}
    return customer.get(field) or ''


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


# ==================== Report Builders ====================

def order_summary_rows(db, today: date) -> List[Dict[str, Any]]:
    return [
        {
            'Order #': o.get('order_number'),
            'Customer': _customer_field(o, 'company_name'),
            'Country': _customer_field(o, 'country'),
            'Date': o.get('order_date'),
            'Product': o.get('product_description'),
            'HSN Code': o.get('hsn_code') or '',
            'Qty': o.get('quantity'),
            'Unit': o.get('unit'),
            'Unit Price': o.get('unit_price'),
            'Total': o.get('total_amount'),
            'Currency': o.get('currency'),
            'INR Value': o.get('inr_value') or '',
            'Delivery Terms': o.get('delivery_terms'),
            'Payment Terms': o.get('payment_terms'),
            'Status': o.get('status'),
        }
        for o in db.get_orders()
    ]


def payment_aging_rows(db, today: date) -> List[Dict[str, Any]]:
    rows = []
    for p in db.get_payments():
        if p.get('status') == 'received':
            continue
        days = calculate_overdue_days(p.get('payment_due_date'), today)
        rows.append({
            'Payment Ref': p.get('payment_reference'),
            'Customer': _customer_field(p, 'company_name'),
            'Invoice #': p.get('invoice_number') or '',
            'Invoice Amount': p.get('invoice_amount'),
            'Currency': p.get('invoice_currency'),
            'Due Date': p.get('payment_due_date'),
            'Amount Received': p.get('amount_received'),
            'Outstanding': outstanding_amount(p),
            'Overdue Days': days,
            'Aging Bucket': aging_bucket_label(days),
            'Mode': p.get('payment_mode'),
            'Status': p.get('status'),
        })
    return rows


def shipment_tracker_rows(db, today: date) -> List[Dict[str, Any]]:
    return [
        {
            'Shipment #': s.get('shipment_number'),
            'Date': s.get('shipment_date') or '',
            'Vessel': s.get('vessel_name') or '',
            'Voyage #': s.get('voyage_number') or '',
            'B/L #': s.get('bl_number') or '',
            'B/L Date': s.get('bl_date') or '',
            'Container': s.get('container_number') or '',
            'Size': s.get('container_size'),
            'Shipping Line': s.get('shipping_line') or '',
            'Origin Port': s.get('origin_port') or '',
            'Dest Port': s.get('destination_port') or '',
            'ETD': s.get('etd') or '',
            'ETA': s.get('eta') or '',
            'Freight': s.get('freight_amount'),
            'Insurance': s.get('insurance_amount'),
            'CHA': s.get('cha_name') or '',
            'Status': s.get('status'),
        }
        for s in db.get_shipments()
    ]


def customer_ledger_rows(db, today: date) -> List[Dict[str, Any]]:
    orders = db.get_orders()
    payments = db.get_payments()
    rows = []
    for c in db.get_customers():
        stats = get_customer_stats(c['id'], orders, payments)
        rows.append({
            'Company': c.get('company_name'),
            'Country': c.get('country'),
            'Contact': c.get('contact_person') or '',
            'Email': c.get('email') or '',
            'Phone': c.get('phone') or '',
            'GST Number': c.get('gst_number') or '',
            'IEC Code': c.get('iec_code') or '',
            'Total Orders': stats['order_count'],
            'Total Ordered (USD)': stats['total_ordered'],
            'Total Invoiced (USD)': stats['total_invoiced'],
            'Total Received (USD)': stats['total_received'],
            'Outstanding (USD)': stats['outstanding'],
            'Credit Limit': c.get('credit_limit'),
            'Status': c.get('status'),
        })
    return rows


def firc_rows(db, today: date) -> List[Dict[str, Any]]:
    return [
        {
            'Payment Ref': p.get('payment_reference'),
            'FIRC Number': p.get('firc_number') or 'PENDING',
            'FIRC Date': p.get('firc_date') or '',
            'FIRC Bank': p.get('firc_bank') or '',
            'Invoice #': p.get('invoice_number') or '',
            'Amount (USD)': p.get('amount_received'),
            'Exchange Rate': p.get('exchange_rate_at_receipt') or '',
            'INR Realized': p.get('inr_realized'),
            'Bank Charges': p.get('bank_charges'),
            'Net INR': (p.get('inr_realized') or 0) - (p.get('bank_charges') or 0),
            'Mode': p.get('payment_mode'),
        }
        for p in db.get_payments()
        if p.get('firc_number') or p.get('status') == 'received'
    ]


def incentive_rows(db, today: date) -> List[Dict[str, Any]]:
    return [
        {
            'Order #': o.get('order_number'),
            'Customer': _customer_field(o, 'company_name'),
            'Product': o.get('product_description'),
            'HSN Code': o.get('hsn_code') or '',
            'Order Value (USD)': o.get('total_amount'),
            'Shipping Bill': o.get('shipping_bill_number') or '',
            'SB Date': o.get('shipping_bill_date') or '',
            'RoDTEP Amount': o.get('rodtep_claim'),
            'RoDTEP Status': o.get('rodtep_status'),
            'Drawback Amount': o.get('drawback_amount'),
            'Drawback Status': o.get('drawback_status'),
            'Total Incentives': (o.get('rodtep_claim') or 0) + (o.get('drawback_amount') or 0),
        }
        for o in db.get_orders()
        if (o.get('rodtep_claim') or 0) > 0 or (o.get('drawback_amount') or 0) > 0
    ]


def monthly_sales_rows(db, today: date) -> List[Dict[str, Any]]:
    orders = [o for o in db.get_orders() if o.get('order_date')]
    if not orders:
        return []

    df = pd.DataFrame({
        'month': [str(o['order_date'])[:7] for o in orders],
        'total_usd': [o.get('total_amount') or 0 for o in orders],
        'total_inr': [o.get('inr_value') or 0 for o in orders],
    })
    grouped = df.groupby('month').agg(
        count=('total_usd', 'size'),
        total_usd=('total_usd', 'sum'),
        total_inr=('total_inr', 'sum'),
    ).sort_index()

    return [
        {
            'Month': month,
            'Order Count': int(row['count']),
            'Total USD': float(row['total_usd']),
            'Total INR': float(row['total_inr']),
            'Avg Order USD': _round_half_up(row['total_usd'] / row['count']),
        }
        for month, row in grouped.iterrows()
    ]


def country_wise_rows(db, today: date) -> List[Dict[str, Any]]:
    orders = db.get_orders()
    if not orders:
        return []

    df = pd.DataFrame({
        'country': [_customer_field(o, 'country') or 'Unknown' for o in orders],
        'customer_id': [o.get('customer_id') for o in orders],
        'total_usd': [o.get('total_amount') or 0 for o in orders],
    })
    grouped = df.groupby('country').agg(
        count=('total_usd', 'size'),
        total_usd=('total_usd', 'sum'),
        customers=('customer_id', 'nunique'),
    ).sort_values('total_usd', ascending=False, kind='stable')

    return [
        {
            'Country': country,
            'Total Orders': int(row['count']),
            'Total Value (USD)': float(row['total_usd']),
            'Unique Customers': int(row['customers']),
            'Avg Order Value': _round_half_up(row['total_usd'] / row['count']),
        }
        for country, row in grouped.iterrows()
    ]


def lc_tracker_rows(db, today: date) -> List[Dict[str, Any]]:
    rows = []
    for o in db.get_orders():
        if not o.get('lc_number'):
            continue
        days = days_to_expiry(o.get('lc_expiry_date'), today)
        rows.append({
            'Order #': o.get('order_number'),
            'Customer': _customer_field(o, 'company_name'),
            'LC Number': o.get('lc_number') or '',
            'LC Date': o.get('lc_date') or '',
            'LC Expiry': o.get('lc_expiry_date') or '',
            'Days to Expiry': days,
            'LC Amount': o.get('lc_amount') or '',
            'LC Bank': o.get('lc_bank') or '',
            'Order Amount': o.get('total_amount'),
            'Currency': o.get('currency'),
            'Alert': lc_alert_level(days),
            'Status': o.get('status'),
        })
    return rows


def inquiry_conversion_rows(db, today: date) -> List[Dict[str, Any]]:
    quotations = db.get_quotations()
    rows = []
    for inq in db.get_inquiries():
        quote = next((q for q in quotations if q.get('inquiry_id') == inq.get('id')), None) or {}
        rows.append({
            'Inquiry #': inq.get('inquiry_number'),
            'Customer': _customer_field(inq, 'company_name'),
            'Date': inq.get('inquiry_date'),
            'Product': inq.get('product_description'),
            'Quantity': inq.get('quantity') or '',
            'Target Price': inq.get('target_price') or '',
            'Currency': inq.get('currency'),
            'Quotation #': quote.get('quotation_number') or '-',
            'Quoted Price': quote.get('unit_price') or '-',
            'Quoted Amount': quote.get('total_amount') or '-',
            'Inquiry Status': inq.get('status'),
            'Quote Status': quote.get('status') or '-',
            'Follow Up': inq.get('follow_up_date') or '',
        })
    return rows


REPORTS: Dict[str, ReportDefinition] = {
    r.id: r for r in [
        ReportDefinition(
            'order-summary', 'Order Summary Report',
            'All orders with customer details, values, and status. Complete export order register.',
            'Orders', 'order-summary-report', order_summary_rows
        ),
        ReportDefinition(
            'payment-aging', 'Payment Aging Report',
            'Outstanding payments bucketed by age: 0-30, 30-60, 60-90, and 90+ days.',
            'Aging', 'payment-aging-report', payment_aging_rows
        ),
        ReportDefinition(
            'shipment-tracker', 'Shipment Tracking Report',
            'All shipments with vessel, container, B/L, port details and delivery status.',
            'Shipments', 'shipment-tracking-report', shipment_tracker_rows
        ),
        ReportDefinition(
            'customer-ledger', 'Customer Ledger Report',
            'Customer-wise summary with total orders, payments, and outstanding balances.',
            'Customer Ledger', 'customer-ledger-report', customer_ledger_rows
        ),
        ReportDefinition(
            'firc-report', 'FIRC Report',
            'Foreign Inward Remittance Certificate tracking for RBI compliance.',
            'FIRC', 'firc-report', firc_rows
        ),
        ReportDefinition(
            'rodtep-drawback', 'RoDTEP & Drawback Report',
            'Government incentive claims tracking: RoDTEP and Duty Drawback status.',
            'Incentives', 'rodtep-drawback-report', incentive_rows
        ),
        ReportDefinition(
            'monthly-sales', 'Monthly Sales Report',
            'Month-wise sales analysis with order count, value, and average order size.',
            'Monthly Sales', 'monthly-sales-report', monthly_sales_rows
        ),
        ReportDefinition(
            'country-wise', 'Country-wise Export Report',
            'Exports grouped by destination country with total values and order counts.',
            'By Country', 'country-wise-export-report', country_wise_rows
        ),
        ReportDefinition(
            'lc-tracker', 'LC Tracker Report',
            'Letter of Credit tracking with expiry dates, amounts, and bank details.',
            'LC Tracker', 'lc-tracker-report', lc_tracker_rows
        ),
        ReportDefinition(
            'inquiry-conversion', 'Inquiry Conversion Report',
            'Inquiry to order conversion funnel with quotation details and win/loss analysis.',
            'Conversion', 'inquiry-conversion-report', inquiry_conversion_rows
        ),
    ]
}


def list_reports() -> List[Dict[str, str]]:
    """Catalogue entries for the reports page."""
    return [
        {'id': r.id, 'title': r.title, 'description': r.description, 'sheet_name': r.sheet_name}
        for r in REPORTS.values()
    ]


def generate_report(report_id: str, db, today: Optional[date] = None):
    """
    Build a catalogue report as an xlsx workbook.

    Returns:
        Tuple of (BytesIO workbook, filename)

    Raises:
        KeyError: Unknown report id
        EmptyExportError: The report has no rows
    """
    if report_id not in REPORTS:
        raise KeyError(report_id)
    report = REPORTS[report_id]
    today = today or date.today()

    rows = report.build(db, today)
    logger.info(f"Generating report {report_id} with {len(rows)} rows")
    return export_to_excel(rows, report.sheet_name), f"{report.filename}.xlsx"


# ==================== Page Exports ====================

def order_page_rows(db, today: date, search=None, status=None, currency=None) -> List[Dict[str, Any]]:
    return [
        {
            'Order Number': o.get('order_number'),
            'Customer': _customer_field(o, 'company_name'),
            'Order Date': o.get('order_date'),
            'Product': o.get('product_description'),
            'HSN Code': o.get('hsn_code') or '',
            'Quantity': o.get('quantity'),
            'Unit': o.get('unit'),
            'Unit Price': o.get('unit_price'),
            'Total Amount': o.get('total_amount'),
            'Currency': o.get('currency'),
            'Exchange Rate': o.get('exchange_rate'),
            'INR Value': o.get('inr_value') or '',
            'Delivery Terms': o.get('delivery_terms'),
            'Payment Terms': o.get('payment_terms'),
            'LC Number': o.get('lc_number') or '',
            'LC Expiry': o.get('lc_expiry_date') or '',
            'Shipping Bill': o.get('shipping_bill_number') or '',
            'GST Invoice': o.get('gst_invoice_number') or '',
            'RoDTEP Claim': o.get('rodtep_claim'),
            'RoDTEP Status': o.get('rodtep_status'),
            'Drawback Amount': o.get('drawback_amount'),
            'Status': o.get('status'),
        }
        for o in filter_orders(db.get_orders(), search=search, status=status, currency=currency)
    ]


def payment_page_rows(db, today: date, search=None, status=None, mode=None) -> List[Dict[str, Any]]:
    return [
        {
            'Payment Ref': p.get('payment_reference'),
            'Invoice #': p.get('invoice_number') or '',
            'Invoice Date': p.get('invoice_date') or '',
            'Invoice Amount': p.get('invoice_amount'),
            'Currency': p.get('invoice_currency'),
            'Due Date': p.get('payment_due_date'),
            'Received Date': p.get('payment_received_date') or '',
            'Amount Received': p.get('amount_received'),
            'Outstanding': outstanding_amount(p),
            'Overdue Days': calculate_overdue_days(p.get('payment_due_date'), today),
            'Payment Mode': p.get('payment_mode'),
            'FIRC Number': p.get('firc_number') or '',
            'FIRC Date': p.get('firc_date') or '',
            'FIRC Bank': p.get('firc_bank') or '',
            'INR Realized': p.get('inr_realized'),
            'Bank Charges': p.get('bank_charges'),
            'Status': p.get('status'),
        }
        for p in filter_payments(db.get_payments(), search=search, status=status, mode=mode)
    ]


def shipment_page_rows(db, today: date, search=None, status=None) -> List[Dict[str, Any]]:
    return [
        {
            'Shipment #': s.get('shipment_number'),
            'Shipment Date': s.get('shipment_date') or '',
            'Vessel': s.get('vessel_name') or '',
            'Voyage #': s.get('voyage_number') or '',
            'B/L Number': s.get('bl_number') or '',
            'B/L Date': s.get('bl_date') or '',
            'Container': s.get('container_number') or '',
            'Container Size': s.get('container_size'),
            'Shipping Line': s.get('shipping_line') or '',
            'Origin Port': s.get('origin_port') or '',
            'Destination Port': s.get('destination_port') or '',
            'ETD': s.get('etd') or '',
            'ETA': s.get('eta') or '',
            'Freight Amount': s.get('freight_amount'),
            'CHA Name': s.get('cha_name') or '',
            'Status': s.get('status'),
        }
        for s in filter_shipments(db.get_shipments(), search=search, status=status)
    ]


def customer_page_rows(db, today: date, search=None, country=None) -> List[Dict[str, Any]]:
    orders = db.get_orders()
    payments = db.get_payments()
    rows = []
    for c in filter_customers(db.get_customers(), search=search, country=country):
        stats = get_customer_stats(c['id'], orders, payments)
        rows.append({
            'Company': c.get('company_name'),
            'Contact': c.get('contact_person') or '',
            'Email': c.get('email') or '',
            'Phone': c.get('phone') or '',
            'Country': c.get('country'),
            'City': c.get('city') or '',
            'GST Number': c.get('gst_number') or '',
            'PAN Number': c.get('pan_number') or '',
            'IEC Code': c.get('iec_code') or '',
            'Payment Terms': c.get('payment_terms'),
            'Credit Limit': c.get('credit_limit'),
            'Total Orders': stats['order_count'],
            'Total Ordered (USD)': stats['total_ordered'],
            'Outstanding (USD)': stats['outstanding'],
            'Status': c.get('status'),
        })
    return rows


def inquiry_page_rows(db, today: date, search=None, status=None) -> List[Dict[str, Any]]:
    return [
        {
            'Inquiry #': inq.get('inquiry_number'),
            'Customer': _customer_field(inq, 'company_name'),
            'Date': inq.get('inquiry_date'),
            'Product': inq.get('product_description'),
            'Quantity': inq.get('quantity') or '',
            'Unit': inq.get('unit'),
            'Target Price': inq.get('target_price') or '',
            'Currency': inq.get('currency'),
            'Delivery Terms': inq.get('delivery_terms'),
            'Destination Port': inq.get('destination_port') or '',
            'Follow Up': inq.get('follow_up_date') or '',
            'Status': inq.get('status'),
        }
        for inq in filter_inquiries(db.get_inquiries(), search=search, status=status)
    ]


# page -> (sheet name, row builder)
PAGE_EXPORTS = {
    'orders': ('Orders', order_page_rows),
    'payments': ('Payments', payment_page_rows),
    'shipments': ('Shipments', shipment_page_rows),
    'customers': ('Customers', customer_page_rows),
    'inquiries': ('Inquiries', inquiry_page_rows),
}


def export_page(page: str, db, today: Optional[date] = None, **filters):
    """
    Export a list page with its filters applied.

    Returns:
        Tuple of (BytesIO workbook, filename)

    Raises:
        KeyError: Unknown page
        EmptyExportError: Nothing matches the filters
    """
    if page not in PAGE_EXPORTS:
        raise KeyError(page)
    sheet_name, build = PAGE_EXPORTS[page]
    today = today or date.today()

    rows = build(db, today, **filters)
    return export_to_excel(rows, sheet_name), f"{page}-{today.isoformat()}.xlsx"
