"""
Streamlit Dashboard for Export Tracker.
Order entry, receivables, shipments, customers, inquiries and reports on top of the API.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pandas as pd
import requests
import streamlit as st

# Add project to path
project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from export_tracker.core.config import get_config
from export_tracker.formatting import (
    format_currency, format_date, get_overdue_color, status_badge, badge_css
)
from export_tracker.analytics.aging import calculate_overdue_days

# Configuration
config = get_config()
API_BASE_URL = config.api_base_url
COMPANY_NAME = config.get('general', 'company_name', default='Export Tracker')
DEFAULT_RATE = config.get_float('defaults', 'exchange_rate', default=84.0)
DEFAULT_CURRENCY = config.get('defaults', 'currency', default='USD')
DEFAULT_ORIGIN = config.get('defaults', 'origin_port', default='INMUN')

ORDER_STATUSES = ['confirmed', 'in_production', 'ready_to_ship', 'shipped', 'delivered', 'completed', 'cancelled']
PAYMENT_STATUSES = ['pending', 'partial', 'received', 'overdue', 'write_off']
PAYMENT_MODES = ['LC', 'TT', 'DP', 'DA', 'advance', 'open_credit']
SHIPMENT_STATUSES = ['booked', 'loaded', 'in_transit', 'arrived', 'delivered', 'cancelled']
INQUIRY_STATUSES = ['pending', 'quoted', 'converted', 'lost', 'cancelled']
QUOTATION_STATUSES = ['draft', 'sent', 'accepted', 'rejected', 'expired', 'revised']
INCENTIVE_STATUSES = ['pending', 'applied', 'received', 'rejected']
CUSTOMER_STATUSES = ['active', 'inactive', 'blocked']
CURRENCIES = ['USD', 'EUR', 'GBP', 'AED', 'INR']
DELIVERY_TERMS = ['FOB', 'CIF', 'CFR', 'EXW', 'DDP', 'DAP']
UNITS = ['KG', 'MT', 'LTR', 'PCS', 'BAGS', 'DRUMS']
CONTAINER_SIZES = ['20ft', '40ft', '40ft HC', 'LCL']

# Page config
st.set_page_config(
    page_title="Export Tracker",
    page_icon="🚢",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS for better styling
st.markdown("""
<style>
    .stat-box {
        background: linear-gradient(135deg, #059669 0%, #0f766e 100%);
        padding: 15px;
        border-radius: 10px;
        color: white;
        text-align: center;
    }
    .stat-box h2 {
        margin: 0;
        font-size: 28px;
    }
    .stat-box p {
        margin: 5px 0 0 0;
        opacity: 0.8;
    }
    .aging-card {
        padding: 12px;
        border-radius: 8px;
        border: 1px solid #e5e7eb;
        text-align: center;
    }
</style>
""", unsafe_allow_html=True)
st.markdown(badge_css(), unsafe_allow_html=True)


def api_request(method: str, endpoint: str, **kwargs):
    """Make an API request with error handling."""
    try:
        url = f"{API_BASE_URL}{endpoint}"
        response = requests.request(method, url, timeout=60, **kwargs)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.ConnectionError:
        st.error("❌ Cannot connect to API. Make sure the server is running: `python cli.py serve`")
        return None
    except requests.exceptions.HTTPError as e:
        st.error(f"❌ API Error: {e}")
        return None


def api_download(endpoint: str, params: dict = None):
    """Fetch an xlsx download. Returns (bytes, filename) or None."""
    try:
        response = requests.get(f"{API_BASE_URL}{endpoint}", params=params, timeout=120)
    except requests.exceptions.ConnectionError:
        st.error("❌ Cannot connect to API. Make sure the server is running: `python cli.py serve`")
        return None
    if response.status_code == 404:
        st.info(response.json().get('detail', 'No data to export'))
        return None
    if not response.ok:
        st.error(f"❌ Export failed: {response.status_code}")
        return None
    disposition = response.headers.get('content-disposition', '')
    filename = disposition.split('filename=')[-1] if 'filename=' in disposition else 'export.xlsx'
    return response.content, filename


def export_button(page_name: str, params: dict):
    """'Export Excel' button for a list page."""
    if st.button("📥 Export Excel", key=f"export_{page_name}", use_container_width=True):
        result = api_download(f"/reports/export/{page_name}", params={k: v for k, v in params.items() if v})
        if result:
            data, filename = result
            st.download_button(
                "💾 Save file", data=data, file_name=filename,
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                key=f"save_{page_name}"
            )


def stat_box(value, label: str):
    st.markdown(f'<div class="stat-box"><h2>{value}</h2><p>{label}</p></div>', unsafe_allow_html=True)


def customer_name(record: dict) -> str:
    return (record.get('customer') or {}).get('company_name') or '-'


def optional_date(value):
    return value.isoformat() if value else None


def load_customers():
    return api_request("GET", "/customers") or []


# ==================== SIDEBAR ====================
st.sidebar.title("🚢 Export Tracker")
st.sidebar.caption(COMPANY_NAME)
st.sidebar.markdown("---")

health = api_request("GET", "/health")
if health:
    st.sidebar.success("✅ API Connected")
    if health['backend'] == 'demo':
        st.sidebar.warning("🧪 Demo data (Supabase not configured)")
    else:
        st.sidebar.caption("🗄️ Backend: Supabase")
else:
    st.sidebar.error("❌ API Offline")

st.sidebar.markdown("---")

page = st.sidebar.radio(
    "Navigation",
    [
        "📊 Dashboard",
        "➕ Add New Order",
        "📋 Order List",
        "💰 Payment Tracker",
        "🚢 Shipments",
        "📑 Reports",
        "👥 Customers",
        "📨 Inquiries",
    ],
    label_visibility="collapsed"
)


# ==================== DASHBOARD PAGE ====================
if page == "📊 Dashboard":
    st.title("📊 Dashboard")
    st.markdown("Overview of your export business")

    overview = api_request("GET", "/dashboard/overview")
    if overview:
        stats = overview['stats']

        col1, col2, col3, col4 = st.columns(4)
        with col1:
            stat_box(stats['total_orders'], "Total Orders")
        with col2:
            stat_box(stats['pending_payments'], "Pending Payments")
        with col3:
            stat_box(stats['overdue_payments'], "Overdue > 30 days")
        with col4:
            stat_box(stats['shipments_in_transit'], "Shipments in Transit")

        st.write("")
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("💵 This Month Revenue", format_currency(stats['this_month_revenue']))
        with col2:
            st.metric("👥 Customers", stats['total_customers'])
        with col3:
            st.metric("📨 Inquiries", stats['total_inquiries'])
        with col4:
            st.metric("🎯 Conversion Rate", f"{stats['conversion_rate']:.1f}%")

        st.markdown("---")
        left, right = st.columns(2)

        with left:
            st.subheader("🆕 Recent Orders")
            if overview['recent_orders']:
                for order in overview['recent_orders']:
                    st.markdown(
                        f"**{order['order_number']}** · {customer_name(order)} · "
                        f"{format_currency(order['total_amount'], order['currency'])} "
                        f"{status_badge(order['status'])}",
                        unsafe_allow_html=True
                    )
                    if order.get('lc_alert'):
                        alert = order['lc_alert']
                        st.markdown(f'<span class="text-{alert["color"]}">⚠️ {alert["message"]}</span>',
                                    unsafe_allow_html=True)
            else:
                st.info("No orders yet.")

        with right:
            st.subheader("⏰ Overdue Payments")
            if overview['overdue_payments']:
                for p in overview['overdue_payments']:
                    days = calculate_overdue_days(p['payment_due_date'])
                    outstanding = (p['invoice_amount'] or 0) - (p['amount_received'] or 0)
                    st.markdown(
                        f"**{p['payment_reference'] or p['invoice_number']}** · {customer_name(p)} · "
                        f"{format_currency(outstanding, p['invoice_currency'])} · "
                        f'<span class="text-{get_overdue_color(days)}">{days} days overdue</span>',
                        unsafe_allow_html=True
                    )
            else:
                st.success("No overdue payments.")

            st.subheader("🚢 In Transit")
            if overview['active_shipments']:
                for s in overview['active_shipments']:
                    st.markdown(
                        f"**{s['shipment_number']}** · {s.get('vessel_name') or '-'} → "
                        f"{s.get('destination_port') or '-'} · ETA {format_date(s.get('eta'))} "
                        f"{status_badge(s['status'])}",
                        unsafe_allow_html=True
                    )
            else:
                st.info("Nothing in transit.")


# ==================== ADD / EDIT ORDER PAGE ====================
elif page == "➕ Add New Order":
    st.title("➕ Add New Order")

    orders = api_request("GET", "/orders") or []
    customers = load_customers()

    order_options = {"New order": None}
    order_options.update({f"{o['order_number']} · {customer_name(o)}": o for o in orders})
    selected = st.selectbox("Mode", list(order_options.keys()), help="Pick an existing order to edit it")
    existing = order_options[selected] or {}
    editing = bool(existing)
    if editing:
        st.info(f"Editing order {existing['order_number']}")

    def val(key, default=None):
        value = existing.get(key)
        return default if value is None else value

    def date_val(key):
        value = existing.get(key)
        return date.fromisoformat(value[:10]) if value else None

    if not customers:
        st.warning("Add a customer first.")
    else:
        customer_ids = [c['id'] for c in customers]
        customer_labels = {c['id']: f"{c['company_name']} ({c['country']})" for c in customers}

        st.subheader("Order Details")
        c1, c2, c3 = st.columns(3)
        with c1:
            order_number = st.text_input("Order Number *", value=val('order_number', ''))
        with c2:
            customer_id = st.selectbox(
                "Customer *", customer_ids, format_func=lambda cid: customer_labels[cid],
                index=customer_ids.index(existing['customer_id']) if existing.get('customer_id') in customer_ids else 0
            )
        with c3:
            order_date = st.date_input("Order Date", value=date_val('order_date') or date.today())

        product_description = st.text_area("Product Description *", value=val('product_description', ''))

        c1, c2, c3, c4 = st.columns(4)
        with c1:
            hsn_code = st.text_input("HSN Code", value=val('hsn_code', ''))
        with c2:
            quantity = st.number_input("Quantity *", min_value=0.0, value=float(val('quantity', 0)), step=100.0)
        with c3:
            unit = st.selectbox("Unit", UNITS, index=UNITS.index(val('unit', 'KG')) if val('unit', 'KG') in UNITS else 0)
        with c4:
            unit_price = st.number_input("Unit Price *", min_value=0.0, value=float(val('unit_price', 0)),
                                         step=0.01, format="%.4f")

        c1, c2, c3, c4 = st.columns(4)
        with c1:
            currency_value = val('currency', DEFAULT_CURRENCY)
            currency = st.selectbox("Currency", CURRENCIES,
                                    index=CURRENCIES.index(currency_value) if currency_value in CURRENCIES else 0)
        with c2:
            exchange_rate = st.number_input("Exchange Rate (INR)", min_value=0.01,
                                            value=float(val('exchange_rate', DEFAULT_RATE)), step=0.01)
        with c3:
            terms_value = val('delivery_terms', 'FOB')
            delivery_terms = st.selectbox("Delivery Terms", DELIVERY_TERMS,
                                          index=DELIVERY_TERMS.index(terms_value) if terms_value in DELIVERY_TERMS else 0)
        with c4:
            payment_terms = st.text_input("Payment Terms", value=val('payment_terms', '30 days LC'))

        # Live totals
        total_amount = round(quantity * unit_price, 2)
        inr_value = round(total_amount * exchange_rate, 2)
        t1, t2 = st.columns(2)
        with t1:
            st.metric("Total Amount", format_currency(total_amount, currency))
        with t2:
            st.metric("INR Value", format_currency(inr_value, 'INR'))

        with st.expander("🏦 Letter of Credit", expanded=bool(existing.get('lc_number'))):
            c1, c2, c3 = st.columns(3)
            with c1:
                lc_number = st.text_input("LC Number", value=val('lc_number', ''))
                lc_bank = st.text_input("LC Bank", value=val('lc_bank', ''))
            with c2:
                lc_date = st.date_input("LC Date", value=date_val('lc_date'))
                lc_amount = st.number_input("LC Amount", min_value=0.0, value=float(val('lc_amount', 0)))
            with c3:
                lc_expiry_date = st.date_input("LC Expiry Date", value=date_val('lc_expiry_date'))

        with st.expander("🚢 Shipping & Compliance", expanded=editing):
            c1, c2, c3 = st.columns(3)
            with c1:
                origin_port = st.text_input("Origin Port", value=val('origin_port', DEFAULT_ORIGIN))
                destination_port = st.text_input("Destination Port", value=val('destination_port', ''))
            with c2:
                shipping_bill_number = st.text_input("Shipping Bill Number", value=val('shipping_bill_number', ''))
                shipping_bill_date = st.date_input("Shipping Bill Date", value=date_val('shipping_bill_date'))
            with c3:
                gst_invoice_number = st.text_input("GST Invoice Number", value=val('gst_invoice_number', ''))
                gst_invoice_date = st.date_input("GST Invoice Date", value=date_val('gst_invoice_date'))
            c1, c2 = st.columns(2)
            with c1:
                gst_amount = st.number_input("GST Amount", min_value=0.0, value=float(val('gst_amount', 0)))
            with c2:
                igst_amount = st.number_input("IGST Amount", min_value=0.0, value=float(val('igst_amount', 0)))

        with st.expander("🎁 Export Incentives", expanded=editing):
            c1, c2, c3, c4 = st.columns(4)
            with c1:
                rodtep_claim = st.number_input("RoDTEP Claim", min_value=0.0, value=float(val('rodtep_claim', 0)))
            with c2:
                rodtep_status = st.selectbox("RoDTEP Status", INCENTIVE_STATUSES,
                                             index=INCENTIVE_STATUSES.index(val('rodtep_status', 'pending')))
            with c3:
                drawback_amount = st.number_input("Drawback Amount", min_value=0.0,
                                                  value=float(val('drawback_amount', 0)))
            with c4:
                drawback_status = st.selectbox("Drawback Status", INCENTIVE_STATUSES,
                                               index=INCENTIVE_STATUSES.index(val('drawback_status', 'pending')))

        c1, c2 = st.columns([1, 3])
        with c1:
            status = st.selectbox("Status", ORDER_STATUSES, index=ORDER_STATUSES.index(val('status', 'confirmed')))
        with c2:
            remarks = st.text_input("Remarks", value=val('remarks', ''))

        if st.button("💾 Update Order" if editing else "💾 Save Order", type="primary"):
            if not order_number or not product_description or quantity <= 0:
                st.error("Order number, product description and a positive quantity are required.")
            else:
                payload = {
                    'order_number': order_number,
                    'customer_id': customer_id,
                    'order_date': order_date.isoformat(),
                    'product_description': product_description,
                    'hsn_code': hsn_code or None,
                    'quantity': quantity,
                    'unit': unit,
                    'unit_price': unit_price,
                    'currency': currency,
                    'exchange_rate': exchange_rate,
                    'delivery_terms': delivery_terms,
                    'payment_terms': payment_terms,
                    'lc_number': lc_number or None,
                    'lc_date': optional_date(lc_date),
                    'lc_expiry_date': optional_date(lc_expiry_date),
                    'lc_amount': lc_amount or None,
                    'lc_bank': lc_bank or None,
                    'origin_port': origin_port,
                    'destination_port': destination_port or None,
                    'shipping_bill_number': shipping_bill_number or None,
                    'shipping_bill_date': optional_date(shipping_bill_date),
                    'gst_invoice_number': gst_invoice_number or None,
                    'gst_invoice_date': optional_date(gst_invoice_date),
                    'gst_amount': gst_amount,
                    'igst_amount': igst_amount,
                    'rodtep_claim': rodtep_claim,
                    'rodtep_status': rodtep_status,
                    'drawback_amount': drawback_amount,
                    'drawback_status': drawback_status,
                    'remarks': remarks or None,
                    'status': status,
                }
                if editing:
                    result = api_request("PUT", f"/orders/{existing['id']}", json=payload)
                else:
                    result = api_request("POST", "/orders", json=payload)
                if result:
                    st.success(f"Order {result['order_number']} saved · "
                               f"{format_currency(result['total_amount'], result['currency'])}")


# ==================== ORDER LIST PAGE ====================
elif page == "📋 Order List":
    st.title("📋 Order List")

    col1, col2, col3, col4 = st.columns([2, 1, 1, 1])
    with col1:
        search = st.text_input("🔍 Search", placeholder="Order #, product or customer")
    with col2:
        status_filter = st.selectbox("Status", ["all"] + ORDER_STATUSES)
    with col3:
        currency_filter = st.selectbox("Currency", ["all"] + CURRENCIES)
    with col4:
        st.write("")
        filters = {'search': search, 'status': status_filter, 'currency': currency_filter}
        export_button("orders", filters)

    orders = api_request("GET", "/orders", params={k: v for k, v in filters.items() if v}) or []
    st.caption(f"{len(orders)} orders")

    if orders:
        df = pd.DataFrame([
            {
                'Order #': o['order_number'],
                'Customer': customer_name(o),
                'Date': format_date(o['order_date']),
                'Product': o['product_description'],
                'Qty': f"{o['quantity']:,.0f} {o['unit']}",
                'Total': format_currency(o['total_amount'], o['currency']),
                'INR Value': format_currency(o['inr_value'], 'INR'),
                'LC Alert': o['lc_alert']['message'] if o.get('lc_alert') else '',
                'Status': o['status'],
            }
            for o in orders
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)
    else:
        st.info("No orders match the filters.")


# ==================== PAYMENT TRACKER PAGE ====================
elif page == "💰 Payment Tracker":
    st.title("💰 Payment Tracker")
    st.markdown("Monitor receivables and aging analysis")

    summary = api_request("GET", "/payments/summary")
    if summary:
        col1, col2, col3, col4 = st.columns(4)
        with col1:
            st.metric("Total Invoiced", format_currency(summary['total_invoiced']))
        with col2:
            st.metric("Total Received", format_currency(summary['total_received']))
        with col3:
            st.metric("Outstanding", format_currency(summary['total_outstanding']))
        with col4:
            st.metric("Overdue", format_currency(summary['total_overdue']))

    aging = api_request("GET", "/payments/aging")
    if aging:
        st.subheader("📆 Aging Analysis")
        bucket_colors = ['green', 'yellow', 'orange', 'red']
        for column, bucket, color in zip(st.columns(4), aging, bucket_colors):
            with column:
                st.markdown(
                    f'<div class="aging-card"><span class="text-{color}">{bucket["label"]}</span>'
                    f'<h3>{format_currency(bucket["total_amount"])}</h3>'
                    f'<p>{bucket["count"]} invoices</p></div>',
                    unsafe_allow_html=True
                )

    st.markdown("---")
    col1, col2, col3, col4 = st.columns([2, 1, 1, 1])
    with col1:
        search = st.text_input("🔍 Search", placeholder="Reference, invoice or customer")
    with col2:
        status_filter = st.selectbox("Status", ["all"] + PAYMENT_STATUSES)
    with col3:
        mode_filter = st.selectbox("Mode", ["all"] + PAYMENT_MODES)
    with col4:
        st.write("")
        filters = {'search': search, 'status': status_filter, 'mode': mode_filter}
        export_button("payments", filters)

    payments = api_request("GET", "/payments", params={k: v for k, v in filters.items() if v}) or []
    if payments:
        df = pd.DataFrame([
            {
                'Reference': p['payment_reference'] or '-',
                'Customer': customer_name(p),
                'Invoice #': p['invoice_number'] or '-',
                'Invoice Amount': format_currency(p['invoice_amount'], p['invoice_currency']),
                'Received': format_currency(p['amount_received'], p['invoice_currency']),
                'Outstanding': format_currency((p['invoice_amount'] or 0) - (p['amount_received'] or 0),
                                               p['invoice_currency']),
                'Due Date': format_date(p['payment_due_date']),
                'Overdue Days': calculate_overdue_days(p['payment_due_date']) if p['status'] != 'received' else 0,
                'Mode': p['payment_mode'],
                'FIRC': p['firc_number'] or '-',
                'Status': p['status'],
            }
            for p in payments
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)
    else:
        st.info("No payments match the filters.")

    with st.expander("➕ Record Payment"):
        orders = api_request("GET", "/orders") or []
        if not orders:
            st.info("Create an order first.")
        else:
            order_labels = {o['id']: f"{o['order_number']} · {customer_name(o)}" for o in orders}
            with st.form("payment_form", clear_on_submit=True):
                c1, c2, c3 = st.columns(3)
                with c1:
                    order_id = st.selectbox("Order *", list(order_labels), format_func=lambda oid: order_labels[oid])
                    payment_reference = st.text_input("Payment Reference")
                    invoice_number = st.text_input("Invoice Number")
                    invoice_date = st.date_input("Invoice Date", value=None)
                with c2:
                    invoice_amount = st.number_input("Invoice Amount *", min_value=0.0)
                    invoice_currency = st.selectbox("Currency", CURRENCIES)
                    payment_due_date = st.date_input("Due Date *", value=date.today())
                    payment_mode = st.selectbox("Payment Mode", PAYMENT_MODES, index=1)
                with c3:
                    amount_received = st.number_input("Amount Received", min_value=0.0)
                    payment_received_date = st.date_input("Received Date", value=None)
                    inr_realized = st.number_input("INR Realized", min_value=0.0)
                    bank_charges = st.number_input("Bank Charges", min_value=0.0)
                c1, c2, c3, c4 = st.columns(4)
                with c1:
                    firc_number = st.text_input("FIRC Number")
                with c2:
                    firc_date = st.date_input("FIRC Date", value=None)
                with c3:
                    firc_bank = st.text_input("FIRC Bank")
                with c4:
                    status = st.selectbox("Status", PAYMENT_STATUSES)

                if st.form_submit_button("💾 Save Payment", type="primary"):
                    result = api_request("POST", "/payments", json={
                        'order_id': order_id,
                        'payment_reference': payment_reference or None,
                        'invoice_number': invoice_number or None,
                        'invoice_date': optional_date(invoice_date),
                        'invoice_amount': invoice_amount,
                        'invoice_currency': invoice_currency,
                        'payment_due_date': payment_due_date.isoformat(),
                        'payment_received_date': optional_date(payment_received_date),
                        'amount_received': amount_received,
                        'inr_realized': inr_realized,
                        'bank_charges': bank_charges,
                        'firc_number': firc_number or None,
                        'firc_date': optional_date(firc_date),
                        'firc_bank': firc_bank or None,
                        'payment_mode': payment_mode,
                        'status': status,
                    })
                    if result:
                        st.success("Payment recorded.")
                        st.rerun()


# ==================== SHIPMENTS PAGE ====================
elif page == "🚢 Shipments":
    st.title("🚢 Shipments")
    st.markdown("Track your export dispatches")

    counts = api_request("GET", "/shipments/status-counts")
    if counts:
        for column, status in zip(st.columns(len(SHIPMENT_STATUSES)), SHIPMENT_STATUSES):
            with column:
                st.metric(status.replace('_', ' ').title(), counts.get(status, 0))

    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        search = st.text_input("🔍 Search", placeholder="Shipment #, vessel, B/L or container")
    with col2:
        status_filter = st.selectbox("Status", ["all"] + SHIPMENT_STATUSES)
    with col3:
        st.write("")
        filters = {'search': search, 'status': status_filter}
        export_button("shipments", filters)

    shipments = api_request("GET", "/shipments", params={k: v for k, v in filters.items() if v}) or []
    if shipments:
        df = pd.DataFrame([
            {
                'Shipment #': s['shipment_number'],
                'Order #': (s.get('order') or {}).get('order_number', '-'),
                'Customer': customer_name(s),
                'Vessel': s.get('vessel_name') or '-',
                'B/L #': s.get('bl_number') or '-',
                'Container': f"{s.get('container_number') or '-'} ({s.get('container_size')})",
                'Route': f"{s.get('origin_port') or '-'} → {s.get('destination_port') or '-'}",
                'ETD': format_date(s.get('etd')),
                'ETA': format_date(s.get('eta')),
                'Status': s['status'],
            }
            for s in shipments
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)
    else:
        st.info("No shipments match the filters.")

    with st.expander("➕ Add Shipment"):
        orders = api_request("GET", "/orders") or []
        if not orders:
            st.info("Create an order first.")
        else:
            order_labels = {o['id']: f"{o['order_number']} · {customer_name(o)}" for o in orders}
            with st.form("shipment_form", clear_on_submit=True):
                c1, c2, c3 = st.columns(3)
                with c1:
                    shipment_number = st.text_input("Shipment Number *")
                    order_id = st.selectbox("Order *", list(order_labels), format_func=lambda oid: order_labels[oid])
                    shipment_date = st.date_input("Shipment Date", value=date.today())
                    shipping_line = st.text_input("Shipping Line")
                with c2:
                    vessel_name = st.text_input("Vessel Name")
                    voyage_number = st.text_input("Voyage Number")
                    bl_number = st.text_input("B/L Number")
                    bl_date = st.date_input("B/L Date", value=None)
                with c3:
                    container_number = st.text_input("Container Number")
                    container_size = st.selectbox("Container Size", CONTAINER_SIZES)
                    etd = st.date_input("ETD", value=None)
                    eta = st.date_input("ETA", value=None)
                c1, c2, c3, c4 = st.columns(4)
                with c1:
                    freight_amount = st.number_input("Freight Amount", min_value=0.0)
                with c2:
                    insurance_amount = st.number_input("Insurance Amount", min_value=0.0)
                with c3:
                    cha_name = st.text_input("CHA Name")
                with c4:
                    status = st.selectbox("Status", SHIPMENT_STATUSES)
                st.caption("Customer and ports are taken from the order.")

                if st.form_submit_button("💾 Save Shipment", type="primary"):
                    if not shipment_number:
                        st.error("Shipment number is required.")
                    else:
                        result = api_request("POST", "/shipments", json={
                            'shipment_number': shipment_number,
                            'order_id': order_id,
                            'shipment_date': optional_date(shipment_date),
                            'etd': optional_date(etd),
                            'eta': optional_date(eta),
                            'vessel_name': vessel_name or None,
                            'voyage_number': voyage_number or None,
                            'bl_number': bl_number or None,
                            'bl_date': optional_date(bl_date),
                            'container_number': container_number or None,
                            'container_size': container_size,
                            'shipping_line': shipping_line or None,
                            'freight_amount': freight_amount,
                            'insurance_amount': insurance_amount,
                            'cha_name': cha_name or None,
                            'status': status,
                        })
                        if result:
                            st.success(f"Shipment {result['shipment_number']} booked.")
                            st.rerun()


# ==================== REPORTS PAGE ====================
elif page == "📑 Reports":
    st.title("📑 Reports")
    st.markdown("Generate and export business reports")

    reports = api_request("GET", "/reports") or []
    columns = st.columns(3)
    for idx, report in enumerate(reports):
        with columns[idx % 3]:
            with st.container(border=True):
                st.markdown(f"**{report['title']}**")
                st.caption(report['description'])
                if st.button("⚙️ Generate", key=f"gen_{report['id']}", use_container_width=True):
                    with st.spinner("Generating..."):
                        result = api_download(f"/reports/{report['id']}")
                    if result:
                        data, filename = result
                        st.download_button(
                            "💾 Download", data=data, file_name=filename,
                            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                            key=f"dl_{report['id']}", use_container_width=True
                        )


# ==================== CUSTOMERS PAGE ====================
elif page == "👥 Customers":
    st.title("👥 Customers")

    all_customers = load_customers()
    countries = sorted({c['country'] for c in all_customers if c.get('country')})

    col1, col2, col3 = st.columns([2, 1, 1])
    with col1:
        search = st.text_input("🔍 Search", placeholder="Company, contact, email or country")
    with col2:
        country_filter = st.selectbox("Country", ["all"] + countries)
    with col3:
        st.write("")
        filters = {'search': search, 'country': country_filter}
        export_button("customers", filters)

    customers = api_request("GET", "/customers", params={k: v for k, v in filters.items() if v}) or []
    if customers:
        df = pd.DataFrame([
            {
                'Company': c['company_name'],
                'Contact': c.get('contact_person') or '-',
                'Email': c.get('email') or '-',
                'Country': c['country'],
                'City': c.get('city') or '-',
                'Payment Terms': c.get('payment_terms') or '-',
                'Credit Limit': format_currency(c.get('credit_limit')),
                'Status': c['status'],
            }
            for c in customers
        ])
        st.dataframe(df, use_container_width=True, hide_index=True)

        st.subheader("📈 Customer Stats")
        labels = {c['id']: c['company_name'] for c in customers}
        selected_id = st.selectbox("Customer", list(labels), format_func=lambda cid: labels[cid])
        stats = api_request("GET", f"/customers/{selected_id}/stats")
        if stats:
            c1, c2, c3, c4 = st.columns(4)
            with c1:
                st.metric("Orders", stats['order_count'])
            with c2:
                st.metric("Total Ordered", format_currency(stats['total_ordered']))
            with c3:
                st.metric("Received", format_currency(stats['total_received']))
            with c4:
                st.metric("Outstanding", format_currency(stats['outstanding']))
    else:
        st.info("No customers match the filters.")

    with st.expander("➕ Add Customer"):
        with st.form("customer_form", clear_on_submit=True):
            c1, c2, c3 = st.columns(3)
            with c1:
                company_name = st.text_input("Company Name *")
                contact_person = st.text_input("Contact Person")
                email = st.text_input("Email")
                phone = st.text_input("Phone")
            with c2:
                country = st.text_input("Country *")
                city = st.text_input("City")
                address = st.text_area("Address")
            with c3:
                gst_number = st.text_input("GST Number")
                pan_number = st.text_input("PAN Number")
                iec_code = st.text_input("IEC Code")
            c1, c2, c3 = st.columns(3)
            with c1:
                payment_terms = st.text_input("Payment Terms", value="30 days")
            with c2:
                credit_limit = st.number_input("Credit Limit", min_value=0.0)
            with c3:
                status = st.selectbox("Status", CUSTOMER_STATUSES)
            notes = st.text_input("Notes")

            if st.form_submit_button("💾 Save Customer", type="primary"):
                if not company_name or not country:
                    st.error("Company name and country are required")
                else:
                    result = api_request("POST", "/customers", json={
                        'company_name': company_name,
                        'contact_person': contact_person or None,
                        'email': email or None,
                        'phone': phone or None,
                        'country': country,
                        'city': city or None,
                        'address': address or None,
                        'gst_number': gst_number or None,
                        'pan_number': pan_number or None,
                        'iec_code': iec_code or None,
                        'payment_terms': payment_terms,
                        'credit_limit': credit_limit,
                        'notes': notes or None,
                        'status': status,
                    })
                    if result:
                        st.success(f"{result['company_name']} has been added.")
                        st.rerun()


# ==================== INQUIRIES PAGE ====================
elif page == "📨 Inquiries":
    st.title("📨 Inquiries & Quotations")

    counts = api_request("GET", "/inquiries/status-counts")
    if counts:
        for column, status in zip(st.columns(len(INQUIRY_STATUSES)), INQUIRY_STATUSES):
            with column:
                st.metric(status.title(), counts.get(status, 0))

    tab_inquiries, tab_quotations = st.tabs(["📨 Inquiries", "📝 Quotations"])
    customers = load_customers()
    customer_labels = {c['id']: c['company_name'] for c in customers}

    with tab_inquiries:
        col1, col2, col3 = st.columns([2, 1, 1])
        with col1:
            search = st.text_input("🔍 Search", placeholder="Inquiry #, product or customer")
        with col2:
            status_filter = st.selectbox("Status", ["all"] + INQUIRY_STATUSES)
        with col3:
            st.write("")
            filters = {'search': search, 'status': status_filter}
            export_button("inquiries", filters)

        inquiries = api_request("GET", "/inquiries", params={k: v for k, v in filters.items() if v}) or []
        if inquiries:
            df = pd.DataFrame([
                {
                    'Inquiry #': i['inquiry_number'],
                    'Customer': customer_name(i),
                    'Date': format_date(i.get('inquiry_date')),
                    'Product': i['product_description'],
                    'Quantity': f"{i['quantity']:,.0f} {i['unit']}" if i.get('quantity') else '-',
                    'Target Price': format_currency(i.get('target_price'), i.get('currency') or 'USD'),
                    'Follow Up': format_date(i.get('follow_up_date')),
                    'Status': i['status'],
                }
                for i in inquiries
            ])
            st.dataframe(df, use_container_width=True, hide_index=True)
        else:
            st.info("No inquiries match the filters.")

        with st.expander("➕ Add Inquiry"):
            with st.form("inquiry_form", clear_on_submit=True):
                c1, c2, c3 = st.columns(3)
                with c1:
                    inquiry_number = st.text_input("Inquiry Number *")
                    customer_id = st.selectbox("Customer", [None] + list(customer_labels),
                                               format_func=lambda cid: customer_labels.get(cid, '-'))
                    inquiry_date = st.date_input("Inquiry Date", value=date.today())
                with c2:
                    product_description = st.text_input("Product *")
                    quantity = st.number_input("Quantity", min_value=0.0)
                    unit = st.selectbox("Unit", UNITS)
                with c3:
                    target_price = st.number_input("Target Price", min_value=0.0, format="%.4f")
                    currency = st.selectbox("Currency", CURRENCIES)
                    follow_up_date = st.date_input("Follow Up", value=None)
                destination_port = st.text_input("Destination Port")
                remarks = st.text_input("Remarks")

                if st.form_submit_button("💾 Save Inquiry", type="primary"):
                    if not inquiry_number or not product_description:
                        st.error("Inquiry number and product are required.")
                    else:
                        result = api_request("POST", "/inquiries", json={
                            'inquiry_number': inquiry_number,
                            'customer_id': customer_id,
                            'inquiry_date': optional_date(inquiry_date),
                            'product_description': product_description,
                            'quantity': quantity or None,
                            'unit': unit,
                            'target_price': target_price or None,
                            'currency': currency,
                            'destination_port': destination_port or None,
                            'remarks': remarks or None,
                            'follow_up_date': optional_date(follow_up_date),
                        })
                        if result:
                            st.success("Inquiry logged.")
                            st.rerun()

    with tab_quotations:
        quotations = api_request("GET", "/quotations") or []
        if quotations:
            df = pd.DataFrame([
                {
                    'Quotation #': q['quotation_number'],
                    'Inquiry #': (q.get('inquiry') or {}).get('inquiry_number', '-'),
                    'Customer': customer_name(q),
                    'Date': format_date(q.get('quotation_date')),
                    'Valid Until': format_date(q.get('valid_until')),
                    'Product': q['product_description'],
                    'Unit Price': format_currency(q.get('unit_price'), q.get('currency') or 'USD'),
                    'Total': format_currency(q.get('total_amount'), q.get('currency') or 'USD'),
                    'Status': q['status'],
                }
                for q in quotations
            ])
            st.dataframe(df, use_container_width=True, hide_index=True)
        else:
            st.info("No quotations yet.")

        with st.expander("➕ Add Quotation"):
            all_inquiries = api_request("GET", "/inquiries") or []
            inquiry_labels = {i['id']: f"{i['inquiry_number']} · {i['product_description']}" for i in all_inquiries}
            with st.form("quotation_form", clear_on_submit=True):
                c1, c2, c3 = st.columns(3)
                with c1:
                    quotation_number = st.text_input("Quotation Number *")
                    inquiry_id = st.selectbox("Inquiry", [None] + list(inquiry_labels),
                                              format_func=lambda iid: inquiry_labels.get(iid, '-'))
                    customer_id = st.selectbox("Customer", [None] + list(customer_labels),
                                               format_func=lambda cid: customer_labels.get(cid, '-'),
                                               key="quotation_customer")
                with c2:
                    product_description = st.text_input("Product *", key="quotation_product")
                    quantity = st.number_input("Quantity", min_value=0.0, key="quotation_quantity")
                    unit_price = st.number_input("Unit Price *", min_value=0.0, format="%.4f")
                with c3:
                    quotation_date = st.date_input("Quotation Date", value=date.today())
                    valid_until = st.date_input("Valid Until", value=None)
                    status = st.selectbox("Status", QUOTATION_STATUSES)

                if st.form_submit_button("💾 Save Quotation", type="primary"):
                    if not quotation_number or not product_description:
                        st.error("Quotation number and product are required.")
                    else:
                        result = api_request("POST", "/quotations", json={
                            'quotation_number': quotation_number,
                            'inquiry_id': inquiry_id,
                            'customer_id': customer_id,
                            'quotation_date': optional_date(quotation_date),
                            'valid_until': optional_date(valid_until),
                            'product_description': product_description,
                            'quantity': quantity or None,
                            'unit_price': unit_price,
                            'status': status,
                        })
                        if result:
                            st.success(f"Quotation {result['quotation_number']} saved.")
                            st.rerun()


# Footer
st.sidebar.markdown("---")
st.sidebar.caption("Export Tracker v1.0")
st.sidebar.caption(f"🕐 {datetime.now().strftime('%H:%M:%S')}")
