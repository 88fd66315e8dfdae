"""
Pydantic schemas for API request/response validation.

Request dates are ISO dates (YYYY-MM-DD); stored records carry them as strings.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict, Any, Literal
from datetime import date


CustomerStatus = Literal['active', 'inactive', 'blocked']
InquiryStatus = Literal['pending', 'quoted', 'converted', 'lost', 'cancelled']
QuotationStatus = Literal['draft', 'sent', 'accepted', 'rejected', 'expired', 'revised']
OrderStatus = Literal[
    'confirmed', 'in_production', 'ready_to_ship', 'shipped', 'delivered', 'completed', 'cancelled'
]
IncentiveStatus = Literal['pending', 'applied', 'received', 'rejected']
ShipmentStatus = Literal['booked', 'loaded', 'in_transit', 'arrived', 'delivered', 'cancelled']
PaymentStatus = Literal['pending', 'partial', 'received', 'overdue', 'write_off']
PaymentMode = Literal['LC', 'TT', 'DP', 'DA', 'advance', 'open_credit']


def reject_null(value):
    """Required fields may be left out of an update but never cleared."""
    if value is None:
        raise ValueError("field cannot be null")
    return value


class RecordMeta(BaseModel):
    """Fields every stored record carries."""
    id: str
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


# ==================== Customer Schemas ====================

class CustomerBase(BaseModel):
    company_name: str = Field(min_length=1)
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: str = Field(min_length=1)
    city: Optional[str] = None
    address: Optional[str] = None
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    iec_code: Optional[str] = None
    payment_terms: Optional[str] = "30 days"
    credit_limit: float = 0
    notes: Optional[str] = None
    status: CustomerStatus = 'active'


class CustomerCreate(CustomerBase):
    """Request to add a customer."""


class CustomerUpdate(BaseModel):
    """Partial customer update; only sent fields are written."""
    company_name: Optional[str] = Field(default=None, min_length=1)
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = Field(default=None, min_length=1)
    city: Optional[str] = None
    address: Optional[str] = None
    gst_number: Optional[str] = None
    pan_number: Optional[str] = None
    iec_code: Optional[str] = None
    payment_terms: Optional[str] = None
    credit_limit: Optional[float] = None
    notes: Optional[str] = None
    status: Optional[CustomerStatus] = None

    @field_validator('company_name', 'country', 'credit_limit', 'status')
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class Customer(CustomerBase, RecordMeta):
    """Stored customer."""
    payment_terms: Optional[str] = None
    credit_limit: Optional[float] = None


class CustomerStats(BaseModel):
    """Per-customer order and payment totals."""
    customer_id: str
    order_count: int
    total_ordered: float
    total_invoiced: float
    total_received: float
    outstanding: float


# ==================== Inquiry Schemas ====================

class InquiryCreate(BaseModel):
    """Request to log an inquiry."""
    inquiry_number: str = Field(min_length=1)
    customer_id: Optional[str] = None
    inquiry_date: Optional[date] = None
    product_description: str = Field(min_length=1)
    quantity: Optional[float] = None
    unit: str = "KG"
    target_price: Optional[float] = None
    currency: str = "USD"
    delivery_terms: str = "FOB"
    destination_port: Optional[str] = None
    remarks: Optional[str] = None
    status: InquiryStatus = 'pending'
    follow_up_date: Optional[date] = None


class InquiryUpdate(BaseModel):
    inquiry_number: Optional[str] = Field(default=None, min_length=1)
    customer_id: Optional[str] = None
    inquiry_date: Optional[date] = None
    product_description: Optional[str] = Field(default=None, min_length=1)
    quantity: Optional[float] = None
    unit: Optional[str] = None
    target_price: Optional[float] = None
    currency: Optional[str] = None
    delivery_terms: Optional[str] = None
    destination_port: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[InquiryStatus] = None
    follow_up_date: Optional[date] = None

    @field_validator('inquiry_number', 'product_description', 'status')
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class Inquiry(RecordMeta):
    """Stored inquiry with its customer."""
    inquiry_number: Optional[str] = None
    customer_id: Optional[str] = None
    inquiry_date: Optional[str] = None
    product_description: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    target_price: Optional[float] = None
    currency: Optional[str] = None
    delivery_terms: Optional[str] = None
    destination_port: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[str] = None
    follow_up_date: Optional[str] = None
    customer: Optional[Customer] = None


# ==================== Quotation Schemas ====================

class QuotationCreate(BaseModel):
    """Request to issue a quotation. total_amount is derived when omitted."""
    quotation_number: str = Field(min_length=1)
    inquiry_id: Optional[str] = None
    customer_id: Optional[str] = None
    quotation_date: Optional[date] = None
    valid_until: Optional[date] = None
    product_description: str = Field(min_length=1)
    hsn_code: Optional[str] = None
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: str = "KG"
    unit_price: float = Field(ge=0)
    total_amount: Optional[float] = None
    currency: str = "USD"
    delivery_terms: str = "FOB"
    payment_terms: Optional[str] = None
    destination_port: Optional[str] = None
    remarks: Optional[str] = None
    status: QuotationStatus = 'draft'


class QuotationUpdate(BaseModel):
    quotation_number: Optional[str] = Field(default=None, min_length=1)
    inquiry_id: Optional[str] = None
    customer_id: Optional[str] = None
    quotation_date: Optional[date] = None
    valid_until: Optional[date] = None
    product_description: Optional[str] = Field(default=None, min_length=1)
    hsn_code: Optional[str] = None
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = None
    unit_price: Optional[float] = Field(default=None, ge=0)
    total_amount: Optional[float] = None
    currency: Optional[str] = None
    delivery_terms: Optional[str] = None
    payment_terms: Optional[str] = None
    destination_port: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[QuotationStatus] = None

    @field_validator('quotation_number', 'product_description', 'unit_price', 'status')
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class Quotation(RecordMeta):
    quotation_number: Optional[str] = None
    inquiry_id: Optional[str] = None
    customer_id: Optional[str] = None
    quotation_date: Optional[str] = None
    valid_until: Optional[str] = None
    product_description: Optional[str] = None
    hsn_code: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    unit_price: Optional[float] = None
    total_amount: Optional[float] = None
    currency: Optional[str] = None
    delivery_terms: Optional[str] = None
    payment_terms: Optional[str] = None
    destination_port: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[str] = None
    customer: Optional[Customer] = None
    inquiry: Optional[Dict[str, Any]] = None


# ==================== Order Schemas ====================

class OrderCreate(BaseModel):
    """
    Request to record a confirmed order.
    total_amount and inr_value are always derived from quantity, unit_price and exchange_rate.
    """
    order_number: str = Field(min_length=1)
    quotation_id: Optional[str] = None
    customer_id: str = Field(min_length=1)
    order_date: Optional[date] = None
    product_description: str = Field(min_length=1)
    hsn_code: Optional[str] = None
    quantity: float = Field(gt=0)
    unit: str = "KG"
    unit_price: float = Field(ge=0)
    currency: str = "USD"
    exchange_rate: float = Field(default=84.0, gt=0)
    delivery_terms: str = "FOB"
    payment_terms: str = "30 days LC"
    lc_number: Optional[str] = None
    lc_date: Optional[date] = None
    lc_expiry_date: Optional[date] = None
    lc_amount: Optional[float] = None
    lc_bank: Optional[str] = None
    destination_port: Optional[str] = None
    origin_port: str = "INMUN"
    shipping_bill_number: Optional[str] = None
    shipping_bill_date: Optional[date] = None
    gst_invoice_number: Optional[str] = None
    gst_invoice_date: Optional[date] = None
    gst_amount: float = 0
    igst_amount: float = 0
    rodtep_claim: float = 0
    rodtep_status: IncentiveStatus = 'pending'
    drawback_amount: float = 0
    drawback_status: IncentiveStatus = 'pending'
    remarks: Optional[str] = None
    status: OrderStatus = 'confirmed'


class OrderUpdate(BaseModel):
    """Partial order update (the edit mode of the order form)."""
    order_number: Optional[str] = Field(default=None, min_length=1)
    quotation_id: Optional[str] = None
    customer_id: Optional[str] = Field(default=None, min_length=1)
    order_date: Optional[date] = None
    product_description: Optional[str] = Field(default=None, min_length=1)
    hsn_code: Optional[str] = None
    quantity: Optional[float] = Field(default=None, gt=0)
    unit: Optional[str] = None
    unit_price: Optional[float] = Field(default=None, ge=0)
    currency: Optional[str] = None
    exchange_rate: Optional[float] = Field(default=None, gt=0)
    delivery_terms: Optional[str] = None
    payment_terms: Optional[str] = None
    lc_number: Optional[str] = None
    lc_date: Optional[date] = None
    lc_expiry_date: Optional[date] = None
    lc_amount: Optional[float] = None
    lc_bank: Optional[str] = None
    destination_port: Optional[str] = None
    origin_port: Optional[str] = None
    shipping_bill_number: Optional[str] = None
    shipping_bill_date: Optional[date] = None
    gst_invoice_number: Optional[str] = None
    gst_invoice_date: Optional[date] = None
    gst_amount: Optional[float] = None
    igst_amount: Optional[float] = None
    rodtep_claim: Optional[float] = None
    rodtep_status: Optional[IncentiveStatus] = None
    drawback_amount: Optional[float] = None
    drawback_status: Optional[IncentiveStatus] = None
    remarks: Optional[str] = None
    status: Optional[OrderStatus] = None

    @field_validator(
        'order_number', 'customer_id', 'product_description', 'quantity', 'unit',
        'unit_price', 'currency', 'exchange_rate', 'status'
    )
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class LcAlert(BaseModel):
    """LC expiry warning shown next to an order."""
    color: Literal['red', 'orange', 'yellow']
    message: str
    days: int


class Order(RecordMeta):
    """Stored order with its customer and LC alert."""
    order_number: Optional[str] = None
    quotation_id: Optional[str] = None
    customer_id: Optional[str] = None
    order_date: Optional[str] = None
    product_description: Optional[str] = None
    hsn_code: Optional[str] = None
    quantity: Optional[float] = None
    unit: Optional[str] = None
    unit_price: Optional[float] = None
    total_amount: Optional[float] = None
    currency: Optional[str] = None
    exchange_rate: Optional[float] = None
    inr_value: Optional[float] = None
    delivery_terms: Optional[str] = None
    payment_terms: Optional[str] = None
    lc_number: Optional[str] = None
    lc_date: Optional[str] = None
    lc_expiry_date: Optional[str] = None
    lc_amount: Optional[float] = None
    lc_bank: Optional[str] = None
    destination_port: Optional[str] = None
    origin_port: Optional[str] = None
    shipping_bill_number: Optional[str] = None
    shipping_bill_date: Optional[str] = None
    gst_invoice_number: Optional[str] = None
    gst_invoice_date: Optional[str] = None
    gst_amount: Optional[float] = None
    igst_amount: Optional[float] = None
    rodtep_claim: Optional[float] = None
    rodtep_status: Optional[str] = None
    drawback_amount: Optional[float] = None
    drawback_status: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[str] = None
    customer: Optional[Customer] = None
    lc_alert: Optional[LcAlert] = None


# ==================== Shipment Schemas ====================

class ShipmentCreate(BaseModel):
    """Request to book a shipment. Missing customer and ports are taken from the order."""
    shipment_number: str = Field(min_length=1)
    order_id: str = Field(min_length=1)
    customer_id: Optional[str] = None
    shipment_date: Optional[date] = None
    etd: Optional[date] = None
    eta: Optional[date] = None
    vessel_name: Optional[str] = None
    voyage_number: Optional[str] = None
    bl_number: Optional[str] = None
    bl_date: Optional[date] = None
    container_number: Optional[str] = None
    container_size: str = "20ft"
    shipping_line: Optional[str] = None
    freight_amount: float = 0
    freight_currency: str = "USD"
    insurance_amount: float = 0
    origin_port: Optional[str] = None
    destination_port: Optional[str] = None
    cha_name: Optional[str] = None
    cha_reference: Optional[str] = None
    customs_clearance_date: Optional[date] = None
    let_export_date: Optional[date] = None
    remarks: Optional[str] = None
    status: ShipmentStatus = 'booked'


class ShipmentUpdate(BaseModel):
    shipment_number: Optional[str] = Field(default=None, min_length=1)
    order_id: Optional[str] = Field(default=None, min_length=1)
    customer_id: Optional[str] = None
    shipment_date: Optional[date] = None
    etd: Optional[date] = None
    eta: Optional[date] = None
    vessel_name: Optional[str] = None
    voyage_number: Optional[str] = None
    bl_number: Optional[str] = None
    bl_date: Optional[date] = None
    container_number: Optional[str] = None
    container_size: Optional[str] = None
    shipping_line: Optional[str] = None
    freight_amount: Optional[float] = None
    freight_currency: Optional[str] = None
    insurance_amount: Optional[float] = None
    origin_port: Optional[str] = None
    destination_port: Optional[str] = None
    cha_name: Optional[str] = None
    cha_reference: Optional[str] = None
    customs_clearance_date: Optional[date] = None
    let_export_date: Optional[date] = None
    remarks: Optional[str] = None
    status: Optional[ShipmentStatus] = None

    @field_validator('shipment_number', 'order_id', 'status')
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class Shipment(RecordMeta):
    shipment_number: Optional[str] = None
    order_id: Optional[str] = None
    customer_id: Optional[str] = None
    shipment_date: Optional[str] = None
    etd: Optional[str] = None
    eta: Optional[str] = None
    vessel_name: Optional[str] = None
    voyage_number: Optional[str] = None
    bl_number: Optional[str] = None
    bl_date: Optional[str] = None
    container_number: Optional[str] = None
    container_size: Optional[str] = None
    shipping_line: Optional[str] = None
    freight_amount: Optional[float] = None
    freight_currency: Optional[str] = None
    insurance_amount: Optional[float] = None
    origin_port: Optional[str] = None
    destination_port: Optional[str] = None
    cha_name: Optional[str] = None
    cha_reference: Optional[str] = None
    customs_clearance_date: Optional[str] = None
    let_export_date: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[str] = None
    order: Optional[Dict[str, Any]] = None
    customer: Optional[Customer] = None


# ==================== Payment Schemas ====================

class PaymentCreate(BaseModel):
    """Request to record an invoice / payment. A missing customer is taken from the order."""
    payment_reference: Optional[str] = None
    order_id: str = Field(min_length=1)
    customer_id: Optional[str] = None
    invoice_number: Optional[str] = None
    invoice_date: Optional[date] = None
    invoice_amount: float = Field(ge=0)
    invoice_currency: str = "USD"
    payment_due_date: date
    payment_received_date: Optional[date] = None
    amount_received: float = Field(default=0, ge=0)
    received_currency: str = "USD"
    exchange_rate_at_receipt: Optional[float] = None
    inr_realized: float = 0
    bank_charges: float = 0
    firc_number: Optional[str] = None
    firc_date: Optional[date] = None
    firc_bank: Optional[str] = None
    payment_mode: PaymentMode = 'TT'
    bank_ref_number: Optional[str] = None
    remarks: Optional[str] = None
    status: PaymentStatus = 'pending'


class PaymentUpdate(BaseModel):
    payment_reference: Optional[str] = None
    order_id: Optional[str] = Field(default=None, min_length=1)
    customer_id: Optional[str] = None
    invoice_number: Optional[str] = None
    invoice_date: Optional[date] = None
    invoice_amount: Optional[float] = Field(default=None, ge=0)
    invoice_currency: Optional[str] = None
    payment_due_date: Optional[date] = None
    payment_received_date: Optional[date] = None
    amount_received: Optional[float] = Field(default=None, ge=0)
    received_currency: Optional[str] = None
    exchange_rate_at_receipt: Optional[float] = None
    inr_realized: Optional[float] = None
    bank_charges: Optional[float] = None
    firc_number: Optional[str] = None
    firc_date: Optional[date] = None
    firc_bank: Optional[str] = None
    payment_mode: Optional[PaymentMode] = None
    bank_ref_number: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[PaymentStatus] = None

    @field_validator(
        'order_id', 'invoice_amount', 'payment_due_date', 'amount_received', 'payment_mode', 'status'
    )
    @classmethod
    def required_not_null(cls, value):
        return reject_null(value)


class Payment(RecordMeta):
    payment_reference: Optional[str] = None
    order_id: Optional[str] = None
    customer_id: Optional[str] = None
    invoice_number: Optional[str] = None
    invoice_date: Optional[str] = None
    invoice_amount: Optional[float] = None
    invoice_currency: Optional[str] = None
    payment_due_date: Optional[str] = None
    payment_received_date: Optional[str] = None
    amount_received: Optional[float] = None
    received_currency: Optional[str] = None
    exchange_rate_at_receipt: Optional[float] = None
    inr_realized: Optional[float] = None
    bank_charges: Optional[float] = None
    firc_number: Optional[str] = None
    firc_date: Optional[str] = None
    firc_bank: Optional[str] = None
    payment_mode: Optional[str] = None
    bank_ref_number: Optional[str] = None
    remarks: Optional[str] = None
    status: Optional[str] = None
    order: Optional[Dict[str, Any]] = None
    customer: Optional[Customer] = None


class PaymentSummary(BaseModel):
    """Totals shown above the payment tracker."""
    total_invoiced: float
    total_received: float
    total_outstanding: float
    total_overdue: float


class AgingBucket(BaseModel):
    """One receivables aging bucket."""
    label: str
    count: int
    total_amount: float
    payments: List[Payment] = []


# ==================== Dashboard Schemas ====================

class DashboardStats(BaseModel):
    """Headline numbers for the dashboard."""
    total_orders: int
    pending_payments: int
    overdue_payments: int
    shipments_in_transit: int
    this_month_revenue: float
    total_customers: int
    total_inquiries: int
    conversion_rate: float


class DashboardOverview(BaseModel):
    """Everything the dashboard landing page shows."""
    stats: DashboardStats
    recent_orders: List[Order]
    overdue_payments: List[Payment]
    active_shipments: List[Shipment]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    backend: str


class ReportInfo(BaseModel):
    """Entry of the report catalogue."""
    id: str
    title: str
    description: str
    sheet_name: str
