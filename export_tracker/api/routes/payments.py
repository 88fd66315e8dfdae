"""
Payment API endpoints: CRUD, receivables summary and aging buckets.
"""

from fastapi import APIRouter, HTTPException
from typing import List, Optional

from ..schemas import Payment, PaymentCreate, PaymentUpdate, PaymentSummary, AgingBucket
from ...analytics.aging import get_payment_summary, get_aging_analysis
from ...analytics.filters import filter_payments
from ...core.database import get_database, DataServiceError
from ...orders.service import OrderService, RecordNotFoundError

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=List[Payment])
async def list_payments(
    search: Optional[str] = None,
    status: Optional[str] = None,
    mode: Optional[str] = None
):
    db = get_database()
    try:
        payments = db.get_payments()
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return filter_payments(payments, search=search, status=status, mode=mode)


@router.get("/summary", response_model=PaymentSummary)
async def payment_summary():
    """Invoiced, received, outstanding and overdue totals over all payments."""
    db = get_database()
    try:
        return get_payment_summary(db.get_payments())
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/aging", response_model=List[AgingBucket])
async def payment_aging():
    """Unpaid invoices grouped into 0-30, 30-60, 60-90 and 90+ day buckets."""
    db = get_database()
    try:
        return get_aging_analysis(db.get_payments())
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("", response_model=Payment, status_code=201)
async def create_payment(payment: PaymentCreate):
    service = OrderService(get_database())
    try:
        return service.create_payment(payment.model_dump(mode="json"))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/{payment_id}", response_model=Payment)
async def get_payment(payment_id: str):
    db = get_database()
    try:
        payment = db.get_payment(payment_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.put("/{payment_id}", response_model=Payment)
async def update_payment(payment_id: str, updates: PaymentUpdate):
    db = get_database()
    try:
        payment = db.update_payment(payment_id, updates.model_dump(mode="json", exclude_unset=True))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.delete("/{payment_id}")
async def delete_payment(payment_id: str):
    db = get_database()
    try:
        deleted = db.delete_payment(payment_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Payment not found")
    return {"deleted": payment_id}
