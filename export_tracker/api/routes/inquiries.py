"""
Inquiry and quotation API endpoints.
"""

from fastapi import APIRouter, HTTPException
from typing import Dict, List, Optional

from ..schemas import (
    Inquiry, InquiryCreate, InquiryUpdate,
    Quotation, QuotationCreate, QuotationUpdate,
)
from ...analytics.filters import filter_inquiries
from ...analytics.stats import count_by_status
from ...core.database import get_database, DataServiceError
from ...orders.service import OrderService

router = APIRouter(prefix="/inquiries", tags=["inquiries"])
quotations_router = APIRouter(prefix="/quotations", tags=["quotations"])

INQUIRY_STATUSES = ['pending', 'quoted', 'converted', 'lost', 'cancelled']


# ==================== Inquiries ====================

@router.get("", response_model=List[Inquiry])
async def list_inquiries(search: Optional[str] = None, status: Optional[str] = None):
    db = get_database()
    try:
        inquiries = db.get_inquiries()
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return filter_inquiries(inquiries, search=search, status=status)


@router.get("/status-counts", response_model=Dict[str, int])
async def inquiry_status_counts():
    db = get_database()
    try:
        return count_by_status(db.get_inquiries(), INQUIRY_STATUSES)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("", response_model=Inquiry, status_code=201)
async def create_inquiry(inquiry: InquiryCreate):
    db = get_database()
    try:
        return db.create_inquiry(inquiry.model_dump(mode="json"))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/{inquiry_id}", response_model=Inquiry)
async def get_inquiry(inquiry_id: str):
    db = get_database()
    try:
        inquiry = db.get_inquiry(inquiry_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not inquiry:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return inquiry


@router.put("/{inquiry_id}", response_model=Inquiry)
async def update_inquiry(inquiry_id: str, updates: InquiryUpdate):
    db = get_database()
    try:
        inquiry = db.update_inquiry(inquiry_id, updates.model_dump(mode="json", exclude_unset=True))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not inquiry:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return inquiry


@router.delete("/{inquiry_id}")
async def delete_inquiry(inquiry_id: str):
    db = get_database()
    try:
        deleted = db.delete_inquiry(inquiry_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    return {"deleted": inquiry_id}


# ==================== Quotations ====================

@quotations_router.get("", response_model=List[Quotation])
async def list_quotations():
    db = get_database()
    try:
        return db.get_quotations()
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@quotations_router.post("", response_model=Quotation, status_code=201)
async def create_quotation(quotation: QuotationCreate):
    """Issue a quotation; total_amount defaults to quantity x unit_price."""
    service = OrderService(get_database())
    try:
        return service.create_quotation(quotation.model_dump(mode="json"))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@quotations_router.get("/{quotation_id}", response_model=Quotation)
async def get_quotation(quotation_id: str):
    db = get_database()
    try:
        quotation = db.get_quotation(quotation_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not quotation:
        raise HTTPException(status_code=404, detail="Quotation not found")
    return quotation


@quotations_router.put("/{quotation_id}", response_model=Quotation)
async def update_quotation(quotation_id: str, updates: QuotationUpdate):
    db = get_database()
    try:
        quotation = db.update_quotation(quotation_id, updates.model_dump(mode="json", exclude_unset=True))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not quotation:
        raise HTTPException(status_code=404, detail="Quotation not found")
    return quotation


@quotations_router.delete("/{quotation_id}")
async def delete_quotation(quotation_id: str):
    db = get_database()
    try:
        deleted = db.delete_quotation(quotation_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Quotation not found")
    return {"deleted": quotation_id}
