"""
Customer API endpoints.
"""

from fastapi import APIRouter, HTTPException
from typing import List, Optional

from ..schemas import Customer, CustomerCreate, CustomerUpdate, CustomerStats
from ...analytics.filters import filter_customers
from ...analytics.stats import get_customer_stats
from ...core.database import get_database, DataServiceError

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[Customer])
async def list_customers(search: Optional[str] = None, country: Optional[str] = None):
    """List customers alphabetically, optionally filtered."""
    db = get_database()
    try:
        customers = db.get_customers()
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return filter_customers(customers, search=search, country=country)


@router.post("", response_model=Customer, status_code=201)
async def create_customer(customer: CustomerCreate):
    db = get_database()
    try:
        return db.create_customer(customer.model_dump(mode="json"))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str):
    db = get_database()
    try:
        customer = db.get_customer(customer_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.put("/{customer_id}", response_model=Customer)
async def update_customer(customer_id: str, updates: CustomerUpdate):
    db = get_database()
    try:
        customer = db.update_customer(customer_id, updates.model_dump(mode="json", exclude_unset=True))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.delete("/{customer_id}")
async def delete_customer(customer_id: str):
    db = get_database()
    try:
        deleted = db.delete_customer(customer_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Customer not found")
    return {"deleted": customer_id}


@router.get("/{customer_id}/stats", response_model=CustomerStats)
async def customer_stats(customer_id: str):
    """Order count, ordered/invoiced/received totals and outstanding balance."""
    db = get_database()
    try:
        if not db.get_customer(customer_id):
            raise HTTPException(status_code=404, detail="Customer not found")
        return get_customer_stats(customer_id, db.get_orders(), db.get_payments())
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
