"""
Order API endpoints.
"""

from fastapi import APIRouter, HTTPException
from typing import List, Optional, Dict, Any

from ..schemas import Order, OrderCreate, OrderUpdate
from ...analytics.aging import get_lc_expiry_alert
from ...analytics.filters import filter_orders
from ...core.database import get_database, DataServiceError
from ...orders.service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def with_lc_alert(order: Dict[str, Any]) -> Dict[str, Any]:
    """Attach the LC expiry alert for display."""
    return {**order, 'lc_alert': get_lc_expiry_alert(order.get('lc_expiry_date'))}


@router.get("", response_model=List[Order])
async def list_orders(
    search: Optional[str] = None,
    status: Optional[str] = None,
    currency: Optional[str] = None
):
    """List orders newest first, each with its LC alert."""
    db = get_database()
    try:
        orders = db.get_orders()
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [with_lc_alert(o) for o in filter_orders(orders, search=search, status=status, currency=currency)]


@router.post("", response_model=Order, status_code=201)
async def create_order(order: OrderCreate):
    """Create an order; total_amount and inr_value are derived."""
    service = OrderService(get_database())
    try:
        return with_lc_alert(service.create_order(order.model_dump(mode="json")))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: str):
    db = get_database()
    try:
        order = db.get_order(order_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return with_lc_alert(order)


@router.put("/{order_id}", response_model=Order)
async def update_order(order_id: str, updates: OrderUpdate):
    service = OrderService(get_database())
    try:
        order = service.update_order(order_id, updates.model_dump(mode="json", exclude_unset=True))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return with_lc_alert(order)


@router.delete("/{order_id}")
async def delete_order(order_id: str):
    db = get_database()
    try:
        deleted = db.delete_order(order_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Order not found")
    return {"deleted": order_id}
