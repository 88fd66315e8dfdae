"""
Shipment API endpoints.
"""

from fastapi import APIRouter, HTTPException
from typing import Dict, List, Optional

from ..schemas import Shipment, ShipmentCreate, ShipmentUpdate
from ...analytics.filters import filter_shipments
from ...analytics.stats import count_by_status
from ...core.database import get_database, DataServiceError
from ...orders.service import OrderService, RecordNotFoundError

router = APIRouter(prefix="/shipments", tags=["shipments"])

SHIPMENT_STATUSES = ['booked', 'loaded', 'in_transit', 'arrived', 'delivered', 'cancelled']


@router.get("", response_model=List[Shipment])
async def list_shipments(search: Optional[str] = None, status: Optional[str] = None):
    db = get_database()
    try:
        shipments = db.get_shipments()
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return filter_shipments(shipments, search=search, status=status)


@router.get("/status-counts", response_model=Dict[str, int])
async def shipment_status_counts():
    db = get_database()
    try:
        return count_by_status(db.get_shipments(), SHIPMENT_STATUSES)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("", response_model=Shipment, status_code=201)
async def create_shipment(shipment: ShipmentCreate):
    """Book a shipment against an order."""
    service = OrderService(get_database())
    try:
        return service.create_shipment(shipment.model_dump(mode="json"))
    except RecordNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/{shipment_id}", response_model=Shipment)
async def get_shipment(shipment_id: str):
    db = get_database()
    try:
        shipment = db.get_shipment(shipment_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not shipment:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return shipment


@router.put("/{shipment_id}", response_model=Shipment)
async def update_shipment(shipment_id: str, updates: ShipmentUpdate):
    db = get_database()
    try:
        shipment = db.update_shipment(shipment_id, updates.model_dump(mode="json", exclude_unset=True))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not shipment:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return shipment


@router.delete("/{shipment_id}")
async def delete_shipment(shipment_id: str):
    db = get_database()
    try:
        deleted = db.delete_shipment(shipment_id)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail="Shipment not found")
    return {"deleted": shipment_id}
