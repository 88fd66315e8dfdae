"""
Dashboard API Routes.
"""

from fastapi import APIRouter, HTTPException

from ..schemas import DashboardStats, DashboardOverview
from ...analytics.aging import get_overdue_payments, get_lc_expiry_alert
from ...analytics.stats import get_dashboard_stats, IN_TRANSIT_STATUSES
from ...core.database import get_database, DataServiceError

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

RECENT_ORDERS = 5


def _load_all(db):
    return {
        'orders': db.get_orders(),
        'payments': db.get_payments(),
        'shipments': db.get_shipments(),
        'customers': db.get_customers(),
        'inquiries': db.get_inquiries(),
    }


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats():
    db = get_database()
    try:
        return get_dashboard_stats(**_load_all(db))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.get("/overview", response_model=DashboardOverview)
async def dashboard_overview():
    """
    Everything the landing page shows:
    - headline stats
    - five most recent orders
    - overdue payments, most overdue first
    - shipments loaded or in transit
    """
    db = get_database()
    try:
        data = _load_all(db)
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))

    recent = [
        {**o, 'lc_alert': get_lc_expiry_alert(o.get('lc_expiry_date'))}
        for o in data['orders'][:RECENT_ORDERS]
    ]
    return {
        'stats': get_dashboard_stats(**data),
        'recent_orders': recent,
        'overdue_payments': get_overdue_payments(data['payments']),
        'active_shipments': [s for s in data['shipments'] if s.get('status') in IN_TRANSIT_STATUSES],
    }
