"""
Health check endpoint.
"""

from fastapi import APIRouter

from ..schemas import HealthResponse
from ...core.database import get_database
from ...version import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Check API health and which data backend is active."""
    db = get_database()

    return HealthResponse(
        status="healthy",
        version=__version__,
        backend=db.backend_name
    )
