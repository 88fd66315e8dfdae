"""
FastAPI application for Export Tracker.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from export_tracker.core.config import get_config
from export_tracker.core.logging import setup_logging
from export_tracker.core.database import get_database
from export_tracker.api.routes import health, customers, orders, payments, shipments, inquiries, dashboard, reports
from export_tracker.version import __version__

# Initialize logging
config = get_config()
setup_logging(
    log_file=config.log_path,
    level=config.get('general', 'log_level', default='INFO')
)

# Initialize database
get_database()

# Create FastAPI app
app = FastAPI(
    title="Export Tracker API",
    description="Orders, payments, shipments and reports for an export trading business",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow Streamlit to access)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_list('api', 'cors_origins', default=["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api")
app.include_router(customers.router, prefix="/api")
app.include_router(orders.router, prefix="/api")
app.include_router(payments.router, prefix="/api")
app.include_router(shipments.router, prefix="/api")
app.include_router(inquiries.router, prefix="/api")
app.include_router(inquiries.quotations_router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")
app.include_router(reports.router, prefix="/api")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "Export Tracker API",
        "version": __version__,
        "docs": "/docs"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "export_tracker.main:app",
        host=config.get('api', 'host', default="0.0.0.0"),
        port=config.get_int('api', 'port', default=8000),
        reload=True
    )
