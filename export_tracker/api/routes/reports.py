"""
Report API endpoints: catalogue, report downloads and list-page exports.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import StreamingResponse
from typing import List, Optional

from ..schemas import ReportInfo
from ...core.database import get_database, DataServiceError
from ...reports.catalog import list_reports, generate_report, export_page, PAGE_EXPORTS
from ...reports.excel import EmptyExportError, XLSX_MEDIA_TYPE

router = APIRouter(prefix="/reports", tags=["reports"])


def _xlsx_response(excel_file, filename: str) -> StreamingResponse:
    return StreamingResponse(
        excel_file,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename={filename}"}
    )


@router.get("", response_model=List[ReportInfo])
async def report_catalogue():
    return list_reports()


@router.get("/export/{page}")
async def export_list_page(
    page: str,
    search: Optional[str] = None,
    status: Optional[str] = None,
    currency: Optional[str] = None,
    mode: Optional[str] = None,
    country: Optional[str] = None
):
    """
    Download a list page as Excel, with the same filters the page offers.
    Filters a page does not support are ignored.
    """
    if page not in PAGE_EXPORTS:
        raise HTTPException(status_code=404, detail=f"Unknown export page: {page}")

    supported = {
        'orders': {'search': search, 'status': status, 'currency': currency},
        'payments': {'search': search, 'status': status, 'mode': mode},
        'shipments': {'search': search, 'status': status},
        'customers': {'search': search, 'country': country},
        'inquiries': {'search': search, 'status': status},
    }[page]

    try:
        excel_file, filename = export_page(page, get_database(), **supported)
    except EmptyExportError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _xlsx_response(excel_file, filename)


@router.get("/{report_id}")
async def download_report(report_id: str):
    """Generate a catalogue report as an xlsx download."""
    try:
        excel_file, filename = generate_report(report_id, get_database())
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Unknown report: {report_id}")
    except EmptyExportError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except DataServiceError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _xlsx_response(excel_file, filename)
