"""
Excel export of flat row lists.
"""

import io
import logging
from typing import List, Dict, Any

import pandas as pd
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MAX_COLUMN_WIDTH = 50


class EmptyExportError(ValueError):
    """Raised when there are no rows to export."""

    def __init__(self, message: str = "No data to export"):
        super().__init__(message)


def column_widths(rows: List[Dict[str, Any]]) -> List[int]:
    """Width per column: longest header or value plus 2, capped at 50."""
    headers = list(rows[0].keys())
    widths = []
    for header in headers:
        longest = len(str(header))
        for row in rows:
            value = row.get(header)
            length = len(str(value)) if value is not None else 0
            longest = max(longest, length)
        widths.append(min(longest + 2, MAX_COLUMN_WIDTH))
    return widths


def export_to_excel(rows: List[Dict[str, Any]], sheet_name: str = "Sheet1") -> io.BytesIO:
    """
    Write rows to an in-memory xlsx workbook.

    Args:
        rows: Flat dicts; keys of the first row become the header
        sheet_name: Worksheet title

    Returns:
        BytesIO positioned at the start of the workbook
    """
    if not rows:
        raise EmptyExportError()

    df = pd.DataFrame(rows, columns=list(rows[0].keys()))

    excel_file = io.BytesIO()
    with pd.ExcelWriter(excel_file, engine="openpyxl") as writer:
        df.to_excel(writer, sheet_name=sheet_name, index=False)
        ws = writer.sheets[sheet_name]

        header_font = Font(bold=True)
        for cell in ws[1]:
            cell.font = header_font

        for idx, width in enumerate(column_widths(rows), 1):
            ws.column_dimensions[get_column_letter(idx)].width = width

        # Freeze header row
        ws.freeze_panes = 'A2'

    excel_file.seek(0)
    logger.info(f"Exported {len(rows)} rows to sheet '{sheet_name}'")
    return excel_file
