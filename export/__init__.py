"""내보내기 모듈: 인쇄용 문서 (HTML), Excel (openpyxl), PDF (fpdf2)."""

from export.document import DocumentExporter, PrintDocument, PrintRow
from export.excel_export import ExcelExporter
from export.html_export import HtmlExporter
from export.pdf_export import PdfExporter, PdfFontError

__all__ = [
    "DocumentExporter",
    "PrintDocument",
    "PrintRow",
    "ExcelExporter",
    "HtmlExporter",
    "PdfExporter",
    "PdfFontError",
]
