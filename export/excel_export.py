"""Excel 내보내기 (openpyxl): 반마다 시트 하나."""

import logging
from pathlib import Path
from typing import Iterable

from export.document import PrintDocument
from export.helpers import COLORS, today_str

logger = logging.getLogger(__name__)

# 시트 이름에 쓸 수 없는 문자
_INVALID_SHEET_CHARS = set('[]:*?/\\')


def cell_text(value: str) -> str:
    """워크시트에 쓸 수 없는 제어 문자를 지운다."""
    from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def sheet_title(name: str, taken: set[str]) -> str:
    """Excel 시트 이름 규칙(31자, 금지 문자, 중복)에 맞춘다."""
    base = "".join(
        "_" if ch in _INVALID_SHEET_CHARS else ch for ch in cell_text(name)
    )[:31] or "반"
    title = base
    n = 2
    while title in taken:
        suffix = f" ({n})"
        title = base[: 31 - len(suffix)] + suffix
        n += 1
    taken.add(title)
    return title


class ExcelExporter:
    """PrintDocument들을 하나의 Excel 파일로 내보낸다."""

    # 열 너비 (Excel 단위)
    COL_WIDTHS = (14, 16, 24, 40)

    # 행 높이 (포인트)
    ROW_TITLE_H  = 30
    ROW_HEADER_H = 22

    # ─── 공개 API ─────────────────────────────────────────────────────────────

    def export(self, document: PrintDocument, output_path: Path) -> None:
        self.export_many([document], output_path)

    def export_many(self, documents: Iterable[PrintDocument], output_path: Path) -> None:
        from openpyxl import Workbook
        wb = Workbook()
        wb.remove(wb.active)   # 기본 빈 시트 제거

        taken: set[str] = set()
        for document in documents:
            self._sheet(wb, document, sheet_title(document.class_name, taken))

        if not taken:
            logger.warning("Excel 내보내기: 문서 없음 – 파일을 만들지 않음")
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)
        logger.info(f"Excel 저장: {output_path} ({len(taken)}개 반)")

    # ─── 스타일 ───────────────────────────────────────────────────────────────

    def _fill(self, hex_color: str):
        from openpyxl.styles import PatternFill
        return PatternFill(start_color=hex_color, end_color=hex_color, fill_type="solid")

    def _thin_border(self):
        from openpyxl.styles import Border, Side
        s = Side(border_style="thin", color=COLORS["border"])
        return Border(left=s, right=s, top=s, bottom=s)

    def _text(self, ws, row: int, col: int, value: str):
        """사용자 문자열은 글자 그대로 쓴다 (=로 시작해도 수식이 아님)."""
        cell = ws.cell(row=row, column=col, value=cell_text(value))
        if cell.data_type == "f":
            cell.data_type = "s"
        return cell

    # ─── 시트 ─────────────────────────────────────────────────────────────────

    def _sheet(self, wb, document: PrintDocument, title: str) -> None:
        from openpyxl.styles import Alignment, Font
        from openpyxl.utils import get_column_letter

        ws = wb.create_sheet(title=title)
        ncols = len(document.columns)
        for col, width in enumerate(self.COL_WIDTHS, 1):
            ws.column_dimensions[get_column_letter(col)].width = width

        # 1행: 제목
        ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=ncols)
        cell = self._text(ws, 1, 1, document.title)
        cell.font = Font(bold=True, size=16, color=COLORS["title"])
        cell.alignment = Alignment(horizontal="center", vertical="center")
        ws.row_dimensions[1].height = self.ROW_TITLE_H

        # 2행: 요약 + 날짜
        ws.merge_cells(start_row=2, start_column=1, end_row=2, end_column=ncols)
        cell = self._text(ws, 2, 1, f"{document.summary}  ({today_str()})")
        cell.font = Font(size=11, color=COLORS["muted"])
        cell.alignment = Alignment(horizontal="center")

        # 4행: 머리글
        border = self._thin_border()
        header_row = 4
        for col, text in enumerate(document.columns, 1):
            cell = ws.cell(row=header_row, column=col, value=text)
            cell.fill = self._fill(COLORS["header"])
            cell.font = Font(bold=True, color=COLORS["header_text"])
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = border
        ws.row_dimensions[header_row].height = self.ROW_HEADER_H

        # 5행부터: 항목
        for offset, row in enumerate(document.rows):
            r = header_row + 1 + offset
            for col, value in enumerate(row.cells(), 1):
                cell = self._text(ws, r, col, value)
                cell.border = border
                cell.alignment = Alignment(wrap_text=True, vertical="center")
                if col == 2:
                    cell.font = Font(bold=True, color=COLORS["subject"])
                elif col == 3:
                    cell.font = Font(color=COLORS["chapter"])

        ws.freeze_panes = ws.cell(row=header_row + 1, column=1)
