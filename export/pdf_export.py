"""PDF 내보내기 (fpdf2).

fpdf2 내장 폰트는 latin-1만 지원하므로 한글 TTF 폰트가 반드시 필요하다.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from export.document import PrintDocument
from export.helpers import COLORS, hex_to_rgb, today_str

logger = logging.getLogger(__name__)

# 자동 탐색할 한글 폰트 (TTF만)
FONT_CANDIDATES: tuple[str, ...] = (
    "/usr/share/fonts/truetype/nanum/NanumGothic.ttf",
    "/usr/share/fonts/nanum/NanumGothic.ttf",
    "/usr/share/fonts/truetype/unfonts-core/UnDotum.ttf",
    "/Library/Fonts/NanumGothic.ttf",
    "/System/Library/Fonts/Supplemental/AppleGothic.ttf",
    "C:/Windows/Fonts/malgun.ttf",
)

_FONT_FAMILY = "Hangul"

# ─── A4 세로 ──────────────────────────────────────────────────────────────────
# 210 × 297 mm, 좌우 여백 15 → 사용 폭 180 mm
# 열: 주차(32) + 과목(34) + 단원(50) + 세부 내용(64) = 180 mm

_MARGIN       = 15
_COL_WIDTHS   = (32, 34, 50, 64)
_LINE_H       = 6     # mm
_CELL_PAD     = 2     # mm
_FONT_TITLE   = 18    # pt
_FONT_SUMMARY = 11
_FONT_CONTENT = 10
_FONT_FOOTER  = 8


class PdfFontError(RuntimeError):
    """한글 폰트를 찾을 수 없을 때."""


def find_font(font_path: Optional[str] = None) -> Path:
    """사용할 TTF 폰트 경로. 지정된 경로가 있으면 그것만 확인한다."""
    if font_path:
        path = Path(font_path)
        if not path.is_file():
            raise PdfFontError(f"PDF 폰트 파일이 없습니다: {path}")
        return path
    for candidate in FONT_CANDIDATES:
        path = Path(candidate)
        if path.is_file():
            return path
    raise PdfFontError(
        "한글 TTF 폰트를 찾을 수 없습니다. "
        "설정의 export.pdf_font_path에 폰트 경로를 지정하세요."
    )


def wrap_text(pdf, text: str, width: float) -> list[str]:
    """현재 폰트 기준으로 width(mm)에 맞게 글자 단위로 줄을 나눈다."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        line = ""
        for ch in paragraph:
            if line and pdf.get_string_width(line + ch) > width:
                lines.append(line)
                line = ch.lstrip()
            else:
                line += ch
        lines.append(line)
    return lines


class _PlanPdf:
    """fpdf.FPDF 래퍼: 머리말/꼬리말과 표 그리기."""

    def __init__(self, font_path: Path):
        from fpdf import FPDF

        class _Pdf(FPDF):
            def footer(inner):
                inner.set_y(-12)
                inner.set_font(_FONT_FAMILY, "", _FONT_FOOTER)
                inner.set_text_color(*hex_to_rgb(COLORS["muted"]))
                inner.cell(
                    0, 6,
                    f"{today_str()}  |  {inner.page_no()}/{{nb}} 쪽",
                    border=0, align="C",
                )
                inner.set_text_color(0, 0, 0)

        pdf = _Pdf(orientation="P", unit="mm", format="A4")
        pdf.add_font(_FONT_FAMILY, "", str(font_path))
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=False)
        pdf.set_margins(left=_MARGIN, top=_MARGIN, right=_MARGIN)
        self._pdf = pdf

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._pdf.output(str(path))

    # ─── 페이지 ───────────────────────────────────────────────────────────────

    def draw_document(self, document: PrintDocument) -> None:
        pdf = self._pdf
        pdf.add_page()

        pdf.set_font(_FONT_FAMILY, "", _FONT_TITLE)
        pdf.set_text_color(*hex_to_rgb(COLORS["title"]))
        pdf.cell(0, 12, document.title, border=0, align="C")
        pdf.ln(12)

        pdf.set_font(_FONT_FAMILY, "", _FONT_SUMMARY)
        pdf.set_text_color(*hex_to_rgb(COLORS["muted"]))
        pdf.cell(0, 8, document.summary, border=0, align="C")
        pdf.ln(12)
        pdf.set_text_color(0, 0, 0)

        self._draw_row(document.columns, header=True)
        for row in document.rows:
            self._draw_row(row.cells())

    def _draw_row(self, cells: Iterable[str], header: bool = False) -> None:
        pdf = self._pdf
        pdf.set_font(_FONT_FAMILY, "", _FONT_CONTENT)

        wrapped = [
            wrap_text(pdf, text, w - 2 * _CELL_PAD)
            for text, w in zip(cells, _COL_WIDTHS)
        ]
        row_h = max(len(lines) for lines in wrapped) * _LINE_H + _CELL_PAD

        # 페이지 끝이면 새 페이지
        if pdf.get_y() + row_h > pdf.h - 20:
            pdf.add_page()

        x, y = pdf.l_margin, pdf.get_y()
        for col, (lines, w) in enumerate(zip(wrapped, _COL_WIDTHS)):
            if header:
                pdf.set_fill_color(*hex_to_rgb(COLORS["header"]))
                pdf.rect(x, y, w, row_h, style="F")
                pdf.set_text_color(*hex_to_rgb(COLORS["header_text"]))
            elif col == 1:
                pdf.set_text_color(*hex_to_rgb(COLORS["subject"]))
            elif col == 2:
                pdf.set_text_color(*hex_to_rgb(COLORS["chapter"]))
            else:
                pdf.set_text_color(0, 0, 0)

            pdf.set_draw_color(*hex_to_rgb(COLORS["border"]))
            pdf.rect(x, y, w, row_h, style="D")

            y_text = y + _CELL_PAD / 2
            for line in lines:
                pdf.set_xy(x + _CELL_PAD, y_text)
                pdf.cell(w - 2 * _CELL_PAD, _LINE_H, line, border=0, align="L")
                y_text += _LINE_H
            x += w

        pdf.set_text_color(0, 0, 0)
        pdf.set_xy(pdf.l_margin, y + row_h)


class PdfExporter:
    """PrintDocument를 PDF 파일로 내보낸다 (문서마다 한 쪽부터 시작)."""

    def __init__(self, font_path: Optional[str] = None):
        self.font_path = find_font(font_path)

    def export(self, document: PrintDocument, output_path: Path) -> None:
        self.export_many([document], output_path)

    def export_many(self, documents: Iterable[PrintDocument], output_path: Path) -> None:
        pdf = _PlanPdf(self.font_path)
        count = 0
        for document in documents:
            pdf.draw_document(document)
            count += 1
        if count == 0:
            logger.warning("PDF 내보내기: 문서 없음 – 파일을 만들지 않음")
            return
        pdf.save(output_path)
        logger.info(f"PDF 저장: {output_path} ({count}개 반)")
