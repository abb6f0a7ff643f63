"""내보내기 테스트: 인쇄 문서, HTML, Excel, PDF, 렌더링 표면."""

import pytest
from pathlib import Path

from config.schema import DocumentStyle, PeriodScheme
from export.document import DocumentExporter, PrintDocument
from export.excel_export import ExcelExporter, sheet_title
from export.helpers import COLUMNS, format_details, summary_text, title_text
from export.html_export import HtmlExporter
from export.pdf_export import PdfExporter, PdfFontError, find_font
from export.surface import BrowserSurface, FileSurface, RenderingSurface
from export.tui_renderer import render_class_badges, render_plan_rows
from models.reference import ReferenceTable
from models.weekly_entry import EntryDraft
from planner.store import PlanStore


REFERENCE = {"Algebra": ["Sets", "Polynomials"], "Geometry": ["Vectors"]}


class _RecordingSurface(RenderingSurface):
    """받은 문서를 기록하는 테스트용 표면."""

    def __init__(self, accept: bool = True):
        self.accept = accept
        self.received: list[PrintDocument] = []

    def present(self, document: PrintDocument) -> bool:
        self.received.append(document)
        return self.accept


def _add(store: PlanStore, week: int, subject: str, chapter: str,
         details: str = "", month: int = 1) -> None:
    draft = EntryDraft(month=month, week=week)
    draft.select_subject(subject)
    draft.select_chapter(chapter)
    draft.set_details(details)
    assert store.add_entry(store.selected_id, draft)


# ─── Fixtures ─────────────────────────────────────────────────────────────────

@pytest.fixture
def store() -> PlanStore:
    """Class-A: [2주차 Algebra/Polynomials, 1주차 Algebra/Sets 'intro'] 순서로 추가."""
    store = PlanStore(ReferenceTable(REFERENCE))
    store.create_class("Class-A")
    _add(store, 2, "Algebra", "Polynomials")
    _add(store, 1, "Algebra", "Sets", "intro")
    return store


@pytest.fixture
def document(store: PlanStore) -> PrintDocument:
    return DocumentExporter(style=DocumentStyle.MODERN).build_selected(store)


def _available_font():
    try:
        return find_font()
    except PdfFontError:
        return None


# ─── Tests: 문서 ──────────────────────────────────────────────────────────────

class TestDocumentExporter:

    def test_rows_in_sorted_order(self, document: PrintDocument):
        assert [r.cells() for r in document.rows] == [
            ("1주차", "Algebra", "Sets", "intro"),
            ("2주차", "Algebra", "Polynomials", "-"),
        ]

    def test_summary_counts_entries(self, document: PrintDocument):
        assert document.summary == "총 2주차 계획"
        assert document.entry_count == 2

    def test_title_and_columns(self, document: PrintDocument):
        assert document.title == "Class-A 진도 계획표"
        assert document.columns == ("주차", "과목", "단원", "세부 내용")

    def test_simple_caption(self, store: PlanStore):
        doc = DocumentExporter(style=DocumentStyle.SIMPLE).build_selected(store)
        assert doc.title == "Class-A 주차별 진도 계획표"

    def test_month_week_labels(self):
        store = PlanStore(ReferenceTable(REFERENCE), scheme=PeriodScheme.MONTH_WEEK)
        store.create_class("B")
        _add(store, 1, "Geometry", "Vectors", month=8)
        _add(store, 3, "Algebra", "Sets", month=7)
        doc = DocumentExporter().build_selected(store)
        assert [r.period for r in doc.rows] == ["7월 3주차", "8월 1주차"]

    def test_empty_class(self):
        store = PlanStore(ReferenceTable(REFERENCE))
        store.create_class("빈 반")
        doc = DocumentExporter().build_selected(store)
        assert doc.rows == []
        assert doc.summary == "총 0주차 계획"

    def test_no_selection_builds_nothing(self, store: PlanStore):
        store.clear_selection()
        assert DocumentExporter().build_selected(store) is None

    def test_deleted_selection_builds_nothing(self, store: PlanStore):
        store.remove_class(store.selected_id)
        assert DocumentExporter().build_selected(store) is None

    def test_build_all(self, store: PlanStore):
        store.create_class("Class-B")
        docs = DocumentExporter().build_all(store)
        assert [d.class_name for d in docs] == ["Class-A", "Class-B"]

    def test_export_hands_document_once(self, store: PlanStore):
        surface = _RecordingSurface()
        assert DocumentExporter().export(store, surface) is True
        assert len(surface.received) == 1
        assert surface.received[0].entry_count == 2

    def test_export_without_selection_is_noop(self, store: PlanStore):
        store.clear_selection()
        surface = _RecordingSurface()
        assert DocumentExporter().export(store, surface) is False
        assert surface.received == []

    def test_export_unavailable_surface(self, store: PlanStore):
        assert DocumentExporter().export(store, _RecordingSurface(accept=False)) is False

    def test_export_does_not_mutate_store(self, store: PlanStore):
        before = [e.model_dump() for e in store.selected_class.entries]
        DocumentExporter().export(store, _RecordingSurface())
        after = [e.model_dump() for e in store.selected_class.entries]
        assert before == after
        assert len(store) == 1


class TestHelpers:

    def test_format_details(self):
        assert format_details("") == "-"
        assert format_details("   ") == "-"
        assert format_details("복습") == "복습"

    def test_summary_text(self):
        assert summary_text(5) == "총 5주차 계획"

    def test_title_text(self):
        assert title_text("고2-1반", DocumentStyle.MODERN) == "고2-1반 진도 계획표"

    def test_columns_fixed(self):
        assert COLUMNS == ("주차", "과목", "단원", "세부 내용")

    def test_render_plan_rows(self, store: PlanStore):
        rows = render_plan_rows(store.selected_class)
        assert rows[0] == ["0", "1주차", "Algebra", "Sets", "intro"]
        assert rows[1][-1] == "-"

    def test_render_class_badges_marks_selection(self, store: PlanStore):
        store.create_class("[b]")
        badges = render_class_badges(store.classes, store.selected_id)
        assert badges[0].startswith("[dim]")
        assert badges[1].startswith("[bold reverse]")
        assert "\\[b]" in badges[1]


# ─── Tests: HTML ──────────────────────────────────────────────────────────────

class TestHtmlExporter:

    def test_contains_title_summary_rows(self, document: PrintDocument):
        html = HtmlExporter().render(document)
        assert "<title>Class-A 진도 계획표</title>" in html
        assert "총 2주차 계획" in html
        assert html.index("Sets") < html.index("Polynomials")
        for col in COLUMNS:
            assert f"<th>{col}</th>" in html

    def test_print_trigger_only_when_requested(self, document: PrintDocument):
        assert "window.print()" not in HtmlExporter(print_on_open=False).render(document)
        assert "window.print()" in HtmlExporter(print_on_open=True).render(document)

    def test_escapes_user_text(self):
        store = PlanStore(ReferenceTable(REFERENCE))
        store.create_class("<script>alert(1)</script>")
        _add(store, 1, "Algebra", "Sets", "a & b")
        doc = DocumentExporter().build_selected(store)
        html = HtmlExporter().render(doc)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
        assert "a &amp; b" in html

    def test_styles_differ(self, store: PlanStore):
        simple = HtmlExporter().render(
            DocumentExporter(style=DocumentStyle.SIMPLE).build_selected(store))
        modern = HtmlExporter().render(
            DocumentExporter(style=DocumentStyle.MODERN).build_selected(store))
        assert 'class="container"' in modern
        assert 'class="container"' not in simple
        assert "주차별 진도 계획표" in simple

    def test_export_writes_file(self, document: PrintDocument, tmp_path: Path):
        out = tmp_path / "sub" / "plan.html"
        HtmlExporter().export(document, out)
        assert out.exists()
        assert "Class-A" in out.read_text(encoding="utf-8")


# ─── Tests: Excel ─────────────────────────────────────────────────────────────

class TestExcelExporter:

    def test_sheet_contents(self, document: PrintDocument, tmp_path: Path):
        from openpyxl import load_workbook

        out = tmp_path / "plan.xlsx"
        ExcelExporter().export(document, out)
        wb = load_workbook(out)
        assert wb.sheetnames == ["Class-A"]
        ws = wb["Class-A"]
        assert ws["A1"].value == "Class-A 진도 계획표"
        assert ws["A2"].value.startswith("총 2주차 계획")
        assert [c.value for c in ws[4]] == list(COLUMNS)
        assert [c.value for c in ws[5]] == ["1주차", "Algebra", "Sets", "intro"]
        assert [c.value for c in ws[6]] == ["2주차", "Algebra", "Polynomials", "-"]

    def test_one_sheet_per_class(self, store: PlanStore, tmp_path: Path):
        from openpyxl import load_workbook

        store.create_class("Class-A")
        store.create_class("B/C")
        docs = DocumentExporter().build_all(store)
        out = tmp_path / "all.xlsx"
        ExcelExporter().export_many(docs, out)
        assert load_workbook(out).sheetnames == ["Class-A", "Class-A (2)", "B_C"]

    def test_no_documents_no_file(self, tmp_path: Path):
        out = tmp_path / "none.xlsx"
        ExcelExporter().export_many([], out)
        assert not out.exists()

    def test_sheet_title_rules(self):
        taken: set[str] = set()
        assert sheet_title("a" * 40, taken) == "a" * 31
        assert sheet_title("a" * 40, taken) == "a" * 27 + " (2)"
        assert sheet_title("x:y?", taken) == "x_y_"
        assert sheet_title("", taken) == "반"

    def test_sheet_title_drops_control_chars(self):
        assert sheet_title("A\x07반", set()) == "A반"

    def test_formula_like_text_stays_text(self, tmp_path: Path):
        from openpyxl import load_workbook

        store = PlanStore(ReferenceTable(REFERENCE))
        store.create_class("=SUM(A1)")
        _add(store, 1, "Algebra", "Sets", "=1+1")
        out = tmp_path / "formula.xlsx"
        assert DocumentExporter().export(store, FileSurface(out)) is True

        ws = load_workbook(out).active
        assert ws.cell(row=5, column=4).data_type == "s"
        assert ws.cell(row=5, column=4).value == "=1+1"
        assert ws["A1"].data_type == "s"
        assert ws["A1"].value == "=SUM(A1) 진도 계획표"

    def test_control_chars_removed(self, tmp_path: Path):
        from openpyxl import load_workbook

        store = PlanStore(ReferenceTable(REFERENCE))
        store.create_class("Class-A")
        _add(store, 1, "Algebra", "Sets", "a\x07b")
        out = tmp_path / "control.xlsx"
        assert DocumentExporter().export(store, FileSurface(out)) is True
        assert load_workbook(out).active.cell(row=5, column=4).value == "ab"


# ─── Tests: PDF ───────────────────────────────────────────────────────────────

class TestPdfExporter:

    def test_missing_font_path_raises(self, tmp_path: Path):
        with pytest.raises(PdfFontError):
            PdfExporter(font_path=str(tmp_path / "missing.ttf"))

    def test_no_candidates_raises(self, monkeypatch):
        monkeypatch.setattr("export.pdf_export.FONT_CANDIDATES", ())
        with pytest.raises(PdfFontError):
            find_font()

    @pytest.mark.skipif(_available_font() is None, reason="한글 TTF 폰트 없음")
    def test_writes_pdf(self, store: PlanStore, tmp_path: Path):
        store.create_class("Class-B")
        out = tmp_path / "plan.pdf"
        PdfExporter().export_many(DocumentExporter().build_all(store), out)
        assert out.read_bytes().startswith(b"%PDF")


# ─── Tests: 렌더링 표면 ───────────────────────────────────────────────────────

class TestSurfaces:

    def test_file_surface_html(self, store: PlanStore, tmp_path: Path):
        out = tmp_path / "plan.html"
        assert DocumentExporter().export(store, FileSurface(out)) is True
        assert "총 2주차 계획" in out.read_text(encoding="utf-8")

    def test_file_surface_xlsx(self, store: PlanStore, tmp_path: Path):
        out = tmp_path / "plan.xlsx"
        assert DocumentExporter().export(store, FileSurface(out)) is True
        assert out.exists()

    def test_file_surface_unknown_suffix(self, tmp_path: Path):
        with pytest.raises(ValueError):
            FileSurface(tmp_path / "plan.docx")

    def test_file_surface_pdf_needs_font(self, tmp_path: Path):
        with pytest.raises(PdfFontError):
            FileSurface(tmp_path / "plan.pdf", pdf_font_path=str(tmp_path / "x.ttf"))

    def test_file_surface_write_error_is_noop(self, store: PlanStore, tmp_path: Path):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        surface = FileSurface(blocker / "plan.html")
        assert DocumentExporter().export(store, surface) is False

    def test_browser_surface_opens_with_print(self, store: PlanStore, tmp_path: Path,
                                              monkeypatch):
        opened: list[str] = []
        monkeypatch.setattr("webbrowser.open", lambda url: opened.append(url) or True)
        surface = BrowserSurface(print_on_open=True, directory=tmp_path)
        assert DocumentExporter().export(store, surface) is True
        assert len(opened) == 1
        assert opened[0].startswith("file://")
        assert "window.print()" in surface.last_path.read_text(encoding="utf-8")

    def test_browser_unavailable_is_noop(self, store: PlanStore, tmp_path: Path,
                                         monkeypatch):
        monkeypatch.setattr("webbrowser.open", lambda url: False)
        surface = BrowserSurface(directory=tmp_path)
        assert DocumentExporter().export(store, surface) is False
        assert surface.last_path is None

    def test_browser_not_called_without_selection(self, store: PlanStore, monkeypatch):
        opened: list[str] = []
        monkeypatch.setattr("webbrowser.open", lambda url: opened.append(url) or True)
        store.clear_selection()
        assert DocumentExporter().export(store, BrowserSurface()) is False
        assert opened == []
