"""대화형 계획 세션: 메뉴 입력을 PlanStore 연산과 내보내기로 연결한다.

세션마다 PlanStore와 입력 초안을 새로 만든다. 종료하면 모두 사라진다.
"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import IntPrompt, Prompt
from rich.table import Table
from rich import box

from config.schema import PeriodScheme, PlannerConfig
from export.document import DocumentExporter
from export.pdf_export import PdfFontError
from export.surface import BrowserSurface, FileSurface, RenderingSurface
from export.tui_renderer import render_class_badges, render_plan_rows
from models.reference import ReferenceTable
from models.weekly_entry import EntryDraft
from planner.store import PlanStore

MENU: tuple[tuple[str, str], ...] = (
    ("1", "반 추가"),
    ("2", "반 선택"),
    ("3", "반 삭제"),
    ("4", "주차 설정"),
    ("5", "과목 선택"),
    ("6", "단원 선택"),
    ("7", "세부 내용"),
    ("8", "진도 추가"),
    ("9", "진도 삭제"),
    ("s", "계획표 보기"),
    ("p", "인쇄 (브라우저)"),
    ("f", "파일로 저장"),
    ("a", "모든 반 파일로 저장"),
    ("0", "종료"),
)


def _safe_filename(name: str) -> str:
    """경로 구분자를 바꿔 반 이름이 하위 폴더를 만들지 않게 한다."""
    return name.replace("/", "_").replace("\\", "_")


class PlannerSession:
    """한 번의 대화형 세션."""

    def __init__(self, config: PlannerConfig, console: Optional[Console] = None):
        self.config = config
        self.console = console or Console()
        self.store = PlanStore(
            ReferenceTable.from_config(config.reference),
            scheme=config.period_scheme,
        )
        self.draft = EntryDraft()
        self.exporter = DocumentExporter(style=config.export.style)

    @property
    def uses_month(self) -> bool:
        return self.config.period_scheme == PeriodScheme.MONTH_WEEK

    # ─── 표시 ─────────────────────────────────────────────────────────────────

    def show_classes(self) -> None:
        if not len(self.store):
            self.console.print("[dim]먼저 반을 추가해서 진도 계획을 시작하세요.[/dim]")
            return
        badges = render_class_badges(self.store.classes, self.store.selected_id)
        self.console.print("반: " + "  ".join(badges))
        if self.store.selected_class is None:
            self.console.print("[dim]반을 선택하여 진도 계획을 확인하거나 추가하세요.[/dim]")

    def show_draft(self) -> None:
        period = self.draft.period(self.config.period_scheme).label
        self.console.print(
            f"[bold]입력 중:[/bold] {period} | "
            f"과목: {escape(self.draft.subject) or '-'} | "
            f"단원: {escape(self.draft.chapter) or '-'} | "
            f"세부 내용: {escape(self.draft.details) or '-'}"
        )

    def show_plan(self) -> None:
        plan = self.store.selected_class
        if plan is None:
            self.console.print("[yellow]선택된 반이 없습니다.[/yellow]")
            return
        document = self.exporter.build(plan)
        table = Table(
            title=escape(document.title), caption=document.summary, box=box.ROUNDED,
        )
        table.add_column("#", style="dim", width=3)
        for col in document.columns:
            table.add_column(col)
        rows = render_plan_rows(plan)
        if not rows:
            self.console.print(table)
            self.console.print("[dim]아직 진도가 추가되지 않았습니다.[/dim]")
            return
        for row in rows:
            table.add_row(*(escape(c) for c in row))
        self.console.print(table)

    # ─── 메뉴 동작 ────────────────────────────────────────────────────────────

    def _choose(self, label: str, options: list[str]) -> Optional[str]:
        """번호 목록에서 하나를 고른다. 빈 입력이면 None."""
        for i, option in enumerate(options, 1):
            self.console.print(f"  [bold]{i}.[/bold] {escape(option)}")
        answer = Prompt.ask(label, default="", console=self.console)
        if not answer.isdigit() or not 1 <= int(answer) <= len(options):
            return None
        return options[int(answer) - 1]

    def add_class(self) -> None:
        name = Prompt.ask("반 이름 (예: 고2-1반)", default="", console=self.console)
        if self.store.create_class(name) is None:
            self.console.print("[yellow]반 이름을 입력하세요.[/yellow]")

    def select_class(self) -> None:
        plan_ids = [p.id for p in self.store.classes]
        names = [f"{p.name} [{p.id}]" for p in self.store.classes]
        chosen = self._choose("반 번호", names)
        if chosen is not None:
            self.store.select_class(plan_ids[names.index(chosen)])

    def remove_class(self) -> None:
        plan_ids = [p.id for p in self.store.classes]
        names = [f"{p.name} [{p.id}]" for p in self.store.classes]
        chosen = self._choose("삭제할 반 번호", names)
        if chosen is not None:
            self.store.remove_class(plan_ids[names.index(chosen)])

    def set_period(self) -> None:
        month = None
        if self.uses_month:
            month = IntPrompt.ask(
                "월", choices=[str(m) for m in self.config.month_choices],
                default=self.draft.month, console=self.console,
            )
            week_choices = [str(w) for w in self.config.week_choices]
            week = IntPrompt.ask(
                "주차", choices=week_choices, default=self.draft.week, console=self.console,
            )
            # Enter로 받은 기본값은 선택지 검사를 거치지 않는다
            if week not in self.config.week_choices:
                self.console.print(
                    f"[yellow]주차는 {', '.join(week_choices)} 중에서 고르세요.[/yellow]"
                )
                return
        else:
            week = IntPrompt.ask("주차", default=self.draft.week, console=self.console)
        if week < 1:
            self.console.print("[yellow]주차는 1 이상이어야 합니다.[/yellow]")
            return
        self.draft.set_period(week, month)

    def select_subject(self) -> None:
        subject = self._choose("과목 번호", self.store.reference.subjects)
        if subject is not None:
            self.draft.select_subject(subject)

    def select_chapter(self) -> None:
        if not self.draft.subject:
            self.console.print("[yellow]먼저 과목을 선택하세요.[/yellow]")
            return
        chapter = self._choose(
            "단원 번호", self.store.reference.chapters(self.draft.subject)
        )
        if chapter is not None:
            self.draft.select_chapter(chapter)

    def set_details(self) -> None:
        details = Prompt.ask(
            "세부 학습 내용 (선택사항)", default=self.draft.details, console=self.console,
        )
        self.draft.set_details(details)

    def add_entry(self) -> None:
        class_id = self.store.selected_id
        if class_id is None or not self.store.add_entry(class_id, self.draft):
            self.console.print(
                "[yellow]반, 과목, 단원을 모두 선택해야 진도를 추가할 수 있습니다.[/yellow]"
            )

    def remove_entry(self) -> None:
        plan = self.store.selected_class
        if plan is None or not plan.entries:
            self.console.print("[yellow]삭제할 진도가 없습니다.[/yellow]")
            return
        self.show_plan()
        index = IntPrompt.ask("삭제할 번호", console=self.console)
        if not self.store.remove_entry(plan.id, index):
            self.console.print("[yellow]해당 번호의 진도가 없습니다.[/yellow]")

    def export_to(self, surface: RenderingSurface) -> bool:
        if self.exporter.export(self.store, surface):
            self.console.print(f"[green]✓[/green] 내보내기: {escape(str(surface))}")
            return True
        self.console.print("[yellow]내보낼 문서가 없거나 내보낼 수 없습니다.[/yellow]")
        return False

    def _file_surface(self, default_name: str) -> Optional[FileSurface]:
        default = str(Path(self.config.export.output_dir) / default_name)
        path = Prompt.ask("저장할 파일 (.html/.pdf/.xlsx)", default=default,
                          console=self.console)
        try:
            return FileSurface(
                Path(path),
                print_on_open=self.config.export.print_on_open,
                pdf_font_path=self.config.export.pdf_font_path,
            )
        except (ValueError, PdfFontError) as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return None

    def export_file(self) -> None:
        plan = self.store.selected_class
        if plan is None:
            self.console.print("[yellow]선택된 반이 없습니다.[/yellow]")
            return
        surface = self._file_surface(f"{_safe_filename(plan.name)}.html")
        if surface is not None:
            self.export_to(surface)

    def export_all(self) -> None:
        documents = self.exporter.build_all(self.store)
        if not documents:
            self.console.print("[yellow]반이 없습니다.[/yellow]")
            return
        path = Prompt.ask(
            "저장할 파일 (.pdf/.xlsx)",
            default=str(Path(self.config.export.output_dir) / "진도계획표.xlsx"),
            console=self.console,
        )
        path = Path(path)
        try:
            if path.suffix.lower() == ".pdf":
                from export.pdf_export import PdfExporter
                PdfExporter(self.config.export.pdf_font_path).export_many(documents, path)
            elif path.suffix.lower() == ".xlsx":
                from export.excel_export import ExcelExporter
                ExcelExporter().export_many(documents, path)
            else:
                self.console.print("[red]모든 반 저장은 .pdf 또는 .xlsx만 지원합니다.[/red]")
                return
        except (OSError, PdfFontError) as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
            return
        self.console.print(f"[green]✓[/green] {len(documents)}개 반 저장: {escape(str(path))}")

    # ─── 루프 ─────────────────────────────────────────────────────────────────

    def handle(self, choice: str) -> bool:
        """메뉴 선택 하나를 처리한다. 종료면 False."""
        actions = {
            "1": self.add_class,
            "2": self.select_class,
            "3": self.remove_class,
            "4": self.set_period,
            "5": self.select_subject,
            "6": self.select_chapter,
            "7": self.set_details,
            "8": self.add_entry,
            "9": self.remove_entry,
            "s": self.show_plan,
            "p": lambda: self.export_to(
                BrowserSurface(print_on_open=self.config.export.print_on_open)
            ),
            "f": self.export_file,
            "a": self.export_all,
        }
        choice = choice.strip().lower()
        if choice == "0":
            return False
        action = actions.get(choice)
        if action is None:
            self.console.print("[yellow]잘못된 선택입니다.[/yellow]")
        else:
            action()
        return True

    def run(self) -> None:
        self.console.print(Panel(
            f"[bold]{escape(self.config.title)}[/bold]\n"
            "[dim]방학 시즌 각 반별 주차별 진도를 쉽게 계획하고 관리하세요[/dim]",
            border_style="cyan",
        ))
        while True:
            self.console.print()
            self.show_classes()
            if self.store.selected_class is not None:
                self.show_draft()
            self.console.print("  ".join(f"[bold]{k}[/bold] {label}" for k, label in MENU))
            choice = Prompt.ask("선택", default="s", console=self.console)
            if not self.handle(choice):
                break
        self.console.print("[dim]세션을 종료합니다. 계획은 저장되지 않습니다.[/dim]")
