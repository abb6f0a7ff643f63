"""설정 마법사: 처음 실행할 때 진도 계획표 설정을 단계별로 만든다.

rich 프롬프트로 입력을 받는다.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich import box

from config.schema import (
    DocumentStyle,
    ExportConfig,
    PeriodScheme,
    PlannerConfig,
    ReferenceConfig,
)
from config.defaults import CURRICULA, default_reference

console = Console()


def _header(title: str) -> None:
    console.print()
    console.print(Panel(f"[bold cyan]{title}[/bold cyan]", expand=False))


def _info(text: str) -> None:
    console.print(f"[dim]{text}[/dim]")


def _success(text: str) -> None:
    console.print(f"[green]✓[/green] {text}")


def show_reference_table(ref: ReferenceConfig) -> None:
    """참조표(과목 → 단원)를 rich 표로 출력한다."""
    table = Table(title=f"교육과정: {ref.curriculum_name}", box=box.ROUNDED)
    table.add_column("과목", style="bold")
    table.add_column("단원")
    for subject, chapters in ref.subjects.items():
        table.add_row(subject, ", ".join(chapters))
    console.print(table)


# ─── 1단계: 제목 ───

def _wizard_title() -> str:
    _header("1단계 - 제목")
    return Prompt.ask("프로그램 제목", default="수학 진도 계획표 생성기")


# ─── 2단계: 주차 표기 ───

def _wizard_period_scheme() -> PeriodScheme:
    _header("2단계 - 주차 표기")
    _info("[1] 주차만 (예: 3주차)   [2] 월+주차 (예: 7월 3주차)")
    choice = Prompt.ask("표기 방식", choices=["1", "2"], default="1")
    return PeriodScheme.WEEK if choice == "1" else PeriodScheme.MONTH_WEEK


# ─── 3단계: 교육과정 ───

def _wizard_reference() -> ReferenceConfig:
    _header("3단계 - 교육과정")
    names = list(CURRICULA)
    for i, name in enumerate(names, 1):
        console.print(f"  [bold]{i}.[/bold] {name}")
    choice = Prompt.ask(
        "교육과정 선택",
        choices=[str(i) for i in range(1, len(names) + 1)],
        default=str(len(names)),
    )
    ref = default_reference(names[int(choice) - 1])
    show_reference_table(ref)
    return ref


# ─── 4단계: 내보내기 ───

def _wizard_export() -> ExportConfig:
    _header("4단계 - 내보내기")
    _info("[1] 기본 표   [2] 카드형 레이아웃")
    style = Prompt.ask("문서 스타일", choices=["1", "2"], default="2")
    print_on_open = Confirm.ask("열 때 인쇄 대화상자를 띄울까요?", default=True)
    font = Prompt.ask("PDF 한글 폰트(TTF) 경로 (비워두면 자동 탐색)", default="")
    return ExportConfig(
        style=DocumentStyle.SIMPLE if style == "1" else DocumentStyle.MODERN,
        print_on_open=print_on_open,
        pdf_font_path=font or None,
    )


def _show_summary(config: PlannerConfig) -> None:
    _header("요약")
    table = Table(box=box.ROUNDED, title="설정 요약")
    table.add_column("항목", style="bold cyan")
    table.add_column("값")
    table.add_row("제목", config.title)
    table.add_row("주차 표기", config.period_scheme.value)
    table.add_row(
        "교육과정",
        f"{config.reference.curriculum_name} ({len(config.reference.subjects)}과목)",
    )
    table.add_row("문서 스타일", config.export.style.value)
    table.add_row("PDF 폰트", config.export.pdf_font_path or "자동 탐색")
    console.print(table)


# ─── 마법사 ───

def run_wizard() -> Optional[PlannerConfig]:
    """설정 마법사 전체를 실행한다.

    Returns:
        완성된 PlannerConfig, 사용자가 취소하면 None.
    """
    console.print(Panel(
        "[bold]진도 계획표 생성기 설정[/bold]\n\n"
        "[dim]Enter를 누르면 기본값이 적용됩니다.[/dim]",
        border_style="cyan",
    ))

    try:
        config = PlannerConfig(
            title=_wizard_title(),
            period_scheme=_wizard_period_scheme(),
            reference=_wizard_reference(),
            export=_wizard_export(),
        )
        _show_summary(config)

        if not Confirm.ask("\n설정을 저장할까요?", default=True):
            console.print("[yellow]저장하지 않았습니다.[/yellow]")
            return None
        return config

    except KeyboardInterrupt:
        console.print("\n[yellow]설정 마법사를 취소했습니다.[/yellow]")
        return None
