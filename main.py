"""진도 계획표 생성기 - CLI.

사용법:
  python main.py setup          설정 마법사
  python main.py config show    현재 설정 보기
  python main.py subjects       과목/단원 참조표 보기
  python main.py session        대화형 진도 계획 세션
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config_or_abort(path: Optional[Path] = None):
    """설정을 읽는다. 파일이 없으면 기본 설정, 잘못된 파일이면 종료."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr.load_or_default(path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)


# ─── SETUP ────────────────────────────────────────────────────────────────────

@click.command("setup")
def cmd_setup():
    """설정 마법사로 설정 파일을 만든다."""
    from config.wizard import run_wizard
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check():
        console.print("[yellow]설정 파일이 이미 있습니다.[/yellow]")
        if not click.confirm("다시 설정할까요?", default=False):
            return

    config = run_wizard()
    if config is not None:
        mgr.save(config)
        console.print("[bold green]설정 완료![/bold green]")
        console.print("[bold]python main.py session[/bold]으로 계획을 시작하세요.")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """설정 보기."""


@cmd_config.command("show")
@click.option("--path", "config_path", type=click.Path(path_type=Path), default=None,
              help="설정 파일 경로.")
def config_show(config_path: Optional[Path]):
    """현재 설정을 출력한다."""
    config = _load_config_or_abort(config_path)

    console.print(Panel(f"[bold]{config.title}[/bold]", title="설정", border_style="cyan"))

    table = Table(box=box.ROUNDED)
    table.add_column("항목", style="bold")
    table.add_column("값")
    table.add_row("주차 표기", config.period_scheme.value)
    table.add_row("주차 선택지", ", ".join(str(w) for w in config.week_choices))
    table.add_row("월 선택지", ", ".join(str(m) for m in config.month_choices))
    table.add_row("교육과정", config.reference.curriculum_name)
    table.add_row("문서 스타일", config.export.style.value)
    table.add_row("열 때 인쇄", "예" if config.export.print_on_open else "아니오")
    table.add_row("PDF 폰트", config.export.pdf_font_path or "자동 탐색")
    table.add_row("저장 폴더", config.export.output_dir)
    console.print(table)


# ─── SUBJECTS ─────────────────────────────────────────────────────────────────

@click.command("subjects")
@click.option("--path", "config_path", type=click.Path(path_type=Path), default=None,
              help="설정 파일 경로.")
def cmd_subjects(config_path: Optional[Path]):
    """과목별 단원 목록을 출력한다."""
    from config.wizard import show_reference_table
    config = _load_config_or_abort(config_path)
    show_reference_table(config.reference)


# ─── SESSION ──────────────────────────────────────────────────────────────────

@click.command("session")
@click.option("--path", "config_path", type=click.Path(path_type=Path), default=None,
              help="설정 파일 경로.")
def cmd_session(config_path: Optional[Path]):
    """대화형 진도 계획 세션. 종료하면 계획은 사라진다."""
    from planner.session import PlannerSession
    config = _load_config_or_abort(config_path)
    PlannerSession(config, console=console).run()


# ─── CLI ──────────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="디버그 로그 출력.")
def cli(verbose: bool):
    """진도 계획표 생성기.

    시작: python main.py session
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main():
    cli()


cli.add_command(cmd_setup)
cli.add_command(cmd_config)
cli.add_command(cmd_subjects)
cli.add_command(cmd_session)


if __name__ == "__main__":
    main()
