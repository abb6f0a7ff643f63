"""터미널 표시용 행 만들기. session 명령의 rich 표에서 쓴다."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from models.class_plan import ClassPlan


def render_plan_rows(plan: "ClassPlan") -> list[list[str]]:
    """반의 진도를 표 행으로 돌려준다.

    각 행: [번호, 주차, 과목, 단원, 세부 내용]. 번호는 삭제할 때 쓰는
    0부터 시작하는 위치다.
    """
    from export.helpers import format_details

    return [
        [str(i), e.period.label, e.subject, e.chapter, format_details(e.details)]
        for i, e in enumerate(plan.entries)
    ]


def render_class_badges(
    classes: list["ClassPlan"], selected_id: str | None
) -> list[str]:
    """반 목록을 한 줄 표시용 문자열로. 선택된 반은 강조한다."""
    from rich.markup import escape

    badges = []
    for cls in classes:
        label = escape(f"{cls.name} [{cls.id}]")
        if cls.id == selected_id:
            badges.append(f"[bold reverse] {label} [/bold reverse]")
        else:
            badges.append(f"[dim]{label}[/dim]")
    return badges
