"""DocumentExporter – 반 하나의 진도 계획을 인쇄용 문서로 바꾼다.

문서는 제목, 요약 줄, 항목마다 한 행인 표로 이루어진다. 행 순서는
저장소에 있는 순서 그대로이며 항목을 더하거나 빼거나 재정렬하지 않는다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel

from config.schema import DocumentStyle
from export.helpers import COLUMNS, format_details, summary_text, title_text
from models.class_plan import ClassPlan

if TYPE_CHECKING:
    from export.surface import RenderingSurface
    from planner.store import PlanStore

logger = logging.getLogger(__name__)


class PrintRow(BaseModel):
    """표의 한 행 (주차, 과목, 단원, 세부 내용)."""

    period: str
    subject: str
    chapter: str
    details: str

    def cells(self) -> tuple[str, str, str, str]:
        return (self.period, self.subject, self.chapter, self.details)


class PrintDocument(BaseModel):
    """인쇄용 문서 한 부."""

    class_name: str
    title: str
    summary: str
    columns: tuple[str, ...] = COLUMNS
    rows: list[PrintRow]
    style: DocumentStyle = DocumentStyle.MODERN

    @property
    def entry_count(self) -> int:
        return len(self.rows)


class DocumentExporter:
    """ClassPlan 스냅샷에서 PrintDocument를 만들고 렌더링 표면에 넘긴다."""

    def __init__(self, style: DocumentStyle = DocumentStyle.MODERN):
        self.style = style

    def build(self, plan: ClassPlan) -> PrintDocument:
        snapshot = plan.snapshot()
        rows = [
            PrintRow(
                period=e.period.label,
                subject=e.subject,
                chapter=e.chapter,
                details=format_details(e.details),
            )
            for e in snapshot.entries
        ]
        return PrintDocument(
            class_name=snapshot.name,
            title=title_text(snapshot.name, self.style),
            summary=summary_text(len(rows)),
            rows=rows,
            style=self.style,
        )

    def build_selected(self, store: "PlanStore") -> Optional[PrintDocument]:
        """선택된 반의 문서. 선택이 없거나 삭제된 반이면 None."""
        plan = store.selected_class
        if plan is None:
            return None
        return self.build(plan)

    def build_all(self, store: "PlanStore") -> list[PrintDocument]:
        """모든 반의 문서 (반 생성 순서)."""
        return [self.build(plan) for plan in store.classes]

    def export(self, store: "PlanStore", surface: "RenderingSurface") -> bool:
        """선택된 반의 문서를 표면에 한 번 넘긴다.

        문서가 없거나 표면을 쓸 수 없으면 아무 일도 하지 않고 False.
        """
        document = self.build_selected(store)
        if document is None:
            logger.debug("export: 선택된 반 없음 – 무시")
            return False
        delivered = surface.present(document)
        if delivered:
            logger.info(
                f"문서 내보내기: {document.title} ({document.entry_count}행) → {surface}"
            )
        return delivered
