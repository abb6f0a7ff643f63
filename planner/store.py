"""PlanStore – 한 세션 동안 반과 진도 항목을 메모리에 보관한다.

모든 변경은 즉시 반영된다. 잘못된 호출(빈 반 이름, 선택되지 않은 반,
빈 과목/단원, 없는 id나 위치)은 오류 없이 무시되고 상태는 그대로 남는다.
"""

import itertools
import logging
from typing import Iterator, Optional

from config.schema import PeriodScheme
from models.class_plan import ClassPlan
from models.reference import ReferenceTable
from models.weekly_entry import EntryDraft

logger = logging.getLogger(__name__)


class PlanStore:
    """세션 하나의 반 목록과 현재 선택된 반."""

    def __init__(
        self,
        reference: ReferenceTable,
        scheme: PeriodScheme = PeriodScheme.WEEK,
    ) -> None:
        self.reference = reference
        self.scheme = scheme
        self._classes: dict[str, ClassPlan] = {}
        self._selected_id: Optional[str] = None
        # 삭제된 id도 다시 쓰지 않도록 카운터는 줄어들지 않는다
        self._ids = itertools.count(1)

    # ─── 조회 ─────────────────────────────────────────────────────────────────

    @property
    def classes(self) -> list[ClassPlan]:
        """생성 순서대로 모든 반."""
        return list(self._classes.values())

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def selected_class(self) -> Optional[ClassPlan]:
        """선택된 반. 선택이 없거나 삭제된 반을 가리키면 None."""
        if self._selected_id is None:
            return None
        return self._classes.get(self._selected_id)

    def get_class(self, class_id: str) -> Optional[ClassPlan]:
        return self._classes.get(class_id)

    def __contains__(self, class_id: object) -> bool:
        return class_id in self._classes

    def __len__(self) -> int:
        return len(self._classes)

    def __iter__(self) -> Iterator[ClassPlan]:
        return iter(self.classes)

    # ─── 반 ───────────────────────────────────────────────────────────────────

    def create_class(self, name: str) -> Optional[ClassPlan]:
        """새 반을 만들고 선택한다. 이름이 비어 있으면 아무것도 하지 않는다."""
        name = name.strip()
        if not name:
            logger.debug("create_class: 빈 이름 – 무시")
            return None

        class_id = str(next(self._ids))
        plan = ClassPlan(id=class_id, name=name)
        self._classes[class_id] = plan
        self._selected_id = class_id
        logger.debug(f"반 생성: {class_id} ({name})")
        return plan

    def select_class(self, class_id: Optional[str]) -> None:
        """선택을 바꾼다. 존재 여부는 확인하지 않는다 (없는 반 = 선택 없음)."""
        self._selected_id = class_id or None

    def clear_selection(self) -> None:
        self._selected_id = None

    def remove_class(self, class_id: str) -> bool:
        """반을 삭제한다. 선택된 반이었다면 선택도 해제한다."""
        if class_id not in self._classes:
            logger.debug(f"remove_class: 없는 반 {class_id!r} – 무시")
            return False

        del self._classes[class_id]
        if self._selected_id == class_id:
            self._selected_id = None
        logger.debug(f"반 삭제: {class_id}")
        return True

    # ─── 진도 항목 ────────────────────────────────────────────────────────────

    def add_entry(self, class_id: str, draft: EntryDraft) -> bool:
        """초안을 반에 추가하고 정렬한다. 성공하면 초안은 다음 주차로 넘어간다.

        추가 조건:
        1. 반이 선택되어 있고 class_id가 선택된 반과 같다
        2. 반이 존재한다
        3. 과목과 단원이 모두 채워져 있다
        4. 단원이 참조표에서 그 과목에 속한다
        """
        if self._selected_id is None or class_id != self._selected_id:
            logger.debug(f"add_entry: 반 {class_id!r}이 선택되지 않음 – 무시")
            return False
        plan = self._classes.get(class_id)
        if plan is None:
            logger.debug(f"add_entry: 없는 반 {class_id!r} – 무시")
            return False
        if not draft.is_complete:
            logger.debug("add_entry: 과목 또는 단원이 비어 있음 – 무시")
            return False
        if not self.reference.is_valid(draft.subject, draft.chapter):
            logger.debug(
                f"add_entry: 단원 '{draft.chapter}'은 과목 '{draft.subject}'에 없음 – 무시"
            )
            return False

        entry = draft.to_entry(self.scheme)
        plan.insert_sorted(entry)
        draft.advance()
        logger.debug(
            f"진도 추가: 반 {class_id} / {entry.period.label} / "
            f"{entry.subject} / {entry.chapter}"
        )
        return True

    def remove_entry(self, class_id: str, index: int) -> bool:
        """현재 정렬 순서의 index번째 항목을 삭제한다."""
        plan = self._classes.get(class_id)
        if plan is None:
            logger.debug(f"remove_entry: 없는 반 {class_id!r} – 무시")
            return False
        if not 0 <= index < len(plan.entries):
            logger.debug(f"remove_entry: 범위 밖 위치 {index} – 무시")
            return False

        removed = plan.entries[index]
        plan.entries = plan.entries[:index] + plan.entries[index + 1:]
        logger.debug(f"진도 삭제: 반 {class_id} / {removed.period.label}")
        return True

    def __repr__(self) -> str:
        return f"PlanStore({len(self._classes)} classes, selected={self._selected_id!r})"
