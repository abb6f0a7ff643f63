"""반별 진도 계획 모델 (Pydantic v2)."""

from pydantic import BaseModel, Field

from models.weekly_entry import WeeklyEntry


class ClassPlan(BaseModel):
    """반 하나와 그 반의 진도 항목들.

    entries는 항상 주차 오름차순으로 유지된다 (같은 주차는 추가한 순서).
    """

    id: str
    name: str = Field(min_length=1)
    entries: list[WeeklyEntry] = []

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def insert_sorted(self, entry: WeeklyEntry) -> None:
        """항목을 추가하고 정렬 순서를 다시 맞춘다. sorted()는 안정 정렬이다."""
        self.entries = sorted(
            [*self.entries, entry], key=lambda e: e.period.sort_key
        )

    def snapshot(self) -> "ClassPlan":
        """내보내기용 복사본. 항목은 불변이라 얕은 복사로 충분하다."""
        return self.model_copy(update={"entries": list(self.entries)})
