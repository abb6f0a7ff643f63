"""진도 항목 모델과 입력 중인 항목(초안)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from config.schema import PeriodScheme
from models.period import Period


class WeeklyEntry(BaseModel):
    """한 주차의 진도. 저장된 뒤에는 바뀌지 않는다.

    고유 식별자가 없으며 반의 정렬된 목록 안의 위치로만 가리킨다.
    """

    model_config = ConfigDict(frozen=True)

    period: Period
    subject: str
    chapter: str
    details: str = ""

    @property
    def has_details(self) -> bool:
        return bool(self.details.strip())


class EntryDraft(BaseModel):
    """입력 화면에서 작성 중인 진도 항목.

    - 과목을 고르면 단원은 항상 비워진다 (같은 과목을 다시 골라도).
    - 추가에 성공하면 advance()로 다음 주차로 넘어가고 나머지 칸은 비워진다.
    """

    model_config = ConfigDict(validate_assignment=True)

    month: int = Field(1, ge=1, le=12)
    week: int = Field(1, ge=1)
    subject: str = ""
    chapter: str = ""
    details: str = ""

    def select_subject(self, subject: str) -> None:
        self.subject = subject
        self.chapter = ""

    def select_chapter(self, chapter: str) -> None:
        self.chapter = chapter

    def set_details(self, details: str) -> None:
        self.details = details

    def set_period(self, week: int, month: Optional[int] = None) -> None:
        self.week = week
        if month is not None:
            self.month = month

    @property
    def is_complete(self) -> bool:
        """필수 칸(과목, 단원)이 채워졌는지."""
        return bool(self.subject) and bool(self.chapter)

    def period(self, scheme: PeriodScheme) -> Period:
        if scheme == PeriodScheme.MONTH_WEEK:
            return Period(week=self.week, month=self.month)
        return Period(week=self.week)

    def to_entry(self, scheme: PeriodScheme) -> WeeklyEntry:
        return WeeklyEntry(
            period=self.period(scheme),
            subject=self.subject,
            chapter=self.chapter,
            details=self.details,
        )

    def advance(self) -> None:
        """다음 주차 기본값으로 넘어간다. 월은 유지한다."""
        self.week += 1
        self.subject = ""
        self.chapter = ""
        self.details = ""
