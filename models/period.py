"""주차 모델: 진도 항목의 정렬 기준 (Pydantic v2)."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from config.schema import PeriodScheme


class Period(BaseModel):
    """주차 하나. 월이 없으면 '주차만' 방식, 있으면 '월+주차' 방식이다.

    정렬 키는 (월, 주차). 월이 없는 항목은 월 0으로 취급한다.
    """

    model_config = ConfigDict(frozen=True)

    week: int = Field(ge=1)
    month: Optional[int] = Field(None, ge=1, le=12)

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.month or 0, self.week)

    @property
    def scheme(self) -> PeriodScheme:
        return PeriodScheme.WEEK if self.month is None else PeriodScheme.MONTH_WEEK

    @property
    def label(self) -> str:
        """표시용 문자열: '3주차' 또는 '7월 3주차'."""
        if self.month is None:
            return f"{self.week}주차"
        return f"{self.month}월 {self.week}주차"

    def next(self) -> "Period":
        """같은 월의 다음 주차."""
        return Period(week=self.week + 1, month=self.month)

    def __str__(self) -> str:
        return self.label
