from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional
from enum import Enum


class PeriodScheme(str, Enum):
    WEEK = "week"
    MONTH_WEEK = "month_week"


class DocumentStyle(str, Enum):
    SIMPLE = "simple"
    MODERN = "modern"


# ─── 교육과정 (과목 → 단원) ───

class ReferenceConfig(BaseModel):
    """과목별 단원 목록 (읽기 전용 참조표).

    과목 순서와 단원 순서는 입력 화면의 선택지 순서 그대로 유지된다.
    """
    # 교육과정 이름 (예: "2022 개정")
    curriculum_name: str = Field("2022 개정",
        description="교육과정 이름")
    # 과목 → 단원 목록
    subjects: dict[str, list[str]] = Field(
        description="과목별 단원 목록")

    @field_validator("subjects")
    @classmethod
    def validate_subjects(cls, v: dict[str, list[str]]) -> dict[str, list[str]]:
        """빈 과목명, 빈 단원 목록, 중복 단원을 거부한다."""
        if not v:
            raise ValueError("과목이 하나 이상 필요합니다")
        for subject, chapters in v.items():
            if not subject.strip():
                raise ValueError("과목 이름이 비어 있습니다")
            if not chapters:
                raise ValueError(f"과목 '{subject}'에 단원이 없습니다")
            if any(not c.strip() for c in chapters):
                raise ValueError(f"과목 '{subject}'에 빈 단원 이름이 있습니다")
            if len(set(chapters)) != len(chapters):
                raise ValueError(f"과목 '{subject}'에 중복된 단원이 있습니다")
        return v


# ─── 내보내기 ───

class ExportConfig(BaseModel):
    """인쇄용 문서 설정."""
    # 문서 스타일 (simple: 기본 표, modern: 카드형 레이아웃)
    style: DocumentStyle = Field(DocumentStyle.MODERN,
        description="문서 스타일")
    # 브라우저로 열 때 인쇄 대화상자 자동 실행
    print_on_open: bool = Field(True,
        description="열 때 인쇄 대화상자 실행")
    # PDF용 한글 TTF 폰트 경로 (없으면 시스템 폰트 탐색)
    pdf_font_path: Optional[str] = Field(None,
        description="PDF 한글 폰트(TTF) 경로")
    # 파일 내보내기 기본 폴더
    output_dir: str = Field("output",
        description="파일 내보내기 폴더")


# ─── 전체 설정 ───

class PlannerConfig(BaseModel):
    """진도 계획표 생성기 전체 설정."""
    # 화면 제목
    title: str = Field("수학 진도 계획표 생성기",
        description="프로그램 제목")
    # 주차 표기 방식 (주차만 / 월+주차)
    period_scheme: PeriodScheme = Field(PeriodScheme.WEEK,
        description="주차 표기 방식")
    # 선택 가능한 월
    month_choices: list[int] = Field(
        default=list(range(1, 13)),
        description="선택 가능한 월")
    # 월+주차 방식에서 선택 가능한 주차 (주차만 방식은 1 이상 아무 값)
    week_choices: list[int] = Field(
        default=[1, 2, 3, 4, 5],
        description="선택 가능한 주차")
    # 과목/단원 참조표
    reference: ReferenceConfig
    # 내보내기 설정
    export: ExportConfig = Field(default_factory=ExportConfig)

    @model_validator(mode='after')
    def validate_choices(self):
        """월은 1~12, 주차는 양수여야 한다."""
        if not self.week_choices:
            raise ValueError("주차 선택지가 비어 있습니다")
        if any(w < 1 for w in self.week_choices):
            raise ValueError(f"주차는 1 이상이어야 합니다: {self.week_choices}")
        if self.period_scheme == PeriodScheme.MONTH_WEEK and not self.month_choices:
            raise ValueError("월+주차 방식에는 월 선택지가 필요합니다")
        if any(not 1 <= m <= 12 for m in self.month_choices):
            raise ValueError(f"월은 1~12 사이여야 합니다: {self.month_choices}")
        return self
