from config.schema import (
    DocumentStyle,
    ExportConfig,
    PeriodScheme,
    PlannerConfig,
    ReferenceConfig,
)


# 2015 개정 교육과정 고등학교 수학
MATH_SUBJECTS_2015: dict[str, list[str]] = {
    "수학 I": ["지수와 로그", "삼각함수", "수열"],
    "수학 II": ["함수의 극한과 연속", "미분", "적분"],
    "확률과 통계": ["경우의 수", "확률", "통계"],
    "미적분": [
        "수열의 극한", "함수의 극한과 연속", "다항함수의 미분법",
        "초월함수의 미분법", "적분법",
    ],
    "기하": ["이차곡선", "평면벡터", "공간도형과 공간좌표"],
}

# 2022 개정 교육과정 고등학교 수학 (공통수학 포함)
MATH_SUBJECTS_2022: dict[str, list[str]] = {
    "공통수학1": ["다항식", "방정식과 부등식", "경우의 수", "행렬"],
    "공통수학2": ["도형의 방정식", "집합과 명제", "함수"],
    "수학I": ["지수함수와 로그함수", "삼각함수", "수열"],
    "수학II": ["함수의 극한과 연속", "미분", "적분"],
    "확률과 통계": ["경우의 수", "확률", "통계"],
    "미적분": ["수열의 극한", "미분법", "적분법"],
    "기하": ["이차곡선", "평면벡터", "공간도형과 공간좌표"],
}

CURRICULA: dict[str, dict[str, list[str]]] = {
    "2015 개정": MATH_SUBJECTS_2015,
    "2022 개정": MATH_SUBJECTS_2022,
}


def default_reference(curriculum_name: str = "2022 개정") -> ReferenceConfig:
    """기본 참조표. 알 수 없는 교육과정 이름이면 KeyError."""
    subjects = CURRICULA[curriculum_name]
    return ReferenceConfig(
        curriculum_name=curriculum_name,
        subjects={s: list(chapters) for s, chapters in subjects.items()},
    )


def default_export() -> ExportConfig:
    return ExportConfig(style=DocumentStyle.MODERN, print_on_open=True)


def default_planner_config() -> PlannerConfig:
    """주차만 표기하는 기본 설정 (2022 개정, 카드형 문서)."""
    return PlannerConfig(
        title="수학 진도 계획표 생성기",
        period_scheme=PeriodScheme.WEEK,
        reference=default_reference(),
        export=default_export(),
    )
