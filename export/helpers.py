"""HTML, PDF, Excel 내보내기가 함께 쓰는 상수와 보조 함수."""

from datetime import date

from config.schema import DocumentStyle

# ─── 색상 (RRGGBB, # 없음) ────────────────────────────────────────────────────

COLORS: dict[str, str] = {
    "subject":     "2563EB",
    "chapter":     "DC2626",
    "title":       "1E40AF",
    "header":      "F1F5F9",
    "header_text": "334155",
    "border":      "E2E8F0",
    "muted":       "64748B",
}

# 표 열 순서는 고정이다
COLUMNS: tuple[str, ...] = ("주차", "과목", "단원", "세부 내용")

# 세부 내용이 비었을 때 표시
EMPTY_DETAILS = "-"

CAPTIONS: dict[DocumentStyle, str] = {
    DocumentStyle.SIMPLE: "주차별 진도 계획표",
    DocumentStyle.MODERN: "진도 계획표",
}


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """RRGGBB 문자열을 (r, g, b)로 바꾼다."""
    h = hex_color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def today_str() -> str:
    """오늘 날짜 (YYYY.MM.DD)."""
    return date.today().strftime("%Y.%m.%d")


def title_text(class_name: str, style: DocumentStyle) -> str:
    return f"{class_name} {CAPTIONS[style]}"


def summary_text(entry_count: int) -> str:
    """요약 줄: '총 N주차 계획'."""
    return f"총 {entry_count}주차 계획"


def format_details(details: str) -> str:
    return details if details.strip() else EMPTY_DETAILS
