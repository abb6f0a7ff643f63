"""과목 → 단원 참조표 (읽기 전용)."""

from types import MappingProxyType
from typing import Mapping

from config.schema import ReferenceConfig


class ReferenceTable:
    """과목별 단원 목록을 조회한다. 생성 후 바꿀 수 없다."""

    def __init__(self, subjects: Mapping[str, list[str]]):
        self._subjects = MappingProxyType(
            {s: tuple(chapters) for s, chapters in subjects.items()}
        )

    @classmethod
    def from_config(cls, ref: ReferenceConfig) -> "ReferenceTable":
        return cls(ref.subjects)

    @property
    def subjects(self) -> list[str]:
        return list(self._subjects)

    def chapters(self, subject: str) -> list[str]:
        """과목의 단원 목록. 모르는 과목이면 빈 목록."""
        return list(self._subjects.get(subject, ()))

    def is_valid(self, subject: str, chapter: str) -> bool:
        return chapter in self._subjects.get(subject, ())

    def __contains__(self, subject: object) -> bool:
        return subject in self._subjects

    def __len__(self) -> int:
        return len(self._subjects)

    def __repr__(self) -> str:
        return f"ReferenceTable({len(self._subjects)} subjects)"
