"""진도 계획 저장소: 반과 진도 항목의 생성, 선택, 삭제."""

from planner.store import PlanStore

__all__ = ["PlanStore"]
