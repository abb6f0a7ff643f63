"""설정 관리자: YAML 설정 파일 읽기, 저장, 검증.

ruamel.yaml로 주석이 달린 YAML을 쓴다.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from config.defaults import default_planner_config
from config.schema import PlannerConfig

logger = logging.getLogger(__name__)

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML 주석 ───

_YAML_HEADER = f"""\
# ============================================
# 진도 계획표 생성기 - 설정
# 작성일: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "period_scheme": (
        "주차 표기",
        "week: '3주차' / month_week: '7월 3주차'. 배포마다 한 가지 방식만 사용한다.",
    ),
    "reference": (
        "교육과정",
        "과목 → 단원 목록. 진도 추가 시 단원은 반드시 이 목록에 있어야 한다.",
    ),
    "export": (
        "내보내기",
        None,
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "planner_config.yaml"

    def first_run_check(self) -> bool:
        """설정 파일이 아직 없으면 True."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── 읽기 ───

    def load(self, path: Optional[Path] = None) -> PlannerConfig:
        """YAML에서 설정을 읽고 Pydantic으로 검증한다."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            raise FileNotFoundError(
                f"설정 파일을 찾을 수 없습니다: {target}\n"
                f"'python main.py setup'으로 먼저 설정을 만드세요."
            )
        with open(target, "r", encoding="utf-8") as f:
            raw = yaml.load(f)
        try:
            return PlannerConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"설정 파일이 올바르지 않습니다: {target}\n"
                f"Pydantic 오류: {e}"
            ) from e

    def load_or_default(self, path: Optional[Path] = None) -> PlannerConfig:
        """설정 파일이 없으면 기본 설정을 돌려준다. 잘못된 파일은 그대로 ValueError."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            logger.info(f"설정 파일 없음 ({target}) – 기본 설정 사용")
            return default_planner_config()
        return self.load(target)

    # ─── 저장 ───

    def save(self, config: PlannerConfig, path: Optional[Path] = None) -> None:
        """설정을 주석 포함 YAML로 저장한다."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] 설정 저장: {target}")

    def _build_commented_yaml(self, config: PlannerConfig) -> CommentedMap:
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        if "export" in cm:
            export_map = CommentedMap(cm["export"])
            export_map.yaml_add_eol_comment("simple / modern", "style")
            cm["export"] = export_map

        return cm
