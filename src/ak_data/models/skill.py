"""스킬 데이터 모델

Skill은 스킬 테이블이 소유하며, 오퍼레이터는 같은 인스턴스를 참조로 공유합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from ..common.text import strip_tags, template_keys
from .common import frozen_mapping


class SkillActivation(Enum):
    """스킬 발동 방식"""

    PASSIVE = 0
    MANUAL = 1
    AUTO = 2


class SkillRecovery(Enum):
    """SP 회복 방식"""

    AUTO_RECOVERY = 1  # 자연 회복
    OFFENSIVE_RECOVERY = 2  # 공격 회복
    DEFENSIVE_RECOVERY = 4  # 피격 회복
    PASSIVE = 8


@dataclass(frozen=True)
class SkillLevel:
    """스킬 랭크별 데이터 (1~7랭크 + 특화 1~3)"""

    name: str
    description: Optional[str]  # 원본 템플릿 ("{atk:0%}" 등 치환 전)
    activation: SkillActivation
    recovery: SkillRecovery
    duration: float
    sp_cost: int
    initial_sp: int
    max_charge_time: int
    increment: float
    attack_range_id: Optional[str] = None
    prefab_key: Optional[str] = None
    blackboard: Mapping[str, float] = field(default_factory=frozen_mapping)

    @property
    def plain_description(self) -> Optional[str]:
        """리치 텍스트 태그를 제거한 설명 (플레이스홀더는 유지)"""
        if self.description is None:
            return None
        return strip_tags(self.description)

    @property
    def placeholder_keys(self) -> list[str]:
        """설명 템플릿에 남아 있는 플레이스홀더 키"""
        if self.description is None:
            return []
        return template_keys(self.description)


@dataclass(frozen=True)
class Skill:
    """스킬 (skill_table 항목)"""

    id: str
    name: str
    levels: tuple[SkillLevel, ...]
    icon_id: Optional[str] = None

    @property
    def description(self) -> Optional[str]:
        """1랭크 설명 템플릿"""
        return self.levels[0].description if self.levels else None

    @property
    def activation(self) -> Optional[SkillActivation]:
        return self.levels[0].activation if self.levels else None

    @property
    def recovery(self) -> Optional[SkillRecovery]:
        return self.levels[0].recovery if self.levels else None

    @property
    def max_rank(self) -> int:
        return len(self.levels)

    def get_level(self, rank: int) -> Optional[SkillLevel]:
        """랭크(1부터 시작)별 데이터 조회. 특화 1~3은 랭크 8~10"""
        if 1 <= rank <= len(self.levels):
            return self.levels[rank - 1]
        return None
