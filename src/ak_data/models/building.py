"""기반 시설(building_data) 모델"""

from dataclasses import dataclass, field
from typing import Optional

from .common import ItemsCost, PromotionAndLevel, frozen_mapping


@dataclass(frozen=True)
class BaseSkill:
    """기반 스킬 (building_data.buffs 항목)

    owner_ids: 이 스킬을 부여하는 캐릭터 ID (chars 테이블 기준, ID 순)
    """

    id: str
    name: str
    room_type: str  # MANUFACTURE, TRADING, CONTROL ...
    category: str  # FUNCTION, RECOVERY, OUTPUT
    sort: int
    description: Optional[str] = None
    owner_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class BaseSkillUnlock:
    """오퍼레이터의 기반 스킬 해금 항목"""

    base_skill: BaseSkill
    slot: int  # buffChar 인덱스 (같은 슬롯 = 같은 스킬의 강화 단계)
    condition: PromotionAndLevel

    @property
    def id(self) -> str:
        return self.base_skill.id

    @property
    def name(self) -> str:
        return self.base_skill.name

    @property
    def room_type(self) -> str:
        return self.base_skill.room_type

    def is_unlocked(self, promotion_and_level: PromotionAndLevel) -> bool:
        return self.condition <= promotion_and_level


@dataclass(frozen=True)
class BuildingUpgrade:
    """시설 레벨별 건설 정보"""

    unlock_condition: str
    construction_drones: int
    power: int
    operator_capacity: int
    manpower_cost: int
    construction_cost: ItemsCost = field(default_factory=frozen_mapping)


@dataclass(frozen=True)
class Building:
    """기반 시설 (building_data.rooms 항목)"""

    room_type: str
    name: str
    category: str
    size: tuple[int, int]  # (col, row)
    description: Optional[str] = None
    max_count: Optional[int] = None  # 음수(무제한)는 None
    upgrades: tuple[BuildingUpgrade, ...] = ()
