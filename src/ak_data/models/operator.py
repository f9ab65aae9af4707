"""오퍼레이터 데이터 모델"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Mapping, Optional

from .building import BaseSkillUnlock
from .common import ItemsCost, Promotion, PromotionAndLevel, frozen_mapping
from .handbook import HandbookEntry
from .skill import Skill

# 신뢰도 보너스 상한
MAX_TRUST = 200


class Profession(Enum):
    """직군 (원본 profession 값)"""

    CASTER = "CASTER"
    MEDIC = "MEDIC"
    VANGUARD = "PIONEER"
    SNIPER = "SNIPER"
    SPECIALIST = "SPECIAL"
    SUPPORTER = "SUPPORT"
    DEFENDER = "TANK"
    GUARD = "WARRIOR"
    TOKEN = "TOKEN"  # 소환물
    TRAP = "TRAP"  # 맵 설치물


class Position(Enum):
    """배치 위치"""

    MELEE = "MELEE"
    RANGED = "RANGED"
    ALL = "ALL"
    NONE = "NONE"


@dataclass(frozen=True)
class Attributes:
    """키 프레임 능력치"""

    level: int
    max_hp: int
    atk: int
    defense: int
    magic_resistance: float
    cost: int
    block_count: int
    attack_speed: float
    base_attack_time: float
    redeploy_time: int


def _lerp(low: int, high: int, t: float) -> int:
    return round(low + (high - low) * t)


@dataclass(frozen=True)
class OperatorPromotion:
    """정예화 단계별 데이터"""

    max_level: int
    min_attributes: Optional[Attributes] = None
    max_attributes: Optional[Attributes] = None
    attack_range_id: Optional[str] = None
    upgrade_cost: ItemsCost = field(default_factory=frozen_mapping)

    def get_level_attributes(self, level: int) -> Optional[Attributes]:
        """레벨별 능력치 (HP/공격/방어만 선형 보간)"""
        low, high = self.min_attributes, self.max_attributes
        if low is None or high is None:
            return None
        if high.level == low.level:
            return replace(low, level=level)
        clamped = min(max(level, low.level), high.level)
        t = (clamped - low.level) / (high.level - low.level)
        return replace(
            low,
            level=level,
            max_hp=_lerp(low.max_hp, high.max_hp, t),
            atk=_lerp(low.atk, high.atk, t),
            defense=_lerp(low.defense, high.defense, t),
        )


@dataclass(frozen=True)
class TrustBonus:
    """신뢰도 200% 기준 추가 능력치"""

    max_hp: int = 0
    atk: int = 0
    defense: int = 0

    def at_trust(self, trust: int) -> "TrustBonus":
        t = min(max(trust, 0), MAX_TRUST) / MAX_TRUST
        return TrustBonus(
            max_hp=_lerp(0, self.max_hp, t),
            atk=_lerp(0, self.atk, t),
            defense=_lerp(0, self.defense, t),
        )


@dataclass(frozen=True)
class Potential:
    """잠재 능력 단계"""

    potential_type: str
    description: str


@dataclass(frozen=True)
class TalentPhase:
    """재능 단계 (정예화/잠재에 따라 강화)"""

    name: str
    description: str
    condition: PromotionAndLevel
    required_potential: int
    attack_range_id: Optional[str] = None
    effects: Mapping[str, float] = field(default_factory=frozen_mapping)

    def is_unlocked(self, promotion_and_level: PromotionAndLevel, potential: int) -> bool:
        return self.condition <= promotion_and_level and self.required_potential <= potential


@dataclass(frozen=True)
class Talent:
    phases: tuple[TalentPhase, ...]

    def get_unlocked(
        self, promotion_and_level: PromotionAndLevel, potential: int
    ) -> Optional[TalentPhase]:
        for phase in reversed(self.phases):
            if phase.is_unlocked(promotion_and_level, potential):
                return phase
        return None


@dataclass(frozen=True)
class SkillMastery:
    """스킬 특화 단계"""

    condition: PromotionAndLevel
    upgrade_time: int
    upgrade_cost: ItemsCost = field(default_factory=frozen_mapping)


@dataclass(frozen=True)
class SkillSlot:
    """오퍼레이터 스킬 슬롯 (캐릭터 테이블에 선언된 순서)"""

    skill_id: str
    condition: PromotionAndLevel
    prefab_key: Optional[str] = None
    masteries: tuple[SkillMastery, ...] = ()


@dataclass(frozen=True)
class AlternateFormLink:
    """이격 그룹 (char_meta_table.spCharGroups 항목)

    members[0]이 기본형입니다. 오퍼레이터를 병합하지 않고 교차 참조에만 사용합니다.
    """

    group_id: str
    members: tuple[str, ...]

    @property
    def base_id(self) -> str:
        return self.members[0]

    def others(self, operator_id: str) -> tuple[str, ...]:
        if operator_id not in self.members:
            return ()
        return tuple(m for m in self.members if m != operator_id)


@dataclass(frozen=True)
class Operator:
    """오퍼레이터 (링크 완료된 최종 엔티티)"""

    id: str
    name: str
    profession: Profession
    sub_profession: str
    position: Position
    rarity: int  # 1~6성
    nation_id: Optional[str] = None
    group_id: Optional[str] = None
    team_id: Optional[str] = None
    display_number: Optional[str] = None
    appellation: Optional[str] = None
    potential_item_id: Optional[str] = None
    recruitment_tags: tuple[str, ...] = ()
    skills: Mapping[str, Skill] = field(default_factory=frozen_mapping)
    skill_slots: tuple[SkillSlot, ...] = ()
    base_skills: tuple[BaseSkillUnlock, ...] = ()
    handbook: Optional[HandbookEntry] = None
    alternate_ids: tuple[str, ...] = ()
    promotions: tuple[OperatorPromotion, ...] = ()
    trust_bonus: TrustBonus = field(default_factory=TrustBonus)
    potentials: tuple[Potential, ...] = ()
    talents: tuple[Talent, ...] = ()

    @property
    def max_promotion(self) -> Promotion:
        return Promotion(max(len(self.promotions) - 1, 0))

    def get_promotion(self, promotion: Promotion) -> Optional[OperatorPromotion]:
        if int(promotion) < len(self.promotions):
            return self.promotions[int(promotion)]
        return None

    def get_attributes(
        self, promotion_and_level: PromotionAndLevel, trust: int = 0
    ) -> Optional[Attributes]:
        """정예화/레벨/신뢰도 기준 능력치"""
        promotion = self.get_promotion(promotion_and_level.promotion)
        if promotion is None:
            return None
        attributes = promotion.get_level_attributes(promotion_and_level.level)
        if attributes is None:
            return None
        bonus = self.trust_bonus.at_trust(trust)
        return replace(
            attributes,
            max_hp=attributes.max_hp + bonus.max_hp,
            atk=attributes.atk + bonus.atk,
            defense=attributes.defense + bonus.defense,
        )

    def get_skill_slot(self, skill_id: str) -> Optional[SkillSlot]:
        for slot in self.skill_slots:
            if slot.skill_id == skill_id:
                return slot
        return None

    def iter_unlocked_base_skills(self, promotion_and_level: PromotionAndLevel):
        """해금된 기반 스킬 (슬롯별 최고 단계만)"""
        best: dict[int, BaseSkillUnlock] = {}
        for unlock in self.base_skills:
            if unlock.is_unlocked(promotion_and_level):
                best[unlock.slot] = unlock
        return (best[slot] for slot in sorted(best))
