"""character_table.json 디코더

키: 캐릭터 ID (char_002_amiya, token_10000_silent_healrb, trap_001_crate ...)
플레이어블 여부는 여기서 판단하지 않습니다 (character.playable_filter 담당).
"""

import logging
from typing import Any, Optional

from pydantic import Field

from ..models.common import PromotionAndLevel
from ..models.operator import (
    Attributes,
    OperatorPromotion,
    Position,
    Potential,
    Profession,
    SkillMastery,
    Talent,
    TalentPhase,
    TrustBonus,
)
from ..common.text import strip_tags
from .fields import (
    ListOrEmpty,
    OptionalText,
    RawBlackboard,
    RawCondition,
    RawItemCost,
    RawRecord,
    Text,
    Tier,
    blackboard,
    decode_records,
    get_container,
    items_cost,
)

logger = logging.getLogger(__name__)

TABLE_NAME = "character_table"
LOCATION = "excel/character_table.json"


class RawAttributeData(RawRecord):
    max_hp: int = Field(0, alias="maxHp")
    atk: int = 0
    defense: int = Field(0, alias="def")
    magic_resistance: float = Field(0.0, alias="magicResistance")
    cost: int = 0
    block_count: int = Field(0, alias="blockCnt")
    attack_speed: float = Field(100.0, alias="attackSpeed")
    base_attack_time: float = Field(0.0, alias="baseAttackTime")
    respawn_time: int = Field(0, alias="respawnTime")


class RawKeyFrame(RawRecord):
    level: int
    data: RawAttributeData

    def to_attributes(self) -> Attributes:
        d = self.data
        return Attributes(
            level=self.level,
            max_hp=d.max_hp,
            atk=d.atk,
            defense=d.defense,
            magic_resistance=d.magic_resistance,
            cost=d.cost,
            block_count=d.block_count,
            attack_speed=d.attack_speed,
            base_attack_time=d.base_attack_time,
            redeploy_time=d.respawn_time,
        )


class RawPhase(RawRecord):
    range_id: OptionalText = Field(None, alias="rangeId")
    max_level: int = Field(1, alias="maxLevel")
    key_frames: ListOrEmpty[RawKeyFrame] = Field(default_factory=list, alias="attributesKeyFrames")
    evolve_cost: ListOrEmpty[RawItemCost] = Field(default_factory=list, alias="evolveCost")

    def to_promotion(self) -> OperatorPromotion:
        frames = [frame.to_attributes() for frame in self.key_frames]
        return OperatorPromotion(
            max_level=self.max_level,
            min_attributes=frames[0] if frames else None,
            max_attributes=frames[-1] if frames else None,
            attack_range_id=self.range_id,
            upgrade_cost=items_cost(self.evolve_cost),
        )


class RawMastery(RawRecord):
    unlock_cond: RawCondition = Field(default_factory=RawCondition, alias="unlockCond")
    level_up_time: int = Field(0, alias="lvlUpTime")
    level_up_cost: ListOrEmpty[RawItemCost] = Field(default_factory=list, alias="levelUpCost")

    def to_mastery(self) -> SkillMastery:
        return SkillMastery(
            condition=self.unlock_cond.to_promotion_and_level(),
            upgrade_time=self.level_up_time,
            upgrade_cost=items_cost(self.level_up_cost),
        )


class RawCharSkill(RawRecord):
    """캐릭터가 선언한 스킬 슬롯 (skillId는 null일 수 있음)"""

    skill_id: OptionalText = Field(None, alias="skillId")
    override_prefab_key: OptionalText = Field(None, alias="overridePrefabKey")
    masteries: ListOrEmpty[RawMastery] = Field(default_factory=list, alias="levelUpCostCond")
    unlock_cond: RawCondition = Field(default_factory=RawCondition, alias="unlockCond")

    @property
    def condition(self) -> PromotionAndLevel:
        return self.unlock_cond.to_promotion_and_level()


class RawTalentCandidate(RawRecord):
    unlock_condition: RawCondition = Field(default_factory=RawCondition, alias="unlockCondition")
    required_potential_rank: int = Field(0, alias="requiredPotentialRank")
    name: OptionalText = None
    description: OptionalText = None
    range_id: OptionalText = Field(None, alias="rangeId")
    blackboard: ListOrEmpty[RawBlackboard] = Field(default_factory=list)

    def to_phase(self) -> Optional[TalentPhase]:
        # 이름/설명이 빠진 후보는 표시할 수 없으므로 건너뜀
        if self.name is None or self.description is None:
            return None
        return TalentPhase(
            name=self.name,
            description=strip_tags(self.description),
            condition=self.unlock_condition.to_promotion_and_level(),
            required_potential=self.required_potential_rank,
            attack_range_id=self.range_id,
            effects=blackboard(self.blackboard),
        )


class RawTalent(RawRecord):
    candidates: ListOrEmpty[RawTalentCandidate] = Field(default_factory=list)

    def to_talent(self) -> Optional[Talent]:
        phases = tuple(p for p in (c.to_phase() for c in self.candidates) if p is not None)
        return Talent(phases) if phases else None


class RawPotentialRank(RawRecord):
    type: Text = "BUFF"
    description: str = ""

    def to_potential(self) -> Potential:
        return Potential(potential_type=self.type, description=strip_tags(self.description))


class CharacterRecord(RawRecord):
    """디코딩된 캐릭터 레코드 (링크 전 중간 형태)"""

    id: str
    name: str
    description: OptionalText = None
    nation_id: OptionalText = Field(None, alias="nationId")
    group_id: OptionalText = Field(None, alias="groupId")
    team_id: OptionalText = Field(None, alias="teamId")
    display_number: OptionalText = Field(None, alias="displayNumber")
    appellation: OptionalText = None
    potential_item_id: OptionalText = Field(None, alias="potentialItemId")
    position: Position = Position.NONE
    tag_list: ListOrEmpty[str] = Field(default_factory=list, alias="tagList")
    is_not_obtainable: bool = Field(False, alias="isNotObtainable")
    rarity: Tier = 0
    profession: Profession
    sub_profession_id: str = Field("", alias="subProfessionId")
    phases: ListOrEmpty[RawPhase] = Field(default_factory=list)
    skills: ListOrEmpty[RawCharSkill] = Field(default_factory=list)
    talents: ListOrEmpty[RawTalent] = Field(default_factory=list)
    potential_ranks: ListOrEmpty[RawPotentialRank] = Field(default_factory=list, alias="potentialRanks")
    favor_key_frames: Optional[list[RawKeyFrame]] = Field(None, alias="favorKeyFrames")

    @property
    def stars(self) -> int:
        """1~6성"""
        return self.rarity + 1

    @property
    def declared_skill_ids(self) -> list[str]:
        return [s.skill_id for s in self.skills if s.skill_id is not None]

    def to_promotions(self) -> tuple[OperatorPromotion, ...]:
        return tuple(phase.to_promotion() for phase in self.phases)

    def to_trust_bonus(self) -> TrustBonus:
        if not self.favor_key_frames:
            return TrustBonus()
        data = self.favor_key_frames[-1].data
        return TrustBonus(max_hp=data.max_hp, atk=data.atk, defense=data.defense)

    def to_potentials(self) -> tuple[Potential, ...]:
        return tuple(rank.to_potential() for rank in self.potential_ranks)

    def to_talents(self) -> tuple[Talent, ...]:
        talents = (t.to_talent() for t in self.talents)
        return tuple(t for t in talents if t is not None)


def decode_character_table(raw: Any) -> dict[str, CharacterRecord]:
    """character_table.json → {char_id: CharacterRecord}"""
    entries = get_container(TABLE_NAME, raw)
    return decode_records(TABLE_NAME, entries, CharacterRecord, id_field="id")
