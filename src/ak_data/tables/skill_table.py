"""skill_table.json 디코더

키: 스킬 ID (skchr_..., skcom_...)
설명 텍스트의 플레이스홀더({atk:0%} 등)는 치환하지 않고 원본 그대로 보관합니다.
"""

import logging
from typing import Any

from pydantic import Field

from ..errors import MalformedRecord
from ..models.skill import Skill, SkillActivation, SkillLevel, SkillRecovery
from .fields import (
    Activation,
    ListOrEmpty,
    OptionalText,
    RawBlackboard,
    RawRecord,
    Recovery,
    blackboard,
    decode_records,
    get_container,
)

logger = logging.getLogger(__name__)

TABLE_NAME = "skill_table"
LOCATION = "excel/skill_table.json"

# 설명이 없는 스킬은 "-" 로 채워져 있음
_EMPTY_DESCRIPTIONS = {"", "-"}


class RawSpData(RawRecord):
    sp_type: Recovery = Field(SkillRecovery.AUTO_RECOVERY, alias="spType")
    max_charge_time: int = Field(1, alias="maxChargeTime")
    sp_cost: int = Field(0, alias="spCost")
    init_sp: int = Field(0, alias="initSp")
    increment: float = 1.0


class RawSkillLevel(RawRecord):
    name: str
    range_id: OptionalText = Field(None, alias="rangeId")
    description: OptionalText = None
    skill_type: Activation = Field(SkillActivation.MANUAL, alias="skillType")
    sp_data: RawSpData = Field(default_factory=RawSpData, alias="spData")
    prefab_id: OptionalText = Field(None, alias="prefabId")
    duration: float = 0.0
    blackboard: ListOrEmpty[RawBlackboard] = Field(default_factory=list)

    def to_level(self) -> SkillLevel:
        description = self.description
        if description is not None and description.strip() in _EMPTY_DESCRIPTIONS:
            description = None
        return SkillLevel(
            name=self.name,
            description=description,
            activation=self.skill_type,
            recovery=self.sp_data.sp_type,
            duration=self.duration,
            sp_cost=self.sp_data.sp_cost,
            initial_sp=self.sp_data.init_sp,
            max_charge_time=self.sp_data.max_charge_time,
            increment=self.sp_data.increment,
            attack_range_id=self.range_id,
            prefab_key=self.prefab_id,
            blackboard=blackboard(self.blackboard),
        )


class RawSkill(RawRecord):
    skill_id: str = Field(alias="skillId")
    icon_id: OptionalText = Field(None, alias="iconId")
    levels: ListOrEmpty[RawSkillLevel] = Field(default_factory=list)


def decode_skill_table(raw: Any) -> dict[str, Skill]:
    """skill_table.json → {skill_id: Skill}

    이름은 1랭크 이름을 사용합니다. 랭크가 하나도 없는 스킬은 MalformedRecord.
    """
    entries = get_container(TABLE_NAME, raw)
    records = decode_records(TABLE_NAME, entries, RawSkill, id_field="skillId")

    skills: dict[str, Skill] = {}
    for skill_id, record in records.items():
        if not record.levels:
            raise MalformedRecord(TABLE_NAME, skill_id, "levels가 비어 있습니다")
        levels = tuple(level.to_level() for level in record.levels)
        skills[skill_id] = Skill(
            id=skill_id,
            name=levels[0].name,
            levels=levels,
            icon_id=record.icon_id,
        )
    return skills
