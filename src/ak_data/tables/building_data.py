"""building_data.json 디코더

세 컨테이너를 사용합니다:
    buffs - 기반 스킬 정의
    chars - 캐릭터별 기반 스킬 슬롯 (buffChar[슬롯].buffData[단계])
    rooms - 시설 정의
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from pydantic import Field, field_validator

from ..common.text import strip_tags
from ..models.building import BaseSkill, BaseSkillUnlock, Building, BuildingUpgrade
from ..models.common import frozen_mapping
from .fields import (
    ListOrEmpty,
    OptionalText,
    RawCondition,
    RawItemCost,
    RawRecord,
    Text,
    decode_records,
    get_container,
    items_cost,
)

logger = logging.getLogger(__name__)

TABLE_NAME = "building_data"
LOCATION = "excel/building_data.json"


class RawBuff(RawRecord):
    buff_id: str = Field(alias="buffId")
    buff_name: str = Field(alias="buffName")
    room_type: Text = Field("NONE", alias="roomType")
    buff_category: Text = Field("FUNCTION", alias="buffCategory")
    sort_id: int = Field(0, alias="sortId")
    description: OptionalText = None


class RawBuffPhase(RawRecord):
    buff_id: str = Field(alias="buffId")
    cond: RawCondition = Field(default_factory=RawCondition)


class RawBuffSlot(RawRecord):
    buff_data: ListOrEmpty[RawBuffPhase] = Field(default_factory=list, alias="buffData")


class RawBuildingChar(RawRecord):
    buff_char: ListOrEmpty[RawBuffSlot] = Field(default_factory=list, alias="buffChar")


class RawBuildCost(RawRecord):
    items: ListOrEmpty[RawItemCost] = Field(default_factory=list)
    labor: int = 0


class RawRoomPhase(RawRecord):
    unlock_cond_id: Text = Field("", alias="unlockCondId")
    build_cost: RawBuildCost = Field(default_factory=RawBuildCost, alias="buildCost")
    electricity: int = 0
    max_stationed_num: int = Field(0, alias="maxStationedNum")
    manpower_cost: int = Field(0, alias="manpowerCost")

    def to_upgrade(self) -> BuildingUpgrade:
        return BuildingUpgrade(
            unlock_condition=self.unlock_cond_id,
            construction_drones=self.build_cost.labor,
            power=self.electricity,
            operator_capacity=self.max_stationed_num,
            manpower_cost=self.manpower_cost,
            construction_cost=items_cost(self.build_cost.items),
        )


class RawRoomSize(RawRecord):
    row: int = 1
    col: int = 1


class RawRoom(RawRecord):
    id: str
    name: str
    description: OptionalText = None
    max_count: Optional[int] = Field(None, alias="maxCount")
    category: Text = "NONE"
    size: RawRoomSize = Field(default_factory=RawRoomSize)
    phases: ListOrEmpty[RawRoomPhase] = Field(default_factory=list)

    @field_validator("max_count")
    @classmethod
    def _negative_is_unlimited(cls, value: Optional[int]) -> Optional[int]:
        # -1 등 음수는 제한 없음
        if value is not None and value < 0:
            return None
        return value

    def to_building(self) -> Building:
        return Building(
            room_type=self.id,
            name=self.name,
            category=self.category,
            size=(self.size.col, self.size.row),
            description=self.description,
            max_count=self.max_count,
            upgrades=tuple(phase.to_upgrade() for phase in self.phases),
        )


@dataclass(frozen=True)
class BuildingTables:
    """building_data 디코딩 결과"""

    base_skills: Mapping[str, BaseSkill] = field(default_factory=frozen_mapping)
    # 캐릭터 ID → 해금 목록 (원본 순서)
    unlocks: Mapping[str, tuple[BaseSkillUnlock, ...]] = field(default_factory=frozen_mapping)
    buildings: Mapping[str, Building] = field(default_factory=frozen_mapping)


def _collect_owners(chars: Mapping[str, RawBuildingChar]) -> dict[str, list[str]]:
    owners: dict[str, list[str]] = {}
    for char_id in sorted(chars):
        for slot in chars[char_id].buff_char:
            for phase in slot.buff_data:
                ids = owners.setdefault(phase.buff_id, [])
                if char_id not in ids:
                    ids.append(char_id)
    return owners


def decode_building_data(raw: Any) -> BuildingTables:
    """building_data.json → BuildingTables

    알 수 없는 buffId를 참조하는 해금 항목은 버립니다.
    """
    buffs = decode_records(TABLE_NAME, get_container(TABLE_NAME, raw, "buffs"), RawBuff, "buffId")
    chars = decode_records(TABLE_NAME, get_container(TABLE_NAME, raw, "chars"), RawBuildingChar)
    rooms = decode_records(TABLE_NAME, get_container(TABLE_NAME, raw, "rooms"), RawRoom, "id")

    owners = _collect_owners(chars)
    base_skills = {
        buff_id: BaseSkill(
            id=buff_id,
            name=buff.buff_name,
            room_type=buff.room_type,
            category=buff.buff_category,
            sort=buff.sort_id,
            description=strip_tags(buff.description) if buff.description else None,
            owner_ids=tuple(owners.get(buff_id, ())),
        )
        for buff_id, buff in buffs.items()
    }

    unlocks: dict[str, tuple[BaseSkillUnlock, ...]] = {}
    dropped = 0
    for char_id, char in chars.items():
        entries = []
        for slot_index, slot in enumerate(char.buff_char):
            for phase in slot.buff_data:
                base_skill = base_skills.get(phase.buff_id)
                if base_skill is None:
                    dropped += 1
                    continue
                entries.append(
                    BaseSkillUnlock(base_skill, slot_index, phase.cond.to_promotion_and_level())
                )
        unlocks[char_id] = tuple(entries)
    if dropped:
        logger.debug(f"{TABLE_NAME}: 알 수 없는 buffId {dropped}건 무시")

    buildings = {room_id: room.to_building() for room_id, room in rooms.items()}

    return BuildingTables(
        base_skills=frozen_mapping(base_skills),
        unlocks=frozen_mapping(unlocks),
        buildings=frozen_mapping(buildings),
    )
