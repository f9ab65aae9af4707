"""아이템 모델"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ItemClass(Enum):
    """아이템 분류 (classifyType)"""

    CONSUMABLE = "CONSUME"
    BASIC_ITEM = "NORMAL"
    MATERIAL = "MATERIAL"
    OTHER = "NONE"


@dataclass(frozen=True)
class StageDrop:
    """스테이지 드롭 정보 (획득처)"""

    stage_id: str
    occurrence: str  # ALWAYS, ALMOST, USUAL, OFTEN, SOMETIMES ...


@dataclass(frozen=True)
class Item:
    """아이템 (item_table.items 항목)"""

    id: str
    name: str
    rarity: int  # 원본 등급 (0부터 시작)
    item_class: ItemClass
    item_type: str
    sort_id: int = 0
    description: Optional[str] = None
    usage: Optional[str] = None
    obtain_approach: Optional[str] = None
    icon_id: Optional[str] = None
    stage_drops: Optional[tuple[StageDrop, ...]] = None
