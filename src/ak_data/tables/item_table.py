"""item_table.json 디코더 (items 컨테이너)"""

from typing import Any, Optional

from pydantic import Field

from ..models.item import Item, ItemClass, StageDrop
from .fields import OptionalText, RawRecord, Text, Tier, decode_records, get_container

TABLE_NAME = "item_table"
LOCATION = "excel/item_table.json"


class RawStageDrop(RawRecord):
    stage_id: str = Field(alias="stageId")
    occ_per: Text = Field("", alias="occPer")


class RawItem(RawRecord):
    item_id: str = Field(alias="itemId")
    name: str
    description: OptionalText = None
    rarity: Tier = 0
    icon_id: OptionalText = Field(None, alias="iconId")
    sort_id: int = Field(0, alias="sortId")
    usage: OptionalText = None
    obtain_approach: OptionalText = Field(None, alias="obtainApproach")
    classify_type: ItemClass = Field(ItemClass.OTHER, alias="classifyType")
    item_type: Text = Field("NONE", alias="itemType")
    stage_drop_list: Optional[list[RawStageDrop]] = Field(None, alias="stageDropList")

    def to_item(self) -> Item:
        drops = None
        if self.stage_drop_list is not None:
            drops = tuple(StageDrop(d.stage_id, d.occ_per) for d in self.stage_drop_list)
        return Item(
            id=self.item_id,
            name=self.name,
            rarity=self.rarity,
            item_class=self.classify_type,
            item_type=self.item_type,
            sort_id=self.sort_id,
            description=self.description,
            usage=self.usage,
            obtain_approach=self.obtain_approach,
            icon_id=self.icon_id,
            stage_drops=drops,
        )


def decode_item_table(raw: Any) -> dict[str, Item]:
    """item_table.json → {item_id: Item}"""
    entries = get_container(TABLE_NAME, raw, "items")
    records = decode_records(TABLE_NAME, entries, RawItem, id_field="itemId")
    return {item_id: record.to_item() for item_id, record in records.items()}
