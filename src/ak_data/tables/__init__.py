"""게임 데이터 테이블 디코더

각 모듈은 테이블 하나의 원본 JSON을 받아 타입이 지정된 레코드로 변환합니다.
디코더는 다른 테이블을 참조하지 않습니다.
"""

from dataclasses import dataclass
from typing import Any, Callable

from . import (
    building_data,
    char_meta_table,
    character_table,
    handbook_info_table,
    item_table,
    skill_table,
)
from .building_data import BuildingTables, decode_building_data
from .char_meta_table import decode_char_meta_table
from .character_table import CharacterRecord, decode_character_table
from .handbook_info_table import decode_handbook_info_table, parse_unlock
from .item_table import decode_item_table
from .skill_table import decode_skill_table


@dataclass(frozen=True)
class TableInfo:
    """테이블 이름, 저장소 내 상대 경로, 디코더"""

    name: str
    location: str
    decoder: Callable[[Any], Any]


CHARACTER_TABLE = TableInfo(character_table.TABLE_NAME, character_table.LOCATION, decode_character_table)
CHAR_META_TABLE = TableInfo(char_meta_table.TABLE_NAME, char_meta_table.LOCATION, decode_char_meta_table)
HANDBOOK_INFO_TABLE = TableInfo(
    handbook_info_table.TABLE_NAME, handbook_info_table.LOCATION, decode_handbook_info_table
)
SKILL_TABLE = TableInfo(skill_table.TABLE_NAME, skill_table.LOCATION, decode_skill_table)
BUILDING_DATA = TableInfo(building_data.TABLE_NAME, building_data.LOCATION, decode_building_data)
ITEM_TABLE = TableInfo(item_table.TABLE_NAME, item_table.LOCATION, decode_item_table)

# 로드 순서 고정
TABLES: tuple[TableInfo, ...] = (
    CHARACTER_TABLE,
    CHAR_META_TABLE,
    HANDBOOK_INFO_TABLE,
    SKILL_TABLE,
    BUILDING_DATA,
    ITEM_TABLE,
)

TABLES_BY_NAME = {table.name: table for table in TABLES}

__all__ = [
    "BUILDING_DATA",
    "BuildingTables",
    "CHARACTER_TABLE",
    "CHAR_META_TABLE",
    "CharacterRecord",
    "HANDBOOK_INFO_TABLE",
    "ITEM_TABLE",
    "SKILL_TABLE",
    "TABLES",
    "TABLES_BY_NAME",
    "TableInfo",
    "decode_building_data",
    "decode_char_meta_table",
    "decode_character_table",
    "decode_handbook_info_table",
    "decode_item_table",
    "decode_skill_table",
    "parse_unlock",
]
