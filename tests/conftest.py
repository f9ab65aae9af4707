"""테스트 공통 픽스처

실제 테이블 구조를 축소한 여섯 개 테이블을 tmp_path/excel/ 에 기록합니다.
"""

import asyncio
import copy
import json
from pathlib import Path
from typing import Any

import pytest

from ak_data.game_data import GameData


def _key_frame(level: int, max_hp: int, atk: int, defense: int) -> dict[str, Any]:
    return {
        "level": level,
        "data": {
            "maxHp": max_hp,
            "atk": atk,
            "def": defense,
            "magicResistance": 0.0,
            "cost": 9,
            "blockCnt": 1,
            "attackSpeed": 100.0,
            "baseAttackTime": 1.0,
            "respawnTime": 70,
        },
    }


CHARACTER_TABLE: dict[str, Any] = {
    "char_003_kroos": {
        "name": "Kroos",
        "description": "Attacks deal physical damage",
        "nationId": "rhodes",
        "groupId": None,
        "teamId": None,
        "displayNumber": "R001",
        "appellation": "Kroos",
        "position": "RANGED",
        "tagList": ["DPS"],
        "isNotObtainable": False,
        "rarity": "TIER_3",
        "profession": "SNIPER",
        "subProfessionId": "fastshot",
        "potentialItemId": "p_char_003_kroos",
        "phases": [
            {
                "rangeId": "3-1",
                "maxLevel": 50,
                "attributesKeyFrames": [
                    _key_frame(1, 600, 200, 50),
                    _key_frame(50, 1090, 375, 100),
                ],
                "evolveCost": None,
            },
            {
                "rangeId": "3-1",
                "maxLevel": 70,
                "attributesKeyFrames": [
                    _key_frame(1, 1090, 375, 100),
                    _key_frame(70, 1290, 460, 120),
                ],
                "evolveCost": [{"id": "4001", "count": 10000, "type": "GOLD"}],
            },
        ],
        "skills": [
            {
                "skillId": "skill_kroos_1",
                "overridePrefabKey": None,
                "overrideTokenKey": None,
                "levelUpCostCond": [
                    {
                        "unlockCond": {"phase": "PHASE_1", "level": 70},
                        "lvlUpTime": 28800,
                        "levelUpCost": [{"id": "3301", "count": 2, "type": "MATERIAL"}],
                    }
                ],
                "unlockCond": {"phase": 0, "level": 1},
            }
        ],
        "talents": [
            {
                "candidates": [
                    {
                        "unlockCondition": {"phase": "PHASE_0", "level": 1},
                        "requiredPotentialRank": 0,
                        "name": "Crit Up",
                        "description": "<@ba.kw>20%</> chance to crit",
                        "rangeId": None,
                        "blackboard": [{"key": "PROB", "value": 0.2}],
                    },
                    {
                        "unlockCondition": {"phase": "PHASE_1", "level": 1},
                        "requiredPotentialRank": 0,
                        "name": "Crit Up",
                        "description": "<@ba.kw>30%</> chance to crit",
                        "rangeId": None,
                        "blackboard": [{"key": "PROB", "value": 0.3}],
                    },
                ]
            }
        ],
        "potentialRanks": [
            {"type": "BUFF", "description": "Deployment Cost -1"},
            {"type": 1, "description": "ATK +<@ba.vup>12</>"},
        ],
        "favorKeyFrames": [
            _key_frame(0, 0, 0, 0),
            _key_frame(50, 0, 40, 0),
        ],
    },
    "char_002_amiya": {
        "name": "Amiya",
        "description": "Deals Arts damage",
        "nationId": "rhodes",
        "displayNumber": "R004",
        "position": "RANGED",
        "tagList": ["DPS", "Healing"],
        "isNotObtainable": False,
        "rarity": 4,
        "profession": "CASTER",
        "subProfessionId": "corecaster",
        "phases": [],
        "skills": [
            {"skillId": "skchr_amiya_2", "unlockCond": {"phase": "PHASE_0", "level": 1}},
            {"skillId": "skchr_amiya_1", "unlockCond": {"phase": 0, "level": 1}},
            {"skillId": "skill_removed_event", "unlockCond": {"phase": 1, "level": 1}},
            {"skillId": "skchr_amiya_2", "unlockCond": {"phase": 2, "level": 1}},
            {"skillId": None, "unlockCond": {"phase": 0, "level": 1}},
        ],
    },
    "char_1001_amiya2": {
        "name": "Amiya",
        "description": "Guard form",
        "nationId": "rhodes",
        "position": "MELEE",
        "isNotObtainable": False,
        "rarity": "TIER_5",
        "profession": "WARRIOR",
        "subProfessionId": "sword",
        "skills": None,
    },
    "char_1037_amiya3": {
        "name": "Amiya",
        "position": "RANGED",
        "isNotObtainable": True,
        "rarity": "TIER_5",
        "profession": "MEDIC",
        "subProfessionId": "physician",
    },
    "char_285_medic2": {
        "name": "Lancet-2",
        "description": "Restores HP",
        "position": "RANGED",
        "tagList": None,
        "rarity": 0,
        "profession": "MEDIC",
        "subProfessionId": "physician",
    },
    "token_10000_silent_healrb": {
        "name": "Medical Drone",
        "position": "RANGED",
        "rarity": 0,
        "profession": "TOKEN",
        "subProfessionId": "notchar1",
    },
    "trap_001_crate": {
        "name": "Crate",
        "position": "MELEE",
        "rarity": 0,
        "profession": "TRAP",
        "subProfessionId": "notchar2",
    },
    "token_10020_ling_soul1": {
        "name": "Summon",
        "position": "MELEE",
        "rarity": 2,
        "profession": "WARRIOR",
        "subProfessionId": "notchar1",
    },
}


def _skill_level(name: str, description: str, skill_type: Any, sp_type: Any, sp_cost: int) -> dict[str, Any]:
    return {
        "name": name,
        "rangeId": None,
        "description": description,
        "skillType": skill_type,
        "durationType": "NONE",
        "spData": {
            "spType": sp_type,
            "levelUpCost": None,
            "maxChargeTime": 1,
            "spCost": sp_cost,
            "initSp": 0,
            "increment": 1.0,
        },
        "prefabId": None,
        "duration": 0.0,
        "blackboard": [{"key": "atk_scale", "value": 1.4}, {"key": "unused", "value": None}],
    }


SKILL_TABLE: dict[str, Any] = {
    "skill_kroos_1": {
        "skillId": "skill_kroos_1",
        "iconId": None,
        "hidden": False,
        "levels": [
            _skill_level(
                "Double Tap",
                "Next attack deals <@ba.vup>{atk_scale:0%}</> ATK twice",
                "AUTO",
                "INCREASE_WHEN_ATTACK",
                4,
            ),
            _skill_level(
                "Double Tap",
                "Next attack deals <@ba.vup>{atk_scale:0%}</> ATK twice",
                2,
                2,
                4,
            ),
        ],
    },
    "skchr_amiya_1": {
        "skillId": "skchr_amiya_1",
        "iconId": "skchr_amiya_1_icon",
        "levels": [_skill_level("Tactical Chant", "-", "PASSIVE", 8, 0)],
    },
    "skchr_amiya_2": {
        "skillId": "skchr_amiya_2",
        "levels": [_skill_level("Spirit Burst", "Shoots {times} shots", 1, "INCREASE_WITH_TIME", 40)],
    },
    "skcom_unused": {
        "skillId": "skcom_unused",
        "levels": [_skill_level("Unused", None, "MANUAL", 1, 10)],
    },
}


BUILDING_DATA: dict[str, Any] = {
    "rooms": {
        "CONTROL": {
            "id": "CONTROL",
            "name": "Control Center",
            "description": "The core of the base",
            "maxCount": 1,
            "category": "CONTROL",
            "size": {"row": 2, "col": 5},
            "phases": [
                {
                    "unlockCondId": "control_1",
                    "buildCost": {"items": [], "labor": 0},
                    "electricity": 0,
                    "maxStationedNum": 1,
                    "manpowerCost": 0,
                },
                {
                    "unlockCondId": "control_2",
                    "buildCost": {"items": [{"id": "3211", "count": 3, "type": "MATERIAL"}], "labor": 4},
                    "electricity": 0,
                    "maxStationedNum": 2,
                    "manpowerCost": 0,
                },
            ],
        },
        "DORMITORY": {
            "id": "DORMITORY",
            "name": "Dormitory",
            "description": None,
            "maxCount": -1,
            "category": "FUNCTION",
            "size": {"row": 1, "col": 3},
            "phases": [],
        },
    },
    "chars": {
        "char_003_kroos": {
            "charId": "char_003_kroos",
            "maxManpower": 8640000,
            "buffChar": [
                {"buffData": [{"buffId": "trade_ord_spd[000]", "cond": {"phase": 1, "level": 1}}]},
            ],
        },
        "char_002_amiya": {
            "charId": "char_002_amiya",
            "buffChar": [
                {"buffData": [{"buffId": "control_amiya[020]", "cond": {"phase": "PHASE_2", "level": 1}}]},
                {
                    "buffData": [
                        {"buffId": "control_amiya[010]", "cond": {"phase": "PHASE_0", "level": 1}},
                        {"buffId": "buff_not_in_table", "cond": {"phase": 0, "level": 30}},
                    ]
                },
                {"buffData": []},
            ],
        },
        "token_10000_silent_healrb": {
            "charId": "token_10000_silent_healrb",
            "buffChar": [{"buffData": [{"buffId": "trade_ord_spd[000]", "cond": {"phase": 0, "level": 1}}]}],
        },
    },
    "buffs": {
        "trade_ord_spd[000]": {
            "buffId": "trade_ord_spd[000]",
            "buffName": "Order Flow",
            "roomType": "TRADING",
            "buffCategory": "FUNCTION",
            "sortId": 10,
            "description": "Order acquisition efficiency <@cc.vup>+20%</>",
        },
        "control_amiya[010]": {
            "buffId": "control_amiya[010]",
            "buffName": "Leadership",
            "roomType": "CONTROL",
            "buffCategory": "FUNCTION",
            "sortId": 1,
            "description": "Morale +0.05 per hour",
        },
        "control_amiya[020]": {
            "buffId": "control_amiya[020]",
            "buffName": "Leadership+",
            "roomType": "CONTROL",
            "buffCategory": "RECOVERY",
            "sortId": 2,
            "description": None,
        },
    },
}


HANDBOOK_INFO_TABLE: dict[str, Any] = {
    "handbookDict": {
        "char_003_kroos": {
            "charID": "char_003_kroos",
            "drawName": "Artist A",
            "storyTextAudio": [
                {
                    "stories": [
                        {
                            "storyText": "[Code Name] Kroos\n[Race] Cautus",
                            "unLockType": 0,
                            "unLockParam": "",
                        }
                    ],
                    "storyTitle": "Basic Info",
                },
                {
                    "stories": [{"storyText": "Profile text", "unLockType": 2, "unLockParam": "20"}],
                    "storyTitle": "Profile",
                },
                {
                    "stories": [{"storyText": "Archive text", "unLockType": 1, "unLockParam": "1;1"}],
                    "storyTitle": "Archive File 4",
                },
            ],
        },
        "char_002_amiya": {
            "charID": "char_002_amiya",
            "drawName": "",
            "storyTextAudio": [
                {
                    "stories": [
                        {"storyText": "Promotion record", "unLockType": 6, "unLockParam": "char_1001_amiya2"}
                    ],
                    "storyTitle": "Promotion Record",
                }
            ],
        },
    },
    "npcDict": {},
}


CHAR_META_TABLE: dict[str, Any] = {
    "spCharGroups": {
        "char_002_amiya": ["char_002_amiya", "char_1001_amiya2", "char_1037_amiya3"],
        "char_999_lonely": ["char_999_lonely"],
    }
}


ITEM_TABLE: dict[str, Any] = {
    "items": {
        "ap_supply_lt_010": {
            "itemId": "ap_supply_lt_010",
            "name": "Vegetable Radish Tin",
            "description": "D",
            "rarity": "TIER_2",
            "iconId": "ap_supply_lt_010",
            "sortId": 20,
            "usage": "Restores 10 Sanity",
            "obtainApproach": None,
            "classifyType": "CONSUME",
            "itemType": "AP_SUPPLY",
            "stageDropList": [],
        },
        "3301": {
            "itemId": "3301",
            "name": "Skill Summary - 1",
            "description": "Basic skill training material",
            "rarity": 1,
            "iconId": "MTL_SKILL1",
            "sortId": 100,
            "usage": "",
            "obtainApproach": "Main Theme Stage",
            "classifyType": "MATERIAL",
            "itemType": "MATERIAL",
            "stageDropList": [{"stageId": "ca_1", "occPer": "ALWAYS"}],
        },
        "p_char_003_kroos": {
            "itemId": "p_char_003_kroos",
            "name": "Kroos's Token",
            "rarity": 2,
            "classifyType": "NONE",
            "itemType": "MATERIAL",
        },
    }
}


TABLES: dict[str, dict[str, Any]] = {
    "character_table": CHARACTER_TABLE,
    "char_meta_table": CHAR_META_TABLE,
    "handbook_info_table": HANDBOOK_INFO_TABLE,
    "skill_table": SKILL_TABLE,
    "building_data": BUILDING_DATA,
    "item_table": ITEM_TABLE,
}


def write_tables(root: Path, tables: dict[str, Any]) -> Path:
    """tables를 root/excel/<name>.json 으로 기록"""
    excel = root / "excel"
    excel.mkdir(parents=True, exist_ok=True)
    for name, value in tables.items():
        (excel / f"{name}.json").write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
    return root


@pytest.fixture
def tables() -> dict[str, dict[str, Any]]:
    """수정해도 안전한 테이블 사본"""
    return copy.deepcopy(TABLES)


@pytest.fixture
def gamedata_dir(tmp_path: Path, tables) -> Path:
    return write_tables(tmp_path / "gamedata", tables)


@pytest.fixture
def game_data(gamedata_dir: Path) -> GameData:
    return asyncio.run(GameData.from_local(gamedata_dir))
