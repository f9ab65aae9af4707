"""Arknights 게임 데이터 로더

여섯 개의 게임 데이터 테이블을 읽어 교차 참조가 연결된 읽기 전용 모델(GameData)을 만듭니다.

    game_data = await GameData.from_local("ArknightsGameData/en_US/gamedata")
    kroos = game_data.find_operator("Kroos")
"""

from .common.language_codes import Region
from .config import Options
from .errors import GameDataError, MalformedRecord, SourceNotFound, SourceUnavailable
from .game_data import GameData
from .models import Item, Operator, Promotion, PromotionAndLevel, Skill
from .pipeline import GameDataBuilder, Stage

__version__ = "0.1.0"

__all__ = [
    "GameData",
    "GameDataBuilder",
    "GameDataError",
    "Item",
    "MalformedRecord",
    "Operator",
    "Options",
    "Promotion",
    "PromotionAndLevel",
    "Region",
    "Skill",
    "SourceNotFound",
    "SourceUnavailable",
    "Stage",
]
