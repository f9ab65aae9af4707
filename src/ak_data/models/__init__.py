"""게임 데이터 모델"""

from .building import BaseSkill, BaseSkillUnlock, Building, BuildingUpgrade
from .common import ItemsCost, Promotion, PromotionAndLevel
from .handbook import HandbookEntry, HandbookStory, HandbookUnlock, UnlockKind
from .item import Item, ItemClass, StageDrop
from .operator import (
    AlternateFormLink,
    Attributes,
    Operator,
    OperatorPromotion,
    Position,
    Potential,
    Profession,
    SkillMastery,
    SkillSlot,
    Talent,
    TalentPhase,
    TrustBonus,
)
from .skill import Skill, SkillActivation, SkillLevel, SkillRecovery

__all__ = [
    "AlternateFormLink",
    "Attributes",
    "BaseSkill",
    "BaseSkillUnlock",
    "Building",
    "BuildingUpgrade",
    "HandbookEntry",
    "HandbookStory",
    "HandbookUnlock",
    "Item",
    "ItemClass",
    "ItemsCost",
    "Operator",
    "OperatorPromotion",
    "Position",
    "Potential",
    "Profession",
    "Promotion",
    "PromotionAndLevel",
    "Skill",
    "SkillActivation",
    "SkillLevel",
    "SkillMastery",
    "SkillRecovery",
    "SkillSlot",
    "StageDrop",
    "Talent",
    "TalentPhase",
    "TrustBonus",
    "UnlockKind",
]
