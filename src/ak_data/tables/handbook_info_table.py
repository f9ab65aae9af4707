"""handbook_info_table.json 디코더 (handbookDict 컨테이너)

unLockParam 해석:
    ""          → 항상 해금 (unlock=None)
    "50"        → 신뢰도 50 이상
    "1;1"       → 정예화 1 레벨 1 이상
    "char_..."  → 다른 오퍼레이터 보유 (unLockType 6)

unLockType은 숫자(구버전) 또는 "DIRECT"/"AWAKE"/"FAVOR" 같은 이름으로 옵니다.
"""

import logging
from typing import Any, Optional

from pydantic import Field

from ..models.common import Promotion, PromotionAndLevel
from ..models.handbook import HandbookEntry, HandbookStory, HandbookUnlock, UnlockKind
from .fields import ListOrEmpty, OptionalText, RawRecord, UnlockType, decode_records, get_container

logger = logging.getLogger(__name__)

TABLE_NAME = "handbook_info_table"
LOCATION = "excel/handbook_info_table.json"

# 다른 오퍼레이터 보유 조건
UNLOCK_TYPE_OPERATOR = 6


def parse_unlock(param: Optional[str], unlock_type: int = 0) -> Optional[HandbookUnlock]:
    """unLockParam 문자열 → HandbookUnlock (None = 항상 해금)"""
    if param is None:
        return None
    text = param.strip()
    if not text:
        return None
    if text.isdigit():
        return HandbookUnlock(UnlockKind.TRUST, trust=int(text))

    phase, sep, level = text.partition(";")
    if sep:
        try:
            condition = PromotionAndLevel(Promotion(int(phase)), int(level))
        except ValueError:
            condition = None
        if condition is not None:
            return HandbookUnlock(UnlockKind.PROMOTION, condition=condition)

    if unlock_type == UNLOCK_TYPE_OPERATOR:
        return HandbookUnlock(UnlockKind.OPERATOR, operator_id=text)
    logger.debug(f"알 수 없는 도감 해금 조건 무시: {text!r} (type={unlock_type})")
    return None


class RawStoryText(RawRecord):
    story_text: str = Field("", alias="storyText")
    unlock_type: UnlockType = Field(0, alias="unLockType")
    unlock_param: OptionalText = Field(None, alias="unLockParam")


class RawStoryBlock(RawRecord):
    story_title: str = Field("", alias="storyTitle")
    stories: ListOrEmpty[RawStoryText] = Field(default_factory=list)

    def to_stories(self) -> list[HandbookStory]:
        return [
            HandbookStory(
                title=self.story_title,
                text=story.story_text,
                unlock=parse_unlock(story.unlock_param, story.unlock_type),
            )
            for story in self.stories
        ]


class RawHandbookEntry(RawRecord):
    char_id: str = Field(alias="charID")
    draw_name: OptionalText = Field(None, alias="drawName")
    story_text_audio: ListOrEmpty[RawStoryBlock] = Field(default_factory=list, alias="storyTextAudio")

    def to_entry(self) -> HandbookEntry:
        stories = []
        for block in self.story_text_audio:
            stories.extend(block.to_stories())
        return HandbookEntry(
            operator_id=self.char_id,
            stories=tuple(stories),
            illustrator=self.draw_name,
        )


def decode_handbook_info_table(raw: Any) -> dict[str, HandbookEntry]:
    """handbook_info_table.json → {char_id: HandbookEntry}"""
    entries = get_container(TABLE_NAME, raw, "handbookDict")
    records = decode_records(TABLE_NAME, entries, RawHandbookEntry, id_field="charID")
    return {char_id: record.to_entry() for char_id, record in records.items()}
