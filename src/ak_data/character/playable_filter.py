"""플레이어블 오퍼레이터 필터

character_table에는 오퍼레이터 외에도 설치물, 소환물, 테스트용 캐릭터가 섞여 있습니다.
제외 규칙:
    - profession이 TRAP/TOKEN (맵 설치물, 소환물)
    - ID 접두사가 trap_/token_ (다른 오퍼레이터가 소환하는 드론류)
    - isNotObtainable (테스트/삭제된 캐릭터)
"""

import logging
from typing import Iterable

from ..models.operator import Profession
from ..tables.character_table import CharacterRecord

logger = logging.getLogger(__name__)


class PlayableFilter:
    """플레이어블 오퍼레이터 판별"""

    NON_PLAYABLE_PROFESSIONS = frozenset({Profession.TRAP, Profession.TOKEN})

    # 드론/설치물 ID 접두사
    DRONE_PREFIXES = ("trap_", "token_")

    def is_playable(self, record: CharacterRecord) -> bool:
        """플레이어블 오퍼레이터 여부

        Args:
            record: 디코딩된 캐릭터 레코드

        Returns:
            제외 규칙에 하나도 해당하지 않으면 True
        """
        if record.profession in self.NON_PLAYABLE_PROFESSIONS:
            return False
        if record.id.lower().startswith(self.DRONE_PREFIXES):
            return False
        return not record.is_not_obtainable

    def filter_playable(self, records: Iterable[CharacterRecord]) -> list[CharacterRecord]:
        """입력 순서를 유지하며 플레이어블 레코드만 반환"""
        kept = []
        excluded = 0
        for record in records:
            if self.is_playable(record):
                kept.append(record)
            else:
                excluded += 1
        logger.debug(f"플레이어블 필터: {len(kept)}개 유지, {excluded}개 제외")
        return kept


# 모듈 레벨 싱글톤 인스턴스
_filter: PlayableFilter | None = None


def get_playable_filter() -> PlayableFilter:
    """싱글톤 필터 인스턴스 반환"""
    global _filter
    if _filter is None:
        _filter = PlayableFilter()
    return _filter


def is_playable(record: CharacterRecord) -> bool:
    """플레이어블 여부 확인 (편의 함수)"""
    return get_playable_filter().is_playable(record)


def filter_playable(records: Iterable[CharacterRecord]) -> list[CharacterRecord]:
    """플레이어블 레코드만 반환 (편의 함수)"""
    return get_playable_filter().filter_playable(records)
