"""오퍼레이터 도감(파일) 모델"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .common import PromotionAndLevel


class UnlockKind(Enum):
    """도감 항목 해금 조건 종류"""

    TRUST = "trust"  # 신뢰도
    PROMOTION = "promotion"  # 정예화 + 레벨
    OPERATOR = "operator"  # 다른 오퍼레이터 보유


@dataclass(frozen=True)
class HandbookUnlock:
    """도감 항목 해금 조건

    조건 없음(항상 해금)은 HandbookStory.unlock = None 으로 표현합니다.
    """

    kind: UnlockKind
    trust: Optional[int] = None
    condition: Optional[PromotionAndLevel] = None
    operator_id: Optional[str] = None

    def test(self, promotion_and_level: PromotionAndLevel, trust: int) -> bool:
        if self.kind is UnlockKind.TRUST:
            return self.trust is not None and self.trust <= trust
        if self.kind is UnlockKind.PROMOTION:
            return self.condition is not None and self.condition <= promotion_and_level
        # 다른 오퍼레이터 보유 여부는 판단할 수 없음
        return False


@dataclass(frozen=True)
class HandbookStory:
    """도감 텍스트 블록"""

    title: str
    text: str
    unlock: Optional[HandbookUnlock] = None

    def is_unlocked(self, promotion_and_level: PromotionAndLevel, trust: int) -> bool:
        return self.unlock is None or self.unlock.test(promotion_and_level, trust)

    def find_line(self, label: str) -> Optional[str]:
        """"[라벨] 값" 형식 줄에서 값 조회

        Examples:
            기본 정보 블록의 "[종족] 쿠오라" → find_line("종족") == "쿠오라"
        """
        for line in self.text.splitlines():
            line = line.strip()
            if not line.startswith("["):
                continue
            name, sep, value = line[1:].partition("] ")
            if sep and name == label:
                return value
        return None


@dataclass(frozen=True)
class HandbookEntry:
    """오퍼레이터 도감 (handbook_info_table.handbookDict 항목)"""

    operator_id: str
    stories: tuple[HandbookStory, ...] = ()
    illustrator: Optional[str] = None

    def iter_unlocked(
        self, promotion_and_level: PromotionAndLevel, trust: int
    ) -> Iterator[HandbookStory]:
        return (s for s in self.stories if s.is_unlocked(promotion_and_level, trust))
