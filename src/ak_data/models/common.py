"""여러 테이블이 공유하는 값 타입"""

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Promotion(IntEnum):
    """정예화 단계"""

    NONE = 0
    ELITE1 = 1
    ELITE2 = 2

    def with_level(self, level: int) -> "PromotionAndLevel":
        return PromotionAndLevel(self, level)


@dataclass(frozen=True, order=True)
class PromotionAndLevel:
    """정예화 단계 + 레벨 (단계 우선 비교)"""

    promotion: Promotion
    level: int

    def __str__(self) -> str:
        return f"E{int(self.promotion)} Lv.{self.level}"


# item_id → 수량
ItemsCost = Mapping[str, int]


def frozen_mapping(items: "Mapping[K, V] | None" = None) -> Mapping[K, V]:
    """읽기 전용 매핑 생성 (삽입 순서 유지)"""
    return MappingProxyType(dict(items or {}))
