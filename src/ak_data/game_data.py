"""GameData: 병합된 게임 데이터와 조회 API

생성은 from_local / from_remote 로만 합니다. 모든 컬렉션은 읽기 전용이며 ID 순입니다.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, Mapping, Optional

from .config import Options
from .models.building import BaseSkill, Building
from .models.common import frozen_mapping
from .models.item import Item
from .models.operator import AlternateFormLink, Operator
from .models.skill import Skill

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameData:
    operators: Mapping[str, Operator] = field(default_factory=frozen_mapping)
    items: Mapping[str, Item] = field(default_factory=frozen_mapping)
    skills: Mapping[str, Skill] = field(default_factory=frozen_mapping)
    base_skills: Mapping[str, BaseSkill] = field(default_factory=frozen_mapping)
    buildings: Mapping[str, Building] = field(default_factory=frozen_mapping)
    alternates: tuple[AlternateFormLink, ...] = ()
    # 원격 저장소 최신 커밋 시각 (로컬 로드는 None)
    last_updated: Optional[datetime] = None

    @classmethod
    async def from_local(cls, root: str | Path) -> "GameData":
        """로컬 gamedata 디렉토리에서 구성

        root는 저장소 루트가 아니라 excel/ 을 포함하는 gamedata 폴더여야 합니다.

        Raises:
            GameDataError: 로드/디코드 실패 (table, stage 포함)
        """
        from .data.local_source import LocalTableSource
        from .pipeline import GameDataBuilder

        logger.info(f"로컬 게임 데이터 로드: {root}")
        return await GameDataBuilder(LocalTableSource(root)).build()

    @classmethod
    async def from_remote(cls, options: Optional[Options] = None) -> "GameData":
        """GitHub 저장소에서 구성 (최신 커밋 시각을 last_updated로 기록)"""
        from .data.github_source import GithubTableSource
        from .pipeline import GameDataBuilder

        options = options or Options()
        logger.info(f"원격 게임 데이터 로드: {options.repo}@{options.branch} ({options.region})")
        last_updated = await options.get_last_updated()
        return await GameDataBuilder(GithubTableSource(options), last_updated).build()

    def is_outdated(self, new_date_time: datetime) -> bool:
        """주어진 시각이 이 데이터의 기준 시각보다 최신이면 True"""
        return self.last_updated is None or self.last_updated < new_date_time

    async def get_outdated(self, options: Optional[Options] = None) -> Optional[datetime]:
        """원격 최신 커밋 시각이 더 새로우면 그 시각, 아니면 None"""
        last_updated = await (options or Options()).get_last_updated()
        return last_updated if self.is_outdated(last_updated) else None

    async def refresh_from_remote(self, options: Optional[Options] = None) -> Optional["GameData"]:
        """원격 데이터가 더 새로우면 새 GameData를 반환, 최신이면 None"""
        options = options or Options()
        last_updated = await self.get_outdated(options)
        if last_updated is None:
            logger.info("게임 데이터가 최신 상태입니다")
            return None
        from .data.github_source import GithubTableSource
        from .pipeline import GameDataBuilder

        logger.info(f"게임 데이터 갱신: {self.last_updated} → {last_updated}")
        return await GameDataBuilder(GithubTableSource(options), last_updated).build()

    def iter_operators(self) -> Iterator[tuple[str, Operator]]:
        return iter(self.operators.items())

    def iter_items(self) -> Iterator[tuple[str, Item]]:
        return iter(self.items.items())

    def get_operator(self, operator_id: str) -> Optional[Operator]:
        return self.operators.get(operator_id)

    def get_item(self, item_id: str) -> Optional[Item]:
        return self.items.get(item_id)

    def find_operator(self, name: str) -> Optional[Operator]:
        """이름이 정확히 일치하는 오퍼레이터 (중복 시 ID 순 첫 번째)"""
        for operator in self.operators.values():
            if operator.name == name:
                return operator
        return None

    def find_item(self, name: str) -> Optional[Item]:
        """이름이 정확히 일치하는 아이템 (중복 시 ID 순 첫 번째)"""
        for item in self.items.values():
            if item.name == name:
                return item
        return None

    def get_alternates(self, operator_id: str) -> list[Operator]:
        """이격 오퍼레이터 목록"""
        operator = self.operators.get(operator_id)
        if operator is None:
            return []
        return [self.operators[alt_id] for alt_id in operator.alternate_ids if alt_id in self.operators]

    def get_potential_item(self, operator_id: str) -> Optional[Item]:
        """오퍼레이터 잠재 아이템 (토큰)"""
        operator = self.operators.get(operator_id)
        if operator is None or operator.potential_item_id is None:
            return None
        return self.items.get(operator.potential_item_id)
