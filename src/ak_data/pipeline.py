"""GameData 구성 파이프라인

UNLOADED → TABLES_LOADED → DECODED → FILTERED → LINKED → READY

단계를 건너뛸 수 없으며, 어느 단계에서든 실패하면 전체 구성을 중단합니다.
오류에는 실패한 테이블과 단계가 함께 기록됩니다.
"""

import asyncio
import logging
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from .character.playable_filter import get_playable_filter
from .data.source import TableSource
from .errors import GameDataError
from .linker import link_operators
from .models.common import frozen_mapping
from .tables import (
    BUILDING_DATA,
    CHAR_META_TABLE,
    CHARACTER_TABLE,
    HANDBOOK_INFO_TABLE,
    ITEM_TABLE,
    SKILL_TABLE,
    TABLES,
    TableInfo,
)

logger = logging.getLogger(__name__)


class Stage(Enum):
    """파이프라인 단계"""

    UNLOADED = "unloaded"
    TABLES_LOADED = "tables_loaded"
    DECODED = "decoded"
    FILTERED = "filtered"
    LINKED = "linked"
    READY = "ready"


# 단계 전이 시 수행하는 작업 이름 (오류의 stage 값)
_STEP_NAMES = {
    Stage.UNLOADED: "load",
    Stage.TABLES_LOADED: "decode",
    Stage.DECODED: "filter",
    Stage.FILTERED: "link",
    Stage.LINKED: "finish",
}


class GameDataBuilder:
    """TableSource에서 GameData를 구성

    한 인스턴스는 한 번만 build할 수 있습니다.
    """

    def __init__(self, source: TableSource, last_updated: Optional[datetime] = None):
        self.source = source
        self.last_updated = last_updated
        self.stage = Stage.UNLOADED
        self._raw: dict[str, Any] = {}
        self._decoded: dict[str, Any] = {}
        self._candidates: list = []
        self._operators: dict = {}

    @contextmanager
    def _step(self, expected: Stage, table: Optional[str] = None):
        if self.stage is not expected:
            raise RuntimeError(f"잘못된 단계 전이: 현재 {self.stage.value}, 필요 {expected.value}")
        try:
            yield
        except GameDataError as e:
            if e.table is None:
                e.table = table
            if e.stage is None:
                e.stage = _STEP_NAMES[expected]
            logger.error(f"GameData 구성 실패: {e}")
            raise

    async def _load_one(self, table: TableInfo) -> Any:
        with self._step(Stage.UNLOADED, table.name):
            return await self.source.load_table(table)

    async def load_tables(self) -> None:
        """여섯 테이블을 동시에 로드 (하나라도 실패하면 나머지 취소)"""
        tasks = {
            asyncio.create_task(self._load_one(table), name=table.name): table
            for table in TABLES
        }
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            # 실패했거나 호출 측에서 취소한 경우 남은 로드를 모두 정리
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                logger.debug(f"로드 취소: {', '.join(task.get_name() for task in pending)}")
            await asyncio.gather(*tasks, return_exceptions=True)

        # 실패가 여럿이면 테이블 순서상 첫 번째 오류를 보고
        for task in tasks:
            if not task.cancelled() and task.exception() is not None:
                raise task.exception()

        self._raw = {table.name: task.result() for task, table in tasks.items()}
        self.stage = Stage.TABLES_LOADED
        logger.info(f"테이블 {len(self._raw)}개 로드 완료")

    def decode(self) -> None:
        for table in TABLES:
            with self._step(Stage.TABLES_LOADED, table.name):
                self._decoded[table.name] = table.decoder(self._raw[table.name])
        # 원본 JSON은 더 이상 필요 없음
        self._raw = {}
        self.stage = Stage.DECODED

    def filter(self) -> None:
        with self._step(Stage.DECODED, CHARACTER_TABLE.name):
            characters = self._decoded[CHARACTER_TABLE.name]
            self._candidates = get_playable_filter().filter_playable(characters.values())
        self.stage = Stage.FILTERED

    def link(self) -> None:
        with self._step(Stage.FILTERED):
            building = self._decoded[BUILDING_DATA.name]
            self._operators = link_operators(
                self._candidates,
                skills=self._decoded[SKILL_TABLE.name],
                base_skills=building.unlocks,
                handbook=self._decoded[HANDBOOK_INFO_TABLE.name],
                alternates=self._decoded[CHAR_META_TABLE.name],
            )
        self.stage = Stage.LINKED

    def finish(self):
        from .game_data import GameData

        with self._step(Stage.LINKED):
            building = self._decoded[BUILDING_DATA.name]
            skills = self._decoded[SKILL_TABLE.name]
            items = self._decoded[ITEM_TABLE.name]
            game_data = GameData(
                operators=frozen_mapping(self._operators),
                items=frozen_mapping({k: items[k] for k in sorted(items)}),
                skills=frozen_mapping({k: skills[k] for k in sorted(skills)}),
                base_skills=frozen_mapping(
                    {k: building.base_skills[k] for k in sorted(building.base_skills)}
                ),
                buildings=frozen_mapping(
                    {k: building.buildings[k] for k in sorted(building.buildings)}
                ),
                alternates=tuple(self._decoded[CHAR_META_TABLE.name]),
                last_updated=self.last_updated,
            )
        self.stage = Stage.READY
        logger.info(
            f"GameData 준비 완료: 오퍼레이터 {len(game_data.operators)}명, "
            f"아이템 {len(game_data.items)}개, 스킬 {len(game_data.skills)}개"
        )
        return game_data

    async def build(self):
        """전체 파이프라인 실행 → GameData"""
        await self.load_tables()
        self.decode()
        self.filter()
        self.link()
        return self.finish()
