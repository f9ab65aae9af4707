"""로컬 디렉토리 테이블 소스

root 아래에 excel/*.json 이 있는 디렉토리 (예: ArknightsGameData/en_US/gamedata)
"""

import asyncio
import logging
from pathlib import Path

from ..errors import SourceNotFound, SourceUnavailable
from ..tables import TableInfo
from .source import TableSource

logger = logging.getLogger(__name__)


class LocalTableSource(TableSource):
    """로컬 파일 시스템에서 테이블을 읽는 소스"""

    source_type = "local"

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def get_path(self, table: TableInfo) -> Path:
        return self.root / table.location

    def describe(self, table: TableInfo) -> str:
        return str(self.get_path(table))

    async def read_bytes(self, table: TableInfo) -> bytes:
        path = self.get_path(table)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError as e:
            raise SourceNotFound(f"파일이 없습니다: {path}", table=table.name) from e
        except OSError as e:
            raise SourceUnavailable(f"파일 읽기 실패: {path} ({e})", table=table.name) from e
