"""테이블 소스 인터페이스

어댑터 패턴으로 로컬 디렉토리와 원격 GitHub 저장소를 같은 인터페이스로 제공합니다.
재시도와 호출 간 캐시는 하지 않습니다.
"""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from ..errors import MalformedRecord
from ..tables import TableInfo

logger = logging.getLogger(__name__)


class TableSource(ABC):
    """게임 데이터 테이블 소스 추상 인터페이스"""

    source_type: str  # 소스 식별자 (local, github) - 서브클래스에서 클래스 변수로 정의

    @abstractmethod
    async def read_bytes(self, table: TableInfo) -> bytes:
        """테이블 원본 바이트 읽기

        Raises:
            SourceNotFound: 테이블이 없음
            SourceUnavailable: 파일 시스템/네트워크 오류
        """
        ...

    @abstractmethod
    def describe(self, table: TableInfo) -> str:
        """로그용 테이블 위치 (경로 또는 URL)"""
        ...

    async def load_table(self, table: TableInfo) -> Any:
        """테이블을 읽어 JSON 값으로 반환"""
        data = await self.read_bytes(table)
        try:
            value = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MalformedRecord(table.name, detail=f"JSON 파싱 실패: {e}") from e
        logger.debug(f"{table.name} 로드 완료 ({len(data)} bytes, {self.describe(table)})")
        return value
