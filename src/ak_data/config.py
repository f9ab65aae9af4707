"""원격 게임 데이터 소스 설정"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, field_validator

from .common.language_codes import DEFAULT_REGION, Region, parse_region

logger = logging.getLogger(__name__)

DEFAULT_REPO = "Kengxxiao/ArknightsGameData"
DEFAULT_BRANCH = "master"
DEFAULT_API_ROOT = "https://api.github.com"
RAW_ROOT = "https://raw.githubusercontent.com"


class Options(BaseModel):
    """GameData.from_remote 설정

    source_root를 지정하지 않으면 repo/branch의 raw.githubusercontent URL을 사용합니다.
    테이블 URL: {source_root}/{region}/gamedata/{location}
    """

    repo: str = DEFAULT_REPO  # GitHub owner/repo
    branch: str = DEFAULT_BRANCH
    region: Region = DEFAULT_REGION
    source_root: Optional[str] = None  # 미러 등 raw 루트 재지정
    api_root: str = DEFAULT_API_ROOT
    timeout: float = 60.0  # 요청당 전체 타임아웃 (초)

    @field_validator("region", mode="before")
    @classmethod
    def _parse_region(cls, value):
        # "kr", "ko" 같은 서버/단축 코드도 허용
        if isinstance(value, str):
            return parse_region(value)
        return value

    @field_validator("source_root", "api_root")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        return value.rstrip("/") if value else value

    def get_source_root(self) -> str:
        if self.source_root:
            return self.source_root
        return f"{RAW_ROOT}/{self.repo}/{self.branch}"

    def table_url(self, location: str) -> str:
        """테이블 상대 경로 → raw URL"""
        return f"{self.get_source_root()}/{self.region.value}/gamedata/{location}"

    @property
    def commits_url(self) -> str:
        return f"{self.api_root}/repos/{self.repo}/commits"

    async def get_last_updated(self) -> datetime:
        """branch 최신 커밋의 author 날짜 조회

        Raises:
            SourceUnavailable: API 요청 실패 또는 응답 형식 오류
        """
        from .data.github_source import fetch_last_updated

        return await fetch_last_updated(self)

    def save(self, path: str | Path) -> None:
        """설정을 JSON 파일로 저장"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.model_dump(mode="json", exclude_defaults=True)
        path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")

    @classmethod
    def load(cls, path: str | Path) -> "Options":
        """JSON 파일에서 설정 로드 (파일이 없으면 기본값)

        Raises:
            ValueError: JSON 형식 오류
            pydantic.ValidationError: 필드 값 오류
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"설정 파일이 없어 기본값 사용: {path}")
            return cls()
        data = json.loads(path.read_text(encoding="utf-8"))
        options = cls.model_validate(data)
        logger.info(f"설정 로드: repo={options.repo}, branch={options.branch}, region={options.region}")
        return options
