"""GitHub 레포지토리 기반 테이블 소스

raw.githubusercontent.com (또는 Options.source_root 미러)에서 테이블을 받아옵니다.
요청마다 세션을 열고 닫으며, 재시도하지 않습니다.
"""

import logging
from datetime import datetime

import aiohttp

from ..config import Options
from ..errors import SourceNotFound, SourceUnavailable
from ..tables import TableInfo
from .source import TableSource

logger = logging.getLogger(__name__)


class GithubTableSource(TableSource):
    """GitHub에서 테이블을 다운로드하는 소스"""

    source_type = "github"

    def __init__(self, options: Options | None = None):
        self.options = options or Options()

    def describe(self, table: TableInfo) -> str:
        return self.options.table_url(table.location)

    async def read_bytes(self, table: TableInfo) -> bytes:
        url = self.options.table_url(table.location)
        timeout = aiohttp.ClientTimeout(total=self.options.timeout)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as resp:
                    if resp.status == 404:
                        raise SourceNotFound(
                            f"{self.options.region} 리전에 테이블이 없습니다: {url}",
                            table=table.name,
                        )
                    if resp.status != 200:
                        raise SourceUnavailable(
                            f"다운로드 실패: HTTP {resp.status} ({url})", table=table.name
                        )
                    return await resp.read()
        except aiohttp.ClientError as e:
            raise SourceUnavailable(f"다운로드 실패: {url} ({e})", table=table.name) from e
        except TimeoutError as e:
            raise SourceUnavailable(f"다운로드 시간 초과: {url}", table=table.name) from e


def _parse_commit_date(data) -> datetime:
    try:
        date = data[0]["commit"]["author"]["date"]
        # "2024-01-01T00:00:00Z"
        return datetime.fromisoformat(date.replace("Z", "+00:00"))
    except (LookupError, TypeError, AttributeError, ValueError) as e:
        raise SourceUnavailable(f"커밋 응답 형식 오류: {e}") from e


async def fetch_last_updated(options: Options) -> datetime:
    """branch 최신 커밋의 author 날짜"""
    url = options.commits_url
    params = {"sha": options.branch, "per_page": "1"}
    timeout = aiohttp.ClientTimeout(total=options.timeout)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(
                url,
                params=params,
                headers={"Accept": "application/vnd.github.v3+json"},
            ) as resp:
                if resp.status != 200:
                    raise SourceUnavailable(f"GitHub API 응답 오류: {resp.status} ({url})")
                data = await resp.json()
    except aiohttp.ClientError as e:
        raise SourceUnavailable(f"GitHub API 요청 실패: {url} ({e})") from e
    except TimeoutError as e:
        raise SourceUnavailable(f"GitHub API 시간 초과: {url}") from e

    last_updated = _parse_commit_date(data)
    logger.info(f"{options.repo}@{options.branch} 최신 커밋: {last_updated.isoformat()}")
    return last_updated
