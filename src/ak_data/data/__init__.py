"""테이블 소스 모듈"""

from pathlib import Path

from .source import TableSource

__all__ = [
    "TableSource",
    "create_table_source",
]


def create_table_source(source_type: str, **kwargs) -> TableSource:
    """설정에 따라 적절한 테이블 소스 인스턴스 생성

    Args:
        source_type: "local" (root 필요) 또는 "github" (options 선택)
    """
    if source_type == "local":
        from .local_source import LocalTableSource

        return LocalTableSource(Path(kwargs["root"]))
    elif source_type == "github":
        from .github_source import GithubTableSource

        return GithubTableSource(kwargs.get("options"))
    raise ValueError(f"알 수 없는 소스 타입: {source_type}")
