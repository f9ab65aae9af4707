"""공통 유틸리티 모듈

프로젝트 전체에서 공유하는 상수, 유틸리티 함수를 제공합니다.
"""

from .language_codes import (
    DEFAULT_REGION,
    LOCALE_TO_SERVER,
    Region,
    locale_to_server,
    parse_region,
)
from .text import strip_tags

__all__ = [
    "DEFAULT_REGION",
    "LOCALE_TO_SERVER",
    "Region",
    "locale_to_server",
    "parse_region",
    "strip_tags",
]
