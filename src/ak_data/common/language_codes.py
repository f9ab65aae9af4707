"""리전 코드 매핑 상수 (프로젝트 전체 공유)

게임 데이터 트리는 로케일 코드(en_US, ko_KR 등)로 구분됩니다.
사용자 입력으로 들어오는 서버 코드(kr, en)와 단축 코드(ko, ja)를
표준 로케일 코드로 변환하는 로직을 이 파일에 모읍니다.
"""

from enum import Enum


class Region(str, Enum):
    """게임 데이터 리전 (로케일 코드)"""

    EN_US = "en_US"
    JA_JP = "ja_JP"
    KO_KR = "ko_KR"
    ZH_CN = "zh_CN"
    ZH_TW = "zh_TW"

    def __str__(self) -> str:
        return self.value


DEFAULT_REGION = Region.EN_US

# 표준 로케일 코드 → 서버 코드
LOCALE_TO_SERVER: dict[str, str] = {
    "ko_KR": "kr",
    "en_US": "en",
    "ja_JP": "jp",
    "zh_CN": "cn",
    "zh_TW": "tw",
}

# 단축 코드 → 표준 로케일
SHORT_TO_LOCALE: dict[str, str] = {
    "ko": "ko_KR",
    "ja": "ja_JP",
    "zh": "zh_CN",
    "en": "en_US",
}


def locale_to_server(locale: str) -> str:
    """표준 로케일 코드를 서버 코드로 변환

    Examples:
        >>> locale_to_server("ko_KR")
        'kr'
        >>> locale_to_server("unknown")
        'unknown'
    """
    return LOCALE_TO_SERVER.get(locale, locale.split("_")[0] if "_" in locale else locale)


def parse_region(value: "str | Region") -> Region:
    """로케일/서버/단축 코드를 Region으로 변환

    Examples:
        >>> parse_region("ko_KR")
        <Region.KO_KR: 'ko_KR'>
        >>> parse_region("kr")
        <Region.KO_KR: 'ko_KR'>
        >>> parse_region("ja")
        <Region.JA_JP: 'ja_JP'>

    Raises:
        ValueError: 알 수 없는 코드
    """
    if isinstance(value, Region):
        return value

    code = value.strip()
    for region in Region:
        if region.value.lower() == code.lower():
            return region

    lower = code.lower()
    for locale, server in LOCALE_TO_SERVER.items():
        if server == lower:
            return Region(locale)
    if lower in SHORT_TO_LOCALE:
        return Region(SHORT_TO_LOCALE[lower])

    expected = ", ".join(r.value for r in Region)
    raise ValueError(f"알 수 없는 리전 코드: {value!r} (expected one of {expected})")
