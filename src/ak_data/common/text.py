"""게임 텍스트 정리 유틸리티"""

import re

# <@ba.vup>, <$ba.stun>, </> 같은 리치 텍스트 태그
_TAG_PATTERN = re.compile(r"<[@$\w.]+>|</>")

# {atk:0%}, {-duration} 같은 블랙보드 플레이스홀더
TEMPLATE_PATTERN = re.compile(r"\{[\w:.%\-@\[\]]+\}")


def strip_tags(text: str) -> str:
    """리치 텍스트 태그 제거

    Examples:
        >>> strip_tags("공격력 <@ba.vup>+{atk:0%}</>")
        '공격력 +{atk:0%}'
    """
    return _TAG_PATTERN.sub("", text)


def template_keys(text: str) -> list[str]:
    """템플릿 문자열의 플레이스홀더 키 목록 (등장 순서, 중복 제거)

    값 치환은 하지 않습니다. 키는 소문자, 서식 접미사와 부호를 제거한 형태입니다.

    Examples:
        >>> template_keys("{atk:0%} 증가, {-def} 감소, {ATK}")
        ['atk', 'def']
    """
    keys: list[str] = []
    for match in TEMPLATE_PATTERN.finditer(text):
        key = match.group(0)[1:-1].lstrip("-").split(":", 1)[0].lower()
        if key not in keys:
            keys.append(key)
    return keys
