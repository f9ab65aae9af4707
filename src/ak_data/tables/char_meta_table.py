"""char_meta_table.json 디코더 (spCharGroups: 이격 그룹)"""

from typing import Any

from ..errors import MalformedRecord
from ..models.operator import AlternateFormLink
from .fields import get_container

TABLE_NAME = "char_meta_table"
LOCATION = "excel/char_meta_table.json"


def decode_char_meta_table(raw: Any) -> list[AlternateFormLink]:
    """char_meta_table.json → 그룹 ID 순 AlternateFormLink 목록

    멤버가 둘 미만인 그룹은 연결할 대상이 없으므로 제외합니다.
    """
    groups = get_container(TABLE_NAME, raw, "spCharGroups")
    links = []
    for group_id in sorted(groups):
        members = groups[group_id]
        if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
            raise MalformedRecord(TABLE_NAME, group_id, "멤버 목록은 문자열 배열이어야 합니다")
        unique = tuple(dict.fromkeys(members))
        if len(unique) >= 2:
            links.append(AlternateFormLink(group_id, unique))
    return links
