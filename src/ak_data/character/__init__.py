"""캐릭터 관련 모듈"""

from .playable_filter import PlayableFilter, filter_playable, get_playable_filter, is_playable

__all__ = [
    "PlayableFilter",
    "filter_playable",
    "get_playable_filter",
    "is_playable",
]
