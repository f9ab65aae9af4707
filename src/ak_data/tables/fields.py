"""테이블 디코더 공통 필드 타입

원본 JSON은 게임 버전에 따라 같은 필드를 숫자 또는 문자열로 인코딩합니다.
(예: rarity 5 / "TIER_6", phase 1 / "PHASE_1")
여기서 정의한 Annotated 타입이 두 인코딩을 모두 받아 하나로 정규화합니다.
"""

import logging
from typing import Annotated, Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError

from ..errors import MalformedRecord
from ..models.common import Promotion, PromotionAndLevel, frozen_mapping
from ..models.skill import SkillActivation, SkillRecovery

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")


class RawRecord(BaseModel):
    """원본 레코드 공통 설정 (alias로 원본 키 매핑, 알 수 없는 키 무시)"""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")


def _parse_prefixed_int(value: Any, prefix: str) -> Any:
    """"PREFIX_n" 또는 숫자 문자열을 정수로 변환 (그 외 값은 그대로 통과)"""
    if isinstance(value, str):
        text = value.strip()
        if text.upper().startswith(prefix):
            text = text[len(prefix):]
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"{prefix}n 또는 정수가 필요합니다: {value!r}") from None
    return value


def _parse_phase(value: Any) -> Any:
    return _parse_prefixed_int(value, "PHASE_")


def _parse_tier(value: Any) -> Any:
    # "TIER_1" == 구버전 0
    if isinstance(value, str) and value.strip().upper().startswith("TIER_"):
        return _parse_prefixed_int(value, "TIER_") - 1
    return _parse_prefixed_int(value, "")


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _none_to_list(value: Any) -> Any:
    return [] if value is None else value


def _to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


_ACTIVATION_NAMES = {member.name: member for member in SkillActivation}

_RECOVERY_NAMES = {
    "INCREASE_WITH_TIME": SkillRecovery.AUTO_RECOVERY,
    "INCREASE_WHEN_ATTACK": SkillRecovery.OFFENSIVE_RECOVERY,
    "INCREASE_WHEN_TAKEN_DAMAGE": SkillRecovery.DEFENSIVE_RECOVERY,
    "ON_DEPLOY": SkillRecovery.PASSIVE,
    "ON_DEPLOY_PASSIVE": SkillRecovery.PASSIVE,
}


def _parse_activation(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip().upper()
        if text in _ACTIVATION_NAMES:
            return _ACTIVATION_NAMES[text]
        return _parse_prefixed_int(text, "")
    return value


def _parse_recovery(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip().upper()
        if text in _RECOVERY_NAMES:
            return _RECOVERY_NAMES[text]
        if text in SkillRecovery.__members__:
            return SkillRecovery[text]
        return _parse_prefixed_int(text, "")
    return value


# handbook unLockType 이름 → 정수 코드 (구버전은 숫자)
UNLOCK_TYPE_NAMES = {
    "DIRECT": 0,
    "AWAKE": 1,
    "FAVOR": 2,
}


def _parse_unlock_type(value: Any) -> Any:
    if value is None:
        return 0
    if isinstance(value, str):
        text = value.strip().upper()
        if text in UNLOCK_TYPE_NAMES:
            return UNLOCK_TYPE_NAMES[text]
        if text.isdigit():
            return int(text)
        # 알 수 없는 이름은 항상 해금으로 취급
        logger.debug(f"알 수 없는 unLockType: {value!r}")
        return 0
    return value


Phase = Annotated[Promotion, BeforeValidator(_parse_phase)]
Tier = Annotated[int, BeforeValidator(_parse_tier)]
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
Text = Annotated[str, BeforeValidator(_to_str)]
Activation = Annotated[SkillActivation, BeforeValidator(_parse_activation)]
Recovery = Annotated[SkillRecovery, BeforeValidator(_parse_recovery)]
UnlockType = Annotated[int, BeforeValidator(_parse_unlock_type)]

# null을 빈 리스트로 받는 리스트 타입
ListOrEmpty = Annotated[list[T], BeforeValidator(_none_to_list)]


class RawCondition(RawRecord):
    """{"phase": ..., "level": ...} 해금 조건"""

    phase: Phase = Promotion.NONE
    level: int = 1

    def to_promotion_and_level(self) -> PromotionAndLevel:
        return PromotionAndLevel(self.phase, self.level)


class RawItemCost(RawRecord):
    id: str
    count: int = 0


class RawBlackboard(RawRecord):
    key: str
    value: Optional[float] = None


def items_cost(costs: list[RawItemCost]) -> Mapping[str, int]:
    return frozen_mapping((cost.id, cost.count) for cost in costs)


def blackboard(entries: list[RawBlackboard]) -> Mapping[str, float]:
    """블랙보드 키 → 값 (키는 소문자, 값 없는 항목 제외)"""
    return frozen_mapping(
        (entry.key.lower(), entry.value) for entry in entries if entry.value is not None
    )


def _format_error(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    return f"{loc}: {first.get('msg')}" if loc else str(first.get("msg"))


def get_container(table: str, raw: Any, key: Optional[str] = None) -> Mapping[str, Any]:
    """테이블 최상위 객체(또는 그 하위 키)를 dict로 꺼냄"""
    if not isinstance(raw, Mapping):
        raise MalformedRecord(table, detail=f"최상위 값이 객체가 아닙니다 ({type(raw).__name__})")
    if key is None:
        return raw
    container = raw.get(key)
    if container is None:
        raise MalformedRecord(table, detail=f"'{key}' 키가 없습니다")
    if not isinstance(container, Mapping):
        raise MalformedRecord(table, detail=f"'{key}' 값이 객체가 아닙니다")
    return container


def validate_record(table: str, record_id: str, model: type[M], value: Any) -> M:
    """레코드 하나를 검증. 실패 시 MalformedRecord(table, record_id)"""
    if not isinstance(value, Mapping):
        raise MalformedRecord(table, record_id, "레코드가 객체가 아닙니다")
    try:
        return model.model_validate(value)
    except ValidationError as e:
        raise MalformedRecord(table, record_id, _format_error(e)) from e


def decode_records(
    table: str,
    entries: Mapping[str, Any],
    model: type[M],
    id_field: Optional[str] = None,
) -> dict[str, M]:
    """{record_id: raw} → {record_id: model}

    id_field가 주어지면 딕셔너리 키를 해당 필드로 주입합니다.
    """
    records: dict[str, M] = {}
    for record_id, value in entries.items():
        if id_field is not None and isinstance(value, Mapping):
            value = {**value, id_field: record_id}
        records[record_id] = validate_record(table, record_id, model, value)
    logger.debug(f"{table}: {len(records)}개 레코드 디코딩")
    return records


__all__ = [
    "Activation",
    "ListOrEmpty",
    "OptionalText",
    "Phase",
    "RawBlackboard",
    "RawCondition",
    "RawItemCost",
    "RawRecord",
    "Recovery",
    "Text",
    "Tier",
    "UNLOCK_TYPE_NAMES",
    "UnlockType",
    "blackboard",
    "decode_records",
    "get_container",
    "items_cost",
    "validate_record",
]
