"""테이블 간 교차 참조 연결

필터링된 캐릭터 레코드에 스킬, 기반 스킬, 도감, 이격 정보를 붙여 Operator를 만듭니다.
누락된 참조는 오류가 아니며 해당 필드가 비어 있게 됩니다.
"""

import logging
from typing import Iterable, Mapping

from .models.building import BaseSkillUnlock
from .models.common import frozen_mapping
from .models.handbook import HandbookEntry
from .models.operator import AlternateFormLink, Operator, SkillSlot
from .models.skill import Skill
from .tables.character_table import CharacterRecord

logger = logging.getLogger(__name__)


def resolve_skills(
    record: CharacterRecord, skills: Mapping[str, Skill]
) -> tuple[Mapping[str, Skill], tuple[SkillSlot, ...]]:
    """선언 순서대로 스킬 해석 (없는 ID는 버리고, 중복은 첫 슬롯 유지)"""
    resolved: dict[str, Skill] = {}
    slots = []
    for char_skill in record.skills:
        skill_id = char_skill.skill_id
        if skill_id is None or skill_id in resolved:
            continue
        skill = skills.get(skill_id)
        if skill is None:
            logger.debug(f"{record.id}: 스킬 테이블에 없는 스킬 무시 ({skill_id})")
            continue
        resolved[skill_id] = skill
        slots.append(
            SkillSlot(
                skill_id=skill_id,
                condition=char_skill.condition,
                prefab_key=char_skill.override_prefab_key,
                masteries=tuple(m.to_mastery() for m in char_skill.masteries),
            )
        )
    return frozen_mapping(resolved), tuple(slots)


def sort_base_skills(unlocks: Iterable[BaseSkillUnlock]) -> tuple[BaseSkillUnlock, ...]:
    """(정예화, 레벨, 슬롯, 슬롯 내 순서) 기준 정렬"""
    indexed = list(enumerate(unlocks))
    indexed.sort(
        key=lambda pair: (
            int(pair[1].condition.promotion),
            pair[1].condition.level,
            pair[1].slot,
            pair[0],
        )
    )
    return tuple(unlock for _, unlock in indexed)


def index_alternates(
    links: Iterable[AlternateFormLink], operator_ids: Iterable[str]
) -> dict[str, tuple[str, ...]]:
    """오퍼레이터 ID → 이격 ID 목록 (양방향, 최종 오퍼레이터끼리만)"""
    known = set(operator_ids)
    alternates: dict[str, list[str]] = {}
    for link in links:
        members = [m for m in link.members if m in known]
        for member in members:
            targets = alternates.setdefault(member, [])
            for other in members:
                if other != member and other not in targets:
                    targets.append(other)
    return {op_id: tuple(ids) for op_id, ids in alternates.items() if ids}


def build_operator(
    record: CharacterRecord,
    skills: Mapping[str, Skill],
    base_skills: Mapping[str, tuple[BaseSkillUnlock, ...]],
    handbook: Mapping[str, HandbookEntry],
    alternate_ids: tuple[str, ...] = (),
) -> Operator:
    resolved, slots = resolve_skills(record, skills)
    return Operator(
        id=record.id,
        name=record.name,
        profession=record.profession,
        sub_profession=record.sub_profession_id,
        position=record.position,
        rarity=record.stars,
        nation_id=record.nation_id,
        group_id=record.group_id,
        team_id=record.team_id,
        display_number=record.display_number,
        appellation=record.appellation,
        potential_item_id=record.potential_item_id,
        recruitment_tags=tuple(record.tag_list),
        skills=resolved,
        skill_slots=slots,
        base_skills=sort_base_skills(base_skills.get(record.id, ())),
        handbook=handbook.get(record.id),
        alternate_ids=alternate_ids,
        promotions=record.to_promotions(),
        trust_bonus=record.to_trust_bonus(),
        potentials=record.to_potentials(),
        talents=record.to_talents(),
    )


def link_operators(
    candidates: Iterable[CharacterRecord],
    skills: Mapping[str, Skill],
    base_skills: Mapping[str, tuple[BaseSkillUnlock, ...]],
    handbook: Mapping[str, HandbookEntry],
    alternates: Iterable[AlternateFormLink],
) -> dict[str, Operator]:
    """최종 Operator 생성 (ID 순 정렬, 예외 없음)

    Args:
        candidates: 필터링된 캐릭터 레코드
        skills: 스킬 ID → Skill (오퍼레이터 간 같은 인스턴스 공유)
        base_skills: 캐릭터 ID → 기반 스킬 해금 목록
        handbook: 캐릭터 ID → 도감
        alternates: 이격 그룹

    Returns:
        오퍼레이터 ID 순으로 정렬된 {id: Operator}
    """
    records = {record.id: record for record in candidates}
    alternate_index = index_alternates(alternates, records)

    operators = {}
    for op_id in sorted(records):
        operators[op_id] = build_operator(
            records[op_id],
            skills,
            base_skills,
            handbook,
            alternate_index.get(op_id, ()),
        )
    logger.debug(f"오퍼레이터 {len(operators)}명 연결 완료")
    return operators
