"""모델 동작 테스트"""

import pytest

from ak_data.common import parse_region, strip_tags
from ak_data.common.language_codes import Region, locale_to_server
from ak_data.common.text import template_keys
from ak_data.errors import GameDataError, MalformedRecord, SourceNotFound, SourceUnavailable
from ak_data.models import (
    HandbookStory,
    HandbookUnlock,
    Promotion,
    PromotionAndLevel,
    TrustBonus,
    UnlockKind,
)

E0_1 = PromotionAndLevel(Promotion.NONE, 1)
E1_1 = PromotionAndLevel(Promotion.ELITE1, 1)


class TestPromotionAndLevel:
    """Test ordering of promotion + level."""

    def test_promotion_first(self) -> None:
        assert PromotionAndLevel(Promotion.NONE, 90) < E1_1
        assert E1_1 < PromotionAndLevel(Promotion.ELITE1, 2)

    def test_str(self) -> None:
        assert str(Promotion.ELITE2.with_level(30)) == "E2 Lv.30"


class TestOperatorAttributes:
    """Test attribute interpolation and trust bonus."""

    def test_level_interpolation(self, game_data) -> None:
        kroos = game_data.get_operator("char_003_kroos")
        attributes = kroos.get_attributes(Promotion.NONE.with_level(25))
        assert attributes.level == 25
        assert attributes.max_hp == 840
        assert attributes.atk == 286
        assert attributes.defense == 74
        # 보간하지 않는 값은 최소 키 프레임 값
        assert attributes.cost == 9

    def test_trust_bonus(self, game_data) -> None:
        kroos = game_data.get_operator("char_003_kroos")
        assert kroos.trust_bonus == TrustBonus(max_hp=0, atk=40, defense=0)
        full = kroos.get_attributes(Promotion.NONE.with_level(50), trust=200)
        half = kroos.get_attributes(Promotion.NONE.with_level(50), trust=100)
        assert full.atk == 375 + 40
        assert half.atk == 375 + 20
        # 상한 200
        assert kroos.get_attributes(Promotion.NONE.with_level(50), trust=250).atk == full.atk

    def test_missing_promotion(self, game_data) -> None:
        kroos = game_data.get_operator("char_003_kroos")
        assert kroos.max_promotion is Promotion.ELITE1
        assert kroos.get_attributes(Promotion.ELITE2.with_level(1)) is None
        assert dict(kroos.get_promotion(Promotion.ELITE1).upgrade_cost) == {"4001": 10000}

    def test_talent_phases(self, game_data) -> None:
        talent = game_data.get_operator("char_003_kroos").talents[0]
        assert talent.get_unlocked(E0_1, 0).description == "20% chance to crit"
        assert talent.get_unlocked(E1_1, 0).description == "30% chance to crit"
        assert dict(talent.phases[0].effects) == {"prob": 0.2}

    def test_potentials(self, game_data) -> None:
        potentials = game_data.get_operator("char_003_kroos").potentials
        assert [p.potential_type for p in potentials] == ["BUFF", "1"]
        assert potentials[1].description == "ATK +12"

    def test_unlocked_base_skills(self, game_data) -> None:
        amiya = game_data.get_operator("char_002_amiya")
        assert [u.id for u in amiya.iter_unlocked_base_skills(E1_1)] == ["control_amiya[010]"]
        e2 = Promotion.ELITE2.with_level(1)
        assert [u.id for u in amiya.iter_unlocked_base_skills(e2)] == [
            "control_amiya[020]",
            "control_amiya[010]",
        ]


class TestHandbook:
    """Test handbook unlock checks."""

    def test_trust_unlock(self) -> None:
        unlock = HandbookUnlock(UnlockKind.TRUST, trust=50)
        assert not unlock.test(E0_1, 49)
        assert unlock.test(E0_1, 50)

    def test_promotion_unlock(self) -> None:
        unlock = HandbookUnlock(UnlockKind.PROMOTION, condition=E1_1)
        assert not unlock.test(PromotionAndLevel(Promotion.NONE, 50), 200)
        assert unlock.test(E1_1, 0)

    def test_operator_unlock_is_never_satisfied(self) -> None:
        story = HandbookStory("t", "x", HandbookUnlock(UnlockKind.OPERATOR, operator_id="char_002_amiya"))
        assert not story.is_unlocked(Promotion.ELITE2.with_level(90), 200)

    def test_iter_unlocked(self, game_data) -> None:
        handbook = game_data.get_operator("char_003_kroos").handbook
        titles = [s.title for s in handbook.iter_unlocked(E0_1, 20)]
        assert titles == ["Basic Info", "Profile"]

    def test_find_line_missing(self) -> None:
        assert HandbookStory("t", "[Race] Cautus").find_line("Birthplace") is None


class TestText:
    """Test rich text helpers."""

    def test_strip_tags(self) -> None:
        assert strip_tags("<@ba.vup>+{atk:0%}</> and <$ba.stun>stun</>") == "+{atk:0%} and stun"

    def test_template_keys(self) -> None:
        assert template_keys("{atk:0%} up, {-def} down, {ATK}") == ["atk", "def"]


class TestRegion:
    """Test region code parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [("ko_KR", Region.KO_KR), ("kr", Region.KO_KR), ("ja", Region.JA_JP), ("tw", Region.ZH_TW), ("EN_us", Region.EN_US)],
    )
    def test_parse_region(self, value, expected) -> None:
        assert parse_region(value) is expected

    def test_unknown_region(self) -> None:
        with pytest.raises(ValueError):
            parse_region("xx")

    def test_locale_to_server(self) -> None:
        assert locale_to_server("zh_TW") == "tw"
        assert locale_to_server("unknown") == "unknown"


class TestErrors:
    """Test error context formatting."""

    def test_stage_defaults(self) -> None:
        assert SourceUnavailable("x").stage == "load"
        assert SourceNotFound("x").stage == "load"
        assert MalformedRecord("skill_table", "s1").stage == "decode"
        assert GameDataError("x").stage is None

    def test_str_includes_stage_and_table(self) -> None:
        error = MalformedRecord("skill_table", "s1", "levels가 비어 있습니다")
        assert str(error).startswith("[decode:skill_table]")
        assert "'s1'" in str(error)
        assert error.detail == "levels가 비어 있습니다"

    def test_str_without_stage(self) -> None:
        assert str(GameDataError("x")) == "x"
        assert str(GameDataError("x", table="item_table")) == "[item_table] x"

    def test_hierarchy(self) -> None:
        for cls in (SourceUnavailable, SourceNotFound, MalformedRecord):
            assert issubclass(cls, GameDataError)
