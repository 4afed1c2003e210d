"""속성(브랜드/색상/모델) 추출 유닛 테스트"""
import pytest

from src.utils.text.matching import (
    AttributeDictionary,
    ExtractedAttributes,
    attribute_cache_info,
    extract_attributes,
    extract_model_codes,
)


class TestExtractAttributes:
    """사전 기반 추출"""

    def test_brand_and_color(self):
        attrs = extract_attributes("Black Sony headphones")
        assert attrs.brands == frozenset({"sony"})
        assert attrs.colors == frozenset({"black"})
        assert attrs.models == frozenset()

    @pytest.mark.parametrize(
        "left, right",
        [
            ("grey hp laptop", "gray Hewlett-Packard laptop"),
            ("iPhone 13 in blue", "Apple iPhone 13, navy"),
            ("maroon rayban case", "red Ray-Ban case"),
        ],
    )
    def test_synonym_invariance(self, left, right):
        """동의어만 다른 설명은 같은 속성 집합"""
        assert extract_attributes(left) == extract_attributes(right)

    def test_canonical_values(self):
        attrs = extract_attributes("Apple iPhone 13, navy")
        assert attrs.brands == frozenset({"apple"})
        assert attrs.colors == frozenset({"blue"})
        assert "iphone 13" in attrs.models

    def test_two_word_color(self):
        attrs = extract_attributes("rose gold watch")
        assert "rose gold" in attrs.colors

    @pytest.mark.parametrize("text", [None, "", "   ", "!!!"])
    def test_empty_text(self, text):
        attrs = extract_attributes(text)
        assert attrs == ExtractedAttributes()
        assert attrs.is_empty
        assert attrs.as_set() == frozenset()

    def test_no_partial_matching(self):
        """'sonyx'는 'sony'로 보지 않음"""
        assert extract_attributes("sonyx speaker").brands == frozenset()

    def test_as_set_is_prefixed(self):
        attrs = extract_attributes("black sony wh1000xm4")
        assert attrs.as_set() == frozenset({"brand:sony", "color:black", "model:wh1000xm4"})

    def test_custom_dictionary(self):
        dictionary = AttributeDictionary.from_groups({"acme": ["acme corp"]}, {}, {})
        attrs = extract_attributes("ACME Corp bottle", dictionary=dictionary)
        assert attrs.brands == frozenset({"acme"})
        assert attribute_cache_info().currsize == 0


class TestModelCodes:
    """패턴 기반 모델코드"""

    def test_units_and_blacklist_excluded(self):
        codes = extract_model_codes(["galaxy", "a52", "128gb", "5g", "20w"], frozenset({"5g"}))
        assert codes == ["a52"]

    def test_mixed_code(self):
        assert extract_model_codes(["sony", "wh1000xm4"]) == ["wh1000xm4"]

    def test_plain_numbers_ignored(self):
        assert extract_model_codes(["13", "2024"]) == []

    def test_dedup_keeps_order(self):
        assert extract_model_codes(["s21", "a52", "s21"]) == ["s21", "a52"]

    @pytest.mark.parametrize("token", ["1st", "2nd", "3rd", "4th", "10am", "5pm", "2hrs"])
    def test_ordinals_and_times_ignored(self, token):
        assert extract_model_codes([token, "a52"]) == ["a52"]

    def test_floor_and_time_are_not_models(self):
        attrs = extract_attributes("left it on the 2nd floor around 5pm")
        assert attrs.models == frozenset()

    def test_shared_floor_and_time_do_not_overlap(self, make_report):
        """같은 층/시각만 공유하는 서로 다른 물건은 속성 점수 0"""
        from src.engine.aggregator import attribute_score

        query = make_report(id="q", kind="lost", description="blue backpack left on the 2nd floor at 5pm")
        candidate = make_report(id="c", description="charger found on the 2nd floor at 5pm")
        assert attribute_score(query, candidate) == 0.0


class TestAttributeCache:
    """정규화 텍스트 해시 키 캐시 (functools.lru_cache)"""

    def test_cache_hit_on_normalized_equal_text(self):
        first = extract_attributes("Black Sony")
        second = extract_attributes("  black   SONY ")
        assert first == second
        info = attribute_cache_info()
        assert info.misses == 1
        assert info.hits == 1
        assert info.currsize == 1

    def test_bounded_by_settings(self):
        from src.core.config import settings

        assert attribute_cache_info().maxsize == settings.attribute_cache_size

    def test_report_attributes_share_cache(self, make_report):
        report = make_report(description="Black Sony headphones")
        assert report.attributes == extract_attributes("black sony headphones")
        assert attribute_cache_info().hits == 1
