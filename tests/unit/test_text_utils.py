"""텍스트 정규화/토큰화 유닛 테스트"""
import pytest

from src.utils.text import normalize_text, sanitize_text, tokenize_keywords, tokenize_words, word_ngrams


class TestNormalizeText:
    """normalize_text 테스트"""

    def test_lowercase_and_collapse_whitespace(self):
        assert normalize_text("  Black   SONY\tHeadphones \n") == "black sony headphones"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_empty_inputs(self, value):
        assert normalize_text(value) == ""

    @pytest.mark.parametrize(
        "value",
        ["Brown Leather WALLET", "  keys  on a   ring", "iPhone 13 (blue)", "ÉTUI Noir"],
    )
    def test_idempotent(self, value):
        """normalize(normalize(x)) == normalize(x)"""
        once = normalize_text(value)
        assert normalize_text(once) == once


class TestSanitizeText:
    def test_punctuation_becomes_space(self):
        assert sanitize_text("USB-C charger, white!") == "usb c charger white"

    def test_underscore_removed(self):
        assert sanitize_text("red_bag") == "red bag"


class TestTokenize:
    def test_tokenize_words(self):
        assert tokenize_words("Sony WH-1000XM4") == ["sony", "wh", "1000xm4"]

    def test_word_ngrams(self):
        assert word_ngrams(["a", "b", "c"]) == ["a", "b", "c", "a b", "b c"]

    def test_tokenize_keywords_drops_stopwords_and_short_tokens(self):
        tokens = tokenize_keywords("the black sony headphones a", {"the"})
        assert tokens == ["black", "sony", "headphones"]

    def test_tokenize_keywords_empty(self):
        assert tokenize_keywords(None) == []
