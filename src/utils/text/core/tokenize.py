"""Tokenization utilities for matching."""

from __future__ import annotations

from .cleaning import sanitize_text


def tokenize_words(text: str | None) -> list[str]:
    """문장부호를 제거한 뒤 공백 기준으로 단어 목록을 반환 (순서/중복 유지)."""
    cleaned = sanitize_text(text)
    if not cleaned:
        return []
    return cleaned.split(" ")


def word_ngrams(tokens: list[str], max_n: int = 2) -> list[str]:
    """연속 단어 n-gram (n=1..max_n).

    예: ["sony", "wh", "1000xm4"] ->
        ["sony", "wh", "1000xm4", "sony wh", "wh 1000xm4"]
    """
    grams: list[str] = []
    for n in range(1, max_n + 1):
        for i in range(len(tokens) - n + 1):
            grams.append(" ".join(tokens[i : i + n]))
    return grams


def tokenize_keywords(text: str | None, stopwords: set[str] | None = None, min_length: int = 2) -> list[str]:
    """TF-IDF용 키워드 토큰화.

    - 길이 min_length 미만 토큰 제거 ("a", "x")
    - 불용어 제거
    """
    stop = stopwords or set()
    return [t for t in tokenize_words(text) if len(t) >= min_length and t not in stop]
