"""Similarity helpers."""

from __future__ import annotations

from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein

from ..core.cleaning import normalize_text


def edit_distance(a: str, b: str) -> int:
    """단일 문자 삽입/삭제/치환 기준 Levenshtein 거리"""
    return Levenshtein.distance(a or "", b or "")


def fuzzy_similarity(a: str | None, b: str | None) -> float:
    """두 짧은 문자열의 유사도 (0~1).

    1 - edit_distance / max(len(a), len(b))
    - 둘 다 빈 문자열이면 1.0 (동일한 빈 값)
    - 대칭: fuzzy_similarity(a, b) == fuzzy_similarity(b, a)
    """
    a = a or ""
    b = b or ""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - (edit_distance(a, b) / longest)


def fuzzy_score(query: str | None, candidate: str | None) -> float:
    """정규화 후 fuzzy_similarity (아이템명 비교용)"""
    return fuzzy_similarity(normalize_text(query), normalize_text(candidate))


def is_similar(a: str, b: str, threshold: float = 0.7) -> bool:
    """임계값 이상이면 비슷한 문자열로 판단"""
    return fuzzy_score(a, b) >= threshold


def find_best_match(target: str, candidates: Iterable[str]) -> Optional[tuple[str, float]]:
    """후보 중 target과 가장 비슷한 문자열과 점수.

    동점이면 먼저 나온 후보를 유지합니다. 후보가 없으면 None.
    """
    best: Optional[tuple[str, float]] = None
    for candidate in candidates:
        score = fuzzy_score(target, candidate)
        if best is None or score > best[1]:
            best = (candidate, score)
    return best


def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """|A ∩ B| / |A ∪ B|. 둘 다 비어 있으면 0.0"""
    set_a = set(a)
    set_b = set(b)
    union = set_a | set_b
    if not union:
        return 0.0
    return len(set_a & set_b) / len(union)
