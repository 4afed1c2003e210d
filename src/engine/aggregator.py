"""Aggregator - per-pair weighted score

score(query, candidate, index, config) -> ScoringResult

Precondition: index는 query와 candidate가 속한 풀로 build_index 한 것이어야
합니다. 다른 풀의 인덱스를 넘기는 것은 호출자 오류이며 검사하지 않습니다.
"""

from __future__ import annotations

import math
from typing import Optional

from src.utils.text import normalize_text
from src.utils.text.matching import CorpusIndex, fuzzy_similarity, jaccard_similarity

from .config import SignalConfig, WeightConfig
from .models import Report, ScoringResult
from .scorers import category_score, date_score, location_score


def _unit(value: float) -> float:
    """NaN 제거 + [0, 1] clamp"""
    if not math.isfinite(value):
        return 0.0
    return min(1.0, max(0.0, value))


def name_fuzzy_score(query: Report, candidate: Report) -> float:
    """정규화 아이템명 편집거리 유사도. 한쪽이라도 이름이 없으면 설명으로 비교."""
    a = normalize_text(query.item_name)
    b = normalize_text(candidate.item_name)
    if not a or not b:
        a = normalize_text(query.description)
        b = normalize_text(candidate.description)
    return fuzzy_similarity(a, b)


def attribute_score(query: Report, candidate: Report) -> float:
    """brand ∪ color ∪ model 집합의 Jaccard (양쪽 모두 비면 0)"""
    return jaccard_similarity(query.attributes.as_set(), candidate.attributes.as_set())


def score(
    query: Report,
    candidate: Report,
    index: CorpusIndex,
    config: Optional[WeightConfig] = None,
    signals: Optional[SignalConfig] = None,
) -> ScoringResult:
    """두 리포트의 신호별 점수와 가중 합계.

    Args:
        query: 기준 리포트
        candidate: 후보 리포트
        index: 이 풀에 대해 만든 TF-IDF 인덱스
        config: 가중치 (기본: WeightConfig())
        signals: 신호 파라미터 (기본: SignalConfig())

    Returns:
        ScoringResult: 설명 가능한 점수 분해
    """
    weights = (config or WeightConfig()).effective()
    params = signals or SignalConfig()

    parts = {
        "category": _unit(category_score(query, candidate, params)),
        "location": _unit(location_score(query, candidate, params)),
        "tfidf": _unit(index.similarity(query.description, candidate.description)),
        "fuzzy": _unit(name_fuzzy_score(query, candidate)),
        "attribute": _unit(attribute_score(query, candidate)),
        "date": _unit(date_score(query, candidate, params)),
    }

    total = sum(weights[name] * value for name, value in parts.items())

    return ScoringResult(
        category_score=parts["category"],
        location_score=parts["location"],
        tfidf_score=parts["tfidf"],
        fuzzy_score=parts["fuzzy"],
        attribute_score=parts["attribute"],
        date_score=parts["date"],
        total_score=total,
    )
