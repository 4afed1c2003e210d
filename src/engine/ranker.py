"""Ranker - orders a candidate pool against one query report

1. TF-IDF 인덱스 빌드 (쿼리 + 후보 설명, 스코어링 전에 1회)
2. 후보별 ScoringResult 계산 (max_workers > 1이면 스레드 병렬)
3. total_score < threshold, fuzzy_score < min_name_similarity 제외
4. total_score 내림차순, 동점은 id 오름차순
5. 상위 top_k 반환
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from src.core.logging import logger
from src.utils.text.matching import CorpusIndex, build_index

from .aggregator import score
from .config import RankConfig
from .models import RankedMatch, Report, ScoringResult


def build_pool_index(query: Report, candidates: Sequence[Report]) -> CorpusIndex:
    """쿼리 + 후보 설명으로 인덱스 빌드"""
    return build_index([query.description, *(c.description for c in candidates)])


def is_valid_match(result: ScoringResult, config: RankConfig) -> bool:
    """최소 총점 + (설정 시) 최소 이름 유사도 충족 여부"""
    if result.total_score < config.threshold:
        return False
    if result.fuzzy_score < config.min_name_similarity:
        return False
    return True


def _sort_key(match: RankedMatch) -> tuple[float, str]:
    return (-match.result.total_score, str(match.report.id))


def rank(
    query: Report,
    candidates: Sequence[Report],
    config: Optional[RankConfig] = None,
    index: Optional[CorpusIndex] = None,
) -> list[RankedMatch]:
    """후보 풀을 query 기준으로 랭킹합니다.

    Args:
        query: 기준 리포트
        candidates: 후보 리포트 목록 (반대 kind). 빈 목록이면 [] 반환
        config: 랭킹 설정 (기본: RankConfig())
        index: 미리 만든 인덱스. 반드시 이 query + candidates 로 만든 것이어야
            합니다 (다른 풀의 인덱스 재사용은 결과 미정의)

    Returns:
        list[RankedMatch]: 길이 <= top_k, 결정적 순서
    """
    config = config or RankConfig()
    pool = list(candidates)
    if not pool:
        return []

    if index is None:
        index = build_pool_index(query, pool)

    def _score_one(candidate: Report) -> RankedMatch:
        return RankedMatch(candidate, score(query, candidate, index, config.weights, config.signals))

    if config.max_workers > 1 and len(pool) > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
            scored = list(executor.map(_score_one, pool))
    else:
        scored = [_score_one(c) for c in pool]

    accepted = [m for m in scored if is_valid_match(m.result, config)]
    accepted.sort(key=_sort_key)

    logger.debug(
        f"[rank] query={query.id} candidates={len(pool)} accepted={len(accepted)} "
        f"returned={min(len(accepted), config.top_k)}"
    )
    return accepted[: config.top_k]
