"""Match Routes (Engine Layer)

HTTP Layer가 Engine Layer로 요청을 위임하는 단순한 Translator 역할만 수행합니다.
스코어링은 CPU 작업이므로 동기 핸들러(스레드풀)로 실행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.core.exceptions import ConfigurationException
from src.core.logging import logger, sanitize_for_log
from src.engine import MatchOrchestrator, RankConfig, WeightConfig, build_index, score
from src.schemas.match_schema import (
    RankedMatchPayload,
    RankRequest,
    RankResponse,
    ScorePayload,
    ScoreRequest,
    ScoreResponse,
    WeightPayload,
)

router = APIRouter(prefix="/api/v1", tags=["matching"])

# 설정 기반 기본값 (싱글톤)
_default_rank_config: Optional[RankConfig] = None


def get_default_rank_config() -> RankConfig:
    """RankConfig 싱글톤 (환경 설정 기반)"""
    global _default_rank_config
    if _default_rank_config is None:
        _default_rank_config = RankConfig.from_settings()
    return _default_rank_config


def _weights(payload: Optional[WeightPayload], default: WeightConfig) -> WeightConfig:
    """요청 가중치를 기본 가중치 위에 병합 (생략 필드는 기본값 유지)"""
    if payload is None:
        return default
    merged = {f"w_{name}": value for name, value in default.raw().items()}
    merged.update(payload.model_dump(exclude_none=True))
    return WeightConfig(**merged, normalize=default.normalize)


def _config_error(exc: ConfigurationException, response_cls):
    logger.warning(f"[API] Invalid matching configuration: {exc}")
    body = response_cls(status="error", message=exc.message, error_code=exc.error_code)
    return JSONResponse(status_code=422, content=body.model_dump(mode="json"))


@router.post("/matches/rank", response_model=RankResponse)
def rank_matches(
    request: RankRequest,
    defaults: RankConfig = Depends(get_default_rank_config),
):
    """후보 리포트 랭킹 API

    Flow:
        1. 요청 설정 + 기본 설정 병합 (잘못된 설정은 422)
        2. 후보 풀 필터링 (반대 kind / 같은 community / 다른 작성자)
        3. Engine에 위임 (TF-IDF 인덱스 -> 스코어링 -> 랭킹)
        4. 결과를 HTTP Response로 변환
    """
    try:
        config = RankConfig(
            weights=_weights(request.weights, defaults.weights),
            threshold=defaults.threshold if request.threshold is None else request.threshold,
            top_k=defaults.top_k if request.top_k is None else request.top_k,
            min_name_similarity=(
                defaults.min_name_similarity
                if request.min_name_similarity is None
                else request.min_name_similarity
            ),
            signals=defaults.signals,
            max_workers=defaults.max_workers,
        )
    except ConfigurationException as e:
        return _config_error(e, RankResponse)

    query = request.query.to_report()
    pool = [c.to_report() for c in request.candidates]

    logger.info(f"[API] Rank request: query={query.id} candidates={len(pool)}")
    logger.debug(f"[API] Query description: {sanitize_for_log(query.description)}")
    matches = MatchOrchestrator(config).find_matches(query, pool)

    data = [
        RankedMatchPayload(
            rank=i,
            report_id=candidate.id,
            kind=candidate.kind,
            category=candidate.category,
            item_name=candidate.item_name,
            scores=ScorePayload.from_result(result),
            attributes=candidate.attributes.to_dict(),
        )
        for i, (candidate, result) in enumerate(matches, start=1)
    ]

    return RankResponse(
        status="success",
        data=data,
        message=f"{len(data)} match(es)" if data else "No matches above threshold",
    )


@router.post("/matches/score", response_model=ScoreResponse)
def score_pair(
    request: ScoreRequest,
    defaults: RankConfig = Depends(get_default_rank_config),
):
    """단일 쌍 점수 분해 API (인덱스는 두 설명으로만 구성)"""
    try:
        weights = _weights(request.weights, defaults.weights)
    except ConfigurationException as e:
        return _config_error(e, ScoreResponse)

    query = request.query.to_report()
    candidate = request.candidate.to_report()
    index = build_index([query.description, candidate.description])
    result = score(query, candidate, index, weights, defaults.signals)

    return ScoreResponse(
        status="success",
        data=ScorePayload.from_result(result),
        message="scored",
    )
