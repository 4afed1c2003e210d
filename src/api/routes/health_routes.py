"""헬스 체크 엔드포인트"""
from fastapi import APIRouter
from datetime import datetime

from src.schemas.match_schema import HealthResponse
from src.core.config import settings
from src.core.logging import logger
from src.utils.text.normalization import get_synonym_map
from src.utils.text.matching import attribute_cache_info
from src import __version__

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 동의어 사전 로드 상태 (비어 있으면 degraded)
    """
    synonym_entries = len(get_synonym_map())
    if synonym_entries == 0:
        logger.warning("Synonym map is empty - check resources directory")

    return HealthResponse(
        status="ok" if synonym_entries else "degraded",
        timestamp=datetime.now(),
        version=__version__,
        synonym_entries=synonym_entries,
        attribute_cache_size=attribute_cache_info().currsize,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/docs"
    }
