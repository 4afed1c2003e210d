"""API 엔드포인트 패키지 - export only."""

from .routes import health_router, match_router, get_default_rank_config

__all__ = ["health_router", "match_router", "get_default_rank_config"]
