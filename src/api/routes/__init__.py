"""API routes package."""

from .health_routes import router as health_router
from .match_routes import router as match_router, get_default_rank_config

__all__ = ["health_router", "match_router", "get_default_rank_config"]
