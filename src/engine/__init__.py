"""Engine Layer - Matching and Ranking

This module provides the matching engine, implementing:
- build_index: TF-IDF corpus index for one candidate pool
- score: per-pair weighted ScoringResult (Aggregator)
- rank: thresholded, deterministic top-K ranking (Ranker)
- MatchOrchestrator: candidate pool selection for a new report
- Report / ScoringResult / RankedMatch: data model
- WeightConfig / SignalConfig / RankConfig: validated configuration
"""

from src.utils.text.matching import CorpusIndex, ExtractedAttributes, build_index

from .aggregator import score
from .config import RankConfig, SignalConfig, WeightConfig
from .models import Location, RankedMatch, Report, ReportKind, ScoringResult
from .orchestrator import MatchOrchestrator
from .ranker import is_valid_match, rank

__all__ = [
    "build_index",
    "score",
    "rank",
    "is_valid_match",
    "MatchOrchestrator",
    "CorpusIndex",
    "ExtractedAttributes",
    "Location",
    "RankedMatch",
    "Report",
    "ReportKind",
    "ScoringResult",
    "RankConfig",
    "SignalConfig",
    "WeightConfig",
]
