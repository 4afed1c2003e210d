"""Scoring / Ranking configuration

모든 설정 객체는 생성 시점(__post_init__)에 검증됩니다. 잘못된 값은
스코어링 전에 ConfigurationException으로 즉시 실패하며 clamp하지 않습니다.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, fields
from typing import Optional

from src.core.config import Settings, settings as default_settings
from src.core.exceptions import (
    ConfigurationException,
    InvalidThresholdException,
    InvalidTopKException,
    InvalidWeightException,
)

SIGNALS = ("category", "location", "tfidf", "fuzzy", "attribute", "date")


def _check_unit(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidThresholdException(name, value)


@dataclass(frozen=True)
class WeightConfig:
    """신호별 가중치.

    기본값 합은 1 (25/20/25/15/10/5). normalize=True(기본)면 호출자가 준
    가중치를 합 1로 재정규화하므로 모든 가중치에 같은 양수를 곱해도
    total_score는 변하지 않습니다.
    """

    w_category: float = 0.25
    w_location: float = 0.20
    w_tfidf: float = 0.25
    w_fuzzy: float = 0.15
    w_attribute: float = 0.10
    w_date: float = 0.05
    normalize: bool = True

    def __post_init__(self):
        """설정 검증"""
        for f in fields(self):
            if not f.name.startswith("w_"):
                continue
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or math.isnan(value) or math.isinf(value) or value < 0:
                raise InvalidWeightException(f.name, value)
        if self.total == 0:
            raise ConfigurationException(
                "At least one weight must be positive",
                "INVALID_WEIGHT",
                {"weights": self.raw()},
            )

    @property
    def total(self) -> float:
        return sum(self.raw().values())

    def raw(self) -> dict[str, float]:
        return {name: float(getattr(self, f"w_{name}")) for name in SIGNALS}

    def effective(self) -> dict[str, float]:
        """실제 적용 가중치 (normalize=True면 합 1)"""
        raw = self.raw()
        if not self.normalize:
            return raw
        total = self.total
        return {name: value / total for name, value in raw.items()}

    @classmethod
    def from_settings(cls, s: Optional[Settings] = None) -> "WeightConfig":
        s = s or default_settings
        return cls(
            w_category=s.matching_w_category,
            w_location=s.matching_w_location,
            w_tfidf=s.matching_w_tfidf,
            w_fuzzy=s.matching_w_fuzzy,
            w_attribute=s.matching_w_attribute,
            w_date=s.matching_w_date,
        )


@dataclass(frozen=True)
class SignalConfig:
    """신호 점수 파라미터 (카테고리/위치/날짜)"""

    category_partial_score: float = 0.5
    neutral_score: float = 0.5
    decay_radius_km: float = 5.0
    max_window_days: float = 30.0
    use_place_names: bool = True

    def __post_init__(self):
        _check_unit("category_partial_score", self.category_partial_score)
        _check_unit("neutral_score", self.neutral_score)
        if not self.decay_radius_km > 0:
            raise ConfigurationException(
                f"decay_radius_km must be positive, got {self.decay_radius_km}",
                details={"decay_radius_km": self.decay_radius_km},
            )
        if not self.max_window_days > 0:
            raise ConfigurationException(
                f"max_window_days must be positive, got {self.max_window_days}",
                details={"max_window_days": self.max_window_days},
            )

    @classmethod
    def from_settings(cls, s: Optional[Settings] = None) -> "SignalConfig":
        s = s or default_settings
        return cls(
            category_partial_score=s.matching_category_partial_score,
            neutral_score=s.matching_neutral_score,
            decay_radius_km=s.matching_location_decay_km,
            max_window_days=s.matching_date_window_days,
        )


@dataclass(frozen=True)
class RankConfig:
    """랭킹 설정: 가중치 + 최소 점수(τ) + top-K

    Attributes:
        weights: 신호 가중치
        threshold: total_score < threshold 후보 제외 (τ ∈ [0, 1])
        top_k: 최대 반환 개수 (>= 1)
        min_name_similarity: fuzzy_score 하한 (0이면 비활성)
        signals: 신호 파라미터
        max_workers: 후보 스코어링 스레드 수 (1이면 순차)
    """

    weights: WeightConfig = field(default_factory=WeightConfig)
    threshold: float = 0.5
    top_k: int = 10
    min_name_similarity: float = 0.0
    signals: SignalConfig = field(default_factory=SignalConfig)
    max_workers: int = 1

    def __post_init__(self):
        _check_unit("threshold", self.threshold)
        _check_unit("min_name_similarity", self.min_name_similarity)
        if isinstance(self.top_k, bool) or not isinstance(self.top_k, int) or self.top_k < 1:
            raise InvalidTopKException(self.top_k)
        if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int) or self.max_workers < 1:
            raise ConfigurationException(
                f"max_workers must be >= 1, got {self.max_workers}",
                details={"max_workers": self.max_workers},
            )

    @classmethod
    def from_settings(cls, s: Optional[Settings] = None) -> "RankConfig":
        s = s or default_settings
        return cls(
            weights=WeightConfig.from_settings(s),
            threshold=s.matching_min_score,
            top_k=s.matching_top_k,
            min_name_similarity=s.matching_min_name_similarity,
            signals=SignalConfig.from_settings(s),
            max_workers=s.matching_max_workers,
        )
