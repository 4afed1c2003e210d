"""설정 검증 / 예외 시나리오 테스트

잘못된 설정은 스코어링 전에 ConfigurationException으로 즉시 실패해야 합니다.
"""
import math

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.exceptions import (
    ConfigurationException,
    InvalidThresholdException,
    InvalidTopKException,
    InvalidWeightException,
    MatchingEngineException,
)
from src.engine import RankConfig, SignalConfig, WeightConfig


class TestWeightConfig:

    def test_negative_weight(self):
        with pytest.raises(InvalidWeightException) as exc_info:
            WeightConfig(w_tfidf=-0.1)
        assert exc_info.value.error_code == "INVALID_WEIGHT"
        assert exc_info.value.details["name"] == "w_tfidf"

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_weight(self, value):
        with pytest.raises(InvalidWeightException):
            WeightConfig(w_date=value)

    def test_all_zero_weights(self):
        with pytest.raises(ConfigurationException) as exc_info:
            WeightConfig(0, 0, 0, 0, 0, 0)
        assert exc_info.value.error_code == "INVALID_WEIGHT"

    def test_effective_weights_sum_to_one(self):
        assert sum(WeightConfig(1, 1, 1, 1, 1, 1).effective().values()) == pytest.approx(1.0)
        assert sum(WeightConfig().effective().values()) == pytest.approx(1.0)

    def test_default_weights(self):
        assert WeightConfig().raw() == {
            "category": 0.25,
            "location": 0.20,
            "tfidf": 0.25,
            "fuzzy": 0.15,
            "attribute": 0.10,
            "date": 0.05,
        }


class TestRankConfig:

    @pytest.mark.parametrize("threshold", [-0.01, 1.5, math.nan])
    def test_threshold_out_of_range(self, threshold):
        with pytest.raises(InvalidThresholdException) as exc_info:
            RankConfig(threshold=threshold)
        assert exc_info.value.error_code == "INVALID_THRESHOLD"

    @pytest.mark.parametrize("top_k", [0, -3, True])
    def test_invalid_top_k(self, top_k):
        with pytest.raises(InvalidTopKException) as exc_info:
            RankConfig(top_k=top_k)
        assert exc_info.value.error_code == "INVALID_TOP_K"

    def test_invalid_max_workers(self):
        with pytest.raises(ConfigurationException):
            RankConfig(max_workers=0)

    def test_min_name_similarity_range(self):
        with pytest.raises(InvalidThresholdException):
            RankConfig(min_name_similarity=2.0)

    def test_boundaries_accepted(self):
        assert RankConfig(threshold=0.0, top_k=1).top_k == 1
        assert RankConfig(threshold=1.0).threshold == 1.0

    def test_from_settings(self):
        config = RankConfig.from_settings(Settings(matching_top_k=3, matching_min_score=0.2))
        assert config.top_k == 3
        assert config.threshold == 0.2
        assert config.weights == WeightConfig()


class TestSignalConfig:

    def test_non_positive_radius(self):
        with pytest.raises(ConfigurationException):
            SignalConfig(decay_radius_km=0)

    def test_non_positive_window(self):
        with pytest.raises(ConfigurationException):
            SignalConfig(max_window_days=-1)

    def test_partial_score_range(self):
        with pytest.raises(InvalidThresholdException):
            SignalConfig(category_partial_score=1.2)


class TestSettings:

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            Settings(matching_w_date=-1)

    def test_top_k_rejected(self):
        with pytest.raises(ValidationError):
            Settings(matching_top_k=0)


class TestExceptionHierarchy:

    def test_str_includes_code(self):
        assert str(InvalidTopKException(0)) == "[INVALID_TOP_K] top_k must be >= 1, got 0"

    def test_all_config_errors_share_base(self):
        for exc in (InvalidTopKException(0), InvalidWeightException("w_date", -1), InvalidThresholdException("threshold", 2)):
            assert isinstance(exc, ConfigurationException)
            assert isinstance(exc, MatchingEngineException)
