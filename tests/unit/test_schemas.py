"""요청/응답 스키마 유닛 테스트"""
from datetime import date

import pytest
from pydantic import ValidationError

from src.engine.models import ReportKind, ScoringResult
from src.api.routes.match_routes import _weights
from src.engine.config import WeightConfig
from src.schemas.match_schema import RankRequest, ReportPayload, ScorePayload, WeightPayload


def _payload(**overrides):
    data = {"id": "lost-1", "kind": "lost", "category": "electronics"}
    data.update(overrides)
    return data


class TestReportPayload:

    def test_to_report(self):
        payload = ReportPayload(
            **_payload(
                description="black sony headphones",
                location={"latitude": 12.97, "longitude": 77.59, "place_name": "Library"},
                event_date="2026-01-07",
            )
        )
        report = payload.to_report()
        assert report.kind is ReportKind.LOST
        assert report.location.has_coordinates
        assert report.location.place_name == "Library"
        assert report.event_date is not None
        assert report.event_date.year == 2026

    def test_optional_fields_default(self):
        report = ReportPayload(**_payload()).to_report()
        assert report.location is None
        assert report.event_date is None
        assert report.description == ""

    def test_event_date_accepts_date(self):
        report = ReportPayload(**_payload(event_date=date(2026, 1, 7))).to_report()
        assert report.event_date == date(2026, 1, 7)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"id": "   "},
            {"category": ""},
            {"kind": "stolen"},
            {"location": {"latitude": 100.0, "longitude": 0.0}},
            {"location": {"latitude": 0.0, "longitude": 181.0}},
        ],
    )
    def test_invalid_payloads(self, overrides):
        with pytest.raises(ValidationError):
            ReportPayload(**_payload(**overrides))

    def test_strips_id(self):
        assert ReportPayload(**_payload(id=" lost-1 ")).id == "lost-1"


class TestRankRequest:

    def test_defaults(self):
        request = RankRequest(query=_payload())
        assert request.candidates == []
        assert request.weights is None
        assert request.top_k is None


class TestWeightPayload:
    """요청 가중치는 기본 가중치 위에 병합됨"""

    def test_omitted_fields_are_none(self):
        payload = WeightPayload(w_date=0)
        assert payload.model_dump(exclude_none=True) == {"w_date": 0.0}

    def test_partial_override_keeps_configured_defaults(self):
        defaults = WeightConfig(w_category=0.5, w_location=0.1, w_tfidf=0.1, w_fuzzy=0.1, w_attribute=0.1, w_date=0.1)
        merged = _weights(WeightPayload(w_date=0), defaults)
        assert merged.w_date == 0.0
        assert merged.w_category == 0.5
        assert merged.w_location == 0.1
        assert merged.normalize is defaults.normalize

    def test_no_payload_returns_defaults(self):
        defaults = WeightConfig(w_category=1, w_location=0, w_tfidf=0, w_fuzzy=0, w_attribute=0, w_date=0)
        assert _weights(None, defaults) is defaults


def test_score_payload_from_result():
    result = ScoringResult(1.0, 0.5, 0.25, 0.75, 0.0, 1.0, 0.6)
    payload = ScorePayload.from_result(result)
    assert payload.model_dump() == result.to_dict()
    assert result.percent()["total_score"] == 60
