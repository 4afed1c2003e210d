"""전역 테스트 설정

역할:
- 테스트 환경 구성
- 리포트 팩토리 주입
- 전역 상태(속성 캐시) 초기화

금지:
- 대량 시나리오 데이터 (tests/fixtures에 둘 것)
"""

from __future__ import annotations

import os
import sys
from datetime import date, timedelta
from pathlib import Path
from typing import Any, Callable

import pytest


# 프로젝트 루트를 경로에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.engine.models import Location, Report, ReportKind  # noqa: E402
from src.utils.text.matching import clear_attribute_cache  # noqa: E402
from tests.fixtures import CAMPUS_REPORTS, HEADPHONES_SCENARIO  # noqa: E402

BASE_DATE = date(2026, 1, 1)


@pytest.fixture(scope="session", autouse=True)
def test_env() -> None:
    """테스트 환경 변수 설정 (세션 전역)"""
    os.environ["ENVIRONMENT"] = "test"
    os.environ["LOG_LEVEL"] = "INFO"


@pytest.fixture(autouse=True)
def reset_attribute_cache():
    """테스트 간 속성 캐시 격리"""
    clear_attribute_cache()
    yield
    clear_attribute_cache()


def report_from_dict(data: dict[str, Any]) -> Report:
    """fixtures dict -> Report (event_day는 BASE_DATE 기준 일수)"""
    fields = dict(data)
    location = fields.pop("location", None)
    event_day = fields.pop("event_day", None)
    return Report(
        id=fields.pop("id"),
        kind=ReportKind(fields.pop("kind")),
        category=fields.pop("category"),
        location=Location(**location) if location else None,
        event_date=BASE_DATE + timedelta(days=event_day) if event_day is not None else None,
        **fields,
    )


@pytest.fixture
def make_report() -> Callable[..., Report]:
    """기본값이 채워진 Report 팩토리"""

    def _make(id: str = "r-1", kind: str = "found", category: str = "electronics", **fields) -> Report:
        return Report(id=id, kind=ReportKind(kind), category=category, **fields)

    return _make


@pytest.fixture
def headphones_query() -> Report:
    return report_from_dict(HEADPHONES_SCENARIO["query"])


@pytest.fixture
def headphones_candidates() -> list[Report]:
    return [
        report_from_dict(HEADPHONES_SCENARIO["candidate_a"]),
        report_from_dict(HEADPHONES_SCENARIO["candidate_b"]),
    ]


@pytest.fixture
def campus_pool() -> list[Report]:
    return [report_from_dict(r) for r in CAMPUS_REPORTS]
