"""Matching data model - Report / ScoringResult / RankedMatch

Report records are owned by the collaborator (request layer / storage). The
engine only reads them; attributes are derived lazily and cached by the
extractor, never stored on the record.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple, Optional, Union

from src.utils.text.matching.signals import ExtractedAttributes, extract_attributes

EventDate = Union[date, datetime]


class ReportKind(str, Enum):
    """리포트 종류 (tag)"""

    LOST = "lost"
    FOUND = "found"

    @property
    def opposite(self) -> "ReportKind":
        return ReportKind.FOUND if self is ReportKind.LOST else ReportKind.LOST


@dataclass(frozen=True)
class Location:
    """구조화된 위치. 좌표가 하나라도 없으면 GPS 신호는 중립값 처리됩니다."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    place_name: Optional[str] = None  # "Library 2nd floor"
    area: Optional[str] = None  # 동네/캠퍼스 블록 등 상위 구역

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass(frozen=True)
class Report:
    """분실/습득 리포트 1건.

    kind로 lost/found를 구분합니다 (서브클래스 없음).
    community/owner_id는 후보 풀 필터링(MatchOrchestrator)에만 사용됩니다.
    """

    id: str
    kind: ReportKind
    category: str
    description: str = ""
    item_name: str = ""
    location: Optional[Location] = None
    event_date: Optional[EventDate] = None
    community: Optional[str] = None
    owner_id: Optional[str] = None

    @classmethod
    def lost(cls, id: str, category: str, **fields) -> "Report":
        return cls(id=id, kind=ReportKind.LOST, category=category, **fields)

    @classmethod
    def found(cls, id: str, category: str, **fields) -> "Report":
        return cls(id=id, kind=ReportKind.FOUND, category=category, **fields)

    @property
    def attribute_text(self) -> str:
        return f"{self.item_name} {self.description}".strip()

    @property
    def attributes(self) -> ExtractedAttributes:
        """이름+설명에서 추출한 속성 (해시 키 캐시 경유)"""
        return extract_attributes(self.attribute_text)


@dataclass(frozen=True)
class ScoringResult:
    """(query, candidate) 1쌍의 점수 분해.

    개별 신호는 모두 [0, 1], total_score는 가중 합입니다.
    """

    category_score: float
    location_score: float
    tfidf_score: float
    fuzzy_score: float
    attribute_score: float
    date_score: float
    total_score: float

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    def percent(self) -> dict[str, int]:
        """UI 표시용 0~100 정수 점수"""
        return {name: int(round(value * 100)) for name, value in self.to_dict().items()}


class RankedMatch(NamedTuple):
    """랭킹 결과 1건 - (report, result) 로 언패킹 가능"""

    report: Report
    result: ScoringResult
