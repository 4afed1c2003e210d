"""Pydantic 스키마 정의 (매칭 API 요청/응답)"""
from datetime import date, datetime
from typing import Optional, List, Union
from pydantic import BaseModel, Field, field_validator

from src.engine.models import Location, Report, ReportKind, ScoringResult


class LocationPayload(BaseModel):
    """리포트 위치"""
    latitude: Optional[float] = Field(None, ge=-90, le=90, description="위도")
    longitude: Optional[float] = Field(None, ge=-180, le=180, description="경도")
    place_name: Optional[str] = Field(None, max_length=200, description="장소명 (예: Central Library)")
    area: Optional[str] = Field(None, max_length=100, description="상위 구역 (예: North Campus)")

    def to_location(self) -> Location:
        return Location(
            latitude=self.latitude,
            longitude=self.longitude,
            place_name=self.place_name,
            area=self.area,
        )


class ReportPayload(BaseModel):
    """분실/습득 리포트 (수집 측이 검증한 레코드)"""
    id: str = Field(..., min_length=1, max_length=100, description="리포트 ID")
    kind: ReportKind = Field(..., description="lost | found")
    category: str = Field(..., min_length=1, max_length=100, description="카테고리")
    item_name: str = Field("", max_length=200, description="아이템명")
    description: str = Field("", max_length=5000, description="자유 텍스트 설명")
    location: Optional[LocationPayload] = Field(None, description="위치")
    event_date: Optional[Union[datetime, date]] = Field(None, description="분실/습득 일시")
    community: Optional[str] = Field(None, max_length=100, description="커뮤니티")
    owner_id: Optional[str] = Field(None, max_length=100, description="작성자 ID")

    @field_validator("id", "category")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    def to_report(self) -> Report:
        return Report(
            id=self.id,
            kind=self.kind,
            category=self.category,
            item_name=self.item_name,
            description=self.description,
            location=self.location.to_location() if self.location else None,
            event_date=self.event_date,
            community=self.community,
            owner_id=self.owner_id,
        )


class WeightPayload(BaseModel):
    """신호 가중치 override.

    생략한 필드는 서버 기본 가중치(설정값)를 그대로 사용합니다.
    음수 검증은 엔진 설정에서 수행합니다.
    """
    w_category: Optional[float] = None
    w_location: Optional[float] = None
    w_tfidf: Optional[float] = None
    w_fuzzy: Optional[float] = None
    w_attribute: Optional[float] = None
    w_date: Optional[float] = None


class RankRequest(BaseModel):
    """랭킹 요청"""
    query: ReportPayload
    candidates: List[ReportPayload] = Field(default_factory=list, max_length=2000)
    weights: Optional[WeightPayload] = None
    threshold: Optional[float] = Field(None, description="최소 total_score (기본: 설정값)")
    top_k: Optional[int] = Field(None, description="최대 결과 수 (기본: 설정값)")
    min_name_similarity: Optional[float] = None


class ScorePayload(BaseModel):
    """신호별 점수 분해"""
    category_score: float
    location_score: float
    tfidf_score: float
    fuzzy_score: float
    attribute_score: float
    date_score: float
    total_score: float

    @classmethod
    def from_result(cls, result: ScoringResult) -> "ScorePayload":
        return cls(**result.to_dict())


class RankedMatchPayload(BaseModel):
    """랭킹 결과 1건"""
    rank: int = Field(..., ge=1, description="순위")
    report_id: str
    kind: ReportKind
    category: str
    item_name: str
    scores: ScorePayload
    attributes: dict[str, list[str]] = Field(default_factory=dict, description="후보에서 추출한 속성")


class RankResponse(BaseModel):
    """랭킹 응답"""
    status: str = Field(..., description="success or error")
    data: List[RankedMatchPayload] = Field(default_factory=list)
    message: str
    error_code: Optional[str] = None


class ScoreRequest(BaseModel):
    """단일 쌍 점수 요청"""
    query: ReportPayload
    candidate: ReportPayload
    weights: Optional[WeightPayload] = None


class ScoreResponse(BaseModel):
    """단일 쌍 점수 응답"""
    status: str
    data: Optional[ScorePayload] = None
    message: str
    error_code: Optional[str] = None


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    synonym_entries: int = 0
    attribute_cache_size: int = 0
