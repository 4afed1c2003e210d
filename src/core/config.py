"""설정 관리 - 환경 변수 로드 및 검증"""
from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 매칭 가중치 (합이 1이 아니어도 엔진에서 정규화)
    matching_w_category: float = 0.25
    matching_w_location: float = 0.20
    matching_w_tfidf: float = 0.25
    matching_w_fuzzy: float = 0.15
    matching_w_attribute: float = 0.10
    matching_w_date: float = 0.05

    # 랭킹
    matching_min_score: float = 0.5
    matching_top_k: int = 10
    # 이름 유사도 하한 (0이면 비활성화)
    matching_min_name_similarity: float = 0.0
    # 후보 스코어링 워커 수 (1이면 순차 실행)
    matching_max_workers: int = 1

    # 신호별 파라미터
    matching_category_partial_score: float = 0.5
    matching_neutral_score: float = 0.5
    matching_location_decay_km: float = 5.0
    matching_date_window_days: float = 30.0

    # 속성 추출 캐시 크기
    attribute_cache_size: int = 4096

    # 리소스 디렉토리 (기본: 프로젝트 루트의 resources/)
    resources_dir: Optional[str] = None

    # API
    api_title: str = "Lost & Found Matching Service"
    api_version: str = "1.0.0"
    api_description: str = "Ranks found reports against lost reports (and vice versa) with an explainable score."

    # 로깅
    log_level: str = "INFO"

    @field_validator(
        "matching_w_category",
        "matching_w_location",
        "matching_w_tfidf",
        "matching_w_fuzzy",
        "matching_w_attribute",
        "matching_w_date",
    )
    @classmethod
    def validate_weights(cls, v: float) -> float:
        if v < 0:
            raise ValueError("matching weights must be >= 0")
        return v

    @field_validator(
        "matching_min_score",
        "matching_min_name_similarity",
        "matching_category_partial_score",
        "matching_neutral_score",
    )
    @classmethod
    def validate_unit_interval(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("value must be within [0, 1]")
        return v

    @field_validator("matching_top_k", "matching_max_workers", "attribute_cache_size")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        if v < 1:
            raise ValueError("value must be >= 1")
        return v

    @field_validator("matching_location_decay_km", "matching_date_window_days")
    @classmethod
    def validate_positive_scale(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("decay radius and date window must be positive")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
