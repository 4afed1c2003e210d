"""Signal scorers - category / location / date

각 함수는 두 리포트를 받아 [0, 1] 점수를 반환하는 순수 함수입니다.
선택 필드(좌표, 날짜)가 없으면 실패하지 않고 neutral_score로 대체합니다.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from functools import lru_cache
from typing import Mapping, Optional

from src.utils.resource_loader import load_category_groups
from src.utils.text import normalize_text

from .config import SignalConfig
from .models import EventDate, Location, Report

EARTH_RADIUS_KM = 6371.0

# 좌표가 없을 때 neutral_score 대신 쓰는 장소명 일치 점수
PLACE_EXACT_SCORE = 1.0
PLACE_CONTAINS_SCORE = 0.7
AREA_MATCH_SCORE = 0.5

_DEFAULT_SIGNALS = SignalConfig()


@lru_cache(maxsize=1)
def get_category_parents() -> Mapping[str, frozenset[str]]:
    """category -> 소속 parent group 집합 (1회 로드)"""
    parents: dict[str, set[str]] = {}
    for group, members in load_category_groups().items():
        for member in members or []:
            parents.setdefault(normalize_text(str(member)), set()).add(str(group))
    return {k: frozenset(v) for k, v in parents.items()}


def category_score(
    query: Report,
    candidate: Report,
    config: SignalConfig = _DEFAULT_SIGNALS,
    parents: Optional[Mapping[str, frozenset[str]]] = None,
) -> float:
    """동일 카테고리 1.0 (빈 값끼리도 동일) / 같은 parent group이면 partial / 그 외 0.0"""
    a = normalize_text(query.category)
    b = normalize_text(candidate.category)
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    table = get_category_parents() if parents is None else parents
    if table.get(a, frozenset()) & table.get(b, frozenset()):
        return config.category_partial_score
    return 0.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """두 좌표 사이의 대원 거리 (km)"""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # 부동소수 오차로 a가 1을 살짝 넘는 경우
    a = min(1.0, max(0.0, a))
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_decay(distance_km: float, decay_radius_km: float) -> float:
    """exp(-d / r), [0, 1]로 clamp"""
    score = math.exp(-max(0.0, distance_km) / decay_radius_km)
    return min(1.0, max(0.0, score))


def _place_name_score(a: Location, b: Location) -> Optional[float]:
    """장소명/구역 텍스트 일치 점수. 판단 불가면 None."""
    name_a = normalize_text(a.place_name)
    name_b = normalize_text(b.place_name)
    if name_a and name_b:
        if name_a == name_b:
            return PLACE_EXACT_SCORE
        if name_a in name_b or name_b in name_a:
            return PLACE_CONTAINS_SCORE

    area_a = normalize_text(a.area)
    area_b = normalize_text(b.area)
    if area_a and area_b and area_a == area_b:
        return AREA_MATCH_SCORE
    return None


def location_score(query: Report, candidate: Report, config: SignalConfig = _DEFAULT_SIGNALS) -> float:
    """GPS 거리 감쇠 점수.

    - 양쪽 좌표가 있으면 exp(-distance_km / decay_radius_km) 만 사용
    - 한쪽이라도 좌표가 없고 use_place_names=True면 장소명 일치 점수
      (정확 1.0 / 포함 0.7 / 구역 0.5)로 neutral_score를 대신함
    - 그 외에는 neutral_score
    """
    a = query.location
    b = candidate.location
    if a is None or b is None:
        return config.neutral_score

    if a.has_coordinates and b.has_coordinates:
        distance = haversine_km(a.latitude, a.longitude, b.latitude, b.longitude)
        return distance_decay(distance, config.decay_radius_km)

    text = _place_name_score(a, b) if config.use_place_names else None
    return config.neutral_score if text is None else text


def _as_date(value: EventDate) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(a: EventDate, b: EventDate) -> int:
    """달력 기준 일수 차이 (절대값)"""
    return abs((_as_date(a) - _as_date(b)).days)


def date_score(query: Report, candidate: Report, config: SignalConfig = _DEFAULT_SIGNALS) -> float:
    """max(0, 1 - |days| / max_window_days). 날짜가 없으면 neutral_score"""
    if query.event_date is None or candidate.event_date is None:
        return config.neutral_score

    days = days_between(query.event_date, candidate.event_date)
    return max(0.0, 1.0 - days / config.max_window_days)
