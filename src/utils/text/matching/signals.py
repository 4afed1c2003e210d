"""Signal extraction utilities for report matching (brands / colors / models)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Mapping, Optional

from src.core.config import settings
from src.utils.hash_utils import generate_attribute_cache_key
from src.utils.resource_loader import load_attribute_dictionary, load_yaml_resource

from ..core.cleaning import normalize_text
from ..core.tokenize import tokenize_words, word_ngrams
from ..normalization.synonyms import build_canonical_lookup, build_synonym_map

# 'a52', 's21', 'm1'
_SHORT_MODEL_RE = re.compile(r"^[a-z]\d{1,3}$")
# 'wh1000xm4', 'sm-g991b' (하이픈은 sanitize 단계에서 분리됨)
_MIXED_MODEL_RE = re.compile(r"^(?=.*\d)(?=.*[a-z])[a-z0-9]{3,}$")
# 용량/규격 표기는 모델이 아님: '128gb', '20w', '15inch'
_UNIT_RE = re.compile(r"^\d+(?:gb|tb|mb|mah|mm|cm|kg|g|w|v|in|inch|hz|k|p|ml|l)$")
# 서수/시각도 모델이 아님: '2nd', '3rd', '10am', '5pm'
_ORDINAL_TIME_RE = re.compile(r"^\d+(?:st|nd|rd|th|am|pm|hrs|hr|h|min|mins)$")


@dataclass(frozen=True)
class ExtractedAttributes:
    """설명에서 추출한 canonical 속성 (파생 데이터, 원본 아님)"""

    brands: frozenset[str] = field(default_factory=frozenset)
    colors: frozenset[str] = field(default_factory=frozenset)
    models: frozenset[str] = field(default_factory=frozenset)

    def as_set(self) -> frozenset[str]:
        """brand ∪ color ∪ model.

        섹션 간 같은 문자열이 겹치지 않도록 접두사를 붙입니다
        ('rose' 색상 vs 'rose' 브랜드 같은 경우).
        """
        return frozenset(
            {f"brand:{b}" for b in self.brands}
            | {f"color:{c}" for c in self.colors}
            | {f"model:{m}" for m in self.models}
        )

    @property
    def is_empty(self) -> bool:
        return not (self.brands or self.colors or self.models)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "brands": sorted(self.brands),
            "colors": sorted(self.colors),
            "models": sorted(self.models),
        }


EMPTY_ATTRIBUTES = ExtractedAttributes()


@dataclass(frozen=True)
class AttributeDictionary:
    """섹션별 표기 -> canonical 테이블 (읽기 전용)"""

    brands: Mapping[str, str]
    colors: Mapping[str, str]
    models: Mapping[str, str]
    model_code_blacklist: frozenset[str] = frozenset()

    @classmethod
    def from_groups(
        cls,
        brands: Mapping[str, list[str]],
        colors: Mapping[str, list[str]],
        models: Mapping[str, list[str]],
        model_code_blacklist: Optional[set[str]] = None,
    ) -> "AttributeDictionary":
        return cls(
            brands=build_canonical_lookup(build_synonym_map(brands)),
            colors=build_canonical_lookup(build_synonym_map(colors)),
            models=build_canonical_lookup(build_synonym_map(models)),
            model_code_blacklist=frozenset(model_code_blacklist or ()),
        )


@lru_cache(maxsize=1)
def get_attribute_dictionary() -> AttributeDictionary:
    """프로세스 전역 속성 사전 (1회 로드)"""
    data = load_attribute_dictionary()
    blacklist = load_yaml_resource("matching/attributes.yaml").get("model_code_blacklist", []) or []
    return AttributeDictionary.from_groups(
        data["brands"],
        data["colors"],
        data["models"],
        model_code_blacklist={str(x).lower() for x in blacklist},
    )


def extract_model_codes(tokens: list[str], blacklist: frozenset[str] = frozenset()) -> list[str]:
    """토큰 목록에서 모델코드 후보를 추출합니다 (순서 유지, 중복 제거).

    예: ['sony', 'wh1000xm4', '128gb', '2nd', '5pm'] -> ['wh1000xm4']
    """
    codes: list[str] = []
    seen: set[str] = set()
    for tok in tokens:
        if tok in blacklist or tok in seen:
            continue
        if _UNIT_RE.match(tok) or _ORDINAL_TIME_RE.match(tok):
            continue
        if _SHORT_MODEL_RE.match(tok) or _MIXED_MODEL_RE.match(tok):
            seen.add(tok)
            codes.append(tok)
    return codes


def _extract(text: str, dictionary: AttributeDictionary) -> ExtractedAttributes:
    tokens = tokenize_words(text)
    if not tokens:
        return EMPTY_ATTRIBUTES

    brands: set[str] = set()
    colors: set[str] = set()
    models: set[str] = set()

    for gram in word_ngrams(tokens, max_n=2):
        if gram in dictionary.brands:
            brands.add(dictionary.brands[gram])
        if gram in dictionary.colors:
            colors.add(dictionary.colors[gram])
        if gram in dictionary.models:
            models.add(dictionary.models[gram])

    models.update(extract_model_codes(tokens, dictionary.model_code_blacklist))

    return ExtractedAttributes(
        brands=frozenset(brands),
        colors=frozenset(colors),
        models=frozenset(models),
    )


@lru_cache(maxsize=settings.attribute_cache_size)
def _cached_extract(cache_key: str, normalized: str) -> ExtractedAttributes:
    """정규화 설명 해시 키 기준 LRU 캐시 (기본 사전 전용)"""
    return _extract(normalized, get_attribute_dictionary())


def attribute_cache_info():
    """속성 캐시 통계 (hits / misses / currsize)"""
    return _cached_extract.cache_info()


def clear_attribute_cache() -> None:
    _cached_extract.cache_clear()


def extract_attributes(text: str | None, dictionary: Optional[AttributeDictionary] = None) -> ExtractedAttributes:
    """설명 텍스트에서 브랜드/색상/모델을 canonical 형태로 추출.

    - 1~2 단어 n-gram 정확 일치 (동의어 포함), 부분/퍼지 매칭 없음
    - 모델코드는 패턴으로도 추출 ('a52', 'wh1000xm4')
    - 빈 텍스트 -> 빈 집합 (예외 없음)

    기본 사전을 쓰는 호출만 캐시됩니다 (키: 정규화 텍스트의 해시).
    """
    normalized = normalize_text(text)
    if not normalized:
        return EMPTY_ATTRIBUTES

    if dictionary is not None:
        return _extract(normalized, dictionary)

    return _cached_extract(generate_attribute_cache_key(normalized), normalized)
