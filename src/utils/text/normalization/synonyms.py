"""SynonymMap 로더 + 확장기.

사전은 resources/matching/synonyms.yaml 에서 한 번만 로드되고(싱글톤),
이후에는 읽기 전용(MappingProxyType)으로만 노출됩니다.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from src.core.logging import logger
from src.utils.resource_loader import load_synonym_groups

from ..core.cleaning import normalize_text, sanitize_text

SynonymMap = Mapping[str, tuple[str, ...]]


def build_synonym_map(groups: Mapping[str, list[str]]) -> SynonymMap:
    """{canonical: [alt, ...]} -> 읽기 전용 SynonymMap.

    키/값 모두 sanitize_text 기준으로 정규화되고, 대체 표기의 순서는 유지됩니다
    (중복/자기 자신은 제거).
    """
    built: dict[str, tuple[str, ...]] = {}
    for raw_key, raw_alts in (groups or {}).items():
        key = sanitize_text(str(raw_key))
        if not key:
            continue
        alts: list[str] = list(built.get(key, ()))
        for alt in raw_alts or []:
            norm = sanitize_text(str(alt))
            if norm and norm != key and norm not in alts:
                alts.append(norm)
        built[key] = tuple(alts)
    return MappingProxyType(built)


@lru_cache(maxsize=1)
def get_synonym_map() -> SynonymMap:
    """프로세스 전역 SynonymMap (최초 호출 시 1회 로드)"""
    synonym_map = build_synonym_map(load_synonym_groups())
    logger.info(f"Synonym map loaded: {len(synonym_map)} entries")
    return synonym_map


def expand_synonyms(token: str, synonym_map: Optional[SynonymMap] = None) -> frozenset[str]:
    """토큰 + 등록된 동의어 집합.

    정방향 조회만 합니다: 토큰이 키가 아니면 {token} 을 반환합니다
    (대체 표기 -> canonical 역방향 조회는 build_canonical_lookup 참고).
    """
    mapping = get_synonym_map() if synonym_map is None else synonym_map
    key = normalize_text(token)
    return frozenset((key, *mapping.get(key, ())))


def build_canonical_lookup(synonym_map: SynonymMap) -> Mapping[str, str]:
    """표기 -> canonical 역방향 테이블.

    Rule: canonical 키는 항상 자기 자신으로 매핑되고, 여러 그룹에 등장하는
    대체 표기는 먼저 선언된 그룹에 귀속됩니다.
    """
    lookup: dict[str, str] = {key: key for key in synonym_map}
    collisions: list[str] = []
    for key in synonym_map:
        for alt in expand_synonyms(key, synonym_map):
            owner = lookup.setdefault(alt, key)
            if owner != key and alt not in synonym_map:
                collisions.append(alt)

    if collisions:
        logger.debug(f"Synonym surface forms shared by several groups (first kept): {sorted(set(collisions))}")

    return MappingProxyType(lookup)


@lru_cache(maxsize=1)
def get_canonical_lookup() -> Mapping[str, str]:
    """전역 SynonymMap 기준 역방향 테이블 (1회 생성)"""
    return build_canonical_lookup(get_synonym_map())


def canonicalize_token(token: str, lookup: Optional[Mapping[str, str]] = None) -> str:
    """토큰을 canonical 표기로 치환 (미등록 토큰은 그대로)."""
    table = get_canonical_lookup() if lookup is None else lookup
    return table.get(token, token)
