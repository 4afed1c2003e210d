"""리소스 파일(YAML) 로더 유틸리티"""
import os
import yaml
from typing import Any, Dict
from functools import lru_cache

from src.core.config import settings
from src.core.logging import logger


def get_resource_path(relative_path: str) -> str:
    """프로젝트 루트 기준 리소스 절대 경로 반환"""
    if settings.resources_dir:
        return os.path.join(settings.resources_dir, relative_path)
    # src/utils/resource_loader.py -> src/utils -> src -> root
    base_dir = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(base_dir, "resources", relative_path)


@lru_cache(maxsize=32)
def load_yaml_resource(relative_path: str) -> Dict[str, Any]:
    """YAML 리소스 로드 및 캐싱"""
    path = get_resource_path(relative_path)
    if not os.path.exists(path):
        logger.warning(f"Resource not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to load YAML resource {path}: {e}")
        return {}


def load_synonym_groups() -> Dict[str, list[str]]:
    """동의어 사전 로드 ({canonical: [alt, ...]})"""
    data = load_yaml_resource("matching/synonyms.yaml")
    return data.get("synonyms", {}) or {}


def load_attribute_dictionary() -> Dict[str, Dict[str, list[str]]]:
    """브랜드/색상/모델 사전 로드

    각 섹션은 {canonical: [synonym, ...]} 형태입니다.
    """
    data = load_yaml_resource("matching/attributes.yaml")
    return {
        "brands": data.get("brands", {}) or {},
        "colors": data.get("colors", {}) or {},
        "models": data.get("models", {}) or {},
    }


def load_category_groups() -> Dict[str, list[str]]:
    """카테고리 taxonomy 로드 ({parent_group: [category, ...]})"""
    data = load_yaml_resource("matching/categories.yaml")
    return data.get("groups", {}) or {}


def load_stopwords() -> set[str]:
    """TF-IDF 토큰화에서 제외할 불용어 로드"""
    data = load_yaml_resource("matching/stopwords.yaml")
    return set(data.get("stopwords", []) or [])
