"""해싱 유틸리티"""
import hashlib


def hash_string(text: str) -> str:
    """
    문자열을 MD5 해시로 변환

    Args:
        text: 해시할 문자열

    Returns:
        MD5 해시 문자열
    """
    return hashlib.md5(text.encode()).hexdigest()


def generate_attribute_cache_key(description: str) -> str:
    """
    설명 텍스트로 속성 추출 캐시 키 생성

    정규화된 텍스트 기준이므로 대소문자/공백만 다른 설명은 같은 키를 가집니다.

    Args:
        description: 리포트 설명

    Returns:
        캐시 키 ("attrs:<md5>")
    """
    from src.utils.text import normalize_text

    normalized = normalize_text(description)
    hashed = hash_string(normalized)
    return f"attrs:{hashed}"


def generate_corpus_fingerprint(documents: list[str]) -> str:
    """코퍼스(문서 목록) 식별용 해시. 순서까지 포함해 비교합니다."""
    from src.utils.text import normalize_text

    joined = "\x1e".join(normalize_text(d) for d in documents)
    return hash_string(joined)
