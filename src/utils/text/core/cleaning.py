"""Text cleaning helpers."""

from __future__ import annotations

import re

_WHITESPACE_RE = re.compile(r"\s+")
_NON_WORD_RE = re.compile(r"[^\w\s]")


def normalize_text(text: str | None) -> str:
    """
    소문자화 + 내부 공백을 단일 공백으로 축약 + 앞뒤 공백 제거

    예시:
    - "  Black   SONY\\tHeadphones " -> "black sony headphones"

    멱등: normalize_text(normalize_text(s)) == normalize_text(s)
    None/빈 문자열은 ""를 반환합니다.
    """
    if not text:
        return ""

    return _WHITESPACE_RE.sub(" ", text.lower()).strip()


def sanitize_text(text: str | None) -> str:
    """normalize_text + 문장부호 제거.

    하이픈/슬래시 등은 공백으로 바뀌므로 "usb-c" -> "usb c" 가 됩니다.
    토큰화 직전 단계로만 사용합니다.
    """
    if not text:
        return ""

    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    # "_"는 \w에 포함되므로 별도로 분리
    cleaned = cleaned.replace("_", " ")
    return _WHITESPACE_RE.sub(" ", cleaned).strip()
