"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 엔진 의존 없음
"""

from .reports import CAMPUS_REPORTS, HEADPHONES_SCENARIO

__all__ = [
    "CAMPUS_REPORTS",
    "HEADPHONES_SCENARIO",
]
