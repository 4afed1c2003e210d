"""커스텀 예외 정의 (Structured Exception Hierarchy)"""
from typing import Any, Optional


# 기본 예외 클래스
class MatchingEngineException(Exception):
    """기본 예외 클래스 - 모든 커스텀 예외의 부모"""
    def __init__(self, message: str, error_code: str = "UNKNOWN_ERROR", details: Optional[dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# 설정 관련 예외 (스코어링 전에 즉시 실패)
class ConfigurationException(MatchingEngineException):
    """매칭 설정 오류의 기본 클래스"""
    def __init__(self, message: str, error_code: str = "CONFIG_ERROR", details: Optional[dict[str, Any]] = None):
        super().__init__(message, error_code or "CONFIG_ERROR", details)


class InvalidWeightException(ConfigurationException):
    """가중치가 음수이거나 모두 0인 경우"""
    def __init__(self, name: str, value: float, details: Optional[dict[str, Any]] = None):
        message = f"Invalid weight '{name}': {value}"
        super().__init__(message, "INVALID_WEIGHT", details or {"name": name, "value": value})


class InvalidThresholdException(ConfigurationException):
    """임계값이 [0, 1] 범위를 벗어난 경우"""
    def __init__(self, name: str, value: float, details: Optional[dict[str, Any]] = None):
        message = f"'{name}' must be within [0, 1], got {value}"
        super().__init__(message, "INVALID_THRESHOLD", details or {"name": name, "value": value})


class InvalidTopKException(ConfigurationException):
    """top_k < 1"""
    def __init__(self, value: int, details: Optional[dict[str, Any]] = None):
        message = f"top_k must be >= 1, got {value}"
        super().__init__(message, "INVALID_TOP_K", details or {"value": value})
