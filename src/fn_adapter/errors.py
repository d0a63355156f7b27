"""에러 타입 정의

예외는 래핑한 함수를 호출하는 쪽으로 전파되고,
에러 값(OR Type)은 Result의 Failure 트랙에 실린다.
"""
from dataclasses import dataclass
from typing import Any, Union


# ============================================================
# 예외
# ============================================================

class AdapterError(Exception):
    """fn_adapter 예외의 최상위 타입"""


class EmptyPipelineError(AdapterError, ValueError):
    """합성할 함수가 하나도 없음"""

    def __init__(self, name: str = "pipe"):
        self.name = name
        super().__init__(f"{name}() requires at least one function")


class MissingTransformError(AdapterError, IndexError):
    """인자 위치에 대응하는 변환 함수 없음"""

    def __init__(self, index: int, available: int):
        self.index = index
        self.available = available
        super().__init__(
            f"No transform for argument {index} "
            f"(only {available} transform(s) given)"
        )


class ContextLookupError(AdapterError, LookupError):
    """컨텍스트에 호출 가능한 key 없음"""

    def __init__(self, key: Any, reason: str = "missing"):
        self.key = key
        self.reason = reason
        super().__init__(f"Context has no callable at {key!r} ({reason})")


class CallbackError(AdapterError):
    """콜백이 예외가 아닌 에러 값을 넘김"""

    def __init__(self, error: Any):
        self.error = error
        super().__init__(f"Callback reported error: {error!r}")


# ============================================================
# 에러 값 (Result용)
# ============================================================

@dataclass(frozen=True)
class MissingKey:
    """컨텍스트 조회 실패"""
    key: Any
    reason: str = "missing"
    code: str = "MISSING_KEY"


@dataclass(frozen=True)
class ConfigError:
    """설정 에러"""
    field: str
    message: str
    code: str = "CONFIG_ERROR"


@dataclass(frozen=True)
class StepNotFound:
    """단계 이름 해석 실패"""
    name: str
    message: str
    code: str = "STEP_NOT_FOUND"


# OR Type: Result 실패 트랙에 실리는 에러
AdapterFailure = Union[MissingKey, ConfigError, StepNotFound]


def error_to_dict(error: AdapterFailure) -> dict:
    """에러를 딕셔너리로 변환 (CLI JSON 출력용)"""
    match error:
        case MissingKey(key, reason, code):
            return {"code": code, "key": repr(key), "message": f"Context lookup failed: {key!r} ({reason})"}
        case ConfigError(field, message, code):
            return {"code": code, "field": field, "message": message}
        case StepNotFound(name, message, code):
            return {"code": code, "step": name, "message": message}
