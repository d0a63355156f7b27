"""실패를 값으로 다루는 Result 타입

조회/설정/단계 해석처럼 실패가 예외가 아니라 값인 곳에서 쓴다.
"""
from dataclasses import dataclass
from typing import TypeVar, Generic, Callable, Union

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


@dataclass(frozen=True)
class Success(Generic[T]):
    """성공 값"""
    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """실패 값 (에러 데이터클래스 또는 원시 에러)"""
    error: E


Result = Union[Success[T], Failure[E]]


def map_result(result: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    """성공 값만 f로 변환, 실패는 그대로 통과"""
    if isinstance(result, Success):
        return Success(f(result.value))
    return result


def bind(result: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """성공 값을 Result 반환 함수에 넘김"""
    if isinstance(result, Success):
        return f(result.value)
    return result


class Railway(Generic[T, E]):
    """Result 체인 (bind로 잇고 unwrap으로 꺼냄)"""

    def __init__(self, result: Result[T, E]):
        self._result = result

    @classmethod
    def from_result(cls, result: Result[T, E]) -> 'Railway[T, E]':
        return cls(result)

    def bind(self, f: Callable[[T], Result[U, E]]) -> 'Railway[U, E]':
        return Railway(bind(self._result, f))

    def unwrap(self) -> Result[T, E]:
        return self._result

    def unwrap_or_raise(self, exception_fn: Callable[[E], Exception]) -> T:
        """성공 값을 꺼내고, 실패면 exception_fn(error)를 raise"""
        match self._result:
            case Success(value):
                return value
            case Failure(error):
                raise exception_fn(error)
