"""인자 어댑터 (순수 고차 함수)"""
from collections.abc import Mapping, Sequence
from typing import TypeVar, Callable, Any, Iterable

from fn_adapter.errors import ContextLookupError, MissingTransformError, MissingKey
from fn_adapter.result import Result, Success, Failure, Railway, map_result

R = TypeVar('R')


# ============================================================
# 인자 개수 / 순서
# ============================================================

def ary(fn: Callable[..., R], n: int) -> Callable[..., R]:
    """앞쪽 n개 위치 인자만 전달 (나머지는 버림)

    >>> ary(max, 2)(2, 6, 9)
    6
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    def limited(*args: Any, **kwargs: Any) -> R:
        return fn(*args[:n], **kwargs)
    return limited


def flip(fn: Callable[..., R]) -> Callable[..., R]:
    """첫 번째 인자를 마지막으로 이동"""
    def flipped(*args: Any, **kwargs: Any) -> R:
        return fn(*args[1:], *args[:1], **kwargs)
    return flipped


# ============================================================
# 시퀀스 <-> 가변 인자
# ============================================================

def collect_into(fn: Callable[[list], R]) -> Callable[..., R]:
    """시퀀스 하나를 받는 함수를 가변 인자 함수로"""
    def collected(*args: Any) -> R:
        return fn(list(args))
    return collected


def spread_over(fn: Callable[..., R]) -> Callable[[Iterable[Any]], R]:
    """가변 인자 함수를 시퀀스 하나를 받는 함수로"""
    def spread(args: Iterable[Any]) -> R:
        return fn(*args)
    return spread


# ============================================================
# 다중 적용
# ============================================================

def over(*fns: Callable[..., Any]) -> Callable[..., list]:
    """같은 인자로 모든 함수를 호출해 결과 목록 반환 (함수 순서 유지)"""
    def fan_out(*args: Any, **kwargs: Any) -> list:
        return [f(*args, **kwargs) for f in fns]
    return fan_out


def over_args(
    fn: Callable[..., R],
    transforms: Sequence[Callable[[Any], Any]],
) -> Callable[..., R]:
    """
    i번째 인자에 transforms[i]를 적용한 뒤 fn 호출

    변환 함수가 인자보다 많으면 남는 것은 무시한다.
    인자가 더 많으면 MissingTransformError (어떤 변환도 실행되지 않음).
    """
    transforms = tuple(transforms)

    def transformed(*args: Any, **kwargs: Any) -> R:
        if len(args) > len(transforms):
            raise MissingTransformError(len(transforms), len(transforms))
        return fn(*[t(arg) for t, arg in zip(transforms, args)], **kwargs)
    return transformed


# ============================================================
# 컨텍스트 디스패치
# ============================================================

def lookup(context: Any, key: Any) -> Result[Callable[..., Any], MissingKey]:
    """컨텍스트에서 key에 해당하는 callable 조회

    Mapping이면 항목으로, 그 외 객체는 속성으로 찾는다.
    """
    if isinstance(context, Mapping):
        try:
            target = context[key]
        except KeyError:
            return Failure(MissingKey(key))
        except TypeError:
            return Failure(MissingKey(key, "unhashable key"))
    else:
        if not isinstance(key, str):
            return Failure(MissingKey(key, "attribute name must be str"))
        try:
            target = getattr(context, key)
        except AttributeError:
            return Failure(MissingKey(key))

    if not callable(target):
        return Failure(MissingKey(key, "not callable"))
    return Success(target)


def call(key: Any, *args: Any, **kwargs: Any) -> Callable[[Any], Any]:
    """
    key와 인자를 고정하고, 컨텍스트가 주어지면 context[key](*args) 호출

    >>> call("upper")("abc")
    'ABC'

    Raises:
        ContextLookupError: 컨텍스트에 key에 해당하는 callable이 없을 때
    """
    def dispatch(context: Any) -> Any:
        target = Railway.from_result(lookup(context, key)).unwrap_or_raise(
            lambda e: ContextLookupError(e.key, e.reason)
        )
        return target(*args, **kwargs)
    return dispatch


def try_call(key: Any, *args: Any, **kwargs: Any) -> Callable[[Any], Result[Any, MissingKey]]:
    """call과 같지만 조회 실패를 Failure로 반환"""
    def dispatch(context: Any) -> Result[Any, MissingKey]:
        return map_result(lookup(context, key), lambda target: target(*args, **kwargs))
    return dispatch
