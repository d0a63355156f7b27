"""함수 합성 유틸리티"""
import inspect
from functools import reduce
from typing import TypeVar, Callable, Any, Awaitable

from fn_adapter.errors import EmptyPipelineError
from fn_adapter.logger import logger

A = TypeVar('A')


def _name(f: Callable[..., Any]) -> str:
    return getattr(f, "__qualname__", None) or repr(f)


# ============================================================
# 동기 합성
# ============================================================

def pipe(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """왼쪽에서 오른쪽으로 함수 합성

    첫 함수는 호출 인자를 그대로 받고, 이후 함수는 직전 결과 하나를 받는다.
    """
    if not funcs:
        raise EmptyPipelineError("pipe")
    first, rest = funcs[0], funcs[1:]

    def apply(*args: Any, **kwargs: Any) -> Any:
        return reduce(lambda acc, f: f(acc), rest, first(*args, **kwargs))
    return apply


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """오른쪽에서 왼쪽으로 함수 합성"""
    if not funcs:
        raise EmptyPipelineError("compose")
    return pipe(*reversed(funcs))


def identity(x: A) -> A:
    """항등 함수"""
    return x


# ============================================================
# 비동기 합성
# ============================================================

async def _settle(value: Any) -> Any:
    """awaitable이 아닐 때까지 await"""
    while inspect.isawaitable(value):
        value = await value
    return value


def pipe_async(*funcs: Callable[[Any], Any]) -> Callable[[Any], Awaitable[Any]]:
    """
    비동기 함수를 포함한 왼쪽에서 오른쪽 합성

    각 단계는 일반 값이나 awaitable을 반환할 수 있다.
    단계는 하나씩 순서대로 실행되고, 직전 단계의 결과가 확정된 뒤에 다음 단계가 시작된다.
    어느 단계든 예외가 나면 같은 예외로 즉시 중단되며 이후 단계는 실행되지 않는다.

    Args:
        funcs: 단항 함수들 (1개 이상)

    Returns:
        입력 하나를 받아 최종 결과로 resolve되는 코루틴 함수

    Raises:
        EmptyPipelineError: 함수가 하나도 없을 때 (합성 시점)
    """
    if not funcs:
        raise EmptyPipelineError("pipe_async")
    total = len(funcs)

    async def apply(x: Any) -> Any:
        value = await _settle(x)
        for index, f in enumerate(funcs, start=1):
            logger.debug("pipe_async step %d/%d: %s", index, total, _name(f))
            try:
                value = await _settle(f(value))
            except Exception as e:
                logger.debug(
                    "pipe_async stopped at step %d/%d (%s): %r",
                    index, total, _name(f), e,
                )
                raise
        return value
    return apply
