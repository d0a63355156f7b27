"""error-first 콜백 함수 -> awaitable 변환"""
import asyncio
from typing import Callable, Any

from fn_adapter.errors import CallbackError
from fn_adapter.logger import logger
from fn_adapter.result import Result, Success, Failure

Settle = Callable[[asyncio.Future, Any, Any], None]


def _on_loop(loop: asyncio.AbstractEventLoop) -> bool:
    try:
        return asyncio.get_running_loop() is loop
    except RuntimeError:
        return False


def _as_exception(err: Any) -> BaseException:
    if isinstance(err, Exception):
        return err
    return CallbackError(err)


def _reject_or_resolve(future: asyncio.Future, err: Any, result: Any) -> None:
    if err:
        future.set_exception(_as_exception(err))
    else:
        future.set_result(result)


def _settle_as_result(future: asyncio.Future, err: Any, result: Any) -> None:
    future.set_result(Failure(err) if err else Success(result))


def _callback_future(
    func: Callable[..., Any],
    args: tuple,
    kwargs: dict,
    settle: Settle,
) -> asyncio.Future:
    """func(*args, callback) 호출 후 콜백으로 한 번만 확정되는 Future 반환"""
    loop = asyncio.get_running_loop()
    future = loop.create_future()

    def settle_once(err: Any, result: Any) -> None:
        # 첫 호출만 반영 (취소된 Future 포함)
        if future.done():
            logger.debug("Ignoring extra callback from %r", func)
            return
        settle(future, err, result)

    def callback(err: Any = None, result: Any = None) -> None:
        if _on_loop(loop):
            settle_once(err, result)
        else:
            loop.call_soon_threadsafe(settle_once, err, result)

    try:
        func(*args, callback, **kwargs)
    except Exception as e:
        if future.done():
            logger.debug("%r raised after its callback settled: %r", func, e)
        else:
            future.set_exception(e)
    return future


def promisify(func: Callable[..., Any]) -> Callable[..., asyncio.Future]:
    """
    마지막 인자로 error-first 콜백을 받는 함수를 Future 반환 함수로 변환

    callback(err, result)에서 err가 falsy면 result로 resolve,
    아니면 reject (예외가 아닌 에러 값은 CallbackError로 감싼다).
    반환된 함수는 실행 중인 이벤트 루프 안에서 호출해야 한다.

    Args:
        func: func(*args, callback) 형태의 함수

    Returns:
        같은 인자를 받아 asyncio.Future를 반환하는 함수
    """
    def promised(*args: Any, **kwargs: Any) -> asyncio.Future:
        return _callback_future(func, args, kwargs, _reject_or_resolve)
    return promised


def promisify_result(func: Callable[..., Any]) -> Callable[..., Any]:
    """promisify와 같지만 콜백 에러를 Failure(err)로 반환

    func 자체가 동기적으로 던진 예외는 그대로 전파된다.
    """
    async def promised(*args: Any, **kwargs: Any) -> Result[Any, Any]:
        return await _callback_future(func, args, kwargs, _settle_as_result)
    return promised
