"""파이프라인 단계 레지스트리"""
import asyncio
import importlib
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable

from fn_adapter.errors import StepNotFound
from fn_adapter.result import Result, Success, Failure


@dataclass(frozen=True)
class Step:
    """이름 붙은 단항 단계"""
    name: str
    fn: Callable[[Any], Any]
    description: str = ""


async def _sleep(x: Any) -> Any:
    await asyncio.sleep(0)
    return x


BUILTIN_STEPS: dict[str, Step] = {
    step.name: step
    for step in (
        Step("strip", str.strip, "앞뒤 공백 제거"),
        Step("upper", str.upper, "대문자"),
        Step("lower", str.lower, "소문자"),
        Step("title", str.title, "단어 첫 글자 대문자"),
        Step("split", str.split, "공백 기준 분리"),
        Step("int", int, "정수 변환"),
        Step("float", float, "실수 변환"),
        Step("str", str, "문자열 변환"),
        Step("len", len, "길이"),
        Step("abs", abs, "절댓값"),
        Step("increment", lambda x: x + 1, "x + 1"),
        Step("double", lambda x: x * 2, "x * 2"),
        Step("square", lambda x: x * x, "x * x"),
        Step("negate", lambda x: -x, "-x"),
        Step("sorted", sorted, "정렬된 리스트"),
        Step("reverse", lambda x: x[::-1], "역순"),
        Step("sleep", _sleep, "이벤트 루프에 한 번 양보 후 그대로 반환 (async)"),
    )
}


def _import_ref(ref: str) -> Result[Callable[[Any], Any], StepNotFound]:
    """module:attr 형태 참조 import"""
    module_name, _, attr_path = ref.partition(":")
    if not module_name or not attr_path:
        return Failure(StepNotFound(ref, f"Invalid reference {ref!r}, expected 'module:attr'"))

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        return Failure(StepNotFound(ref, f"Cannot import {module_name!r}: {e}"))

    try:
        target = reduce(getattr, attr_path.split("."), module)
    except AttributeError:
        return Failure(StepNotFound(ref, f"{module_name!r} has no attribute {attr_path!r}"))

    if not callable(target):
        return Failure(StepNotFound(ref, f"{ref!r} is not callable"))
    return Success(target)


def resolve_step(name: str) -> Result[Callable[[Any], Any], StepNotFound]:
    """단계 이름 해석 (내장 이름 또는 "module:attr")"""
    step = BUILTIN_STEPS.get(name)
    if step is not None:
        return Success(step.fn)
    if ":" in name:
        return _import_ref(name)
    return Failure(StepNotFound(name, f"Unknown step {name!r}"))


def resolve_steps(names: list[str]) -> Result[list[Callable[[Any], Any]], StepNotFound]:
    """단계 목록 해석 (첫 실패에서 중단)"""
    resolved: list[Callable[[Any], Any]] = []
    for name in names:
        match resolve_step(name):
            case Success(fn):
                resolved.append(fn)
            case Failure() as err:
                return err
    return Success(resolved)
