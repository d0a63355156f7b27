"""설정된 파이프라인 빌드/실행"""
import asyncio
import inspect
from typing import Any, Callable, Union

from fn_adapter.config import PipelineDefinition, EmptyPipelinePolicy
from fn_adapter.errors import ConfigError, StepNotFound
from fn_adapter.logger import logger
from fn_adapter.pipeline import pipe, pipe_async, identity
from fn_adapter.result import Result, Success, Failure, Railway, map_result
from fn_adapter.steps import resolve_steps

BuildError = Union[ConfigError, StepNotFound]


def _check_sync_steps(
    definition: PipelineDefinition,
    fns: list[Callable[[Any], Any]],
) -> Result[list[Callable[[Any], Any]], ConfigError]:
    """sync 모드에서는 코루틴 함수 단계를 거부"""
    if definition.mode == "sync":
        for name, fn in zip(definition.steps, fns):
            if inspect.iscoroutinefunction(fn):
                return Failure(ConfigError(
                    field="steps",
                    message=f"Step {name!r} is async, run the pipeline in async mode",
                ))
    return Success(fns)


def build_pipeline(
    definition: PipelineDefinition,
    empty_pipeline: EmptyPipelinePolicy = "error",
) -> Result[Callable[[Any], Any], BuildError]:
    """
    파이프라인 정의를 호출 가능한 함수로 빌드

    sync 모드는 pipe, async 모드는 pipe_async로 합성한다.
    단계가 없으면 empty_pipeline 정책에 따라 identity 또는 ConfigError.
    """
    compose_steps = pipe_async if definition.mode == "async" else pipe

    if not definition.steps:
        if empty_pipeline == "identity":
            logger.debug("Empty pipeline, using identity")
            return Success(compose_steps(identity))
        return Failure(ConfigError(
            field="steps",
            message="Pipeline has no steps (set empty_pipeline: identity to allow)",
        ))

    checked = Railway.from_result(resolve_steps(definition.steps)).bind(
        lambda fns: _check_sync_steps(definition, fns)
    ).unwrap()
    return map_result(checked, lambda fns: compose_steps(*fns))


def run_pipeline(
    definition: PipelineDefinition,
    value: Any,
    empty_pipeline: EmptyPipelinePolicy = "error",
) -> Result[Any, BuildError]:
    """파이프라인 빌드 후 value에 적용 (단계 예외는 그대로 전파)"""
    def execute(fn: Callable[[Any], Any]) -> Any:
        logger.info("Running %s pipeline: %s", definition.mode, " -> ".join(definition.steps) or "identity")
        if definition.mode == "async":
            return asyncio.run(fn(value))
        return fn(value)

    return map_result(build_pipeline(definition, empty_pipeline), execute)
