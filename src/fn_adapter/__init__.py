"""fn-adapter - 고차 함수 어댑터"""
from fn_adapter.result import (
    Result, Success, Failure,
    Railway,
    map_result, bind,
)
from fn_adapter.errors import (
    AdapterError, EmptyPipelineError, MissingTransformError,
    ContextLookupError, CallbackError,
    MissingKey, ConfigError, StepNotFound,
    error_to_dict,
)
from fn_adapter.adapters import (
    ary, call, try_call, lookup, collect_into, flip,
    over, over_args, spread_over,
)
from fn_adapter.pipeline import (
    pipe, pipe_async, compose, identity,
)
from fn_adapter.callbacks import (
    promisify, promisify_result,
)

__version__ = "0.1.0"

__all__ = [
    # Result
    "Result", "Success", "Failure", "Railway",
    "map_result", "bind",
    # Errors
    "AdapterError", "EmptyPipelineError", "MissingTransformError",
    "ContextLookupError", "CallbackError",
    "MissingKey", "ConfigError", "StepNotFound",
    "error_to_dict",
    # Adapters
    "ary", "call", "try_call", "lookup", "collect_into", "flip",
    "over", "over_args", "spread_over",
    # Pipeline
    "pipe", "pipe_async", "compose", "identity",
    # Callbacks
    "promisify", "promisify_result",
]
