"""설정 타입 (Pydantic + YAML)"""
from pathlib import Path
from typing import Literal
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError
import yaml

from fn_adapter.result import Result, Success, Failure, Railway
from fn_adapter.errors import ConfigError
from fn_adapter.logger import logger

EmptyPipelinePolicy = Literal["error", "identity"]


# ============================================================
# 파이프라인 설정
# ============================================================

class PipelineDefinition(BaseModel):
    """개별 파이프라인 정의"""
    steps: list[str] = Field(default_factory=list)  # 단계 이름 또는 "module:attr"
    mode: Literal["sync", "async"] = "sync"
    description: str = ""

    model_config = {"frozen": True}


class PipelinesConfig(BaseModel):
    """파이프라인 목록"""
    default: str = "clean"
    available: dict[str, PipelineDefinition] = Field(default_factory=lambda: {
        "clean": PipelineDefinition(
            steps=["strip", "lower"],
            description="앞뒤 공백 제거 후 소문자",
        ),
    })

    model_config = {"frozen": True}

    def get_pipeline(self, name: str) -> PipelineDefinition | None:
        """이름으로 파이프라인 조회"""
        return self.available.get(name)

    def get_default_pipeline(self) -> PipelineDefinition | None:
        """기본 파이프라인 반환"""
        return self.available.get(self.default)

    def list_names(self) -> list[str]:
        """파이프라인 이름 목록"""
        return list(self.available.keys())


# ============================================================
# 로깅 설정
# ============================================================

class LoggingConfig(BaseModel):
    """로깅 설정"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = {"frozen": True}


# ============================================================
# 전체 설정
# ============================================================

class AppConfig(BaseModel):
    """전체 설정"""
    pipelines: PipelinesConfig = Field(default_factory=PipelinesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    empty_pipeline: EmptyPipelinePolicy = "error"

    model_config = {"frozen": True}


# ============================================================
# YAML 로더
# ============================================================

DEFAULT_PATHS = (
    Path("fn-adapter.yaml"),
    Path("fn-adapter.yml"),
    Path.home() / ".config" / "fn-adapter" / "config.yaml",
)


def load_yaml(path: Path) -> Result[dict, ConfigError]:
    """YAML 파일 로드"""
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        data = yaml.safe_load(text)
    except FileNotFoundError:
        return Failure(ConfigError(
            field="config_path",
            message=f"Config file not found: {path}",
        ))
    except (OSError, UnicodeDecodeError) as e:
        return Failure(ConfigError(
            field="config_path",
            message=f"Cannot read config file {path}: {e}",
        ))
    except yaml.YAMLError as e:
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Invalid YAML: {e}",
        ))

    if data is None:
        return Success({})
    if not isinstance(data, dict):
        return Failure(ConfigError(
            field="config_yaml",
            message=f"Top-level YAML must be a mapping, got {type(data).__name__}",
        ))
    return Success(data)


def parse_config(data: dict) -> Result[AppConfig, ConfigError]:
    """딕셔너리를 AppConfig로 파싱"""
    try:
        return Success(AppConfig.model_validate(data))
    except PydanticValidationError as e:
        return Failure(ConfigError(
            field="config",
            message=str(e),
        ))


def load_config(path: Path | str | None = None) -> Result[AppConfig, ConfigError]:
    """
    설정 로드 (YAML + 기본값)

    path가 없으면 DEFAULT_PATHS 순서로 탐색하고, 아무 파일도 없으면 기본값.
    """
    if path is None:
        path = next((p for p in DEFAULT_PATHS if p.exists()), None)

    if path is None:
        logger.debug("No config file found, using defaults")
        return Success(AppConfig())

    path = Path(path)
    logger.info("Loading config from %s", path)
    return Railway.from_result(load_yaml(path)).bind(parse_config).unwrap()


def merge_config(base: AppConfig, overrides: dict) -> AppConfig:
    """설정 병합 (CLI 인자 등)"""
    data = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    return AppConfig(**deep_merge(data, overrides))
