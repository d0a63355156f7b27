"""fn_adapter 로거 설정"""
import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

LOG_LEVEL_ENV = "FN_ADAPTER_LOG_LEVEL"


def setup_logger(
    name: str = "fn_adapter",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    로거 설정 후 반환

    Args:
        name: 로거 이름
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: 포맷 문자열

    Returns:
        설정된 로거
    """
    level = level or os.getenv(LOG_LEVEL_ENV, "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # 핸들러는 한 번만 붙인다
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger


# 라이브러리 import 시에는 핸들러를 붙이지 않는다 (CLI가 setup_logger 호출)
logger = logging.getLogger("fn_adapter")
