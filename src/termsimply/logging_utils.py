"""Runtime logging helpers."""

from __future__ import annotations

import inspect
import logging
import sys

from loguru import logger

from termsimply.config.settings import LogSettings, load_settings

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<6} | {name}:{function}:{line} | {message}"
_CONFIGURED = False


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging messages to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def parse_log_filter(filter_spec: str) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse a log filter string.

    Format: "level" or "level,module1=level,module2=false"
    Examples:
        - "info" - global INFO level
        - "info,termsimply.eval=debug" - global INFO, evaluator at DEBUG
        - "debug,termsimply.core=false" - global DEBUG, checker disabled

    Returns:
        (global_level, module_filter_dict)
    """
    parts = [p.strip() for p in filter_spec.lower().split(",") if p.strip()]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "info"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            if level == "false":
                filter_dict[module] = False
            else:
                filter_dict[module] = level.upper()
        else:
            global_level = part

    return global_level, filter_dict


def configure_logging(settings: LogSettings | None = None, *, force: bool = False) -> None:
    """Configure process-level logging once.

    Log levels are controlled by TERMSIMPLY_LOG_FILTER (see parse_log_filter).
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    if settings is None:
        settings = load_settings().log
    global_level, module_filter = parse_log_filter(settings.filter)

    logger.remove()
    logger.add(
        sys.stderr,
        level=global_level.upper(),
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
        filter=module_filter,
    )
    logger.enable("termsimply")

    root_logger = logging.getLogger()
    if not any(isinstance(h, InterceptHandler) for h in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())

    _CONFIGURED = True
