import logging
import os
from collections.abc import Iterable
from typing import Any

import pydantic_core
import structlog
from structlog.types import Processor

from stripe_bindings.logs._pydantic_processor import pydantic_processor


def _json_serializer(value: Any, indent: int | None = None, *args: Any, **kwargs: Any) -> str:
    return pydantic_core.to_json(value, fallback=str, indent=indent, exclude_none=True).decode()


def _renderer(json: bool | None = None) -> Processor:
    if (json is None and os.environ.get("JSON_LOGS") == "1") or json:
        return structlog.processors.JSONRenderer(serializer=_json_serializer)
    return structlog.dev.ConsoleRenderer()


def _processors(json: bool | None, *extras: Processor) -> Iterable[Processor]:
    yield structlog.contextvars.merge_contextvars
    yield structlog.stdlib.add_log_level
    yield structlog.processors.TimeStamper(fmt="iso", utc=True)
    yield pydantic_processor
    yield from extras
    yield _renderer(json)


def setup_logs(
    json: bool | None = None,
    *processors: Processor,
):
    """Configures structlog for applications embedding the client.

    The library only emits through `structlog.get_logger`, so it never configures logging by itself.
    """
    min_level = os.getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, min_level.upper(), logging.INFO)

    structlog.configure(
        processors=list(_processors(json, *processors)),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
