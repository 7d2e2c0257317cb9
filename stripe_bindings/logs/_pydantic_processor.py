from typing import Any

from pydantic import BaseModel
from structlog.types import EventDict

from stripe_bindings.domain.exceptions import StripeError


def _loggable(value: Any) -> Any:
    match value:
        case StripeError():
            return value.serialized().model_dump(exclude_none=True)
        case BaseModel():
            return value.model_dump(exclude_none=True)
        case list() | tuple():
            return [_loggable(item) for item in value]  # pyright: ignore[reportUnknownVariableType]
        case _:
            return value


def pydantic_processor(logger: Any, log_method: str, event_dict: EventDict) -> EventDict:
    """Replaces models and Stripe errors in the event with plain dicts.

    A `StripeError` is logged as its `ErrorPayload`, e.g. `{"code": "transport_error", "status_code": 402, ...}`,
    so renderers never fall back to the exception repr.
    """
    for key, value in event_dict.items():
        event_dict[key] = _loggable(value)
    return event_dict
