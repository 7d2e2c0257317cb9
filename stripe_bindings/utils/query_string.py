from collections.abc import Iterator, Mapping, Sequence
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

from stripe_bindings.domain.exceptions import SerializationError

type QueryParams = BaseModel | Mapping[str, Any]


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise SerializationError(f"Unsupported value type for query string: {type(value).__name__}")


def _flatten(prefix: str, value: Any) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json", exclude_none=True, by_alias=True)
    if isinstance(value, Mapping):
        for k, v in value.items():  # pyright: ignore[reportUnknownVariableType]
            yield from _flatten(f"{prefix}[{k}]" if prefix else str(k), v)  # pyright: ignore[reportUnknownArgumentType]
        return
    if isinstance(value, Sequence) and not isinstance(value, str):
        for i, v in enumerate(value):  # pyright: ignore[reportUnknownVariableType, reportUnknownArgumentType]
            yield from _flatten(f"{prefix}[{i}]", v)
        return
    yield prefix, _scalar(value)


def flatten_params(params: QueryParams) -> list[tuple[str, str]]:
    """Flatten params into bracketed key/value pairs, e.g. `created[gt]` or `expand[0]`.

    None values and empty lists produce no pair at all.
    """
    if isinstance(params, BaseModel):
        params = params.model_dump(mode="json", exclude_none=True, by_alias=True)
    return list(_flatten("", params))


def encode_query(params: QueryParams) -> str:
    return urlencode(flatten_params(params))
