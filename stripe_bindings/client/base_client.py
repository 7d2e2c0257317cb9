from typing import Any

import httpx
from pydantic import BaseModel, ValidationError
from structlog import get_logger

from stripe_bindings.client.config import ClientConfig
from stripe_bindings.domain.exceptions import ApiErrorDetails, SerializationError, TransportError
from stripe_bindings.utils.query_string import QueryParams, encode_query

_log = get_logger(__name__)

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class _ErrorEnvelope(BaseModel):
    error: ApiErrorDetails


class BaseClient:
    """Request building and response decoding shared by the blocking and async clients.

    Subclasses only own the underlying httpx client and the I/O calls.
    """

    def __init__(self, config: ClientConfig):
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path.lstrip('/')}"

    @classmethod
    def _with_query(cls, path: str, params: QueryParams) -> str:
        query = encode_query(params)
        if not query:
            return path
        separator = "&" if "?" in path else "?"
        return f"{path}{separator}{query}"

    def _headers(self, form: bool = False) -> dict[str, str]:
        headers = self._config.headers()
        if form:
            headers["Content-Type"] = _FORM_CONTENT_TYPE
        return headers

    def _network_error(self, method: str, path: str, e: httpx.HTTPError) -> TransportError:
        _log.warning("Stripe request could not be sent", method=method, path=path, error=str(e))
        return TransportError(f"Failed to reach Stripe: {e}", extras={"method": method, "path": path})

    @classmethod
    def _api_error(cls, response: httpx.Response) -> ApiErrorDetails | None:
        try:
            return _ErrorEnvelope.model_validate_json(response.content).error
        except ValidationError:
            return None

    def _status_error(self, method: str, path: str, response: httpx.Response) -> TransportError:
        api_error = self._api_error(response)
        _log.warning(
            "Stripe request failed",
            method=method,
            path=path,
            status_code=response.status_code,
            api_error=api_error,
        )
        message = api_error.message if api_error and api_error.message else response.text
        return TransportError(
            f"Stripe returned {response.status_code}: {message}",
            extras={"method": method, "path": path},
            status_code=response.status_code,
            api_error=api_error,
        )

    def _decode[M: BaseModel](self, method: str, path: str, response: httpx.Response, model: type[M]) -> M:
        if response.is_error:
            raise self._status_error(method, path, response)

        try:
            raw: Any = response.json()
        except ValueError as e:
            raise SerializationError(
                "Stripe returned a response that is not valid JSON",
                extras={"path": path, "body": response.text},
            ) from e

        try:
            return model.model_validate(raw)
        except ValidationError as e:
            raise SerializationError(
                f"Could not decode response as {model.__name__}",
                extras={"path": path, "errors": e.errors(include_url=False)},
            ) from e
