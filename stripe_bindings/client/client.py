from types import TracebackType
from typing import Self

import httpx
from pydantic import BaseModel
from structlog import get_logger

from stripe_bindings.client.base_client import BaseClient
from stripe_bindings.client.config import ClientConfig
from stripe_bindings.utils.query_string import QueryParams, encode_query

_log = get_logger(__name__)


class Client(BaseClient):
    """Blocking client. Every call holds the calling thread until the response is decoded."""

    def __init__(self, config: ClientConfig, http_client: httpx.Client | None = None):
        super().__init__(config)
        self._http = http_client or httpx.Client(timeout=config.timeout)

    def close(self):
        self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exctype: type[BaseException] | None,
        excinst: BaseException | None,
        exctb: TracebackType | None,
    ) -> None:
        self.close()

    def _request[M: BaseModel](
        self,
        method: str,
        path: str,
        model: type[M],
        form: QueryParams | None = None,
    ) -> M:
        _log.debug("Sending Stripe request", method=method, path=path)
        try:
            response = self._http.request(
                method,
                self._url(path),
                headers=self._headers(form=form is not None),
                content=encode_query(form) if form is not None else None,
            )
        except httpx.HTTPError as e:
            raise self._network_error(method, path, e) from e
        return self._decode(method, path, response, model)

    def get[M: BaseModel](self, path: str, model: type[M]) -> M:
        return self._request("GET", path, model)

    def get_query[M: BaseModel](self, path: str, params: QueryParams, model: type[M]) -> M:
        return self._request("GET", self._with_query(path, params), model)

    def post[M: BaseModel](self, path: str, model: type[M]) -> M:
        return self._request("POST", path, model)

    def post_form[M: BaseModel](self, path: str, params: QueryParams, model: type[M]) -> M:
        return self._request("POST", path, model, form=params)

    def delete[M: BaseModel](self, path: str, model: type[M]) -> M:
        return self._request("DELETE", path, model)
