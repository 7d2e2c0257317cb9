from types import TracebackType
from typing import Self

import httpx
from pydantic import BaseModel
from structlog import get_logger

from stripe_bindings.client.base_client import BaseClient
from stripe_bindings.client.config import ClientConfig
from stripe_bindings.utils.query_string import QueryParams, encode_query

_log = get_logger(__name__)


class AsyncClient(BaseClient):
    """Cooperative client. Each call suspends once, for the HTTP round trip.

    A single instance can be shared by concurrent tasks.
    """

    def __init__(self, config: ClientConfig, http_client: httpx.AsyncClient | None = None):
        super().__init__(config)
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)

    async def aclose(self):
        await self._http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exctype: type[BaseException] | None,
        excinst: BaseException | None,
        exctb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def _request[M: BaseModel](
        self,
        method: str,
        path: str,
        model: type[M],
        form: QueryParams | None = None,
    ) -> M:
        _log.debug("Sending Stripe request", method=method, path=path)
        try:
            response = await self._http.request(
                method,
                self._url(path),
                headers=self._headers(form=form is not None),
                content=encode_query(form) if form is not None else None,
            )
        except httpx.HTTPError as e:
            raise self._network_error(method, path, e) from e
        return self._decode(method, path, response, model)

    async def get[M: BaseModel](self, path: str, model: type[M]) -> M:
        return await self._request("GET", path, model)

    async def get_query[M: BaseModel](self, path: str, params: QueryParams, model: type[M]) -> M:
        return await self._request("GET", self._with_query(path, params), model)

    async def post[M: BaseModel](self, path: str, model: type[M]) -> M:
        return await self._request("POST", path, model)

    async def post_form[M: BaseModel](self, path: str, params: QueryParams, model: type[M]) -> M:
        return await self._request("POST", path, model, form=params)

    async def delete[M: BaseModel](self, path: str, model: type[M]) -> M:
        return await self._request("DELETE", path, model)
