from collections.abc import AsyncIterator, Iterator
from typing import Self

from pydantic import BaseModel, Field

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.pagination import fetcher, walker
from stripe_bindings.utils.query_string import QueryParams, encode_query


class Page[T](BaseModel):
    """A single page of a cursor-paginated list, as returned by a Stripe list endpoint"""

    data: list[T]
    has_more: bool = False
    # Only some endpoints report a total count
    total_count: int | None = None
    url: str
    params: str | None = Field(
        default=None,
        exclude=True,
        description="Pre-encoded filters of the original list request, repeated on every following page",
    )

    def with_params(self, params: QueryParams) -> Self:
        return self.model_copy(update={"params": encode_query(params) or None})

    def next(self, client: Client) -> Self:
        return fetcher.next_page(self, client)

    async def next_async(self, client: AsyncClient) -> Self:
        return await fetcher.next_page_async(self, client)

    def iter_all(self, client: Client) -> Iterator[T]:
        return walker.walk(self, client)

    def iter_all_async(self, client: AsyncClient) -> AsyncIterator[T]:
        return walker.walk_async(self, client)

    def collect_all(self, client: Client) -> list[T]:
        return walker.collect_all(self, client)

    async def collect_all_async(self, client: AsyncClient) -> list[T]:
        return await walker.collect_all_async(self, client)
