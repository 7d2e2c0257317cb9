from collections.abc import AsyncIterator, Iterator
from typing import TYPE_CHECKING

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.pagination.fetcher import cursor_of, ensure_continuable, fetch_next, fetch_next_async

if TYPE_CHECKING:
    from stripe_bindings.domain.page import Page


def walk[T](page: "Page[T]", client: Client) -> Iterator[T]:
    """Iterate over every item of the collection, starting at `page`.

    The next page is only fetched once the last item of the current page has been
    consumed. A failed fetch ends the iteration by raising, after every item
    already fetched has been yielded.
    """
    ensure_continuable(page)
    # Items are popped from the end
    stack = list(reversed(page.data))
    current = page
    while stack:
        item = stack.pop()
        yield item

        if stack or not current.has_more:
            continue

        current = fetch_next(client, type(current), current.url, cursor_of(item), page.params)
        ensure_continuable(current)
        stack = list(reversed(current.data))


async def walk_async[T](page: "Page[T]", client: AsyncClient) -> AsyncIterator[T]:
    ensure_continuable(page)
    stack = list(reversed(page.data))
    current = page
    while stack:
        item = stack.pop()
        yield item

        if stack or not current.has_more:
            continue

        current = await fetch_next_async(client, type(current), current.url, cursor_of(item), page.params)
        ensure_continuable(current)
        stack = list(reversed(current.data))


def collect_all[T](page: "Page[T]", client: Client) -> list[T]:
    """Fetch every remaining page and return all items in order.

    Any failure is raised and the items accumulated so far are discarded.
    """
    data: list[T] = []
    current = page
    while True:
        ensure_continuable(current)
        data.extend(current.data)
        if not current.has_more:
            return data
        current = fetch_next(client, type(current), current.url, cursor_of(current.data[-1]), page.params)


async def collect_all_async[T](page: "Page[T]", client: AsyncClient) -> list[T]:
    data: list[T] = []
    current = page
    while True:
        ensure_continuable(current)
        data.extend(current.data)
        if not current.has_more:
            return data
        current = await fetch_next_async(client, type(current), current.url, cursor_of(current.data[-1]), page.params)
