from typing import TYPE_CHECKING, Any

from structlog import get_logger

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.client.config import API_VERSION_PREFIX
from stripe_bindings.domain.exceptions import EmptyPageError, UnsupportedVersionError
from stripe_bindings.domain.stripe_object import Paginate

if TYPE_CHECKING:
    from stripe_bindings.domain.page import Page

_log = get_logger(__name__)


def cursor_of(item: Any) -> str:
    if not isinstance(item, Paginate):
        raise TypeError(f"{type(item).__name__} does not support cursor pagination")
    return item.cursor()


def ensure_continuable(page: "Page[Any]") -> None:
    if not page.data and page.has_more:
        raise EmptyPageError(
            "Stripe returned an empty page that claims to have more items",
            extras={"url": page.url},
        )


def next_page_path(url: str, cursor: str, params: str | None) -> str:
    """Build the path of the page that follows `cursor`.

    `url` is the `url` of a list response, e.g. `/v1/customers`. The version prefix
    is stripped since the client already targets it.
    """
    if not url.startswith(API_VERSION_PREFIX):
        raise UnsupportedVersionError(
            "URL for fetching additional data uses different API version",
            extras={"url": url},
        )

    path = url.removeprefix(API_VERSION_PREFIX)
    separator = "&" if "?" in path else "?"
    path = f"{path}{separator}starting_after={cursor}"
    if params:
        path = f"{path}&{params}"
    return path


def fetch_next[P: "Page[Any]"](client: Client, page_cls: type[P], url: str, cursor: str, params: str | None) -> P:
    path = next_page_path(url, cursor, params)
    _log.debug("Fetching next page", path=path, cursor=cursor)
    page = client.get(path, page_cls)
    # The response does not carry the caller's filters
    return page.model_copy(update={"params": params})


async def fetch_next_async[P: "Page[Any]"](
    client: AsyncClient,
    page_cls: type[P],
    url: str,
    cursor: str,
    params: str | None,
) -> P:
    path = next_page_path(url, cursor, params)
    _log.debug("Fetching next page", path=path, cursor=cursor)
    page = await client.get(path, page_cls)
    return page.model_copy(update={"params": params})


def _empty_successor[P: "Page[Any]"](page: P) -> P:
    return page.model_copy(update={"data": [], "has_more": False})


def next_page[P: "Page[Any]"](page: P, client: Client) -> P:
    ensure_continuable(page)
    if not page.data:
        return _empty_successor(page)
    return fetch_next(client, type(page), page.url, cursor_of(page.data[-1]), page.params)


async def next_page_async[P: "Page[Any]"](page: P, client: AsyncClient) -> P:
    ensure_continuable(page)
    if not page.data:
        return _empty_successor(page)
    return await fetch_next_async(client, type(page), page.url, cursor_of(page.data[-1]), page.params)
