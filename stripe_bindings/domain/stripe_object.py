from abc import ABC, abstractmethod

from pydantic import BaseModel


class Paginate(ABC):
    """Implemented by types that support cursor-based pagination.

    The cursor of the last item of a page is sent as `starting_after` to fetch
    the following page, so it must be unique and follow the server's ordering.
    """

    @abstractmethod
    def cursor(self) -> str:
        pass


class StripeObject(BaseModel, Paginate):
    id: str
    object: str

    def cursor(self) -> str:
        return self.id


class Deleted(BaseModel):
    id: str
    deleted: bool


# An id or, when requested with `expand`, the full object
type Expandable[T: StripeObject] = str | T


def expandable_id[T: StripeObject](value: Expandable[T]) -> str:
    if isinstance(value, str):
        return value
    return value.id


def expandable_object[T: StripeObject](value: Expandable[T]) -> T | None:
    if isinstance(value, str):
        return None
    return value
