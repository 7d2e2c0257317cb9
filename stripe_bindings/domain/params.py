from typing import Self

from pydantic import BaseModel

type Metadata = dict[str, str]
type Timestamp = int


class RangeBounds(BaseModel):
    gt: Timestamp | None = None
    gte: Timestamp | None = None
    lt: Timestamp | None = None
    lte: Timestamp | None = None

    @classmethod
    def after(cls, value: Timestamp) -> Self:
        return cls(gt=value)

    @classmethod
    def after_or_at(cls, value: Timestamp) -> Self:
        return cls(gte=value)

    @classmethod
    def before(cls, value: Timestamp) -> Self:
        return cls(lt=value)

    @classmethod
    def before_or_at(cls, value: Timestamp) -> Self:
        return cls(lte=value)


# Filters list endpoints by an exact value or by bounds, e.g. `created[gt]=1700000000`
type RangeQuery = Timestamp | RangeBounds


class ListParams(BaseModel):
    """Parameters shared by every cursor-paginated list endpoint"""

    ending_before: str | None = None
    starting_after: str | None = None
    # Limit can range between 1 and 100, and the default is 10.
    limit: int | None = None
    expand: list[str] = []

    def continuation(self) -> Self:
        """Filters to repeat on every following page, i.e. everything but the cursors"""
        return self.model_copy(update={"ending_before": None, "starting_after": None})
