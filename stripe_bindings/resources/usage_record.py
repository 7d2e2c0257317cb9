from enum import StrEnum
from typing import Literal

from pydantic import BaseModel

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.domain.page import Page
from stripe_bindings.domain.params import ListParams, Timestamp
from stripe_bindings.domain.stripe_object import StripeObject


class UsageRecordAction(StrEnum):
    # Adds the quantity to the usage at the timestamp. The only allowed value with billing thresholds
    INCREMENT = "increment"
    # Overwrites the usage quantity at the timestamp
    SET = "set"


class UsageRecord(StripeObject):
    object: Literal["usage_record"] = "usage_record"
    quantity: int
    subscription_item: str
    timestamp: Timestamp
    livemode: bool = False

    @classmethod
    def create(cls, client: Client, subscription_item_id: str, params: "CreateUsageRecord") -> "UsageRecord":
        """Creates a usage record for a subscription item and date, and fills it with a quantity.

        For more details see https://stripe.com/docs/api/usage_records/create
        """
        return client.post_form(f"/subscription_items/{subscription_item_id}/usage_records", params, UsageRecord)

    @classmethod
    async def create_async(
        cls,
        client: AsyncClient,
        subscription_item_id: str,
        params: "CreateUsageRecord",
    ) -> "UsageRecord":
        return await client.post_form(
            f"/subscription_items/{subscription_item_id}/usage_records",
            params,
            UsageRecord,
        )


class CreateUsageRecord(BaseModel):
    quantity: int
    timestamp: Timestamp
    action: UsageRecordAction | None = None


class UsagePeriod(BaseModel):
    start: Timestamp | None = None
    end: Timestamp | None = None


class UsageRecordSummary(StripeObject):
    object: Literal["usage_record_summary"] = "usage_record_summary"
    # The invoice in which this usage period has been billed for
    invoice: str | None = None
    period: UsagePeriod
    subscription_item: str
    total_usage: int
    livemode: bool = False

    @classmethod
    def list(
        cls,
        client: Client,
        subscription_item_id: str,
        params: "ListUsageRecordSummaries | None" = None,
    ) -> "Page[UsageRecordSummary]":
        """Lists the usage summaries of a subscription item, one per billing period.

        The list is sorted newest first. The first summary is the current period, which can still
        change until the period ends.
        """
        params = params or ListUsageRecordSummaries()
        # The subscription item goes in the path, the rest of the filters in the query
        page = client.get_query(
            f"/subscription_items/{subscription_item_id}/usage_record_summaries",
            params,
            Page[UsageRecordSummary],
        )
        return page.with_params(params.continuation())

    @classmethod
    async def list_async(
        cls,
        client: AsyncClient,
        subscription_item_id: str,
        params: "ListUsageRecordSummaries | None" = None,
    ) -> "Page[UsageRecordSummary]":
        params = params or ListUsageRecordSummaries()
        page = await client.get_query(
            f"/subscription_items/{subscription_item_id}/usage_record_summaries",
            params,
            Page[UsageRecordSummary],
        )
        return page.with_params(params.continuation())


class ListUsageRecordSummaries(ListParams):
    pass
