from typing import Literal

from pydantic import BaseModel

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.domain.params import Metadata, Timestamp
from stripe_bindings.domain.stripe_object import StripeObject


class Subscription(StripeObject):
    object: Literal["subscription"] = "subscription"
    customer: str
    status: str
    cancel_at_period_end: bool = False
    canceled_at: Timestamp | None = None
    created: Timestamp | None = None
    livemode: bool = False
    metadata: Metadata = {}

    @classmethod
    def cancel(cls, client: Client, subscription_id: str) -> "Subscription":
        """Cancels a subscription immediately

        For more details see https://stripe.com/docs/api/subscriptions/cancel
        """
        return client.delete(f"/subscriptions/{subscription_id}", Subscription)

    @classmethod
    async def cancel_async(cls, client: AsyncClient, subscription_id: str) -> "Subscription":
        return await client.delete(f"/subscriptions/{subscription_id}", Subscription)


class SubscriptionSchedule(StripeObject):
    object: Literal["subscription_schedule"] = "subscription_schedule"
    customer: str
    status: str
    subscription: str | None = None
    canceled_at: Timestamp | None = None
    released_at: Timestamp | None = None
    released_subscription: str | None = None
    livemode: bool = False
    metadata: Metadata = {}

    @classmethod
    def cancel(
        cls,
        client: Client,
        schedule_id: str,
        params: "CancelSubscriptionSchedule | None" = None,
    ) -> "SubscriptionSchedule":
        return client.post_form(
            f"/subscription_schedules/{schedule_id}/cancel",
            params or CancelSubscriptionSchedule(),
            SubscriptionSchedule,
        )

    @classmethod
    async def cancel_async(
        cls,
        client: AsyncClient,
        schedule_id: str,
        params: "CancelSubscriptionSchedule | None" = None,
    ) -> "SubscriptionSchedule":
        return await client.post_form(
            f"/subscription_schedules/{schedule_id}/cancel",
            params or CancelSubscriptionSchedule(),
            SubscriptionSchedule,
        )

    @classmethod
    def release(
        cls,
        client: Client,
        schedule_id: str,
        params: "ReleaseSubscriptionSchedule | None" = None,
    ) -> "SubscriptionSchedule":
        """Releases the schedule, leaving its subscription in place

        For more details see https://stripe.com/docs/api/subscription_schedules/release
        """
        return client.post_form(
            f"/subscription_schedules/{schedule_id}/release",
            params or ReleaseSubscriptionSchedule(),
            SubscriptionSchedule,
        )

    @classmethod
    async def release_async(
        cls,
        client: AsyncClient,
        schedule_id: str,
        params: "ReleaseSubscriptionSchedule | None" = None,
    ) -> "SubscriptionSchedule":
        return await client.post_form(
            f"/subscription_schedules/{schedule_id}/release",
            params or ReleaseSubscriptionSchedule(),
            SubscriptionSchedule,
        )


class CancelSubscriptionSchedule(BaseModel):
    invoice_now: bool | None = None
    prorate: bool | None = None


class ReleaseSubscriptionSchedule(BaseModel):
    preserve_cancel_date: bool | None = None
