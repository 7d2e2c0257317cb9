from typing import Literal

from pydantic import BaseModel, Field

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.domain.params import Timestamp
from stripe_bindings.domain.stripe_object import StripeObject


class BillingPortalSession(StripeObject):
    """A short-lived session of the customer portal, where a customer manages their subscriptions
    and billing details.

    For more details see https://stripe.com/docs/api/customer_portal/sessions/object
    """

    object: Literal["billing_portal.session"] = "billing_portal.session"
    configuration: str | None = None
    created: Timestamp
    customer: str
    livemode: bool = False
    return_url: str | None = None
    # The portal URL to send the customer to
    url: str

    @classmethod
    def create(cls, client: Client, params: "CreateBillingPortalSession") -> "BillingPortalSession":
        return client.post_form("/billing_portal/sessions", params, BillingPortalSession)

    @classmethod
    async def create_async(cls, client: AsyncClient, params: "CreateBillingPortalSession") -> "BillingPortalSession":
        return await client.post_form("/billing_portal/sessions", params, BillingPortalSession)


class CreateBillingPortalSession(BaseModel):
    customer: str
    return_url: str | None = Field(
        default=None,
        description="Required when the portal configuration has no default return URL",
    )
    configuration: str | None = Field(
        default=None,
        description="Portal configuration to use instead of the default one",
    )
