from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, Field

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.domain.params import Metadata
from stripe_bindings.domain.stripe_object import StripeObject


class CheckoutSessionMode(StrEnum):
    PAYMENT = "payment"
    SETUP = "setup"
    SUBSCRIPTION = "subscription"


class CheckoutSessionSubmitType(StrEnum):
    AUTO = "auto"
    BOOK = "book"
    DONATE = "donate"
    PAY = "pay"


class CheckoutSession(StripeObject):
    object: Literal["checkout.session"] = "checkout.session"
    cancel_url: str | None = None
    success_url: str | None = None
    client_reference_id: str | None = None
    customer: str | None = None
    customer_email: str | None = None
    livemode: bool = False
    locale: str | None = None
    mode: CheckoutSessionMode | None = None
    payment_intent: str | None = None
    subscription: str | None = None
    submit_type: CheckoutSessionSubmitType | None = None
    url: str | None = None
    metadata: Metadata = {}

    @classmethod
    def create(cls, client: Client, params: "CreateCheckoutSession") -> "CheckoutSession":
        return client.post_form("/checkout/sessions", params, CheckoutSession)

    @classmethod
    async def create_async(cls, client: AsyncClient, params: "CreateCheckoutSession") -> "CheckoutSession":
        return await client.post_form("/checkout/sessions", params, CheckoutSession)


class CheckoutSessionLineItem(BaseModel):
    # Amount to collect per unit, in the smallest currency unit
    amount: int
    # Three-letter ISO currency code, in lowercase
    currency: str
    name: str
    quantity: int
    description: str | None = None
    images: list[str] | None = None


class CreateCheckoutSession(BaseModel):
    cancel_url: str
    success_url: str
    payment_method_types: list[str] = Field(
        default_factory=lambda: ["card"],
        description="Payment method types the session accepts, e.g. `card` or `ideal`",
    )
    client_reference_id: str | None = Field(
        default=None,
        description="A string to reconcile the session with internal systems, e.g. a cart id",
    )
    customer: str | None = Field(
        default=None,
        description="An existing customer. A new customer is created when not provided",
    )
    customer_email: str | None = Field(
        default=None,
        description="Prefills the email of the customer Checkout creates",
    )
    billing_address_collection: Literal["auto", "required"] | None = None
    line_items: list[CheckoutSessionLineItem] | None = None
    # IETF language tag. Uses the browser's locale when blank or `auto`
    locale: str | None = None
    mode: CheckoutSessionMode | None = None
    submit_type: CheckoutSessionSubmitType | None = None
