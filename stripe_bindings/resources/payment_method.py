from typing import Literal

from pydantic import BaseModel

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.domain.params import Metadata, Timestamp
from stripe_bindings.domain.stripe_object import StripeObject


class PaymentMethod(StripeObject):
    object: Literal["payment_method"] = "payment_method"
    type: str
    created: Timestamp | None = None
    customer: str | None = None
    livemode: bool = False
    metadata: Metadata = {}

    class Card(BaseModel):
        brand: str
        last4: str
        exp_month: int
        exp_year: int

    card: Card | None = None

    @classmethod
    def attach(cls, client: Client, payment_method_id: str, params: "AttachPaymentMethod") -> "PaymentMethod":
        """Attach a payment method to a customer

        For more details see https://stripe.com/docs/api/payment_methods/attach
        """
        return client.post_form(f"/payment_methods/{payment_method_id}/attach", params, PaymentMethod)

    @classmethod
    async def attach_async(
        cls,
        client: AsyncClient,
        payment_method_id: str,
        params: "AttachPaymentMethod",
    ) -> "PaymentMethod":
        return await client.post_form(f"/payment_methods/{payment_method_id}/attach", params, PaymentMethod)

    @classmethod
    def detach(cls, client: Client, payment_method_id: str) -> "PaymentMethod":
        """Detach a payment method from its customer

        For more details see https://stripe.com/docs/api/payment_methods/detach
        """
        return client.post(f"/payment_methods/{payment_method_id}/detach", PaymentMethod)

    @classmethod
    async def detach_async(cls, client: AsyncClient, payment_method_id: str) -> "PaymentMethod":
        return await client.post(f"/payment_methods/{payment_method_id}/detach", PaymentMethod)


class AttachPaymentMethod(BaseModel):
    customer: str
