from typing import Literal

from pydantic import BaseModel

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.domain.page import Page
from stripe_bindings.domain.params import ListParams, Metadata, RangeQuery, Timestamp
from stripe_bindings.domain.stripe_object import StripeObject


class Customer(StripeObject):
    object: Literal["customer"] = "customer"
    created: Timestamp | None = None
    email: str | None = None
    name: str | None = None
    description: str | None = None
    balance: int = 0
    currency: str | None = None
    livemode: bool = False
    metadata: Metadata = {}

    class InvoiceSettings(BaseModel):
        default_payment_method: str | None = None

    invoice_settings: InvoiceSettings | None = None

    # `retrieve` is declared before `list` since the latter shadows the builtin in the class body
    @classmethod
    def retrieve(cls, client: Client, customer_id: str, expand: list[str] | None = None) -> "Customer":
        return client.get_query(f"/customers/{customer_id}", {"expand": expand or []}, Customer)

    @classmethod
    async def retrieve_async(cls, client: AsyncClient, customer_id: str, expand: list[str] | None = None) -> "Customer":
        return await client.get_query(f"/customers/{customer_id}", {"expand": expand or []}, Customer)

    @classmethod
    def list(cls, client: Client, params: "ListCustomers | None" = None) -> "Page[Customer]":
        params = params or ListCustomers()
        page = client.get_query("/customers", params, Page[Customer])
        return page.with_params(params.continuation())

    @classmethod
    async def list_async(cls, client: AsyncClient, params: "ListCustomers | None" = None) -> "Page[Customer]":
        params = params or ListCustomers()
        page = await client.get_query("/customers", params, Page[Customer])
        return page.with_params(params.continuation())


class ListCustomers(ListParams):
    created: RangeQuery | None = None
    email: str | None = None
