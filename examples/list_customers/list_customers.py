import asyncio
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich import print
from structlog import get_logger

from stripe_bindings.client.async_client import AsyncClient
from stripe_bindings.client.client import Client
from stripe_bindings.client.config import ClientConfig
from stripe_bindings.domain.exceptions import StripeError
from stripe_bindings.domain.params import RangeBounds
from stripe_bindings.logs.setup_logs import setup_logs
from stripe_bindings.resources.customer import Customer, ListCustomers

load_dotenv(override=True)

_log = get_logger(__name__)


def list_customers(params: ListCustomers) -> list[Customer]:
    with Client(ClientConfig.from_env()) as client:
        return Customer.list(client, params).collect_all(client)


async def stream_customers(params: ListCustomers):
    async with AsyncClient(ClientConfig.from_env()) as client:
        page = await Customer.list_async(client, params)
        async for customer in page.iter_all_async(client):
            print(f"{customer.id}\t{customer.email or ''}")


if __name__ == "__main__":

    def _main(
        limit: Annotated[int, typer.Option(help="Page size")] = 10,
        email: Annotated[str | None, typer.Option()] = None,
        created_after: Annotated[int | None, typer.Option(help="Unix timestamp")] = None,
        stream: Annotated[bool, typer.Option(help="Print customers as pages arrive")] = False,
    ):
        setup_logs()
        params = ListCustomers(
            limit=limit,
            email=email,
            created=RangeBounds.after(created_after) if created_after is not None else None,
        )
        try:
            if stream:
                asyncio.run(stream_customers(params))
                return
            customers = list_customers(params)
        except StripeError as e:
            _log.error("Listing customers failed", error=e)
            raise typer.Exit(1) from e
        print(customers)
        print(f"{len(customers)} customers")

    typer.run(_main)
