import os
from typing import Self

from pydantic import BaseModel, Field

STRIPE_API_BASE = "https://api.stripe.com"
# Prefix of every v1 path, also found in the `url` of list responses
API_VERSION_PREFIX = "/v1/"


class AppInfo(BaseModel):
    name: str
    url: str | None = None
    version: str | None = None

    def user_agent(self) -> str:
        out = self.name
        if self.version:
            out += f"/{self.version}"
        if self.url:
            out += f" ({self.url})"
        return out


class ClientConfig(BaseModel):
    secret_key: str
    api_base: str = STRIPE_API_BASE
    api_version: str | None = Field(default=None, description="Sent as the Stripe-Version header when set")
    stripe_account: str | None = Field(default=None, description="Connected account to act on behalf of")
    client_id: str | None = None
    app_info: AppInfo | None = None
    timeout: float = 80.0

    @property
    def base_url(self) -> str:
        return f"{self.api_base.rstrip('/')}{API_VERSION_PREFIX}"

    def headers(self) -> dict[str, str]:
        headers = {"Authorization": f"Bearer {self.secret_key}"}
        if self.api_version:
            headers["Stripe-Version"] = self.api_version
        if self.stripe_account:
            headers["Stripe-Account"] = self.stripe_account
        if self.client_id:
            headers["Client-Id"] = self.client_id
        if self.app_info:
            headers["User-Agent"] = self.app_info.user_agent()
        return headers

    @classmethod
    def from_env(cls) -> Self:
        try:
            secret_key = os.environ["STRIPE_API_KEY"]
        except KeyError:
            raise ValueError("STRIPE_API_KEY is not set") from None

        return cls(
            secret_key=secret_key,
            api_base=os.environ.get("STRIPE_API_BASE") or STRIPE_API_BASE,
            api_version=os.environ.get("STRIPE_API_VERSION") or None,
            stripe_account=os.environ.get("STRIPE_ACCOUNT") or None,
            timeout=float(os.environ.get("STRIPE_TIMEOUT_SECONDS", "80")),
        )
