import os
from unittest.mock import patch

import pytest

from stripe_bindings.client.config import AppInfo, ClientConfig


class TestHeaders:
    def test_minimal(self, client_config: ClientConfig):
        assert client_config.headers() == {"Authorization": "Bearer sk_test_123"}

    def test_all_headers(self):
        config = ClientConfig(
            secret_key="sk_test_123",  # noqa: S106
            api_version="2020-08-27",
            stripe_account="acct_1",
            client_id="ca_1",
            app_info=AppInfo(name="shop", version="1.2.0", url="https://shop.example.com"),
        )
        assert config.headers() == {
            "Authorization": "Bearer sk_test_123",
            "Stripe-Version": "2020-08-27",
            "Stripe-Account": "acct_1",
            "Client-Id": "ca_1",
            "User-Agent": "shop/1.2.0 (https://shop.example.com)",
        }


class TestAppInfo:
    @pytest.mark.parametrize(
        ("info", "expected"),
        [
            pytest.param(AppInfo(name="shop"), "shop", id="name only"),
            pytest.param(AppInfo(name="shop", version="1"), "shop/1", id="version"),
            pytest.param(AppInfo(name="shop", url="https://s.io"), "shop (https://s.io)", id="url"),
        ],
    )
    def test_user_agent(self, info: AppInfo, expected: str):
        assert info.user_agent() == expected


class TestBaseUrl:
    @pytest.mark.parametrize("api_base", ["https://api.stripe.com", "https://api.stripe.com/"])
    def test_base_url(self, api_base: str):
        config = ClientConfig(secret_key="sk", api_base=api_base)  # noqa: S106
        assert config.base_url == "https://api.stripe.com/v1/"


class TestFromEnv:
    def test_from_env(self):
        with patch.dict(
            os.environ,
            {
                "STRIPE_API_KEY": "sk_env",
                "STRIPE_API_BASE": "http://localhost:12111",
                "STRIPE_API_VERSION": "2020-08-27",
                "STRIPE_TIMEOUT_SECONDS": "5",
            },
        ):
            config = ClientConfig.from_env()

        assert config.secret_key == "sk_env"  # noqa: S105
        assert config.api_base == "http://localhost:12111"
        assert config.api_version == "2020-08-27"
        assert config.stripe_account is None
        assert config.timeout == 5.0

    def test_from_env_empty_api_base(self):
        with patch.dict(os.environ, {"STRIPE_API_KEY": "sk_env", "STRIPE_API_BASE": ""}, clear=True):
            config = ClientConfig.from_env()

        assert config.api_base == "https://api.stripe.com"
        assert config.base_url == "https://api.stripe.com/v1/"

    def test_missing_key(self):
        with patch.dict(os.environ, {}, clear=True), pytest.raises(ValueError, match="STRIPE_API_KEY"):
            ClientConfig.from_env()
