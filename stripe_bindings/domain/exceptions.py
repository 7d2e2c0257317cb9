from typing import Any

from pydantic import BaseModel


class ErrorPayload(BaseModel):
    code: str
    message: str
    status_code: int | None = None
    details: dict[str, Any] | None = None


class ApiErrorDetails(BaseModel):
    """The `error` object of a Stripe error response"""

    type: str
    message: str | None = None
    code: str | None = None
    param: str | None = None
    decline_code: str | None = None
    doc_url: str | None = None


class StripeError(Exception):
    code: str = "internal_error"

    def __init__(self, msg: str = "", extras: dict[str, Any] | None = None):
        super().__init__(msg)
        self.msg = msg
        self.extras = extras

    def serialized(self) -> ErrorPayload:
        return ErrorPayload(code=self.code, message=self.msg, details=self.extras)


class UnsupportedVersionError(StripeError):
    code = "unsupported_version"


class SerializationError(StripeError):
    code = "serialization_error"


class EmptyPageError(StripeError):
    code = "empty_page"


class TransportError(StripeError):
    code = "transport_error"

    def __init__(
        self,
        msg: str = "",
        extras: dict[str, Any] | None = None,
        status_code: int | None = None,
        api_error: ApiErrorDetails | None = None,
    ):
        super().__init__(msg, extras=extras)
        self.status_code = status_code
        self.api_error = api_error

    @property
    def is_network_error(self) -> bool:
        return self.status_code is None

    def serialized(self) -> ErrorPayload:
        payload = super().serialized()
        payload.status_code = self.status_code
        if self.api_error:
            payload.details = {**(payload.details or {}), "api_error": self.api_error.model_dump(exclude_none=True)}
        return payload
