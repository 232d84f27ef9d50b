"""Exceptions raised by the HitBTC SDK."""

from typing import Any, Mapping, Optional
from pydantic import ValidationError

from .types import ErrorDetail, HitBTCResponse

AUTH_REQUIRED_MESSAGE = "api keys are required to access private endpoints"


class HitBTCError(Exception):
    """Base exception for all SDK errors."""

    pass


class AuthRequiredError(HitBTCError):
    """A private endpoint was called on a client without API keys."""

    def __init__(self, message: str = AUTH_REQUIRED_MESSAGE) -> None:
        super().__init__(message)


class APIError(HitBTCError):
    """
    A request failed in transport or came back with a non-2xx status.

    ``payload`` is the most specific error information available, as chosen
    by :func:`unwrap_error`. The transport exception, if any, is chained as
    ``__cause__``.
    """

    def __init__(self, payload: Any, status: Optional[int] = None) -> None:
        super().__init__(_describe(payload))
        self.payload = payload
        self.status = status

    @property
    def detail(self) -> Optional[ErrorDetail]:
        """The payload as a HitBTC error object, when it is one."""
        if not isinstance(self.payload, Mapping):
            return None
        try:
            return ErrorDetail.model_validate(self.payload)
        except ValidationError:
            return None


class ResponseParseError(HitBTCError):
    """A successful response did not match the expected model."""

    def __init__(self, message: str, response: HitBTCResponse) -> None:
        super().__init__(message)
        self.response = response


class SigningError(HitBTCError):
    """A message could not be signed with the given key."""

    pass


def unwrap_error(
    response: Optional[HitBTCResponse], error: Optional[BaseException] = None
) -> Any:
    """
    Pick the most specific description of a failed request.

    Order of preference:
        1. ``response.data["error"]``
        2. ``response.data``
        3. the response itself
        4. the raw exception

    Args:
        response: Response of the failed request, None if none arrived
        error: Transport exception, if any

    Returns:
        The first of the above that is present. Empty objects and lists
        count as present; None, empty strings, zero and False do not.
    """
    if response is not None:
        data = response.data
        if isinstance(data, Mapping) and _present(data.get("error")):
            return data["error"]
        if _present(data):
            return data
        return response
    return error


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, bool, int, float)):
        return bool(value) and value == value
    return True


def _describe(payload: Any) -> str:
    if isinstance(payload, Mapping) and "message" in payload:
        code = payload.get("code")
        description = payload.get("description")
        text = f"{code}: {payload['message']}" if code is not None else str(payload["message"])
        return f"{text} ({description})" if description else text
    if isinstance(payload, HitBTCResponse):
        return f"HTTP {payload.status}"
    if isinstance(payload, BaseException):
        return str(payload) or type(payload).__name__
    return str(payload)
