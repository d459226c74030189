"""Error types raised by the client and error records returned by the API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


class HTTPError(Exception):
    """Raised when the API answers with an unexpected HTTP status.

    The decoded response body, if any, is kept on ``response`` so callers
    can inspect the error records the API sent back.
    """

    def __init__(self, api_name: str, status: str, url: str, response: Any = None) -> None:
        self.api_name = api_name
        self.status = status
        self.url = url
        self.response = response
        super().__init__(f"{api_name}: {status} {url}")


class ResponseDecodeError(ValueError):
    """Raised when a response body cannot be decoded as JSON."""


def _strings(values: Any) -> list[str]:
    return [str(value) for value in values or ()]


@dataclass
class Parameter:
    """The request parameters an API error refers to."""

    id: list[str] = field(default_factory=list)
    ids: list[str] = field(default_factory=list)
    username: list[str] = field(default_factory=list)
    usernames: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "Parameter":
        data = data or {}
        return cls(
            id=_strings(data.get("id")),
            ids=_strings(data.get("ids")),
            username=_strings(data.get("username")),
            usernames=_strings(data.get("usernames")),
        )


@dataclass
class APIResponseError:
    """One entry of the ``errors`` array in an API response."""

    title: str = ""
    detail: str = ""
    type: str = ""
    resource_type: str = ""
    resource_id: str = ""
    parameter: str = ""
    parameters: Parameter = field(default_factory=Parameter)
    message: str = ""
    value: Any = None
    reason: str = ""
    client_id: str = ""
    required_enrollment: str = ""
    registration_url: str = ""
    connection_issue: str = ""
    status: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "APIResponseError":
        data = data or {}
        return cls(
            title=data.get("title") or "",
            detail=data.get("detail") or "",
            type=data.get("type") or "",
            resource_type=data.get("resource_type") or "",
            resource_id=data.get("resource_id") or "",
            parameter=data.get("parameter") or "",
            parameters=Parameter.from_dict(data.get("parameters")),
            message=data.get("message") or "",
            value=data.get("value"),
            reason=data.get("reason") or "",
            client_id=data.get("client_id") or "",
            required_enrollment=data.get("required_enrollment") or "",
            registration_url=data.get("registration_url") or "",
            connection_issue=data.get("connection_issue") or "",
            status=int(data.get("status") or 0),
        )


def parse_errors(data: Mapping[str, Any] | None) -> list[APIResponseError]:
    """Return the error records held under ``errors`` in a response body."""
    if not data:
        return []
    return [APIResponseError.from_dict(item) for item in data.get("errors") or ()]