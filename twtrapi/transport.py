"""HTTP transport that signs requests with a bearer token and decodes JSON replies."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

import requests

from .errors import HTTPError, ResponseDecodeError


@dataclass
class _Reply:
    """A decoded API reply: status line, final URL and JSON object body."""

    status_code: int
    status: str
    url: str
    data: dict[str, Any] = field(default_factory=dict)

    def raise_for_status(
        self, api_name: str, response: Any = None, accepted: Iterable[int] = (200,)
    ) -> None:
        """Raise HTTPError carrying ``response`` unless the status is accepted."""
        if self.status_code not in tuple(accepted):
            raise HTTPError(api_name, self.status, self.url, response)


class Transport:
    """Sends authorised requests to the API over a requests session."""

    def __init__(self, bearer_token: str, session: requests.Session | None = None) -> None:
        self.bearer_token = bearer_token
        self.session = session if session is not None else requests.Session()

    def send(
        self,
        method: str,
        url: str,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
    ) -> _Reply:
        """Send a request and return its decoded reply.

        The body must be a JSON object (or null); anything else raises
        ResponseDecodeError. Status codes are left for the caller to judge.
        """
        headers = {"Authorization": f"Bearer {self.bearer_token}"}
        payload = None
        if json_body is not None:
            headers["Content-Type"] = "application/json"
            payload = json.dumps(json_body).encode("utf-8")

        response = self.session.request(
            method,
            url,
            params=dict(params) if params else None,
            data=payload,
            headers=headers,
        )
        with response:
            final_url = response.request.url if response.request is not None else response.url
            try:
                data = response.json()
            except ValueError as exc:
                raise ResponseDecodeError(f"{method} {final_url}: decode: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"{method} {final_url}: decode: expected a JSON object, got {type(data).__name__}"
            )
        return _Reply(
            status_code=response.status_code,
            status=f"{response.status_code} {response.reason or ''}".rstrip(),
            url=final_url or url,
            data=data,
        )