"""Client for the Twitter v2 API.

Only endpoints that work with an OAuth 2.0 bearer token are covered.
"""

from __future__ import annotations

import requests

from .compliance import (
    ComplianceJobResponse,
    ComplianceJobsOption,
    ComplianceJobsResponse,
    CreateComplianceJobOption,
    CreateComplianceJobResponse,
    compliance_job,
    compliance_jobs,
    create_compliance_job,
)
from .direct_messages import (
    DirectMessageOption,
    DirectMessagesResponse,
    look_up_all_dm,
    look_up_all_one_to_one_dm,
    look_up_dm,
)
from .transport import Transport


class Client:
    """API client that authorises every request with a bearer token.

    Calls raise ValueError for missing or invalid arguments, and
    HTTPError (carrying the decoded reply) when the API answers with an
    unexpected status.
    """

    def __init__(
        self,
        bearer_token: str,
        consumer_key: str = "",
        consumer_secret: str = "",
        session: requests.Session | None = None,
    ) -> None:
        self.consumer_key = consumer_key
        self.consumer_secret = consumer_secret
        self._owns_session = session is None
        self._transport = Transport(bearer_token, session)

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying session if the client created it."""
        if self._owns_session:
            self._transport.session.close()

    def bearer_token(self) -> str:
        """Return the bearer token used to authorise requests."""
        return self._transport.bearer_token

    # Batch compliance

    def compliance_jobs(
        self, option: ComplianceJobsOption | None = None
    ) -> ComplianceJobsResponse:
        """Return a list of recent compliance jobs."""
        return compliance_jobs(self._transport, option)

    def compliance_job(self, compliance_job_id: int) -> ComplianceJobResponse:
        """Return a single compliance job with the given ID."""
        return compliance_job(self._transport, compliance_job_id)

    def create_compliance_job(
        self, option: CreateComplianceJobOption | None = None
    ) -> CreateComplianceJobResponse:
        """Create a compliance job."""
        return create_compliance_job(self._transport, option)

    # Direct Message lookup

    def look_up_all_one_to_one_dm(
        self, participant_id: str, option: DirectMessageOption | None = None
    ) -> DirectMessagesResponse:
        """Return Direct Message events of the one-to-one conversation with a participant.

        Events come in reverse chronological order.
        """
        return look_up_all_one_to_one_dm(self._transport, participant_id, option)

    def look_up_dm(
        self, dm_conversation_id: str, option: DirectMessageOption | None = None
    ) -> DirectMessagesResponse:
        """Return Direct Message events of a conversation, newest first."""
        return look_up_dm(self._transport, dm_conversation_id, option)

    def look_up_all_dm(
        self, option: DirectMessageOption | None = None
    ) -> DirectMessagesResponse:
        """Return Direct Message events of the authenticated user, sent and received.

        Events come in reverse chronological order and cover the last 30 days.
        """
        return look_up_all_dm(self._transport, option)