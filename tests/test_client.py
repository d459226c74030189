import json
from urllib.parse import parse_qs, urlsplit

import pytest
import requests
import responses

from twtrapi.client import Client
from twtrapi.compliance import (
    ComplianceFieldType,
    ComplianceJob,
    ComplianceJobResponse,
    ComplianceJobsOption,
    ComplianceJobsResponse,
    CreateComplianceJobOption,
    CreateComplianceJobResponse,
)
from twtrapi.direct_messages import (
    DirectMessage,
    DirectMessageOption,
    DirectMessagesResponse,
    DMEventField,
)
from twtrapi.errors import APIResponseError, HTTPError

JOBS_URL = "https://api.twitter.com/2/compliance/jobs"
ALL_DM_URL = "https://api.twitter.com/2/dm_events"

UPLOAD_1 = "https://storage.example.com/compliance/1421185651106480129/submission"
DOWNLOAD_1 = "https://storage.example.com/compliance/1421185651106480129/delivery"
UPLOAD_2 = "https://storage.example.com/compliance/1423095206576984067/submission"
DOWNLOAD_2 = "https://storage.example.com/compliance/1423095206576984067/delivery"
UPLOAD_3 = "https://storage.example.com/compliance/1423691444842209280/submission"
DOWNLOAD_3 = "https://storage.example.com/compliance/1423691444842209280/delivery"

FORBIDDEN_DETAIL = (
    "Authenticating with OAuth 2.0 Application-Only is forbidden for this endpoint.  "
    "Supported authentication types are [OAuth 1.0a User Context, OAuth 2.0 User Context]."
)
FORBIDDEN_BODY = {
    "errors": [
        {
            "title": "Unsupported Authentication",
            "detail": FORBIDDEN_DETAIL,
            "type": "https://api.twitter.com/2/problems/unsupported-authentication",
            "status": 403,
        }
    ]
}
FORBIDDEN_ERROR = APIResponseError(
    title="Unsupported Authentication",
    detail=FORBIDDEN_DETAIL,
    type="https://api.twitter.com/2/problems/unsupported-authentication",
    status=403,
)

PLAIN_DM_BODY = {
    "data": [
        {
            "event_type": "MessageCreate",
            "id": "1346889436626259968",
            "text": "Hello just you...",
        }
    ]
}
PLAIN_DM = DirectMessage(
    event_type="MessageCreate", id="1346889436626259968", text="Hello just you..."
)

OPTION_DM_BODY = {
    "data": [
        {
            "id": "1585321444547837956",
            "text": "Another photo https://t.co/J5KotyeIyd",
            "event_type": "MessageCreate",
            "dm_conversation_id": "1585094756761149440",
            "created_at": "2022-10-26T17:24:21.000Z",
            "sender_id": "906948460078698496",
        }
    ]
}
OPTION_DM = DirectMessage(
    id="1585321444547837956",
    text="Another photo https://t.co/J5KotyeIyd",
    event_type="MessageCreate",
    dm_conversation_id="1585094756761149440",
    created_at="2022-10-26T17:24:21.000Z",
    sender_id="906948460078698496",
)


def dm_option():
    return DirectMessageOption(
        dm_event_fields=[
            DMEventField.DM_CONVERSATION_ID,
            DMEventField.CREATED_AT,
            DMEventField.SENDER_ID,
        ]
    )


def make_client():
    return Client("token", session=requests.Session())


def test_bearer_token_and_consumer_settings():
    client = Client("token", consumer_key="placeholder", consumer_secret="secret")
    assert client.bearer_token() == "token"
    assert client.consumer_key == "placeholder"
    assert client.consumer_secret == "secret"


def test_compliance_jobs_ok():
    body = {
        "data": [
            {
                "type": "tweets",
                "id": "1421185651106480129",
                "resumable": False,
                "upload_url": UPLOAD_1,
                "upload_expires_at": "2021-07-30T19:22:18.000Z",
                "download_expires_at": "2021-08-06T19:07:18.000Z",
                "download_url": DOWNLOAD_1,
                "created_at": "2021-07-30T19:07:18.000Z",
                "status": "complete",
            },
            {
                "type": "tweets",
                "id": "1423095206576984067",
                "resumable": False,
                "upload_url": UPLOAD_2,
                "upload_expires_at": "2021-08-05T01:50:11.000Z",
                "download_expires_at": "2021-08-12T01:35:11.000Z",
                "download_url": DOWNLOAD_2,
                "created_at": "2021-08-05T01:35:11.000Z",
                "status": "expired",
            },
        ]
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, JOBS_URL, json=body, status=200)
        got = make_client().compliance_jobs(
            ComplianceJobsOption(type=ComplianceFieldType.TWEETS)
        )
        sent = rsps.calls[0].request
    assert got == ComplianceJobsResponse(
        data=[
            ComplianceJob(
                type="tweets",
                id="1421185651106480129",
                resumable=False,
                upload_url=UPLOAD_1,
                upload_expires_at="2021-07-30T19:22:18.000Z",
                download_expires_at="2021-08-06T19:07:18.000Z",
                download_url=DOWNLOAD_1,
                created_at="2021-07-30T19:07:18.000Z",
                status="complete",
            ),
            ComplianceJob(
                type="tweets",
                id="1423095206576984067",
                resumable=False,
                upload_url=UPLOAD_2,
                upload_expires_at="2021-08-05T01:50:11.000Z",
                download_expires_at="2021-08-12T01:35:11.000Z",
                download_url=DOWNLOAD_2,
                created_at="2021-08-05T01:35:11.000Z",
                status="expired",
            ),
        ]
    )
    assert parse_qs(urlsplit(sent.url).query) == {"type": ["tweets"]}
    assert sent.headers["Authorization"] == "Bearer token"


def test_compliance_jobs_empty():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, JOBS_URL, json={}, status=200)
        got = make_client().compliance_jobs(
            ComplianceJobsOption(type=ComplianceFieldType.TWEETS)
        )
    assert got == ComplianceJobsResponse()


def test_compliance_jobs_requires_type():
    with responses.RequestsMock():
        with pytest.raises(ValueError, match="type parameter is required"):
            make_client().compliance_jobs(ComplianceJobsOption())


def test_compliance_job_ok():
    body = {
        "data": {
            "download_expires_at": "2021-08-12T01:35:11.000Z",
            "download_url": DOWNLOAD_2,
            "resumable": False,
            "upload_expires_at": "2021-08-05T01:50:11.000Z",
            "created_at": "2021-08-05T01:35:11.000Z",
            "upload_url": UPLOAD_2,
            "id": "1423095206576984067",
            "type": "tweets",
            "status": "expired",
        }
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{JOBS_URL}/1423095206576984067", json=body, status=200)
        got = make_client().compliance_job(1423095206576984067)
    assert got == ComplianceJobResponse(
        data=ComplianceJob(
            download_expires_at="2021-08-12T01:35:11.000Z",
            download_url=DOWNLOAD_2,
            resumable=False,
            upload_expires_at="2021-08-05T01:50:11.000Z",
            created_at="2021-08-05T01:35:11.000Z",
            upload_url=UPLOAD_2,
            id="1423095206576984067",
            type="tweets",
            status="expired",
        )
    )


def test_compliance_job_not_found_in_body():
    body = {
        "errors": [
            {
                "value": "111111111111",
                "detail": "Could not find compliance_job with id: [111111111111].",
                "title": "Not Found Error",
                "resource_type": "compliance_job",
                "parameter": "id",
                "resource_id": "111111111111",
                "type": "https://api.twitter.com/2/problems/resource-not-found",
            }
        ]
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, f"{JOBS_URL}/111111111111", json=body, status=200)
        got = make_client().compliance_job(111111111111)
    assert got == ComplianceJobResponse(
        errors=[
            APIResponseError(
                value="111111111111",
                detail="Could not find compliance_job with id: [111111111111].",
                title="Not Found Error",
                resource_type="compliance_job",
                parameter="id",
                resource_id="111111111111",
                type="https://api.twitter.com/2/problems/resource-not-found",
            )
        ]
    )


def test_create_compliance_job_ok():
    body = {
        "data": {
            "resumable": False,
            "type": "tweets",
            "download_expires_at": "2021-08-13T17:04:26.000Z",
            "created_at": "2021-08-06T17:04:26.000Z",
            "upload_url": UPLOAD_3,
            "download_url": DOWNLOAD_3,
            "id": "1423691444842209280",
            "status": "created",
            "upload_expires_at": "2021-08-06T17:19:26.000Z",
        }
    }
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, JOBS_URL, json=body, status=200)
        got = make_client().create_compliance_job(
            CreateComplianceJobOption(type=ComplianceFieldType.TWEETS)
        )
        sent = rsps.calls[0].request
    assert got == CreateComplianceJobResponse(
        data=ComplianceJob(
            resumable=False,
            type="tweets",
            download_expires_at="2021-08-13T17:04:26.000Z",
            created_at="2021-08-06T17:04:26.000Z",
            upload_url=UPLOAD_3,
            download_url=DOWNLOAD_3,
            id="1423691444842209280",
            status="created",
            upload_expires_at="2021-08-06T17:19:26.000Z",
        )
    )
    assert json.loads(sent.body) == {"type": "tweets"}


def test_create_compliance_job_requires_type():
    with responses.RequestsMock():
        with pytest.raises(ValueError, match="type parameter is required"):
            make_client().create_compliance_job()


@pytest.mark.parametrize(
    "call, url",
    [
        (
            lambda c, o: c.look_up_all_one_to_one_dm("1346889436626259968", o),
            "https://api.twitter.com/2/dm_conversations/with/1346889436626259968/dm_events",
        ),
        (
            lambda c, o: c.look_up_dm("1346889436626259968", o),
            "https://api.twitter.com/2/dm_conversations/1346889436626259968/dm_events",
        ),
        (lambda c, o: c.look_up_all_dm(o), ALL_DM_URL),
    ],
)
def test_dm_lookups_ok(call, url):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, json=PLAIN_DM_BODY, status=200)
        got = call(make_client(), None)
    assert got == DirectMessagesResponse(data=[PLAIN_DM])


@pytest.mark.parametrize(
    "call, url",
    [
        (
            lambda c, o: c.look_up_all_one_to_one_dm("1585321444547837956", o),
            "https://api.twitter.com/2/dm_conversations/with/1585321444547837956/dm_events",
        ),
        (
            lambda c, o: c.look_up_dm("1346889436626259968", o),
            "https://api.twitter.com/2/dm_conversations/1346889436626259968/dm_events",
        ),
        (lambda c, o: c.look_up_all_dm(o), ALL_DM_URL),
    ],
)
def test_dm_lookups_with_option(call, url):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, json=OPTION_DM_BODY, status=200)
        got = call(make_client(), dm_option())
        sent = rsps.calls[0].request
    assert got == DirectMessagesResponse(data=[OPTION_DM])
    assert parse_qs(urlsplit(sent.url).query) == {
        "dm_event.fields": ["dm_conversation_id,created_at,sender_id"]
    }


@pytest.mark.parametrize(
    "call, url",
    [
        (
            lambda c: c.look_up_all_one_to_one_dm("2244994945"),
            "https://api.twitter.com/2/dm_conversations/with/2244994945/dm_events",
        ),
        (
            lambda c: c.look_up_dm("1346889436626259968"),
            "https://api.twitter.com/2/dm_conversations/1346889436626259968/dm_events",
        ),
        (lambda c: c.look_up_all_dm(), ALL_DM_URL),
    ],
)
def test_dm_lookups_forbidden(call, url):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, url, json=FORBIDDEN_BODY, status=403)
        with pytest.raises(HTTPError) as info:
            call(make_client())
    assert info.value.response == DirectMessagesResponse(errors=[FORBIDDEN_ERROR])
    assert info.value.status.startswith("403")


def test_dm_lookup_requires_ids():
    client = make_client()
    with pytest.raises(ValueError, match="participant id parameter is required"):
        client.look_up_all_one_to_one_dm("")
    with pytest.raises(ValueError, match="dm conversation id parameter is required"):
        client.look_up_dm("")


def test_context_manager_returns_client():
    with Client("token") as client:
        assert client.bearer_token() == "token"