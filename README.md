# twtrapi

A small, synchronous client for the Twitter v2 API. It authorises every
request with an OAuth 2.0 bearer token and covers two groups of endpoints:
batch compliance jobs and direct message lookup. Replies come back as plain
dataclasses.

## Installation

```
pip install twtrapi
```

## Usage

```python
from twtrapi.client import Client
from twtrapi.compliance import (
    ComplianceFieldType,
    ComplianceJobsOption,
    CreateComplianceJobOption,
)
from twtrapi.direct_messages import DMEventField, DirectMessageOption
from twtrapi.errors import HTTPError

with Client("token") as client:
    # Batch compliance
    jobs = client.compliance_jobs(ComplianceJobsOption(type=ComplianceFieldType.TWEETS))
    for job in jobs.data:
        print(job.id, job.status)

    job = client.compliance_job(1423095206576984067)
    if job.data is not None:
        print(job.data.download_url)

    created = client.create_compliance_job(
        CreateComplianceJobOption(type=ComplianceFieldType.USERS, name="nightly")
    )
    if created.data is not None:
        print(created.data.upload_url)

    # Direct messages
    option = DirectMessageOption(
        dm_event_fields=[DMEventField.CREATED_AT, DMEventField.SENDER_ID],
        max_results=50,
    )
    try:
        events = client.look_up_all_dm(option)
        for message in events.data:
            print(message.created_at, message.sender_id, message.text)
    except HTTPError as exc:
        # The decoded body, with any API error records, stays on the exception.
        print(exc, exc.response.errors)
```

`Client.look_up_dm(conversation_id, option)` and
`Client.look_up_all_one_to_one_dm(participant_id, option)` work the same way
as `look_up_all_dm` and return the same `DirectMessagesResponse`.

To use your own `requests.Session`, for example to set proxies or retries,
pass `session=` to `Client`. A session passed in is left open by
`Client.close()`; one the client created itself is closed.

## Modules

- `twtrapi.client`: `Client`, the entry point described above.
- `twtrapi.compliance`: compliance job models (`ComplianceJob`,
  `ComplianceJobsResponse`, `ComplianceJobResponse`,
  `CreateComplianceJobResponse`), options (`ComplianceJobsOption`,
  `CreateComplianceJobOption`), the enums `ComplianceFieldType` and
  `ComplianceFieldStatus`, and the functions `compliance_jobs`,
  `compliance_job` and `create_compliance_job`.
- `twtrapi.direct_messages`: `DirectMessage`, `DirectMessageAttachment`,
  `DirectMessageMeta`, `DirectMessagesResponse`, `DirectMessageOption`, the
  enums `DMEventField` and `EventTypes`, and the functions
  `look_up_all_one_to_one_dm`, `look_up_dm` and `look_up_all_dm`.
- `twtrapi.fields`: the `Expansion` and `Exclude` enums and `join_values`,
  which joins enum members or strings into a comma-separated query value.
- `twtrapi.errors`: `HTTPError`, `ResponseDecodeError`, the error records
  `APIResponseError` and `Parameter`, and `parse_errors`.
- `twtrapi.transport`: `Transport`, which sends authorised requests and
  decodes JSON replies.
- `twtrapi.endpoints`: the API endpoint URLs and `format_endpoint`, which
  fills a URL template's placeholders and raises `ValueError` when the number
  of values does not match.
- `twtrapi.limits`: request limits and `check_ids`, which joins a list of IDs
  with commas and raises `ValueError` when it is empty or too long.

## Errors

- A missing required argument raises `ValueError` before any request is
  sent: a compliance job listing or creation without `type`, or a direct
  message lookup with an empty participant or conversation ID.
- A reply body that is not a JSON object raises `ResponseDecodeError`.
- Any status other than 200 raises `HTTPError`. Its message is
  `"<api name>: <status> <url>"`, and its `response` attribute holds the
  decoded reply.

## What it does not do

The client only calls the compliance and direct message lookup endpoints.
It does not look up, post or delete Tweets, search or count Tweets, read
timelines, connect to filtered or sampled streams, manage likes, retweets,
bookmarks, follows, blocks or mutes, look up users, Spaces or Lists, send
direct messages, or generate an app-only bearer token. The consumer key and
secret given to `Client` are stored but not used. `twtrapi.endpoints` lists
URLs for those endpoints, but nothing in the package calls them.

## Running the tests

```
pip install -e ".[test]"
pytest
```