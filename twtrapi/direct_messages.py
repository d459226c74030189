"""Direct Message events: models, query options and lookup calls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Mapping

from .endpoints import (
    LOOK_UP_ALL_DM_URL,
    LOOK_UP_ALL_ONE_TO_ONE_DM_URL,
    LOOK_UP_DM_URL,
    format_endpoint,
)
from .errors import APIResponseError, parse_errors
from .fields import join_values
from .transport import Transport


class DMEventField(str, Enum):
    """Fields of a Direct Message event that can be requested."""

    ID = "id"
    TEXT = "text"
    EVENT_TYPE = "event_type"
    CREATED_AT = "created_at"
    DM_CONVERSATION_ID = "dm_conversation_id"
    SENDER_ID = "sender_id"
    PARTICIPANT_IDS = "participant_ids"
    REFERENCED_TWEETS = "referenced_tweets"
    ATTACHMENTS = "attachments"


class EventTypes(str, Enum):
    """Types of Direct Message events."""

    MESSAGE_CREATE = "MessageCreate"
    PARTICIPANTS_JOIN = "ParticipantsJoin"
    PARTICIPANTS_LEAVE = "ParticipantsLeave"


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return "" if value is None else str(value)


@dataclass
class DirectMessageAttachment:
    """A media attachment of a Direct Message."""

    media_id: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageAttachment":
        data = data or {}
        return cls(media_id=data.get("media_id") or "")


@dataclass
class DirectMessage:
    """A single Direct Message event."""

    attachments: list[DirectMessageAttachment] = field(default_factory=list)
    created_at: str = ""
    dm_conversation_id: str = ""
    event_type: str = ""
    id: str = ""
    sender_id: str = ""
    text: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessage":
        data = data or {}
        return cls(
            attachments=[
                DirectMessageAttachment.from_dict(item) for item in data.get("attachments") or ()
            ],
            created_at=data.get("created_at") or "",
            dm_conversation_id=data.get("dm_conversation_id") or "",
            event_type=data.get("event_type") or "",
            id=data.get("id") or "",
            sender_id=data.get("sender_id") or "",
            text=data.get("text") or "",
        )


@dataclass
class DirectMessageMeta:
    """Paging information of a Direct Message listing."""

    result_count: int = 0
    previous_token: str = ""
    next_token: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessageMeta":
        data = data or {}
        return cls(
            result_count=int(data.get("result_count") or 0),
            previous_token=data.get("previous_token") or "",
            next_token=data.get("next_token") or "",
        )


@dataclass
class DirectMessagesResponse:
    """Reply of the Direct Message lookup endpoints."""

    data: list[DirectMessage] = field(default_factory=list)
    errors: list[APIResponseError] = field(default_factory=list)
    meta: DirectMessageMeta | None = None
    title: str = ""
    detail: str = ""
    type: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> "DirectMessagesResponse":
        data = data or {}
        meta = data.get("meta")
        return cls(
            data=[DirectMessage.from_dict(item) for item in data.get("data") or ()],
            errors=parse_errors(data),
            meta=DirectMessageMeta.from_dict(meta) if meta is not None else None,
            title=data.get("title") or "",
            detail=data.get("detail") or "",
            type=data.get("type") or "",
        )


@dataclass
class DirectMessageOption:
    """Query options shared by the Direct Message lookup endpoints."""

    dm_event_fields: Iterable[DMEventField | str] = ()
    event_types: EventTypes | str = ""
    expansions: Iterable[Any] = ()
    max_results: int = 0
    media_fields: Iterable[Any] = ()
    pagination_token: str = ""
    tweet_fields: Iterable[Any] = ()
    user_fields: Iterable[Any] = ()

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        for key, values in (
            ("dm_event.fields", self.dm_event_fields),
            ("event_types", None),
            ("expansions", self.expansions),
            ("max_results", None),
            ("media.fields", self.media_fields),
            ("pagination_token", None),
            ("tweet.fields", self.tweet_fields),
            ("user.fields", self.user_fields),
        ):
            if key == "event_types":
                if self.event_types:
                    params[key] = _text(self.event_types)
            elif key == "max_results":
                if self.max_results > 0:
                    params[key] = str(self.max_results)
            elif key == "pagination_token":
                if self.pagination_token:
                    params[key] = self.pagination_token
            else:
                joined = join_values(values or ())
                if joined:
                    params[key] = joined
        return params


def _look_up(
    transport: Transport, api_name: str, url: str, option: DirectMessageOption | None
) -> DirectMessagesResponse:
    params = (option or DirectMessageOption()).to_params()
    reply = transport.send("GET", url, params=params or None)
    result = DirectMessagesResponse.from_dict(reply.data)
    reply.raise_for_status(api_name, result)
    return result


def look_up_all_one_to_one_dm(
    transport: Transport, participant_id: str, option: DirectMessageOption | None = None
) -> DirectMessagesResponse:
    """List Direct Message events of the one-to-one conversation with a participant."""
    if not participant_id:
        raise ValueError("lookup all one to one DM: participant id parameter is required")
    url = format_endpoint(LOOK_UP_ALL_ONE_TO_ONE_DM_URL, participant_id)
    return _look_up(transport, "lookup all one to one DM", url, option)


def look_up_dm(
    transport: Transport, dm_conversation_id: str, option: DirectMessageOption | None = None
) -> DirectMessagesResponse:
    """List Direct Message events of a conversation."""
    if not dm_conversation_id:
        raise ValueError("lookup DM: dm conversation id parameter is required")
    url = format_endpoint(LOOK_UP_DM_URL, dm_conversation_id)
    return _look_up(transport, "lookup DM", url, option)


def look_up_all_dm(
    transport: Transport, option: DirectMessageOption | None = None
) -> DirectMessagesResponse:
    """List Direct Message events of the authenticated user, sent and received."""
    return _look_up(transport, "lookup all DM", LOOK_UP_ALL_DM_URL, option)