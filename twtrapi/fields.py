"""Expansion and exclusion values shared by request options."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Expansion(str, Enum):
    """Objects that can be expanded in a response payload."""

    # Tweet payloads
    AUTHOR_ID = "author_id"
    REFERENCED_TWEETS_ID = "referenced_tweets.id"
    EDIT_HISTORY_TWEET_IDS = "edit_history_tweet_ids"
    IN_REPLY_TO_USER_ID = "in_reply_to_user_id"
    ATTACHMENTS_MEDIA_KEYS = "attachments.media_keys"
    ATTACHMENTS_POLL_IDS = "attachments.poll_ids"
    GEO_PLACE_ID = "geo.place_id"
    ENTITIES_MENTIONS_USERNAME = "entities.mentions.username"
    REFERENCED_TWEETS_ID_AUTHOR_ID = "referenced_tweets.id.author_id"
    CONTEXT_ANNOTATIONS = "context_annotations"
    # User payloads
    PINNED_TWEET_ID = "pinned_tweet_id"
    # Direct Message event payloads
    SENDER_ID = "sender_id"
    PARTICIPANT_IDS = "participant_ids"
    # Space payloads
    INVITED_USER_IDS = "invited_user_ids"
    SPEAKER_IDS = "speaker_ids"
    CREATOR_ID = "creator_id"
    HOST_IDS = "host_ids"
    TOPIC_IDS = "topic_ids"
    # List payloads
    OWNER_ID = "owner_id"


class Exclude(str, Enum):
    """Kinds of Tweets that timeline requests can leave out."""

    RETWEETS = "retweets"
    REPLIES = "replies"


def _value(item: object) -> str:
    if isinstance(item, Enum):
        return str(item.value)
    return str(item)


def join_values(values: Iterable[object]) -> str:
    """Join enum members or plain strings into a comma-separated query value."""
    return ",".join(_value(item) for item in values)