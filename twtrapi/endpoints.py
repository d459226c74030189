"""Endpoint URLs of the Twitter v2 API."""

from __future__ import annotations

from string import Formatter
from typing import Any

GENERATE_APP_ONLY_BEARER_TOKEN_URL = "https://api.twitter.com/oauth2/token?grant_type=client_credentials"

# Tweets lookup
RETRIEVE_MULTIPLE_TWEETS_URL = "https://api.twitter.com/2/tweets?ids="
RETRIEVE_SINGLE_TWEET_URL = "https://api.twitter.com/2/tweets/{}"
# Manage Tweets
DELETE_TWEET_URL = "https://api.twitter.com/2/tweets/{}"
POST_TWEET_URL = "https://api.twitter.com/2/tweets"
# Timelines
USER_MENTION_TIMELINE_URL = "https://api.twitter.com/2/users/{}/mentions"
USER_TWEET_TIMELINE_URL = "https://api.twitter.com/2/users/{}/tweets"
# Search Tweets
SEARCH_ALL_TWEETS_URL = "https://api.twitter.com/2/tweets/search/all"
SEARCH_RECENT_TWEETS_URL = "https://api.twitter.com/2/tweets/search/recent"
# Tweet counts
COUNTS_ALL_TWEETS_URL = "https://api.twitter.com/2/tweets/counts/all"
COUNTS_RECENT_TWEETS_URL = "https://api.twitter.com/2/tweets/counts/recent"
# Filtered stream
CONNECT_TO_STREAM_URL = "https://api.twitter.com/2/tweets/search/stream"
RETRIEVE_STREAM_RULES_URL = "https://api.twitter.com/2/tweets/search/stream/rules"
ADD_OR_DELETE_RULES_URL = "https://api.twitter.com/2/tweets/search/stream/rules"
# Volume streams
VOLUME_STREAMS_URL = "https://api.twitter.com/2/tweets/sample/stream"
# Retweets
UNDO_RETWEET_URL = "https://api.twitter.com/2/users/{}/retweets/{}"
RETWEETS_LOOKUP_URL = "https://api.twitter.com/2/tweets/{}/retweeted_by"
POST_RETWEET_URL = "https://api.twitter.com/2/users/{}/retweets"
# Likes
USERS_LIKING_TWEET_URL = "https://api.twitter.com/2/tweets/{}/liking_users"
TWEETS_USER_LIKED_URL = "https://api.twitter.com/2/users/{}/liked_tweets"
POST_USERS_LIKING_TWEET_URL = "https://api.twitter.com/2/users/{}/likes"
UNDO_USERS_LIKING_TWEET_URL = "https://api.twitter.com/2/users/{}/likes/{}"
# Bookmarks
REMOVE_BOOKMARK_OF_TWEET_URL = "https://api.twitter.com/2/users/{}/bookmarks/{}"
LOOKUP_USER_BOOKMARKS_URL = "https://api.twitter.com/2/users/{}/bookmarks"
BOOKMARK_TWEET_URL = "https://api.twitter.com/2/users/{}/bookmarks"
# Hide replies
HIDE_REPLIES_URL = "https://api.twitter.com/2/tweets/{}/hidden"

# Users lookup
RETRIEVE_MULTIPLE_USERS_WITH_IDS_URL = "https://api.twitter.com/2/users?ids="
RETRIEVE_SINGLE_USER_WITH_ID_URL = "https://api.twitter.com/2/users/{}"
RETRIEVE_MULTIPLE_USERS_WITH_USER_NAMES_URL = "https://api.twitter.com/2/users/by?usernames="
RETRIEVE_SINGLE_USER_WITH_USER_NAME_URL = "https://api.twitter.com/2/users/by/username/{}"
ME_URL = "https://api.twitter.com/2/users/me"
# Follows
UNDO_FOLLOWING_URL = "https://api.twitter.com/2/users/{}/following/{}"
FOLLOWERS_URL = "https://api.twitter.com/2/users/{}/followers"
FOLLOWING_URL = "https://api.twitter.com/2/users/{}/following"
POST_FOLLOWING_URL = "https://api.twitter.com/2/users/{}/following"
# Blocks
BLOCKING_URL = "https://api.twitter.com/2/users/{}/blocking"
POST_BLOCKING_URL = "https://api.twitter.com/2/users/{}/blocking"
UNDO_BLOCKING_URL = "https://api.twitter.com/2/users/{}/blocking/{}"
# Mutes
MUTING_URL = "https://api.twitter.com/2/users/{}/muting"
POST_MUTING_URL = "https://api.twitter.com/2/users/{}/muting"
UNDO_MUTING_URL = "https://api.twitter.com/2/users/{}/muting/{}"

# Spaces lookup
SPACE_URL = "https://api.twitter.com/2/spaces/{}"
SPACES_URL = "https://api.twitter.com/2/spaces?ids="
USERS_PURCHASED_SPACE_TICKET_URL = "https://api.twitter.com/2/spaces/{}/buyers"
DISCOVER_SPACES_URL = "https://api.twitter.com/2/spaces/by/creator_ids?user_ids="
# Search Spaces
SEARCH_SPACES_URL = "https://api.twitter.com/2/spaces/search"

# List lookup
LOOK_UP_LIST_URL = "https://api.twitter.com/2/lists/{}"
LOOK_UP_ALL_LISTS_OWNED_URL = "https://api.twitter.com/2/users/{}/owned_lists"
# Manage Lists
DELETE_LIST_URL = "https://api.twitter.com/2/lists/{}"
UPDATE_META_DATA_FOR_LIST_URL = "https://api.twitter.com/2/lists/{}"
CREATE_NEW_LIST_URL = "https://api.twitter.com/2/lists"
# List Tweets lookup
LOOK_UP_LIST_TWEETS_URL = "https://api.twitter.com/2/lists/{}/tweets"
# List members
UNDO_LIST_MEMBERS_URL = "https://api.twitter.com/2/lists/{}/members/{}"
LIST_MEMBERS_URL = "https://api.twitter.com/2/lists/{}/members"
LISTS_SPECIFIED_USER_URL = "https://api.twitter.com/2/users/{}/list_memberships"
POST_LIST_MEMBERS_URL = "https://api.twitter.com/2/lists/{}/members"
# List follows
UNDO_LIST_FOLLOWS_URL = "https://api.twitter.com/2/users/{}/followed_lists/{}"
LIST_FOLLOWERS_URL = "https://api.twitter.com/2/lists/{}/followers"
ALL_LISTS_USER_FOLLOWS_URL = "https://api.twitter.com/2/users/{}/followed_lists"
POST_LIST_FOLLOWS_URL = "https://api.twitter.com/2/users/{}/followed_lists"
# Pinned Lists
UNDO_PINNED_LISTS_URL = "https://api.twitter.com/2/users/{}/pinned_lists/{}"
PINNED_LISTS_URL = "https://api.twitter.com/2/users/{}/pinned_lists"
POST_PINNED_LISTS_URL = "https://api.twitter.com/2/users/{}/pinned_lists"

# Batch compliance
COMPLIANCE_JOBS_URL = "https://api.twitter.com/2/compliance/jobs"
COMPLIANCE_JOB_URL = "https://api.twitter.com/2/compliance/jobs/{}"
CREATE_COMPLIANCE_JOB_URL = "https://api.twitter.com/2/compliance/jobs"

# Manage Direct Message
CREATE_ONE_TO_ONE_DM_URL = "https://api.twitter.com/2/dm_conversations/with/{}/messages"
CREATE_NEW_GROUP_DM_URL = "https://api.twitter.com/2/dm_conversations/{}/messages"
POST_DM_URL = "https://api.twitter.com/2/dm_conversations"

# Look up Direct Message
LOOK_UP_ALL_ONE_TO_ONE_DM_URL = "https://api.twitter.com/2/dm_conversations/with/{}/dm_events"
LOOK_UP_DM_URL = "https://api.twitter.com/2/dm_conversations/{}/dm_events"
LOOK_UP_ALL_DM_URL = "https://api.twitter.com/2/dm_events"


def format_endpoint(template: str, *args: Any) -> str:
    """Fill the placeholders of an endpoint template with path values.

    Raises ValueError when the number of values does not match the template.
    """
    slots = sum(1 for _, name, _, _ in Formatter().parse(template) if name is not None)
    if slots != len(args):
        raise ValueError(
            f"endpoint {template!r} takes {slots} path value(s), got {len(args)}"
        )
    return template.format(*(str(arg) for arg in args))