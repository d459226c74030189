"""Request limits enforced before calling the API."""

from __future__ import annotations

from typing import Iterable

DISCOVER_SPACES_MAX_IDS = 100
FILTERED_STREAM_RULE_MAX_LENGTH = 512
SPACE_LOOKUP_MAX_IDS = 100
TWEET_LOOKUP_MAX_IDS = 100
SEARCH_TWEET_MAX_QUERY_LENGTH = 512
USER_LOOKUP_MAX_IDS = 100


def check_ids(api_name: str, ids: Iterable[str], maximum: int) -> str:
    """Validate a list of IDs and return them joined with commas.

    Raises ValueError when the list is empty or longer than ``maximum``.
    """
    values = [str(value) for value in ids]
    if not values:
        raise ValueError(f"{api_name}: ids parameter is required")
    if len(values) > maximum:
        raise ValueError(
            f"{api_name}: ids parameter must be less than or equal to {maximum}"
        )
    return ",".join(values)