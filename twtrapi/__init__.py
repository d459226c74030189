"""Bearer-token client for the Twitter v2 API: batch compliance jobs and direct message lookup."""

__version__ = "0.1.0"

__all__ = [
    "client",
    "compliance",
    "direct_messages",
    "endpoints",
    "errors",
    "fields",
    "limits",
    "transport",
]