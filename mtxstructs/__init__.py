"""Matrix client-server errors, events, requests and responses as dataclasses with JSON conversion."""

__version__ = "0.1.0"

__all__ = [
    "account_data",
    "encrypted",
    "errors",
    "event_types",
    "media_info",
    "messages",
    "requests",
    "responses",
    "state",
]