from dataclasses import dataclass


@dataclass(frozen=True)
class FetchedPhoto:
    """Raw photo payload as returned by the remote store."""

    record_id: str
    data: bytes
    content_type: str
