from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Event:
    """A single analytics event waiting to be captured."""

    name: str
    distinct_id: str
    properties: dict[str, str] = field(default_factory=dict)
    timestamp: datetime | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Event name must not be empty")
        if not self.distinct_id:
            raise ValueError("Event distinct_id must not be empty")

    def insert_prop(self, key: str, value: str) -> None:
        self.properties[key] = value

    def insert_prop_many(self, pairs: Iterable[tuple[str, str]] | Mapping[str, str]) -> None:
        """Insert properties in order; on duplicate keys the last pair wins."""
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        for key, value in pairs:
            self.properties[key] = value

    def set_timestamp(self, value: datetime) -> None:
        self.timestamp = value

    def to_payload(self, api_key: str) -> dict[str, Any]:
        """Build the JSON body expected by the capture endpoint.

        The timestamp is left out when unset so that the collector assigns
        ingestion time.
        """
        payload: dict[str, Any] = {
            "api_key": api_key,
            "event": self.name,
            "distinct_id": self.distinct_id,
            "properties": dict(self.properties),
        }
        if self.timestamp is not None:
            payload["timestamp"] = self.timestamp.isoformat()
        return payload
