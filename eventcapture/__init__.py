"""Client for submitting analytics events to a PostHog-compatible collector."""

from .client import Client
from .config import CaptureSettings, get_settings, load_settings
from .errors import (
    ConfigError,
    EncodingError,
    EventCaptureError,
    InvalidEnvError,
    MissingEnvError,
    RejectedError,
    SecretFetchError,
    SendError,
    ServiceAccountKeyError,
    TransportError,
)
from .events import Event
from .logging import configure_logging
from .options import ApiOptions

__all__ = [
    "ApiOptions",
    "CaptureSettings",
    "Client",
    "ConfigError",
    "EncodingError",
    "Event",
    "EventCaptureError",
    "InvalidEnvError",
    "MissingEnvError",
    "RejectedError",
    "SecretFetchError",
    "SendError",
    "ServiceAccountKeyError",
    "TransportError",
    "configure_logging",
    "get_settings",
    "load_settings",
]
