"""Exceptions raised while resolving credentials and sending events."""

from __future__ import annotations


class EventCaptureError(Exception):
    """Base error for the event capture client."""


class ConfigError(EventCaptureError):
    """Raised when API credentials cannot be resolved."""


class MissingEnvError(ConfigError):
    """Raised when a required environment variable is unset or empty."""

    def __init__(self, variable: str) -> None:
        super().__init__(f"Environment variable {variable} is not set")
        self.variable = variable


class InvalidEnvError(ConfigError):
    """Raised when an environment variable holds a value that cannot be parsed."""

    def __init__(self, variables: list[str], reason: str) -> None:
        super().__init__(f"Invalid environment configuration ({', '.join(variables)}): {reason}")
        self.variables = variables


class SecretFetchError(ConfigError):
    """Raised when Secret Manager authentication or retrieval fails."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Failed to fetch secret {name}: {reason}")
        self.name = name


class ServiceAccountKeyError(SecretFetchError):
    """Raised when the service-account key file cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        ConfigError.__init__(self, f"Cannot load service account key {path}: {reason}")
        self.name = None
        self.path = path


class SendError(EventCaptureError):
    """Base error for a failed `capture` call."""


class TransportError(SendError):
    """Raised when the request never got an HTTP response."""


class RejectedError(SendError):
    """Raised when the ingestion endpoint answers with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Ingestion endpoint rejected event: HTTP {status}: {body}")
        self.status = status
        self.body = body


class EncodingError(SendError):
    """Raised when an event cannot be serialized to JSON."""
