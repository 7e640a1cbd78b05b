from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from eventcapture.errors import InvalidEnvError

DEFAULT_HOST = "https://app.posthog.com/"
DEFAULT_SECRET_NAME = "posthog-api-key"


class CaptureSettings(BaseSettings):
    """Configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    posthog_api_key: str | None = Field(default=None, alias="POSTHOG_API_KEY")
    posthog_host: str = Field(default=DEFAULT_HOST, alias="POSTHOG_HOST")
    capture_timeout: float = Field(default=8.0, alias="CAPTURE_TIMEOUT")

    # Path to a service-account JSON key used for Secret Manager
    service_account: str | None = Field(default=None, alias="SERVICE_ACCOUNT")
    google_cloud_project: str | None = Field(default=None, alias="GOOGLE_CLOUD_PROJECT")
    posthog_secret_name: str = Field(default=DEFAULT_SECRET_NAME, alias="POSTHOG_SECRET_NAME")


def load_settings() -> CaptureSettings:
    """Read settings from the environment, raising `InvalidEnvError` on bad values."""
    try:
        return CaptureSettings()
    except ValidationError as exc:
        variables = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise InvalidEnvError(variables, str(exc)) from exc


@lru_cache(maxsize=1)
def get_settings() -> CaptureSettings:
    return load_settings()
