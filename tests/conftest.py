import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from eventcapture.config import get_settings

ENV_VARS = (
    "POSTHOG_API_KEY",
    "POSTHOG_HOST",
    "SERVICE_ACCOUNT",
    "GOOGLE_CLOUD_PROJECT",
    "POSTHOG_SECRET_NAME",
    "CAPTURE_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the developer's environment and any local .env file."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]
