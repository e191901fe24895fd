from __future__ import annotations

import pytest

SYNC_ENV_VARS = (
    "CATALOG_SYNC_BATCH_SIZE",
    "CATALOG_SYNC_PARALLELISM",
    "CATALOG_SYNC_ENSURE_CHANNELS",
)
PLATFORM_ENV_VARS = ("CATALOG_PROJECT_KEY", "CATALOG_API_URL", "CATALOG_API_TOKEN")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell and .env out of configuration tests."""

    for name in (*SYNC_ENV_VARS, *PLATFORM_ENV_VARS):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def platform_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    values = {
        "CATALOG_PROJECT_KEY": "demo-shop",
        "CATALOG_API_URL": "https://api.example.test/",
        "CATALOG_API_TOKEN": "secret-token",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    return values
