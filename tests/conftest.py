import pytest

from api_docs_kit.config import ENV_OVERRIDES


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep settings from the developer's shell out of the tests."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
