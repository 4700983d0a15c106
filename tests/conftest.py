import pytest

from contentblock.config import BlockerSettings, get_settings, set_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Give every test fresh settings that ignore the caller's environment."""
    original_settings = get_settings()
    monkeypatch.delenv("RULES_RULES_FILE", raising=False)
    set_settings(BlockerSettings())

    yield

    set_settings(original_settings)
