import pytest

from mockcore import config
from mockcore.config import Configuration


@pytest.fixture(autouse=True)
def default_configuration(monkeypatch: pytest.MonkeyPatch) -> Configuration:
    """Run every test against default settings, whatever the environment holds."""
    defaults = Configuration()
    monkeypatch.setattr(config, "_current", defaults)
    return defaults
