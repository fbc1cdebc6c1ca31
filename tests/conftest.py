import pytest

from fotition_client.core.config import Settings
from tests.unit.fakes.transport import RecordingTransport


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, HOST="https://api.fotition.test/v1")


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(json={"ok": True})
