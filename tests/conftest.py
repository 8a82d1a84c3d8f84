import pytest
from loguru import logger

from app import create_app
from config import Settings


@pytest.fixture
def settings():
    return Settings(PORT="8080", NODE_ENV="test", _env_file=None)


@pytest.fixture
def make_client(settings):
    def _make_client(**services):
        app = create_app(settings, **services)
        app.testing = True
        return app.test_client()

    return _make_client


@pytest.fixture
def client(make_client):
    return make_client()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with none of the service variables set."""
    for name in ("PORT", "NODE_ENV", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
