import pytest
from fastapi.testclient import TestClient

from chat_api.main import create_app


class FakeChatClient:
    def __init__(self, reply="Hi there", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    # Keep a developer's local .env out of the tests.
    monkeypatch.setattr("chat_api.config.load_dotenv", lambda *a, **kw: False)


@pytest.fixture
def fake_client():
    return FakeChatClient()


@pytest.fixture
def client(fake_client):
    app = create_app(chat_client=fake_client)
    # Surface unhandled handler errors as HTTP 500, the way the server does.
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
