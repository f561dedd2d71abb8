import pytest
from fastapi.testclient import TestClient

import campus_copilot.api.chat as chat_api
import campus_copilot.api.conversation as conversation_api
import campus_copilot.api.state as state_api
from campus_copilot.main import app
from campus_copilot.prompts.responses import variants
from tests.conftest import build_flow


@pytest.fixture
def client(monkeypatch, campus_data):
    flow = build_flow(campus_data)
    for module in (chat_api, conversation_api, state_api):
        monkeypatch.setattr(module, "flow_controller", flow)
    return TestClient(app)


def _chat(client, message, **extra):
    body = {"principal_id": "stu-1", "role": "student", "degree": "IT", "message": message}
    body.update(extra)
    return client.post("/chat", json=body)


def test_root_and_health(client):
    assert client.get("/health").json() == {"status": "ok"}
    assert client.get("/").json()["docs"] == "/docs"


def test_chat_returns_serialized_reply(client):
    r = _chat(client, "hi")
    assert r.status_code == 200
    data = r.json()
    assert data["principal_id"] == "stu-1"
    assert data["kind"] == "text"
    assert data["intent"] == "greeting"
    assert data["language"] == "en"
    assert data["text"] in variants("greeting", "en")


def test_chat_sentinel_kinds(client):
    data = _chat(client, "where is the library").json()
    assert data["kind"] == "location_redirect"
    assert data["text"] == "LOCATION_REDIRECT:Library:Library"

    data = _chat(client, "food").json()
    assert data["kind"] == "canteen_table"
    assert data["text"] == "SHOW_CANTEEN_TABLE"


def test_language_hint_is_honoured(client):
    data = _chat(client, "hi", language="si").json()
    assert data["language"] == "si"
    assert data["text"] in variants("greeting", "si")


def test_blank_message_is_a_bad_request(client):
    assert _chat(client, "   ").status_code == 400


def test_invalid_payload_is_rejected(client):
    assert client.post("/chat", json={"message": "hi"}).status_code == 422
    assert _chat(client, "hi", role="visitor").status_code == 422
    assert _chat(client, "hi", degree="Medicine").status_code == 422


def test_conversation_history_and_clear(client):
    _chat(client, "hi")
    _chat(client, "food")

    messages = client.get("/conversation/stu-1").json()["messages"]
    assert [m["is_user"] for m in messages] == [True, False, True, False]
    assert messages[3]["text"] == "SHOW_CANTEEN_TABLE"

    assert client.delete("/conversation/stu-1").json() == {"principal_id": "stu-1", "cleared": True}
    assert client.get("/conversation/stu-1").json()["messages"] == []
    assert client.get("/state/stu-1").json()["canteen_step"] == "idle"


def test_state_snapshot(client):
    _chat(client, "food")
    _chat(client, "Main Canteen")
    snapshot = client.get("/state/stu-1").json()
    assert snapshot["canteen_step"] == "awaiting_meal"
    assert snapshot["canteen"] == "Main Canteen"
    assert snapshot["turn_count"] == 2
    assert snapshot["last_intent"] == "continue_canteen_step1"
    assert snapshot["pending_game"] is None
