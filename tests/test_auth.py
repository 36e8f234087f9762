import pytest
from starlette.websockets import WebSocketDisconnect

from campuscare.app import main
from campuscare.auth.auth import create_access_token, decode_user_id


def register(client, username="alex", password="secret123"):
    return client.post("/auth/register", json={
        "username": username, "password": password, "email": f"{username}@campus.edu",
    })


def login(client, username="alex", password="secret123"):
    return client.post("/auth/login", json={"username": username, "password": password})


def test_register_login_me(client):
    res = register(client)
    assert res.status_code == 200
    user = res.json()
    assert user["username"] == "alex"
    assert user["credits"] == 0
    assert "password_hash" not in user

    token = login(client).json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == user["id"]


def test_duplicate_username(client):
    register(client)
    assert register(client).status_code == 400


def test_bad_password(client):
    register(client)
    assert login(client, password="wrong-password").status_code == 401


def test_me_requires_valid_token(client):
    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer junk"}).status_code == 401


def test_decode_user_id():
    assert decode_user_id(create_access_token({"sub": "abc"})) == "abc"
    assert decode_user_id("not-a-token") is None


def test_game_credits_accumulate_on_user(client):
    user = register(client).json()
    client.post("/api/game/score", json={
        "userId": user["id"], "gameType": "mindful_garden", "score": 200, "duration": 60,
    })
    token = login(client).json()["access_token"]
    me = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"}).json()
    assert me["credits"] == 2


# ============ WebSocket ============
def test_ws_chat(client):
    user = register(client).json()
    token = login(client).json()["access_token"]

    with client.websocket_connect(f"/ws/chat?token={token}") as ws:
        ws.send_text('{"message": "I feel sad and bad"}')
        ack = ws.receive_json()
        assert ack["type"] == "ack"
        reply = ws.receive_json()
        assert reply["type"] == "reply"
        assert reply["job_id"] == ack["job_id"]
        assert reply["sentiment"] == "negative"
        assert reply["response"]["priority"] == "medium"

        ws.send_text('{"message": ""}')
        assert ws.receive_json()["type"] == "error"

    history = client.get(f"/api/chat/{user['id']}").json()
    assert len(history) == 1


def test_ws_rejects_bad_token(client):
    with pytest.raises(WebSocketDisconnect):
        with client.websocket_connect("/ws/chat?token=junk") as ws:
            ws.receive_json()


def test_ws_recovers_after_pipeline_failure(client, monkeypatch):
    register(client)
    token = login(client).json()["access_token"]
    real_analyze = main.analyzer.analyze
    calls = []

    def flaky(text):
        calls.append(text)
        if len(calls) == 1:
            raise RuntimeError("analyzer exploded")
        return real_analyze(text)

    monkeypatch.setattr(main.analyzer, "analyze", flaky)

    with client.websocket_connect(f"/ws/chat?token={token}") as ws:
        ws.send_text('{"message": "first"}')
        assert ws.receive_json()["type"] == "ack"
        assert ws.receive_json()["type"] == "error"

        ws.send_text('{"message": "I want to die"}')
        assert ws.receive_json()["type"] == "ack"
        reply = ws.receive_json()
        assert reply["type"] == "reply"
        assert reply["crisisAlert"] is True
