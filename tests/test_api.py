from datetime import datetime, timedelta

from campuscare.app import main
from campuscare.services.chat import FALLBACK_MESSAGE


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "OK"


# ============ chat ============
def test_chat_crisis(client):
    res = client.post("/api/chat", json={"message": "I want to die", "userId": "u1"})
    assert res.status_code == 200
    body = res.json()
    assert body["sentiment"] == "crisis"
    assert body["crisisAlert"] is True
    assert body["response"]["priority"] == "emergency"
    assert "Crisis Lifeline: 988" in body["response"]["resources"]


def test_chat_positive(client):
    body = client.post("/api/chat", json={"message": "I feel happy and good today"}).json()
    assert body["sentiment"] == "positive"
    assert body["crisisAlert"] is False
    assert set(body["response"]) >= {"message", "resources", "priority"}


def test_chat_rejects_missing_or_empty_message(client):
    assert client.post("/api/chat", json={}).status_code == 422
    assert client.post("/api/chat", json={"message": ""}).status_code == 422
    assert client.post("/api/chat", json={"message": 42}).status_code == 422


def test_chat_history_is_recorded(client):
    client.post("/api/chat", json={"message": "I feel sad", "userId": "u2"})
    client.post("/api/chat", json={"message": "a bit better now", "userId": "u2"})
    client.post("/api/chat", json={"message": "hello", "userId": "other"})

    history = client.get("/api/chat/u2").json()
    assert [h["userMessage"] for h in history] == ["I feel sad", "a bit better now"]
    assert history[0]["sentiment"] == "negative"
    assert history[0]["priority"] == "medium"


def test_chat_detects_crisis_past_storage_limit(client):
    message = "I have been thinking a lot lately. " * 20 + "I want to die"
    assert len(message) > 500

    body = client.post("/api/chat", json={"message": message, "userId": "long"}).json()
    assert body["crisisAlert"] is True
    assert body["sentiment"] == "crisis"
    assert body["response"]["priority"] == "emergency"

    history = client.get("/api/chat/long").json()
    assert len(history[0]["userMessage"]) == 500
    assert history[0]["crisisDetected"] is True


def test_history_timestamps_carry_utc_offset(client):
    client.post("/api/chat", json={"message": "hello", "userId": "tz"})
    client.post("/api/mood", json={"userId": "tz", "intensity": 4})

    for item in client.get("/api/chat/tz").json() + client.get("/api/mood/tz").json():
        stamp = datetime.fromisoformat(item["timestamp"].replace("Z", "+00:00"))
        assert stamp.utcoffset() == timedelta(0)


def test_chat_failure_returns_fallback(client, monkeypatch):
    def boom(text):
        raise RuntimeError("analyzer exploded")

    monkeypatch.setattr(main.analyzer, "analyze", boom)
    res = client.post("/api/chat", json={"message": "hello"})
    assert res.status_code == 500
    assert res.json() == {"error": "Chat service unavailable", "message": FALLBACK_MESSAGE}


# ============ mood ============
def test_mood_roundtrip_and_insights(client):
    for intensity in (2, 2, 3, 7, 8, 9):
        res = client.post("/api/mood", json={"userId": "m1", "intensity": intensity})
        assert res.json()["success"] is True

    entries = client.get("/api/mood/m1").json()
    assert len(entries) == 6
    assert entries[0]["mood"] == "Sad"
    assert entries[0]["userId"] == "m1"

    insights = client.get("/api/mood/m1/insights").json()
    assert insights["trend"] == "improving"


def test_mood_insights_without_data(client):
    assert client.get("/api/mood/nobody/insights").json()["pattern"] == "insufficient_data"


def test_mood_rejects_out_of_range_intensity(client):
    assert client.post("/api/mood", json={"userId": "m1", "intensity": 11}).status_code == 422


# ============ games ============
def test_game_score_and_leaderboard(client):
    res = client.post("/api/game/score", json={
        "userId": "g1", "gameType": "bubble_pop", "score": 300, "duration": 120,
    })
    assert res.json()["credits"] == 6

    board = client.get("/api/game/leaderboard").json()
    assert board == [{"userId": "g1", "totalCredits": 6, "gamesPlayed": 1}]


def test_game_score_rejects_unknown_game(client):
    res = client.post("/api/game/score", json={
        "userId": "g1", "gameType": "chess", "score": 10, "duration": 10,
    })
    assert res.status_code == 422


# ============ safe spaces ============
def test_safe_spaces_all(client):
    assert len(client.get("/api/safe-spaces").json()) == 6


def test_safe_spaces_filters(client):
    professional = client.get("/api/safe-spaces", params={"type": "professional"}).json()
    assert {s["id"] for s in professional} == {1, 6}

    asl = client.get("/api/safe-spaces", params={"accessibility": "asl_interpreter"}).json()
    assert {s["id"] for s in asl} == {1, 4}


def test_safe_space_lookup(client):
    assert client.get("/api/safe-spaces/4").json()["emergency"] is True
    assert client.get("/api/safe-spaces/99").status_code == 404
