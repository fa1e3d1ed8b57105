from fastapi.testclient import TestClient

from paxbot.app import app

client = TestClient(app)


def test_root_ok():
    r = client.get("/")
    assert r.status_code == 200


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert client.get("/healthz").json()["ok"] is True


def test_search_returns_pages():
    r = client.get("/search", params={"q": "dragons"})
    assert r.status_code == 200
    data = r.json()
    assert data["current_index"] == 0
    assert [p["title"] for p in data["pages"]] == ["Dragons (Category)", "Red Dragon (Dragon)", "Drakons"]


def test_chat_ask_and_navigate():
    r = client.post("/conversations/web-1/messages", json={"text": "?pax dragons"})
    assert r.status_code == 200
    msg = r.json()["message"]
    assert msg["total_pages"] == 3 and msg["current_index"] == 0
    assert msg["signals"][:2] == ["⬅️", "➡️"]

    url = f"/conversations/web-1/messages/{msg['message_id']}/signals"
    moved = client.post(url, json={"signal": "➡️"}).json()
    assert moved["current_index"] == 1
    assert moved["page"]["title"] == "Red Dragon (Dragon)"

    back = client.post(url, json={"signal": "⬅️"}).json()
    assert back["current_index"] == 0

    own = client.post(url, json={"signal": "➡️", "own": True}).json()
    assert own["current_index"] == 0


def test_chat_ignores_non_commands():
    r = client.post("/conversations/web-2/messages", json={"text": "hello there"})
    assert r.json() == {"handled": False}


def test_unknown_message_is_404():
    assert client.get("/conversations/web-3/messages/9999").status_code == 404
    assert client.post("/conversations/web-3/messages/9999/signals", json={"signal": "➡️"}).status_code == 404


def test_chat_reply_is_the_message_just_posted():
    first = client.post("/conversations/web-4/messages", json={"text": "?pax kali"}).json()["message"]
    client.post("/conversations/web-5/messages", json={"text": "!pax about"})
    about = client.post("/conversations/web-4/messages", json={"text": "!pax about"}).json()["message"]
    assert about["message_id"] > first["message_id"]
    assert about["content"].startswith("Yup, I'm paxbot")
    assert about["total_pages"] is None
    again = client.get(f"/conversations/web-4/messages/{first['message_id']}").json()
    assert again["page"]["title"] == "Kali Liada (Kali, Marz)"
