"""
Tests for the HTTP layer: /chat, /execute, /records, /capabilities, /health.

Uses Flask's test client with the service fixture injected through
app.config, so no server has to be running.
"""

import pytest

from server import app
from handlers import FUNCTION_HANDLERS

FARMER = {
    "id": "F1001",
    "name": "Ravi Kumar",
    "state": "Tamil Nadu",
    "uzhavarPin": "UZP-100100",
}


@pytest.fixture
def client(service):
    app.config["TESTING"] = True
    app.config["CHATBOT_SERVICE"] = service
    with app.test_client() as c:
        yield c
    app.config.pop("CHATBOT_SERVICE", None)


class TestChatEndpoint:

    def test_function_call(self, client):
        resp = client.post("/chat", json={
            "message": "pay 500 rupees for seeds", "role": "farmer", "user": FARMER,
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["type"] == "function_call"
        assert data["action"] == "create_payment"
        assert data["params"] == {"amount_inr": 500, "purpose": "seed_purchase"}
        assert data["confidence"] == pytest.approx(0.9)

    def test_message_reply(self, client):
        resp = client.post("/chat", json={"message": "hello, how are you", "role": "consumer"})
        data = resp.get_json()
        assert data["type"] == "message"
        assert "action" not in data
        assert data["content"].startswith("I understand you're asking about")

    def test_non_string_crops_in_profile(self, client):
        resp = client.post("/chat", json={
            "message": "how are my crops doing",
            "role": "farmer",
            "user": {"id": "F1", "crops": [1, None, "Rice"]},
        })
        assert resp.status_code == 200
        assert "you're growing: 1, Rice" in resp.get_json()["content"]

    def test_history_is_used(self, client):
        resp = client.post("/chat", json={
            "message": "cancel my order",
            "role": "consumer",
            "history": [
                {"role": "user", "content": "my order ORD88 is late"},
                {"role": "assistant"},
                "garbage",
            ],
        })
        assert resp.get_json()["params"] == {"order_id": "ORD88"}

    @pytest.mark.parametrize("body", [{"message": ""}, {"message": "   "}, {"role": "farmer"}])
    def test_empty_message(self, client, body):
        resp = client.post("/chat", json=body)
        assert resp.status_code == 400
        assert resp.get_json() == {
            "success": False, "message": "Please type a message!", "error": "Empty message",
        }

    def test_invalid_json(self, client):
        resp = client.post("/chat", data="not json", content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Invalid JSON body"


class TestExecuteEndpoint:

    def test_payment(self, client, service):
        resp = client.post("/execute", json={
            "action": "create_payment",
            "params": {"amount_inr": 750, "purpose": "fertilizer_purchase"},
            "role": "farmer",
            "user": FARMER,
        })
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["success"] is True
        assert data["data"]["amount"] == 750
        assert service.list_records("transactions")[0]["user_id"] == "F1001"

    def test_rejection_is_still_200(self, client):
        resp = client.post("/execute", json={"action": "view_logs", "role": "farmer", "user": FARMER})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["success"] is False
        assert data["message"] == "Function view_logs is not available for your role."

    def test_missing_action(self, client):
        resp = client.post("/execute", json={"role": "farmer"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Missing action"

    def test_params_must_be_object(self, client):
        resp = client.post("/execute", json={"action": "create_payment", "params": [500], "role": "farmer"})
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Invalid params"


class TestRecordsEndpoint:

    def test_lists_records(self, client):
        client.post("/execute", json={
            "action": "generate_qr", "role": "farmer", "user": FARMER,
        })
        resp = client.get("/records/qrcodes")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["record_type"] == "qrcodes"
        assert data["count"] == 1
        assert data["records"][0]["id"].startswith("UZP-100100-")

    def test_empty(self, client):
        assert client.get("/records/ledger").get_json()["count"] == 0

    def test_unknown_type(self, client):
        resp = client.get("/records/invoices")
        assert resp.status_code == 404
        assert resp.get_json()["success"] is False


class TestCapabilitiesAndHealth:

    def test_capabilities(self, client):
        data = client.get("/capabilities/Farmer").get_json()
        assert data["role"] == "farmer"
        assert "create_payment" in data["functions"]
        assert data["functions"] == sorted(data["functions"])
        assert data["knowledge"]

    def test_unknown_role(self, client):
        data = client.get("/capabilities/guest").get_json()
        assert data["role"] is None
        assert data["functions"] == []

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["status"] == "ok"
        assert data["engine"]["handlers_registered"] == len(FUNCTION_HANDLERS)
