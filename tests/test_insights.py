import pytest

from core import insights
from schemas.insights import ChatReply


@pytest.mark.parametrize("message, expected_start", [
    ("What are our TOP performing categories?", "Based on the data, Electronics"),
    ("show me sales", "Sales peaked in March-April"),
    ("How can we improve our business?", "To improve sales, consider:"),
    ("run a simulation", "Running a 10% sales increase simulation"),
    ("hello there", "I can help you with sales analysis"),
])
def test_answer_keyword_table(message, expected_start):
    assert insights.answer(message).startswith(expected_start)


def test_first_matching_keyword_wins():
    # "sales" is checked before the simulation keywords
    assert insights.answer("Simulate a 10% increase in sales") == insights.answer("sales")


def test_chart_series_are_static():
    keys = [s.key for s in insights.chart_series()]

    assert keys == ["sample", "sales", "customers", "products", "growth"]
    products = insights.chart_series()[3]
    assert dict(zip(products.labels, products.data))["Electronics"] == 4000


def test_charts_endpoint(client):
    body = client.get("/api/insights/charts").json()

    assert body["success"] is True
    assert body["data"][1]["labels"] == ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]


def test_greeting_endpoint(client):
    data = client.get("/api/insights/chat").json()["data"]

    assert data["content"].startswith("Hello!")
    assert "Top-N analysis of your data" in data["capabilities"]
    assert data["suggestions"]["improvement"] == "How can we improve our business?"


def test_chat_endpoint(client):
    body = client.post("/api/insights/chat", json={"message": "  improve  "}).json()

    assert body["data"]["message"] == "improve"
    assert body["data"]["reply"].startswith("To improve sales")


def test_chat_rejects_blank_message(client):
    assert client.post("/api/insights/chat", json={"message": "   "}).status_code == 400


def test_chat_reply_shape(client):
    data = client.post("/api/insights/chat", json={"message": "top"}).json()["data"]

    assert set(data) == {"message", "reply"}
    assert ChatReply.model_validate(data).message == "top"
