import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_sql_assistant
from app.main import create_app
from app.services.sql_assistant import SqlAssistant

GENERATED = {
    "sql": "SELECT name, total FROM customers JOIN orders ON customers.id = orders.customer_id",
    "explanation": "Lists customers with their order totals.",
    "complexity": "simple",
    "estimatedExecutionTime": 120,
    "suggestions": ["Index orders.customer_id"],
    "usedTables": ["customers", "orders"],
}


class FakeCompletions:
    """Stands in for ``client.chat.completions`` of the OpenAI SDK."""

    def __init__(self):
        self.content = json.dumps(GENERATED)
        self.error = None
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAIClient:
    def __init__(self):
        self.completions = FakeCompletions()
        self.chat = SimpleNamespace(completions=self.completions)

    def reply(self, payload):
        self.completions.content = payload if isinstance(payload, str) else json.dumps(payload)

    @property
    def last_prompt(self) -> str:
        return self.completions.calls[-1]["messages"][-1]["content"]


@pytest.fixture
def fake_llm():
    return FakeOpenAIClient()


@pytest.fixture
def api_app(fake_llm):
    application = create_app()
    application.dependency_overrides[get_sql_assistant] = lambda: SqlAssistant(fake_llm, model="test-model")
    return application


@pytest.fixture
def client(api_app):
    with TestClient(api_app) as test_client:
        yield test_client


@pytest.fixture
def saved_query_id(client):
    response = client.post("/api/sql/generate", json={
        "naturalLanguageQuery": "total spend per customer",
        "database": "MySQL",
    })
    assert response.status_code == 200
    return response.json()["queryId"]
