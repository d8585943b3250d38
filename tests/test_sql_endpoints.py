def test_generate_returns_result_and_query_id(client):
    response = client.post("/api/sql/generate", json={
        "naturalLanguageQuery": "total spend per customer",
        "database": "MySQL",
        "subject": "Sales",
        "options": {"limit": 5},
    })

    assert response.status_code == 200
    body = response.json()
    assert body["sql"].startswith("SELECT name, total")
    assert body["complexity"] == "simple"
    assert body["estimatedExecutionTime"] == 120
    assert body["usedTables"] == ["customers", "orders"]
    assert isinstance(body["queryId"], int)


def test_generate_saves_history_entry(client):
    client.post("/api/sql/generate", json={"naturalLanguageQuery": "spend", "database": "SQLite"})

    history = client.get("/api/queries").json()
    assert len(history) == 1
    entry = history[0]
    assert entry["queryType"] == "generate"
    assert entry["database"] == "SQLite"
    assert entry["naturalLanguageQuery"] == "spend"
    assert entry["executionTime"] == 120
    assert entry["isFavorite"] is False
    assert entry["metadata"]["usedTables"] == ["customers", "orders"]
    assert entry["metadata"]["subject"] is None


def test_generate_requires_question(client):
    response = client.post("/api/sql/generate", json={"naturalLanguageQuery": "   ", "database": "MySQL"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Natural language query is required"
    assert client.get("/api/queries").json() == []


def test_generate_llm_failure_is_500(client, fake_llm):
    fake_llm.completions.error = RuntimeError("quota exceeded")

    response = client.post("/api/sql/generate", json={"naturalLanguageQuery": "spend"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to generate SQL: quota exceeded"
    assert client.get("/api/queries").json() == []


def test_generate_with_saved_schema(client, fake_llm):
    schema = client.post("/api/schemas", json={
        "name": "shop",
        "database": "MySQL",
        "schemaData": {"tables": {"customers": {"columns": {"id": {"type": "INT"}}}}},
    }).json()

    response = client.post("/api/sql/generate", json={
        "naturalLanguageQuery": "list customers",
        "schemaId": schema["id"],
    })

    assert response.status_code == 200
    assert "DATABASE SCHEMA (shop, MySQL):" in fake_llm.last_prompt
    assert "customers:" in fake_llm.last_prompt


def test_generate_with_unknown_schema(client):
    response = client.post("/api/sql/generate", json={"naturalLanguageQuery": "x", "schemaId": 99})
    assert response.status_code == 404


def test_transform(client, fake_llm):
    fake_llm.reply({"sql": "SELECT * FROM t LIMIT 5", "explanation": "TOP became LIMIT"})

    response = client.post("/api/sql/transform", json={
        "originalSql": "SELECT TOP 5 * FROM t",
        "targetDatabase": "PostgreSQL",
    })

    assert response.status_code == 200
    body = response.json()
    assert body["sql"] == "SELECT * FROM t LIMIT 5"
    assert body["complexity"] == "medium"

    entry = client.get("/api/queries").json()[0]
    assert entry["id"] == body["queryId"]
    assert entry["queryType"] == "transform"
    assert entry["naturalLanguageQuery"] == "Transform to PostgreSQL"
    assert entry["metadata"]["originalSql"] == "SELECT TOP 5 * FROM t"


def test_transform_requires_sql(client):
    response = client.post("/api/sql/transform", json={"originalSql": "", "targetDatabase": "Oracle"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Original SQL is required"


def test_explain(client, fake_llm):
    fake_llm.reply({
        "explanation": "Counts users.",
        "breakdown": [{"section": "SELECT clause", "description": "counts"}],
        "complexity": "simple",
        "performance": {"rating": 8, "suggestions": []},
    })

    response = client.post("/api/sql/explain", json={"sql": "SELECT COUNT(*) FROM users"})

    assert response.status_code == 200
    assert response.json() == {
        "explanation": "Counts users.",
        "breakdown": [{"section": "SELECT clause", "description": "counts"}],
        "complexity": "simple",
        "performance": {"rating": 8, "suggestions": []},
    }

    entry = client.get("/api/queries").json()[0]
    assert entry["queryType"] == "explain"
    assert entry["database"] == "General"
    assert entry["generatedSql"] == "SELECT COUNT(*) FROM users"
    assert entry["executionTime"] is None


def test_explain_requires_sql(client):
    assert client.post("/api/sql/explain", json={"sql": ""}).status_code == 400


def test_format(client):
    response = client.post("/api/sql/format", json={"sql": "select id from users join orders on 1 = 1"})

    assert response.status_code == 200
    body = response.json()
    assert body["formatted"] == "SELECT id\nFROM users\nJOIN orders ON 1 1"
    assert body["highlighted"].startswith('<span class="sql-keyword">SELECT</span> ')
    assert body["tables"] == ["users", "orders"]
    assert body["validation"] == {"isValid": True, "errors": []}


def test_format_reports_validation_errors(client):
    body = client.post("/api/sql/format", json={"sql": "SELECT (1"}).json()
    assert body["validation"] == {
        "isValid": False,
        "errors": ["SELECT statement missing FROM clause", "Unmatched parentheses"],
    }


def test_format_requires_sql(client):
    assert client.post("/api/sql/format", json={"sql": " "}).status_code == 400


def test_generate_passes_model_values_through(client, fake_llm):
    fake_llm.reply({
        "sql": "SELECT 1 FROM t",
        "estimatedExecutionTime": 12.5,
        "suggestions": [{"text": "add an index", "impact": "high"}, 3],
        "usedTables": ["t", None],
    })

    response = client.post("/api/sql/generate", json={"naturalLanguageQuery": "anything"})

    assert response.status_code == 200
    body = response.json()
    assert body["estimatedExecutionTime"] == 12.5
    assert body["suggestions"] == [{"text": "add an index", "impact": "high"}, 3]
    assert body["usedTables"] == ["t", None]

    entry = client.get("/api/queries").json()[0]
    assert entry["executionTime"] == 12.5
    assert entry["metadata"]["suggestions"] == [{"text": "add an index", "impact": "high"}, 3]


def test_explain_passes_model_values_through(client, fake_llm):
    fake_llm.reply({
        "explanation": "Counts users.",
        "breakdown": ["SELECT counts rows", {"section": "FROM", "description": "users"}],
        "performance": {"rating": 7.5, "suggestions": [{"tip": "cache it"}]},
    })

    response = client.post("/api/sql/explain", json={"sql": "SELECT COUNT(*) FROM users"})

    assert response.status_code == 200
    body = response.json()
    assert body["performance"] == {"rating": 7.5, "suggestions": [{"tip": "cache it"}]}
    assert body["breakdown"][0] == "SELECT counts rows"
    assert client.get("/api/queries").json()[0]["metadata"]["performance"]["rating"] == 7.5
