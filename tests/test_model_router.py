def _fields(session_data):
    return session_data["model"]["fields"]


def test_health_routes(client):
    assert client.get("/").json()["status"] == "healthy"
    assert client.get("/health").status_code == 200


def test_list_types(client):
    r = client.get("/api/v1/types")
    assert r.status_code == 200
    assert r.json()["data"] == [
        "String", "Int", "BigInt", "Float", "Decimal", "Boolean", "DateTime", "Json", "Bytes"
    ]


def test_stateless_render(client):
    r = client.post(
        "/api/v1/render",
        json={
            "name": "Post",
            "fields": [
                {"name": "id", "type": "Int", "isId": True, "defaultValue": "autoincrement()"},
                {"name": "title", "type": "String"},
                {"name": "published", "type": "Boolean", "defaultValue": "false"},
            ],
        },
    )
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["data"]["name"] == "Post"
    assert body["data"]["schemaText"] == (
        "model Post {\n"
        "  id Int @id @default(autoincrement())\n"
        "  title String\n"
        "  published Boolean @default(false)\n"
        "}"
    )


def test_stateless_render_missing_name(client):
    r = client.post("/api/v1/render", json={"name": " ", "fields": [{"name": "x"}]})
    assert r.status_code == 422
    body = r.json()
    assert body["success"] is False
    assert body["error_code"] == "MISSING_MODEL_NAME"
    assert body["error_details"][0]["field"] == "name"


def test_stateless_render_no_valid_fields(client):
    r = client.post("/api/v1/render", json={"name": "User", "fields": [{"name": "  "}]})
    assert r.status_code == 422
    assert r.json()["error_code"] == "NO_VALID_FIELDS"


def test_stateless_render_rejects_unknown_type(client):
    r = client.post("/api/v1/render", json={"name": "User", "fields": [{"name": "x", "type": "Widget"}]})
    assert r.status_code == 422
    assert "detail" in r.json()


def test_create_session_with_defaults(client, session):
    assert session["sessionId"]
    assert session["model"]["name"] == "Post"
    assert [f["name"] for f in _fields(session)] == ["id", "createdAt", "updatedAt"]


def test_create_session_without_body(client):
    r = client.post("/api/v1/models")
    assert r.status_code == 201
    assert r.json()["data"]["model"]["name"] == ""


def test_get_session(client, session):
    r = client.get(f"/api/v1/models/{session['sessionId']}")
    assert r.status_code == 200
    assert r.json()["data"] == session["model"]


def test_unknown_session_is_404(client):
    r = client.get("/api/v1/models/nope")
    assert r.status_code == 404
    assert r.json()["error_code"] == "NOT_FOUND"
    assert client.get("/api/v1/models/nope/schema").status_code == 404
    assert client.post("/api/v1/models/nope/fields").status_code == 404


def test_edit_and_render_session(client, session):
    sid = session["sessionId"]
    base = f"/api/v1/models/{sid}"

    r = client.post(f"{base}/fields", json={"name": "title", "defaultValue": "untitled"})
    assert r.status_code == 201
    title = r.json()["data"]["fields"][-1]

    r = client.patch(f"{base}/fields/{title['id']}", json={"isUnique": True})
    assert r.status_code == 200
    assert r.json()["data"]["fields"][-1]["defaultValue"] == "untitled"

    created_at = _fields(session)[1]["id"]
    assert client.delete(f"{base}/fields/{created_at}").status_code == 200

    r = client.put(f"{base}/name", json={"name": "Article"})
    assert r.json()["data"]["name"] == "Article"

    r = client.get(f"{base}/schema")
    assert r.status_code == 200
    assert r.json()["data"]["schemaText"] == (
        "model Article {\n"
        "  id Int @id @default(autoincrement())\n"
        "  updatedAt DateTime @updatedAt\n"
        '  title String @default("untitled") @unique\n'
        "}"
    )


def test_update_and_remove_unknown_field_are_noops(client, session):
    base = f"/api/v1/models/{session['sessionId']}"
    r = client.patch(f"{base}/fields/missing", json={"name": "y"})
    assert r.status_code == 200
    assert r.json()["data"] == session["model"]

    r = client.delete(f"{base}/fields/missing")
    assert r.status_code == 200
    assert r.json()["data"] == session["model"]


def test_render_session_without_name(client):
    sid = client.post("/api/v1/models").json()["data"]["sessionId"]
    r = client.get(f"/api/v1/models/{sid}/schema")
    assert r.status_code == 422
    assert r.json()["error_code"] == "MISSING_MODEL_NAME"


def test_reset_session(client, session):
    base = f"/api/v1/models/{session['sessionId']}"
    client.post(f"{base}/fields", json={"name": "extra"})
    r = client.post(f"{base}/reset")
    assert r.status_code == 200
    model = r.json()["data"]
    assert model["name"] == ""
    assert [f["name"] for f in model["fields"]] == ["id"]
    assert model["fields"][0]["isId"] is True
    assert client.get(base).json()["data"] == model


def test_delete_session(client, session):
    base = f"/api/v1/models/{session['sessionId']}"
    assert client.delete(base).status_code == 200
    assert client.get(base).status_code == 404
    assert client.delete(base).status_code == 404


def test_sessions_are_isolated(client):
    first = client.post("/api/v1/models", json={"name": "A"}).json()["data"]["sessionId"]
    second = client.post("/api/v1/models", json={"name": "B"}).json()["data"]["sessionId"]
    client.put(f"/api/v1/models/{first}/name", json={"name": "Changed"})
    assert client.get(f"/api/v1/models/{second}").json()["data"]["name"] == "B"
