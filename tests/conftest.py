import pytest
from fastapi.testclient import TestClient

from prisma_builder.core.schemas.fields import PrismaField, PrismaModel, ScalarType
from prisma_builder.main import app


@pytest.fixture()
def client():
    return TestClient(app)


@pytest.fixture()
def make_field():
    counter = {"n": 0}

    def _make(name: str = "", type: ScalarType = ScalarType.STRING, **attrs):
        counter["n"] += 1
        return PrismaField(id=f"f{counter['n']}", name=name, type=type, **attrs)

    return _make


@pytest.fixture()
def post_model(make_field):
    return PrismaModel(
        name="Post",
        fields=[
            make_field("id", ScalarType.INT, is_id=True, default_value="autoincrement()"),
            make_field("title", ScalarType.STRING),
            make_field("published", ScalarType.BOOLEAN, default_value="false"),
        ],
    )


@pytest.fixture()
def session(client):
    r = client.post("/api/v1/models", json={"name": "Post"})
    assert r.status_code == 201
    return r.json()["data"]
