import pytest
from fastapi.testclient import TestClient

from swagger_explorer.config import settings
from swagger_explorer.main import app
from swagger_explorer.state import SpecStore


PETSTORE = {
    "openapi": "3.0.3",
    "info": {"title": "Petstore", "version": "1.0.0"},
    "paths": {
        "/pets": {
            "get": {
                "summary": "List pets",
                "parameters": [
                    {"name": "limit", "in": "query", "schema": {"$ref": "#/components/schemas/Limit"}}
                ],
                "responses": {"200": {"description": "ok"}},
            },
            "post": {
                "summary": "Create pet",
                "responses": {"201": {"description": "created"}},
            },
        },
        "/pets/{petId}": {
            "parameters": [
                {"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}}
            ],
            "get": {
                "parameters": [
                    {"name": "petId", "in": "path", "required": True, "schema": {"type": "string"}}
                ],
                "responses": {"200": {"description": "ok"}},
            },
        },
    },
    "components": {
        "schemas": {
            "Limit": {"type": "integer", "format": "int32", "maximum": 100}
        }
    },
}

PETSTORE_YAML = """\
openapi: 3.0.3
info:
  title: Petstore
  version: 1.0.0
paths:
  /pets:
    get:
      responses:
        '200':
          description: ok
  /owners:
    delete:
      responses:
        '204':
          description: gone
"""


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    return path


@pytest.fixture(autouse=True)
def spec_store():
    previous = app.state.spec_store
    store = SpecStore()
    app.state.spec_store = store
    yield store
    app.state.spec_store = previous


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def petstore():
    return PETSTORE


@pytest.fixture
def petstore_yaml():
    return PETSTORE_YAML
