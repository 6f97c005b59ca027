"""
Tests for the Swagger document generator and the documentation routes.
"""
import json

from fastapi.testclient import TestClient

from task_api.docs import build_swagger_document, write_swagger_document


class TestSwaggerDocument:

    def test_describes_all_task_routes(self, settings):
        document = build_swagger_document(settings)

        assert document["swagger"] == "2.0"
        assert set(document["paths"]) == {"/tasks", "/tasks/{id}"}
        assert set(document["paths"]["/tasks"]) == {"get", "post"}
        assert set(document["paths"]["/tasks/{id}"]) == {"get", "put", "delete"}

    def test_list_parameters(self, settings):
        parameters = build_swagger_document(settings)["paths"]["/tasks"]["get"]["parameters"]

        assert [p["name"] for p in parameters] == ["completed", "sortBy", "page", "limit"]
        assert all(p["in"] == "query" and p["required"] is False for p in parameters)

    def test_definitions(self, settings):
        definitions = build_swagger_document(settings)["definitions"]

        assert set(definitions["Task"]["properties"]) == {"id", "title", "completed"}
        assert set(definitions["TaskList"]["properties"]) == {"tasks", "page", "limit", "total"}

    def test_base_path_follows_prefix(self, settings):
        assert build_swagger_document(settings)["basePath"] == "/"

        settings.api_prefix = "/api/v1"
        assert build_swagger_document(settings)["basePath"] == "/api/v1"

    def test_write_creates_parent_directories(self, tmp_path, settings):
        target = tmp_path / "nested" / "docs" / "swagger.json"

        path = write_swagger_document(target, settings)

        assert path == target
        assert json.loads(target.read_text(encoding="utf-8")) == build_swagger_document(settings)


class TestDocumentationRoutes:

    def test_startup_writes_document(self, client, settings, tmp_path):
        written = json.loads((tmp_path / "swagger.json").read_text(encoding="utf-8"))
        assert written == build_swagger_document(settings)

    def test_swagger_ui_page(self, client):
        resp = client.get("/api-docs")

        assert resp.status_code == 200
        assert "text/html" in resp.headers["content-type"]
        assert "swagger-ui" in resp.text
        assert "/api-docs/swagger.json" in resp.text

    def test_serves_written_document(self, client):
        resp = client.get("/api-docs/swagger.json")

        assert resp.status_code == 200
        assert resp.json()["info"]["title"] == "Task API"

    def test_missing_document(self, app):
        # Without the context manager startup never runs, so nothing is written
        resp = TestClient(app).get("/api-docs/swagger.json")

        assert resp.status_code == 404
        assert resp.json() == {"error": "API documentation has not been generated"}
