"""
Tests for the web API — app factory, library, taxonomy, problem and tutorial routes.
"""

from __future__ import annotations

import random
from pathlib import Path

import pytest
from flask.testing import FlaskClient

from devlibguide.core.config.loader import AppConfig
from devlibguide.core.context import AppContext
from devlibguide.core.data import DataRegistry
from devlibguide.ui.web.server import create_app


@pytest.fixture()
def app(small_catalog, registry):  # type: ignore[no-untyped-def]
    context = AppContext(config=AppConfig(), registry=registry, catalog=small_catalog)
    app = create_app(context=context)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app) -> FlaskClient:  # type: ignore[no-untyped-def]
    return app.test_client()


# ── App Factory Tests ────────────────────────────────────────────────


class TestAppFactory:
    def test_create_app_from_config(self, tmp_path: Path):
        config_path = tmp_path / "devlibguide.yml"
        config_path.write_text("languages: [rust]\n")
        app = create_app(config_path=config_path)
        context = app.extensions["devlibguide"]
        assert context.catalog.languages == ("rust",)
        assert app.config["CONFIG_PATH"] == str(config_path)

    def test_base_url_from_config(self, registry, small_catalog):
        config = AppConfig.model_validate({"server": {"base_url": "https://x.dev"}})
        app = create_app(context=AppContext(config=config, registry=registry, catalog=small_catalog))
        assert app.config["BASE_URL"] == "https://x.dev"


# ── Library Routes ───────────────────────────────────────────────────


class TestLibraries:
    def test_pass_through(self, client: FlaskClient):
        resp = client.get("/api/libraries")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["active_filters"] is False
        assert list(data["libraries"]) == ["python", "javascript", "c"]
        python = data["libraries"]["python"]
        assert python[0]["name"] == "requests"
        assert python[0]["version"] == "2.31.0"
        assert len(python) == 5

    def test_search(self, client: FlaskClient):
        data = client.get("/api/libraries?search=json").get_json()
        assert [r["name"] for r in data["libraries"]["javascript"]] == ["JSON", "Axios"]
        assert data["query"]["search_term"] == "json"

    def test_q_alias(self, client: FlaskClient):
        data = client.get("/api/libraries?q=numpy").get_json()
        assert [r["name"] for r in data["libraries"]["python"]] == ["NumPy"]

    def test_category_and_language(self, client: FlaskClient):
        data = client.get("/api/libraries?category=Framework&language=javascript").get_json()
        assert data["active_tab"] == "javascript"
        assert [r["name"] for r in data["libraries"]["javascript"]] == ["Express.js"]
        assert [r["name"] for r in data["libraries"]["python"]] == ["Flask", "Django"]

    def test_by_language(self, client: FlaskClient):
        data = client.get("/api/libraries/javascript").get_json()
        assert data["supported"] is True
        assert len(data["libraries"]) == 4

    def test_unknown_language_is_empty(self, client: FlaskClient):
        resp = client.get("/api/libraries/cobol")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["libraries"] == []
        assert data["supported"] is False

    @pytest.mark.parametrize("kind,empty", [
        ("versions", []),
        ("analytics", {}),
        ("health", {}),
    ])
    def test_placeholder_details(self, client: FlaskClient, kind, empty):
        data = client.get(f"/api/libraries/Flask/{kind}").get_json()
        assert data == {"message": "Success", "name": "Flask", kind: empty}

    def test_examples(self, client: FlaskClient):
        data = client.get("/api/libraries/NumPy/examples").get_json()
        assert [e["title"] for e in data["examples"]] == [
            "Basic Array Operations",
            "Data Analysis with NumPy",
        ]
        assert data["examples"][0]["language"] == "Python"

    def test_examples_unknown_library(self, client: FlaskClient):
        data = client.get("/api/libraries/Flask/examples").get_json()
        assert data == {"message": "Success", "name": "Flask", "examples": []}


class TestMetadata:
    def test_languages(self, client: FlaskClient):
        data = client.get("/api/languages").get_json()
        by_key = {lang["key"]: lang for lang in data["languages"]}
        assert list(by_key) == ["c", "javascript", "python"]
        assert by_key["python"]["library_count"] == 5
        assert by_key["javascript"]["label"] == "JavaScript"

    def test_taxonomy(self, client: FlaskClient):
        data = client.get("/api/taxonomy").get_json()
        assert "Web Server" in data["families"]["feature"]
        assert len(data["all_tags"]) == 59


class TestCompare:
    def test_compare(self, client: FlaskClient):
        data = client.get("/api/compare?language=python&names=Flask,Django").get_json()
        assert data["tag_counts"][0] == {"tag": "Web Framework", "count": 2}

    def test_too_many(self, client: FlaskClient):
        resp = client.get("/api/compare?language=python&names=a,b,c,d")
        assert resp.status_code == 400
        assert "At most 3" in resp.get_json()["error"]

    def test_missing_language(self, client: FlaskClient):
        assert client.get("/api/compare?names=Flask").status_code == 400


# ── Practice Problems ────────────────────────────────────────────────


class TestProblems:
    def test_list(self, client: FlaskClient):
        data = client.get("/api/problems").get_json()
        assert data["problems"][0] == {
            "id": "two-sum",
            "title": "Two Sum",
            "difficulty": "easy",
            "category": "arrays",
        }

    def test_detail(self, client: FlaskClient):
        data = client.get("/api/problems/reverse-string").get_json()
        assert data["title"] == "Reverse String"
        assert "Rust" in data["starter_code"]

    def test_detail_not_found(self, client: FlaskClient):
        resp = client.get("/api/problems/nope")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Problem not found"}

    def test_validate(self, app, client: FlaskClient):
        app.config["VALIDATION_RNG"] = random.Random(3)
        resp = client.post("/api/problems/two-sum/validate", json={"code": "pass", "language": "Python"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert len(data["results"]) == 4
        assert data["results"][3]["hidden"] is True
        assert 1 <= data["metrics"]["execution_time"] <= 100

    def test_validate_missing_code(self, client: FlaskClient):
        resp = client.post("/api/problems/two-sum/validate", json={"language": "Python"})
        assert resp.status_code == 400

    def test_validate_without_body(self, client: FlaskClient):
        assert client.post("/api/problems/two-sum/validate").status_code == 400

    @pytest.mark.parametrize("body", [["code"], "code", 42])
    def test_validate_non_object_body(self, client: FlaskClient, body):
        resp = client.post("/api/problems/two-sum/validate", json=body)
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_validate_unknown_problem(self, client: FlaskClient):
        resp = client.post("/api/problems/nope/validate", json={"code": "x", "language": "Python"})
        assert resp.status_code == 404

    def test_embed_info(self, client: FlaskClient):
        data = client.get("/api/embed-info").get_json()
        assert data["base_url"] == "http://127.0.0.1:5000"
        assert len(data["available_problems"]) == 3


# ── Tutorials ────────────────────────────────────────────────────────


class TestTutorials:
    def test_list(self, client: FlaskClient):
        data = client.get("/api/tutorials").get_json()
        assert len(data["tutorials"]) == 5
        assert data["languages"] == ["JavaScript", "Python", "C++", "Rust", "Swift"]
        assert "content" not in data["tutorials"][0]

    def test_filtered(self, client: FlaskClient):
        data = client.get("/api/tutorials?difficulty=intermediate&language=C%2B%2B").get_json()
        assert [t["slug"] for t in data["tutorials"]] == ["mastering-cpp-stl-containers-algorithms"]

    def test_search(self, client: FlaskClient):
        data = client.get("/api/tutorials?q=tokio").get_json()
        assert [t["library_name"] for t in data["tutorials"]] == ["tokio"]

    def test_detail(self, client: FlaskClient):
        data = client.get("/api/tutorials/reactive-programming-swift-combine").get_json()
        assert data["author"] == "James Wilson"
        assert data["content"]

    def test_detail_not_found(self, client: FlaskClient):
        resp = client.get("/api/tutorials/nope")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Tutorial not found"}


class TestCatalogFailures:
    def test_malformed_file_is_json_error(self, data_dir: Path, small_catalog):
        (data_dir / "problems.json").write_text("[{broken")
        context = AppContext(
            config=AppConfig(data_dir=data_dir),
            registry=DataRegistry(data_dir),
            catalog=small_catalog,
        )
        client = create_app(context=context).test_client()
        resp = client.get("/api/problems")
        assert resp.status_code == 500
        assert "problems.json" in resp.get_json()["error"]
