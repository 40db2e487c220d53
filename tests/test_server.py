"""
HTTP and page session tests.
Runs the app against temporary dist/, public/ and node_modules/ directories.
"""

import logging
import os
import sys

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on path
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from backend.config import Settings
from backend.main import create_app


@pytest.fixture
def site_settings(tmp_path):
    for name in ("dist", "public", "node_modules"):
        (tmp_path / name).mkdir()
    return Settings(
        dist_path=tmp_path / "dist",
        public_path=tmp_path / "public",
        node_modules_path=tmp_path / "node_modules",
        site_owner="Ada Example",
        port=5000,
    )


@pytest.fixture
def client(site_settings):
    return TestClient(create_app(site_settings))


# ===========================================================================
# Config Tests
# ===========================================================================


class TestSettings:
    """Tests for backend/config.py."""

    def test_default_port(self, monkeypatch):
        monkeypatch.delenv("PORT", raising=False)
        assert Settings().port == 5000

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "8123")
        assert Settings().port == 8123


# ===========================================================================
# Static Route Tests
# ===========================================================================


class TestIndex:
    """Tests for GET /."""

    def test_serves_built_index(self, client, site_settings):
        (site_settings.dist_path / "index.html").write_text("<p>built</p>")

        response = client.get("/")

        assert response.status_code == 200
        assert response.text == "<p>built</p>"
        assert response.headers["content-type"].startswith("text/html")

    def test_renders_shell_without_build(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Ada Example" in response.text
        assert "page-home" in response.text


class TestAssets:
    """Tests for /public and the dist/node_modules cascade."""

    def test_public_file(self, client, site_settings):
        (site_settings.public_path / "style.css").write_text("body {}")

        response = client.get("/public/style.css")

        assert response.status_code == 200
        assert response.text == "body {}"

    def test_public_miss(self, client):
        assert client.get("/public/missing.css").status_code == 404

    def test_public_directory_itself(self, client):
        assert client.get("/public").status_code == 404

    def test_dist_file(self, client, site_settings):
        (site_settings.dist_path / "bundle.js").write_text("var a = 1;")

        response = client.get("/bundle.js")

        assert response.status_code == 200
        assert response.text == "var a = 1;"

    def test_node_modules_fallback(self, client, site_settings):
        package = site_settings.node_modules_path / "lib"
        package.mkdir()
        (package / "lib.css").write_text(".lib {}")

        response = client.get("/lib/lib.css")

        assert response.status_code == 200
        assert response.text == ".lib {}"

    def test_dist_wins_over_node_modules(self, client, site_settings):
        (site_settings.dist_path / "shared.js").write_text("dist")
        (site_settings.node_modules_path / "shared.js").write_text("vendor")

        assert client.get("/shared.js").text == "dist"

    def test_directory_serves_index(self, client, site_settings):
        docs = site_settings.dist_path / "docs"
        docs.mkdir()
        (docs / "index.html").write_text("<p>docs</p>")

        assert client.get("/docs/").text == "<p>docs</p>"

    def test_miss_is_404(self, client):
        response = client.get("/nothing/here.js")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    def test_path_escaping_root_is_rejected(self, client, site_settings, tmp_path):
        (tmp_path / "secret.txt").write_text("secret")

        response = client.get("/%2e%2e/secret.txt")

        assert response.status_code == 404


class TestLogging:
    """Tests for logging setup in create_app."""

    def test_log_level_follows_app_settings(self, site_settings):
        backend_logger = logging.getLogger("backend")
        previous = backend_logger.level
        try:
            create_app(site_settings.model_copy(update={"log_level": "WARNING"}))
            assert backend_logger.level == logging.WARNING

            create_app(site_settings)
            assert backend_logger.level == logging.INFO
        finally:
            backend_logger.setLevel(previous)


class TestClientScript:
    """Tests for the shipped public/app.js."""

    def test_dead_session_is_reported(self):
        client = TestClient(create_app(Settings()))

        script = client.get("/public/app.js").text

        assert "socket.onclose" in script
        assert "console.warn('Page session not open" in script


class TestLifespan:
    """Tests for application startup."""

    def test_warns_without_build(self, site_settings, caplog):
        with caplog.at_level(logging.INFO, logger="backend.main"):
            with TestClient(create_app(site_settings)):
                pass
        assert "No build output" in caplog.text
        assert "Listening on port 5000" in caplog.text


# ===========================================================================
# Session Tests
# ===========================================================================


class TestSession:
    """Tests for backend/api/routes/session.py."""

    def test_initial_state_on_connect(self, client):
        with client.websocket_connect("/api/session/ws") as ws:
            event = ws.receive_json()

        assert event["type"] == "state"
        assert event["state"]["current_view"] == "home"
        assert event["state"]["highlights"]["home"] == "red"
        assert "page-home" in event["html"]
        assert "error" not in event

    def test_projects_then_music(self, client):
        with client.websocket_connect("/api/session/ws") as ws:
            ws.receive_json()

            ws.send_json({"view": "projects"})
            projects = ws.receive_json()

            ws.send_json({"view": "music"})
            music = ws.receive_json()

        assert projects["state"] == {
            "current_view": "projects",
            "highlights": {
                "home": "black",
                "contact": "black",
                "projects": "green",
                "music": "black",
            },
        }
        assert "page-projects" in projects["html"]

        assert music["state"]["current_view"] == "music"
        assert music["state"]["highlights"]["music"] == "pink"
        assert music["state"]["highlights"]["projects"] == "black"
        assert "page-music" in music["html"]

    def test_unknown_tag_keeps_state(self, client):
        with client.websocket_connect("/api/session/ws") as ws:
            ws.receive_json()
            ws.send_json({"view": "contact"})
            ws.receive_json()

            ws.send_json({"view": "settings"})
            event = ws.receive_json()

        assert event["type"] == "error"
        assert "settings" in event["error"]
        assert event["state"]["current_view"] == "contact"
        assert event["state"]["highlights"]["contact"] == "blue"

    def test_malformed_message(self, client):
        with client.websocket_connect("/api/session/ws") as ws:
            ws.receive_json()

            ws.send_text("not json")
            event = ws.receive_json()

            ws.send_json({"tab": "music"})
            missing_key = ws.receive_json()

            ws.send_bytes(b'{"view": "music"}')
            binary = ws.receive_json()

            # Connection stays usable
            ws.send_json({"view": "music"})
            recovered = ws.receive_json()

        assert event["type"] == "error"
        assert event["error"] == "Malformed message"
        assert event["state"]["current_view"] == "home"
        assert missing_key["type"] == "error"
        assert binary["type"] == "error"
        assert binary["state"]["current_view"] == "home"
        assert recovered["type"] == "state"
        assert recovered["state"]["current_view"] == "music"

    def test_sessions_are_independent(self, client):
        with client.websocket_connect("/api/session/ws") as first:
            first.receive_json()
            first.send_json({"view": "music"})
            first.receive_json()

            with client.websocket_connect("/api/session/ws") as second:
                event = second.receive_json()

        assert event["state"]["current_view"] == "home"
