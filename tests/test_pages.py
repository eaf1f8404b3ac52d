from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from unilinker.app import create_app
from unilinker.config import ServerConfig


def test_generator_page_lists_universities_and_shares_link_templates(config: ServerConfig) -> None:
    with TestClient(create_app(config)) as client:
        r = client.get("/")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")

        assert "UniLinker" in r.text
        assert 'data-university-id="harvard"' in r.text
        assert 'data-university-id="buet"' in r.text
        assert 'data-university-id="uiu"' in r.text
        assert "Cambridge, Massachusetts, USA" in r.text

        # Client script substitutes placeholders in the same templates the server formats.
        assert '"unilinker://university/{id}"' in r.text
        assert '"{origin}/uni/{id}"' in r.text


def test_landing_page_for_known_university(config: ServerConfig) -> None:
    with TestClient(create_app(config)) as client:
        r = client.get("/uni/buet")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")

        assert "unilinker://university/buet" in r.text
        assert "Bangladesh University of Engineering and Technology" in r.text
        assert "unilinker_deferred_link" in r.text
        assert "unilinker_deferred_university" in r.text
        assert "visibilitychange" in r.text
        assert 'href="/download-apk"' in r.text
        assert "var FALLBACK_TIMEOUT_MS = 2500;" in r.text


def test_landing_page_is_case_insensitive(config: ServerConfig) -> None:
    with TestClient(create_app(config)) as client:
        r = client.get("/uni/BUET")
        assert r.status_code == 200
        assert "unilinker://university/buet" in r.text


def test_landing_page_timeout_is_configurable() -> None:
    cfg = ServerConfig.model_validate({"landing": {"fallback_timeout_ms": 4000}})
    with TestClient(create_app(cfg)) as client:
        r = client.get("/uni/harvard")
        assert "var FALLBACK_TIMEOUT_MS = 4000;" in r.text


def test_landing_page_unknown_university(config: ServerConfig) -> None:
    with TestClient(create_app(config)) as client:
        r = client.get("/uni/mit")
        assert r.status_code == 404
        assert r.headers["content-type"].startswith("text/html")
        assert "University not found" in r.text
        assert "unilinker://" not in r.text


def test_download_apk_page(config: ServerConfig) -> None:
    with TestClient(create_app(config)) as client:
        r = client.get("/download-apk")
        assert r.status_code == 200
        assert r.headers["content-type"].startswith("text/html")
        assert "flutter build apk" in r.text
        assert "adb install" in r.text
        assert "http://testserver/uni/" in r.text


def test_static_assets_are_served(config: ServerConfig) -> None:
    with TestClient(create_app(config)) as client:
        r = client.get("/static/unilinker.css")
        assert r.status_code == 200
        assert ".university-card" in r.text


def test_public_dir_is_served_when_configured(tmp_path: Path) -> None:
    (tmp_path / "hello.txt").write_text("hi", encoding="utf-8")
    cfg = ServerConfig(public_dir=str(tmp_path))

    with TestClient(create_app(cfg)) as client:
        r = client.get("/public/hello.txt")
        assert r.status_code == 200
        assert r.text == "hi"


def test_unknown_page_route_renders_not_found(config: ServerConfig) -> None:
    with TestClient(create_app(config)) as client:
        r = client.get("/does-not-exist")
        assert r.status_code == 404
        assert "Page not found" in r.text
