from fastapi.testclient import TestClient

from wp_assets.application import create_fastapi_app
from wp_assets.dependency_injection.container import Container

PUBLIC_URL = "http://localhost:8008/wp-content/themes/demo/public"


def test_describe_entry(app, public_dir):
    response = app.get("/entries/main")

    assert response.status_code == 200
    assert response.json() == {
        "entry": "main",
        "strategy": "entrypoint",
        "styles": [
            {
                "handle": "wpa/main-style",
                "src": PUBLIC_URL + "/styles/main.4d5e6f.css",
                "dependencies": [],
                "version": None,
            }
        ],
        "scripts": [
            {
                "handle": "wpa/main-script",
                "src": PUBLIC_URL + "/scripts/main.1a2b3c.js",
                "dependencies": ["wp-element", "wp-i18n"],
                "version": "8f3a2c1b",
                "in_footer": True,
            }
        ],
        "included_descriptors": [public_dir + "/scripts/main.asset.php"],
    }


def test_describe_entry_with_namespace(app):
    response = app.get("/entries/editor", params={"namespace": "theme"})

    assert [script["handle"] for script in response.json()["scripts"]] == [
        "theme/editor-script"
    ]


def test_describe_unknown_entry(app):
    response = app.get("/entries/admin")

    assert response.status_code == 404
    assert response.json() == {
        "error": "not_found",
        "error_description": "Entry point 'admin' does not exist in the manifest.",
    }


def test_describe_entry_flat_strategy(config):
    config["theme"]["strategy"] = "flat"
    app = TestClient(create_fastapi_app(config, Container()))

    response = app.get("/entries/admin")

    assert response.status_code == 200
    assert response.json()["strategy"] == "flat"
    assert response.json()["styles"] == []
    assert response.json()["scripts"] == []


def test_error_response_with_log_message(config, theme_dir):
    (theme_dir / "public" / "manifest.json").unlink()
    config["theme"]["manifest_required"] = "True"
    config["app"]["include_log_message_in_error_response"] = "True"
    app = TestClient(create_fastapi_app(config, Container()))

    response = app.get("/entries/main")

    assert response.status_code == 500
    assert response.json()["error_description"].startswith(
        "Manifest file is missing. (Manifest file is missing: "
    )


def test_describe_entry_with_slashes(app):
    response = app.get("/entries/scripts/main.js")

    assert response.status_code == 200
    assert response.json()["entry"] == "scripts/main.js"
    assert [script["handle"] for script in response.json()["scripts"]] == [
        "wpa/main-script"
    ]


def test_describe_namespaced_flat_entry(config, theme_dir):
    (theme_dir / "public" / "manifest.json").write_text(
        '{"scripts/blocks/hero.js": "scripts/blocks/hero.abc.js"}', encoding="utf-8"
    )
    config["theme"]["strategy"] = "flat"
    app = TestClient(create_fastapi_app(config, Container()))

    response = app.get("/entries/blocks/hero")

    assert response.status_code == 200
    assert (
        response.json()["scripts"][0]["src"]
        == PUBLIC_URL + "/scripts/blocks/hero.abc.js"
    )
