import json
from configparser import ConfigParser
from typing import Any, Dict

import pytest

from wp_assets.services.dependency_resolver import DependencyResolver
from wp_assets.services.manifest_cache import ManifestCache
from wp_assets.services.manifest_service import ManifestReader
from wp_assets.services.theme_asset_host import ThemeAssetHost

THEME_URL = "http://localhost:8008/wp-content/themes/demo"
PUBLIC_URL = THEME_URL + "/public"

MAIN_ASSET_PHP = (
    "<?php return array('dependencies' => array('wp-element', 'wp-i18n'), "
    "'version' => '8f3a2c1b');"
)


@pytest.fixture
def manifest() -> Dict[str, Any]:
    return {
        "scripts/main.js": "/scripts/main.1a2b3c.js",
        "styles/main.css": "/styles/main.4d5e6f.css",
        "scripts/editor.js": "/scripts/editor.7a8b9c.js",
        "main.js": "/scripts/main.1a2b3c.js",
        "entrypoints": {
            "main": {
                "assets": {
                    "css": ["/styles/main.4d5e6f.css"],
                    "js": ["/scripts/main.1a2b3c.js"],
                    "php": ["/scripts/main.asset.php"],
                }
            },
            "editor": {"assets": {"js": ["/scripts/editor.7a8b9c.js"]}},
        },
    }


@pytest.fixture
def theme_dir(tmp_path, manifest):
    public_dir = tmp_path / "public"
    (public_dir / "scripts").mkdir(parents=True)
    (public_dir / "styles").mkdir(parents=True)
    (public_dir / "manifest.json").write_text(json.dumps(manifest), encoding="utf-8")
    (public_dir / "scripts" / "main.1a2b3c.js").write_text(
        "console.log('main');", encoding="utf-8"
    )
    (public_dir / "styles" / "main.4d5e6f.css").write_text(
        "body { margin: 0; }", encoding="utf-8"
    )
    (public_dir / "scripts" / "main.asset.php").write_text(
        MAIN_ASSET_PHP, encoding="utf-8"
    )
    return tmp_path


@pytest.fixture
def public_dir(theme_dir) -> str:
    return str(theme_dir / "public")


@pytest.fixture
def manifest_cache(public_dir) -> ManifestCache:
    return ManifestCache(public_dir + "/manifest.json")


@pytest.fixture
def manifest_reader(manifest_cache, public_dir) -> ManifestReader:
    return ManifestReader(manifest_cache, PUBLIC_URL, public_dir)


@pytest.fixture
def dependency_resolver(manifest_reader, public_dir) -> DependencyResolver:
    return DependencyResolver(manifest_reader, public_dir)


@pytest.fixture
def theme_asset_host(theme_dir) -> ThemeAssetHost:
    return ThemeAssetHost(THEME_URL, str(theme_dir))


@pytest.fixture
def templates_dir(tmp_path):
    templates = tmp_path / "jinja2"
    templates.mkdir()
    (templates / "page.html").write_text(
        "{{ enqueue_bundle('main') }}<head>{{ print_styles() }}</head>"
        "<body>{{ asset('scripts/main.js') }}|{{ print_footer_scripts() }}</body>",
        encoding="utf-8",
    )
    return templates


@pytest.fixture
def config(theme_dir, templates_dir) -> ConfigParser:
    parser = ConfigParser()
    parser.read_dict(
        {
            "app": {
                "environment": "test",
                "loglevel": "debug",
                "include_log_message_in_error_response": "False",
            },
            "theme": {
                "base_url": THEME_URL,
                "base_dir": str(theme_dir),
                "output_dir": "public",
                "manifest_file": "manifest.json",
                "manifest_required": "False",
                "strategy": "entrypoint",
                "namespace": "wpa",
            },
            "templates": {"jinja_path": str(templates_dir)},
        }
    )
    return parser
