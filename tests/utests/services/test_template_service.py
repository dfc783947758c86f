import os
from unittest.mock import MagicMock

import pytest

import wp_assets
from wp_assets import get_version
from wp_assets.services.bundle_enqueuer import BundleEnqueuer
from wp_assets.services.template_service import TemplateService
from wp_assets.services.theme_asset_host import ThemeAssetHost

PUBLIC_URL = "http://localhost:8008/wp-content/themes/demo/public"


@pytest.fixture
def template_service(templates_dir, manifest_reader, dependency_resolver, theme_dir):
    def host_factory() -> ThemeAssetHost:
        return ThemeAssetHost(PUBLIC_URL, str(theme_dir))

    def bundle_enqueuer_factory(host) -> BundleEnqueuer:
        return BundleEnqueuer(manifest_reader, dependency_resolver, host)

    return TemplateService(
        str(templates_dir), manifest_reader, host_factory, bundle_enqueuer_factory
    )


def test_globals(template_service):
    env_globals = template_service.templates.env.globals

    assert env_globals["asset"]("scripts/main.js") == PUBLIC_URL + "/scripts/main.1a2b3c.js"
    assert env_globals["asset_content"]("styles/main.css") == "body { margin: 0; }"
    assert env_globals["wp_assets_version"] == get_version()


def test_render_layout(template_service):
    request = MagicMock()

    response = template_service.render_layout(request, "page.html")
    body = response.body.decode("utf-8")

    assert response.status_code == 200
    assert (
        '<link rel="stylesheet" id="wpa/main-style-css" '
        f'href="{PUBLIC_URL}/styles/main.4d5e6f.css" media="all" />' in body
    )
    assert PUBLIC_URL + "/scripts/main.1a2b3c.js|" in body
    assert (
        f'<script src="{PUBLIC_URL}/scripts/main.1a2b3c.js?ver=8f3a2c1b" '
        'id="wpa/main-script-js"></script>' in body
    )


def test_render_layout_uses_a_fresh_host_per_render(template_service, templates_dir):
    (templates_dir / "empty.html").write_text("[{{ print_styles() }}]", encoding="utf-8")
    request = MagicMock()

    template_service.render_layout(request, "page.html")
    response = template_service.render_layout(request, "empty.html")

    assert response.body.decode("utf-8") == "[]"


def test_page_context_overrides_defaults(template_service, templates_dir):
    (templates_dir / "title.html").write_text("{{ page_title }}", encoding="utf-8")

    response = template_service.render_layout(
        MagicMock(), "title.html", {"page_title": "Home"}, status_code=404
    )

    assert response.body == b"Home"
    assert response.status_code == 404


def test_packaged_layout(manifest_reader, dependency_resolver, theme_dir):
    layout_dir = os.path.join(os.path.dirname(wp_assets.__file__), "jinja2")
    service = TemplateService(
        layout_dir,
        manifest_reader,
        lambda: ThemeAssetHost(PUBLIC_URL, str(theme_dir)),
        lambda host: BundleEnqueuer(manifest_reader, dependency_resolver, host),
    )

    response = service.render_layout(
        MagicMock(), "layout.html", {"entries": ["main", "editor"], "page_title": "Demo"}
    )
    body = response.body.decode("utf-8")

    assert "<title>Demo</title>" in body
    assert body.index('id="wpa/main-style-css"') < body.index("</head>")
    assert body.index('id="wpa/editor-script-js"') > body.index("<body>")
    assert body.index('id="wpa/main-script-js"') < body.index('id="wpa/editor-script-js"')
