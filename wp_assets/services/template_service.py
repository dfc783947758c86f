from typing import Callable, Optional

from fastapi.templating import Jinja2Templates
from starlette.requests import Request
from starlette.templating import _TemplateResponse

from wp_assets import get_version
from wp_assets.services.bundle_enqueuer import BundleEnqueuer
from wp_assets.services.manifest_service import ManifestReader
from wp_assets.services.theme_asset_host import ThemeAssetHost


class TemplateService:
    def __init__(
        self,
        jinja_template_directory: str,
        manifest_reader: ManifestReader,
        host_factory: Callable[[], ThemeAssetHost],
        bundle_enqueuer_factory: Callable[..., BundleEnqueuer],
    ):
        self._manifest_reader = manifest_reader
        self._host_factory = host_factory
        self._bundle_enqueuer_factory = bundle_enqueuer_factory

        self._templates = Jinja2Templates(directory=jinja_template_directory)

        self._templates.env.globals["asset"] = self._manifest_reader.resolve_asset_url
        self._templates.env.globals["asset_content"] = (
            self._manifest_reader.resolve_asset_content
        )
        self._templates.env.globals["wp_assets_version"] = get_version()

    @property
    def templates(self) -> Jinja2Templates:
        return self._templates

    def render_layout(
        self,
        request: Request,
        template_name: str,
        page_context: Optional[dict] = None,
        status_code: int = 200,
    ) -> _TemplateResponse:
        host = self._host_factory()
        enqueuer = self._bundle_enqueuer_factory(host=host)

        def enqueue_bundle(entry: str, namespace: Optional[str] = None) -> str:
            enqueuer.enqueue_bundle(entry, namespace)
            return ""

        default_context = {
            "request": request,
            "enqueue_bundle": enqueue_bundle,
            "print_styles": host.print_styles,
            "print_head_scripts": host.print_head_scripts,
            "print_footer_scripts": host.print_footer_scripts,
        }

        context = {**default_context, **(page_context or {})}
        return self.templates.TemplateResponse(
            template_name, context, status_code=status_code
        )
