import logging
from typing import Dict, List, Optional, Sequence, TypeVar
from urllib.parse import urlencode, urlsplit

from markupsafe import Markup

from wp_assets.exceptions.asset_exceptions import DependencyCycleException
from wp_assets.models.enqueued_asset import EnqueuedScript, EnqueuedStyle

log = logging.getLogger(__name__)

T = TypeVar("T", EnqueuedStyle, EnqueuedScript)


def versioned_src(src: str, version: Optional[str]) -> str:
    if not version:
        return src
    separator = "&" if urlsplit(src).query else "?"
    return f"{src}{separator}{urlencode({'ver': version})}"


def order_by_dependencies(assets: Sequence[T]) -> List[T]:
    """
    Topologically sort enqueued assets so that each one comes after the
    registered assets it depends on. Handles that were never enqueued here
    (e.g. "wp-element") are provided elsewhere and don't take part.
    Enqueue order is kept wherever dependencies allow it.
    """
    by_handle = {asset.handle: asset for asset in assets}
    ordered: List[T] = []
    done: set = set()
    visiting: List[str] = []

    def visit(asset: T) -> None:
        if asset.handle in done:
            return
        if asset.handle in visiting:
            cycle = visiting[visiting.index(asset.handle) :]
            raise DependencyCycleException(cycle)
        visiting.append(asset.handle)
        for dependency in asset.dependencies:
            if dependency in by_handle:
                visit(by_handle[dependency])
        visiting.pop()
        done.add(asset.handle)
        ordered.append(asset)

    for asset in assets:
        visit(asset)
    return ordered


class ThemeAssetHost:
    """
    Request scoped registry of enqueued styles and scripts.

    Offers the two host capabilities the enqueuer relies on: the output directory
    of the theme as url and path, and enqueue_style/enqueue_script. The
    print_* methods render the registered tags for the head and footer of a
    page.
    """

    def __init__(self, base_url: str, base_dir: str):
        self._base_url = base_url
        self._base_dir = base_dir
        self._styles: Dict[str, EnqueuedStyle] = {}
        self._scripts: Dict[str, EnqueuedScript] = {}

    def base_url(self) -> str:
        return self._base_url

    def base_dir(self) -> str:
        return self._base_dir

    def enqueue_style(
        self,
        handle: str,
        src: str,
        dependencies: Optional[List[str]] = None,
        version: Optional[str] = None,
    ) -> None:
        if handle in self._styles:
            log.debug("Style %s already enqueued, ignoring %s", handle, src)
            return
        self._styles[handle] = EnqueuedStyle(
            handle=handle,
            src=src,
            dependencies=dependencies or [],
            version=version,
        )

    def enqueue_script(
        self,
        handle: str,
        src: str,
        dependencies: Optional[List[str]] = None,
        version: Optional[str] = None,
        in_footer: bool = False,
    ) -> None:
        if handle in self._scripts:
            log.debug("Script %s already enqueued, ignoring %s", handle, src)
            return
        self._scripts[handle] = EnqueuedScript(
            handle=handle,
            src=src,
            dependencies=dependencies or [],
            version=version,
            in_footer=in_footer,
        )

    def styles(self) -> List[EnqueuedStyle]:
        return order_by_dependencies(list(self._styles.values()))

    def scripts(self, in_footer: Optional[bool] = None) -> List[EnqueuedScript]:
        ordered = order_by_dependencies(list(self._scripts.values()))
        if in_footer is None:
            return ordered
        return [script for script in ordered if script.in_footer == in_footer]

    def print_styles(self) -> Markup:
        return Markup("\n").join(
            Markup('<link rel="stylesheet" id="{}-css" href="{}" media="all" />').format(
                style.handle, versioned_src(style.src, style.version)
            )
            for style in self.styles()
        )

    def print_head_scripts(self) -> Markup:
        return self._print_scripts(self.scripts(in_footer=False))

    def print_footer_scripts(self) -> Markup:
        return self._print_scripts(self.scripts(in_footer=True))

    @staticmethod
    def _print_scripts(scripts: List[EnqueuedScript]) -> Markup:
        return Markup("\n").join(
            Markup('<script src="{}" id="{}-js"></script>').format(
                versioned_src(script.src, script.version), script.handle
            )
            for script in scripts
        )
