import logging
from typing import Any, Dict, Union

from pydantic import ValidationError

from wp_assets.exceptions.asset_exceptions import (
    AssetFileNotFoundException,
    AssetNotFoundException,
    InvalidManifestException,
)
from wp_assets.misc.utils import file_content, join_path, join_url
from wp_assets.models.entrypoint_assets import EntrypointAssets
from wp_assets.services.manifest_cache import ManifestCache

log = logging.getLogger(__name__)

ENTRYPOINTS_KEY = "entrypoints"
ASSET_PREFIXES = ("scripts/", "styles/")
ASSET_EXTENSIONS = (".js", ".css")


def normalize_asset_name(name: str, strip_extension: bool = False) -> str:
    """
    Turn "scripts/main.js" or "styles/main.css" into "main".

    Only one leading "scripts/" or "styles/" is removed. The ".js" or ".css"
    suffix is removed only when strip_extension is set.
    """
    for prefix in ASSET_PREFIXES:
        if name.startswith(prefix):
            name = name[len(prefix) :]
            break

    if strip_extension:
        for extension in ASSET_EXTENSIONS:
            if name.endswith(extension):
                name = name[: -len(extension)]
                break

    return name


class ManifestReader:
    def __init__(self, manifest_cache: ManifestCache, base_url: str, base_dir: str):
        self._manifest_cache = manifest_cache
        self._base_url = base_url
        self._base_dir = base_dir

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def base_dir(self) -> str:
        return self._base_dir

    def get_manifest(self) -> Dict[str, Any]:
        return self._manifest_cache.manifest

    def asset_exists(self, name: str) -> bool:
        return name in self.get_manifest()

    def try_resolve(self, name: str) -> str:
        manifest = self.get_manifest()
        resolved = manifest.get(name)
        if isinstance(resolved, str):
            return resolved
        log.debug("Asset %s not in manifest, falling back to unhashed name", name)
        return name

    def must_resolve(self, name: str) -> str:
        manifest = self.get_manifest()
        if isinstance(manifest.get(name), str):
            return manifest[name]

        normalized = normalize_asset_name(name)
        if isinstance(manifest.get(normalized), str):
            return manifest[normalized]

        raise AssetNotFoundException(normalized)

    def resolve_asset_url(self, name: str) -> str:
        return join_url(self._base_url, self.try_resolve(name))

    def resolve_asset_url_strict(self, name: str) -> str:
        return join_url(self._base_url, self.must_resolve(name))

    def resolve_asset_path(self, name: str) -> str:
        return join_path(self._base_dir, self.must_resolve(name))

    def resolve_asset_content(self, name: str) -> str:
        file_path = self.resolve_asset_path(name)
        content = file_content(file_path)
        if content is None:
            raise AssetFileNotFoundException(file_path)
        return content

    def get_entrypoints(self) -> Dict[str, EntrypointAssets]:
        entrypoints = self.get_manifest().get(ENTRYPOINTS_KEY)
        if not isinstance(entrypoints, dict):
            return {}
        return {
            name: self._entrypoint_assets(name, descriptor)
            for name, descriptor in entrypoints.items()
            if isinstance(descriptor, dict)
        }

    def get_entrypoint(self, entry: str) -> Union[EntrypointAssets, None]:
        entrypoints = self.get_manifest().get(ENTRYPOINTS_KEY)
        if not isinstance(entrypoints, dict):
            return None
        descriptor = entrypoints.get(entry)
        if not isinstance(descriptor, dict):
            return None
        return self._entrypoint_assets(entry, descriptor)

    def _entrypoint_assets(
        self, entry: str, descriptor: Dict[str, Any]
    ) -> EntrypointAssets:
        assets = descriptor.get("assets")
        if assets is None:
            return EntrypointAssets()
        if not isinstance(assets, dict):
            raise InvalidManifestException(
                self._manifest_cache.manifest_path,
                log_message=f"Assets of entry point {entry} must be an object",
            )

        # a null category means the entry has no files of that type
        try:
            return EntrypointAssets(
                **{
                    category: files
                    for category, files in assets.items()
                    if files is not None
                }
            )
        except ValidationError as validation_error:
            raise InvalidManifestException(
                self._manifest_cache.manifest_path,
                log_message=f"Invalid assets for entry point {entry}: {validation_error}",
            ) from validation_error
