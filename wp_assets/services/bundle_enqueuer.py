import logging
from os import path
from typing import Any, Dict, Iterable, List, Optional

from wp_assets.exceptions.asset_exceptions import (
    EntrypointNotFoundException,
    HostCapabilityUnavailableException,
)
from wp_assets.misc.utils import join_path, join_url
from wp_assets.models.asset_dependencies import AssetDependencies
from wp_assets.models.enqueued_asset import (
    EnqueuedAsset,
    EnqueuedScript,
    EnqueuedStyle,
)
from wp_assets.models.enums import EnqueueStrategy
from wp_assets.services.dependency_resolver import DependencyResolver, load_descriptor
from wp_assets.services.manifest_service import ManifestReader, normalize_asset_name

log = logging.getLogger(__name__)

REQUIRED_HOST_CAPABILITIES = ("enqueue_style", "enqueue_script")


class BundleEnqueuer:
    def __init__(
        self,
        manifest_reader: ManifestReader,
        dependency_resolver: DependencyResolver,
        host: Any,
        strategy: EnqueueStrategy = EnqueueStrategy.ENTRYPOINT,
        default_namespace: str = "wpa",
    ):
        self._manifest_reader = manifest_reader
        self._dependency_resolver = dependency_resolver
        self._host = host
        self._strategy = EnqueueStrategy(strategy)
        self._default_namespace = default_namespace
        self._included_descriptors: Dict[str, AssetDependencies] = {}

    @property
    def strategy(self) -> EnqueueStrategy:
        return self._strategy

    @property
    def included_descriptors(self) -> List[str]:
        return list(self._included_descriptors)

    @property
    def included_dependencies(self) -> Dict[str, AssetDependencies]:
        return dict(self._included_descriptors)

    def enqueue_bundle(
        self, entry: str, namespace: Optional[str] = None
    ) -> List[EnqueuedAsset]:
        if not entry:
            return []

        self._ensure_host_capabilities()

        if self._strategy == EnqueueStrategy.FLAT:
            return self._enqueue_flat(entry, namespace or "")
        return self._enqueue_entrypoint(
            entry, self._default_namespace if namespace is None else namespace
        )

    def enqueue_bundles(
        self, entries: Iterable[str], namespace: Optional[str] = None
    ) -> List[EnqueuedAsset]:
        enqueued: List[EnqueuedAsset] = []
        for entry in entries:
            enqueued.extend(self.enqueue_bundle(entry, namespace))
        return enqueued

    def _ensure_host_capabilities(self) -> None:
        for capability in REQUIRED_HOST_CAPABILITIES:
            if not callable(getattr(self._host, capability, None)):
                raise HostCapabilityUnavailableException(capability)

    def _enqueue_flat(self, entry: str, namespace: str) -> List[EnqueuedAsset]:
        if namespace:
            entry = f"{namespace}/{entry}"

        dependencies = self._dependency_resolver.get_asset_dependencies(
            f"scripts/{entry}.asset.php"
        )
        enqueued: List[EnqueuedAsset] = []

        style_name = f"styles/{entry}.css"
        if self._manifest_reader.asset_exists(style_name):
            enqueued.append(
                self._enqueue_style(
                    entry,
                    self._manifest_reader.resolve_asset_url(style_name),
                    AssetDependencies(version=dependencies.version),
                )
            )

        script_name = f"scripts/{entry}.js"
        if self._manifest_reader.asset_exists(script_name):
            enqueued.append(
                self._enqueue_script(
                    entry,
                    self._manifest_reader.resolve_asset_url(script_name),
                    dependencies,
                )
            )

        if not enqueued:
            log.debug("No styles or scripts in manifest for bundle %s", entry)
        return enqueued

    def _enqueue_entrypoint(self, entry: str, namespace: str) -> List[EnqueuedAsset]:
        normalized_entry = normalize_asset_name(entry, strip_extension=True)

        assets = self._manifest_reader.get_entrypoint(normalized_entry)
        if assets is None:
            raise EntrypointNotFoundException(entry)

        prefix = f"{namespace}/{normalized_entry}" if namespace else normalized_entry
        base_url = self._manifest_reader.base_url
        enqueued: List[EnqueuedAsset] = []

        for css in assets.css:
            enqueued.append(
                self._enqueue_style(
                    f"{prefix}-style", join_url(base_url, css), AssetDependencies()
                )
            )

        if assets.js:
            dependencies = self._dependency_resolver.get_dependencies(normalized_entry)
            for js in assets.js:
                enqueued.append(
                    self._enqueue_script(
                        f"{prefix}-script", join_url(base_url, js), dependencies
                    )
                )

        self._include_descriptors(assets.php)
        return enqueued

    def _include_descriptors(self, descriptor_files: List[str]) -> None:
        for descriptor_file in descriptor_files:
            descriptor_path = join_path(self._manifest_reader.base_dir, descriptor_file)
            if descriptor_path in self._included_descriptors:
                continue
            if not path.exists(descriptor_path):
                log.debug("Descriptor %s listed but not on disk", descriptor_path)
                continue
            self._included_descriptors[descriptor_path] = load_descriptor(
                descriptor_path
            )

    def _enqueue_style(
        self, handle: str, src: str, dependencies: AssetDependencies
    ) -> EnqueuedStyle:
        self._host.enqueue_style(
            handle, src, dependencies.dependencies, dependencies.version
        )
        return EnqueuedStyle(
            handle=handle,
            src=src,
            dependencies=dependencies.dependencies,
            version=dependencies.version,
        )

    def _enqueue_script(
        self, handle: str, src: str, dependencies: AssetDependencies
    ) -> EnqueuedScript:
        self._host.enqueue_script(
            handle, src, dependencies.dependencies, dependencies.version, True
        )
        return EnqueuedScript(
            handle=handle,
            src=src,
            dependencies=dependencies.dependencies,
            version=dependencies.version,
            in_footer=True,
        )
