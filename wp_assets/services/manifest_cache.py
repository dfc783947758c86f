import json
import logging
from os import path
from typing import Any, Dict, Union

from wp_assets.exceptions.asset_exceptions import (
    InvalidManifestException,
    ManifestNotFoundException,
)
from wp_assets.misc.utils import json_from_file

log = logging.getLogger(__name__)


class ManifestCache:
    """
    Lazily loads the bundler manifest the first time it is needed and keeps it
    for the lifetime of this object. Owners share one instance per process;
    tests create their own.
    """

    def __init__(self, manifest_path: str, required: bool = False) -> None:
        self._manifest_path = manifest_path
        self._required = required
        self._manifest: Union[Dict[str, Any], None] = None
        self._load_count = 0

    @property
    def manifest_path(self) -> str:
        return self._manifest_path

    @property
    def loaded(self) -> bool:
        return self._manifest is not None

    @property
    def load_count(self) -> int:
        return self._load_count

    @property
    def manifest(self) -> Dict[str, Any]:
        if self._manifest is None:
            self._manifest = self._load()
        return self._manifest

    def reset(self) -> None:
        self._manifest = None

    def _load(self) -> Dict[str, Any]:
        if not path.exists(self._manifest_path):
            if self._required:
                raise ManifestNotFoundException(self._manifest_path)
            log.warning(
                "Manifest file %s does not exist, using an empty manifest",
                self._manifest_path,
            )
            self._load_count += 1
            return {}

        self._load_count += 1
        try:
            manifest = json_from_file(self._manifest_path)
        except json.JSONDecodeError as decode_error:
            raise InvalidManifestException(
                self._manifest_path, log_message=str(decode_error)
            ) from decode_error

        if not isinstance(manifest, dict):
            raise InvalidManifestException(
                self._manifest_path,
                log_message=f"Expected a JSON object in {self._manifest_path}",
            )
        log.debug("Loaded manifest %s with %d keys", self._manifest_path, len(manifest))
        return manifest
