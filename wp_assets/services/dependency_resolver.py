import json
import logging
import re
from os import path
from typing import List, Union

from pydantic import ValidationError

from wp_assets.exceptions.asset_exceptions import InvalidDependencyDescriptorException
from wp_assets.misc.utils import file_content_raise_if_none, join_path
from wp_assets.models.asset_dependencies import AssetDependencies
from wp_assets.services.manifest_service import ManifestReader, normalize_asset_name

log = logging.getLogger(__name__)

PHP_DESCRIPTOR_SUFFIX = ".asset.php"
JSON_DESCRIPTOR_SUFFIX = ".asset.json"
SIDECAR_DIRECTORIES = ("", "scripts/")

# <?php return array('dependencies' => array('wp-element'), 'version' => 'abc');
PHP_DEPENDENCIES_RE = re.compile(
    r"""['"]dependencies['"]\s*=>\s*(?:array\s*\((?P<long>[^)]*)\)|\[(?P<short>[^\]]*)\])""",
    re.IGNORECASE,
)
PHP_VERSION_RE = re.compile(
    r"""['"]version['"]\s*=>\s*(?:['"](?P<version>[^'"]*)['"]|(?P<null>null))""",
    re.IGNORECASE,
)
PHP_STRING_RE = re.compile(r"'([^']*)'|\"([^\"]*)\"")
PHP_RETURN_RE = re.compile(r"return\s+(array\s*\(|\[)", re.IGNORECASE)


def parse_php_descriptor(content: str, descriptor_path: str) -> AssetDependencies:
    if PHP_RETURN_RE.search(content) is None:
        raise InvalidDependencyDescriptorException(
            descriptor_path,
            log_message=f"{descriptor_path} does not return an array",
        )

    dependencies: List[str] = []
    dependencies_match = PHP_DEPENDENCIES_RE.search(content)
    if dependencies_match is not None:
        listed = dependencies_match.group("long")
        if listed is None:
            listed = dependencies_match.group("short")
        dependencies = [
            single if single else double
            for single, double in PHP_STRING_RE.findall(listed)
        ]

    version = None
    version_match = PHP_VERSION_RE.search(content)
    if version_match is not None and version_match.group("null") is None:
        version = version_match.group("version")

    return AssetDependencies(dependencies=dependencies, version=version)


def parse_json_descriptor(content: str, descriptor_path: str) -> AssetDependencies:
    try:
        return AssetDependencies(**json.loads(content))
    except (json.JSONDecodeError, TypeError, ValidationError) as parse_error:
        raise InvalidDependencyDescriptorException(
            descriptor_path, log_message=str(parse_error)
        ) from parse_error


def load_descriptor(descriptor_path: str) -> AssetDependencies:
    content = file_content_raise_if_none(descriptor_path)
    if descriptor_path.endswith(".json"):
        dependencies = parse_json_descriptor(content, descriptor_path)
    else:
        dependencies = parse_php_descriptor(content, descriptor_path)
    log.debug(
        "Loaded dependency descriptor %s: %s", descriptor_path, dependencies.dependencies
    )
    return dependencies


class DependencyResolver:
    def __init__(self, manifest_reader: ManifestReader, base_dir: str):
        self._manifest_reader = manifest_reader
        self._base_dir = base_dir

    def get_dependencies(self, entry: str) -> AssetDependencies:
        entry = normalize_asset_name(entry, strip_extension=True)

        descriptor_path = self._descriptor_from_entrypoint(entry)
        if descriptor_path is None:
            descriptor_path = self._descriptor_from_sidecar(entry)

        if descriptor_path is not None:
            return load_descriptor(descriptor_path)
        return AssetDependencies()

    def get_asset_dependencies(self, asset_file: str) -> AssetDependencies:
        """
        Read an explicitly named descriptor, relative to the output directory,
        e.g. "scripts/main.asset.php". A missing file means no dependencies.
        """
        descriptor_path = join_path(self._base_dir, asset_file)
        if path.exists(descriptor_path):
            return load_descriptor(descriptor_path)

        if asset_file.endswith(PHP_DESCRIPTOR_SUFFIX):
            json_path = descriptor_path[: -len(PHP_DESCRIPTOR_SUFFIX)]
            json_path += JSON_DESCRIPTOR_SUFFIX
            if path.exists(json_path):
                return load_descriptor(json_path)

        return AssetDependencies()

    def _descriptor_from_entrypoint(self, entry: str) -> Union[str, None]:
        entrypoint = self._manifest_reader.get_entrypoint(entry)
        if entrypoint is None or not entrypoint.php:
            return None

        descriptor_path = join_path(self._base_dir, entrypoint.php[0])
        return descriptor_path if path.exists(descriptor_path) else None

    def _descriptor_from_sidecar(self, entry: str) -> Union[str, None]:
        for directory in SIDECAR_DIRECTORIES:
            for suffix in (PHP_DESCRIPTOR_SUFFIX, JSON_DESCRIPTOR_SUFFIX):
                descriptor_path = join_path(self._base_dir, directory + entry + suffix)
                if path.exists(descriptor_path):
                    return descriptor_path
        return None
