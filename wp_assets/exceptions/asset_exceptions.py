import abc
from typing import Union

NOT_FOUND = "not_found"
SERVER_ERROR = "server_error"
INVALID_MANIFEST = "invalid_manifest"
HOST_UNAVAILABLE = "host_unavailable"


class AssetBaseException(Exception, abc.ABC):
    def __init__(
        self,
        *,
        error: str,
        error_description: str,
        log_message: Union[str, None] = None,
        status_code: int = 500,
    ):
        super().__init__(error_description if log_message is None else log_message)
        self.error = error
        self.error_description = error_description
        self.log_message = log_message
        self.status_code = status_code


class ManifestNotFoundException(AssetBaseException):
    def __init__(self, manifest_path: str):
        super().__init__(
            error=SERVER_ERROR,
            error_description="Manifest file is missing.",
            log_message=f"Manifest file is missing: {manifest_path}",
        )
        self.manifest_path = manifest_path


class InvalidManifestException(AssetBaseException):
    def __init__(self, manifest_path: str, log_message: Union[str, None] = None):
        super().__init__(
            error=INVALID_MANIFEST,
            error_description="Manifest file could not be parsed.",
            log_message=log_message,
        )
        self.manifest_path = manifest_path


class AssetNotFoundException(AssetBaseException):
    def __init__(self, asset_name: str):
        super().__init__(
            error=NOT_FOUND,
            error_description=f"Asset '{asset_name}' not found in the manifest.",
            status_code=404,
        )
        self.asset_name = asset_name


class AssetFileNotFoundException(AssetBaseException):
    def __init__(self, file_path: str):
        super().__init__(
            error=NOT_FOUND,
            error_description="Asset file not found.",
            log_message=f"Asset file '{file_path}' not found.",
            status_code=404,
        )
        self.file_path = file_path


class EntrypointNotFoundException(AssetBaseException):
    def __init__(self, entry: str):
        super().__init__(
            error=NOT_FOUND,
            error_description=f"Entry point '{entry}' does not exist in the manifest.",
            status_code=404,
        )
        self.entry = entry


class HostCapabilityUnavailableException(AssetBaseException):
    def __init__(self, capability: str):
        super().__init__(
            error=HOST_UNAVAILABLE,
            error_description="Required host functions are not available.",
            log_message=f"Host does not provide a callable {capability}()",
        )
        self.capability = capability


class InvalidDependencyDescriptorException(AssetBaseException):
    def __init__(self, descriptor_path: str, log_message: Union[str, None] = None):
        super().__init__(
            error=SERVER_ERROR,
            error_description="Dependency descriptor could not be parsed.",
            log_message=log_message
            or f"Unable to parse dependency descriptor {descriptor_path}",
        )
        self.descriptor_path = descriptor_path


class DependencyCycleException(AssetBaseException):
    def __init__(self, handles):
        super().__init__(
            error=SERVER_ERROR,
            error_description="Enqueued assets have circular dependencies.",
            log_message=f"Dependency cycle between handles: {', '.join(handles)}",
        )
        self.handles = list(handles)
