import configparser
from typing import Any, Mapping

from wp_assets.misc.utils import as_bool
from wp_assets.models.asset_config import AssetConfig
from wp_assets.models.enums import EnqueueStrategy

_PATH = "wp_assets.conf"
_CONFIG = None


# pylint:disable=global-statement
def get_config(path=None) -> configparser.ConfigParser:
    """
    Use this method only when it's not possible to inject config variables
    """
    global _CONFIG
    global _PATH
    if path is None:
        path = _PATH
    if _CONFIG is None or _PATH != path:
        _PATH = path
        _CONFIG = configparser.ConfigParser()
        _CONFIG.read(_PATH)
    return _CONFIG


def get_config_value(section: str, name: str, default: Any = None) -> Any:
    """
    Use this method only when it's not possible to inject config variables
    """
    config = get_config()
    if section in config and name in config[section]:
        return config[section][name]
    return default


# pylint:disable=too-few-public-methods
class RouterConfig:
    health_endpoint = get_config_value("misc", "health_endpoint", "/health")
    entries_endpoint = get_config_value("misc", "entries_endpoint", "/entries")


def get_asset_config(config: configparser.ConfigParser) -> AssetConfig:
    return as_asset_config(config["theme"])


def as_asset_config(theme_section: Mapping[str, Any]) -> AssetConfig:
    """
    Build an AssetConfig from the [theme] section as loaded into the container
    """
    return AssetConfig(
        base_url=theme_section["base_url"],
        base_dir=theme_section["base_dir"],
        output_dir=theme_section.get("output_dir") or "public",
        manifest_file=theme_section.get("manifest_file") or "manifest.json",
        manifest_path=theme_section.get("manifest_path") or None,
        manifest_required=as_bool(theme_section.get("manifest_required")),
        strategy=EnqueueStrategy(
            theme_section.get("strategy") or EnqueueStrategy.ENTRYPOINT.value
        ),
        namespace=theme_section.get("namespace", "wpa"),
    )
