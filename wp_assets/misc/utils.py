import json
import os
from os import path
from typing import Any, Union


def file_content(filepath: Union[str, None]) -> Union[str, None]:
    if filepath is not None and path.exists(filepath):
        with open(filepath, "r", encoding="utf-8") as file:
            return file.read()
    return None


def file_content_raise_if_none(filepath: str) -> str:
    optional_file_content = file_content(filepath)
    if optional_file_content is None:
        raise ValueError(f"file_content for {filepath} shouldn't be None")
    return optional_file_content


def json_from_file(filepath: str) -> Any:
    return json.loads(file_content_raise_if_none(filepath))


def as_bool(input_str: Union[str, bool, None]) -> bool:
    if isinstance(input_str, bool):
        return input_str
    return input_str is not None and input_str.lower() == "true"


def join_url(base_url: str, asset_path: str) -> str:
    """
    Join a base url and a manifest path with exactly one slash between them.
    Manifests written with a public path of "/" prefix every value with a
    slash, others don't; both end up at the same url.
    """
    if not base_url:
        return asset_path
    return base_url.rstrip("/") + "/" + asset_path.lstrip("/")


def join_path(base_dir: str, asset_path: str) -> str:
    return os.path.join(base_dir, asset_path.lstrip("/"))
