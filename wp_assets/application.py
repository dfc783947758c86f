# pylint: disable=c-extension-no-member
import logging
from configparser import ConfigParser
from os import path
from typing import Callable, List, Tuple, Type, Union

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import wp_assets.dependency_injection.container
from wp_assets import get_version
from wp_assets.dependency_injection.config import get_asset_config, get_config
from wp_assets.dependency_injection.container import Container
from wp_assets.exceptions.asset_exception_handlers import general_exception_handler
from wp_assets.exceptions.asset_exceptions import AssetBaseException
from wp_assets.routers.entries_router import entries_router
from wp_assets.routers.misc_router import misc_router

_exception_handlers: List[Tuple[Union[int, Type[Exception]], Callable]] = [
    (AssetBaseException, general_exception_handler),
    (Exception, general_exception_handler),
]


def kwargs_from_config():
    config = get_config()

    return {
        "host": config.get("uvicorn", "host"),
        "port": config.getint("uvicorn", "port"),
        "reload": config.getboolean("uvicorn", "reload"),
        "proxy_headers": True,
        "workers": config.getint("uvicorn", "workers"),
        "factory": True,
    }


def _add_exception_handlers(fastapi: FastAPI):
    for tup in _exception_handlers:
        fastapi.add_exception_handler(tup[0], tup[1])


def run():
    uvicorn.run("wp_assets.application:create_fastapi_app", **kwargs_from_config())


def create_fastapi_app(
    config: Union[ConfigParser, None] = None, container: Union[Container, None] = None
) -> FastAPI:
    container = container if container is not None else Container()
    _config: ConfigParser = config if config is not None else get_config()
    loglevel = logging.getLevelName(_config.get("app", "loglevel").upper())

    if isinstance(loglevel, str):
        raise ValueError(f"Invalid loglevel {loglevel.upper()}")
    logging.basicConfig(
        level=loglevel,
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )

    modules = [
        "wp_assets.routers.misc_router",
        "wp_assets.routers.entries_router",
        "wp_assets.exceptions.asset_exception_handlers",
    ]
    container.config.from_dict(
        {section: dict(_config[section]) for section in _config.sections()}
    )
    asset_config = get_asset_config(_config)

    fastapi = FastAPI(
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        version=get_version(),
    )
    fastapi.include_router(misc_router)
    fastapi.include_router(entries_router)
    if path.isdir(asset_config.public_dir):
        fastapi.mount(
            "/" + asset_config.output_dir.strip("/"),
            StaticFiles(directory=asset_config.public_dir),
            name="static",
        )
    container.wire(modules=modules)
    fastapi.container = container  # type: ignore
    wp_assets.dependency_injection.container._CONTAINER = (  # pylint: disable=protected-access
        container
    )
    _add_exception_handlers(fastapi)
    return fastapi
