# pylint: disable=c-extension-no-member, too-few-public-methods
from typing import Union

from dependency_injector import containers, providers

from wp_assets.dependency_injection.services import Services


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    services = providers.Container(Services, config=config)


_CONTAINER: Union[Container, None] = None


def container() -> Container:
    if _CONTAINER is None:
        raise RuntimeError("Application should first be instantiated")
    return _CONTAINER
