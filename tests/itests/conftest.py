import pytest
from fastapi.testclient import TestClient

from wp_assets.application import create_fastapi_app
from wp_assets.dependency_injection.container import Container


@pytest.fixture
def container() -> Container:
    return Container()


@pytest.fixture
def app(config, container) -> TestClient:
    return TestClient(create_fastapi_app(config, container))
