import pytest
from fastapi.testclient import TestClient

from hello_service.main import create_app


@pytest.fixture
def dev_client():
    return TestClient(create_app("dev"))


@pytest.fixture
def staging_client():
    return TestClient(create_app("staging"))


@pytest.fixture
def production_client():
    return TestClient(create_app("production"))
