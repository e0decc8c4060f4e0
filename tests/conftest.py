"""
Shared fixtures: Flask apps and test clients for both proxy modes.
"""
import pytest

from ipku.app import create_app
from ipku.config import Settings

REMOTE = {'REMOTE_ADDR': '127.0.0.1', 'REMOTE_PORT': '80'}


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture
def client(app):
    client = app.test_client()
    client.environ_base.update(REMOTE)
    return client


@pytest.fixture
def proxied_client():
    client = create_app(Settings(behind_proxy=True)).test_client()
    client.environ_base.update(REMOTE)
    return client
