import pytest
from fastapi.testclient import TestClient

from sxyz_api.config import Settings
from sxyz_api.main import create_app


@pytest.fixture
def home_html():
    return b"<!DOCTYPE html><html><body><h1>Home</h1></body></html>\n"


@pytest.fixture
def creator_html():
    return b"<!DOCTYPE html><html><body><h1>Creator</h1></body></html>\n"


@pytest.fixture
def settings(tmp_path, home_html, creator_html):
    home = tmp_path / "home.html"
    creator = tmp_path / "creator.html"
    home.write_bytes(home_html)
    creator.write_bytes(creator_html)
    return Settings(home_path=home, creator_path=creator)


@pytest.fixture
def client(settings):
    # Fresh app per test so rate-limit counters start from zero
    with TestClient(create_app(settings)) as c:
        yield c
