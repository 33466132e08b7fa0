import pytest


def test_home_serves_file_contents(client, home_html):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.content == home_html


def test_creator_serves_file_contents(client, creator_html):
    response = client.get("/creator")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert response.content == creator_html


@pytest.mark.parametrize("path", ["/", "/creator"])
def test_pages_are_idempotent(client, path):
    bodies = {client.get(path).content for _ in range(5)}
    assert len(bodies) == 1


def test_page_edits_visible_without_restart(client, settings, home_html):
    """Files are re-read on every request, never cached"""
    assert client.get("/").content == home_html

    updated = b"<html><body>Updated home</body></html>"
    settings.home_path.write_bytes(updated)

    assert client.get("/").content == updated


def test_non_utf8_bytes_served_verbatim(client, settings):
    raw = b"<html>\xff\xfe latin-1 \xe9</html>"
    settings.creator_path.write_bytes(raw)
    assert client.get("/creator").content == raw


def test_missing_home_file_returns_server_error(client, settings):
    settings.home_path.unlink()

    response = client.get("/")
    assert response.status_code == 500
    assert response.json()["detail"].startswith("Internal server error:")

    # The rest of the app keeps serving
    assert client.get("/creator").status_code == 200
    assert client.get("/ping").status_code == 200


def test_unreadable_path_returns_server_error(client, settings):
    # A directory in place of the file fails the read
    settings.creator_path.unlink()
    settings.creator_path.mkdir()

    response = client.get("/creator")
    assert response.status_code == 500


@pytest.mark.parametrize("path", ["/", "/creator"])
def test_head_request_is_answered(client, path):
    response = client.head(path)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")


def test_head_not_in_schema(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert set(paths["/"]) == {"get"}
    assert set(paths["/creator"]) == {"get"}
