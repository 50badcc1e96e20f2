"""Tests for the HTTP surface."""

import pytest
from fastapi.testclient import TestClient

from fileurl.core.config import Settings
from fileurl.controllers import HealthController
from fileurl.main_rcs import create_app
from fileurl.services.health_service import HealthService
from fileurl.stream_wrappers import CdnStreamWrapper, LocalStreamWrapper, StreamWrapperRegistry


@pytest.fixture
def client():
    return TestClient(create_app(Settings(_env_file=None, CDN_BASE_URL="https://cdn.example.com")))


@pytest.fixture
def canonical_client():
    return TestClient(create_app(Settings(_env_file=None, BASE_URL="https://example.com/drupal/")))


class TestFileUrlEndpoint:
    """Tests for GET /files/url."""

    def test_relative_url(self, client):
        """Test local files come back root-relative."""
        response = client.get("/files/url", params={"uri": "public://cat.jpg"})
        assert response.status_code == 200
        assert response.json() == {
            "uri": "public://cat.jpg",
            "url": "/sites/default/files/cat.jpg",
            "absolute": False,
        }

    def test_absolute_url_uses_request_host(self, client):
        """Test absolute URLs are built from the request's scheme and host."""
        response = client.get("/files/url", params={"uri": "public://cat.jpg", "absolute": "true"})
        assert response.status_code == 200
        assert response.json()["url"] == "http://testserver/sites/default/files/cat.jpg"

    def test_remote_url(self, client):
        """Test CDN files stay absolute."""
        response = client.get("/files/url", params={"uri": "cdn://logo.png"})
        assert response.json()["url"] == "https://cdn.example.com/logo.png"

    def test_shipped_file(self, client):
        """Test shipped files are base-path prefixed."""
        response = client.get("/files/url", params={"uri": "core/misc/druplicon.png"})
        assert response.json()["url"] == "/core/misc/druplicon.png"

    def test_canonical_base_url(self, canonical_client):
        """Test a configured BASE_URL replaces the request context."""
        response = canonical_client.get("/files/url", params={"uri": "public://cat.jpg"})
        assert response.json()["url"] == "/drupal/sites/default/files/cat.jpg"

        response = canonical_client.get("/files/url", params={"uri": "public://cat.jpg", "absolute": "true"})
        assert response.json()["url"] == "https://example.com/drupal/sites/default/files/cat.jpg"

    def test_unregistered_scheme(self, client):
        """Test unregistered schemes map to 400."""
        response = client.get("/files/url", params={"uri": "foo://bar.txt"})
        assert response.status_code == 400
        assert "foo" in response.json()["detail"]

    def test_blank_uri(self, client):
        """Test a blank URI is rejected."""
        response = client.get("/files/url", params={"uri": "  "})
        assert response.status_code == 400
        assert response.json()["detail"] == "URI is required"

    def test_uri_whitespace_preserved(self, client):
        """Test a non-blank URI reaches the generator unchanged."""
        body = client.get("/files/url", params={"uri": "core/a.png "}).json()
        assert body["uri"] == "core/a.png "
        assert body["url"] == "/core/a.png "

    def test_missing_uri(self, client):
        """Test the uri parameter is required."""
        assert client.get("/files/url").status_code == 422


class TestDescriptorEndpoint:
    """Tests for GET /files/descriptor."""

    def test_local_descriptor(self, client):
        """Test both renderings of a local file."""
        response = client.get("/files/descriptor", params={"uri": "private://report.pdf"})
        assert response.status_code == 200
        assert response.json() == {
            "uri": "private://report.pdf",
            "url": "/system/files/report.pdf",
            "absolute_url": "http://testserver/system/files/report.pdf",
            "external": False,
        }

    def test_remote_descriptor(self, client):
        """Test CDN descriptors are external."""
        body = client.get("/files/descriptor", params={"uri": "cdn://logo.png"}).json()
        assert body["external"] is True
        assert body["url"] == body["absolute_url"] == "https://cdn.example.com/logo.png"

    def test_unregistered_scheme(self, client):
        """Test unregistered schemes map to 400."""
        assert client.get("/files/descriptor", params={"uri": "foo://bar.txt"}).status_code == 400


class TestRelativeEndpoint:
    """Tests for GET /files/relative."""

    def test_local_url(self, client):
        """Test URLs on the request host are relativized."""
        response = client.get("/files/relative", params={"url": "http://testserver/sites/x.jpg?v=1"})
        assert response.status_code == 200
        assert response.json() == {
            "url": "http://testserver/sites/x.jpg?v=1",
            "relative_url": "/sites/x.jpg?v=1",
            "changed": True,
        }

    def test_foreign_url(self, client):
        """Test URLs on other hosts are unchanged."""
        body = client.get("/files/relative", params={"url": "https://cdn.example.com/x.png"}).json()
        assert body["relative_url"] == "https://cdn.example.com/x.png"
        assert body["changed"] is False

    def test_base_path_relative(self, canonical_client):
        """Test root_relative=false strips the base path."""
        params = {"url": "https://example.com/drupal/sites/x.jpg", "root_relative": "false"}
        body = canonical_client.get("/files/relative", params=params).json()
        assert body["relative_url"] == "/sites/x.jpg"


class TestServiceEndpoints:
    """Tests for schemes, health and root endpoints."""

    def test_schemes(self, client):
        """Test registered schemes are listed."""
        response = client.get("/files/schemes")
        assert response.json() == {"schemes": ["cdn", "private", "public", "temporary"]}

    def test_health(self, client):
        """Test health reports the registry."""
        response = client.get("/health/")
        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["stream_wrappers"] == 4

    def test_health_without_wrappers(self):
        """Test an empty registry is reported unhealthy."""
        client = TestClient(create_app(Settings(_env_file=None), registry=StreamWrapperRegistry()))
        assert client.get("/health/").json()["ok"] is False

    def test_root(self, client):
        """Test the root endpoint describes the service."""
        body = client.get("/").json()
        assert body["health"] == "/health/"
        assert "public" in body["schemes"]

    def test_injected_registry(self):
        """Test the app uses an injected registry."""
        registry = StreamWrapperRegistry({
            "media": LocalStreamWrapper("/media"),
            "remote": CdnStreamWrapper("https://remote.example.org"),
        })
        client = TestClient(create_app(Settings(_env_file=None), registry=registry))

        assert client.get("/files/url", params={"uri": "media://a.png"}).json()["url"] == "/media/a.png"
        assert client.get("/files/url", params={"uri": "public://a.png"}).status_code == 400


class TestHealthService:
    """Tests for the health service result shape."""

    def test_registered_wrappers(self):
        """Test a populated registry is a successful check."""
        result = HealthService(StreamWrapperRegistry({"media": LocalStreamWrapper("/media")})).check_system_health()
        assert result["success"] is True
        assert result["error_code"] is None
        assert result["data"] == {"ok": True, "stream_wrappers": 1, "schemes": ["media"]}

    def test_empty_registry(self):
        """Test an empty registry fails the check with an error code."""
        result = HealthService(StreamWrapperRegistry()).check_system_health()
        assert result["success"] is False
        assert result["error_code"] == "NO_STREAM_WRAPPERS"
        assert result["data"]["ok"] is False

    def test_controller_response(self):
        """Test the controller maps the service result to a response."""
        response = HealthController(StreamWrapperRegistry()).check_health()
        assert response.ok is False
        assert response.stream_wrappers == 0
        assert response.schemes == []


class TestCreateApp:
    """Tests for application start-up."""

    @pytest.mark.parametrize("base_url", ["/relative", "example.com/drupal", "https://example.com:abc/"])
    def test_invalid_base_url_fails_at_startup(self, base_url):
        """Test a malformed BASE_URL is rejected when the app is created."""
        with pytest.raises(ValueError):
            create_app(Settings(_env_file=None, BASE_URL=base_url))

    def test_base_url_parsed_once(self):
        """Test the configured BASE_URL is stored as the app's context."""
        app = create_app(Settings(_env_file=None, BASE_URL="https://Example.com/drupal"))
        assert app.state.base_url_context.origin == "https://example.com"
        assert app.state.base_url_context.base_path == "/drupal/"

    def test_no_base_url(self):
        """Test without BASE_URL each request supplies the context."""
        assert create_app(Settings(_env_file=None)).state.base_url_context is None
