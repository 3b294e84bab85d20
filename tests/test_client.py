"""Tests for the main CodeEngineClient class."""

import httpx
import pytest

from codeengine_client import CodeEngineClient
from codeengine_client.auth import BearerTokenAuthenticator, NoAuthAuthenticator
from codeengine_client.config import DEFAULT_MAX_RETRIES, DEFAULT_MAX_RETRY_INTERVAL, DEFAULT_SERVICE_URL
from codeengine_client.endpoints import AppsClient, ProjectsClient, SecretsClient
from codeengine_client.exceptions import ValidationError

from tests.conftest import SERVICE_URL


class TestClientInitialization:
    """Tests for client initialization."""

    def test_defaults(self):
        client = CodeEngineClient()
        assert client.get_service_url() == DEFAULT_SERVICE_URL
        assert isinstance(client.authenticator, NoAuthAuthenticator)
        assert client.config.timeout == 30.0
        assert not client.config.retry_policy.enabled
        assert not client.get_enable_gzip_compression()

    def test_custom_settings(self):
        client = CodeEngineClient(
            SERVICE_URL + "/",
            headers={"X-Custom": "value"},
            timeout=60.0,
            enable_gzip_compression=True,
            max_retries=2,
            max_retry_interval=5,
        )
        assert client.get_service_url() == SERVICE_URL
        assert client.config.default_headers == {"X-Custom": "value"}
        assert client.config.timeout == 60.0
        assert client.config.retry_policy.max_retries == 2
        assert client.config.retry_policy.max_retry_interval == 5

    @pytest.mark.parametrize("url", ["", "not a url", "/relative/path"])
    def test_invalid_service_url(self, url):
        with pytest.raises(ValidationError):
            CodeEngineClient(url)

    def test_repr(self):
        assert repr(CodeEngineClient(SERVICE_URL)) == f"CodeEngineClient(service_url={SERVICE_URL!r})"

    def test_regional_urls_not_supported(self):
        with pytest.raises(ValidationError):
            CodeEngineClient.get_service_url_for_region("us-east")


class TestClientConfiguration:
    """Tests for configuration setters."""

    def test_set_service_url(self):
        client = CodeEngineClient()
        client.set_service_url("https://api.us-east.codeengine.cloud.ibm.com/v2/")
        assert client.get_service_url() == "https://api.us-east.codeengine.cloud.ibm.com/v2"
        assert client.http.base_url == "https://api.us-east.codeengine.cloud.ibm.com/v2"

    def test_set_service_url_rejects_empty(self):
        client = CodeEngineClient()
        with pytest.raises(ValidationError):
            client.set_service_url("")
        assert client.get_service_url() == DEFAULT_SERVICE_URL

    def test_enable_retries_defaults(self):
        client = CodeEngineClient()
        client.enable_retries()
        policy = client.config.retry_policy
        assert policy.max_retries == DEFAULT_MAX_RETRIES
        assert policy.max_retry_interval == DEFAULT_MAX_RETRY_INTERVAL

    def test_enable_retries_explicit(self):
        client = CodeEngineClient()
        client.enable_retries(2, 10)
        assert client.config.retry_policy.max_retries == 2
        assert client.config.retry_policy.max_retry_interval == 10.0

    def test_enable_retries_rejects_negative(self):
        with pytest.raises(ValidationError):
            CodeEngineClient().enable_retries(-1)

    def test_disable_retries(self):
        client = CodeEngineClient(max_retries=3)
        client.disable_retries()
        assert not client.config.retry_policy.enabled

    def test_gzip_toggle(self):
        client = CodeEngineClient()
        client.set_enable_gzip_compression(True)
        assert client.get_enable_gzip_compression()
        assert client.http.config.enable_gzip_compression

    @pytest.mark.asyncio
    async def test_default_headers_sent(self, server):
        server.queue(httpx.Response(200, json={}))
        client = CodeEngineClient(SERVICE_URL, transport=server.transport)
        client.set_default_headers({"X-Tenant": "t1"})

        await client.projects.get("proj-1")

        assert server.last_request.headers["X-Tenant"] == "t1"

    @pytest.mark.asyncio
    async def test_constructor_headers_not_overridden(self, server):
        server.queue(httpx.Response(200, json={"id": "proj-1"}))
        client = CodeEngineClient(
            SERVICE_URL,
            headers={"User-Agent": "my-app/1.0", "Accept": "application/vnd.x+json"},
            transport=server.transport,
        )

        await client.projects.get("proj-1")

        assert server.last_request.headers["User-Agent"] == "my-app/1.0"
        assert server.last_request.headers["Accept"] == "application/vnd.x+json"


class TestClone:
    """Tests for clone()."""

    def test_clone_has_independent_config(self):
        auth = BearerTokenAuthenticator("token")
        original = CodeEngineClient(SERVICE_URL, authenticator=auth, headers={"X-A": "1"})

        copy = original.clone()
        copy.set_service_url("https://other.example.test/v2")
        copy.config.default_headers["X-B"] = "2"
        copy.enable_retries()

        assert original.get_service_url() == SERVICE_URL
        assert original.config.default_headers == {"X-A": "1"}
        assert not original.config.retry_policy.enabled
        assert copy.authenticator is auth
        assert copy.http is not original.http

    @pytest.mark.asyncio
    async def test_clone_sends_requests(self, server):
        server.queue(httpx.Response(200, json={"id": "proj-1"}))
        original = CodeEngineClient(SERVICE_URL, transport=server.transport)

        project = await original.clone().projects.get("proj-1")

        assert project.id == "proj-1"


class TestEndpointClients:
    """Tests for lazy endpoint properties."""

    def test_endpoint_types(self, client):
        assert isinstance(client.projects, ProjectsClient)
        assert isinstance(client.apps, AppsClient)
        assert isinstance(client.secrets, SecretsClient)

    def test_endpoints_are_cached(self, client):
        assert client.projects is client.projects
        assert client.config_maps is client.config_maps

    def test_all_endpoints_available(self, client):
        for name in (
            "projects",
            "reclamations",
            "allowed_outbound_destinations",
            "apps",
            "jobs",
            "builds",
            "bindings",
            "config_maps",
            "secrets",
            "domain_mappings",
        ):
            assert getattr(client, name) is not None


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_context_manager(self, server):
        async with CodeEngineClient(SERVICE_URL, transport=server.transport) as client:
            assert client.http._client is not None
        assert client.http._client is None

    @pytest.mark.asyncio
    async def test_close(self, client):
        await client.http._get_client()
        await client.close()
        assert client.http._client is None


class TestWithRespx:
    """Requests through the default httpx transport, intercepted by respx."""

    @pytest.mark.asyncio
    async def test_get_project(self, respx_mock, project_data):
        route = respx_mock.get("/projects/proj-1").mock(return_value=httpx.Response(200, json=project_data))

        async with CodeEngineClient(SERVICE_URL, authenticator=BearerTokenAuthenticator("tkn")) as client:
            project = await client.projects.get("proj-1")

        assert project.id == "proj-1"
        assert route.called
        assert route.calls.last.request.headers["Authorization"] == "Bearer tkn"

    @pytest.mark.asyncio
    async def test_retries_enabled_from_client(self, respx_mock):
        route = respx_mock.get("/projects/proj-1").mock(
            side_effect=[
                httpx.Response(429, json={"message": "slow down"}, headers={"Retry-After": "0"}),
                httpx.Response(200, json={"id": "proj-1"}),
            ]
        )

        client = CodeEngineClient(SERVICE_URL)
        client.enable_retries(max_retries=1)
        project = await client.projects.get("proj-1")
        await client.close()

        assert project.id == "proj-1"
        assert route.call_count == 2
