"""
End-to-end tests against a FastAPI app served through httpx.ASGITransport.
Logic testing: Path, Decision/Branch coverage
"""
import httpx
import pytest

from conftest import API_KEY, API_KEY_HEADER, APPLICATION_JSON, BASE_URL
from rest_client import AsyncHttpxTransport, RestClient


class TestVerbsAgainstApp:
    """Each verb shortcut against its route."""

    @pytest.mark.asyncio
    async def test_delete(self, api_client):
        response = await api_client.delete("/delete/1")

        assert response.status == 204
        assert await response.text() == ""

    @pytest.mark.asyncio
    async def test_fetch(self, api_client):
        response = await api_client.fetch("/get/2")
        assert await response.json() == {"id": "2"}

    @pytest.mark.asyncio
    async def test_get(self, api_client):
        response = await api_client.get("/get/3")

        assert response.status == 200
        assert await response.json() == {"id": "3"}

    @pytest.mark.asyncio
    async def test_head(self, api_client):
        response = await api_client.head("/head/3")

        assert response.status == 204
        assert response.headers["success"] == "true"
        assert await response.text() == ""

    @pytest.mark.asyncio
    async def test_options(self, api_client):
        response = await api_client.options("/options")

        assert response.status == 204
        assert await response.text() == ""

    @pytest.mark.asyncio
    async def test_patch(self, api_client):
        body = {"patched": True}
        response = await api_client.patch(
            "/patch/4", body, {"headers": {"content-type": APPLICATION_JSON}}
        )

        assert response.status == 200
        assert await response.json() == {"id": "4", **body}

    @pytest.mark.asyncio
    async def test_post(self, api_client):
        body = {"posted": True}
        response = await api_client.post(
            "/post/5", body, {"headers": {"content-type": APPLICATION_JSON}}
        )

        assert response.status == 201
        assert await response.json() == {"id": "5", **body}

    @pytest.mark.asyncio
    async def test_put(self, api_client):
        body = {"putted": True}
        response = await api_client.put(
            "/put/6", body, {"headers": {"Content-Type": APPLICATION_JSON}}
        )

        assert response.status == 200
        assert await response.json() == {"id": "6", **body}


class TestHeadersAgainstApp:
    """Header handling observed by the app."""

    # Path: per-call header reaches the app
    @pytest.mark.asyncio
    async def test_call_header(self, api_client):
        response = await api_client.get("/private", {"headers": {API_KEY_HEADER: API_KEY}})

        assert response.status == 200
        assert await response.json() == {"private": True}

    # Path: default header set after construction reaches the app
    @pytest.mark.asyncio
    async def test_default_header(self, api_client):
        api_client.set_header("X-API-Key", API_KEY)
        response = await api_client.get("/private")

        assert response.status == 200

    # Decision: missing key yields 401, returned not raised
    @pytest.mark.asyncio
    async def test_missing_key(self, api_client):
        response = await api_client.get("/private")

        assert response.status == 401
        assert response.ok is False
        assert await response.json() == {"error": f"Missing header {API_KEY_HEADER}"}

    # Decision: wrong key yields 403
    @pytest.mark.asyncio
    async def test_wrong_key(self, api_client):
        response = await api_client.get("/private", headers={"X-Api-Key": "nope"})
        assert response.status == 403


class TestEcho:
    """Requests as seen by the echo route."""

    @pytest.mark.asyncio
    async def test_delete_echo(self, api_client):
        response = await api_client.delete("/echo/delete/1")
        data = await response.json()

        assert data["method"] == "DELETE"
        assert data["url"].endswith("/delete/1")

    @pytest.mark.asyncio
    async def test_get_ignores_method_override(self, api_client):
        response = await api_client.get("/echo/g", {"method": "PUT"})
        data = await response.json()

        assert data["method"] == "GET"

    @pytest.mark.asyncio
    async def test_json_body_serialized(self, api_client):
        response = await api_client.post(
            "/echo/p", {"a": 1}, {"headers": {"content-type": APPLICATION_JSON}}
        )
        data = await response.json()

        assert data["method"] == "POST"
        assert data["body"] == '{"a":1}'
        assert data["headers"]["content-type"] == APPLICATION_JSON
        assert data["headers"]["accept"] == APPLICATION_JSON

    @pytest.mark.asyncio
    async def test_query_params_passthrough(self, api_client):
        response = await api_client.get("/echo/search", params={"q": "rest"})
        data = await response.json()

        assert data["url"] == f"{BASE_URL}/echo/search?q=rest"

    # Path: absolute URL bypasses base URL
    @pytest.mark.asyncio
    async def test_absolute_url(self, echo_app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=echo_app)) as http:
            client = RestClient("http://unused.invalid", transport=AsyncHttpxTransport(http))
            response = await client.get("http://other.example/echo/x")
            data = await response.json()

        assert data["url"] == "http://other.example/echo/x"

    # Path: base URL with prefix
    @pytest.mark.asyncio
    async def test_base_url_prefix(self, echo_app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=echo_app)) as http:
            client = RestClient(f"{BASE_URL}/echo/", transport=AsyncHttpxTransport(http))
            response = await client.get("/nested/1")
            data = await response.json()

        assert data["url"] == f"{BASE_URL}/echo/nested/1"
