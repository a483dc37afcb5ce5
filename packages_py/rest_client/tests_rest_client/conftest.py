"""
Shared fixtures for rest_client tests.
"""
from unittest.mock import MagicMock

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from rest_client import AsyncHttpxTransport, RestClient

BASE_URL = "http://testserver"
API_KEY_HEADER = "x-api-key"
API_KEY = "helloWorld42!"
APPLICATION_JSON = "application/json"


def create_echo_app() -> FastAPI:
    """Test API with one route per verb and an x-api-key protected /private."""
    app = FastAPI()

    @app.middleware("http")
    async def require_api_key(request: Request, call_next):
        if request.method != "OPTIONS" and request.url.path.startswith("/private"):
            key = request.headers.get(API_KEY_HEADER)
            if key is None:
                return JSONResponse({"error": f"Missing header {API_KEY_HEADER}"}, status_code=401)
            if key != API_KEY:
                return JSONResponse({"error": f"Invalid header {API_KEY_HEADER}"}, status_code=403)
        return await call_next(request)

    @app.get("/private")
    async def private():
        return {"private": True}

    @app.delete("/delete/{id}", status_code=204)
    async def delete(id: str):
        return Response(status_code=204)

    @app.get("/get/{id}")
    async def get(id: str):
        return {"id": id}

    @app.head("/head/{id}")
    async def head(id: str):
        return Response(status_code=204, headers={"success": "true"})

    @app.options("/options")
    async def options():
        return Response(status_code=204, headers={"success": "true"})

    @app.patch("/patch/{id}")
    async def patch(id: str, request: Request):
        return {"id": id, **(await request.json())}

    @app.post("/post/{id}", status_code=201)
    async def post(id: str, request: Request):
        return {"id": id, **(await request.json())}

    @app.put("/put/{id}")
    async def put(id: str, request: Request):
        return {"id": id, **(await request.json())}

    @app.api_route(
        "/echo/{path:path}",
        methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    )
    async def echo(path: str, request: Request):
        body = await request.body()
        return {
            "method": request.method,
            "url": str(request.url),
            "headers": dict(request.headers),
            "body": body.decode("utf-8"),
        }

    return app


def echo_handler(request: httpx.Request) -> httpx.Response:
    """httpx.MockTransport handler echoing the request back as JSON."""
    return httpx.Response(
        200,
        json={
            "method": request.method,
            "url": str(request.url),
            "headers": dict(request.headers),
            "body": request.content.decode("utf-8"),
        },
    )


@pytest.fixture
def echo_app():
    return create_echo_app()


@pytest.fixture
def recording_transport():
    """Transport double that records calls and returns a sentinel."""
    return MagicMock(name="transport", return_value=object())


@pytest.fixture
def client(recording_transport):
    """RestClient wired to the recording transport."""
    return RestClient(BASE_URL, {"Accept": APPLICATION_JSON}, recording_transport)


@pytest.fixture
def sync_echo_client():
    """httpx.Client echoing requests through MockTransport."""
    http = httpx.Client(transport=httpx.MockTransport(echo_handler))
    yield http
    http.close()


@pytest_asyncio.fixture
async def api_client(echo_app):
    """RestClient talking to the echo app through ASGITransport."""
    http = httpx.AsyncClient(transport=httpx.ASGITransport(app=echo_app))
    transport = AsyncHttpxTransport(httpx_client=http)
    client = RestClient(BASE_URL, {"Accept": APPLICATION_JSON}, transport)
    yield client
    await http.aclose()


def sent_options(transport: MagicMock) -> dict:
    """Options passed on the last transport call."""
    return transport.call_args.args[1]


def sent_url(transport: MagicMock) -> str:
    """URL passed on the last transport call."""
    return transport.call_args.args[0]
