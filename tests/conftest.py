"""Shared fixtures: a FastAPI app standing in for an Akamai API host."""

import json
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi import Request as ServerRequest
from fastapi import Response as ServerResponse
from fastapi.testclient import TestClient

from akamai_apis import HTTPSession, Settings


class MockAPI:
    """
    Records every request it receives and answers with a canned response.

    Configure the answer with ``respond`` before calling the client under test,
    then inspect ``last`` to see what was sent.
    """

    def __init__(self):
        self.requests: list[dict[str, Any]] = []
        self.status_code = 200
        self.content = b""
        self.media_type = "application/json"
        self.response_headers: dict[str, str] = {}
        self.app = FastAPI()

        @self.app.api_route("/{path:path}", methods=["GET", "POST", "PUT", "DELETE", "PATCH"])
        async def handle(path: str, request: ServerRequest):
            raw = await request.body()
            self.requests.append({
                "method": request.method,
                "path": request.url.path,
                "query": dict(request.query_params),
                "headers": dict(request.headers),
                "json": json.loads(raw) if raw else None,
            })
            return ServerResponse(
                content=self.content,
                status_code=self.status_code,
                media_type=self.media_type,
                headers=self.response_headers,
            )

    def respond(self, status_code: int, body: Any = None, *, text: str | None = None):
        """Answer with ``body`` as JSON, or ``text`` as-is, and ``status_code``."""
        self.status_code = status_code
        if text is not None:
            self.content = text.encode()
            self.media_type = "text/plain"
        elif body is not None:
            self.content = json.dumps(body).encode()
            self.media_type = "application/json"
        else:
            self.content = b""
            self.media_type = None

    @property
    def last(self) -> dict[str, Any]:
        return self.requests[-1]

    def session(self, **settings: Any) -> HTTPSession:
        settings.setdefault("account_key", None)
        return HTTPSession(Settings(host="testserver", **settings), client=TestClient(self.app))


@pytest.fixture
def api() -> MockAPI:
    return MockAPI()


@pytest.fixture
def session(api: MockAPI) -> HTTPSession:
    return api.session()
