from __future__ import annotations

import httpx
import pytest

from cursefetch.config import ClientSettings

API = "/api/v2"

CATALOG = [
    {"id": 1, "name": "Foo"},
    {"id": 5927, "name": "World of Warcraft"},
]


def addon_json(addon_id, name, files=()):
    return {
        "id": addon_id,
        "name": name,
        "websiteUrl": f"https://www.curseforge.com/wow/addons/{name.lower()}",
        "latestFiles": [
            {
                "fileName": file_name,
                "downloadUrl": f"https://edge.forgecdn.net/files/{addon_id}/{file_name}",
                "gameVersion": list(versions),
            }
            for file_name, versions in files
        ],
    }


class FakeServer:
    """Route table behind an httpx.MockTransport, recording every request."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, response=None, *, error=None):
        self.routes[(method, path)] = (response, error)

    def json(self, method, path, payload, status=200):
        self.add(method, path, lambda request: httpx.Response(status, json=payload))

    def raw(self, method, path, content, status=200):
        self.add(method, path, lambda request: httpx.Response(status, content=content))

    def fail(self, method, path, error_cls=httpx.ConnectError):
        self.add(method, path, error=error_cls)

    def handler(self, request):
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        response, error = route
        if error is not None:
            raise error("simulated failure", request=request)
        return response(request)

    def requests_to(self, path):
        return [r for r in self.requests if r.url.path == path]


@pytest.fixture
def server():
    srv = FakeServer()
    srv.json("GET", f"{API}/game", CATALOG)
    return srv


@pytest.fixture
def http(server):
    with httpx.Client(transport=httpx.MockTransport(server.handler)) as client:
        yield client


@pytest.fixture
def settings():
    return ClientSettings()


@pytest.fixture
def strict_settings():
    return ClientSettings(strict_decoding=True)
