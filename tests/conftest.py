"""Shared fixtures for the regional API client tests."""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from wow_regional_api import ClientSettings, RegionalAPIClient

REGIONS = {
    "eu": {
        "name": "Europe",
        "realms": {"draenor": "Draenor", "silvermoon": "Silvermoon"},
    },
    "us": {"name": "Americas"},
}

TOKEN_HOST = "eu.battle.net"
OAUTH_API_HOST = "eu.api.blizzard.com"
KEY_API_HOST = "eu.api.battle.net"
ICON_HOST = "render-eu.worldofwarcraft.com"


def write_json(path: Path, value: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(value), encoding="utf-8")


class FakeAPI:
    """Records requests and answers them from a route table."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self._token_count = 0

    def route(self, method: str, host: str, path: str, status: int = 200, **kwargs) -> None:
        """Answer a route with a fresh response built from ``kwargs``."""
        self._routes[(method, host, path)] = lambda request: httpx.Response(status, **kwargs)

    def route_handler(self, method: str, host: str, path: str, handler) -> None:
        self._routes[(method, host, path)] = handler

    def issue_tokens(self, host: str = TOKEN_HOST) -> None:
        """Answer token requests with token-1, token-2, ..."""
        def handler(request):
            self._token_count += 1
            return httpx.Response(
                200,
                json={
                    "access_token": f"token-{self._token_count}",
                    "token_type": "bearer",
                    "expires_in": 86399,
                },
            )

        self.route_handler("POST", host, "/oauth/token", handler)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.host, request.url.path))
        if route is None:
            return httpx.Response(404, json={"status": "nok", "reason": "Not found"})
        return route(request)

    def sent(self, method: Optional[str] = None) -> List[httpx.Request]:
        return [r for r in self.requests if method is None or r.method == method]


@pytest.fixture
def fake_api():
    api = FakeAPI()
    api.issue_tokens()
    return api


@pytest.fixture
def http_client(fake_api):
    client = httpx.Client(transport=httpx.MockTransport(fake_api.handler))
    yield client
    client.close()


@pytest.fixture
def settings(tmp_path):
    return ClientSettings(
        _env_file=None,
        config_dir=tmp_path / "cfg",
        characters_dir=tmp_path / "characters",
        icons_dir=tmp_path / "icons",
    )


@pytest.fixture
def oauth_config(settings):
    write_json(settings.api_config_path, {"clientKey": "client-id", "clientSecret": "client-secret"})


@pytest.fixture
def key_config(settings):
    write_json(settings.api_config_path, {"key": "static-key"})


@pytest.fixture
def region_file(settings):
    write_json(settings.region_path, REGIONS)
    return settings.region_path


@pytest.fixture
def api(settings, oauth_config, region_file, http_client):
    client = RegionalAPIClient(settings=settings, http_client=http_client)
    yield client
    client.close()


@pytest.fixture
def key_api(settings, key_config, region_file, http_client):
    client = RegionalAPIClient(settings=settings, http_client=http_client)
    yield client
    client.close()
