import os
from typing import Any

import httpx
import pytest

# Set environment variables before petgallery.configs.config builds the settings
os.environ.setdefault("PETGALLERY_API_KEY", "test_api_key")
os.environ.setdefault("PETGALLERY_LOGGING_VERBOSITY_LEVEL", "WARNING")

from petgallery.configs.settings_models import Settings  # noqa: E402

CAT_HOST = "api.thecatapi.com"
DOG_HOST = "api.thedogapi.com"

CAT_BREEDS = [
    {"id": "abys", "name": "Abyssinian", "origin": "Egypt", "temperament": "Active, Energetic"},
    {"id": "beng", "name": "Bengal", "origin": "United States", "temperament": "Alert, Agile"},
    {"id": "sphy", "name": "Sphynx", "origin": "Canada", "temperament": "Loyal, Inquisitive"},
]

DOG_BREEDS = [
    {"id": 1, "name": "Affenpinscher", "life_span": "10 - 12 years"},
    {"id": 2, "name": "Afghan Hound", "life_span": "10 - 13 years"},
]

CAT_IMAGES = [
    {
        "id": "0XYvRd7oD",
        "url": "https://cdn2.thecatapi.com/images/0XYvRd7oD.jpg",
        "width": 1204,
        "height": 1445,
        "breeds": [{"id": "abys", "name": "Abyssinian"}],
    },
    {"id": "9ccXTANkb", "url": "https://cdn2.thecatapi.com/images/9ccXTANkb.jpg"},
]

BENGAL_IMAGES = [
    {
        "id": "O3btzLlsO",
        "url": "https://cdn2.thecatapi.com/images/O3btzLlsO.png",
        "breeds": [{"id": "beng", "name": "Bengal"}],
    }
]

DOG_IMAGES = [
    {
        "id": "BJa4kxc4X",
        "url": "https://cdn2.thedogapi.com/images/BJa4kxc4X.jpg",
        "breeds": [{"id": 1, "name": "Affenpinscher"}],
    }
]


class FakePetApi:
    """
    In-memory stand-in for TheCatAPI / TheDogAPI served through ``httpx.MockTransport``.

    Responses are keyed by host, path and the ``breed_ids`` query parameter
    (None for unfiltered searches). Every request is recorded.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str, str | None], Any] = {}

    def route(
        self,
        host: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        breed_ids: str | None = None,
        exc: Exception | None = None,
    ) -> None:
        self._routes[(host, path, breed_ids)] = exc if exc is not None else (status_code, json)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.url.host, request.url.path, request.url.params.get("breed_ids"))
        if key not in self._routes:
            return httpx.Response(404, json={"message": "not found"})
        route = self._routes[key]
        if isinstance(route, Exception):
            raise route
        status_code, body = route
        return httpx.Response(status_code, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, path: str, host: str | None = None) -> list[httpx.Request]:
        return [
            r
            for r in self.requests
            if r.url.path == path and (host is None or r.url.host == host)
        ]


@pytest.fixture
def fake_api() -> FakePetApi:
    api = FakePetApi()
    api.route(CAT_HOST, "/v1/breeds", json=CAT_BREEDS)
    api.route(DOG_HOST, "/v1/breeds", json=DOG_BREEDS)
    api.route(CAT_HOST, "/v1/images/search", json=CAT_IMAGES)
    api.route(CAT_HOST, "/v1/images/search", json=BENGAL_IMAGES, breed_ids="beng")
    api.route(DOG_HOST, "/v1/images/search", json=DOG_IMAGES)
    return api


@pytest.fixture
def test_settings() -> Settings:
    settings = Settings()
    settings.api.key = "test_api_key"
    settings.gallery.supersede_stale = False
    settings.gallery.page_size = 20
    return settings
