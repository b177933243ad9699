import httpx
import pytest

from petgallery.configs.settings_models import PetApiConfig
from petgallery.gallery.api_client import PetApiClient
from petgallery.gallery.errors import HttpStatusError, NetworkFailure, PayloadError
from petgallery.models.pets import AnimalType
from petgallery.tests.conftest import CAT_HOST, DOG_HOST


def make_client(fake_api, key="test_api_key") -> PetApiClient:
    return PetApiClient(PetApiConfig(key=key), transport=fake_api.transport)


class TestGetBreeds:
    @pytest.mark.asyncio
    async def test_fetches_cat_breeds(self, fake_api):
        async with make_client(fake_api) as client:
            breeds = await client.get_breeds(AnimalType.CAT)

        assert [b.id for b in breeds] == ["abys", "beng", "sphy"]
        assert breeds[1].model_extra["origin"] == "United States"

        (request,) = fake_api.calls("/v1/breeds")
        assert request.url.host == CAT_HOST
        assert request.url.scheme == "https"

    @pytest.mark.asyncio
    async def test_dog_breeds_use_dog_host(self, fake_api):
        async with make_client(fake_api) as client:
            breeds = await client.get_breeds(AnimalType.DOG)

        assert [b.id for b in breeds] == ["1", "2"]
        assert fake_api.calls("/v1/breeds", host=DOG_HOST)
        assert not fake_api.calls("/v1/breeds", host=CAT_HOST)

    @pytest.mark.asyncio
    async def test_sends_api_key_header(self, fake_api):
        async with make_client(fake_api) as client:
            await client.get_breeds(AnimalType.CAT)

        assert fake_api.requests[0].headers["x-api-key"] == "test_api_key"

    @pytest.mark.asyncio
    async def test_no_header_without_key(self, fake_api):
        async with make_client(fake_api, key=None) as client:
            await client.get_breeds(AnimalType.CAT)

        assert "x-api-key" not in fake_api.requests[0].headers

    @pytest.mark.asyncio
    async def test_http_error_status(self, fake_api):
        fake_api.route(CAT_HOST, "/v1/breeds", json={"message": "boom"}, status_code=500)

        async with make_client(fake_api) as client:
            with pytest.raises(HttpStatusError) as exc_info:
                await client.get_breeds(AnimalType.CAT)

        assert exc_info.value.status_code == 500
        assert str(exc_info.value) == "HTTP error! status: 500"

    @pytest.mark.asyncio
    async def test_network_failure(self, fake_api):
        fake_api.route(CAT_HOST, "/v1/breeds", exc=httpx.ConnectError("Connection refused"))

        async with make_client(fake_api) as client:
            with pytest.raises(NetworkFailure, match="Connection refused"):
                await client.get_breeds(AnimalType.CAT)

    @pytest.mark.asyncio
    async def test_unexpected_payload(self, fake_api):
        fake_api.route(CAT_HOST, "/v1/breeds", json={"not": "a list"})

        async with make_client(fake_api) as client:
            with pytest.raises(PayloadError):
                await client.get_breeds(AnimalType.CAT)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>"))

        async with PetApiClient(PetApiConfig(key="k"), transport=transport) as client:
            with pytest.raises(PayloadError, match="Invalid JSON"):
                await client.get_breeds(AnimalType.CAT)


class TestSearchImages:
    @pytest.mark.asyncio
    async def test_unfiltered_search(self, fake_api):
        async with make_client(fake_api) as client:
            images = await client.search_images(AnimalType.CAT, limit=20)

        assert [i.id for i in images] == ["0XYvRd7oD", "9ccXTANkb"]
        assert images[0].breed_name == "Abyssinian"
        assert images[1].breed_name == "Unknown Breed"

        (request,) = fake_api.calls("/v1/images/search")
        assert dict(request.url.params) == {"limit": "20"}

    @pytest.mark.asyncio
    async def test_breed_filter(self, fake_api):
        async with make_client(fake_api) as client:
            images = await client.search_images(AnimalType.CAT, breed_id="beng", limit=5)

        assert [i.id for i in images] == ["O3btzLlsO"]
        (request,) = fake_api.calls("/v1/images/search")
        assert dict(request.url.params) == {"breed_ids": "beng", "limit": "5"}

    @pytest.mark.asyncio
    async def test_custom_url_template(self, fake_api):
        fake_api.route("pets.example.com", "/cat/v1/images/search", json=[])
        config = PetApiConfig(key="k", url_template="https://pets.example.com/{animal_type}")

        async with PetApiClient(config, transport=fake_api.transport) as client:
            images = await client.search_images(AnimalType.CAT)

        assert images == []
        assert fake_api.requests[0].url.path == "/cat/v1/images/search"

    @pytest.mark.asyncio
    async def test_http_error_status(self, fake_api):
        fake_api.route(DOG_HOST, "/v1/images/search", json=None, status_code=429)

        async with make_client(fake_api) as client:
            with pytest.raises(HttpStatusError, match="HTTP error! status: 429"):
                await client.search_images(AnimalType.DOG)
