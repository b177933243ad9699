"""
Async client for TheCatAPI / TheDogAPI.

Each animal type lives on its own host (``https://api.thecatapi.com``,
``https://api.thedogapi.com``); both expose the same ``/v1/breeds`` and
``/v1/images/search`` endpoints and authenticate with a static ``x-api-key``
header.
"""

from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from petgallery.configs.logging_init import logger
from petgallery.configs.settings_models import PetApiConfig
from petgallery.gallery.errors import HttpStatusError, NetworkFailure, PayloadError
from petgallery.models.pets import AnimalImage, AnimalType, Breed

_breeds_adapter = TypeAdapter(list[Breed])
_images_adapter = TypeAdapter(list[AnimalImage])


class PetApiClient:
    """Thin wrapper around ``httpx.AsyncClient`` translating failures to ``PetGalleryError``."""

    def __init__(
        self,
        config: Optional[PetApiConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config if config is not None else PetApiConfig()
        self._client = httpx.AsyncClient(timeout=self.config.timeout, transport=transport)

    async def __aenter__(self) -> "PetApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        if not self.config.key:
            return {}
        return {"x-api-key": self.config.key}

    async def _get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        logger.debug(f"GET {url} params={params}")
        try:
            response = await self._client.get(url, params=params, headers=self._headers())
        except httpx.HTTPError as e:
            raise NetworkFailure(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.warning(f"GET {url} answered {response.status_code}: {response.text[:200]}")
            raise HttpStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise PayloadError(f"Invalid JSON in response: {e}") from e

    async def get_breeds(self, animal_type: AnimalType) -> list[Breed]:
        """Fetch the breed catalog of ``animal_type``."""
        url = f"{self.config.base_url(animal_type)}/v1/breeds"
        data = await self._get_json(url)
        try:
            breeds = _breeds_adapter.validate_python(data)
        except ValidationError as e:
            raise PayloadError(f"Unexpected breed payload: {e.error_count()} validation errors") from e
        logger.info(f"Fetched {len(breeds)} {AnimalType(animal_type).value} breeds")
        return breeds

    async def search_images(
        self,
        animal_type: AnimalType,
        breed_id: Optional[str] = None,
        limit: int = 20,
    ) -> list[AnimalImage]:
        """Fetch up to ``limit`` images of ``animal_type``, optionally of one breed."""
        url = f"{self.config.base_url(animal_type)}/v1/images/search"
        params: dict[str, Any] = {"breed_ids": breed_id, "limit": limit} if breed_id else {"limit": limit}
        data = await self._get_json(url, params=params)
        try:
            images = _images_adapter.validate_python(data)
        except ValidationError as e:
            raise PayloadError(f"Unexpected image payload: {e.error_count()} validation errors") from e
        logger.info(
            f"Fetched {len(images)} {AnimalType(animal_type).value} images"
            + (f" for breed {breed_id}" if breed_id else "")
        )
        return images
