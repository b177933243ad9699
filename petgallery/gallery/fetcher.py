"""
Gallery data fetcher.

Bridges the pet API client and the gallery store. Every operation turns the
outcome of its request into actions on the store and never raises a
``PetGalleryError`` past its own boundary: failures end up as a message in the
single error slot of ``QueryState``.

Overlapping operations are not cancelled. Whether a superseded request may
still overwrite newer results is decided by the store (``supersede_stale``).
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Sequence

import httpx

from petgallery.configs.logging_init import logger
from petgallery.configs.settings_models import Settings
from petgallery.gallery.api_client import PetApiClient
from petgallery.gallery.errors import NoMatchFound, PetGalleryError
from petgallery.models.pets import AnimalType, Breed
from petgallery.models.state import (
    AnimalTypeSelected,
    BreedSelected,
    BreedsFailed,
    BreedsReceived,
    BreedsRequested,
    BreedsSettled,
    GalleryStore,
    ImagesFailed,
    ImagesReceived,
    ImagesRequested,
    ImagesSettled,
    QueryState,
    RequestKind,
    SearchMissed,
    SearchTermChanged,
)


def find_breed(term: str, breeds: Sequence[Breed]) -> Breed:
    """
    Return the first breed whose name contains ``term``, ignoring case.

    An empty term matches the first breed.

    Raises:
        NoMatchFound: if no breed name contains ``term``
    """
    needle = term.lower()
    for breed in breeds:
        if needle in breed.name.lower():
            return breed
    raise NoMatchFound(term)


class GalleryFetcher:
    def __init__(self, api: PetApiClient, store: Optional[GalleryStore] = None, page_size: int = 20):
        self.api = api
        self.store = store if store is not None else GalleryStore()
        self.page_size = page_size

    @property
    def state(self) -> QueryState:
        return self.store.state

    async def load_breeds(self, animal_type: AnimalType) -> None:
        """Replace the breed set with the catalog of ``animal_type``."""
        animal_type = AnimalType(animal_type)
        generation = self.store.next_generation(RequestKind.BREEDS)
        self.store.dispatch(BreedsRequested(generation=generation))
        try:
            breeds = await self.api.get_breeds(animal_type)
            self.store.dispatch(BreedsReceived(generation=generation, breeds=breeds))
        except PetGalleryError as e:
            message = f"Error fetching {animal_type.value} breeds: {e}"
            logger.error(message)
            self.store.dispatch(BreedsFailed(generation=generation, message=message))
        finally:
            self.store.dispatch(BreedsSettled(generation=generation))

    async def load_images(self, animal_type: AnimalType, breed_id: Optional[str] = None) -> None:
        """Replace the image set with one page of ``animal_type`` images, optionally of one breed."""
        animal_type = AnimalType(animal_type)
        generation = self.store.next_generation(RequestKind.IMAGES)
        self.store.dispatch(ImagesRequested(generation=generation))
        try:
            images = await self.api.search_images(
                animal_type, breed_id=breed_id or None, limit=self.page_size
            )
            self.store.dispatch(ImagesReceived(generation=generation, images=images))
        except PetGalleryError as e:
            message = f"Error fetching {animal_type.value}s: {e}"
            logger.error(message)
            self.store.dispatch(ImagesFailed(generation=generation, message=message))
        finally:
            self.store.dispatch(ImagesSettled(generation=generation))

    async def search_breed(
        self, term: str, breeds: Optional[Sequence[Breed]] = None
    ) -> Optional[Breed]:
        """
        Select the first breed whose name contains ``term`` and load its images.

        Args:
            term: Search term, matched case-insensitively as a substring
            breeds: Breeds to search; defaults to the currently loaded set

        Returns:
            The matched breed, or None when nothing matched. On a miss the
            error slot is set and the displayed images are left as they are.
        """
        self.store.dispatch(SearchTermChanged(term=term))
        if breeds is None:
            breeds = self.state.breeds

        try:
            breed = find_breed(term, breeds)
        except NoMatchFound:
            logger.info(f"No breed matches search term {term!r}")
            self.store.dispatch(SearchMissed())
            return None

        logger.info(f"Search term {term!r} matched breed {breed.id} ({breed.name})")
        self.store.dispatch(BreedSelected(breed_id=breed.id))
        await self.load_images(self.state.animal_type, breed.id)
        return breed

    async def select_breed(self, breed_id: str) -> None:
        """Select ``breed_id`` ("" for all breeds) and reload the images."""
        self.store.dispatch(BreedSelected(breed_id=breed_id or ""))
        await self.load_images(self.state.animal_type, breed_id or None)

    async def select_animal_type(self, animal_type: AnimalType) -> None:
        """
        Switch to ``animal_type``: clear the breed and search selection, then
        fetch the breed catalog and one unfiltered page of images.
        """
        animal_type = AnimalType(animal_type)
        self.store.dispatch(AnimalTypeSelected(animal_type=animal_type))
        await asyncio.gather(self.load_breeds(animal_type), self.load_images(animal_type))


@asynccontextmanager
async def open_fetcher(
    settings: Settings,
    state: Optional[QueryState] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    page_size: Optional[int] = None,
) -> AsyncIterator[GalleryFetcher]:
    """
    Yield a fetcher working on ``state`` with an API client that is closed on exit.

    Args:
        settings: Application settings (API access, page size, supersession)
        state: Snapshot to continue from; a fresh state on the configured
            default animal type when None
        transport: Optional httpx transport, used by tests
        page_size: Images per query; the configured page size when None
    """
    if state is None:
        state = QueryState(animal_type=settings.gallery.default_animal_type)
    if page_size is None:
        page_size = settings.gallery.page_size
    store = GalleryStore(state, supersede_stale=settings.gallery.supersede_stale)
    async with PetApiClient(settings.api, transport=transport) as api:
        yield GalleryFetcher(api, store, page_size=page_size)
