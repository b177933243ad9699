"""
Gallery state container.

All UI-visible state lives in a single ``QueryState`` snapshot. Snapshots are
never mutated: ``reduce`` derives the next one from the current snapshot and
an action, and ``GalleryStore`` is the only place that swaps snapshots.

Overlapping requests race on the shared ``is_loading``/``error`` slots and on
the data sets. Every request action carries a generation number so that the
race is visible in the action stream; with ``supersede_stale`` enabled the
store drops outcomes of requests that a newer request of the same kind has
superseded, otherwise the last dispatched action wins.
"""

from enum import Enum
from typing import ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from petgallery.configs.logging_init import format_pydantic, logger
from petgallery.gallery.errors import NO_MATCH_MESSAGE
from petgallery.models.pets import AnimalImage, AnimalType, Breed


class RequestKind(str, Enum):
    BREEDS = "breeds"
    IMAGES = "images"


class QueryState(BaseModel):
    animal_type: AnimalType = AnimalType.CAT
    breeds: list[Breed] = Field(default_factory=list)
    images: list[AnimalImage] = Field(default_factory=list)
    # "" means all breeds
    selected_breed: str = ""
    search_term: str = ""
    is_loading: bool = False
    error: Optional[str] = None
    breeds_generation: int = 0
    images_generation: int = 0

    def generation(self, kind: RequestKind) -> int:
        return getattr(self, f"{RequestKind(kind).value}_generation")


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


class Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class AnimalTypeSelected(Action):
    animal_type: AnimalType


class BreedSelected(Action):
    breed_id: str = ""


class SearchTermChanged(Action):
    term: str = ""


class SearchMissed(Action):
    pass


class RequestAction(Action):
    """Base for actions belonging to one network request."""

    kind: ClassVar[RequestKind]
    generation: int


class BreedsRequested(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.BREEDS


class BreedsReceived(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.BREEDS
    breeds: list[Breed]


class BreedsFailed(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.BREEDS
    message: str


class BreedsSettled(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.BREEDS


class ImagesRequested(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.IMAGES


class ImagesReceived(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.IMAGES
    images: list[AnimalImage]


class ImagesFailed(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.IMAGES
    message: str


class ImagesSettled(RequestAction):
    kind: ClassVar[RequestKind] = RequestKind.IMAGES


# ---------------------------------------------------------------------------
# Reducer
# ---------------------------------------------------------------------------


def reduce(state: QueryState, action: Action) -> QueryState:
    """
    Return the snapshot that results from applying ``action`` to ``state``.

    Data sets are replaced wholesale, never merged. A failure only touches the
    error slot, so the previously loaded set stays on screen.
    """
    if isinstance(action, AnimalTypeSelected):
        return state.model_copy(
            update={
                "animal_type": AnimalType(action.animal_type),
                "selected_breed": "",
                "search_term": "",
            }
        )
    if isinstance(action, BreedSelected):
        return state.model_copy(update={"selected_breed": action.breed_id})
    if isinstance(action, SearchTermChanged):
        return state.model_copy(update={"search_term": action.term})
    if isinstance(action, SearchMissed):
        return state.model_copy(update={"error": NO_MATCH_MESSAGE})

    if isinstance(action, BreedsRequested):
        # Prior errors are kept; only image requests reset the slot
        return state.model_copy(
            update={"is_loading": True, "breeds_generation": action.generation}
        )
    if isinstance(action, ImagesRequested):
        return state.model_copy(
            update={"is_loading": True, "error": None, "images_generation": action.generation}
        )
    if isinstance(action, BreedsReceived):
        return state.model_copy(update={"breeds": list(action.breeds)})
    if isinstance(action, ImagesReceived):
        return state.model_copy(update={"images": list(action.images)})
    if isinstance(action, BreedsFailed | ImagesFailed):
        return state.model_copy(update={"error": action.message})
    if isinstance(action, BreedsSettled | ImagesSettled):
        return state.model_copy(update={"is_loading": False})

    raise TypeError(f"Unknown action: {type(action).__name__}")


class GalleryStore:
    """Owns the current ``QueryState`` and applies actions to it in dispatch order."""

    def __init__(self, state: Optional[QueryState] = None, supersede_stale: bool = False):
        self._state = state if state is not None else QueryState()
        self.supersede_stale = supersede_stale
        self._issued = {kind: self._state.generation(kind) for kind in RequestKind}

    @property
    def state(self) -> QueryState:
        return self._state

    def next_generation(self, kind: RequestKind) -> int:
        """Issue a new generation number for a request of ``kind``."""
        kind = RequestKind(kind)
        self._issued[kind] += 1
        return self._issued[kind]

    def is_stale(self, action: Action) -> bool:
        if not isinstance(action, RequestAction):
            return False
        return action.generation < self._state.generation(action.kind)

    def dispatch(self, action: Action) -> QueryState:
        if self.supersede_stale and self.is_stale(action):
            logger.debug(
                f"Dropping {type(action).__name__} for superseded {action.kind.value} "
                f"request {action.generation}"
            )
            return self._state

        self._state = reduce(self._state, action)
        logger.debug(f"{type(action).__name__} -> {format_pydantic(self._state)}")
        return self._state
