"""
Callback registration for the Pet Gallery Dash application.

The gallery state lives client-side in the ``gallery-state`` store. Each
callback rebuilds a ``GalleryStore`` from that snapshot, runs one fetcher
operation and writes the resulting snapshot back, so overlapping callbacks
race on the store and the last one to answer wins.
"""

from typing import Any, Optional

from dash import MATCH, Input, Output, State, no_update
from dash.exceptions import PreventUpdate

from petgallery.configs.config import settings
from petgallery.configs.logging_init import logger
from petgallery.dash.layouts.app_layout import build_breed_options, build_image_grid, image_grid_key
from petgallery.gallery.fetcher import open_fetcher
from petgallery.gallery.lazy_image import LazyImageLoader
from petgallery.models.pets import AnimalType
from petgallery.models.state import QueryState

LOADER_RUNNING = (
    Output("gallery-loader", "style"),
    {"display": "flex", "padding": "2rem"},
    {"display": "none", "padding": "2rem"},
)
ERROR_STYLE = {"textAlign": "center", "margin": "1rem 0"}


def _load_state(state_data: Optional[dict[str, Any]]) -> QueryState:
    if not state_data:
        return QueryState(animal_type=settings.gallery.default_animal_type)
    return QueryState.model_validate(state_data)


def _dump_state(state: QueryState) -> dict[str, Any]:
    return state.model_dump(mode="json")


async def change_animal_type(animal_type: Optional[str], state_data: Optional[dict]):
    """Switch animal type: reset breed and search inputs, refetch breeds and images."""
    animal_type = AnimalType(animal_type or settings.gallery.default_animal_type)
    logger.info(f"Animal type selected: {animal_type.value}")
    async with open_fetcher(settings, _load_state(state_data)) as fetcher:
        await fetcher.select_animal_type(animal_type)
    return _dump_state(fetcher.state), None, ""


async def change_breed(breed_id: Optional[str], state_data: Optional[dict]):
    state = _load_state(state_data)
    breed_id = breed_id or ""
    # The select is also written by other callbacks; only act on real changes
    if breed_id == state.selected_breed:
        raise PreventUpdate
    logger.info(f"Breed selected: {breed_id or 'all breeds'}")
    async with open_fetcher(settings, state) as fetcher:
        await fetcher.select_breed(breed_id)
    return _dump_state(fetcher.state)


async def submit_search(n_clicks: Optional[int], term: Optional[str], state_data: Optional[dict]):
    if not n_clicks:
        raise PreventUpdate
    async with open_fetcher(settings, _load_state(state_data)) as fetcher:
        breed = await fetcher.search_breed(term or "")
    return _dump_state(fetcher.state), breed.id if breed else no_update


def render_gallery(state_data: Optional[dict], grid_key: Optional[list]):
    state = _load_state(state_data)

    key = image_grid_key(state)
    # Cards keep their loaded images while the image set is unchanged
    grid = build_image_grid(state, settings) if key != grid_key else no_update

    error_style = {**ERROR_STYLE, "display": "block" if state.error else "none"}
    return build_breed_options(state.breeds), grid, key, state.error or "", error_style


def reveal_lazy_image(signal: Optional[dict], loader_data: Optional[dict]):
    """Swap a placeholder for its image the first time the browser reports it near the viewport."""
    if not signal or not loader_data:
        raise PreventUpdate
    loader = LazyImageLoader.from_dict(loader_data)
    if not loader.on_intersection(bool(signal.get("intersecting"))):
        raise PreventUpdate
    return loader.render_content(), loader.to_dict()


def register_gallery_callbacks(app):
    app.callback(
        Output("gallery-state", "data", allow_duplicate=True),
        Output("breed-select", "value", allow_duplicate=True),
        Output("search-input", "value"),
        Input("animal-type-select", "value"),
        State("gallery-state", "data"),
        running=[LOADER_RUNNING],
        prevent_initial_call="initial_duplicate",
    )(change_animal_type)

    app.callback(
        Output("gallery-state", "data", allow_duplicate=True),
        Input("breed-select", "value"),
        State("gallery-state", "data"),
        running=[LOADER_RUNNING],
        prevent_initial_call=True,
    )(change_breed)

    app.callback(
        Output("gallery-state", "data", allow_duplicate=True),
        Output("breed-select", "value", allow_duplicate=True),
        Input("search-button", "n_clicks"),
        State("search-input", "value"),
        State("gallery-state", "data"),
        running=[LOADER_RUNNING],
        prevent_initial_call=True,
    )(submit_search)

    app.callback(
        Output("breed-select", "data"),
        Output("gallery-grid", "children"),
        Output("gallery-grid-key", "data"),
        Output("gallery-error", "children"),
        Output("gallery-error", "style"),
        Input("gallery-state", "data"),
        State("gallery-grid-key", "data"),
    )(render_gallery)


def register_lazy_image_callbacks(app):
    app.callback(
        Output({"type": "lazy-image", "index": MATCH}, "children"),
        Output({"type": "lazy-image-state", "index": MATCH}, "data"),
        Input({"type": "lazy-image-signal", "index": MATCH}, "data"),
        State({"type": "lazy-image-state", "index": MATCH}, "data"),
        prevent_initial_call=True,
    )(reveal_lazy_image)


def register_all_callbacks(app):
    logger.info("Registering gallery callbacks")
    register_gallery_callbacks(app)
    register_lazy_image_callbacks(app)
