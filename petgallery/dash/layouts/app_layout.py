"""
Gallery page layout.

Builds the controls (animal type, breed, search), the loading and error
slots, and the image grid. Content that depends on ``QueryState`` is produced
by the builders below and filled in by the callbacks in
``petgallery.dash.core.callbacks``.
"""

from typing import Any

import dash_mantine_components as dmc
from dash import dcc, html
from dash_iconify import DashIconify

from petgallery.configs.settings_models import Settings
from petgallery.gallery.lazy_image import LazyImageLoader
from petgallery.models.pets import AnimalImage, AnimalType, Breed
from petgallery.models.state import QueryState

APP_TITLE = "Pet Gallery"
ALL_BREEDS_LABEL = "All Breeds"

CARD_STYLE = {
    "border": "1px solid #ccc",
    "borderRadius": "8px",
    "padding": "1rem",
    "backgroundColor": "#fff",
    "boxShadow": "0 4px 6px rgba(0, 0, 0, 0.1)",
}


def build_animal_type_options() -> list[dict[str, str]]:
    return [{"value": animal_type.value, "label": animal_type.label} for animal_type in AnimalType]


def build_breed_options(breeds: list[Breed]) -> list[dict[str, str]]:
    """Options for the breed select; clearing the select means all breeds."""
    return [{"value": breed.id, "label": breed.name} for breed in breeds]


def image_element_id(animal_type: AnimalType, position: int, image: AnimalImage) -> str:
    # The API may return the same image twice in one page
    return f"{AnimalType(animal_type).value}-{position}-{image.id}"


def build_image_card(
    image: AnimalImage, animal_type: AnimalType, position: int, settings: Settings
) -> html.Div:
    """One grid card: a lazily loaded image plus the stores the lazy-load callback works on."""
    element_id = image_element_id(animal_type, position, image)
    loader = LazyImageLoader(
        element_id=element_id,
        src=image.url,
        alt=image.alt_text(animal_type),
        height=settings.gallery.image_height_px,
        margin=settings.gallery.lazy_margin_px,
    )
    return html.Div(
        [
            loader.render(),
            dcc.Store(id={"type": "lazy-image-state", "index": element_id}, data=loader.to_dict()),
            dcc.Store(id={"type": "lazy-image-signal", "index": element_id}),
        ],
        className="gallery-card",
        style=CARD_STYLE,
    )


def build_image_grid(state: QueryState, settings: Settings) -> list[Any]:
    if not state.images:
        return []
    return [
        build_image_card(image, state.animal_type, position, settings)
        for position, image in enumerate(state.images)
    ]


def image_grid_key(state: QueryState) -> list[str]:
    """Identity of the rendered image set; the grid is rebuilt only when it changes."""
    return [state.animal_type.value, *(image.id for image in state.images)]


def design_controls(settings: Settings) -> dmc.Group:
    return dmc.Group(
        [
            dmc.Select(
                id="animal-type-select",
                data=build_animal_type_options(),
                value=settings.gallery.default_animal_type.value,
                allowDeselect=False,
                w=150,
            ),
            dmc.Select(
                id="breed-select",
                data=[],
                value=None,
                placeholder=ALL_BREEDS_LABEL,
                clearable=True,
                searchable=True,
                w=220,
            ),
            dmc.Group(
                [
                    dmc.TextInput(
                        id="search-input",
                        placeholder="Search breeds",
                        value="",
                        w=200,
                    ),
                    dmc.Button(
                        "Search",
                        id="search-button",
                        color="green",
                        leftSection=DashIconify(icon="mdi:magnify", width=16),
                        n_clicks=0,
                    ),
                ],
                gap=0,
            ),
        ],
        justify="center",
        gap="md",
        mb="md",
    )


def design_status() -> html.Div:
    return html.Div(
        [
            dmc.Center(
                dmc.Loader(color="green", size="xl"),
                id="gallery-loader",
                style={"display": "none", "padding": "2rem"},
            ),
            dmc.Alert(
                id="gallery-error",
                color="red",
                variant="light",
                style={"display": "none", "textAlign": "center", "margin": "1rem 0"},
            ),
        ]
    )


def create_app_layout(settings: Settings) -> dmc.MantineProvider:
    initial_state = QueryState(animal_type=settings.gallery.default_animal_type)
    return dmc.MantineProvider(
        [
            dcc.Store(id="gallery-state", data=initial_state.model_dump(mode="json")),
            dcc.Store(id="gallery-grid-key", data=None),
            dmc.Container(
                [
                    dmc.Group(
                        [
                            DashIconify(icon="mdi:paw", width=32, color="#333"),
                            dmc.Title(APP_TITLE, order=1, c="#333"),
                        ],
                        justify="center",
                        mb="md",
                    ),
                    design_controls(settings),
                    design_status(),
                    dmc.SimpleGrid(
                        id="gallery-grid",
                        cols={"base": 1, "sm": 2, "md": 3, "lg": 4},
                        spacing="md",
                        children=[],
                    ),
                ],
                size=1200,
                p=20,
            ),
        ],
        id="mantine-provider",
        forceColorScheme="light",
    )
