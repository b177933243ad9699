"""
Gallery CLI commands.

Query the pet-image API the same way the gallery UI does, and print the
resulting breed or image set.
"""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer

from petgallery.cli.cli_logging import logger
from petgallery.cli.utils.rich_utils import (
    print_breeds_table,
    print_images_table,
    rich_print_checked_statement,
    rich_print_command_usage,
)
from petgallery.configs.config import settings
from petgallery.gallery.fetcher import open_fetcher
from petgallery.models.pets import AnimalType
from petgallery.models.state import QueryState

app = typer.Typer()


async def _load_breeds(animal_type: AnimalType) -> QueryState:
    async with open_fetcher(settings) as fetcher:
        await fetcher.load_breeds(animal_type)
    return fetcher.state


async def _load_images(
    animal_type: AnimalType, breed_id: str | None, search: str | None, limit: int | None = None
) -> QueryState:
    state = QueryState(animal_type=animal_type)
    async with open_fetcher(settings, state, page_size=limit) as fetcher:
        if search is not None:
            await fetcher.load_breeds(animal_type)
            if fetcher.state.error:
                return fetcher.state
            await fetcher.search_breed(search)
        else:
            await fetcher.select_breed(breed_id or "")
    return fetcher.state


@app.command()
def breeds(
    animal_type: Annotated[AnimalType, typer.Argument(help="Animal type to list breeds for")],
):
    """
    List the breeds of an animal type.

    Examples:
        petgallery gallery breeds cat
    """
    rich_print_command_usage(f"gallery breeds {animal_type.value}")
    rich_print_checked_statement(f"Fetching {animal_type.value} breeds", "loading")

    state = asyncio.run(_load_breeds(animal_type))
    if state.error:
        rich_print_checked_statement(state.error, "error", exit=True)

    print_breeds_table(state.breeds, title=f"{animal_type.label}: {len(state.breeds)} breeds")


@app.command()
def images(
    animal_type: Annotated[AnimalType, typer.Argument(help="Animal type to fetch images for")],
    breed: Annotated[
        str | None,
        typer.Option("--breed", "-b", help="Only images of this breed id"),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Pick the first breed whose name contains this text"),
    ] = None,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, max=100, help="Number of images to fetch"),
    ] = None,
):
    """
    Fetch one page of images, optionally filtered by breed.

    Examples:
        petgallery gallery images dog
        petgallery gallery images cat --breed beng
        petgallery gallery images cat --search bengal
    """
    if breed and search:
        rich_print_checked_statement("Use either --breed or --search, not both", "error", exit=True)
    rich_print_command_usage(f"gallery images {animal_type.value}")
    rich_print_checked_statement(f"Fetching {animal_type.value} images", "loading")

    logger.debug(f"images: animal_type={animal_type.value} breed={breed} search={search} limit={limit}")
    state = asyncio.run(_load_images(animal_type, breed, search, limit))
    if state.error:
        rich_print_checked_statement(state.error, "error", exit=True)

    if state.selected_breed:
        rich_print_checked_statement(f"Breed: {state.selected_breed}", "info")
    print_images_table(state.images, title=f"{animal_type.label}: {len(state.images)} images")
