import sys
from typing import Optional

from pydantic import validate_call
from rich import box, print
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from petgallery.models.pets import AnimalImage, Breed

console = Console()


@validate_call
def handle_error(message: str, exit: bool = False):
    """Print an error message, optionally exiting with status 1."""
    print(f"• [bold red]:x: {message}[/bold red]")
    if exit:
        sys.exit(1)


@validate_call
def rich_print_command_usage(command: str):
    """
    Print the command usage in a styled panel.
    """
    console.print(
        Panel.fit(
            f"[bold magenta]{command}[/]",
            title="[cyan]Command Used[/]",
            border_style="bright_blue",
            title_align="center",
        )
    )


@validate_call
def rich_print_checked_statement(statement: str, mode: str, exit: bool = False):
    """
    Print a statement with a check mark or cross.
    """
    if mode not in ["loading", "success", "error", "info", "warning"]:
        handle_error(f"Invalid mode: {mode}", exit=exit)
    if mode == "loading":
        print(f"• [bold yellow]:hourglass: {statement}[/bold yellow]")
    elif mode == "success":
        print(f"• [bold green]:white_check_mark: {statement}[/bold green]")
    elif mode == "error":
        print(f"• [bold red]:x: {statement}[/bold red]")
        if exit:
            sys.exit(1)
    elif mode == "info":
        print(f"• [bold blue]:blue_book: {statement}[/bold blue]")
    elif mode == "warning":
        print(f"• [bold orange1]:warning: {statement}[/bold orange1]")


def print_breeds_table(breeds: list[Breed], title: Optional[str] = None) -> None:
    table = Table(
        title=title or f"{len(breeds)} breeds",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Origin", style="dim")
    table.add_column("Temperament", style="dim")

    for breed in breeds:
        extra = breed.model_extra or {}
        table.add_row(
            breed.id,
            breed.name,
            str(extra.get("origin") or ""),
            str(extra.get("temperament") or ""),
        )
    console.print(table)


def print_images_table(images: list[AnimalImage], title: Optional[str] = None) -> None:
    table = Table(
        title=title or f"{len(images)} images",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold magenta",
    )
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Breed", style="green")
    table.add_column("URL", overflow="fold")

    for image in images:
        table.add_row(image.id, image.breed_name, image.url)
    console.print(table)
