import typer
from typer.main import get_command

from petgallery.cli.commands.gallery import app as gallery
from petgallery.cli.commands.standalone import register_standalone_commands
from petgallery.configs.logging_init import initialize_loggers

app = typer.Typer()

# Register standalone commands (version, serve)
register_standalone_commands(app)


@app.callback()
def verbose_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging", is_eager=True
    ),
    verbose_level=typer.Option(
        "INFO",
        "--verbose-level",
        "-vl",
        help="Set verbose logging level",
        is_eager=True,
    ),
):
    """Set up logging for all commands"""
    initialize_loggers(verbose=verbose, verbose_level=verbose_level if verbose else "ERROR")


app.add_typer(gallery, name="gallery", help="Query the pet-image API")
petgallerycli = get_command(app)


def main():
    app()


if __name__ == "__main__":
    main()
