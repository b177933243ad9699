from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

import typer


def register_standalone_commands(app: typer.Typer):
    @app.command("version")
    def version_cmd():
        """Show version information"""
        try:
            package_version = version("petgallery")
            typer.echo(f"Pet Gallery version: {package_version}")
        except PackageNotFoundError:
            typer.echo("Pet Gallery version: unknown (not installed)")

    @app.command("serve")
    def serve(
        host: Annotated[str | None, typer.Option("--host", help="Interface to bind")] = None,
        port: Annotated[int | None, typer.Option("--port", "-p", help="Port to listen on")] = None,
        debug: bool = typer.Option(False, "--debug", help="Run Dash in debug mode"),
    ):
        """Start the gallery web UI"""
        # Imported here so that the API commands do not build the Dash app
        from petgallery.dash.app import run

        run(host=host, port=port, debug=debug or None)
