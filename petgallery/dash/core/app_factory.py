"""
Factory module for creating and configuring the Dash application.
"""

import os

import dash

from petgallery.configs.logging_init import logger
from petgallery.dash.layouts.app_layout import APP_TITLE


def create_dash_app():
    """
    Create and configure a new Dash application instance.

    Returns:
        dash.Dash: Configured Dash application instance
    """
    # Get the root path of the petgallery.dash package
    dash_root_path = os.path.dirname(os.path.dirname(__file__))

    # Serves lazy_image.js, which reports viewport proximity back to the server
    assets_folder = os.path.join(dash_root_path, "assets")

    app = dash.Dash(
        __name__,
        requests_pathname_prefix="/",
        suppress_callback_exceptions=True,
        title=APP_TITLE,
        assets_folder=assets_folder,
        assets_url_path="/assets",
    )

    # Configure Flask's logger to use custom logging settings
    server = app.server
    server.logger.handlers = logger.handlers
    server.logger.setLevel(logger.level)

    logger.info(f"Dash app created with assets from {assets_folder}")
    return app
