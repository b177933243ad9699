"""
WSGI entry point for the Pet Gallery Dash application.

    gunicorn petgallery.dash.wsgi:server
"""

from petgallery.dash.app import server  # noqa: F401

__all__ = ["server"]
