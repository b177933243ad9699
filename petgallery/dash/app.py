from petgallery.configs.config import settings
from petgallery.dash.core.app_factory import create_dash_app
from petgallery.dash.core.callbacks import register_all_callbacks
from petgallery.dash.layouts.app_layout import create_app_layout

# Create and configure the Dash application
app = create_dash_app()

# Set the application layout
app.layout = create_app_layout(settings)

# Register all callbacks
register_all_callbacks(app)

# Get the Flask server instance for WSGI
server = app.server


def run(host=None, port=None, debug=None):
    host = host or settings.dash.host
    port = port if port is not None else settings.dash.port
    debug = settings.dash.debug if debug is None else debug
    print(f"Starting Pet Gallery on {host}:{port}")
    app.run(host=host, port=port, debug=debug)


# Run the server if executed directly (not through WSGI)
if __name__ == "__main__":
    run()
