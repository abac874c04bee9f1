import os

from cities_browser.logging_config import configure_logging
from cities_browser.ui.dash_app import create_dash_app

configure_logging()

app = create_dash_app()
server = app.server


if __name__ == "__main__":
    port = int(os.getenv("PORT", "8050"))
    debug = os.getenv("DEBUG", "0") == "1"

    app.run(host="0.0.0.0", port=port, debug=debug)
