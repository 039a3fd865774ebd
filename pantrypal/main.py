import logging

import uvicorn
from pantrypal.api.api_run import create_app
from pantrypal.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(name)s: %(message)s")
    app = create_app()
    # Print a friendly message that points to the URL you can open in a browser
    print(f"PantryPal running on http://{APP_HOST}:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
