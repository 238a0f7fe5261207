import logging

import uvicorn

from menuplan.api.api_run import app
from menuplan.utilities.config import APP_HOST, APP_PORT, DEBUG


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.DEBUG if DEBUG else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT)
