import uvicorn

from .api import app
from .env import CONFIG, LOG


def main() -> None:
    LOG.info(f"Server starting on {CONFIG.server_host}:{CONFIG.server_port}")
    LOG.info(f"Listening for POST requests on {CONFIG.query_path}")
    uvicorn.run(app, host=CONFIG.server_host, port=CONFIG.server_port)


if __name__ == "__main__":
    main()
