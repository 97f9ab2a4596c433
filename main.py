"""Launch the vector network FastAPI server."""

import logging

import uvicorn

from vector_network.config import Settings


def main():
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level_number,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run("vector_network.server:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    main()
