"""FastAPI application factory: root redirect, health check and static files."""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from gameserver import __version__
from gameserver.config import Settings, _build_settings
from gameserver.media_types import register_media_types

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app serving ``settings.STATIC_DIR``.

    Raises RuntimeError when the static root does not exist or is not a
    directory, so a misconfigured server never starts.
    """
    if settings is None:
        settings = _build_settings()
    register_media_types()
    static_files = StaticFiles(directory=settings.STATIC_DIR)

    app = FastAPI(
        title="Gopher Arcade",
        description="Serves the Gopher Arcade browser game as static files.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    if not settings.entry_file.is_file():
        logger.warning(f"Entry file {settings.ENTRY_PATH} not found under {settings.STATIC_DIR}")

    entry_path = settings.ENTRY_PATH

    @app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
    async def root():
        """Send the browser to the game's entry page."""
        return RedirectResponse(url=entry_path, status_code=302)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Liveness probe."""
        return {"status": "healthy"}

    # Mounted last so the routes above take precedence over files of the same name.
    # StaticFiles rejects paths resolving outside the directory with a 404.
    app.mount("/", static_files, name="static")
    logger.info(f"Serving static files from {settings.STATIC_DIR}")

    return app
