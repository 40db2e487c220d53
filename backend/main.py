"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from backend.config import Settings, settings
from backend.pages import PageRenderer

from backend.api.routes import assets, session


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - report where the site is served from."""
    app_settings: Settings = app.state.settings

    if not (app_settings.dist_path / "index.html").is_file():
        logger.warning(
            "No build output at %s, serving the rendered shell. "
            "Run scripts/build_static.py to build it.",
            app_settings.dist_path,
        )

    logger.info(
        "==> Listening on port %s. Visit http://localhost:%s/ in your browser.",
        app_settings.port,
        app_settings.port,
    )

    yield

    logger.info("Shutting down...")


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for `app_settings` (defaults to the environment)."""
    app_settings = app_settings or settings

    logging.basicConfig(level=app_settings.log_level)
    logging.getLogger("backend").setLevel(app_settings.log_level)

    app = FastAPI(
        title=app_settings.site_title,
        description="Personal portfolio site",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.renderer = PageRenderer(
        templates_path=app_settings.templates_path,
        site_owner=app_settings.site_owner,
        site_title=app_settings.site_title,
    )

    # Page session channel
    app.include_router(session.router, prefix="/api")

    # Static files
    app.mount(
        "/public",
        StaticFiles(directory=app_settings.public_path, check_dir=False),
        name="public",
    )

    # Entry point and build/vendor cascade; must stay last, it matches every GET
    app.include_router(assets.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
