"""FastAPI application entrypoint for the school savings service."""

from fastapi import FastAPI

from . import __version__
from .api.v1.router import api_router
from .core.config import get_settings
from .core.logging import configure_logging
from .jobs import register_scheduler


def create_app(*, with_scheduler: bool = True) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    configure_logging(get_settings().log_level)
    app = FastAPI(title="Tabungan Sekolah API", version=__version__)
    app.include_router(api_router, prefix="/api/v1")
    if with_scheduler:
        register_scheduler(app)
    return app


app = create_app()
