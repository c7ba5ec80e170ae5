import logging
import os

from fastapi import FastAPI

from .routes import admin


logger = logging.getLogger(__name__)


def create_app(settings=None) -> FastAPI:
    from ..config import Settings

    if settings is None:
        settings = Settings.load(os.environ.get("CONFIG_FILE"))

    app = FastAPI(title="CMS Config API")

    app.state.settings = settings
    logger.info(
        f"CMS config service ready (environment={settings.environment}, "
        f"local_backend={settings.local_backend})"
    )

    app.include_router(admin.router)

    return app
