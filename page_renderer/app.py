"""
PAGE_RENDERER — FastAPI app
Démarrer (extra serve) : uvicorn page_renderer.app:app --reload --port 8001
"""
import logging

from fastapi import FastAPI

from . import __version__
from .config import get_settings
from .router import router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s — %(message)s")

    app = FastAPI(title="PAGE_RENDERER", version=__version__)
    app.include_router(router)

    @app.get("/health")
    def health():
        return {"status": "ok", "service": "page_renderer", "version": __version__}

    if settings.seeds_dir is not None:
        log.info("Pages servies depuis les seeds : %s", settings.seeds_dir)
    else:
        log.info("Service de contenu : %s", settings.service_url)
    return app


app = create_app()
