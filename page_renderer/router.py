"""
Router FastAPI — endpoints page_renderer.

GET  /page-renderer/pages/{name} → page rendue (HTML <main>)
POST /page-renderer/render       → {"blocks": [...]} → {"nodes": [...]}
GET  /page-renderer/catalog      → blocs connus + leurs JSON schemas
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .blocks import BLOCK_REGISTRY, parse_blocks
from .config import get_settings
from .fetcher.client import GraphQLContentFetcher
from .fetcher.payload import normalize_block
from .fetcher.seed import SeedContentFetcher
from .fetcher.state import ContentFetcher
from .renderer.blocks import render
from .view import PageView

log = logging.getLogger(__name__)

router = APIRouter(prefix="/page-renderer", tags=["page_renderer"])


class RenderRequest(BaseModel):
    blocks: List[Dict[str, Any]] = Field(default_factory=list)


def get_fetcher() -> ContentFetcher:
    """Fetcher selon la config : seeds locaux si CONTENT_SEEDS_DIR, sinon GraphQL."""
    settings = get_settings()
    if settings.seeds_dir is not None:
        return SeedContentFetcher(settings.seeds_dir)
    return GraphQLContentFetcher(settings.service_url, timeout=settings.timeout)


@router.get("/pages/{name}", response_class=HTMLResponse, summary="Rend une page du service")
def page(name: str, fetcher: ContentFetcher = Depends(get_fetcher)) -> HTMLResponse:
    view = PageView(name, fetcher)
    view.load()
    return HTMLResponse(content=view.html())


@router.post("/render", summary="Rend une séquence de blocs en nœuds")
def render_blocks(req: RenderRequest) -> JSONResponse:
    """Blocs au format du service : même normalisation que pour /pages/{name}."""
    try:
        blocks = parse_blocks([normalize_block(b) for b in req.blocks])
    except ValidationError as e:
        log.warning("Blocs invalides : %s", e)
        return JSONResponse({"error": str(e)}, status_code=422)
    nodes = render(blocks)
    return JSONResponse({"nodes": [n.model_dump(exclude_none=True) for n in nodes]})


@router.get("/catalog", summary="Liste les blocs supportés et leurs schemas")
def catalog() -> JSONResponse:
    catalog_data = [
        {"type": block_type, "schema": cls.model_json_schema()}
        for block_type, cls in BLOCK_REGISTRY.items()
    ]
    return JSONResponse({"blocks": catalog_data})
