"""
Configuration — lue depuis l'environnement à chaque appel.

CONTENT_SERVICE_URL      endpoint GraphQL du service de contenu
CONTENT_SERVICE_TIMEOUT  timeout HTTP en secondes
CONTENT_SEEDS_DIR        si défini : pages servies depuis les seeds JSON
LOG_LEVEL                niveau de logging de l'app
"""
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

DEFAULT_SERVICE_URL = "http://127.0.0.1:8000/graphql"
DEFAULT_TIMEOUT     = 10.0
BUNDLED_SEEDS_DIR   = Path(__file__).parent / "seeds"


class Settings(BaseModel):
    service_url: str = DEFAULT_SERVICE_URL
    timeout: float = DEFAULT_TIMEOUT
    seeds_dir: Optional[Path] = None
    log_level: str = "INFO"


def get_settings() -> Settings:
    seeds = os.getenv("CONTENT_SEEDS_DIR", "")
    return Settings(
        service_url=os.getenv("CONTENT_SERVICE_URL", DEFAULT_SERVICE_URL),
        timeout=float(os.getenv("CONTENT_SERVICE_TIMEOUT", str(DEFAULT_TIMEOUT))),
        seeds_dir=Path(seeds) if seeds else None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
