"""
Fetcher seeds — pages servies depuis des fichiers JSON locaux (<name>.json).
Même format que l'objet `page` du service GraphQL.
"""
import json
import logging
from pathlib import Path
from typing import Union

from .payload import parse_page
from .state import FetchState, Failed, Ready

log = logging.getLogger(__name__)


class SeedContentFetcher:
    def __init__(self, seeds_dir: Union[str, Path]):
        self.seeds_dir = Path(seeds_dir)

    def fetch(self, name: str) -> FetchState:
        path = self.seeds_dir / f"{name}.json"
        # nom de page = nom de fichier simple, pas de chemin
        if path.parent != self.seeds_dir or not path.exists():
            log.warning("Seed introuvable : %s", name)
            return Ready(page=parse_page(None, name))
        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
            return Ready(page=parse_page(payload, name))
        except (OSError, ValueError) as e:
            log.error("Seed invalide %s : %s", path, e)
            return Failed(reason="payload")
