"""
Décodage du payload du service → PageContent.

C'est ici (et non dans le renderer) que le data des blocs est validé.
Le service expose le style de liste comme enum GraphQL (ORDERED/UNORDERED) :
les valeurs str sont ramenées en minuscules avant validation.
"""
from typing import Any, Dict, List, Mapping, Optional

from .state import PageContent


class ContentServiceError(Exception):
    """Le service a répondu avec des erreurs GraphQL."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        messages = "; ".join(str(e.get("message", e)) for e in errors if isinstance(e, Mapping)) or str(errors)
        super().__init__(messages)


def normalize_block(raw: Any) -> Any:
    """Style de liste str → minuscules (enum GraphQL ORDERED/UNORDERED)."""
    if not isinstance(raw, Mapping) or raw.get("type") != "list":
        return raw
    data = raw.get("data")
    if not isinstance(data, Mapping) or not isinstance(data.get("style"), str):
        return raw
    return {**raw, "data": {**data, "style": data["style"].lower()}}


def parse_page(payload: Optional[Mapping[str, Any]], name: str) -> PageContent:
    """
    Construit une PageContent depuis l'objet `page` du service.
    payload None (page inconnue) → page vide portant le nom demandé.
    Lève pydantic.ValidationError si un bloc connu est mal formé.
    """
    if payload is None:
        return PageContent(name=name)
    if not isinstance(payload, Mapping):
        raise ValueError(f"Page attendue sous forme d'objet, reçu {type(payload).__name__}")

    raw_blocks = payload.get("blocks") or []
    if not isinstance(raw_blocks, (list, tuple)):
        raise ValueError(f"blocks attendu sous forme de liste, reçu {type(raw_blocks).__name__}")
    blocks = [normalize_block(b) for b in raw_blocks]
    return PageContent.model_validate({
        "name":    payload.get("name") or name,
        "time":    payload.get("time"),
        "version": payload.get("version"),
        "blocks":  blocks,
    })


def extract_page(body: Mapping[str, Any]) -> Optional[Mapping[str, Any]]:
    """Extrait data.page d'une réponse GraphQL ; lève ContentServiceError sur `errors`."""
    if not isinstance(body, Mapping):
        raise ValueError(f"Réponse GraphQL attendue sous forme d'objet, reçu {type(body).__name__}")
    errors = body.get("errors")
    if errors:
        raise ContentServiceError(errors if isinstance(errors, list) else [errors])
    data = body.get("data")
    if not isinstance(data, Mapping):
        raise ValueError("Réponse GraphQL sans champ data")
    return data.get("page")
