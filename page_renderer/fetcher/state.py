"""
États observables d'un fetch de page : loading / error / ready.

Un fetch délivre exactement un état terminal (Failed ou Ready).
Le renderer n'est invoqué qu'avec Ready.page.blocks.
"""
from datetime import datetime
from typing import Any, Literal, Optional, Protocol, Tuple, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, field_validator

from ..blocks import Block, parse_blocks


class PageContent(BaseModel):
    """Page telle que servie par le service de contenu."""
    model_config = ConfigDict(frozen=True)

    name: str
    time: Optional[datetime] = None
    version: Optional[str] = None
    blocks: Tuple[Block, ...] = ()

    @field_validator("blocks", mode="before")
    @classmethod
    def _parse_blocks(cls, v: Any) -> Any:
        # records bruts → blocs typés via le registry (union sans discriminant)
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            raise ValueError("blocks doit être une liste")
        return tuple(parse_blocks(v))


class Pending(BaseModel):
    model_config = ConfigDict(frozen=True)
    state: Literal["loading"] = "loading"


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)
    state: Literal["error"] = "error"
    reason: str = ""


class Ready(BaseModel):
    model_config = ConfigDict(frozen=True)
    state: Literal["ready"] = "ready"
    page: PageContent

    @property
    def blocks(self) -> Tuple[Block, ...]:
        return self.page.blocks


FetchState = Union[Pending, Failed, Ready]


@runtime_checkable
class ContentFetcher(Protocol):
    """Nom de page → état terminal (Failed | Ready)."""
    def fetch(self, name: str) -> FetchState: ...
