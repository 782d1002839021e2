"""
Bloc Unknown — tout type que le renderer ne connaît pas encore.
Conserve le tag brut et le data brut, sans validation.
"""
from typing import Any, Dict

from pydantic import Field

from .base import BaseBlock


class UnknownBlock(BaseBlock):
    type: str = ""
    data: Dict[str, Any] = Field(default_factory=dict)
