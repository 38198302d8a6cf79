from __future__ import annotations

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, conint, field_validator

from .cards import Card
from .errors import InvalidPileError


class Pile(str, Enum):
    DRAW = "draw"
    HELD = "held"
    DISCARD = "discard"

    @classmethod
    def coerce(cls, value: Union["Pile", str, Any]) -> "Pile":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise InvalidPileError(f'cannot use unknown pile "{value}"')


class CardLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    pile: Pile
    index: conint(ge=0)
    card: Any

    @field_validator("card")
    @classmethod
    def validate_card(cls, value: Any) -> Card:
        if not isinstance(value, Card):
            raise ValueError("card must be a Card instance")
        return value


class PileCounts(BaseModel):
    draw: conint(ge=0) = 0
    held: conint(ge=0) = 0
    discard: conint(ge=0) = 0
    total: conint(ge=0) = 0
