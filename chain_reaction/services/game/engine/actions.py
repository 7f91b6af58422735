"""Game action types - explicit user inputs separated from game state."""

from typing import Literal

from pydantic import BaseModel, Field


class PlaceAction(BaseModel):
    """Player places a tile on, or reinforces, a cell."""

    action_type: Literal["place"] = "place"
    row: int = Field(..., description="Target row (0-based)")
    col: int = Field(..., description="Target column (0-based)")


# Only one kind of input exists; kept as an alias so callers type against it
GameAction = PlaceAction
