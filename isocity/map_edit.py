"""Current map editing state: terrain tool, tile to place and selection flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TerrainEdit(Enum):
    """The terrain tool that is active."""

    NONE = auto()
    RAISE = auto()
    LOWER = auto()
    LEVEL = auto()
    DEMOLISH = auto()


@dataclass
class MapEditState:
    """What the player is currently doing to the map."""

    terrain_edit_mode: TerrainEdit = TerrainEdit.NONE
    tile_to_place: str = ""
    demolish_mode: bool = False
    highlight_selection: bool = False

    def reset(self) -> None:
        """Return every field to its initial value."""
        self.terrain_edit_mode = TerrainEdit.NONE
        self.tile_to_place = ""
        self.demolish_mode = False
        self.highlight_selection = False