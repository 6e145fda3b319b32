"""Tile definitions: types, zones, styles, sprite sheet data and sizes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

TD_PRICE_MIN = 0
TD_PRICE_MAX = 100000
TD_UPKEEP_MIN = -10000
TD_UPKEEP_MAX = 10000
TD_POWER_MIN = -100
TD_POWER_MAX = 1000
TD_WATER_MIN = -100
TD_WATER_MAX = 1000
TD_EDUCATION_MIN = -100
TD_EDUCATION_MAX = 100
TD_POLLUTION_MIN = -100
TD_POLLUTION_MAX = 100
TD_CRIME_MIN = -100
TD_CRIME_MAX = 100
TD_HABITANTS_MIN = 0
TD_HABITANTS_MAX = 10000
TD_FIREDANGER_MIN = -100
TD_FIREDANGER_MAX = 100
TD_HAPPINESS_MIN = -100
TD_HAPPINESS_MAX = 100
TD_TITLE_MAX_CHARS = 100
TD_DESCRIPTION_MAX_CHARS = 100
TD_BIOME_MAX_CHARS = 100
TD_AUTHOR_MAX_CHARS = 100
TD_ID_MAX_CHARS = 100
TD_CATEGORY_MAX_CHARS = 40
TD_SUBCATEGORY_MAX_CHARS = 40
TD_REQUIREDTILES_MIN = 1
TD_REQUIREDTILES_MAX = 20


class TileType(Enum):
    """How a tile is placed and on which layer it lives."""

    DEFAULT = 0
    FLORA = 1
    TERRAIN = 2
    WATER = 3
    BLUEPRINT = 4
    AUTOTILE = 5
    ZONE = 6
    ROAD = 7
    POWERLINE = 8
    GROUNDDECORATION = 9
    UNDERGROUND = 10
    RCI = 11


class ZoneType(Enum):
    """Kind of zone a building may spawn in."""

    RESIDENTIAL = 0
    INDUSTRIAL = 1
    COMMERCIAL = 2
    AGRICULTURAL = 3


class ZoneDensity(Enum):
    """Density of a zone."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2


class Style(Enum):
    """Art style a building belongs to."""

    ALL = 0
    ASIAN = 1
    EUROPEAN = 2
    US = 3


@dataclass
class TileSetData:
    """Where a tile's images are found in its sprite sheet."""

    file_name: str = ""
    count: int = 1
    clipping_width: int = 0
    clipping_height: int = 0
    offset: int = 0
    pick_random_tile: bool = False
    rotations: int = 1


@dataclass
class TileSize:
    """How many nodes a building occupies."""

    width: int = 1
    height: int = 1

    def __lt__(self, other: TileSize) -> bool:
        if not isinstance(other, TileSize):
            return NotImplemented
        if self.width < other.width:
            return True
        return self.width == other.width and self.height == other.height

    def __hash__(self) -> int:
        return self.width + 10 * self.height


@dataclass
class TileData:
    """Everything known about one placeable tile."""

    id: str = ""
    author: str = ""
    category: str = ""
    sub_category: str = ""
    building_size: int = 0
    biomes: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    tiles: TileSetData = field(default_factory=TileSetData)
    tile_type: TileType = TileType.DEFAULT
    shore_tiles: TileSetData = field(default_factory=TileSetData)
    slope_tiles: TileSetData = field(default_factory=TileSetData)
    title: str = ""
    description: str = ""
    price: int = 0
    upkeep_cost: int = 0
    power: int = 0
    water: int = 0
    ground_decoration: list[str] = field(default_factory=list)
    place_on_ground: bool = True
    place_on_water: bool = False
    is_over_placable: bool = False
    pollution_level: int = 0
    crime_level: int = 0
    fire_hazard_level: int = 0
    inhabitants: int = 0
    happiness: int = 0
    education_level: int = 0
    zone_types: list[ZoneType] = field(default_factory=list)
    style: list[Style] = field(default_factory=list)
    zone_density: list[ZoneDensity] = field(default_factory=list)
    required_tiles: TileSize = field(default_factory=TileSize)