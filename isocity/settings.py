"""Game settings and their JSON settings files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

_log = logging.getLogger(__name__)

_VERSION_KEY = "SettingsVersion"


class ConfigurationError(Exception):
    """Raised when a configuration file is missing or cannot be parsed."""


def _key(name: str) -> Any:
    return field(metadata={"json": name})


@dataclass
class Settings:
    """The client settings."""

    settings_version: int = field(default=0, metadata={"json": _VERSION_KEY})
    map_size: int = field(default=128, metadata={"json": "MapSize"})
    screen_width: int = field(default=800, metadata={"json": "ScreenWidth"})
    screen_height: int = field(default=600, metadata={"json": "ScreenHeight"})
    max_elevation_height: int = field(default=32, metadata={"json": "MaxElevationHeight"})
    zone_layer_transparency: float = field(
        default=0.5, metadata={"json": "ZoneLayerTransparency"}
    )
    vsync: bool = field(default=False, metadata={"json": "VSync"})
    full_screen: bool = field(default=False, metadata={"json": "FullScreen"})
    full_screen_mode: int = field(default=0, metadata={"json": "FullScreenMode"})
    music_volume: float = field(default=0.5, metadata={"json": "MusicVolume"})
    sound_effects_volume: float = field(
        default=0.5, metadata={"json": "SoundEffectsVolume"}
    )
    play_music: bool = field(default=True, metadata={"json": "PlayMusic"})
    play_sound_effects: bool = field(default=True, metadata={"json": "PlaySoundEffects"})
    audio_channels: int = field(default=2, metadata={"json": "AudioChannels"})
    audio_3d_status: bool = field(default=False, metadata={"json": "Audio3DStatus"})
    build_menu_position: str = field(default="BOTTOM", metadata={"json": "BuildMenuPosition"})
    biome: str = field(default="", metadata={"json": "Biome"})
    ui_data_json_file: str = field(default="", metadata={"json": "UIDataJSONFile"})
    tile_data_json_file: str = field(default="", metadata={"json": "TileDataJSONFile"})
    ui_layout_json_file: str = field(default="", metadata={"json": "UILayoutJSONFile"})
    audio_config_json_file: str = field(default="", metadata={"json": "AudioConfigJSONFile"})
    audio_config_3d_json_file: str = field(
        default="", metadata={"json": "AudioConfig3DJSONFile"}
    )
    game_language: str = field(default="en", metadata={"json": "GameLanguage"})
    font_file_name: str = field(default="", metadata={"json": "FontFileName"})
    sub_menu_button_width: int = field(default=32, metadata={"json": "SubMenuButtonWidth"})
    sub_menu_button_height: int = field(default=32, metadata={"json": "SubMenuButtonHeight"})
    default_font_size: int = field(default=20, metadata={"json": "DefaultFontSize"})
    show_buildings_in_blueprint: bool = field(
        default=False, metadata={"json": "ShowBuildingsInBlueprint"}
    )
    write_error_log_file: bool = field(default=False, metadata={"json": "WriteErrorLogFile"})
    # The actual resolution; differs from the desired one in borderless mode.
    current_screen_width: int = 0
    current_screen_height: int = 0

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Settings:
        """Build settings from a parsed settings file; missing keys keep defaults."""
        if not isinstance(data, dict):
            raise ConfigurationError("Settings must be a JSON object")
        values = {
            f.name: data[f.metadata["json"]]
            for f in fields(cls)
            if "json" in f.metadata and f.metadata["json"] in data
        }
        settings = cls(**values)
        settings.current_screen_width = settings.screen_width
        settings.current_screen_height = settings.screen_height
        return settings

    def to_json(self) -> dict[str, Any]:
        """Return the settings as a JSON object."""
        return {
            f.metadata["json"]: getattr(self, f.name)
            for f in fields(self)
            if "json" in f.metadata
        }


def _parse_settings_file(path: str | Path) -> dict[str, Any]:
    """Return the file's JSON object, or an empty dict if missing or invalid."""
    path = Path(path)
    if not path.is_file():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (ValueError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def load_settings(local_path: str | Path, cached_path: str | Path) -> Settings:
    """Load settings, preferring the cached file unless the local one is newer.

    Raises ConfigurationError if the local settings file is missing or invalid.
    """
    local = _parse_settings_file(local_path)
    cached = _parse_settings_file(cached_path)

    if not local:
        raise ConfigurationError(f"Error parsing local JSON File {local_path}")

    if not cached:
        return Settings.from_json(local)

    cache_version = cached.get(_VERSION_KEY, -1)
    local_version = local.get(_VERSION_KEY, -1)
    if local_version <= cache_version:
        return Settings.from_json(cached)

    _log.info(
        "The settings file version has changed. "
        "Overwriting local cached settings file with default settings."
    )
    return Settings.from_json(local)


def save_settings(settings: Settings, path: str | Path) -> None:
    """Write ``settings`` to ``path``, creating its directory if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_json()), encoding="utf-8")


def reset_settings_to_defaults(local_path: str | Path) -> Settings:
    """Return the default settings held in the local settings file.

    Raises ConfigurationError if that file is missing or invalid.
    """
    local = _parse_settings_file(local_path)
    if not local:
        raise ConfigurationError(f"Error parsing local JSON File {local_path}")
    return Settings.from_json(local)