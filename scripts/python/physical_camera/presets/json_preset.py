"""
JSON camera preset provider.

Parses preset authoring files into CameraPreset objects and registers
them. Sensor size and frame timing are never read from the file; they
are always derived from the named standards.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from ..catalog import UnknownStandardError
from ..protocols import CameraPreset, IntRange, InvalidRangeError, ValueRange
from ..registry import register_preset


logger = logging.getLogger(__name__)

PRESET_PATH_ENV = "PHYSICAL_CAMERA_PRESET_PATH"

_KNOWN_KEYS = frozenset({
    "preset_id",
    "name",
    "shutter_range",
    "f_stop_range",
    "iso_range",
    "focal_length_range",
    "lens_distortion",
    "sensor_standard",
    "video_standard",
})

_DEFAULTS = CameraPreset()


def _pair(data: dict[str, Any], key: str, default: tuple) -> tuple:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise InvalidRangeError(
            f"'{key}' must be a [min, max] list, got {value!r}"
        )
    return tuple(value)


def _flag(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise InvalidRangeError(
            f"'{key}' must be true or false, got {value!r}"
        )
    return value


class JsonPreset:
    """Wrapper pairing a parsed CameraPreset with its registry ID and file."""

    def __init__(self, preset_id: str, preset: CameraPreset, path: Optional[Path] = None):
        self._preset_id = preset_id
        self._preset = preset
        self._path = path

    @property
    def preset_id(self) -> str:
        return self._preset_id

    @property
    def preset(self) -> CameraPreset:
        return self._preset

    @property
    def path(self) -> Optional[Path]:
        return self._path

    def register(self) -> None:
        """Register under preset_id; the provider returns the parsed preset."""
        preset = self._preset
        register_preset(self._preset_id, lambda: preset)

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        source: str = "<dict>",
        path: Optional[Path] = None,
    ) -> JsonPreset:
        """Build from already-parsed JSON data. Raises on invalid content."""
        unknown = sorted(set(data) - _KNOWN_KEYS)
        if unknown:
            logger.warning("%s: ignoring unrecognized preset keys %s", source, unknown)

        preset_id = data.get("preset_id")
        if not preset_id:
            if path is None:
                raise KeyError(f"{source}: missing 'preset_id'")
            preset_id = path.stem

        try:
            preset = CameraPreset(
                name=data.get("name", preset_id),
                shutter_range=ValueRange(*_pair(
                    data, "shutter_range", _DEFAULTS.shutter_range.as_tuple())),
                f_stop_range=ValueRange(*_pair(
                    data, "f_stop_range", _DEFAULTS.f_stop_range.as_tuple())),
                iso_range=IntRange(*_pair(
                    data, "iso_range", _DEFAULTS.iso_range.as_tuple())),
                focal_length_range=ValueRange(*_pair(
                    data, "focal_length_range", _DEFAULTS.focal_length_range.as_tuple())),
                lens_distortion=_flag(
                    data, "lens_distortion", _DEFAULTS.lens_distortion),
                sensor_standard=data.get("sensor_standard", _DEFAULTS.sensor_standard),
                video_standard=data.get("video_standard"),
            )
        except UnknownStandardError as e:
            raise UnknownStandardError(
                f"{e.table} (in {source})", e.tag, e.available
            ) from e
        except InvalidRangeError as e:
            raise InvalidRangeError(f"{source}: {e}") from e

        return cls(preset_id, preset, path)

    @classmethod
    def from_json(cls, json_path: Union[str, Path]) -> JsonPreset:
        """Factory: load and validate a preset authoring file."""
        json_path = Path(json_path)
        with open(json_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise InvalidRangeError(f"{json_path}: expected a JSON object")

        loaded = cls.from_dict(data, source=str(json_path), path=json_path)
        logger.info("Loaded preset '%s' from %s", loaded.preset_id, json_path)
        return loaded


def load_preset(json_path: Union[str, Path]) -> CameraPreset:
    """Load a preset file and return just the CameraPreset."""
    return JsonPreset.from_json(json_path).preset


def load_preset_directory(directory: Optional[Union[str, Path]] = None) -> list[str]:
    """
    Register every *.json preset in a directory.

    Defaults to $PHYSICAL_CAMERA_PRESET_PATH. Returns the registered IDs
    in file-name order; an invalid file aborts the whole load.
    """
    if directory is None:
        directory = os.environ.get(PRESET_PATH_ENV)
        if not directory:
            raise ValueError(
                f"No preset directory given and {PRESET_PATH_ENV} is not set"
            )
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Preset directory does not exist: {directory}")

    loaded = [JsonPreset.from_json(p) for p in sorted(directory.glob("*.json"))]
    for item in loaded:
        item.register()
    return [item.preset_id for item in loaded]
