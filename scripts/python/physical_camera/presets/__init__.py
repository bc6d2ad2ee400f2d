"""
Camera preset providers.

Importing this package registers the built-in presets.
"""

from . import builtin  # noqa: F401  (registers on import)
from .json_preset import JsonPreset, load_preset, load_preset_directory

__all__ = [
    "JsonPreset",
    "load_preset",
    "load_preset_directory",
]
