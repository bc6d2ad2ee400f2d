"""
Physical Camera v1.0 — Preset Registry

Extensible registry of camera preset providers.
Built-in presets register on import; JSON presets via register_preset().
"""

from __future__ import annotations

import logging
from typing import Callable

from .protocols import CameraPreset


logger = logging.getLogger(__name__)

# Provider factory: returns a fresh (immutable) preset
PresetProvider = Callable[[], CameraPreset]

_preset_registry: dict[str, PresetProvider] = {}


def register_preset(preset_id: str, provider: PresetProvider) -> None:
    """Register a preset provider factory. Re-registering replaces it."""
    if preset_id in _preset_registry:
        logger.debug("Replacing preset provider '%s'", preset_id)
    else:
        logger.debug("Registered preset provider '%s'", preset_id)
    _preset_registry[preset_id] = provider


def unregister_preset(preset_id: str) -> None:
    """Remove a preset provider. Raises KeyError if not registered."""
    if preset_id not in _preset_registry:
        raise KeyError(
            f"Preset '{preset_id}' not registered. "
            f"Available: {list_presets()}"
        )
    del _preset_registry[preset_id]


def get_preset(preset_id: str) -> CameraPreset:
    """Retrieve a preset by ID. Raises KeyError if not registered."""
    if preset_id not in _preset_registry:
        raise KeyError(
            f"Preset '{preset_id}' not registered. "
            f"Available: {list_presets()}"
        )
    return _preset_registry[preset_id]()


def list_presets() -> list[str]:
    """Return all registered preset IDs."""
    return sorted(_preset_registry.keys())
