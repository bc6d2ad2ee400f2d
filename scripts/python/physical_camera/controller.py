"""
Physical Camera v1.0 — Controller

Host-facing driver: holds the active preset and the normalized knobs,
runs the mapping engine once per tick and pushes the result into the
sinks the host passes in. The controller never looks sinks up itself.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Protocol, runtime_checkable

from .mapping_engine import compute_camera_frame
from .protocols import CameraFrame, CameraPreset, ControlInputs, WeightOutputs


logger = logging.getLogger(__name__)


@runtime_checkable
class PhysicalCameraSink(Protocol):
    """Receives aperture, ISO, shutter, focal length, FOV and sensor size."""

    def apply_physical(self, frame: CameraFrame) -> None:
        ...


@runtime_checkable
class NoiseWeightSink(Protocol):
    """Receives blend weights for the auxiliary noise / distortion layers."""

    def apply_weights(self, weights: WeightOutputs) -> None:
        ...


class PhysicalCameraController:
    """
    Per-tick reconciliation of normalized controls with a host camera.

    Only the update loop that owns the controller should mutate it.
    Presets and input snapshots are immutable, so swapping either is a
    single reference assignment.
    """

    def __init__(
        self,
        preset: Optional[CameraPreset] = None,
        inputs: Optional[ControlInputs] = None,
    ):
        self._preset = preset
        self._inputs = inputs if inputs is not None else ControlInputs()
        self._frame: Optional[CameraFrame] = None
        self.refresh()

    # ── State ─────────────────────────────────────────────

    @property
    def preset(self) -> Optional[CameraPreset]:
        return self._preset

    @preset.setter
    def preset(self, value: Optional[CameraPreset]) -> None:
        self._preset = value
        if value is None:
            logger.info("Preset cleared; camera updates paused")
        else:
            logger.info("Preset set to '%s'", value.name)
        self.refresh()

    @property
    def inputs(self) -> ControlInputs:
        return self._inputs

    @inputs.setter
    def inputs(self, value: ControlInputs) -> None:
        self._inputs = value

    def set_inputs(self, **changes: float) -> ControlInputs:
        """
        Replace some knobs, e.g. set_inputs(zoom=0.8). Values are clamped.
        Returns the new snapshot.
        """
        self._inputs = replace(self._inputs, **changes)
        return self._inputs

    @property
    def frame(self) -> Optional[CameraFrame]:
        """Result of the last refresh()/update(), or None."""
        return self._frame

    @property
    def is_ready(self) -> bool:
        return self._preset is not None

    # ── Ticking ───────────────────────────────────────────

    def refresh(self) -> Optional[CameraFrame]:
        """Recompute the frame from the current preset and knobs without applying it."""
        self._frame = compute_camera_frame(self._preset, self._inputs)
        return self._frame

    def update(
        self,
        camera_sink: Optional[PhysicalCameraSink],
        noise_sink: Optional[NoiseWeightSink] = None,
    ) -> Optional[CameraFrame]:
        """
        One tick: compute and apply.

        Skips the tick (returns None, applies nothing) when no preset is
        configured or no camera sink is available. Noise weights are only
        applied when a noise sink is given.
        """
        if self._preset is None:
            logger.debug("No preset configured; skipping camera update")
            return None
        if camera_sink is None:
            logger.debug("No camera sink; skipping camera update")
            return None

        frame = self.refresh()
        camera_sink.apply_physical(frame)
        if noise_sink is not None:
            noise_sink.apply_weights(frame.weights)
        return frame
