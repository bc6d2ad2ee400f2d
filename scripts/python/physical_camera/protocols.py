"""
Physical Camera v1.0 — Protocol Dataclasses

Typed data contracts for the parameter mapping pipeline:
preset + control inputs in, physical values + effect weights out.

All dataclasses are frozen (immutable after creation) so a preset or an
input snapshot can be handed to the mapper from any thread.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Optional

from .catalog import (
    FrameTiming,
    SensorSize,
    SensorStandard,
    StandardTag,
    VideoStandard,
    resolve_sensor_standard,
    resolve_video_standard,
    sensor_size_for,
    timing_for,
)
from .interpolation import clamp01, lerp, spherical_interpolate


class InvalidRangeError(ValueError):
    """A preset range that cannot produce a physical value."""


# ════════════════════════════════════════════════════════════
# RANGES
# ════════════════════════════════════════════════════════════


def _finite_endpoint(owner: Any, name: str) -> float:
    """Coerce a real-number endpoint to float; strings, bools, NaN and inf are rejected."""
    value = getattr(owner, name)
    label = f"{type(owner).__name__}.{name}"
    if isinstance(value, (str, bytes, bool)):
        raise InvalidRangeError(f"{label} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidRangeError(
            f"{label} must be a number, got {value!r}"
        ) from None
    if not math.isfinite(number):
        raise InvalidRangeError(f"{label} must be finite, got {value!r}")
    return number


@dataclass(frozen=True)
class ValueRange:
    """
    Two endpoints for a normalized knob to travel between.

    min > max is valid: the knob simply runs "wide-to-narrow".
    """
    min: float
    max: float

    def __post_init__(self):
        for name in ("min", "max"):
            object.__setattr__(self, name, _finite_endpoint(self, name))

    @property
    def is_inverted(self) -> bool:
        return self.min > self.max

    def lerp(self, t: float) -> float:
        return lerp(self.min, self.max, t)

    def ease(self, t: float, bias: float = 0.5) -> float:
        """Log-domain biased ease; see interpolation.spherical_interpolate."""
        return spherical_interpolate(self.min, self.max, t, bias)

    def as_tuple(self) -> tuple[float, float]:
        return (self.min, self.max)


@dataclass(frozen=True)
class IntRange:
    """Integer endpoints (ISO). Float input must be integral."""
    min: int
    max: int

    def __post_init__(self):
        for name in ("min", "max"):
            number = _finite_endpoint(self, name)
            if not number.is_integer():
                raise InvalidRangeError(
                    f"IntRange.{name} must be an integer, got {getattr(self, name)!r}"
                )
            object.__setattr__(self, name, int(number))

    @property
    def is_inverted(self) -> bool:
        return self.min > self.max

    def lerp(self, t: float) -> float:
        return lerp(float(self.min), float(self.max), t)

    def as_tuple(self) -> tuple[int, int]:
        return (self.min, self.max)


def _as_range(value: Any, cls: type) -> Any:
    """Accept a range instance or a 2-sequence."""
    if isinstance(value, cls):
        return value
    try:
        lo, hi = value
    except (TypeError, ValueError):
        raise InvalidRangeError(
            f"Expected a {cls.__name__} or (min, max) pair, got {value!r}"
        ) from None
    return cls(lo, hi)


# ════════════════════════════════════════════════════════════
# PRESET
# ════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class CameraPreset:
    """
    A simulated camera model: per-property ranges plus the sensor and
    timing constants derived from the selected standards.

    Derived fields (sensor size, timing) are recomputed in __post_init__,
    so dataclasses.replace() re-validates them whenever a standard changes.
    """
    name: str = "Camera Preset"
    shutter_range: ValueRange = ValueRange(2000.0, 50.0)    # times per second
    f_stop_range: ValueRange = ValueRange(3.5, 5.6)
    iso_range: IntRange = IntRange(100, 2000)
    focal_length_range: ValueRange = ValueRange(22.0, 70.0)
    lens_distortion: bool = True
    sensor_standard: SensorStandard = SensorStandard.SUPER_35
    video_standard: Optional[VideoStandard] = None

    # -- derived --
    sensor_width_mm: float = field(init=False, default=0.0)
    sensor_height_mm: float = field(init=False, default=0.0)
    timing: Optional[FrameTiming] = field(init=False, default=None)

    def __post_init__(self):
        object.__setattr__(self, 'shutter_range', _as_range(self.shutter_range, ValueRange))
        object.__setattr__(self, 'f_stop_range', _as_range(self.f_stop_range, ValueRange))
        object.__setattr__(self, 'iso_range', _as_range(self.iso_range, IntRange))
        object.__setattr__(self, 'focal_length_range', _as_range(self.focal_length_range, ValueRange))

        # Frequencies are inverted into durations; 0 Hz would be an infinite exposure
        if self.shutter_range.min <= 0 or self.shutter_range.max <= 0:
            raise InvalidRangeError(
                f"Invalid shutter range for '{self.name}': "
                f"{self.shutter_range.min}-{self.shutter_range.max} Hz "
                f"(both bounds must be > 0)"
            )
        if self.f_stop_range.min <= 0 or self.f_stop_range.max <= 0:
            raise InvalidRangeError(
                f"Invalid f-stop range for '{self.name}': "
                f"{self.f_stop_range.min}-{self.f_stop_range.max}"
            )
        if self.iso_range.min <= 0 or self.iso_range.max <= 0:
            raise InvalidRangeError(
                f"Invalid ISO range for '{self.name}': "
                f"{self.iso_range.min}-{self.iso_range.max}"
            )

        sensor = resolve_sensor_standard(self.sensor_standard)
        object.__setattr__(self, 'sensor_standard', sensor)
        width, height = sensor_size_for(sensor)
        object.__setattr__(self, 'sensor_width_mm', width)
        object.__setattr__(self, 'sensor_height_mm', height)

        if self.video_standard is not None:
            video = resolve_video_standard(self.video_standard)
            object.__setattr__(self, 'video_standard', video)
            object.__setattr__(self, 'timing', timing_for(video))
        else:
            object.__setattr__(self, 'timing', None)

    @property
    def sensor_size(self) -> SensorSize:
        return SensorSize(self.sensor_width_mm, self.sensor_height_mm)

    @property
    def frame_rate(self) -> float:
        """Fixed frame rate, or 0.0 when no (or a dynamic) standard is set."""
        return self.timing.frame_rate if self.timing else 0.0

    @property
    def interlaced(self) -> bool:
        return self.timing.interlaced if self.timing else False

    @property
    def field_rate(self) -> float:
        return self.timing.field_rate if self.timing else 0.0

    def with_standards(
        self,
        sensor_standard: Optional[StandardTag] = None,
        video_standard: Optional[StandardTag] = None,
    ) -> CameraPreset:
        """Copy with new standard selections; derived fields are recomputed."""
        changes: dict[str, Any] = {}
        if sensor_standard is not None:
            changes['sensor_standard'] = sensor_standard
        if video_standard is not None:
            changes['video_standard'] = video_standard
        return replace(self, **changes)

    def without_video_standard(self) -> CameraPreset:
        return replace(self, video_standard=None)


# ════════════════════════════════════════════════════════════
# PER-TICK INPUTS AND OUTPUTS
# ════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class ControlInputs:
    """
    Normalized knobs read once per tick. Values are clamped to [0, 1]
    on construction; callers are not limited to a slider.
    """
    zoom: float = 0.5
    iso: float = 0.5
    shutter: float = 0.5
    noise_strength: float = 1.0

    def __post_init__(self):
        for name in ("zoom", "iso", "shutter", "noise_strength"):
            object.__setattr__(self, name, clamp01(float(getattr(self, name))))


@dataclass(frozen=True)
class PhysicalOutputs:
    """Real-world camera properties for one tick."""
    f_stop: float
    iso: int
    shutter_speed_hz: float      # Exposures per second (frequency form)
    shutter_speed_s: float       # 1 / shutter_speed_hz
    focal_length_mm: float       # Always >= 1


@dataclass(frozen=True)
class WeightOutputs:
    """[0, 1] blend factors for auxiliary noise / distortion layers."""
    iso_noise_weight: float
    zoom_noise_weight: float
    distortion_weight: float

    def to_usd_dict(self, prefix: str = "physcam:noise") -> dict[str, tuple[str, Any]]:
        return {
            f"{prefix}:isoWeight":        ("Float", self.iso_noise_weight),
            f"{prefix}:zoomWeight":       ("Float", self.zoom_noise_weight),
            f"{prefix}:distortionWeight": ("Float", self.distortion_weight),
        }


@dataclass(frozen=True)
class CameraFrame:
    """
    Everything a host needs to apply for one tick.
    Combines physical outputs, effect weights and sensor geometry.
    """
    preset_name: str
    physical: PhysicalOutputs
    weights: WeightOutputs
    field_of_view_deg: float     # Vertical, from focal length + sensor height
    sensor_width_mm: float
    sensor_height_mm: float
    timing: Optional[FrameTiming] = None

    @property
    def sensor_size(self) -> SensorSize:
        return SensorSize(self.sensor_width_mm, self.sensor_height_mm)

    @property
    def shutter_frames(self) -> Optional[float]:
        """Shutter duration in frames, when the preset has a fixed cadence."""
        if self.timing is None or not self.timing.is_fixed:
            return None
        return self.physical.shutter_speed_s * self.timing.frame_rate

    def to_usd_dict(self, include_weights: bool = True) -> dict[str, tuple[str, Any]]:
        """Flat dictionary for USD attribute authoring."""
        prefix = "physcam"
        p = self.physical
        result = {
            f"{prefix}:preset":               ("String", self.preset_name),
            f"{prefix}:fStop":                ("Float",  p.f_stop),
            f"{prefix}:iso":                  ("Int",    p.iso),
            f"{prefix}:shutterSpeedHz":       ("Float",  p.shutter_speed_hz),
            f"{prefix}:shutterSpeedS":        ("Float",  p.shutter_speed_s),
            f"{prefix}:focalLengthMm":        ("Float",  p.focal_length_mm),
            f"{prefix}:fovDeg":               ("Float",  self.field_of_view_deg),
            f"{prefix}:sensorWidthMm":        ("Float",  self.sensor_width_mm),
            f"{prefix}:sensorHeightMm":       ("Float",  self.sensor_height_mm),
        }
        if include_weights:
            result.update(self.weights.to_usd_dict(f"{prefix}:noise"))
        if self.timing is not None:
            result.update({
                f"{prefix}:timing:frameRate":  ("Float", self.timing.frame_rate),
                f"{prefix}:timing:interlaced": ("Bool",  self.timing.interlaced),
                f"{prefix}:timing:fieldRate":  ("Float", self.timing.field_rate),
            })
        return result
