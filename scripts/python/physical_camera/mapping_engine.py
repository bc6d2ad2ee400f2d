"""
Physical Camera v1.0 — Parameter Mapping Engine

Pure-math conversion of normalized control knobs into physical camera
properties and effect weights. No host dependency, no state between calls.
"""

from __future__ import annotations

import math
from typing import Optional

from .interpolation import clamp01, remap
from .protocols import (
    CameraFrame,
    CameraPreset,
    ControlInputs,
    PhysicalOutputs,
    WeightOutputs,
)


SHUTTER_BIAS = 0.5
MIN_FOCAL_LENGTH_MM = 1.0

# Distortion fades out as focal length grows from 1mm to 35mm
DISTORTION_FOCAL_WIDE_MM = 1.0
DISTORTION_FOCAL_NORMAL_MM = 35.0


def compute_field_of_view(focal_length_mm: float, aperture_mm: float) -> float:
    """
    Field of view in degrees for a focal length and one sensor dimension.
    Pass sensor height for the vertical FOV a lens consumer expects.
    """
    if focal_length_mm <= 0 or aperture_mm <= 0:
        return 0.0
    return 2.0 * math.degrees(math.atan(aperture_mm / (2.0 * focal_length_mm)))


def compute_physical_outputs(
    preset: CameraPreset,
    inputs: ControlInputs,
) -> PhysicalOutputs:
    """
    Convert the normalized knobs to aperture, ISO, shutter and focal length.

    Zoom drives both f-stop and focal length, as on a variable-aperture
    zoom lens.
    """
    zoom = clamp01(inputs.zoom)
    iso_knob = clamp01(inputs.iso)
    shutter_knob = clamp01(inputs.shutter)

    f_stop = preset.f_stop_range.lerp(zoom)
    shutter_hz = preset.shutter_range.ease(shutter_knob, SHUTTER_BIAS)
    iso = int(round(preset.iso_range.lerp(iso_knob)))
    focal_length = max(MIN_FOCAL_LENGTH_MM, preset.focal_length_range.lerp(zoom))

    return PhysicalOutputs(
        f_stop=f_stop,
        iso=iso,
        shutter_speed_hz=shutter_hz,
        shutter_speed_s=1.0 / shutter_hz,
        focal_length_mm=focal_length,
    )


def compute_distortion_attenuation(focal_length_mm: float) -> float:
    """1.0 at 1mm, 0.0 from 35mm up, linear in between."""
    return clamp01(remap(
        focal_length_mm,
        DISTORTION_FOCAL_NORMAL_MM, DISTORTION_FOCAL_WIDE_MM,
        0.0, 1.0,
    ))


def compute_weight_outputs(
    preset: CameraPreset,
    inputs: ControlInputs,
    outputs: PhysicalOutputs,
) -> WeightOutputs:
    """
    Blend weights for the ISO noise, zoom noise and lens distortion layers.
    """
    zoom = clamp01(inputs.zoom)
    iso_knob = clamp01(inputs.iso)
    noise = clamp01(inputs.noise_strength)

    distortion = (1.0 - zoom) if preset.lens_distortion else 0.0
    distortion *= compute_distortion_attenuation(outputs.focal_length_mm) * noise

    return WeightOutputs(
        iso_noise_weight=iso_knob * noise,
        zoom_noise_weight=zoom * noise,
        distortion_weight=clamp01(distortion),
    )


def compute_camera_frame(
    preset: Optional[CameraPreset],
    inputs: ControlInputs,
) -> Optional[CameraFrame]:
    """
    Compute everything for one tick.

    This is the main entry point used by the controller. Returns None when
    no preset is configured yet; the host should skip the tick.
    """
    if preset is None:
        return None

    physical = compute_physical_outputs(preset, inputs)
    weights = compute_weight_outputs(preset, inputs, physical)
    fov = compute_field_of_view(physical.focal_length_mm, preset.sensor_height_mm)

    return CameraFrame(
        preset_name=preset.name,
        physical=physical,
        weights=weights,
        field_of_view_deg=fov,
        sensor_width_mm=preset.sensor_width_mm,
        sensor_height_mm=preset.sensor_height_mm,
        timing=preset.timing,
    )
