"""
Physical Camera v1.0 — Python Package

Maps normalized zoom / ISO / shutter / noise knobs onto physical camera
properties (aperture, ISO, shutter speed, focal length, sensor geometry,
frame timing) and the noise/distortion weights derived from them.
"""

__version__ = "1.0.0"

from .catalog import (
    FrameTiming,
    SensorSize,
    SensorStandard,
    UnknownStandardError,
    VideoStandard,
    sensor_size_for,
    timing_for,
)
from .controller import NoiseWeightSink, PhysicalCameraController, PhysicalCameraSink
from .mapping_engine import (
    compute_camera_frame,
    compute_field_of_view,
    compute_physical_outputs,
    compute_weight_outputs,
)
from .protocols import (
    CameraFrame,
    CameraPreset,
    ControlInputs,
    IntRange,
    InvalidRangeError,
    PhysicalOutputs,
    ValueRange,
    WeightOutputs,
)
from . import presets  # noqa: F401  (registers built-in presets)

__all__ = [
    "CameraFrame",
    "CameraPreset",
    "ControlInputs",
    "FrameTiming",
    "IntRange",
    "InvalidRangeError",
    "NoiseWeightSink",
    "PhysicalCameraController",
    "PhysicalCameraSink",
    "PhysicalOutputs",
    "SensorSize",
    "SensorStandard",
    "UnknownStandardError",
    "ValueRange",
    "VideoStandard",
    "WeightOutputs",
    "compute_camera_frame",
    "compute_field_of_view",
    "compute_physical_outputs",
    "compute_weight_outputs",
    "sensor_size_for",
    "timing_for",
]
