"""
Built-in camera presets.

Action cams, broadcast and cinema bodies expressed as knob ranges.
Shutter ranges are in exposures per second; the first bound is where the
shutter knob sits at 0.
"""

from __future__ import annotations

from ..catalog import SensorStandard, VideoStandard
from ..protocols import CameraPreset, IntRange, ValueRange
from ..registry import register_preset


def create_default() -> CameraPreset:
    """Factory: the stock preset (Super35, 22-70mm zoom)."""
    return CameraPreset(name="Default")


def create_action_cam() -> CameraPreset:
    """Factory: small-sensor action camera, fixed wide lens."""
    return CameraPreset(
        name="Action Cam (Hero12 Black)",
        shutter_range=ValueRange(8000.0, 60.0),
        f_stop_range=ValueRange(2.5, 2.5),
        iso_range=IntRange(100, 6400),
        focal_length_range=ValueRange(2.92, 6.0),
        lens_distortion=True,
        sensor_standard=SensorStandard.HERO12_BLACK,
        video_standard=VideoStandard.HD_1080P_29_97,
    )


def create_broadcast_ntsc() -> CameraPreset:
    """Factory: 2/3-inch-class broadcast zoom on an interlaced NTSC feed."""
    return CameraPreset(
        name="Broadcast NTSC",
        shutter_range=ValueRange(2000.0, 60.0),
        f_stop_range=ValueRange(1.8, 4.0),
        iso_range=IntRange(200, 3200),
        focal_length_range=ValueRange(8.0, 160.0),
        lens_distortion=True,
        sensor_standard=SensorStandard.MM_16,
        video_standard=VideoStandard.NTSC,
    )


def create_super35_cinema() -> CameraPreset:
    """Factory: Super35 cinema zoom at 24 fps."""
    return CameraPreset(
        name="Super35 Cinema",
        shutter_range=ValueRange(1000.0, 24.0),
        f_stop_range=ValueRange(2.8, 2.8),
        iso_range=IntRange(160, 3200),
        focal_length_range=ValueRange(24.0, 290.0),
        lens_distortion=False,
        sensor_standard=SensorStandard.SUPER_35,
        video_standard=VideoStandard.FILM,
    )


def create_imax() -> CameraPreset:
    """Factory: 15-perf 70mm IMAX with wide primes."""
    return CameraPreset(
        name="70mm IMAX",
        shutter_range=ValueRange(500.0, 24.0),
        f_stop_range=ValueRange(4.0, 11.0),
        iso_range=IntRange(50, 800),
        focal_length_range=ValueRange(30.0, 150.0),
        lens_distortion=True,
        sensor_standard=SensorStandard.MM_70_IMAX,
        video_standard=VideoStandard.FILM,
    )


# Auto-register on import
register_preset("default", create_default)
register_preset("action_cam", create_action_cam)
register_preset("broadcast_ntsc", create_broadcast_ntsc)
register_preset("super35_cinema", create_super35_cinema)
register_preset("imax_70mm", create_imax)
