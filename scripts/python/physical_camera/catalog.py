"""
Physical Camera v1.0 — Preset Catalog

Static lookup tables for sensor formats and video timing standards.
Tables are built once at import and never mutated.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import NamedTuple, Union


class UnknownStandardError(KeyError):
    """A sensor or video standard tag with no entry in its lookup table."""

    def __init__(self, table: str, tag: object, available: list[str]):
        self.table = table
        self.tag = tag
        self.available = available
        super().__init__(
            f"Unknown {table} '{tag}'. Available: {available}"
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class SensorStandard(str, Enum):
    """Named physical sensor / film gate formats."""
    STANDARD = "Standard"
    HERO12_BLACK = "Hero12Black"
    HERO11_BLACK = "Hero11Black"
    HERO10_BLACK = "Hero10Black"
    MM_8 = "8mm"
    SUPER_8MM = "Super8mm"
    MM_16 = "16mm"
    SUPER_16MM = "Super16mm"
    MM_35_2PERF = "35mm_2Perf"
    MM_35_ACADEMY = "35mm_Academy"
    SUPER_35 = "Super35"
    MM_35_TV_PROJECTION = "35mm_TV_Projection"
    MM_35_FULL_APERTURE = "35mm_Full_Aperture"
    MM_35_185_PROJECTION = "35mm_185_Projection"
    MM_35_ANAMORPHIC = "35mm_Anamorphic"
    MM_65_ALEXA = "65mm_ALEXA"
    MM_70 = "70mm"
    MM_70_IMAX = "70mm_IMAX"


class VideoStandard(str, Enum):
    """Broadcast and cinema timing conventions."""
    DYNAMIC = "Dynamic"
    FILM = "Film"
    FILM_NTSC = "Film_NTSC"
    PAL = "PAL"
    NTSC = "NTSC"
    SECAM = "SECAM"
    HD_720P_50 = "720p50"
    HD_720P_59_94 = "720p59.94"
    HD_1080I_50 = "1080i50"
    HD_1080I_59_94 = "1080i59.94"
    HD_1080P_25 = "1080p25"
    HD_1080P_29_97 = "1080p29.97"
    UHD_2160P_60 = "2160p60"


class SensorSize(NamedTuple):
    width_mm: float
    height_mm: float


class FrameTiming(NamedTuple):
    frame_rate: float
    interlaced: bool
    field_rate: float

    @property
    def is_fixed(self) -> bool:
        """False for the DYNAMIC standard (no fixed cadence)."""
        return self.frame_rate > 0


# ════════════════════════════════════════════════════════════
# LOOKUP TABLES
# ════════════════════════════════════════════════════════════

SENSOR_SIZES = MappingProxyType({
    SensorStandard.STANDARD:             SensorSize(50.0, 50.0),
    SensorStandard.HERO12_BLACK:         SensorSize(7.6, 5.7),
    SensorStandard.HERO11_BLACK:         SensorSize(8.0, 6.0),
    SensorStandard.HERO10_BLACK:         SensorSize(6.17, 4.55),
    SensorStandard.MM_8:                 SensorSize(4.8, 3.5),
    SensorStandard.SUPER_8MM:            SensorSize(5.79, 4.01),
    SensorStandard.MM_16:                SensorSize(10.26, 7.49),
    SensorStandard.SUPER_16MM:           SensorSize(12.522, 7.417),
    SensorStandard.MM_35_2PERF:          SensorSize(21.95, 9.35),
    SensorStandard.MM_35_ACADEMY:        SensorSize(21.946, 16.002),
    SensorStandard.SUPER_35:             SensorSize(24.89, 18.66),
    SensorStandard.MM_35_TV_PROJECTION:  SensorSize(20.726, 15.545),
    SensorStandard.MM_35_FULL_APERTURE:  SensorSize(24.892, 18.669),
    SensorStandard.MM_35_185_PROJECTION: SensorSize(20.955, 11.328),
    SensorStandard.MM_35_ANAMORPHIC:     SensorSize(21.946, 18.593),
    SensorStandard.MM_65_ALEXA:          SensorSize(54.12, 25.59),
    SensorStandard.MM_70:                SensorSize(52.476, 23.012),
    SensorStandard.MM_70_IMAX:           SensorSize(70.41, 52.63),
})

# Progressive standards report field_rate == frame_rate.
VIDEO_TIMINGS = MappingProxyType({
    VideoStandard.DYNAMIC:        FrameTiming(0.0, False, 0.0),
    VideoStandard.FILM:           FrameTiming(24.0, False, 24.0),
    VideoStandard.FILM_NTSC:      FrameTiming(23.976, False, 23.976),
    VideoStandard.PAL:            FrameTiming(25.0, True, 50.0),
    VideoStandard.NTSC:           FrameTiming(29.97, True, 59.94),
    VideoStandard.SECAM:          FrameTiming(25.0, True, 50.0),
    VideoStandard.HD_720P_50:     FrameTiming(50.0, False, 50.0),
    VideoStandard.HD_720P_59_94:  FrameTiming(59.94, False, 59.94),
    VideoStandard.HD_1080I_50:    FrameTiming(25.0, True, 50.0),
    VideoStandard.HD_1080I_59_94: FrameTiming(29.97, True, 59.94),
    VideoStandard.HD_1080P_25:    FrameTiming(25.0, False, 25.0),
    VideoStandard.HD_1080P_29_97: FrameTiming(29.97, False, 29.97),
    VideoStandard.UHD_2160P_60:   FrameTiming(60.0, False, 60.0),
})


# ════════════════════════════════════════════════════════════
# LOOKUPS
# ════════════════════════════════════════════════════════════

StandardTag = Union[SensorStandard, VideoStandard, str]


def _coerce(enum_cls: type[Enum], tag: StandardTag, table: str) -> Enum:
    """Resolve an enum member from a member, its value label or its name."""
    if isinstance(tag, enum_cls):
        return tag
    if isinstance(tag, str):
        try:
            return enum_cls(tag)
        except ValueError:
            pass
        try:
            return enum_cls[tag]
        except KeyError:
            pass
    raise UnknownStandardError(table, tag, [m.value for m in enum_cls])


def resolve_sensor_standard(tag: StandardTag) -> SensorStandard:
    return _coerce(SensorStandard, tag, "sensor standard")


def resolve_video_standard(tag: StandardTag) -> VideoStandard:
    return _coerce(VideoStandard, tag, "video standard")


def sensor_size_for(standard: StandardTag) -> SensorSize:
    """
    Sensor (width_mm, height_mm) for a sensor standard.
    Raises UnknownStandardError for tags with no table entry.
    """
    member = resolve_sensor_standard(standard)
    try:
        return SENSOR_SIZES[member]
    except KeyError:
        raise UnknownStandardError(
            "sensor standard", member.value, [m.value for m in SENSOR_SIZES]
        ) from None


def timing_for(standard: StandardTag) -> FrameTiming:
    """
    (frame_rate, interlaced, field_rate) for a video standard.
    DYNAMIC returns all zeros. Raises UnknownStandardError for unmapped tags.
    """
    member = resolve_video_standard(standard)
    try:
        return VIDEO_TIMINGS[member]
    except KeyError:
        raise UnknownStandardError(
            "video standard", member.value, [m.value for m in VIDEO_TIMINGS]
        ) from None


def list_sensor_standards() -> list[str]:
    """Value labels of every sensor standard, in table order."""
    return [m.value for m in SENSOR_SIZES]


def list_video_standards() -> list[str]:
    """Value labels of every video standard, in table order."""
    return [m.value for m in VIDEO_TIMINGS]
