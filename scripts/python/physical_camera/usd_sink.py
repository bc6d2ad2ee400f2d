"""
Physical Camera v1.0 -- USD Sinks

Reference PhysicalCameraSink / NoiseWeightSink implementations that
author each tick onto a USD stage. Values are written at the sink's
time_code, so a host stepping the time code per frame gets animation.
Needs only the pxr module (usd-core).
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pxr import Sdf, Usd, UsdGeom

from .protocols import CameraFrame, WeightOutputs


TimeLike = Union[float, Usd.TimeCode, None]


# ════════════════════════════════════════════════════════════
# USD ATTRIBUTE AUTHORING HELPERS
# ════════════════════════════════════════════════════════════

_SDF_TYPE_MAP = {
    "String": Sdf.ValueTypeNames.String,
    "Float":  Sdf.ValueTypeNames.Float,
    "Int":    Sdf.ValueTypeNames.Int,
    "Bool":   Sdf.ValueTypeNames.Bool,
}

# Strings do not animate; they are always authored as default values
_UNSAMPLED_TYPES = frozenset({"String"})


def _as_time_code(time_code: TimeLike) -> Usd.TimeCode:
    if time_code is None:
        return Usd.TimeCode.Default()
    if isinstance(time_code, Usd.TimeCode):
        return time_code
    return Usd.TimeCode(float(time_code))


def _author_attributes(
    prim: Usd.Prim,
    attrs: dict[str, tuple[str, Any]],
    time_code: Usd.TimeCode,
) -> None:
    """Author custom attributes from a {name: (type_name, value)} dict."""
    for attr_name, (type_name, value) in attrs.items():
        sdf_type = _SDF_TYPE_MAP.get(type_name)
        if sdf_type is None:
            raise ValueError(f"Unsupported attribute type '{type_name}' for {attr_name}")
        attr = prim.CreateAttribute(attr_name, sdf_type)
        if type_name in _UNSAMPLED_TYPES:
            attr.Set(value)
        else:
            attr.Set(value, time_code)


# ════════════════════════════════════════════════════════════
# SINKS
# ════════════════════════════════════════════════════════════


class UsdPhysicalCameraSink:
    """
    Applies a CameraFrame to a UsdGeom.Camera.

    Authors the schema attributes (USD units: mm for apertures and focal
    length, frames for the shutter interval) plus physcam:* custom
    attributes for values the schema has no slot for (ISO, shutter
    seconds, FOV). Defines the camera prim if it does not exist.
    """

    def __init__(
        self,
        stage: Usd.Stage,
        camera_path: str,
        time_code: TimeLike = None,
    ):
        self._camera = UsdGeom.Camera.Define(stage, camera_path)
        self.time_code = time_code

    @property
    def camera(self) -> UsdGeom.Camera:
        return self._camera

    def apply_physical(self, frame: CameraFrame) -> None:
        t = _as_time_code(self.time_code)
        cam = self._camera
        p = frame.physical

        cam.CreateFocalLengthAttr().Set(float(p.focal_length_mm), t)
        cam.CreateHorizontalApertureAttr().Set(float(frame.sensor_width_mm), t)
        cam.CreateVerticalApertureAttr().Set(float(frame.sensor_height_mm), t)
        cam.CreateFStopAttr().Set(float(p.f_stop), t)

        # Shutter interval is in frames; only meaningful with a fixed cadence
        shutter_frames = frame.shutter_frames
        if shutter_frames is not None:
            cam.CreateShutterOpenAttr().Set(0.0, t)
            cam.CreateShutterCloseAttr().Set(float(shutter_frames), t)

        _author_attributes(
            cam.GetPrim(), frame.to_usd_dict(include_weights=False), t
        )


class UsdNoiseWeightSink:
    """
    Writes noise / distortion blend weights as custom attributes on a prim
    (typically the camera itself, or a post-process settings prim).
    """

    def __init__(
        self,
        stage: Usd.Stage,
        prim_path: str,
        time_code: TimeLike = None,
        prefix: str = "physcam:noise",
    ):
        prim = stage.GetPrimAtPath(prim_path)
        if not prim:
            prim = stage.DefinePrim(prim_path)
        self._prim = prim
        self._prefix = prefix
        self.time_code = time_code

    @property
    def prim(self) -> Usd.Prim:
        return self._prim

    def apply_weights(self, weights: WeightOutputs) -> None:
        _author_attributes(
            self._prim,
            weights.to_usd_dict(self._prefix),
            _as_time_code(self.time_code),
        )


def read_weights(
    prim: Usd.Prim,
    time_code: TimeLike = None,
    prefix: str = "physcam:noise",
) -> Optional[WeightOutputs]:
    """Read back weights authored by UsdNoiseWeightSink, or None if absent."""
    t = _as_time_code(time_code)
    values = []
    for name in ("isoWeight", "zoomWeight", "distortionWeight"):
        attr = prim.GetAttribute(f"{prefix}:{name}")
        if not attr or not attr.HasAuthoredValue():
            return None
        values.append(float(attr.Get(t)))
    return WeightOutputs(*values)
