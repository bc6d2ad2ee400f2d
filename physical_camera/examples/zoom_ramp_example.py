"""
Physical Camera v1.0 -- Zoom Ramp Example Stage

Creates physical_camera_zoom_ramp.usda with:
  - A UsdGeom.Camera driven by the "studio_zoom_24_70" JSON preset
  - Zoom ramped 0 -> 1 over 96 frames (24mm f/1.2 -> 70mm f/22)
  - Shutter knob easing from fast to slow across the same range
  - Noise / distortion weights on a /World/PostFX prim

Runs in any Python with usd-core installed.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

_HERE = Path(__file__).resolve()
sys.path.insert(0, str(_HERE.parents[2] / "scripts" / "python"))

from pxr import Usd, UsdGeom  # noqa: E402

from physical_camera.controller import PhysicalCameraController  # noqa: E402
from physical_camera.presets import load_preset  # noqa: E402
from physical_camera.usd_sink import UsdNoiseWeightSink, UsdPhysicalCameraSink  # noqa: E402


logger = logging.getLogger(__name__)

FRAME_START = 1
FRAME_END = 96


def build_zoom_ramp_example(save_path: str = None) -> str:
    """
    Build the zoom ramp example stage.

    Returns: Absolute path to the saved .usda file.
    """
    if save_path is None:
        save_path = os.path.join(
            os.path.dirname(os.path.abspath(__file__)),
            "physical_camera_zoom_ramp.usda",
        )

    preset = load_preset(_HERE.parents[1] / "presets" / "studio_zoom_24_70.json")

    # ── 1. Stage ─────────────────────────────────────────
    stage = Usd.Stage.CreateNew(save_path)
    UsdGeom.SetStageMetersPerUnit(stage, UsdGeom.LinearUnits.centimeters)
    stage.SetStartTimeCode(FRAME_START)
    stage.SetEndTimeCode(FRAME_END)
    if preset.frame_rate > 0:
        stage.SetTimeCodesPerSecond(preset.frame_rate)
    UsdGeom.Xform.Define(stage, "/World")

    # ── 2. Sinks + controller ────────────────────────────
    camera_sink = UsdPhysicalCameraSink(stage, "/World/Camera")
    noise_sink = UsdNoiseWeightSink(stage, "/World/PostFX")
    controller = PhysicalCameraController(preset)

    # ── 3. Tick every frame ──────────────────────────────
    span = FRAME_END - FRAME_START
    for frame_number in range(FRAME_START, FRAME_END + 1):
        t = (frame_number - FRAME_START) / span
        camera_sink.time_code = frame_number
        noise_sink.time_code = frame_number
        controller.set_inputs(zoom=t, shutter=t)
        frame = controller.update(camera_sink, noise_sink)
        logger.debug(
            "frame %d: %.1fmm f/%.1f 1/%.0fs ISO %d",
            frame_number,
            frame.physical.focal_length_mm,
            frame.physical.f_stop,
            frame.physical.shutter_speed_hz,
            frame.physical.iso,
        )

    stage.SetDefaultPrim(stage.GetPrimAtPath("/World"))
    stage.GetRootLayer().Save()
    return save_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    result = build_zoom_ramp_example()
    logger.info("Example stage saved: %s", result)
