"""
Physical Camera v1.0 — Preset Registry and JSON Provider Tests
"""

import json
import logging
import os
import sys
from pathlib import Path

import pytest

# Ensure physical_camera package is importable
_scripts_python = os.path.join(
    os.path.dirname(__file__), "..", "..", "scripts", "python"
)
_scripts_python = os.path.normpath(_scripts_python)
if _scripts_python not in sys.path:
    sys.path.insert(0, _scripts_python)

from physical_camera import registry
from physical_camera.catalog import SensorStandard, UnknownStandardError, VideoStandard
from physical_camera.mapping_engine import compute_camera_frame
from physical_camera.presets import JsonPreset, load_preset, load_preset_directory
from physical_camera.presets.json_preset import PRESET_PATH_ENV
from physical_camera.protocols import CameraPreset, ControlInputs, InvalidRangeError


PRESET_DIR = Path(__file__).parent.parent / "presets"


@pytest.fixture(autouse=True)
def isolated_registry(monkeypatch):
    """Each test sees a private copy of the registry."""
    monkeypatch.setattr(registry, "_preset_registry", dict(registry._preset_registry))


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ── Registry ───────────────────────────────────────────────

class TestRegistry:
    def test_builtins_registered(self):
        ids = registry.list_presets()
        for preset_id in ("default", "action_cam", "broadcast_ntsc", "super35_cinema", "imax_70mm"):
            assert preset_id in ids

    def test_get_builtin(self):
        preset = registry.get_preset("broadcast_ntsc")
        assert preset.video_standard is VideoStandard.NTSC
        assert preset.sensor_size == (10.26, 7.49)

    def test_default_matches_stock(self):
        assert registry.get_preset("default") == CameraPreset(name="Default")

    def test_unknown_preset(self):
        with pytest.raises(KeyError, match="not registered"):
            registry.get_preset("no_such_preset")

    def test_register_and_unregister(self):
        registry.register_preset("custom", lambda: CameraPreset(name="Custom"))
        assert registry.get_preset("custom").name == "Custom"
        registry.unregister_preset("custom")
        assert "custom" not in registry.list_presets()

    def test_unregister_unknown(self):
        with pytest.raises(KeyError):
            registry.unregister_preset("never_registered")

    def test_list_is_sorted(self):
        ids = registry.list_presets()
        assert ids == sorted(ids)


# ── Shipped JSON presets ───────────────────────────────────

class TestShippedPresets:
    def test_studio_zoom(self):
        json_path = PRESET_DIR / "studio_zoom_24_70.json"
        if not json_path.exists():
            pytest.skip("studio_zoom_24_70.json not found")

        loaded = JsonPreset.from_json(json_path)
        assert loaded.preset_id == "studio_zoom_24_70"
        assert loaded.path == json_path

        frame = compute_camera_frame(loaded.preset, ControlInputs(0.5, 0.5, 0.5, 1.0))
        assert frame.physical.f_stop == pytest.approx(11.6)
        assert frame.physical.iso == 12850
        assert frame.physical.focal_length_mm == 47.0
        assert frame.timing == (24.0, False, 24.0)

    def test_hero11_uses_member_name(self):
        json_path = PRESET_DIR / "hero11_wide.json"
        if not json_path.exists():
            pytest.skip("hero11_wide.json not found")

        preset = load_preset(json_path)
        assert preset.sensor_standard is SensorStandard.HERO11_BLACK
        assert preset.video_standard is VideoStandard.HD_1080P_29_97
        assert preset.sensor_size == (8.0, 6.0)
        # Below-1mm focal range still clamps
        frame = compute_camera_frame(preset, ControlInputs(zoom=0.0))
        assert frame.physical.focal_length_mm == 1.0


# ── JSON parsing ───────────────────────────────────────────

class TestJsonPreset:
    def test_defaults_fill_missing_keys(self, tmp_path):
        path = _write(tmp_path, "minimal.json", {"preset_id": "minimal"})
        preset = load_preset(path)
        assert preset.name == "minimal"
        assert preset.iso_range.as_tuple() == (100, 2000)
        assert preset.sensor_standard is SensorStandard.SUPER_35
        assert preset.timing is None

    def test_preset_id_falls_back_to_stem(self, tmp_path):
        path = _write(tmp_path, "from_stem.json", {"name": "Stem"})
        assert JsonPreset.from_json(path).preset_id == "from_stem"

    def test_from_dict_requires_id(self):
        with pytest.raises(KeyError, match="preset_id"):
            JsonPreset.from_dict({"name": "No id"})

    def test_rejects_zero_shutter(self, tmp_path):
        path = _write(tmp_path, "bad.json", {"preset_id": "bad", "shutter_range": [0, 60]})
        with pytest.raises(InvalidRangeError, match="bad.json"):
            load_preset(path)

    def test_rejects_malformed_pair(self, tmp_path):
        path = _write(tmp_path, "bad.json", {"preset_id": "bad", "iso_range": [100]})
        with pytest.raises(InvalidRangeError, match="iso_range"):
            load_preset(path)

    def test_rejects_fractional_iso(self, tmp_path):
        path = _write(tmp_path, "bad.json", {"preset_id": "bad", "iso_range": [100.5, 800]})
        with pytest.raises(InvalidRangeError, match="integer"):
            load_preset(path)

    def test_rejects_string_endpoints(self, tmp_path):
        path = _write(tmp_path, "strings.json", {"preset_id": "s", "shutter_range": ["60", "1"]})
        with pytest.raises(InvalidRangeError, match="strings.json") as excinfo:
            load_preset(path)
        assert "'60'" in str(excinfo.value)

    @pytest.mark.parametrize("flag", ["false", "true", 0, 1])
    def test_rejects_non_bool_distortion(self, tmp_path, flag):
        path = _write(tmp_path, "flag.json", {"preset_id": "f", "lens_distortion": flag})
        with pytest.raises(InvalidRangeError, match="lens_distortion") as excinfo:
            load_preset(path)
        assert "flag.json" in str(excinfo.value)

    def test_bool_distortion(self, tmp_path):
        path = _write(tmp_path, "off.json", {"preset_id": "off", "lens_distortion": False})
        assert load_preset(path).lens_distortion is False

    def test_unknown_sensor_names_file(self, tmp_path):
        path = _write(tmp_path, "bad.json", {"preset_id": "bad", "sensor_standard": "Super99"})
        with pytest.raises(UnknownStandardError) as excinfo:
            load_preset(path)
        message = str(excinfo.value)
        assert "Super99" in message
        assert "bad.json" in message

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(InvalidRangeError, match="JSON object"):
            load_preset(path)

    def test_warns_on_unknown_keys(self, tmp_path, caplog):
        caplog.set_level(logging.WARNING, logger="physical_camera.presets.json_preset")
        path = _write(tmp_path, "extra.json", {"preset_id": "extra", "sensor_size": [1, 1]})
        load_preset(path)
        assert "sensor_size" in caplog.text

    def test_register(self, tmp_path):
        path = _write(tmp_path, "reg.json", {"preset_id": "reg", "name": "Registered"})
        JsonPreset.from_json(path).register()
        assert registry.get_preset("reg").name == "Registered"


# ── Directory loading ──────────────────────────────────────

class TestLoadDirectory:
    def test_registers_all(self, tmp_path):
        _write(tmp_path, "a.json", {"preset_id": "dir_a"})
        _write(tmp_path, "b.json", {"preset_id": "dir_b", "video_standard": "PAL"})
        (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

        assert load_preset_directory(tmp_path) == ["dir_a", "dir_b"]
        assert registry.get_preset("dir_b").interlaced is True

    def test_invalid_file_registers_nothing(self, tmp_path):
        _write(tmp_path, "a.json", {"preset_id": "dir_ok"})
        _write(tmp_path, "b.json", {"preset_id": "dir_bad", "shutter_range": [-1, 5]})
        with pytest.raises(InvalidRangeError):
            load_preset_directory(tmp_path)
        assert "dir_ok" not in registry.list_presets()

    def test_uses_environment(self, tmp_path, monkeypatch):
        _write(tmp_path, "env.json", {"preset_id": "from_env"})
        monkeypatch.setenv(PRESET_PATH_ENV, str(tmp_path))
        assert load_preset_directory() == ["from_env"]

    def test_missing_environment(self, monkeypatch):
        monkeypatch.delenv(PRESET_PATH_ENV, raising=False)
        with pytest.raises(ValueError, match=PRESET_PATH_ENV):
            load_preset_directory()

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_preset_directory(tmp_path / "nope")

    def test_shipped_directory(self):
        if not PRESET_DIR.is_dir():
            pytest.skip("preset directory not found")
        ids = load_preset_directory(PRESET_DIR)
        assert "studio_zoom_24_70" in ids
        assert "hero11_wide" in ids
