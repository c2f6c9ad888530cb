"""Tests for the command-line entry point."""

import re
from pathlib import Path

import pytest

from vertex_renderer.cli import main
from vertex_renderer.utils import debug_print, is_debug_enabled

CONFIG = Path(__file__).resolve().parent.parent / "configs" / "scene_config.yaml"
PIXEL_LINE = re.compile(r"^\((-?\d+), (-?\d+)\)$")


def _write(tmp_path: Path, text: str) -> str:
    path = tmp_path / "scene.yaml"
    path.write_text(text)
    return str(path)


def test_default_scene_prints_pixels(capsys) -> None:
    assert main(["--config", str(CONFIG)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 7
    for line in lines:
        match = PIXEL_LINE.match(line)
        assert match
        assert 0 <= int(match.group(1)) < 240
        assert 0 <= int(match.group(2)) < 240


def test_ndc_output_and_overrides(tmp_path, capsys) -> None:
    config = _write(tmp_path, """
render: {width: 100, height: 100}
scene:
  vertices: [[0.0, 0.0, -2.0], [1.0, 0.0, -4.0]]
""")
    assert main(["--config", config, "--ndc", "--fov", "90"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    x, y, _ = (float(v) for v in lines[1].split())
    assert x == pytest.approx(0.25, abs=1e-6)
    assert y == pytest.approx(0.0, abs=1e-6)


def test_rotation_section_and_output_file(tmp_path) -> None:
    config = _write(tmp_path, """
render: {width: 10, height: 10, fov: 90, aspect: 1.0}
camera: {position: [0, 0, 0]}
scene:
  vertices: [[0.0, 0.0, 2.0]]
rotation: {axis: y, angle: 180, unit: degrees}
""")
    out = tmp_path / "pixels.txt"
    assert main(["--config", config, "--output", str(out)]) == 0
    assert out.read_text() == "(5, 5)\n"


def test_clip_flag_drops_offscreen_pixels(tmp_path, capsys) -> None:
    config = _write(tmp_path, """
scene:
  vertices: [[0.0, 0.0, -2.0], [40.0, 0.0, -2.0]]
""")
    assert main(["--config", config]) == 0
    assert len(capsys.readouterr().out.splitlines()) == 2
    assert main(["--config", config, "--clip"]) == 0
    assert capsys.readouterr().out.splitlines() == ["(120, 120)"]


def test_invalid_parameter_exits_with_error(capsys) -> None:
    assert main(["--config", str(CONFIG), "--fov", "200"]) == 1
    assert "[Error] fov" in capsys.readouterr().err


def test_missing_config_exits_with_error(tmp_path, capsys) -> None:
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 1
    assert "not found" in capsys.readouterr().err


def test_scene_without_geometry_is_rejected(tmp_path, capsys) -> None:
    config = _write(tmp_path, "scene: {name: empty}\n")
    assert main(["--config", config]) == 1
    assert "[Error] scene" in capsys.readouterr().err


def test_debug_flag_from_environment(monkeypatch, capsys) -> None:
    monkeypatch.setenv("VR_DEBUG", "0")
    assert not is_debug_enabled()
    debug_print("hidden")
    monkeypatch.setenv("VR_DEBUG", "1")
    assert is_debug_enabled()
    debug_print("shown")
    assert capsys.readouterr().err == "shown\n"


def test_debug_output_keeps_stdout_clean(monkeypatch, capsys) -> None:
    monkeypatch.setenv("VR_DEBUG", "1")
    assert main(["--config", str(CONFIG)]) == 0
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines
    assert all(PIXEL_LINE.match(line) for line in lines)
    assert "[Render]" in captured.err


def test_default_scene_includes_center_pixel(capsys) -> None:
    assert main(["--config", str(CONFIG)]) == 0
    assert "(120, 120)" in capsys.readouterr().out.splitlines()


@pytest.mark.parametrize(
    "text, parameter",
    [
        ("scene:\n  box:\n    min: [0, 0, -5]\n", "scene.box.max"),
        ("scene:\n  box: [0, 0, -5]\n", "scene.box"),
        ("scene:\n  box:\n    min: [0, 0]\n    max: [2, 2, -3]\n", "scene.box.min"),
        ("scene: null\n", "scene"),
        ("render:\n  width: wide\nscene:\n  vertices: [[0, 0, -5]]\n", "render.width"),
        ("render:\n  width: 2.5\nscene:\n  vertices: [[0, 0, -5]]\n", "render.width"),
        ("camera:\n  yaw: left\nscene:\n  vertices: [[0, 0, -5]]\n", "camera.yaw"),
        ("camera:\n  position: [0, 0]\nscene:\n  vertices: [[0, 0, -5]]\n", "camera.position"),
        ("scene:\n  vertices: [[0, 0, -5]]\nrotation:\n  angle: lots\n", "rotation.angle"),
    ],
)
def test_malformed_config_reports_error(tmp_path, capsys, text, parameter) -> None:
    assert main(["--config", _write(tmp_path, text)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[Error]" in captured.err
    assert parameter in captured.err
