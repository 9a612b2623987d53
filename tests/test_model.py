import struct

import pytest

from stlscene.model import Renderer, load_model
from stlscene.stl import STLError, STLModel, Vec3


def _write_stl(path, count=1):
    data = bytearray(b"\0" * 80) + struct.pack("<I", count)
    for _ in range(count):
        data += struct.pack("<12f", 0, 0, 1, 0, 0, 0, 1, 0, 0, 0, 1, 0) + b"\0\0"
    path.write_bytes(bytes(data))
    return path


def test_load_and_render(tmp_path):
    path = _write_stl(tmp_path / "a.stl", 2)
    model = load_model(path, (0, 10, 0), (1, 0, 0))
    renderer = Renderer()
    model.render(renderer)
    assert len(renderer.commands) == 1
    cmd = renderer.commands[0]
    assert cmd.position == Vec3(0, 10, 0)
    assert cmd.rotation == Vec3(1, 0, 0)
    assert cmd.vertex_count == 6
    assert model.is_valid


def test_unload_stops_rendering(tmp_path):
    model = load_model(_write_stl(tmp_path / "a.stl"), (0, 0, 0), (0, 0, 0))
    model.unload()
    renderer = Renderer()
    model.render(renderer)
    assert renderer.commands == []
    assert not model.is_valid
    assert model.stl is None


def test_reload_restores_geometry(tmp_path):
    model = load_model(_write_stl(tmp_path / "a.stl"), (0, 0, 0), (0, 0, 0))
    original = model.stl
    model.unload()
    model.reload()
    assert model.is_valid
    assert model.stl == original


def test_renderer_skips_empty_mesh():
    renderer = Renderer()
    renderer.draw(STLModel(), (0, 0, 0), (0, 0, 0))
    renderer.draw(None, (0, 0, 0), (0, 0, 0))
    assert renderer.commands == []


def test_renderer_clear(tmp_path):
    model = load_model(_write_stl(tmp_path / "a.stl"), (0, 0, 0), (0, 0, 0))
    renderer = Renderer()
    model.render(renderer)
    renderer.clear()
    assert renderer.commands == []


def test_load_missing_model_raises(tmp_path):
    with pytest.raises(STLError):
        load_model(tmp_path / "none.stl", (0, 0, 0), (0, 0, 0))