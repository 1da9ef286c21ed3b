import json
import math

import numpy as np
import pytest

from supershape.gameobjects.light import Light
from supershape.world import World


def write_scene(tmp_path, data):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def test_defaults():
    world = World()
    assert (world.meridians, world.parallels) == (70, 70)
    assert (world.width, world.height) == (300, 300)
    assert world.aspect == 1.0
    assert world.base_rotation_x == 35.0
    assert world.rotation_step == 0.01
    assert world.initial_rotation == 1.0
    assert world.clear_color == (1.0, 1.0, 1.0, 1.0)
    np.testing.assert_array_equal(world.camera.eye, [0, 0, 10])
    assert world.camera.fov == 13.0
    assert (world.camera.near, world.camera.far) == (1.0, 2000.0)
    assert world.material.shininess == 60.0
    assert world.light.cut_off > world.light.outer_cut_off


def test_scene_overrides(tmp_path):
    path = write_scene(tmp_path, {
        "shape": {"meridians": 12, "parallels": 8},
        "light": {"cut_off": 10, "outer_cut_off": 15, "linear": 0.01},
        "material": {"shininess": 8, "diffuse": [1, 0, 0]},
        "animation": {"rotation_step": 0.05},
        "window": {"width": 400, "height": 200},
        "unknown": {"ignored": True},
    })
    world = World(path)

    assert (world.meridians, world.parallels) == (12, 8)
    assert world.light.cut_off == pytest.approx(math.cos(math.radians(10)))
    assert world.light.outer_cut_off == pytest.approx(math.cos(math.radians(15)))
    assert world.light.linear == 0.01
    assert world.light.quadratic == 0.0002
    assert world.material.shininess == 8.0
    assert world.material.diffuse == (1.0, 0.0, 0.0)
    assert world.material.ambient == (0.04, 0.68, 0.26)
    assert world.rotation_step == 0.05
    assert world.aspect == 2.0


def test_scene_wrong_vector_size(tmp_path):
    path = write_scene(tmp_path, {"light": {"position": [0, 0, 10]}})
    with pytest.raises(ValueError):
        World(path)


def test_scene_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        World(str(tmp_path / "missing.json"))


def test_scene_malformed(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text("{ not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        World(str(path))


def test_light_uniform_names():
    names = [name for name, _ in Light().uniforms()]
    assert names == [
        "light.position", "light.direction", "light.ambient", "light.diffuse",
        "light.specular", "light.cutOff", "light.outerCutOff", "light.constant",
        "light.linear", "light.quadratic",
    ]


def test_scene_keeps_cut_off_set_by_earlier_scene(tmp_path):
    first = tmp_path / "first.json"
    first.write_text(json.dumps({"light": {"cut_off": 10, "outer_cut_off": 12}}), encoding="utf-8")
    second = tmp_path / "second.json"
    second.write_text(json.dumps({"light": {"outer_cut_off": 15}}), encoding="utf-8")

    world = World(str(first))
    world.load_scene(str(second))

    assert world.light.cut_off == pytest.approx(math.cos(math.radians(10)))
    assert world.light.outer_cut_off == pytest.approx(math.cos(math.radians(15)))


def test_scene_keeps_outer_cut_off_when_only_cut_off_given(tmp_path):
    world = World(write_scene(tmp_path, {"light": {"cut_off": 1}}))
    assert world.light.cut_off == pytest.approx(math.cos(math.radians(1)))
    assert world.light.outer_cut_off == pytest.approx(math.cos(math.radians(2.1)))


@pytest.mark.parametrize(
    "shape",
    [{"meridians": 2.9}, {"parallels": True}, {"meridians": "12"}],
)
def test_scene_non_integer_grid_raises(tmp_path, shape):
    with pytest.raises(TypeError):
        World(write_scene(tmp_path, {"shape": shape}))


def test_scene_negative_grid_raises(tmp_path):
    with pytest.raises(ValueError):
        World(write_scene(tmp_path, {"shape": {"parallels": -3}}))


def test_scene_zero_height_raises(tmp_path):
    with pytest.raises(ValueError):
        World(write_scene(tmp_path, {"window": {"height": 0}}))
