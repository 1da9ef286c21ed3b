# world.py
import json
import logging
import math
import numbers
from pathlib import Path

from supershape.gameobjects.camera import Camera
from supershape.gameobjects.light import Light
from supershape.gameobjects.material import Material

logger = logging.getLogger(__name__)


def _vector(data: dict, key: str, default, size: int):
    value = data.get(key)
    if value is None:
        return tuple(default)
    value = tuple(float(v) for v in value)
    if len(value) != size:
        raise ValueError(f"'{key}' needs {size} components, got {len(value)}")
    return value


def _integer(data: dict, key: str, default, minimum: int = 0) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"'{key}' must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"'{key}' must be >= {minimum}, got {value}")
    return int(value)


class World:
    """
    Everything the supershape scene is made of: grid size, camera, light,
    material, animation and window settings.

    Defaults reproduce the stock scene; a JSON scene file can override any of them.
    """

    def __init__(self, scene_path: str | None = None):
        """
        :param scene_path: Optional JSON scene file to load on top of the defaults
        """
        # ---------- shape ----------
        self.meridians = 70
        self.parallels = 70

        # ---------- scene ----------
        self.camera = Camera()
        self.light = Light()
        self.material = Material()

        # ---------- animation ----------
        self.base_rotation_x = 35.0  # degrees
        self.initial_rotation = 1.0  # radians
        self.rotation_step = 0.01  # radians per tick

        # ---------- window ----------
        self.width = 300
        self.height = 300
        self.clear_color = (1.0, 1.0, 1.0, 1.0)
        self.fps = 60

        if scene_path:
            self.load_scene(scene_path)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def load_scene(self, path: str):
        """
        Override defaults from a JSON scene file.

        :param path: Path to the scene file
        :raises FileNotFoundError: If the file does not exist
        :raises json.JSONDecodeError: If the file is not valid JSON
        :raises TypeError: If a grid or window size is not an integer
        :raises ValueError: If a value has the wrong shape
        """
        with open(Path(path), "r", encoding="utf-8") as f:
            data = json.load(f)

        logger.info("Loading scene %s", path)

        # ---------- shape ----------
        shape = data.get("shape", {})
        self.meridians = _integer(shape, "meridians", self.meridians)
        self.parallels = _integer(shape, "parallels", self.parallels)

        # ---------- camera ----------
        cam = data.get("camera", {})
        old = self.camera
        self.camera = Camera(
            eye=_vector(cam, "eye", old.eye, 3),
            target=_vector(cam, "target", old.target, 3),
            up=_vector(cam, "up", old.up, 3),
            fov=cam.get("fov", old.fov),
            near=cam.get("near", old.near),
            far=cam.get("far", old.far),
        )

        # ---------- light ----------
        light = data.get("light", {})
        old = self.light
        self.light = Light(
            position=_vector(light, "position", old.position, 4),
            direction=_vector(light, "direction", old.direction, 3),
            ambient=_vector(light, "ambient", old.ambient, 3),
            diffuse=_vector(light, "diffuse", old.diffuse, 3),
            specular=_vector(light, "specular", old.specular, 3),
            cut_off=old.cut_off,
            outer_cut_off=old.outer_cut_off,
            constant=light.get("constant", old.constant),
            linear=light.get("linear", old.linear),
            quadratic=light.get("quadratic", old.quadratic),
        )
        # cut-offs are authored in degrees
        if "cut_off" in light:
            self.light.cut_off = math.cos(math.radians(light["cut_off"]))
        if "outer_cut_off" in light:
            self.light.outer_cut_off = math.cos(math.radians(light["outer_cut_off"]))

        # ---------- material ----------
        material = data.get("material", {})
        old = self.material
        self.material = Material(
            ambient=_vector(material, "ambient", old.ambient, 3),
            diffuse=_vector(material, "diffuse", old.diffuse, 3),
            specular=_vector(material, "specular", old.specular, 3),
            shininess=material.get("shininess", old.shininess),
        )

        # ---------- animation ----------
        anim = data.get("animation", {})
        self.base_rotation_x = float(anim.get("base_rotation_x", self.base_rotation_x))
        self.initial_rotation = float(anim.get("initial_rotation", self.initial_rotation))
        self.rotation_step = float(anim.get("rotation_step", self.rotation_step))

        # ---------- window ----------
        window = data.get("window", {})
        self.width = _integer(window, "width", self.width, minimum=1)
        self.height = _integer(window, "height", self.height, minimum=1)
        self.clear_color = _vector(window, "clear_color", self.clear_color, 4)
        self.fps = _integer(window, "fps", self.fps)
