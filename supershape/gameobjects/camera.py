import math

import numpy as np

from supershape.gameobjects.transform import look_at, perspective
from supershape.rendering.uniforms import Uniform


class Camera:
    def __init__(
        self,
        eye=(0.0, 0.0, 10.0),
        target=(0.0, 0.0, 0.0),
        up=(0.0, 1.0, 0.0),
        fov=13.0,
        near=1.0,
        far=2000.0,
    ):
        """
        Fixed camera.

        :param eye: Camera position
        :param target: The point the camera looks at
        :param up: The up vector
        :param fov: Vertical field of view in degrees
        :param near: Near clip distance
        :param far: Far clip distance
        """
        self.eye = np.array(eye, dtype=np.float32)
        self.target = np.array(target, dtype=np.float32)
        self.up = np.array(up, dtype=np.float32)
        self.fov = float(fov)
        self.near = float(near)
        self.far = float(far)

    def get_view_matrix(self) -> np.ndarray:
        return look_at(self.eye, self.target, self.up)

    def get_projection_matrix(self, aspect: float) -> np.ndarray:
        return perspective(math.radians(self.fov), aspect, self.near, self.far)

    def uniforms(self, name="camera"):
        return [(name, Uniform.vec3(self.eye))]
