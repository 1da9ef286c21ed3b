import logging
import math

import numpy as np

logger = logging.getLogger(__name__)

# All matrices are 4x4 float32 in mathematical layout (column vectors, M @ v).
# Conversion to column-major happens at upload time.


def normalize(v) -> np.ndarray:
    v = np.asarray(v, dtype=np.float32)
    n = np.linalg.norm(v)
    if n == 0:
        return v
    return v / n


def look_at(eye, center, up) -> np.ndarray:
    """
    Build a right-handed view matrix.

    :param eye: The camera position
    :param center: The point the camera is looking at
    :param up: The up vector
    :return: The view matrix
    :rtype: ndarray
    """
    eye = np.asarray(eye, dtype=np.float32)
    center = np.asarray(center, dtype=np.float32)

    f = normalize(center - eye)
    s = normalize(np.cross(f, up))
    u = np.cross(s, f)

    view = np.identity(4, dtype=np.float32)
    view[0, :3] = s
    view[1, :3] = u
    view[2, :3] = -f
    view[0, 3] = -np.dot(s, eye)
    view[1, 3] = -np.dot(u, eye)
    view[2, 3] = np.dot(f, eye)

    return view


def perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """
    OpenGL perspective projection.

    :param fov_y: Vertical field of view in radians
    :param aspect: Viewport width / height
    :param near: Near clip distance
    :param far: Far clip distance
    """
    f = 1.0 / math.tan(fov_y / 2.0)

    proj = np.zeros((4, 4), dtype=np.float32)
    proj[0, 0] = f / aspect
    proj[1, 1] = f
    proj[2, 2] = (far + near) / (near - far)
    proj[2, 3] = (2 * far * near) / (near - far)
    proj[3, 2] = -1.0

    return proj


def x_rotation(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[1, 0, 0, 0],
                     [0, c, -s, 0],
                     [0, s, c, 0],
                     [0, 0, 0, 1]], dtype=np.float32)


def y_rotation(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    return np.array([[c, 0, s, 0],
                     [0, 1, 0, 0],
                     [-s, 0, c, 0],
                     [0, 0, 0, 1]], dtype=np.float32)


def rotate_y(m, angle: float) -> np.ndarray:
    """Rotate ``m`` about its local Y axis (``m @ Ry``)."""
    return (np.asarray(m, dtype=np.float32) @ y_rotation(angle)).astype(np.float32)


def invert(m) -> np.ndarray:
    """
    Inverse of ``m``. A singular matrix does not raise: a zero matrix is returned instead.
    """
    try:
        return np.linalg.inv(np.asarray(m, dtype=np.float64)).astype(np.float32)
    except np.linalg.LinAlgError:
        logger.debug("Singular matrix, inverse replaced by zeros")
        return np.zeros((4, 4), dtype=np.float32)


def normal_matrix(m) -> np.ndarray:
    """transpose(invert(m)), used to carry normals through the model transform."""
    return np.ascontiguousarray(invert(m).T)
