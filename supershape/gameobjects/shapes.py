import numbers

import numpy as np

# latitude profile (m, n1, n2, n3)
LATITUDE_PROFILE = (10.0, 3.0, 0.2, 1.0)
# longitude profile (m, n1, n2, n3)
LONGITUDE_PROFILE = (5.7, 0.5, 1.0, 2.5)


def superformula(theta, m, n1, n2, n3, a=1.0, b=1.0):
    """
    Radius of the superformula curve at angle ``theta``.

    Works on scalars and numpy arrays. Zero bases raised to negative
    exponents give inf/nan the way IEEE floats do, no exception is raised.

    :param theta: Angle in radians
    :param m: Symmetry order
    :param n1: Overall exponent
    :param n2: Cosine term exponent
    :param n3: Sine term exponent
    :return: The radius (float64)
    """
    with np.errstate(all="ignore"):
        t = np.float64(m) * theta / 4
        r = (
            np.abs((1 / a) * np.cos(t)) ** n2 + np.abs((1 / b) * np.sin(t)) ** n3
        ) ** (-1 / n1)
    return r


def _check_grid(meridians, parallels):
    for name, value in (("meridians", meridians), ("parallels", parallels)):
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise TypeError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")


def grid_vertices(meridians: int, parallels: int) -> np.ndarray:
    """
    Vertex table of the supershape in grid order (row = latitude i, column = longitude j).

    :param meridians: Number of longitude subdivisions
    :param parallels: Number of latitude subdivisions
    :return: float64 array of shape ((parallels + 1) * (meridians + 1), 3)
    """
    _check_grid(meridians, parallels)

    with np.errstate(all="ignore"):
        lat = np.arange(parallels + 1, dtype=np.float64) * np.pi / parallels - np.pi / 2
        lon = np.arange(meridians + 1, dtype=np.float64) * 2 * np.pi / meridians - np.pi

        r2 = superformula(lat, *LATITUDE_PROFILE)[:, None]
        r1 = superformula(lon, *LONGITUDE_PROFILE)[None, :]
        cos_lat = np.cos(lat)[:, None]
        sin_lat = np.sin(lat)[:, None]

        x = r1 * np.cos(lon)[None, :] * r2 * cos_lat
        y = r1 * np.sin(lon)[None, :] * r2 * cos_lat
        z = np.broadcast_to(r2 * sin_lat, x.shape)

    return np.stack((x, y, z), axis=-1).reshape(-1, 3)


def quad(a, b, c, d):
    """Split quad (a, b, c, d) into the triangles (a, d, c) and (a, b, d)."""
    return (a, d, c), (a, b, d)


def triangle_indices(meridians: int, parallels: int) -> np.ndarray:
    """
    Grid indices of every emitted vertex, three per triangle, two triangles per cell.

    The row stride is ``parallels + 1``.
    """
    _check_grid(meridians, parallels)

    row = parallels + 1
    indices = []
    for i in range(parallels):
        for j in range(meridians):
            p1 = i * row + j
            p2 = p1 + row
            for tri in quad(p1, p1 + 1, p2, p2 + 1):
                indices.extend(tri)

    return np.array(indices, dtype=np.int64)


def generate_supershape(meridians: int = 70, parallels: int = 70) -> np.ndarray:
    """
    Build the supershape as a flat, non-indexed triangle stream.

    Vertex format: x, y, z (the same values double as the normal).

    :param meridians: Number of longitude subdivisions
    :param parallels: Number of latitude subdivisions
    :return: float32 array of length meridians * parallels * 18
    """
    vertices = grid_vertices(meridians, parallels)
    indices = triangle_indices(meridians, parallels)

    if indices.size == 0:
        return np.zeros(0, dtype=np.float32)

    # stride walks past the table when parallels > meridians
    points = np.take(vertices, indices, axis=0, mode="wrap")
    return points.astype(np.float32).reshape(-1)
