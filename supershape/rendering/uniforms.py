import logging
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)


class UniformKind(Enum):
    SCALAR = "scalar"
    VEC3 = "vec3"
    VEC4 = "vec4"
    MAT4 = "mat4"


class Uniform:
    """
    A uniform value tagged with the upload it needs.

    Build it with one of the constructors so the kind is picked where the value
    is declared instead of being guessed from its length.
    """

    __slots__ = ("kind", "value")

    def __init__(self, kind: UniformKind, value):
        self.kind = kind
        self.value = value

    def __repr__(self):
        return f"Uniform({self.kind.name}, {self.value!r})"

    @classmethod
    def scalar(cls, value) -> "Uniform":
        return cls(UniformKind.SCALAR, float(value))

    @classmethod
    def vec3(cls, value) -> "Uniform":
        data = np.asarray(value, dtype=np.float32).reshape(-1)
        if data.size != 3:
            raise ValueError(f"vec3 needs 3 components, got {data.size}")
        return cls(UniformKind.VEC3, data)

    @classmethod
    def vec4(cls, value) -> "Uniform":
        data = np.asarray(value, dtype=np.float32).reshape(-1)
        if data.size != 4:
            raise ValueError(f"vec4 needs 4 components, got {data.size}")
        return cls(UniformKind.VEC4, data)

    @classmethod
    def mat4(cls, value) -> "Uniform":
        data = np.asarray(value, dtype=np.float32)
        if data.shape != (4, 4):
            raise ValueError(f"mat4 needs a 4x4 matrix, got shape {data.shape}")
        return cls(UniformKind.MAT4, data)


def infer_kind(value) -> UniformKind:
    """
    Pick the upload for an untagged value from its element count.

    1 -> SCALAR, 3 -> VEC3, 4 -> VEC4, anything else -> MAT4. A 4-component
    vector and any other 4-element payload look the same here; tag the value
    with :class:`Uniform` when that matters.
    """
    size = np.size(value)
    if np.ndim(value) == 0 or size == 1:
        return UniformKind.SCALAR
    if size == 3:
        return UniformKind.VEC3
    if size == 4:
        return UniformKind.VEC4
    return UniformKind.MAT4


def _column_major(value) -> np.ndarray:
    data = np.asarray(value, dtype=np.float32)
    if data.ndim == 2:
        # 4x4 matrices are kept in mathematical layout
        data = data.T
    return np.ascontiguousarray(data, dtype=np.float32).reshape(-1)


def upload_uniform(gl, location, value):
    """
    Upload ``value`` to ``location``.

    :param gl: The rendering device (``OpenGL.GL`` or a compatible object)
    :param location: Uniform location, -1 uploads are dropped by the device
    :param value: A :class:`Uniform` or a bare number / sequence / array
    """
    if isinstance(value, Uniform):
        kind, data = value.kind, value.value
    else:
        kind, data = infer_kind(value), value

    if kind is UniformKind.SCALAR:
        gl.glUniform1f(location, float(np.asarray(data, dtype=np.float32).reshape(-1)[0]))
    elif kind is UniformKind.VEC3:
        gl.glUniform3fv(location, 1, np.asarray(data, dtype=np.float32).reshape(-1))
    elif kind is UniformKind.VEC4:
        gl.glUniform4fv(location, 1, np.asarray(data, dtype=np.float32).reshape(-1))
    else:
        matrices = _column_major(data)
        if matrices.size % 16:
            logger.warning(
                "Matrix uniform payload of %d floats is not a multiple of 16", matrices.size
            )
        gl.glUniformMatrix4fv(location, matrices.size // 16, gl.GL_FALSE, matrices)


def bind_uniform(gl, program, name: str, value):
    """
    Look up uniform ``name`` in ``program`` and upload ``value`` to it.

    The location is returned as the device reports it. An unknown name gives
    -1 and the upload is a no-op on the device side.
    """
    location = gl.glGetUniformLocation(program, name)
    upload_uniform(gl, location, value)
    return location


def bind_uniforms(gl, program, uniforms) -> dict:
    """Bind every ``(name, value)`` pair and return ``{name: location}``."""
    return {name: bind_uniform(gl, program, name, value) for name, value in uniforms}
