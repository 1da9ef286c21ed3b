import logging

import numpy as np

logger = logging.getLogger(__name__)


class Mesh:
    def __init__(self, gl, program, positions: np.ndarray, normals: np.ndarray | None = None):
        """
        Non-indexed triangle mesh with separate position and normal buffers.

        positions : flat float32 stream [x, y, z, x, y, z, ...]
        normals   : flat float32 stream, defaults to ``positions``
        """
        self.gl = gl
        positions = np.ascontiguousarray(positions, dtype=np.float32).reshape(-1)
        if normals is None:
            normals = positions
        normals = np.ascontiguousarray(normals, dtype=np.float32).reshape(-1)

        assert positions.size % 3 == 0, "position stream must hold whole xyz triples"
        assert positions.size == normals.size, "positions/normals vertex count mismatch"

        self.vertex_count = positions.size // 3

        self.vao = gl.glGenVertexArrays(1)
        gl.glBindVertexArray(self.vao)

        self.position_vbo = self._attribute_buffer(program, "aPos", positions)
        self.normal_vbo = self._attribute_buffer(program, "aNormal", normals)

        gl.glBindVertexArray(0)

    def _attribute_buffer(self, program, name: str, data: np.ndarray):
        gl = self.gl
        location = gl.glGetAttribLocation(program, name)

        vbo = gl.glGenBuffers(1)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo)
        gl.glBufferData(gl.GL_ARRAY_BUFFER, data.nbytes, data, gl.GL_STATIC_DRAW)

        if location < 0:
            logger.warning("Attribute %s is not active in program %s", name, program)
            return vbo

        # 3 floats per vertex, tightly packed
        gl.glEnableVertexAttribArray(location)
        gl.glVertexAttribPointer(location, 3, gl.GL_FLOAT, gl.GL_FALSE, 0, None)
        return vbo

    def draw(self):
        gl = self.gl
        gl.glBindVertexArray(self.vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, self.vertex_count)
        gl.glBindVertexArray(0)
