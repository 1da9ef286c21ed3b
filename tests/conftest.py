import itertools

import pytest

from supershape.world import World


class FakeGL:
    """
    Recording stand-in for ``OpenGL.GL``.

    Every ``gl*`` call is appended to ``calls`` as ``(name, args)``. Handle
    factories hand out increasing ids; compile and link can be told to fail.
    """

    GL_FALSE = 0
    GL_TRUE = 1
    GL_FLOAT = 0x1406
    GL_TRIANGLES = 0x0004
    GL_ARRAY_BUFFER = 0x8892
    GL_STATIC_DRAW = 0x88E4
    GL_VERTEX_SHADER = 0x8B31
    GL_FRAGMENT_SHADER = 0x8B30
    GL_COMPILE_STATUS = 0x8B81
    GL_LINK_STATUS = 0x8B82
    GL_DEPTH_TEST = 0x0B71
    GL_CULL_FACE = 0x0B44
    GL_COLOR_BUFFER_BIT = 0x4000
    GL_DEPTH_BUFFER_BIT = 0x0100
    GL_VERSION = 0x1F02

    def __init__(self, compile_ok=True, link_ok=True, attributes=("aPos", "aNormal")):
        self.calls = []
        self.compile_ok = compile_ok
        self.link_ok = link_ok
        self.attributes = list(attributes)
        self.uniforms = {}
        self.shader_types = {}
        self._ids = itertools.count(1)

    def __getattr__(self, name):
        if not name.startswith("gl"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record

    def _record(self, name, *args):
        self.calls.append((name, args))

    # ---------- queries ----------

    def names(self):
        return [name for name, _ in self.calls]

    def calls_to(self, name):
        return [args for n, args in self.calls if n == name]

    # ---------- shaders ----------

    def glCreateShader(self, shader_type):
        self._record("glCreateShader", shader_type)
        shader = next(self._ids)
        self.shader_types[shader] = shader_type
        return shader

    def glGetShaderiv(self, shader, pname):
        self._record("glGetShaderiv", shader, pname)
        ok = self.compile_ok
        if callable(ok):
            ok = ok(self.shader_types[shader])
        return 1 if ok else 0

    def glGetShaderInfoLog(self, shader):
        self._record("glGetShaderInfoLog", shader)
        return b"0:1(1): error: syntax error"

    def glCreateProgram(self):
        self._record("glCreateProgram")
        return next(self._ids)

    def glGetProgramiv(self, program, pname):
        self._record("glGetProgramiv", program, pname)
        return 1 if self.link_ok else 0

    def glGetProgramInfoLog(self, program):
        self._record("glGetProgramInfoLog", program)
        return b"error: linking failed"

    # ---------- locations ----------

    def glGetUniformLocation(self, program, name):
        self._record("glGetUniformLocation", program, name)
        if name.startswith("missing"):
            return -1
        return self.uniforms.setdefault(name, len(self.uniforms))

    def glGetAttribLocation(self, program, name):
        self._record("glGetAttribLocation", program, name)
        if name in self.attributes:
            return self.attributes.index(name)
        return -1

    # ---------- buffers ----------

    def glGenBuffers(self, n):
        self._record("glGenBuffers", n)
        return next(self._ids)

    def glGenVertexArrays(self, n):
        self._record("glGenVertexArrays", n)
        return next(self._ids)

    def uploaded(self, name):
        """Last upload made to uniform ``name``, as ``(gl_function, args)``."""
        location = self.uniforms[name]
        for fn, args in reversed(self.calls):
            if fn.startswith("glUniform") and args and args[0] == location:
                return fn, args
        raise KeyError(name)


@pytest.fixture
def gl():
    """Returns a fresh recording device for each test."""
    return FakeGL()


@pytest.fixture
def small_world():
    """Default scene on a small grid so setup stays quick."""
    world = World()
    world.meridians = 4
    world.parallels = 4
    return world
