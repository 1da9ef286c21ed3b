import logging
import os
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

SHADER_DIR = os.path.join(os.path.dirname(__file__), "shaders")


# =========================
# Errors
# =========================


class ShaderError(RuntimeError):
    """Raised when the device rejects a shader stage or program."""


class ShaderCompileError(ShaderError):
    def __init__(self, stage: "ShaderStage", source: str, log: str):
        self.stage = stage
        self.source = source
        self.log = log
        super().__init__(f"{stage.name.lower()} shader compilation failed: {log}")


class ProgramLinkError(ShaderError):
    def __init__(
        self,
        log: str,
        vertex_source: Optional[str] = None,
        fragment_source: Optional[str] = None,
    ):
        self.log = log
        self.vertex_source = vertex_source
        self.fragment_source = fragment_source
        super().__init__(f"Program linking failed: {log}")


# =========================
# Shader Utils
# =========================


class ShaderStage(Enum):
    VERTEX = "GL_VERTEX_SHADER"
    FRAGMENT = "GL_FRAGMENT_SHADER"

    def gl_enum(self, gl) -> int:
        return getattr(gl, self.value)


def _decode(log) -> str:
    if isinstance(log, bytes):
        return log.decode(errors="replace")
    return str(log or "")


def load_shader(name: str) -> str:
    """
    Read a shader shipped with the package.

    :param name: File name inside ``rendering/shaders``, e.g. ``supershape.vert``
    :return: The source code of the shader as a string
    """
    with open(os.path.join(SHADER_DIR, name), "r", encoding="utf-8") as f:
        return f.read()


def compile_shader(gl, source: str, stage: ShaderStage) -> int:
    """Compile a GLSL shader from source and return the handle.

    :param gl: The rendering device.
    :param source: The shader source code as a single string.
    :param stage: Which pipeline stage the source belongs to.
    :raises ShaderCompileError: On compilation failure.
    """
    shader = gl.glCreateShader(stage.gl_enum(gl))
    if shader is None or shader == 0:
        raise ShaderCompileError(stage, source, "failed to create shader object")
    gl.glShaderSource(shader, source)
    gl.glCompileShader(shader)
    if not gl.glGetShaderiv(shader, gl.GL_COMPILE_STATUS):
        raise ShaderCompileError(stage, source, _decode(gl.glGetShaderInfoLog(shader)))
    logger.debug("Compiled %s shader %s", stage.name.lower(), shader)
    return shader


def link_program(
    gl,
    vertex_shader: int,
    fragment_shader: int,
    vertex_source: Optional[str] = None,
    fragment_source: Optional[str] = None,
) -> int:
    """Link compiled stages into a program and make it current.

    The sources are only used to enrich a :class:`ProgramLinkError`.

    :return: Program handle.
    :raises ProgramLinkError: On linking failure.
    """
    program = gl.glCreateProgram()
    if program is None or program == 0:
        raise ProgramLinkError("failed to create program object", vertex_source, fragment_source)
    gl.glAttachShader(program, vertex_shader)
    gl.glAttachShader(program, fragment_shader)
    gl.glLinkProgram(program)
    if not gl.glGetProgramiv(program, gl.GL_LINK_STATUS):
        raise ProgramLinkError(
            _decode(gl.glGetProgramInfoLog(program)), vertex_source, fragment_source
        )
    gl.glUseProgram(program)
    # Shaders can be deleted once linked
    gl.glDeleteShader(vertex_shader)
    gl.glDeleteShader(fragment_shader)
    logger.debug("Linked program %s", program)
    return program


def create_program(gl, vertex_source: str, fragment_source: str) -> int:
    """Compile both stages, link them and return the (current) program."""
    vs = compile_shader(gl, vertex_source, ShaderStage.VERTEX)
    fs = compile_shader(gl, fragment_source, ShaderStage.FRAGMENT)
    return link_program(gl, vs, fs, vertex_source, fragment_source)
