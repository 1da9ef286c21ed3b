import logging
import math

import numpy as np

from supershape.gameobjects.mesh import Mesh
from supershape.gameobjects.shapes import generate_supershape
from supershape.gameobjects.transform import x_rotation
from supershape.rendering.shader import create_program, load_shader
from supershape.rendering.uniforms import Uniform, bind_uniforms, upload_uniform

logger = logging.getLogger(__name__)

# =========================
# Shader Quellen
# =========================

VERTEX_SHADER = "supershape.vert"
FRAGMENT_SHADER = "supershape.frag"


# =========================
# Renderer
# =========================


class Renderer:
    def __init__(self, gl, world, mesh_data=None):
        """
        One-time scene setup on the given device.

        :param gl: The rendering device (``OpenGL.GL`` or a compatible object)
        :param world: Scene description (:class:`supershape.world.World`)
        :param mesh_data: Prebuilt vertex stream, generated from the world's grid when omitted
        :raises ShaderError: If the shader pair does not compile or link
        """
        self.gl = gl
        self.world = world

        # camera / projection / base model, computed once
        self.view = world.camera.get_view_matrix()
        self.proj = world.camera.get_projection_matrix(world.aspect)
        self.base_model = x_rotation(math.radians(world.base_rotation_x))

        self.program = create_program(
            gl, load_shader(VERTEX_SHADER), load_shader(FRAGMENT_SHADER)
        )

        # static uniforms, uploaded once
        static = (
            world.camera.uniforms()
            + world.light.uniforms()
            + world.material.uniforms()
            + [
                ("viewMat", Uniform.mat4(self.view)),
                ("projMat", Uniform.mat4(self.proj)),
            ]
        )
        self.static_locations = bind_uniforms(gl, self.program, static)

        # per-frame uniforms
        self.u_model_mat = gl.glGetUniformLocation(self.program, "modelMat")
        self.u_normal_mat = gl.glGetUniformLocation(self.program, "normalMat")

        # geometry, the positions double as normals
        if mesh_data is None:
            mesh_data = generate_supershape(world.meridians, world.parallels)
        self.mesh = Mesh(gl, self.program, mesh_data)
        logger.info(
            "Supershape %dx%d: %d vertices",
            world.meridians,
            world.parallels,
            self.mesh.vertex_count,
        )

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glEnable(gl.GL_CULL_FACE)
        gl.glClearColor(*world.clear_color)

    @property
    def vertex_count(self) -> int:
        return self.mesh.vertex_count

    def draw_frame(self, model_mat: np.ndarray, normal_mat: np.ndarray):
        """
        Upload the per-frame matrices, clear and draw the mesh.

        :param model_mat: Model matrix for this frame
        :param normal_mat: transpose(invert(model_mat))
        """
        gl = self.gl
        upload_uniform(gl, self.u_model_mat, Uniform.mat4(model_mat))
        upload_uniform(gl, self.u_normal_mat, Uniform.mat4(normal_mat))

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.mesh.draw()
