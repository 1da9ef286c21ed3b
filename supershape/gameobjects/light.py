import math

from supershape.rendering.uniforms import Uniform


class Light:
    """
    Spotlight with distance attenuation.

    ``position.w > 0`` makes it a positional light, otherwise ``position.xyz``
    is used as a direction. The beam is the cone between ``cut_off`` and
    ``outer_cut_off``, both stored as cosines of the half-angles.
    """

    def __init__(
        self,
        position=(0.0, 0.0, 10.0, 1.0),
        direction=(0.0, 0.0, 10.0),
        ambient=(0.3, 0.3, 0.3),
        diffuse=(1.0, 1.0, 1.0),
        specular=(1.0, 1.0, 1.0),
        cut_off=math.cos(math.radians(2.0)),
        outer_cut_off=math.cos(math.radians(2.1)),
        constant=1.0,
        linear=0.007,
        quadratic=0.0002,
    ):
        self.position = tuple(position)
        self.direction = tuple(direction)
        self.ambient = tuple(ambient)
        self.diffuse = tuple(diffuse)
        self.specular = tuple(specular)
        self.cut_off = float(cut_off)
        self.outer_cut_off = float(outer_cut_off)
        self.constant = float(constant)
        self.linear = float(linear)
        self.quadratic = float(quadratic)

    def uniforms(self, prefix="light"):
        return [
            (f"{prefix}.position", Uniform.vec4(self.position)),
            (f"{prefix}.direction", Uniform.vec3(self.direction)),
            (f"{prefix}.ambient", Uniform.vec3(self.ambient)),
            (f"{prefix}.diffuse", Uniform.vec3(self.diffuse)),
            (f"{prefix}.specular", Uniform.vec3(self.specular)),
            (f"{prefix}.cutOff", Uniform.scalar(self.cut_off)),
            (f"{prefix}.outerCutOff", Uniform.scalar(self.outer_cut_off)),
            (f"{prefix}.constant", Uniform.scalar(self.constant)),
            (f"{prefix}.linear", Uniform.scalar(self.linear)),
            (f"{prefix}.quadratic", Uniform.scalar(self.quadratic)),
        ]
