from supershape.rendering.uniforms import Uniform


class Material:
    def __init__(
        self,
        ambient=(0.04, 0.68, 0.26),
        diffuse=(0.04, 0.68, 0.26),
        specular=(1.0, 1.0, 1.0),
        shininess=60.0,
    ):
        """
        ambient   : ambient reflectance (vec3)
        diffuse   : diffuse reflectance (vec3)
        specular  : specular reflectance (vec3)
        shininess : specular exponent
        """
        self.ambient = tuple(ambient)
        self.diffuse = tuple(diffuse)
        self.specular = tuple(specular)
        self.shininess = float(shininess)

    def uniforms(self, prefix="material"):
        return [
            (f"{prefix}.ambient", Uniform.vec3(self.ambient)),
            (f"{prefix}.diffuse", Uniform.vec3(self.diffuse)),
            (f"{prefix}.specular", Uniform.vec3(self.specular)),
            (f"{prefix}.shininess", Uniform.scalar(self.shininess)),
        ]
