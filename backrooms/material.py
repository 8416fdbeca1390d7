"""Surface materials: a shader, a base colour, an optional texture and lighting terms."""

from __future__ import annotations

from dataclasses import dataclass

from backrooms.shader import Shader
from backrooms.texture import Texture


@dataclass
class Material:
    """Material parameters uploaded to a shader before drawing.

    The shader and texture are shared and not owned by the material.
    """

    shader: Shader | None = None
    base_color: tuple[float, float, float] = (1.0, 1.0, 1.0)
    texture: Texture | None = None
    metallic: float = 0.0
    roughness: float = 1.0
    ambient: float = 0.1
    diffuse: float = 0.8
    specular: float = 0.5

    def use(self) -> None:
        """Activate the shader, bind the texture and upload the material uniforms."""
        shader = self.shader
        if shader is None:
            raise ValueError("material has no shader")
        shader.use()
        if self.texture is not None:
            shader.set_int("texture1", 0)
            self.texture.bind(0)

        shader.set_vec3("material.baseColor", self.base_color)
        shader.set_float("material.metallic", self.metallic)
        shader.set_float("material.roughness", self.roughness)
        shader.set_float("material.ambient", self.ambient)
        shader.set_float("material.diffuse", self.diffuse)
        shader.set_float("material.specular", self.specular)