"""Scene objects made of components, with a cached model transform."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

from backrooms.material import Material
from backrooms.mesh import Mesh
from backrooms.transforms import identity, rotate, scale, translate

LIGHT_POSITION = (10.0, 10.0, 10.0)

C = TypeVar("C", bound="Component")


class Component:
    """Behaviour attached to a scene object."""

    def __init__(self, owner: SceneObject) -> None:
        self.owner = owner

    def update(self, delta_time: float) -> None:
        """Advance the component by ``delta_time`` seconds; nothing by default."""

    def render(self) -> None:
        """Draw the component; nothing by default."""


class MaterialComponent(Component):
    """Gives its owner a material."""

    def __init__(self, owner: SceneObject, material: Material) -> None:
        super().__init__(owner)
        self.material = material

    def render(self) -> None:
        self.material.use()


class MeshComponent(Component):
    """Gives its owner a mesh to draw."""

    def __init__(self, owner: SceneObject, mesh: Mesh) -> None:
        super().__init__(owner)
        self.mesh = mesh

    def render(self) -> None:
        self.mesh.draw()


class SceneObject:
    """A transformable object holding an ordered list of components."""

    def __init__(self) -> None:
        self.components: list[Component] = []
        self.position = np.zeros(3)
        self.rotation = np.zeros(3)  # Euler angles in degrees: pitch (x), yaw (y), roll (z)
        self.scale = np.ones(3)
        self.model_matrix = identity()

    def add_component(self, component_type: type[C], *args) -> C:
        """Create a component owned by this object, attach it and return it."""
        component = component_type(self, *args)
        self.components.append(component)
        return component

    def find_component(self, component_type: type[C]) -> C | None:
        """Return the first attached component of ``component_type``, if any."""
        return next((c for c in self.components if isinstance(c, component_type)), None)

    def set_position(self, position) -> None:
        self.position = np.asarray(position, dtype=float).copy()
        self.update_model_matrix()

    def set_rotation(self, rotation) -> None:
        self.rotation = np.asarray(rotation, dtype=float).copy()
        self.update_model_matrix()

    def set_scale(self, factors) -> None:
        self.scale = np.asarray(factors, dtype=float).copy()
        self.update_model_matrix()

    def update_model_matrix(self) -> None:
        """Recompute translate * yaw * pitch * roll * scale."""
        pitch, yaw, roll = (math.radians(angle) for angle in self.rotation)
        matrix = translate(identity(), self.position)
        matrix = rotate(matrix, yaw, (0.0, 1.0, 0.0))
        matrix = rotate(matrix, pitch, (1.0, 0.0, 0.0))
        matrix = rotate(matrix, roll, (0.0, 0.0, 1.0))
        self.model_matrix = scale(matrix, self.scale)

    def update(self, delta_time: float) -> None:
        for component in self.components:
            component.update(delta_time)

    def render(self, projection, view, camera_pos) -> None:
        """Set the transform uniforms and draw the mesh, if both mesh and material exist."""
        material_component = self.find_component(MaterialComponent)
        mesh_component = self.find_component(MeshComponent)
        if material_component is None or mesh_component is None:
            return

        shader = material_component.material.shader
        if shader is not None:
            shader.use()
            shader.set_mat4("projection", projection)
            shader.set_mat4("view", view)
            shader.set_vec3("lightPos", LIGHT_POSITION)
            shader.set_vec3("viewPos", camera_pos)
            shader.set_mat4("model", self.model_matrix)

        mesh_component.render()