import numpy as np
import pytest

from backrooms.material import Material
from backrooms.scene import (
    Component,
    MaterialComponent,
    MeshComponent,
    SceneObject,
)


class RecordingShader:
    def __init__(self):
        self.calls = []

    def use(self):
        self.calls.append(("use",))

    def set_int(self, name, value):
        self.calls.append(("int", name, value))

    def set_float(self, name, value):
        self.calls.append(("float", name, value))

    def set_vec3(self, name, value):
        self.calls.append(("vec3", name, tuple(float(v) for v in value)))

    def set_mat4(self, name, matrix):
        self.calls.append(("mat4", name, np.array(matrix)))


class CountingMesh:
    def __init__(self):
        self.draws = 0

    def draw(self):
        self.draws += 1


class Ticker(Component):
    def __init__(self, owner, label):
        super().__init__(owner)
        self.label = label
        self.ticks = []

    def update(self, delta_time):
        self.ticks.append(delta_time)


def test_add_component_sets_owner_and_appends():
    obj = SceneObject()
    mesh = CountingMesh()
    component = obj.add_component(MeshComponent, mesh)
    assert component.owner is obj
    assert component.mesh is mesh
    assert obj.components == [component]


def test_find_component_returns_first_match():
    obj = SceneObject()
    first = obj.add_component(Ticker, "a")
    obj.add_component(Ticker, "b")
    assert obj.find_component(Ticker) is first
    assert obj.find_component(MeshComponent) is None


def test_base_component_render_and_update_do_nothing():
    obj = SceneObject()
    component = obj.add_component(Component)
    component.update(0.5)
    component.render()
    assert obj.components == [component]
    assert np.array_equal(obj.model_matrix, np.identity(4))


def test_update_forwards_delta_time():
    obj = SceneObject()
    a = obj.add_component(Ticker, "a")
    b = obj.add_component(Ticker, "b")
    obj.update(0.016)
    assert a.ticks == [0.016]
    assert b.ticks == [0.016]


def test_initial_transform():
    obj = SceneObject()
    assert np.array_equal(obj.position, np.zeros(3))
    assert np.array_equal(obj.scale, np.ones(3))
    assert np.array_equal(obj.model_matrix, np.identity(4))


def test_set_position_translates():
    obj = SceneObject()
    obj.set_position((0.0, 5.0, 0.0))
    assert np.allclose(obj.model_matrix[:3, 3], [0.0, 5.0, 0.0])
    assert np.allclose(obj.model_matrix[:3, :3], np.identity(3))


def test_set_scale_scales_diagonal():
    obj = SceneObject()
    obj.set_scale((2.0, 3.0, 4.0))
    assert np.allclose(np.diag(obj.model_matrix), [2.0, 3.0, 4.0, 1.0])


def test_rotation_is_orthonormal_and_keeps_translation():
    obj = SceneObject()
    obj.set_position((0.0, 2.5, -25.0))
    obj.set_rotation((30.0, 180.0, 45.0))
    block = obj.model_matrix[:3, :3]
    assert np.allclose(block @ block.T, np.identity(3))
    assert np.isclose(np.linalg.det(block), 1.0)
    assert np.allclose(obj.model_matrix[:3, 3], [0.0, 2.5, -25.0])


def test_pitch_rotates_plane_normal_onto_y():
    obj = SceneObject()
    obj.set_rotation((90.0, 0.0, 0.0))
    normal = obj.model_matrix @ np.array([0.0, 0.0, 1.0, 0.0])
    assert np.allclose(normal, [0.0, -1.0, 0.0, 0.0])


def test_yaw_applied_after_pitch():
    obj = SceneObject()
    obj.set_rotation((90.0, 90.0, 0.0))
    # pitch first takes +Y to +Z, then yaw takes +Z to +X
    assert np.allclose(obj.model_matrix @ np.array([0.0, 1.0, 0.0, 0.0]), [1.0, 0.0, 0.0, 0.0])


def test_render_sets_uniforms_and_draws_mesh():
    obj = SceneObject()
    shader = RecordingShader()
    mesh = CountingMesh()
    obj.add_component(MeshComponent, mesh)
    obj.add_component(MaterialComponent, Material(shader, (0.4, 0.35, 0.3)))
    obj.set_position((1.0, 2.0, 3.0))
    projection = np.full((4, 4), 2.0)
    view = np.full((4, 4), 3.0)

    obj.render(projection, view, np.array([0.0, 2.0, 5.0]))

    assert [c[:2] for c in shader.calls] == [
        ("use",),
        ("mat4", "projection"),
        ("mat4", "view"),
        ("vec3", "lightPos"),
        ("vec3", "viewPos"),
        ("mat4", "model"),
    ]
    assert np.array_equal(shader.calls[1][2], projection)
    assert np.array_equal(shader.calls[2][2], view)
    assert shader.calls[3][2] == (10.0, 10.0, 10.0)
    assert shader.calls[4][2] == (0.0, 2.0, 5.0)
    assert np.array_equal(shader.calls[5][2], obj.model_matrix)
    assert mesh.draws == 1


def test_render_without_material_draws_nothing():
    obj = SceneObject()
    mesh = CountingMesh()
    obj.add_component(MeshComponent, mesh)
    obj.render(np.identity(4), np.identity(4), (0.0, 0.0, 0.0))
    assert mesh.draws == 0


def test_render_without_mesh_touches_no_shader():
    obj = SceneObject()
    shader = RecordingShader()
    obj.add_component(MaterialComponent, Material(shader))
    obj.render(np.identity(4), np.identity(4), (0.0, 0.0, 0.0))
    assert shader.calls == []


def test_render_with_shaderless_material_still_draws():
    obj = SceneObject()
    mesh = CountingMesh()
    obj.add_component(MaterialComponent, Material())
    obj.add_component(MeshComponent, mesh)
    obj.render(np.identity(4), np.identity(4), (0.0, 0.0, 0.0))
    assert mesh.draws == 1


def test_material_component_render_uses_material():
    obj = SceneObject()
    shader = RecordingShader()
    component = obj.add_component(MaterialComponent, Material(shader, (1.0, 0.95, 0.7)))
    component.render()
    assert shader.calls[0] == ("use",)
    assert ("vec3", "material.baseColor", (1.0, 0.95, 0.7)) in shader.calls


def test_material_component_render_without_shader_raises():
    obj = SceneObject()
    component = obj.add_component(MaterialComponent, Material())
    with pytest.raises(ValueError):
        component.render()


def test_mesh_component_render_draws():
    obj = SceneObject()
    mesh = CountingMesh()
    obj.add_component(MeshComponent, mesh).render()
    assert mesh.draws == 1