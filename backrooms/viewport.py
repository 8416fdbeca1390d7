"""The 3D viewport: a camera looking at a simple backrooms room."""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Protocol

import numpy as np

from backrooms.camera import Camera
from backrooms.material import Material
from backrooms.mesh import Mesh, create_plane_mesh
from backrooms.scene import MaterialComponent, MeshComponent, SceneObject
from backrooms.shader import Shader
from backrooms.transforms import perspective

logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 16
CLEAR_COLOR = (0.2, 0.2, 0.2, 1.0)
NEAR_PLANE = 0.1
FAR_PLANE = 100.0
CAMERA_START = (0.0, 2.0, 5.0)

FLOOR_COLOR = (0.4, 0.35, 0.3)
CEILING_COLOR = (0.95, 0.95, 1.0)
WALLPAPER_COLOR = (1.0, 0.95, 0.7)

_WALLS = (
    ((0.0, 2.5, -25.0), 0.0),
    ((0.0, 2.5, 25.0), 180.0),
    ((-25.0, 2.5, 0.0), 90.0),
    ((25.0, 2.5, 0.0), -90.0),
)


def build_scene(plane: Mesh, floor_shader, ceiling_shader, wallpaper_shader) -> list[SceneObject]:
    """Build floor, ceiling and four walls from one plane mesh."""
    objects: list[SceneObject] = []

    floor = SceneObject()
    floor.add_component(MeshComponent, plane)
    floor.add_component(MaterialComponent, Material(floor_shader, FLOOR_COLOR))
    floor.set_rotation((90.0, 0.0, 0.0))
    objects.append(floor)

    ceiling = SceneObject()
    ceiling.add_component(MeshComponent, plane)
    ceiling.add_component(MaterialComponent, Material(ceiling_shader, CEILING_COLOR))
    ceiling.set_position((0.0, 5.0, 0.0))
    ceiling.set_rotation((90.0, 0.0, 0.0))
    objects.append(ceiling)

    for position, yaw in _WALLS:
        wall = SceneObject()
        wall.add_component(MeshComponent, plane)
        wall.add_component(MaterialComponent, Material(wallpaper_shader, WALLPAPER_COLOR))
        wall.set_position(position)
        wall.set_rotation((0.0, yaw, 0.0))
        objects.append(wall)

    return objects


class _ViewportBackend(Protocol):
    def enable_depth_test(self) -> None: ...
    def set_viewport(self, width: int, height: int) -> None: ...
    def clear(self, r: float, g: float, b: float, a: float) -> None: ...


class _PygletViewportBackend:
    """Frame operations on the current OpenGL context."""

    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl

    def enable_depth_test(self) -> None:
        self._gl.glEnable(self._gl.GL_DEPTH_TEST)

    def set_viewport(self, width: int, height: int) -> None:
        self._gl.glViewport(0, 0, width, height)

    def clear(self, r: float, g: float, b: float, a: float) -> None:
        gl = self._gl
        gl.glClearColor(r, g, b, a)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)


def _default_plane() -> Mesh:
    return create_plane_mesh(50.0, 50.0, 4.0)


class Viewport:
    """Renders the scene; shaders and scene are built lazily on the first frame."""

    def __init__(
        self,
        width: int = 1280,
        height: int = 720,
        *,
        backend: _ViewportBackend | None = None,
        shader_factory: Callable[[str, str], object] | None = None,
        plane_factory: Callable[[], Mesh] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.camera = Camera(CAMERA_START)
        self.scene_objects: list[SceneObject] = []
        self.floor_shader = None
        self.ceiling_shader = None
        self.wallpaper_shader = None
        self.shaders_initialized = False
        self.last_frame_time = 0.0
        self.delta_time = 0.0
        self.frame_interval_ms = FRAME_INTERVAL_MS
        self._backend = backend
        self._shader_factory = shader_factory if shader_factory is not None else Shader
        self._plane_factory = plane_factory if plane_factory is not None else _default_plane
        self._clock = clock if clock is not None else time.time

    def _gl(self) -> _ViewportBackend:
        if self._backend is None:
            self._backend = _PygletViewportBackend()
        return self._backend

    def initialize(self) -> None:
        """Prepare the GL context: enable depth testing."""
        self._gl().enable_depth_test()
        logger.debug("OpenGL initialized")

    def resize(self, width: int, height: int) -> None:
        """Record the new size and set the GL viewport to it."""
        self.width = width
        self.height = height
        self._gl().set_viewport(width, height)

    def projection_matrix(self) -> np.ndarray:
        """Perspective projection from the camera zoom and the viewport aspect."""
        if self.height == 0:
            raise ValueError("viewport height must not be zero")
        return perspective(
            math.radians(self.camera.zoom), self.width / self.height, NEAR_PLANE, FAR_PLANE
        )

    def paint(self) -> None:
        """Draw one frame."""
        if not self.shaders_initialized:
            self._initialize_shaders_and_scene()
            self.shaders_initialized = True

        current = self._clock()
        self.delta_time = current - self.last_frame_time
        self.last_frame_time = current

        self._gl().clear(*CLEAR_COLOR)

        projection = self.projection_matrix()
        view = self.camera.view_matrix()
        for obj in self.scene_objects:
            obj.render(projection, view, self.camera.position)

    def _initialize_shaders_and_scene(self) -> None:
        logger.debug("Shader and scene initialization triggered")
        factory = self._shader_factory
        self.floor_shader = factory("DefaultFloor.vert", "DefaultFloor.frag")
        self.ceiling_shader = factory("DefaultCeiling.vert", "DefaultCeiling.frag")
        self.wallpaper_shader = factory("DefaultWallpaper.vert", "DefaultWallpaper.frag")
        self.scene_objects = build_scene(
            self._plane_factory(), self.floor_shader, self.ceiling_shader, self.wallpaper_shader
        )

    def _release(self) -> None:
        for shader in (self.floor_shader, self.ceiling_shader, self.wallpaper_shader):
            if shader is not None:
                shader.delete()
        self.floor_shader = self.ceiling_shader = self.wallpaper_shader = None