"""Indexed triangle meshes, models made of meshes, and a plane builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import numpy as np

from backrooms.geometry import Vector2, Vector3, Vertex

logger = logging.getLogger(__name__)

FLOATS_PER_VERTEX = 8
_FLOAT_SIZE = 4
# (attribute location, component count, offset in floats)
_ATTRIBUTES = ((0, 3, 0), (1, 3, 3), (2, 2, 6))


def _gl():
    from pyglet import gl

    return gl


@dataclass
class Mesh:
    """Vertices and triangle indices, with their GPU buffers once uploaded."""

    vertices: list[Vertex]
    indices: list[int]
    vao: int = field(default=0, init=False, repr=False, compare=False)
    vbo: int = field(default=0, init=False, repr=False, compare=False)
    ebo: int = field(default=0, init=False, repr=False, compare=False)

    def vertex_data(self) -> np.ndarray:
        """Return interleaved vertex floats (position, normal, UV) as float32."""
        return np.array(
            [value for vertex in self.vertices for value in vertex.flatten()],
            dtype=np.float32,
        )

    def index_data(self) -> np.ndarray:
        """Return the triangle indices as uint32."""
        return np.array(self.indices, dtype=np.uint32)

    def upload(self) -> None:
        """Create the vertex array and buffers and fill them with the mesh data."""
        gl = _gl()
        vertices = self.vertex_data()
        indices = self.index_data()

        ids = (gl.GLuint * 1)()
        gl.glGenVertexArrays(1, ids)
        self.vao = ids[0]
        gl.glGenBuffers(1, ids)
        self.vbo = ids[0]
        gl.glGenBuffers(1, ids)
        self.ebo = ids[0]

        gl.glBindVertexArray(self.vao)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self.vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, vertices.nbytes, vertices.ctypes.data, gl.GL_STATIC_DRAW
        )

        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, indices.nbytes, indices.ctypes.data, gl.GL_STATIC_DRAW
        )

        stride = FLOATS_PER_VERTEX * _FLOAT_SIZE
        for location, size, offset in _ATTRIBUTES:
            gl.glEnableVertexAttribArray(location)
            gl.glVertexAttribPointer(
                location, size, gl.GL_FLOAT, gl.GL_FALSE, stride, offset * _FLOAT_SIZE
            )

        gl.glBindVertexArray(0)

    def draw(self) -> None:
        """Draw the mesh as triangles, uploading it first if needed."""
        if not self.indices:
            logger.warning("Draw skipped: mesh has no indices.")
            return
        if self.vao == 0:
            self.upload()
        gl = _gl()
        gl.glBindVertexArray(self.vao)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self.ebo)
        gl.glDrawElements(gl.GL_TRIANGLES, len(self.indices), gl.GL_UNSIGNED_INT, 0)
        gl.glBindVertexArray(0)

    def release(self) -> None:
        """Delete the GPU objects held by this mesh."""
        if self.vao == 0:
            return
        gl = _gl()
        gl.glDeleteVertexArrays(1, (gl.GLuint * 1)(self.vao))
        gl.glDeleteBuffers(1, (gl.GLuint * 1)(self.vbo))
        gl.glDeleteBuffers(1, (gl.GLuint * 1)(self.ebo))
        self.vao = self.vbo = self.ebo = 0


@dataclass
class Model:
    """A collection of meshes drawn together."""

    meshes: list[Mesh] = field(default_factory=list)

    def add_mesh(self, mesh: Mesh) -> None:
        self.meshes.append(mesh)

    def draw(self) -> None:
        for mesh in self.meshes:
            mesh.draw()


def create_plane_mesh(width: float, height: float, uv_repeat: float = 1.0) -> Mesh:
    """Build a plane centred at the origin, facing +Z, spanning X and Y."""
    half_width = width * 0.5
    half_height = height * 0.5
    normal = Vector3(0.0, 0.0, 1.0)

    vertices = [
        Vertex(Vector3(-half_width, -half_height, 0.0), normal, Vector2(0.0, 0.0)),
        Vertex(Vector3(half_width, -half_height, 0.0), normal, Vector2(uv_repeat, 0.0)),
        Vertex(Vector3(half_width, half_height, 0.0), normal, Vector2(uv_repeat, uv_repeat)),
        Vertex(Vector3(-half_width, half_height, 0.0), normal, Vector2(0.0, uv_repeat)),
    ]
    indices = [0, 1, 2, 2, 3, 0]
    return Mesh(vertices, indices)