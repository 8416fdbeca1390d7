"""GLSL shader programs loaded from the project's shader folders."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Protocol, Sequence

import numpy as np

logger = logging.getLogger(__name__)

VERTEX_SHADER_DIR = Path("shaders") / "vertex"
FRAGMENT_SHADER_DIR = Path("shaders") / "fragment"


class ShaderError(RuntimeError):
    """Raised when shader sources cannot be read, compiled or linked."""


class _ShaderBackend(Protocol):
    def compile_shader(self, stage: str, source: str) -> tuple[int, bool, str]: ...
    def link_program(self, vertex: int, fragment: int) -> tuple[int, bool, str]: ...
    def delete_shader(self, handle: int) -> None: ...
    def delete_program(self, handle: int) -> None: ...
    def use_program(self, handle: int) -> None: ...
    def uniform_location(self, program: int, name: str) -> int: ...
    def set_uniform_int(self, location: int, value: int) -> None: ...
    def set_uniform_float(self, location: int, value: float) -> None: ...
    def set_uniform_vec3(self, location: int, x: float, y: float, z: float) -> None: ...
    def set_uniform_mat4(self, location: int, values: Sequence[float]) -> None: ...


class _PygletShaderBackend:
    """Shader operations on the current OpenGL context."""

    def __init__(self) -> None:
        from pyglet import gl
        from pyglet.graphics import shader as pyglet_shader

        self._gl = gl
        self._module = pyglet_shader
        self._shaders: dict[int, Any] = {}
        self._programs: dict[int, Any] = {}

    def compile_shader(self, stage: str, source: str) -> tuple[int, bool, str]:
        try:
            compiled = self._module.Shader(source, stage)
        except self._module.ShaderException as exc:
            return 0, False, str(exc)
        self._shaders[compiled.id] = compiled
        return compiled.id, True, ""

    def link_program(self, vertex: int, fragment: int) -> tuple[int, bool, str]:
        try:
            program = self._module.ShaderProgram(
                self._shaders[vertex], self._shaders[fragment]
            )
        except self._module.ShaderException as exc:
            return 0, False, str(exc)
        self._programs[program.id] = program
        return program.id, True, ""

    def delete_shader(self, handle: int) -> None:
        compiled = self._shaders.pop(handle, None)
        if compiled is not None:
            compiled.delete()

    def delete_program(self, handle: int) -> None:
        program = self._programs.pop(handle, None)
        if program is not None:
            program.delete()
        elif handle:
            self._gl.glDeleteProgram(handle)

    def use_program(self, handle: int) -> None:
        self._gl.glUseProgram(handle)

    def uniform_location(self, program: int, name: str) -> int:
        return self._gl.glGetUniformLocation(program, name.encode("utf-8"))

    def set_uniform_int(self, location: int, value: int) -> None:
        self._gl.glUniform1i(location, value)

    def set_uniform_float(self, location: int, value: float) -> None:
        self._gl.glUniform1f(location, value)

    def set_uniform_vec3(self, location: int, x: float, y: float, z: float) -> None:
        self._gl.glUniform3f(location, x, y, z)

    def set_uniform_mat4(self, location: int, values: Sequence[float]) -> None:
        gl = self._gl
        gl.glUniformMatrix4fv(location, 1, gl.GL_FALSE, (gl.GLfloat * 16)(*values))


def _read_source(path: Path, stage: str) -> str:
    try:
        code = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ShaderError(f"{stage} shader file could not be read: {path}") from exc
    if not code:
        raise ShaderError(f"{stage} shader source is empty: {path}")
    return code


def load_shader_sources(vertex_name: str, fragment_name: str, root=".") -> tuple[str, str]:
    """Read the vertex and fragment sources from ``root``'s shader folders."""
    base = Path(root)
    vertex_path = base / VERTEX_SHADER_DIR / vertex_name
    fragment_path = base / FRAGMENT_SHADER_DIR / fragment_name
    logger.debug("Loading shaders %s and %s", vertex_path, fragment_path)
    return _read_source(vertex_path, "vertex"), _read_source(fragment_path, "fragment")


class Shader:
    """A linked shader program built from a vertex and a fragment shader file."""

    def __init__(
        self,
        vertex_name: str,
        fragment_name: str,
        root=".",
        backend: _ShaderBackend | None = None,
    ) -> None:
        vertex_code, fragment_code = load_shader_sources(vertex_name, fragment_name, root)
        self._backend = backend if backend is not None else _PygletShaderBackend()
        self.id = self._build(vertex_code, fragment_code)

    def _build(self, vertex_code: str, fragment_code: str) -> int:
        backend = self._backend
        vertex, ok, log = backend.compile_shader("vertex", vertex_code)
        if not ok:
            backend.delete_shader(vertex)
            raise ShaderError(f"vertex shader compilation failed:\n{log}")
        fragment, ok, log = backend.compile_shader("fragment", fragment_code)
        if not ok:
            backend.delete_shader(vertex)
            backend.delete_shader(fragment)
            raise ShaderError(f"fragment shader compilation failed:\n{log}")
        program, ok, log = backend.link_program(vertex, fragment)
        backend.delete_shader(vertex)
        backend.delete_shader(fragment)
        if not ok:
            backend.delete_program(program)
            raise ShaderError(f"shader program linking failed:\n{log}")
        return program

    def _location(self, name: str) -> int:
        return self._backend.uniform_location(self.id, name)

    def use(self) -> None:
        """Make this program current."""
        self._backend.use_program(self.id)

    def set_bool(self, name: str, value: bool) -> None:
        self._backend.set_uniform_int(self._location(name), int(bool(value)))

    def set_int(self, name: str, value: int) -> None:
        self._backend.set_uniform_int(self._location(name), int(value))

    def set_float(self, name: str, value: float) -> None:
        self._backend.set_uniform_float(self._location(name), float(value))

    def set_vec3(self, name: str, value) -> None:
        x, y, z = (float(component) for component in value)
        self._backend.set_uniform_vec3(self._location(name), x, y, z)

    def set_mat4(self, name: str, matrix) -> None:
        """Upload a 4x4 matrix, in column-major order."""
        array = np.asarray(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
        values = [float(v) for v in array.flatten(order="F")]
        self._backend.set_uniform_mat4(self._location(name), values)

    def delete(self) -> None:
        """Delete the program; further calls do nothing."""
        if self.id:
            self._backend.delete_program(self.id)
            self.id = 0