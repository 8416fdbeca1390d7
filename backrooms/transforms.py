"""4x4 matrix helpers for model, view and projection transforms.

Matrices are ``numpy`` arrays in mathematical (row, column) order and act on
column vectors: ``matrix @ [x, y, z, 1]``.
"""

from __future__ import annotations

import math

import numpy as np


def _vec3(value) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _mat4(value) -> np.ndarray:
    array = np.asarray(value, dtype=float)
    if array.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
    return array


def normalize(vector) -> np.ndarray:
    """Return ``vector`` scaled to unit length."""
    array = np.asarray(vector, dtype=float)
    length = float(np.linalg.norm(array))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return array / length


def identity() -> np.ndarray:
    """Return the 4x4 identity matrix."""
    return np.identity(4)


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    translation = identity()
    translation[:3, 3] = _vec3(offset)
    return _mat4(matrix) @ translation


def rotate(matrix, angle_radians, axis) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle_radians`` about ``axis``."""
    x, y, z = a = normalize(_vec3(axis))
    c = math.cos(angle_radians)
    s = math.sin(angle_radians)
    cross = np.array([[0.0, -z, y], [z, 0.0, -x], [-y, x, 0.0]])
    rotation = identity()
    rotation[:3, :3] = c * np.identity(3) + s * cross + (1.0 - c) * np.outer(a, a)
    return _mat4(matrix) @ rotation


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a per-axis scale by ``factors``."""
    scaling = np.diag([*_vec3(factors), 1.0])
    return _mat4(matrix) @ scaling


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = normalize(_vec3(center) - eye)
    side = normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)

    result = identity()
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -np.dot(side, eye)
    result[1, 3] = -np.dot(upward, eye)
    result[2, 3] = np.dot(forward, eye)
    return result


def perspective(fovy_radians, aspect, near, far) -> np.ndarray:
    """Right-handed perspective projection with depth mapped to [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy_radians / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")

    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result