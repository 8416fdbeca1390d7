"""2D textures loaded from image files or built from raw pixel data."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from PIL import Image


class TextureError(RuntimeError):
    """Raised when an image cannot be loaded as a texture."""


class PixelFormat(Enum):
    RED = "red"
    RGB = "rgb"
    RGBA = "rgba"


_CHANNEL_FORMATS = {1: PixelFormat.RED, 3: PixelFormat.RGB, 4: PixelFormat.RGBA}
_NATIVE_MODES = frozenset({"L", "LA", "RGB", "RGBA"})


def format_for_channels(channels: int) -> PixelFormat:
    """Pick the pixel format for an image with ``channels`` channels; RGB otherwise."""
    return _CHANNEL_FORMATS.get(channels, PixelFormat.RGB)


def _normalise_mode(image: Image.Image) -> Image.Image:
    if image.mode in _NATIVE_MODES:
        return image
    if image.mode == "P":
        return image.convert("RGBA" if "transparency" in image.info else "RGB")
    bands = image.getbands()
    if len(bands) == 1:
        return image.convert("L")
    return image.convert("RGBA" if "A" in bands else "RGB")


def read_image(filepath) -> tuple[int, int, int, bytes]:
    """Load an image flipped vertically; return ``(width, height, channels, pixels)``."""
    try:
        with Image.open(filepath) as image:
            image.load()
            converted = _normalise_mode(image)
            flipped = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    except (OSError, ValueError) as exc:
        raise TextureError(f"Failed to load texture: {filepath}") from exc
    width, height = flipped.size
    return width, height, len(flipped.getbands()), flipped.tobytes()


class _TextureBackend(Protocol):
    def generate(self) -> int: ...
    def upload(self, texture_id: int, fmt: PixelFormat, width: int, height: int, pixels: bytes) -> None: ...
    def bind(self, unit: int, texture_id: int) -> None: ...
    def delete(self, texture_id: int) -> None: ...


class _PygletTextureBackend:
    """Texture operations on the current OpenGL context."""

    def __init__(self) -> None:
        from pyglet import gl

        self._gl = gl
        self._formats = {
            PixelFormat.RED: gl.GL_RED,
            PixelFormat.RGB: gl.GL_RGB,
            PixelFormat.RGBA: gl.GL_RGBA,
        }

    def generate(self) -> int:
        gl = self._gl
        ids = (gl.GLuint * 1)()
        gl.glGenTextures(1, ids)
        return ids[0]

    def upload(self, texture_id: int, fmt: PixelFormat, width: int, height: int, pixels: bytes) -> None:
        gl = self._gl
        gl_format = self._formats[fmt]
        buffer = (gl.GLubyte * len(pixels)).from_buffer_copy(pixels)
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, gl_format, width, height, 0,
            gl_format, gl.GL_UNSIGNED_BYTE, buffer,
        )
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)

    def bind(self, unit: int, texture_id: int) -> None:
        gl = self._gl
        gl.glActiveTexture(gl.GL_TEXTURE0 + unit)
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture_id)

    def delete(self, texture_id: int) -> None:
        gl = self._gl
        gl.glDeleteTextures(1, (gl.GLuint * 1)(texture_id))


class Texture:
    """A repeating, mipmapped 2D texture."""

    def __init__(self, backend: _TextureBackend | None = None) -> None:
        self._backend = backend if backend is not None else _PygletTextureBackend()
        self.id = self._backend.generate()
        self.kind = ""
        self.path = ""

    def load_from_file(self, filepath) -> None:
        """Fill the texture from an image file."""
        width, height, channels, pixels = read_image(filepath)
        self._backend.upload(self.id, format_for_channels(channels), width, height, pixels)
        self.path = str(filepath)

    def generate_from_data(self, data, width: int, height: int, alpha: bool = False) -> None:
        """Fill the texture from raw RGB or RGBA bytes."""
        fmt = PixelFormat.RGBA if alpha else PixelFormat.RGB
        pixels = bytes(data)
        expected = width * height * (4 if alpha else 3)
        if width <= 0 or height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(pixels) < expected:
            raise ValueError(f"expected at least {expected} bytes of pixel data, got {len(pixels)}")
        self._backend.upload(self.id, fmt, width, height, pixels)
        self.kind = "procedural"

    def bind(self, unit: int = 0) -> None:
        """Bind the texture to texture unit ``unit``."""
        self._backend.bind(unit, self.id)

    def delete(self) -> None:
        """Delete the texture; further calls do nothing."""
        if self.id:
            self._backend.delete(self.id)
            self.id = 0