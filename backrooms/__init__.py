"""Procedural room engine: camera, meshes, shaders, materials, scene objects, panels and an OpenGL viewport."""

__version__ = "0.1.0"