"""Main editor window and the command that starts it."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import NamedTuple

from backrooms.panels import MaterialPanel, ModelBrowser, RoomGeneratorPanel
from backrooms.viewport import Viewport

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Backrooms Engine"
WINDOW_SIZE = (1280, 720)


class _Dock(NamedTuple):
    title: str
    area: str
    widget: object


def set_working_directory_to_project_root(start=None) -> Path:
    """Change to the directory two levels above ``start`` (default: the current one).

    The executable is expected to run from ``bin/Debug`` or ``bin/Release``.
    Raises ``OSError`` if the directory cannot be entered.
    """
    base = Path(start) if start is not None else Path()
    os.chdir(base / ".." / "..")
    return Path.cwd()


class AppWindow:
    """The editor window: a central viewport with docked side panels."""

    def __init__(self) -> None:
        self.title = WINDOW_TITLE
        self.width, self.height = WINDOW_SIZE
        self.viewport = Viewport(self.width, self.height)
        self.material_panel = MaterialPanel()
        self.model_browser = ModelBrowser()
        self.room_generator_panel = RoomGeneratorPanel()
        self.docks = [
            _Dock("Material", "right", self.material_panel),
            _Dock("Model Browser", "left", self.model_browser),
            _Dock("Room Generator", "right", self.room_generator_panel),
        ]

    def run(self) -> int:
        """Open the window and run the event loop until it closes."""
        import pyglet

        window = pyglet.window.Window(
            self.width, self.height, caption=self.title, resizable=True
        )
        viewport = self.viewport
        viewport.initialize()

        @window.event
        def on_resize(width, height):
            fb_width, fb_height = window.get_framebuffer_size()
            viewport.resize(fb_width, fb_height)
            return pyglet.event.EVENT_HANDLED

        @window.event
        def on_draw():
            viewport.paint()

        def tick(_dt: float) -> None:
            """Keep the clock running so the window redraws every frame."""

        pyglet.clock.schedule_interval(tick, viewport.frame_interval_ms / 1000.0)
        logger.info("Main window shown")
        try:
            pyglet.app.run()
        finally:
            pyglet.clock.unschedule(tick)
            viewport._release()
        return 0


def main(argv=None) -> int:
    """Start the editor."""
    parser = argparse.ArgumentParser(prog="backrooms", description="Backrooms level editor.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    try:
        set_working_directory_to_project_root()
    except OSError as exc:
        logger.error("Failed to change working directory to project root: %s", exc)
    else:
        logger.info("Working directory set to project root")

    return AppWindow().run()