"""Editor side panels: material settings, model browser and room generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

ROUGHNESS_SLIDER_MIN = 0
ROUGHNESS_SLIDER_MAX = 99
SEED_MIN = 0
SEED_MAX = 99999
DEFAULT_SEED = 1234
ROOM_SIZE_MIN = 5
ROOM_SIZE_MAX = 100
DEFAULT_ROOM_SIZE = 30


class Signal:
    """A list of callbacks invoked together when the signal is emitted."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., object]] = []

    def connect(self, callback: Callable[..., object]) -> None:
        """Call ``callback`` on every later emission."""
        self._callbacks.append(callback)

    def emit(self, *args) -> None:
        """Call every connected callback with ``args``, in connection order."""
        for callback in list(self._callbacks):
            callback(*args)


@dataclass
class _BoundedValue:
    """An integer kept within ``[minimum, maximum]``, like a slider or spin box."""

    minimum: int
    maximum: int
    value: int

    def set(self, value: int) -> bool:
        """Store ``value`` clamped to the range; return whether it changed."""
        clamped = max(self.minimum, min(self.maximum, int(value)))
        if clamped == self.value:
            return False
        self.value = clamped
        return True


class MaterialPanel:
    """Material settings; the roughness slider reports values in [0, 0.99]."""

    def __init__(self) -> None:
        self.label = "Roughness"
        self.roughness_slider = _BoundedValue(
            ROUGHNESS_SLIDER_MIN, ROUGHNESS_SLIDER_MAX, ROUGHNESS_SLIDER_MIN
        )
        self.material_changed = Signal()
        self.roughness_changed = Signal()
        self.metallic_changed = Signal()

    def set_roughness_slider(self, value: int) -> None:
        """Move the roughness slider; emits ``roughness_changed`` when it moves."""
        if self.roughness_slider.set(value):
            self.roughness_changed.emit(self.roughness_slider.value / 100.0)


class ModelBrowser:
    """A list of model files with a load button."""

    def __init__(self) -> None:
        self.title = "Model Browser"
        self.load_button_text = "Load Model"
        self.models: list[str] = []
        self.selected: str | None = None
        self.model_selected = Signal()
        self.load_model_clicked = Signal()

    def add_model(self, file_name: str) -> None:
        """Append ``file_name`` to the list."""
        self.models.append(file_name)

    def select(self, file_name: str) -> None:
        """Select a listed model and emit ``model_selected``."""
        if file_name not in self.models:
            raise ValueError(f"model not in the list: {file_name}")
        self.selected = file_name
        self.model_selected.emit(file_name)

    def click_load(self) -> None:
        """Press the load button."""
        self.load_model_clicked.emit()


class RoomGeneratorPanel:
    """Seed and room size controls with a regenerate button."""

    def __init__(self) -> None:
        self.title = "Room Generator"
        self.regenerate_button_text = "Regenerate"
        self.seed = _BoundedValue(SEED_MIN, SEED_MAX, DEFAULT_SEED)
        self.room_size = _BoundedValue(ROOM_SIZE_MIN, ROOM_SIZE_MAX, DEFAULT_ROOM_SIZE)
        self.seed_changed = Signal()
        self.room_size_changed = Signal()
        self.regenerate_requested = Signal()

    def set_seed(self, seed: int) -> None:
        """Set the seed, clamped to its range; emits ``seed_changed`` on change."""
        if self.seed.set(seed):
            self.seed_changed.emit(self.seed.value)

    def set_room_size(self, size: int) -> None:
        """Set the room size, clamped to its range; emits ``room_size_changed`` on change."""
        if self.room_size.set(size):
            self.room_size_changed.emit(self.room_size.value)

    def click_regenerate(self) -> None:
        """Press the regenerate button."""
        self.regenerate_requested.emit()