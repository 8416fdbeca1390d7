import pytest

from backrooms.panels import MaterialPanel, ModelBrowser, RoomGeneratorPanel, Signal


def test_signal_calls_callbacks_in_order_with_args():
    signal = Signal()
    seen = []
    signal.connect(lambda *a: seen.append(("first", a)))
    signal.connect(lambda *a: seen.append(("second", a)))
    signal.emit(1, "x")
    assert seen == [("first", (1, "x")), ("second", (1, "x"))]


def test_signal_without_callbacks_emits_nothing():
    signal = Signal()
    seen = []
    signal.emit(3)
    signal.connect(seen.append)
    assert seen == []


def test_material_panel_defaults():
    panel = MaterialPanel()
    assert panel.label == "Roughness"
    assert panel.roughness_slider.value == 0
    assert panel.roughness_slider.maximum == 99


def test_roughness_slider_emits_fraction():
    panel = MaterialPanel()
    seen = []
    panel.roughness_changed.connect(seen.append)
    panel.set_roughness_slider(42)
    assert seen == [pytest.approx(0.42)]


def test_roughness_slider_clamps_and_only_emits_on_change():
    panel = MaterialPanel()
    seen = []
    panel.roughness_changed.connect(seen.append)
    panel.set_roughness_slider(500)
    panel.set_roughness_slider(500)
    panel.set_roughness_slider(0)
    assert panel.roughness_slider.value == 0
    assert len(seen) == 2
    assert seen[0] == pytest.approx(panel.roughness_slider.maximum / 100.0)
    assert seen[1] == 0.0


def test_model_browser_select_and_load():
    browser = ModelBrowser()
    selected, clicks = [], []
    browser.model_selected.connect(selected.append)
    browser.load_model_clicked.connect(lambda: clicks.append(True))
    browser.add_model("chair.obj")
    browser.add_model("desk.obj")
    browser.select("desk.obj")
    browser.click_load()
    assert browser.models == ["chair.obj", "desk.obj"]
    assert browser.selected == "desk.obj"
    assert selected == ["desk.obj"]
    assert clicks == [True]


def test_model_browser_rejects_unknown_model():
    browser = ModelBrowser()
    with pytest.raises(ValueError):
        browser.select("missing.obj")
    assert browser.selected is None


def test_model_browser_labels():
    browser = ModelBrowser()
    assert browser.title == "Model Browser"
    assert browser.load_button_text == "Load Model"


def test_room_generator_defaults():
    panel = RoomGeneratorPanel()
    assert panel.seed.value == 1234
    assert (panel.seed.minimum, panel.seed.maximum) == (0, 99999)
    assert panel.room_size.value == 30
    assert (panel.room_size.minimum, panel.room_size.maximum) == (5, 100)


def test_room_generator_seed_changes_and_clamps():
    panel = RoomGeneratorPanel()
    seen = []
    panel.seed_changed.connect(seen.append)
    panel.set_seed(77)
    panel.set_seed(77)
    panel.set_seed(-10)
    panel.set_seed(10**9)
    assert seen == [77, 0, 99999]


def test_room_generator_size_clamps():
    panel = RoomGeneratorPanel()
    seen = []
    panel.room_size_changed.connect(seen.append)
    panel.set_room_size(1)
    panel.set_room_size(1000)
    assert seen == [5, 100]
    assert panel.room_size.value == 100


def test_room_generator_regenerate():
    panel = RoomGeneratorPanel()
    requests = []
    panel.regenerate_requested.connect(lambda: requests.append(panel.seed.value))
    panel.click_regenerate()
    panel.click_regenerate()
    assert requests == [1234, 1234]