import pytest

from ferriswheel.app import WheelWindow
from ferriswheel.scene import default_light, metallic_material, scene_parts
from ferriswheel.state import WheelState


class FakeWindow:
    def __init__(self):
        self.handlers = []

    def push_handlers(self, handler):
        self.handlers.append(handler)


class RecordingRenderer:
    def __init__(self):
        self.resizes = []
        self.draws = []

    def resize(self, viewport, projection):
        self.resizes.append((viewport, projection))

    def draw(self, view, parts, material, light):
        self.draws.append((view, list(parts), material, light))


def _apply(matrix, point):
    vec = (*point, 1.0)
    return tuple(sum(a * b for a, b in zip(row, vec)) for row in matrix[:3])


@pytest.fixture
def wheel():
    return WheelWindow(WheelState(), window=FakeWindow(), renderer=RecordingRenderer())


def test_registers_itself_as_handler(wheel):
    assert wheel.window.handlers == [wheel]


def test_default_state_created():
    wheel = WheelWindow(window=FakeWindow(), renderer=RecordingRenderer())
    assert wheel.state == WheelState()


def test_update_advances_animation(wheel):
    wheel.update(0.016)
    assert wheel.state.wheel_angle == pytest.approx(0.5)
    wheel.update(0.016)
    assert wheel.state.wheel_angle == pytest.approx(1.0)


def test_on_text_applies_keys(wheel):
    wheel.on_text("l")
    assert wheel.state.moving is False
    wheel.on_text("L")
    assert wheel.state.moving is True
    wheel.on_text("dd")
    assert wheel.state.azimuth == pytest.approx(0.1)


def test_paused_wheel_does_not_turn(wheel):
    wheel.on_text("l")
    wheel.update(0.016)
    assert wheel.state.wheel_angle == 0.0


def test_on_resize_guards_zero_height(wheel):
    assert wheel.on_resize(800, 0) is True
    viewport, projection = wheel.renderer.resizes[-1]
    assert viewport == (0, 0, 800, 1)
    assert wheel.viewport == viewport
    assert projection == wheel.projection
    assert projection[3][2] == -1.0


def test_on_draw_passes_scene(wheel):
    wheel.state.wheel_angle = 30.0
    wheel.on_draw()
    view, parts, material, light = wheel.renderer.draws[-1]
    assert len(parts) == len(scene_parts(wheel.state))
    assert material == metallic_material()
    assert light == default_light()
    assert view == wheel.view


def test_view_centres_camera_on_wheel(wheel):
    wheel.on_text("wwdq")
    wheel.on_draw()
    view = wheel.renderer.draws[-1][0]
    centre = _apply(view, (0.0, 0.0, 0.0))
    assert centre[0] == pytest.approx(0.0, abs=1e-9)
    assert centre[1] == pytest.approx(0.0, abs=1e-9)
    assert centre[2] == pytest.approx(-wheel.state.distance)