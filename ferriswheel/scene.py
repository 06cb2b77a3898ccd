"""Scene description: materials, lighting and the placed parts of the wheel."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import lru_cache

from .geometry import (
    Matrix,
    Mesh,
    compose,
    cube,
    cylinder,
    disk,
    identity,
    quad,
    rotation,
    scaling,
    torus,
    translation,
)
from .state import LIGHT_AMBIENT, LIGHT_DIFFUSE, LIGHT_POSITION, WheelState

Color = tuple[float, float, float, float]
Rgb = tuple[float, float, float]

CABIN_COUNT = 10
WHEEL_RADIUS = 2.0

CABIN_COLORS: tuple[Rgb, ...] = (
    (0.0, 1.0, 1.0),  # cyan
    (0.0, 1.0, 0.0),  # green
    (0.0, 0.0, 1.0),  # blue
    (1.0, 1.0, 0.0),  # yellow
    (0.6, 0.1, 0.6),  # purple
    (1.0, 0.0, 1.0),  # pink
    (0.0, 1.0, 0.0),  # green
    (0.0, 0.0, 1.0),  # blue
    (1.0, 0.5, 0.0),  # orange
    (1.0, 1.0, 0.0),  # yellow
)

DARK_METAL: Color = (0.5, 0.5, 0.5, 1.0)
METAL: Color = (0.7, 0.7, 0.7, 1.0)
WINDOW_COLOR: Color = (0.5, 0.8, 1.0, 0.4)

_CABIN_SIZE = 0.45
_WINDOWS = (
    ((0.0, 0.18, 0.2), 0.0),
    ((0.0, 0.18, -0.2), 180.0),
    ((-0.2, 0.18, 0.0), -90.0),
    ((0.2, 0.18, 0.0), 90.0),
)
_BASE_COLUMNS = (
    (80.0, 30.0, 0.3),
    (80.0, -30.0, 0.3),
    (100.0, 30.0, -0.3),
    (100.0, -30.0, -0.3),
)

_cube = lru_cache(maxsize=None)(cube)
_cylinder = lru_cache(maxsize=None)(cylinder)
_disk = lru_cache(maxsize=None)(disk)
_torus = lru_cache(maxsize=None)(torus)
_quad = lru_cache(maxsize=None)(quad)


@dataclass(frozen=True)
class Material:
    """Surface reflectance of the metallic structure."""

    ambient: Color
    diffuse: Color
    specular: Color
    shininess: float


@dataclass(frozen=True)
class Light:
    """A single positional light plus the global ambient term."""

    ambient: Color
    diffuse: Color
    specular: Color
    position: tuple[float, float, float, float]
    global_ambient: Color


@dataclass(frozen=True)
class Part:
    """A primitive mesh drawn with a colour under a model transform."""

    name: str
    mesh: Mesh
    color: Color
    matrix: Matrix = field(default_factory=identity)

    def placed(self, matrix: Matrix) -> Part:
        """The same part with another transform applied in front of its own."""
        return replace(self, matrix=compose(matrix, self.matrix))

    def world_mesh(self) -> Mesh:
        """The mesh with this part's transform applied."""
        return self.mesh.transformed(self.matrix)


def metallic_material() -> Material:
    """Grey metal with a bright specular highlight."""
    return Material(
        ambient=(0.3, 0.3, 0.3, 1.0),
        diffuse=(0.7, 0.7, 0.7, 1.0),
        specular=(1.0, 1.0, 1.0, 1.0),
        shininess=50.0,
    )


def default_light() -> Light:
    """The scene's white light and ambient settings."""
    return Light(
        ambient=LIGHT_AMBIENT,
        diffuse=LIGHT_DIFFUSE,
        specular=(1.0, 1.0, 1.0, 1.0),
        position=LIGHT_POSITION,
        global_ambient=(0.3, 0.3, 0.3, 1.0),
    )


def cabin_parts(r: float, g: float, b: float) -> list[Part]:
    """Body, roof and four translucent windows of a cabin, in cabin coordinates."""
    body = Part("cabin_body", _cube(_CABIN_SIZE), (r, g, b, 1.0), scaling(1.0, 0.6, 1.0))
    roof = Part(
        "cabin_roof",
        _cube(_CABIN_SIZE),
        (r * 0.5, g * 0.5, b * 0.5, 1.0),
        compose(translation(0.0, 0.3, 0.0), scaling(1.0, 0.15, 1.0)),
    )
    windows = [
        Part(
            "window",
            _quad(0.4, 0.3),
            WINDOW_COLOR,
            compose(translation(*offset), rotation(angle, 0.0, 1.0, 0.0)),
        )
        for offset, angle in _WINDOWS
    ]
    return [body, roof, *windows]


def _rims() -> list[Part]:
    return [
        Part("rim", _torus(0.05, WHEEL_RADIUS, 20, 60), METAL, translation(0.0, 0.0, z))
        for z in (0.3, -0.3)
    ]


def _hub() -> list[Part]:
    axle = Part(
        "hub",
        _cylinder(0.1, 0.1, 0.81, 20, 10),
        DARK_METAL,
        compose(translation(0.0, 0.0, -0.41), rotation(90.0, 0.0, 0.0, 1.0)),
    )
    caps = [
        Part("hub_cap", _disk(0.0, 0.1, 20, 20), DARK_METAL, translation(0.0, 0.0, z))
        for z in (-0.41, 0.4)
    ]
    return [axle, *caps]


def _spokes(angle: float) -> list[Part]:
    rod = _cylinder(0.05, 0.05, 0.35, 20, 10)
    front = compose(
        rotation(angle, 0.0, 0.0, 1.0),
        translation(0.0, 0.0, 0.3),
        scaling(0.5, 5.6, 0.5),
        rotation(90.0, 1.0, 0.0, 0.0),
    )
    back = compose(
        front,
        translation(0.0, -1.2, -0.1),
        scaling(1.0, 1.0, 1.3),
        rotation(90.0, 0.0, 0.0, 1.0),
    )
    return [Part("spoke", rod, METAL, front), Part("spoke", rod, METAL, back)]


def wheel_parts(wheel_angle: float, sway_angle: float) -> list[Part]:
    """The turning wheel with its cabins, kept upright and swaying (angles in degrees)."""
    parts = [*_rims(), *_hub()]
    step = 360.0 / CABIN_COUNT
    for i, rgb in enumerate(CABIN_COLORS):
        angle = i * step
        parts.extend(_spokes(angle))
        mount = compose(
            rotation(angle, 0.0, 0.0, 1.0),
            translation(WHEEL_RADIUS, 0.0, 0.0),
            rotation(sway_angle, 0.0, 0.0, 1.0),
            rotation(-angle, 0.0, 0.0, 1.0),
            rotation(-wheel_angle, 0.0, 0.0, 1.0),
        )
        parts.append(
            Part(
                "cabin_axle",
                _cylinder(0.05, 0.05, 0.6, 20, 10),
                METAL,
                compose(mount, translation(0.0, 0.0, -0.3)),
            )
        )
        parts.extend(part.placed(mount) for part in cabin_parts(*rgb))
    spin = rotation(wheel_angle, 0.0, 0.0, 1.0)
    return [part.placed(spin) for part in parts]


def base_parts() -> list[Part]:
    """The two feet and four slanted columns holding the wheel."""
    feet = [
        Part(
            "foot",
            _cube(1.0),
            DARK_METAL,
            compose(translation(0.0, -2.6, z), scaling(3.5, 0.2, 0.4)),
        )
        for z in (0.75, -0.75)
    ]
    columns = [
        Part(
            "column",
            _cylinder(0.1, 0.1, 3.0, 20, 10),
            DARK_METAL,
            compose(
                translation(0.0, 0.0, z),
                rotation(tilt, 1.0, 0.0, 0.0),
                rotation(spread, 0.0, 1.0, 0.0),
            ),
        )
        for tilt, spread, z in _BASE_COLUMNS
    ]
    return [*feet, *columns]


def scene_parts(state: WheelState) -> list[Part]:
    """Every part of the scene for the given animation state."""
    return [*wheel_parts(state.wheel_angle, state.sway_angle), *base_parts()]