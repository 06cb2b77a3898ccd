"""Affine transforms and primitive meshes for the scene."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from itertools import product

Vec3 = tuple[float, float, float]
Matrix = tuple[tuple[float, float, float, float], ...]


def identity() -> Matrix:
    """The 4x4 identity matrix."""
    return scaling(1.0, 1.0, 1.0)


def translation(x: float, y: float, z: float) -> Matrix:
    """Translation by (x, y, z)."""
    return ((1.0, 0.0, 0.0, x), (0.0, 1.0, 0.0, y), (0.0, 0.0, 1.0, z), (0.0, 0.0, 0.0, 1.0))


def rotation(angle: float, x: float, y: float, z: float) -> Matrix:
    """Rotation by angle degrees about the axis (x, y, z)."""
    length = math.sqrt(x * x + y * y + z * z)
    if length == 0.0:
        raise ValueError("rotation axis must not be zero")
    x, y, z = x / length, y / length, z / length
    c, s = math.cos(math.radians(angle)), math.sin(math.radians(angle))
    t = 1.0 - c
    return (
        (x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0.0),
        (y * x * t + z * s, y * y * t + c, y * z * t - x * s, 0.0),
        (x * z * t - y * s, y * z * t + x * s, z * z * t + c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Scaling by (x, y, z)."""
    return ((x, 0.0, 0.0, 0.0), (0.0, y, 0.0, 0.0), (0.0, 0.0, z, 0.0), (0.0, 0.0, 0.0, 1.0))


def _matmul(a: Matrix, b: Matrix) -> Matrix:
    columns = tuple(zip(*b))
    return tuple(tuple(sum(p * q for p, q in zip(row, col)) for col in columns) for row in a)


def compose(*matrices: Matrix) -> Matrix:
    """Product of the matrices in order; the last one acts on points first."""
    return reduce(_matmul, matrices, identity())


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (a[1] * b[2] - a[2] * b[1], a[2] * b[0] - a[0] * b[2], a[0] * b[1] - a[1] * b[0])


def _dot(a: Vec3, b: Vec3) -> float:
    return sum(p * q for p, q in zip(a, b))


def _unit(v: Vec3) -> Vec3:
    length = math.sqrt(_dot(v, v))
    return (0.0, 0.0, 0.0) if length == 0.0 else (v[0] / length, v[1] / length, v[2] / length)


@dataclass(frozen=True)
class Mesh:
    """Vertices with per-vertex normals and polygon faces given as vertex indices."""

    vertices: tuple[Vec3, ...]
    normals: tuple[Vec3, ...]
    faces: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if len(self.vertices) != len(self.normals):
            raise ValueError("every vertex needs exactly one normal")
        if any(not 0 <= i < len(self.vertices) for face in self.faces for i in face):
            raise ValueError("face refers to a vertex that does not exist")

    def transformed(self, matrix: Matrix) -> Mesh:
        """A copy of the mesh with the matrix applied to positions and normals."""
        r0, r1, r2 = (row[:3] for row in matrix[:3])
        cofactor = (_cross(r1, r2), _cross(r2, r0), _cross(r0, r1))
        sign = -1.0 if _dot(r0, cofactor[0]) < 0.0 else 1.0

        def point(v: Vec3) -> Vec3:
            x, y, z, w = (_dot(row, (*v, 1.0)) for row in matrix)
            return (x, y, z) if w in (0.0, 1.0) else (x / w, y / w, z / w)

        normals = tuple(_unit(tuple(sign * _dot(row, n) for row in cofactor)) for n in self.normals)
        return Mesh(tuple(map(point, self.vertices)), normals, self.faces)


_CORNERS = ((-1.0, -1.0), (1.0, -1.0), (1.0, 1.0), (-1.0, 1.0))
_AXES = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))


def cube(size: float) -> Mesh:
    """Axis-aligned cube of the given edge length centred on the origin."""
    if size <= 0.0:
        raise ValueError(f"cube size must be positive, got {size}")
    half = size / 2.0
    vertices, normals = [], []
    for axis, sign in product(range(3), (1.0, -1.0)):
        normal = tuple(sign * c for c in _AXES[axis])
        u, v = _AXES[(axis + 1) % 3], _AXES[(axis + 2) % 3]
        if sign < 0.0:
            u, v = v, u
        for cu, cv in _CORNERS:
            vertices.append(tuple(half * (n + cu * a + cv * b) for n, a, b in zip(normal, u, v)))
            normals.append(normal)
    faces = tuple(tuple(range(k, k + 4)) for k in range(0, 24, 4))
    return Mesh(tuple(vertices), tuple(normals), faces)


def _grid(rings: int, per_ring: int, wrap: bool) -> tuple[tuple[int, ...], ...]:
    return tuple(
        (
            k * per_ring + j,
            k * per_ring + (j + 1) % per_ring,
            (k + 1) % rings * per_ring + (j + 1) % per_ring,
            (k + 1) % rings * per_ring + j,
        )
        for k, j in product(range(rings if wrap else rings - 1), range(per_ring))
    )


def _angles(count: int) -> list[tuple[float, float]]:
    return [(math.cos(2.0 * math.pi * j / count), math.sin(2.0 * math.pi * j / count)) for j in range(count)]


def cylinder(base: float, top: float, height: float, slices: int, stacks: int) -> Mesh:
    """Open cylinder or cone along +z from z=0 to z=height."""
    if slices < 3 or stacks < 1 or base < 0.0 or top < 0.0 or height <= 0.0:
        raise ValueError("cylinder needs slices >= 3, stacks >= 1, radii >= 0 and height > 0")
    slope = (base - top) / height
    rows = [(base + (top - base) * k / stacks, height * k / stacks) for k in range(stacks + 1)]
    vertices = tuple((r * c, r * s, z) for r, z in rows for c, s in _angles(slices))
    normals = tuple(_unit((c, s, slope)) for _ in rows for c, s in _angles(slices))
    return Mesh(vertices, normals, _grid(stacks + 1, slices, False))


def disk(inner: float, outer: float, slices: int, loops: int) -> Mesh:
    """Flat disk or annulus in the z=0 plane facing +z."""
    if slices < 3 or loops < 1 or not 0.0 <= inner < outer:
        raise ValueError("disk needs slices >= 3, loops >= 1 and 0 <= inner < outer")
    radii = [inner + (outer - inner) * k / loops for k in range(loops + 1)]
    vertices = tuple((r * c, r * s, 0.0) for r in radii for c, s in _angles(slices))
    return Mesh(vertices, ((0.0, 0.0, 1.0),) * len(vertices), _grid(loops + 1, slices, False))


def torus(inner: float, outer: float, sides: int, rings: int) -> Mesh:
    """Torus around the z axis: tube radius inner, ring radius outer."""
    if sides < 3 or rings < 3 or inner <= 0.0 or outer <= 0.0:
        raise ValueError("torus needs sides >= 3, rings >= 3 and positive radii")
    pairs = list(product(_angles(rings), _angles(sides)))
    vertices = tuple(((outer + inner * cp) * ct, (outer + inner * cp) * st, inner * sp) for (ct, st), (cp, sp) in pairs)
    normals = tuple((cp * ct, cp * st, sp) for (ct, st), (cp, sp) in pairs)
    return Mesh(vertices, normals, _grid(rings, sides, True))


def quad(width: float, height: float) -> Mesh:
    """Rectangle in the z=0 plane centred on the origin, facing +z."""
    if width <= 0.0 or height <= 0.0:
        raise ValueError("quad dimensions must be positive")
    vertices = tuple((cu * width / 2.0, cv * height / 2.0, 0.0) for cu, cv in _CORNERS)
    return Mesh(vertices, ((0.0, 0.0, 1.0),) * 4, ((0, 1, 2, 3),))