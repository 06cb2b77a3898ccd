"""Orbiting camera and projection matrices."""

from __future__ import annotations

import math

Vec3 = tuple[float, float, float]
Matrix = tuple[tuple[float, float, float, float], ...]

FIELD_OF_VIEW = 45.0
NEAR_PLANE = 1.0
FAR_PLANE = 100.0


def camera_position(distance: float, elevation: float, azimuth: float) -> Vec3:
    """Camera position on a sphere around the origin (angles in radians)."""
    ring = distance * math.cos(elevation)
    return (ring * math.sin(azimuth), distance * math.sin(elevation), ring * math.cos(azimuth))


def perspective(fovy: float, aspect: float, near: float, far: float) -> Matrix:
    """Row-major perspective matrix for a vertical field of view in degrees."""
    if not 0.0 < fovy < 180.0 or aspect <= 0.0 or not 0.0 < near < far:
        raise ValueError(f"invalid perspective: fovy={fovy}, aspect={aspect}, near={near}, far={far}")
    f = 1.0 / math.tan(math.radians(fovy) / 2.0)
    depth = near - far
    return (
        (f / aspect, 0.0, 0.0, 0.0),
        (0.0, f, 0.0, 0.0),
        (0.0, 0.0, (far + near) / depth, 2.0 * far * near / depth),
        (0.0, 0.0, -1.0, 0.0),
    )


def _dot(a: Vec3, b: Vec3) -> float:
    return sum(p * q for p, q in zip(a, b))


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (a[1] * b[2] - a[2] * b[1], a[2] * b[0] - a[0] * b[2], a[0] * b[1] - a[1] * b[0])


def _unit(v: Vec3) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length < 1e-12:
        raise ValueError("degenerate camera: eye equals target or up is parallel to the view")
    return (v[0] / length, v[1] / length, v[2] / length)


def look_at(eye: Vec3, target: Vec3, up: Vec3) -> Matrix:
    """View matrix placing the camera at eye, looking at target."""
    forward = _unit((target[0] - eye[0], target[1] - eye[1], target[2] - eye[2]))
    side = _unit(_cross(forward, up))
    true_up = _cross(side, forward)
    back = (-forward[0], -forward[1], -forward[2])
    return (
        (*side, -_dot(side, eye)),
        (*true_up, -_dot(true_up, eye)),
        (*back, -_dot(back, eye)),
        (0.0, 0.0, 0.0, 1.0),
    )


def viewport_projection(width: int, height: int) -> tuple[tuple[int, int, int, int], Matrix]:
    """Viewport rectangle and projection matrix for a window of the given size."""
    height = height or 1
    return (0, 0, width, height), perspective(FIELD_OF_VIEW, width / height, NEAR_PLANE, FAR_PLANE)