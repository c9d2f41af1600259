"""Vector and quaternion helpers for turtle and growth geometry."""

from __future__ import annotations

from math import cos, radians, sin, sqrt
from typing import Tuple

Vector3 = Tuple[float, float, float]
Quaternion = Tuple[float, float, float, float]

ORIGIN: Vector3 = (0.0, 0.0, 0.0)
UP: Vector3 = (0.0, 1.0, 0.0)
IDENTITY: Quaternion = (1.0, 0.0, 0.0, 0.0)


def scale(vector: Vector3, weight: float) -> Vector3:
    return (vector[0] * weight, vector[1] * weight, vector[2] * weight)


def add(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def subtract(a: Vector3, b: Vector3) -> Vector3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def distance_squared(a: Vector3, b: Vector3) -> float:
    dx, dy, dz = subtract(a, b)
    return dx * dx + dy * dy + dz * dz


def length(vector: Vector3) -> float:
    return sqrt(vector[0] ** 2 + vector[1] ** 2 + vector[2] ** 2)


def normalize(vector: Vector3) -> Vector3:
    """Unit vector along ``vector``; the zero vector is returned unchanged."""

    magnitude = length(vector)
    if magnitude == 0:
        return vector
    return scale(vector, 1.0 / magnitude)


def axis_angle(axis: Vector3, angle_deg: float) -> Quaternion:
    """Quaternion rotating by ``angle_deg`` about the unit ``axis``."""

    half = radians(angle_deg) / 2.0
    s = sin(half)
    return (cos(half), axis[0] * s, axis[1] * s, axis[2] * s)


def multiply(a: Quaternion, b: Quaternion) -> Quaternion:
    """Hamilton product ``a * b`` (apply ``b`` in the frame of ``a``)."""

    aw, ax, ay, az = a
    bw, bx, by, bz = b
    return (
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    )


def rotate(vector: Vector3, rotation: Quaternion) -> Vector3:
    """Rotate ``vector`` by the unit quaternion ``rotation``."""

    x, y, z = vector
    qw, qx, qy, qz = rotation
    ix = qw * x + qy * z - qz * y
    iy = qw * y + qz * x - qx * z
    iz = qw * z + qx * y - qy * x
    iw = -qx * x - qy * y - qz * z
    return (
        ix * qw + iw * -qx + iy * -qz - iz * -qy,
        iy * qw + iw * -qy + iz * -qx - ix * -qz,
        iz * qw + iw * -qz + ix * -qy - iy * -qx,
    )
