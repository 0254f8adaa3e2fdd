"""Vector and quaternion helpers for attitude and geometry computations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

_EPS = 1e-6


class EulerOrder(Enum):
    """Axis order of an intrinsic Euler-angle rotation."""

    XYZ = "XYZ"
    XZY = "XZY"
    YXZ = "YXZ"
    YZX = "YZX"
    ZXY = "ZXY"
    ZYX = "ZYX"


@dataclass(frozen=True, slots=True)
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def cross(a: Vector3, b: Vector3) -> Vector3:
        """Cross product a x b."""
        return Vector3(
            a.y * b.z - a.z * b.y,
            a.z * b.x - a.x * b.z,
            a.x * b.y - a.y * b.x,
        )

    def is_finite(self) -> bool:
        """True if no component is NaN or infinite."""
        return all(math.isfinite(c) for c in self)

    def is_normalized(self, eps: float = _EPS) -> bool:
        """True if the length is within ``eps`` of one."""
        return abs(math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z) - 1.0) < eps

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, s: float) -> Vector3:
        return Vector3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector3:
        return Vector3(self.x / s, self.y / s, self.z / s)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)


_SINGLE_AXIS = {
    EulerOrder.XYZ: ("x", "y", "z"),
    EulerOrder.XZY: ("x", "z", "y"),
    EulerOrder.YXZ: ("y", "x", "z"),
    EulerOrder.YZX: ("y", "z", "x"),
    EulerOrder.ZXY: ("z", "x", "y"),
    EulerOrder.ZYX: ("z", "y", "x"),
}


def _clamped_asin(s: float) -> float:
    if abs(s) >= 1.0:
        return math.copysign(math.pi / 2.0, s)
    return math.asin(s)


@dataclass(slots=True)
class Quaternion:
    """A quaternion ``w + xi + yj + zk``; the default is the identity."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def conjugate(self) -> Quaternion:
        return Quaternion(self.w, -self.x, -self.y, -self.z)

    def inverse(self) -> Quaternion:
        """Multiplicative inverse; the identity for a near-zero quaternion."""
        n2 = self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z
        if n2 < _EPS:
            return Quaternion()
        return Quaternion(self.w / n2, -self.x / n2, -self.y / n2, -self.z / n2)

    def norm(self) -> float:
        return math.sqrt(self.w * self.w + self.x * self.x + self.y * self.y + self.z * self.z)

    @staticmethod
    def dot(a: Quaternion, b: Quaternion) -> float:
        return a.w * b.w + a.x * b.x + a.y * b.y + a.z * b.z

    @staticmethod
    def multiply(q1: Quaternion, q2: Quaternion) -> Quaternion:
        """Hamilton product q1 * q2."""
        return Quaternion(
            q1.w * q2.w - q1.x * q2.x - q1.y * q2.y - q1.z * q2.z,
            q1.w * q2.x + q1.x * q2.w + q1.y * q2.z - q1.z * q2.y,
            q1.w * q2.y - q1.x * q2.z + q1.y * q2.w + q1.z * q2.x,
            q1.w * q2.z + q1.x * q2.y - q1.y * q2.x + q1.z * q2.w,
        )

    def __mul__(self, other: Quaternion) -> Quaternion:
        return Quaternion.multiply(self, other)

    def normalized(self) -> Quaternion:
        """Unit quaternion in the same direction; the identity if near zero."""
        n = self.norm()
        if n < _EPS:
            return Quaternion()
        return Quaternion(self.w / n, self.x / n, self.y / n, self.z / n)

    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in (self.w, self.x, self.y, self.z))

    def is_normalized(self, eps: float = _EPS) -> bool:
        return abs(self.norm() - 1.0) < eps

    def is_identity(self, eps: float = _EPS) -> bool:
        return (
            abs(self.w - 1.0) < eps
            and abs(self.x) < eps
            and abs(self.y) < eps
            and abs(self.z) < eps
        )

    def set_identity(self) -> None:
        self.w, self.x, self.y, self.z = 1.0, 0.0, 0.0, 0.0

    @staticmethod
    def from_euler(a: float, b: float, c: float, order: EulerOrder) -> Quaternion:
        """Compose intrinsic rotations: first axis by ``a``, then ``b``, then ``c``."""

        def single(axis: str, angle: float) -> Quaternion:
            half = angle * 0.5
            q = Quaternion(math.cos(half), 0.0, 0.0, 0.0)
            setattr(q, axis, math.sin(half))
            return q

        first, second, third = _SINGLE_AXIS[order]
        return Quaternion.multiply(
            Quaternion.multiply(single(first, a), single(second, b)), single(third, c)
        )

    def to_euler(self, order: EulerOrder) -> tuple[float, float, float]:
        """Extract the angles ``(a, b, c)`` for the given order."""
        qw, qx, qy, qz = self.w, self.x, self.y, self.z
        if order is EulerOrder.ZYX:
            a = math.atan2(2.0 * (qw * qz + qx * qy), 1.0 - 2.0 * (qy * qy + qz * qz))
            b = _clamped_asin(2.0 * (qw * qy - qz * qx))
            c = math.atan2(2.0 * (qw * qx + qy * qz), 1.0 - 2.0 * (qx * qx + qy * qy))
        elif order is EulerOrder.ZXY:
            b = _clamped_asin(2.0 * (qw * qx - qy * qz))
            a = math.atan2(2.0 * (qw * qy + qx * qz), 1.0 - 2.0 * (qx * qx + qy * qy))
            c = math.atan2(2.0 * (qw * qz + qx * qy), 1.0 - 2.0 * (qx * qx + qz * qz))
        elif order is EulerOrder.YXZ:
            b = _clamped_asin(2.0 * (qw * qx - qy * qz))
            a = math.atan2(2.0 * (qw * qz + qx * qy), 1.0 - 2.0 * (qx * qx + qz * qz))
            c = math.atan2(2.0 * (qw * qy + qx * qz), 1.0 - 2.0 * (qy * qy + qz * qz))
        elif order is EulerOrder.YZX:
            b = _clamped_asin(2.0 * (qw * qz - qx * qy))
            a = math.atan2(2.0 * (qw * qy + qz * qx), 1.0 - 2.0 * (qy * qy + qz * qz))
            c = math.atan2(2.0 * (qw * qx + qz * qy), 1.0 - 2.0 * (qx * qx + qz * qz))
        elif order is EulerOrder.XZY:
            b = _clamped_asin(2.0 * (qw * qz - qx * qy))
            a = math.atan2(2.0 * (qw * qx + qz * qy), 1.0 - 2.0 * (qx * qx + qz * qz))
            c = math.atan2(2.0 * (qw * qy + qz * qx), 1.0 - 2.0 * (qy * qy + qz * qz))
        else:  # EulerOrder.XYZ
            c = math.atan2(2.0 * (qw * qz + qx * qy), 1.0 - 2.0 * (qy * qy + qz * qz))
            b = _clamped_asin(2.0 * (qw * qy - qz * qx))
            a = math.atan2(2.0 * (qw * qx + qy * qz), 1.0 - 2.0 * (qx * qx + qy * qy))
        return a, b, c

    def rotate(self, v: Vector3) -> Vector3:
        """Rotate ``v`` as q * (0, v) * conj(q)."""
        qv = Quaternion(0.0, v.x, v.y, v.z)
        r = Quaternion.multiply(Quaternion.multiply(self, qv), self.conjugate())
        return Vector3(r.x, r.y, r.z)

    @staticmethod
    def slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
        """Spherical linear interpolation along the shortest path."""
        d = Quaternion.dot(q1, q2)
        q2b = q2
        if d < 0.0:
            q2b = Quaternion(-q2.w, -q2.x, -q2.y, -q2.z)
            d = -d
        if d > 0.9995:
            return Quaternion(
                q1.w + t * (q2b.w - q1.w),
                q1.x + t * (q2b.x - q1.x),
                q1.y + t * (q2b.y - q1.y),
                q1.z + t * (q2b.z - q1.z),
            ).normalized()
        theta_0 = math.acos(d)
        theta = theta_0 * t
        sin_theta_0 = math.sin(theta_0)
        sin_theta = math.sin(theta)
        s0 = math.cos(theta) - d * sin_theta / sin_theta_0
        s1 = sin_theta / sin_theta_0
        return Quaternion(
            q1.w * s0 + q2b.w * s1,
            q1.x * s0 + q2b.x * s1,
            q1.y * s0 + q2b.y * s1,
            q1.z * s0 + q2b.z * s1,
        ).normalized()

    def to_axis_angle(self) -> tuple[Vector3, float]:
        """Return ``(axis, angle)``; the axis defaults to X for a near-zero rotation."""
        qn = self.normalized()
        w = max(-1.0, min(1.0, qn.w))
        angle = 2.0 * math.acos(w)
        s = math.sqrt(max(0.0, 1.0 - w * w))
        if s < _EPS:
            return Vector3(1.0, 0.0, 0.0), angle
        return Vector3(qn.x / s, qn.y / s, qn.z / s), angle

    @staticmethod
    def from_axis_angle(axis: Vector3, angle: float) -> Quaternion:
        half = angle * 0.5
        s = math.sin(half)
        return Quaternion(math.cos(half), axis.x * s, axis.y * s, axis.z * s)

    def to_rotation_matrix(self) -> list[list[float]]:
        """The 3x3 rotation matrix as a list of rows."""
        w, x, y, z = self.w, self.x, self.y, self.z
        ww, xx, yy, zz = w * w, x * x, y * y, z * z
        wx, wy, wz = w * x, w * y, w * z
        xy, xz, yz = x * y, x * z, y * z
        return [
            [ww + xx - yy - zz, 2 * (xy - wz), 2 * (xz + wy)],
            [2 * (xy + wz), ww - xx + yy - zz, 2 * (yz - wx)],
            [2 * (xz - wy), 2 * (yz + wx), ww - xx - yy + zz],
        ]


def dot(a: Vector3, b: Vector3) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    return Vector3.cross(a, b)


def norm(v: Vector3) -> float:
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Vector3) -> Vector3:
    """Unit vector along ``v``, or the zero vector if ``v`` is near zero."""
    n = norm(v)
    if n < _EPS:
        return Vector3()
    return Vector3(v.x / n, v.y / n, v.z / n)


def elem_mul(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x * b.x, a.y * b.y, a.z * b.z)


def elem_div(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(a.x / b.x, a.y / b.y, a.z / b.z)


def angle_between(a: Vector3, b: Vector3) -> float:
    """Angle in radians between two vectors; 0 if either is near zero."""
    n_a, n_b = norm(a), norm(b)
    if n_a < _EPS or n_b < _EPS:
        return 0.0
    d = dot(a, b) / (n_a * n_b)
    return math.acos(max(-1.0, min(1.0, d)))


def project(a: Vector3, b: Vector3) -> Vector3:
    """Projection of ``a`` onto ``b``; zero if ``b`` is near zero."""
    nb2 = dot(b, b)
    if nb2 < _EPS:
        return Vector3()
    return b * (dot(a, b) / nb2)


def distance(a: Vector3, b: Vector3) -> float:
    return norm(a - b)


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    return a * (1.0 - t) + b * t


def clamp(v: Vector3, min_val: float, max_val: float) -> Vector3:
    """Clamp each component into ``[min_val, max_val]``."""
    return Vector3(*(max(min(c, max_val), min_val) for c in v))


def is_zero(v: Vector3, eps: float = _EPS) -> bool:
    return all(abs(c) < eps for c in v)


def equals(a: Vector3, b: Vector3, eps: float = _EPS) -> bool:
    return is_zero(a - b, eps)


def to_array(v: Vector3) -> list[float]:
    return [v.x, v.y, v.z]


def from_array(arr: Sequence[float]) -> Vector3:
    """Build a vector from the first three elements of ``arr``."""
    if len(arr) < 3:
        raise ValueError("need at least 3 elements to build a Vector3")
    return Vector3(arr[0], arr[1], arr[2])