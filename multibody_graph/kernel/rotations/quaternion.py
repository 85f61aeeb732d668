# multibody_graph/kernel/rotations/quaternion.py
"""
QUATERNION: Unit Quaternions for Attitude
=========================================

A quaternion is stored as a vector part (x, y, z) and a scalar part s.
Every Quaternion instance is UNIT NORM: the constructor normalizes, and
the product of two quaternions is built through the constructor too, so
repeated multiplication never drifts off the unit sphere.

CONVENTIONS (load-bearing for frame transforms):
------------------------------------------------
Hamilton product:

    (s1, v1) * (s2, v2) = (s1 s2 - v1·v2,  s1 v2 + s2 v1 + v1 × v2)

    transform(v) = q⁻¹ v q     body frame  → world frame
    rotate(v)    = q v q⁻¹     world frame → body frame

Because |q| = 1, the inverse is just the conjugate (vector part negated).
"""

import numpy as np
from typing import Optional, TYPE_CHECKING

from ..linalg import Vector3

if TYPE_CHECKING:
    from .rotation_matrix import RotationMatrix


def _hamilton(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Raw Hamilton product of two [x, y, z, s] arrays (no normalization)."""
    x1, y1, z1, s1 = a
    x2, y2, z2, s2 = b
    return np.array([
        s1 * x2 + x1 * s2 + y1 * z2 - z1 * y2,
        s1 * y2 - x1 * z2 + y1 * s2 + z1 * x2,
        s1 * z2 + x1 * y2 - y1 * x2 + z1 * s2,
        s1 * s2 - x1 * x2 - y1 * y2 - z1 * z2,
    ])


class Quaternion:
    """
    Unit quaternion (x, y, z, s).

    Parameters:
    -----------
    x, y, z : float
        Vector part
    s : float
        Scalar part

    Raises:
    -------
    ValueError
        If all four components are zero. There is no direction to
        normalize towards, so this is treated as a programming error.

    Examples:
    ---------
    >>> q = Quaternion(1.0, 2.0, 3.0, 4.0)
    >>> round(q.s, 6)
    0.730297
    """

    __slots__ = ("x", "y", "z", "s")

    def __init__(self, x: float, y: float, z: float, s: float):
        mag = float(np.sqrt(x * x + y * y + z * z + s * s))
        if not mag > 0.0:
            raise ValueError(
                f"Values produced 0.0 magnitude Quaternion, [{x}, {y}, {z}, {s}]"
            )
        self.x = x / mag
        self.y = y / mag
        self.z = z / mag
        self.s = s / mag

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def random(cls, rng: Optional[np.random.Generator] = None) -> "Quaternion":
        """Random unit quaternion from components drawn uniformly in [-1, 1)."""
        if rng is None:
            rng = np.random.default_rng()
        x, y, z, s = rng.uniform(-1.0, 1.0, size=4)
        return cls(x, y, z, s)

    @classmethod
    def from_axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        """
        Quaternion for a rotation of `angle` radians about `axis`.

        The axis does not need to be unit length, but must be non-zero.
        """
        u = axis.normalize()
        half = 0.5 * angle
        sin_half = np.sin(half)
        return cls(u.e1 * sin_half, u.e2 * sin_half, u.e3 * sin_half, np.cos(half))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.s])

    def norm(self) -> float:
        return float(np.linalg.norm(self.as_array()))

    def inv(self) -> "Quaternion":
        """Inverse of a unit quaternion (the conjugate)."""
        return Quaternion(-self.x, -self.y, -self.z, self.s)

    def transform(self, v: Vector3) -> Vector3:
        """Map v from the body frame to the world frame: q⁻¹ v q."""
        pure = np.array([v.e1, v.e2, v.e3, 0.0])
        out = _hamilton(_hamilton(self.inv().as_array(), pure), self.as_array())
        return Vector3(out[0], out[1], out[2])

    def rotate(self, v: Vector3) -> Vector3:
        """Map v from the world frame to the body frame: q v q⁻¹."""
        pure = np.array([v.e1, v.e2, v.e3, 0.0])
        out = _hamilton(_hamilton(self.as_array(), pure), self.inv().as_array())
        return Vector3(out[0], out[1], out[2])

    def to_rotation_matrix(self) -> "RotationMatrix":
        """
        Rotation matrix R with  R @ v == self.rotate(v)  for every v.
        """
        from .rotation_matrix import RotationMatrix

        x, y, z, s = self.x, self.y, self.z, self.s
        return RotationMatrix.from_array([
            [1 - 2 * (y * y + z * z), 2 * (x * y - s * z), 2 * (x * z + s * y)],
            [2 * (x * y + s * z), 1 - 2 * (x * x + z * z), 2 * (y * z - s * x)],
            [2 * (x * z - s * y), 2 * (y * z + s * x), 1 - 2 * (x * x + y * y)],
        ])

    def __mul__(self, rhs: "Quaternion") -> "Quaternion":
        if not isinstance(rhs, Quaternion):
            return NotImplemented
        x, y, z, s = _hamilton(self.as_array(), rhs.as_array())
        return Quaternion(x, y, z, s)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return (self.x, self.y, self.z, self.s) == (other.x, other.y, other.z, other.s)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z, self.s))

    def __repr__(self) -> str:
        return f"Quaternion(x={self.x}, y={self.y}, z={self.z}, s={self.s})"
