# multibody_graph/kernel/rotations/rotation_matrix.py
"""Rotation matrices: a Matrix3 whose columns are kept at unit length."""

import numpy as np

from ..linalg import Matrix3, Vector3
from .quaternion import Quaternion

EPSILON = np.finfo(float).eps


def _unit_column(c: Vector3) -> Vector3:
    mag_squared = c.dot(c)
    if not mag_squared > EPSILON:
        raise ValueError("RotationMatrix column vector had 0 magnitude")
    if abs(mag_squared - 1.0) > EPSILON:
        return c * (1.0 / np.sqrt(mag_squared))
    return c


class RotationMatrix(Matrix3):
    """
    3×3 rotation matrix built from three column vectors.

    Each column is re-normalized on construction if its squared magnitude
    is more than machine epsilon away from 1. A (near) zero column raises
    ValueError.

    Orthogonality BETWEEN columns is not enforced; build from a
    Quaternion (Quaternion.to_rotation_matrix) when that matters.
    """

    __slots__ = ()

    def __init__(self, c1: Vector3, c2: Vector3, c3: Vector3):
        super().__init__(_unit_column(c1), _unit_column(c2), _unit_column(c3))

    def __matmul__(self, rhs):
        if isinstance(rhs, RotationMatrix):
            return RotationMatrix.from_array(self._data @ rhs._data)
        return super().__matmul__(rhs)

    def to_quaternion(self) -> Quaternion:
        """
        Quaternion q such that  q.rotate(v) == self @ v.

        Uses the largest-diagonal branch to stay well conditioned.
        """
        m = self._data
        trace = m[0, 0] + m[1, 1] + m[2, 2]
        if trace > 0.0:
            k = 2.0 * np.sqrt(1.0 + trace)
            s = 0.25 * k
            x = (m[2, 1] - m[1, 2]) / k
            y = (m[0, 2] - m[2, 0]) / k
            z = (m[1, 0] - m[0, 1]) / k
        elif m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
            k = 2.0 * np.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2])
            s = (m[2, 1] - m[1, 2]) / k
            x = 0.25 * k
            y = (m[0, 1] + m[1, 0]) / k
            z = (m[0, 2] + m[2, 0]) / k
        elif m[1, 1] > m[2, 2]:
            k = 2.0 * np.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2])
            s = (m[0, 2] - m[2, 0]) / k
            x = (m[0, 1] + m[1, 0]) / k
            y = 0.25 * k
            z = (m[1, 2] + m[2, 1]) / k
        else:
            k = 2.0 * np.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1])
            s = (m[1, 0] - m[0, 1]) / k
            x = (m[0, 2] + m[2, 0]) / k
            y = (m[1, 2] + m[2, 1]) / k
            z = 0.25 * k
        return Quaternion(x, y, z, s)
