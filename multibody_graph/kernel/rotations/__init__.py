# multibody_graph/kernel/rotations - attitude representations
"""
ROTATIONS
=========

Two interchangeable attitude representations:
- Quaternion: unit quaternion (x, y, z, s)
- RotationMatrix: 3×3 matrix with unit-length columns

`Rotation` is the closed union of the two; the default attitude is the
identity quaternion.
"""

from typing import Union

from .quaternion import Quaternion
from .rotation_matrix import RotationMatrix

Rotation = Union[Quaternion, RotationMatrix]


def default_rotation() -> Rotation:
    return Quaternion.identity()


def as_quaternion(rotation: Rotation) -> Quaternion:
    """Convert either representation to a Quaternion."""
    if isinstance(rotation, Quaternion):
        return rotation
    if isinstance(rotation, RotationMatrix):
        return rotation.to_quaternion()
    raise TypeError(f"Not a rotation: {rotation!r}")


__all__ = ['Quaternion', 'RotationMatrix', 'Rotation', 'default_rotation', 'as_quaternion']
