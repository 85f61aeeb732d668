# multibody_graph/kernel - numeric value types carried by components
"""
KERNEL: NUMERIC VALUE TYPES
===========================

Pure value types with algebraic operations and validation:
- Vector3, Matrix3           (linalg.py)
- Quaternion, RotationMatrix (rotations/)
- MassProperties             (mass_properties.py)

Nothing here knows about graphs or components.
"""

from .linalg import Vector3, Matrix3
from .rotations import Quaternion, RotationMatrix, Rotation, default_rotation
from .mass_properties import (
    MassProperties,
    MassPropertiesError,
    MassLessThanOrEqualToZero,
    IxxLessThanOrEqualToZero,
    IyyLessThanOrEqualToZero,
    IzzLessThanOrEqualToZero,
)

__all__ = [
    'Vector3',
    'Matrix3',
    'Quaternion',
    'RotationMatrix',
    'Rotation',
    'default_rotation',
    'MassProperties',
    'MassPropertiesError',
    'MassLessThanOrEqualToZero',
    'IxxLessThanOrEqualToZero',
    'IyyLessThanOrEqualToZero',
    'IzzLessThanOrEqualToZero',
]
