# multibody_graph/kernel/mass_properties.py
"""
MASS PROPERTIES: Mass, Center of Mass, Inertia
==============================================

PURPOSE:
--------
Holds the inertial data of a rigid body and keeps it physically valid:

    mass > 0,  ixx > 0,  iyy > 0,  izz > 0

The products of inertia (ixy, ixz, iyz) and the center-of-mass offset
(cmx, cmy, cmz) are unconstrained.

ERROR HANDLING:
---------------
Construction and every write to a constrained field re-validate. A bad
value raises a MassPropertiesError subclass and the object keeps its
previous value, so a rejected edit never corrupts a body:

    >>> mp = MassProperties(2.0, 0, 0, 0, 1.0, 1.0, 1.0, 0, 0, 0)
    >>> mp.mass = -1.0
    Traceback (most recent call last):
    ...
    MassLessThanOrEqualToZero: mass must be > 0 (got -1.0)
    >>> mp.mass
    2.0
"""

from dataclasses import dataclass
import numpy as np

from .linalg import Matrix3, Vector3


class MassPropertiesError(ValueError):
    """Raised when a mass property would become physically invalid."""
    field = ""

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"{self.field} must be > 0 (got {value})")


class MassLessThanOrEqualToZero(MassPropertiesError):
    field = "mass"


class IxxLessThanOrEqualToZero(MassPropertiesError):
    field = "ixx"


class IyyLessThanOrEqualToZero(MassPropertiesError):
    field = "iyy"


class IzzLessThanOrEqualToZero(MassPropertiesError):
    field = "izz"


# Constrained fields, in validation order
POSITIVE_FIELDS = {
    "mass": MassLessThanOrEqualToZero,
    "ixx": IxxLessThanOrEqualToZero,
    "iyy": IyyLessThanOrEqualToZero,
    "izz": IzzLessThanOrEqualToZero,
}


def _check_positive(field: str, value: float) -> float:
    value = float(value)
    # `not value > 0` also rejects NaN
    if not value > 0.0:
        raise POSITIVE_FIELDS[field](value)
    return value


@dataclass(init=False, eq=True)
class MassProperties:
    """
    Inertial properties of a rigid body.

    Parameters:
    -----------
    mass : float
        Body mass (kg), must be > 0
    cmx, cmy, cmz : float
        Center-of-mass offset in the body frame (m)
    ixx, iyy, izz : float
        Principal moments of inertia (kg·m²), must be > 0
    ixy, ixz, iyz : float
        Products of inertia (kg·m²)

    Raises:
    -------
    MassPropertiesError
        The first constrained field (checked in the order mass, ixx, iyy,
        izz) that is not strictly positive.
    """
    _mass: float
    _cmx: float
    _cmy: float
    _cmz: float
    _ixx: float
    _iyy: float
    _izz: float
    _ixy: float
    _ixz: float
    _iyz: float

    def __init__(
        self,
        mass: float,
        cmx: float,
        cmy: float,
        cmz: float,
        ixx: float,
        iyy: float,
        izz: float,
        ixy: float,
        ixz: float,
        iyz: float,
    ):
        self._mass = _check_positive("mass", mass)
        self._ixx = _check_positive("ixx", ixx)
        self._iyy = _check_positive("iyy", iyy)
        self._izz = _check_positive("izz", izz)
        self._cmx = float(cmx)
        self._cmy = float(cmy)
        self._cmz = float(cmz)
        self._ixy = float(ixy)
        self._ixz = float(ixz)
        self._iyz = float(iyz)

    @classmethod
    def unit(cls) -> "MassProperties":
        """Unit mass, unit diagonal inertia, centered."""
        return cls(1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 0.0, 0.0, 0.0)

    # -- constrained --------------------------------------------------------

    @property
    def mass(self) -> float:
        return self._mass

    @mass.setter
    def mass(self, value: float):
        self._mass = _check_positive("mass", value)

    @property
    def ixx(self) -> float:
        return self._ixx

    @ixx.setter
    def ixx(self, value: float):
        self._ixx = _check_positive("ixx", value)

    @property
    def iyy(self) -> float:
        return self._iyy

    @iyy.setter
    def iyy(self, value: float):
        self._iyy = _check_positive("iyy", value)

    @property
    def izz(self) -> float:
        return self._izz

    @izz.setter
    def izz(self, value: float):
        self._izz = _check_positive("izz", value)

    # -- unconstrained ------------------------------------------------------

    @property
    def cmx(self) -> float:
        return self._cmx

    @cmx.setter
    def cmx(self, value: float):
        self._cmx = float(value)

    @property
    def cmy(self) -> float:
        return self._cmy

    @cmy.setter
    def cmy(self, value: float):
        self._cmy = float(value)

    @property
    def cmz(self) -> float:
        return self._cmz

    @cmz.setter
    def cmz(self, value: float):
        self._cmz = float(value)

    @property
    def ixy(self) -> float:
        return self._ixy

    @ixy.setter
    def ixy(self, value: float):
        self._ixy = float(value)

    @property
    def ixz(self) -> float:
        return self._ixz

    @ixz.setter
    def ixz(self, value: float):
        self._ixz = float(value)

    @property
    def iyz(self) -> float:
        return self._iyz

    @iyz.setter
    def iyz(self, value: float):
        self._iyz = float(value)

    # -- derived ------------------------------------------------------------

    def center_of_mass(self) -> Vector3:
        return Vector3(self._cmx, self._cmy, self._cmz)

    def inertia(self) -> Matrix3:
        """Symmetric inertia tensor about the center of mass."""
        return Matrix3.from_array(np.array([
            [self._ixx, self._ixy, self._ixz],
            [self._ixy, self._iyy, self._iyz],
            [self._ixz, self._iyz, self._izz],
        ]))

    def to_dict(self) -> dict:
        return {
            'mass': self._mass,
            'cmx': self._cmx, 'cmy': self._cmy, 'cmz': self._cmz,
            'ixx': self._ixx, 'iyy': self._iyy, 'izz': self._izz,
            'ixy': self._ixy, 'ixz': self._ixz, 'iyz': self._iyz,
        }

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v}" for k, v in self.to_dict().items())
        return f"MassProperties({fields})"
