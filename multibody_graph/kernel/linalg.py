# multibody_graph/kernel/linalg.py
"""
LINEAR ALGEBRA: Vector3 and Matrix3
===================================

PURPOSE:
--------
Small fixed-size value types used by the physical components:
- Vector3: a 3-component column vector (e1, e2, e3)
- Matrix3: a 3×3 matrix stored as three column vectors

Both wrap a float64 numpy array so that the heavy lifting (norms, cross
products, matrix products) is done by numpy, while callers get a typed,
immutable value with a readable API.

CONVENTIONS:
------------
- Right-handed:  a.cross(b) = a × b
- Column-major construction: Matrix3(c1, c2, c3) takes COLUMNS
- Matrix products use the @ operator, exactly like numpy:

      M @ v   → Vector3
      M @ N   → Matrix3
"""

import numpy as np
from typing import Iterable


class Vector3:
    """
    A 3D vector.

    Parameters:
    -----------
    e1, e2, e3 : float
        Components along the x, y and z axes

    Examples:
    ---------
    >>> a = Vector3(1.0, 0.0, 0.0)
    >>> b = Vector3(0.0, 1.0, 0.0)
    >>> a.cross(b)
    Vector3(0.0, 0.0, 1.0)
    """

    __slots__ = ("_data",)

    def __init__(self, e1: float, e2: float, e3: float):
        self._data = np.array([e1, e2, e3], dtype=float)
        self._data.setflags(write=False)

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "Vector3":
        arr = np.asarray(values, dtype=float).reshape(3)
        return cls(arr[0], arr[1], arr[2])

    @classmethod
    def zeros(cls) -> "Vector3":
        return cls(0.0, 0.0, 0.0)

    @property
    def e1(self) -> float:
        return float(self._data[0])

    @property
    def e2(self) -> float:
        return float(self._data[1])

    @property
    def e3(self) -> float:
        return float(self._data[2])

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the components as a (3,) array."""
        return self._data.copy()

    def norm(self) -> float:
        return float(np.linalg.norm(self._data))

    def normalize(self) -> "Vector3":
        """
        Return the unit vector in the same direction.

        A zero vector produces NaN components; callers that can hold a
        zero vector must check norm() first.
        """
        mag = self.norm()
        with np.errstate(divide='ignore', invalid='ignore'):
            return Vector3.from_array(self._data / mag)

    def dot(self, rhs: "Vector3") -> float:
        return float(np.dot(self._data, rhs._data))

    def cross(self, rhs: "Vector3") -> "Vector3":
        """self × rhs"""
        return Vector3.from_array(np.cross(self._data, rhs._data))

    def skew(self) -> "Matrix3":
        """
        Skew-symmetric cross-product matrix [a]×.

        For any vector b:  a.skew() @ b == a.cross(b)

            [  0  -e3   e2 ]
            [  e3   0  -e1 ]
            [ -e2   e1   0 ]
        """
        e1, e2, e3 = self._data
        return Matrix3.from_array([
            [0.0, -e3, e2],
            [e3, 0.0, -e1],
            [-e2, e1, 0.0],
        ])

    def __add__(self, rhs: "Vector3") -> "Vector3":
        return Vector3.from_array(self._data + rhs._data)

    def __sub__(self, rhs: "Vector3") -> "Vector3":
        return Vector3.from_array(self._data - rhs._data)

    def __neg__(self) -> "Vector3":
        return Vector3.from_array(-self._data)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3.from_array(self._data * float(scalar))

    __rmul__ = __mul__

    def __iter__(self):
        return iter(float(x) for x in self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        return f"Vector3({self.e1}, {self.e2}, {self.e3})"


class Matrix3:
    """
    A general 3×3 matrix built from three column vectors.

    Parameters:
    -----------
    c1, c2, c3 : Vector3
        First, second and third COLUMNS of the matrix

    Notes:
    ------
    Use Matrix3.from_array() to build from a row-major nested list
    (the usual numpy layout).
    """

    __slots__ = ("_data",)

    def __init__(self, c1: Vector3, c2: Vector3, c3: Vector3):
        data = np.column_stack([c1.as_array(), c2.as_array(), c3.as_array()])
        data.setflags(write=False)
        self._data = data

    @classmethod
    def from_array(cls, values) -> "Matrix3":
        arr = np.asarray(values, dtype=float).reshape(3, 3)
        return cls(
            Vector3.from_array(arr[:, 0]),
            Vector3.from_array(arr[:, 1]),
            Vector3.from_array(arr[:, 2]),
        )

    @classmethod
    def identity(cls) -> "Matrix3":
        return cls.from_array(np.eye(3))

    def as_array(self) -> np.ndarray:
        """Return a writable copy as a row-major (3, 3) array."""
        return self._data.copy()

    def column(self, j: int) -> Vector3:
        return Vector3.from_array(self._data[:, j])

    def transpose(self) -> "Matrix3":
        return Matrix3.from_array(self._data.T)

    def __getitem__(self, index):
        """M[i, j] gives a float; slices such as M[:, 0] give an array copy."""
        value = self._data[index]
        if np.ndim(value) == 0:
            return float(value)
        return value.copy()

    def __matmul__(self, rhs):
        if isinstance(rhs, Vector3):
            return Vector3.from_array(self._data @ rhs.as_array())
        if isinstance(rhs, Matrix3):
            return Matrix3.from_array(self._data @ rhs._data)
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash(tuple(self._data.ravel()))

    def __repr__(self) -> str:
        rows = ", ".join(str(list(row)) for row in self._data.tolist())
        return f"{type(self).__name__}([{rows}])"
