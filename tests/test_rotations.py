# tests/test_rotations.py
"""
QUATERNION AND ROTATION MATRIX TESTS
====================================

The frame conventions here are relied on by anything downstream that
moves vectors between body and world frames:

    rotate(v)    = q v q⁻¹     (world → body)
    transform(v) = q⁻¹ v q     (body → world)
"""

import numpy as np
import pytest

from multibody_graph.kernel.linalg import Vector3
from multibody_graph.kernel.rotations import (
    Quaternion,
    RotationMatrix,
    as_quaternion,
    default_rotation,
)


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


class TestQuaternion:

    def test_normalization(self):
        q = Quaternion(1.0, 2.0, 3.0, 4.0)

        assert np.isclose(q.x, 0.18257418583505536, rtol=1e-15)
        assert np.isclose(q.y, 0.3651483716701107, rtol=1e-15)
        assert np.isclose(q.z, 0.5477225575051661, rtol=1e-15)
        assert np.isclose(q.s, 0.7302967433402214, rtol=1e-15)

    def test_zero_quaternion_fails_loudly(self):
        with pytest.raises(ValueError):
            Quaternion(0.0, 0.0, 0.0, 0.0)

    def test_inverse_negates_vector_part(self, rng):
        q = Quaternion.random(rng)
        inv = q.inv()

        assert inv.s == q.s
        assert inv.x == -q.x
        assert inv.y == -q.y
        assert inv.z == -q.z

    def test_multiplication(self):
        """Hamilton product against known values."""
        q1 = Quaternion(0.18119546436307749, 0.4381103371317225, 0.10015469662419728, 0.8747551502773175)
        q2 = Quaternion(0.4605004692970668, -0.13901506620501594, -0.7574522634418864, -0.44145237314115715)
        result = q1 * q2

        assert np.isclose(result.s, -0.3328369942072665, rtol=1e-12)
        assert np.isclose(result.x, 0.004911334761481288, rtol=1e-9)
        assert np.isclose(result.y, -0.13164079374848636, rtol=1e-12)
        assert np.isclose(result.z, -0.9337377123685223, rtol=1e-12)

    def test_product_with_inverse_is_identity(self, rng):
        q = Quaternion.random(rng)
        p = q * q.inv()
        np.testing.assert_allclose(p.as_array(), [0.0, 0.0, 0.0, 1.0], atol=1e-12)

    def test_unit_norm_after_many_multiplications(self, rng):
        """Repeated products must not drift off the unit sphere."""
        q = Quaternion.identity()
        for _ in range(1000):
            q = q * Quaternion.random(rng)
            assert np.isclose(q.norm(), 1.0, atol=1e-12)

    def test_rotate_quarter_turn_about_z(self):
        q = Quaternion.from_axis_angle(Vector3(0.0, 0.0, 1.0), np.pi / 2)
        x = Vector3(1.0, 0.0, 0.0)

        np.testing.assert_allclose(q.rotate(x).as_array(), [0.0, 1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(q.transform(x).as_array(), [0.0, -1.0, 0.0], atol=1e-12)

    def test_rotate_then_transform_round_trip(self, rng):
        """transform() undoes rotate() for random unit quaternions and vectors."""
        for _ in range(50):
            q = Quaternion.random(rng)
            v = Vector3.from_array(rng.normal(scale=10.0, size=3))

            back = q.transform(q.rotate(v))
            np.testing.assert_allclose(back.as_array(), v.as_array(), rtol=1e-10, atol=1e-10)

            # and the inverse quaternion swaps the two directions
            np.testing.assert_allclose(q.inv().rotate(v).as_array(),
                                       q.transform(v).as_array(), atol=1e-10)

    def test_rotation_preserves_length(self, rng):
        q = Quaternion.random(rng)
        v = Vector3(1.0, -2.0, 0.5)
        assert np.isclose(q.rotate(v).norm(), v.norm())
        assert np.isclose(q.transform(v).norm(), v.norm())

    def test_zero_vector_maps_to_zero(self, rng):
        q = Quaternion.random(rng)
        assert q.rotate(Vector3.zeros()) == Vector3.zeros()

    def test_default_rotation_is_identity(self):
        q = default_rotation()
        assert q == Quaternion.identity()
        v = Vector3(1.0, 2.0, 3.0)
        assert q.rotate(v) == v


class TestRotationMatrix:

    def test_columns_are_unit_norm(self, rng):
        for _ in range(20):
            cols = [Vector3.from_array(rng.normal(scale=5.0, size=3)) for _ in range(3)]
            R = RotationMatrix(*cols)
            for j in range(3):
                assert np.isclose(R.column(j).norm(), 1.0, atol=1e-14)

    def test_unit_columns_are_left_alone(self):
        R = RotationMatrix.identity()
        np.testing.assert_array_equal(R.as_array(), np.eye(3))

    def test_rescaled_columns(self):
        R = RotationMatrix(Vector3(2.0, 0.0, 0.0), Vector3(0.0, 3.0, 0.0), Vector3(0.0, 0.0, 0.5))
        np.testing.assert_allclose(R.as_array(), np.eye(3))

    def test_zero_column_fails_loudly(self):
        with pytest.raises(ValueError):
            RotationMatrix(Vector3(1.0, 0.0, 0.0), Vector3.zeros(), Vector3(0.0, 0.0, 1.0))

    def test_matches_quaternion_rotate(self, rng):
        for _ in range(20):
            q = Quaternion.random(rng)
            v = Vector3.from_array(rng.normal(size=3))
            R = q.to_rotation_matrix()
            np.testing.assert_allclose((R @ v).as_array(), q.rotate(v).as_array(), atol=1e-12)

    def test_to_quaternion_round_trip(self, rng):
        for _ in range(50):
            q = Quaternion.random(rng)
            R = q.to_rotation_matrix()
            q2 = as_quaternion(R)
            v = Vector3.from_array(rng.normal(size=3))
            np.testing.assert_allclose(q2.rotate(v).as_array(), (R @ v).as_array(), atol=1e-10)

    def test_product_of_rotations(self, rng):
        qa, qb = Quaternion.random(rng), Quaternion.random(rng)
        Ra, Rb = qa.to_rotation_matrix(), qb.to_rotation_matrix()

        Rab = Ra @ Rb
        assert isinstance(Rab, RotationMatrix)
        # R(qa) R(qb) = R(qa * qb)
        np.testing.assert_allclose(Rab.as_array(), (qa * qb).to_rotation_matrix().as_array(),
                                   atol=1e-12)
