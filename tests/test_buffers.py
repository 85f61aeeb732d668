# tests/test_buffers.py
"""
Test edit buffers and the silent-default parsing policy.

An empty or unparsable text field must never block creating a
component; it takes its documented default instead.
"""

import pytest

from multibody_graph.buffers import (
    BaseBuffer,
    BodyBuffer,
    RevoluteBuffer,
    new_buffer,
    parse_float,
)
from multibody_graph.kinds import ComponentKind


@pytest.mark.parametrize("text, expected", [
    ("2.5", 2.5),
    (" 3 ", 7.0),
    ("1_000", 7.0),
    ("+2", 2.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e999", 7.0),
    ("-1e-3", -1e-3),
    ("", 7.0),
    ("   ", 7.0),
    ("abc", 7.0),
    ("1,5", 7.0),
    ("nan", 7.0),
    ("inf", 7.0),
    (None, 7.0),
])
def test_parse_float(text, expected):
    assert parse_float(text, 7.0) == expected


def test_empty_body_buffer_defaults():
    values = BodyBuffer().parsed()

    assert values['mass'] == 1.0
    assert values['ixx'] == 1.0
    assert values['iyy'] == 1.0
    assert values['izz'] == 1.0
    for key in ('cmx', 'cmy', 'cmz', 'ixy', 'ixz', 'iyz'):
        assert values[key] == 0.0


def test_unparsable_mass_takes_default():
    values = BodyBuffer(mass="abc", ixx="2.0").parsed()
    assert values['mass'] == 1.0
    assert values['ixx'] == 2.0


def test_negative_values_are_not_defaulted():
    """Parseable but invalid values pass through; MassProperties rejects them."""
    assert BodyBuffer(mass="-2").parsed()['mass'] == -2.0


def test_revolute_buffer_defaults():
    values = RevoluteBuffer(damping="0.3", theta="x").parsed()
    assert values == {
        'constant_force': 0.0,
        'damping': 0.3,
        'spring_constant': 0.0,
        'theta': 0.0,
        'omega': 0.0,
    }


def test_numbers_are_kept_as_text():
    buf = BodyBuffer(mass=2, ixx=0.5)
    assert buf.mass == "2"
    assert buf.ixx == "0.5"
    assert buf.parsed()['mass'] == 2.0


def test_null_and_boolean_fields_take_defaults():
    buf = BodyBuffer(name=None, mass=None, ixx=True, iyy=False)
    assert buf.name == ""
    assert buf.mass == ""

    values = buf.parsed()
    assert values['mass'] == 1.0
    assert values['ixx'] == 1.0
    assert values['iyy'] == 1.0


def test_clear_keeps_id():
    buf = BodyBuffer(name="arm", mass="3", izz="4")
    buffer_id = buf.id
    buf.clear()

    assert buf.id == buffer_id
    assert buf.name == ""
    assert buf.mass == ""
    assert buf.izz == ""


def test_each_buffer_has_its_own_id():
    assert BaseBuffer().id != BaseBuffer().id


def test_new_buffer_by_kind():
    assert isinstance(new_buffer(ComponentKind.BASE), BaseBuffer)
    assert isinstance(new_buffer("body", mass="2"), BodyBuffer)
    assert new_buffer(ComponentKind.REVOLUTE, name="hinge").name == "hinge"
