# multibody_graph/buffers.py
"""
EDIT BUFFERS: String-Typed Staging for Component Forms
======================================================

PURPOSE:
--------
A form in the UI edits text, not numbers. An edit buffer holds exactly
what the user typed, one string per field, until the user saves. Saving
hands the buffer to the graph, which parses each numeric field.

PARSING POLICY:
---------------
An empty or unparsable numeric field is NOT an error. It silently takes
the configured default, so a half-filled form never blocks creating a
component:

    field                            default
    -----                            -------
    mass                             1.0
    ixx, iyy, izz                    1.0
    ixy, ixz, iyz, cmx, cmy, cmz     0.0
    constant_force, damping,
    spring_constant, theta, omega    0.0

Values that parse fine but are physically invalid (mass = "-2") are
NOT defaulted; they are rejected later by MassProperties.

Each buffer carries its own id; a component created from it records
that id as its origin_id.
"""

import math
import re
from typing import ClassVar, Dict, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from .config import CONFIG
from .kinds import ComponentKind

_FLOAT_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_float(text: Optional[str], default: float) -> float:
    """
    Parse a text field as a float, falling back to `default`.

    Only plain decimal or exponent notation is accepted. Empty text,
    surrounding whitespace, digit separators ("1_000"), unparsable and
    non-finite input all give the default.

    Examples:
    ---------
    >>> parse_float("2.5", 1.0)
    2.5
    >>> parse_float("abc", 1.0)
    1.0
    >>> parse_float("", 0.0)
    0.0
    """
    if text is None or not _FLOAT_TEXT.fullmatch(str(text)):
        return default
    value = float(str(text))
    if not math.isfinite(value):
        return default
    return value


class EditBuffer(BaseModel):
    """Common fields of every edit buffer."""
    kind: ClassVar[ComponentKind]
    text_fields: ClassVar[tuple] = ("name",)

    id: UUID = Field(default_factory=uuid4)
    name: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def numbers_as_text(cls, value, info: ValidationInfo):
        # API clients may send bare numbers, booleans or null; keep them
        # as text so parsing applies the usual defaults
        if info.field_name == "id":
            return value
        if value is None:
            return ""
        if isinstance(value, (bool, int, float)):
            return str(value)
        return value

    def clear(self) -> None:
        """Reset every text field to empty (the id is kept)."""
        for field in self.text_fields:
            setattr(self, field, "")

    def parsed(self) -> Dict[str, float]:
        return {}


class BaseBuffer(EditBuffer):
    """Edit buffer for a Base. Only the name is editable."""
    kind: ClassVar[ComponentKind] = ComponentKind.BASE


class BodyBuffer(EditBuffer):
    """Edit buffer for a Body: name plus mass properties as text."""
    kind: ClassVar[ComponentKind] = ComponentKind.BODY
    text_fields: ClassVar[tuple] = (
        "name", "mass", "cmx", "cmy", "cmz",
        "ixx", "iyy", "izz", "ixy", "ixz", "iyz",
    )

    mass: str = ""
    cmx: str = ""
    cmy: str = ""
    cmz: str = ""
    ixx: str = ""
    iyy: str = ""
    izz: str = ""
    ixy: str = ""
    ixz: str = ""
    iyz: str = ""

    def parsed(self) -> Dict[str, float]:
        """Parsed mass properties, keyed like MassProperties' arguments."""
        cm = CONFIG.default_center_of_mass
        product = CONFIG.default_product_of_inertia
        return {
            'mass': parse_float(self.mass, CONFIG.default_mass),
            'cmx': parse_float(self.cmx, cm),
            'cmy': parse_float(self.cmy, cm),
            'cmz': parse_float(self.cmz, cm),
            'ixx': parse_float(self.ixx, CONFIG.default_inertia),
            'iyy': parse_float(self.iyy, CONFIG.default_inertia),
            'izz': parse_float(self.izz, CONFIG.default_inertia),
            'ixy': parse_float(self.ixy, product),
            'ixz': parse_float(self.ixz, product),
            'iyz': parse_float(self.iyz, product),
        }


class RevoluteBuffer(EditBuffer):
    """Edit buffer for a revolute joint: parameters and initial state."""
    kind: ClassVar[ComponentKind] = ComponentKind.REVOLUTE
    text_fields: ClassVar[tuple] = (
        "name", "constant_force", "damping", "spring_constant", "theta", "omega",
    )

    constant_force: str = ""
    damping: str = ""
    spring_constant: str = ""
    theta: str = ""
    omega: str = ""

    def parsed(self) -> Dict[str, float]:
        param = CONFIG.default_joint_parameter
        state = CONFIG.default_joint_state
        return {
            'constant_force': parse_float(self.constant_force, param),
            'damping': parse_float(self.damping, param),
            'spring_constant': parse_float(self.spring_constant, param),
            'theta': parse_float(self.theta, state),
            'omega': parse_float(self.omega, state),
        }


BUFFER_TYPES = {
    ComponentKind.BASE: BaseBuffer,
    ComponentKind.BODY: BodyBuffer,
    ComponentKind.REVOLUTE: RevoluteBuffer,
}


def new_buffer(kind: ComponentKind, **fields) -> EditBuffer:
    """Create an empty (or partially filled) buffer for `kind`."""
    return BUFFER_TYPES[ComponentKind(kind)](**fields)


