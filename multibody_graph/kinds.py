# multibody_graph/kinds.py
"""The closed set of component kinds a graph can hold."""

from enum import Enum


class ComponentKind(Enum):
    """Kinds of multibody component."""
    BASE = "base"
    BODY = "body"
    REVOLUTE = "revolute"
    # Future joints (floating, prismatic, spherical) go here, plus one
    # row in validator.JOINT_ATTACHMENTS.

    @property
    def is_joint(self) -> bool:
        return self in JOINT_KINDS

    @property
    def is_body_like(self) -> bool:
        """Base and Body both count as bodies once a graph is resolved."""
        return self in (ComponentKind.BASE, ComponentKind.BODY)


JOINT_KINDS = frozenset({ComponentKind.REVOLUTE})
