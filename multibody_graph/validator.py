# multibody_graph/validator.py
"""
CONNECTION VALIDATOR
====================

Decides whether an edge between two component kinds is legal.

RULE:
-----
An edge is legal iff one end is a joint and the other is something that
joint may attach to, in either direction:

    base → revolute     revolute → base
    body → revolute     revolute → body

Body–body, base–base, base–body and joint–joint edges are never legal.

The rule is a table: supporting a new joint kind means adding one row to
JOINT_ATTACHMENTS.
"""

from typing import Dict, FrozenSet

from .kinds import ComponentKind

# joint kind → kinds it may attach to (either direction)
JOINT_ATTACHMENTS: Dict[ComponentKind, FrozenSet[ComponentKind]] = {
    ComponentKind.REVOLUTE: frozenset({ComponentKind.BASE, ComponentKind.BODY}),
}


def is_valid(from_kind: ComponentKind, to_kind: ComponentKind) -> bool:
    """
    True if an edge from a `from_kind` component to a `to_kind` one is legal.

    Examples:
    ---------
    >>> is_valid(ComponentKind.BASE, ComponentKind.REVOLUTE)
    True
    >>> is_valid(ComponentKind.BODY, ComponentKind.BODY)
    False
    """
    if to_kind in JOINT_ATTACHMENTS.get(from_kind, frozenset()):
        return True
    return from_kind in JOINT_ATTACHMENTS.get(to_kind, frozenset())
