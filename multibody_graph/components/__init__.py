# multibody_graph/components - typed multibody components
"""
COMPONENTS
==========

The closed set of things a graph can hold:

    kind        class       carries
    ----        -----       -------
    BASE        Base        metadata only (root of the tree)
    BODY        Body        metadata + MassProperties
    REVOLUTE    Revolute    metadata + parameters + state + connection

Code that needs kind-specific behaviour dispatches on `component.kind`.
"""

from typing import Union
from uuid import UUID

from ..kinds import ComponentKind
from .meta import ComponentMeta, MultibodyTrait
from .base import Base
from .body import Body
from .revolute import Revolute, JointParameters, RevoluteState, JointConnection

Joint = Revolute
Component = Union[Base, Body, Revolute]

COMPONENT_TYPES = {
    ComponentKind.BASE: Base,
    ComponentKind.BODY: Body,
    ComponentKind.REVOLUTE: Revolute,
}


def component_from_buffer(kind: ComponentKind, component_id: UUID, node_id: UUID,
                          name_id: UUID, buffer) -> Component:
    """Construct a component of `kind` from a matching edit buffer."""
    kind = ComponentKind(kind)
    if buffer.kind is not kind:
        raise TypeError(f"A {kind.value} needs a {kind.value} buffer, got {buffer.kind.value}")
    return COMPONENT_TYPES[kind].from_buffer(component_id, node_id, name_id, buffer)


__all__ = [
    'ComponentMeta',
    'MultibodyTrait',
    'Base',
    'Body',
    'Revolute',
    'Joint',
    'Component',
    'JointParameters',
    'RevoluteState',
    'JointConnection',
    'component_from_buffer',
]
