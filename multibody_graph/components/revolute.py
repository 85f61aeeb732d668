# multibody_graph/components/revolute.py
"""
REVOLUTE JOINT
==============

A one-degree-of-freedom hinge between an inner body (upstream) and an
outer body (downstream).

    inner body ──[ revolute: θ, ω ]── outer body

Besides the shared metadata a revolute carries:
- JointParameters: constant force, damping, spring constant
- RevoluteState:   angle θ (rad) and angular velocity ω (rad/s)
- JointConnection: the inner/outer body ids, kept in step with
                   from_id / to_ids by the connect/delete methods
"""

from dataclasses import dataclass, field
from typing import ClassVar, Optional
from uuid import UUID

from ..buffers import RevoluteBuffer
from ..kinds import ComponentKind
from .meta import ComponentMeta, MultibodyTrait


@dataclass
class JointParameters:
    constant_force: float = 0.0
    damping: float = 0.0
    spring_constant: float = 0.0


@dataclass
class RevoluteState:
    theta: float = 0.0
    omega: float = 0.0


@dataclass
class JointConnection:
    inner_body: Optional[UUID] = None
    outer_body: Optional[UUID] = None


@dataclass
class Revolute(MultibodyTrait):
    """Revolute (hinge) joint."""
    meta: ComponentMeta
    parameters: JointParameters = field(default_factory=JointParameters)
    state: RevoluteState = field(default_factory=RevoluteState)
    connection: JointConnection = field(default_factory=JointConnection)
    kind: ClassVar[ComponentKind] = ComponentKind.REVOLUTE

    @classmethod
    def from_buffer(cls, component_id: UUID, node_id: UUID, name_id: UUID,
                    buffer: RevoluteBuffer) -> "Revolute":
        joint = cls(ComponentMeta(component_id, buffer.id, name_id, node_id))
        joint._inherit(buffer)
        return joint

    def connect_from(self, component_id: UUID) -> None:
        super().connect_from(component_id)
        self.connection.inner_body = component_id

    def connect_to(self, component_id: UUID) -> None:
        super().connect_to(component_id)
        self.connection.outer_body = component_id

    def delete_from(self) -> None:
        super().delete_from()
        self.connection.inner_body = None

    def delete_to(self, component_id: UUID) -> None:
        super().delete_to(component_id)
        if self.connection.outer_body == component_id:
            self.connection.outer_body = self.meta.to_ids[-1] if self.meta.to_ids else None

    def _inherit(self, buffer: RevoluteBuffer) -> None:
        values = buffer.parsed()
        self.parameters = JointParameters(
            values['constant_force'], values['damping'], values['spring_constant'],
        )
        self.state = RevoluteState(values['theta'], values['omega'])

    def to_buffer(self, name: str = "") -> RevoluteBuffer:
        return RevoluteBuffer(
            id=self.origin_id,
            name=name,
            constant_force=repr(self.parameters.constant_force),
            damping=repr(self.parameters.damping),
            spring_constant=repr(self.parameters.spring_constant),
            theta=repr(self.state.theta),
            omega=repr(self.state.omega),
        )
