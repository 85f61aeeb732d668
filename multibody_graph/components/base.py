# multibody_graph/components/base.py
"""The base: root of the tree, fixed to ground."""

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from ..buffers import BaseBuffer
from ..kinds import ComponentKind
from .meta import ComponentMeta, MultibodyTrait


@dataclass
class Base(MultibodyTrait):
    """
    Ground / inertial frame. Carries metadata only.

    Nothing may precede the base, so connect_from() is a no-op and
    from_id stays None.
    """
    meta: ComponentMeta
    kind: ClassVar[ComponentKind] = ComponentKind.BASE

    @classmethod
    def from_buffer(cls, component_id: UUID, node_id: UUID, name_id: UUID,
                    buffer: BaseBuffer) -> "Base":
        return cls(ComponentMeta(component_id, buffer.id, name_id, node_id))

    def connect_from(self, component_id: UUID) -> None:
        pass

    def to_buffer(self, name: str = "") -> BaseBuffer:
        return BaseBuffer(id=self.origin_id, name=name)
