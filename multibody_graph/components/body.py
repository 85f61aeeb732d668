# multibody_graph/components/body.py
"""A rigid body with mass properties."""

from dataclasses import dataclass
from typing import ClassVar
from uuid import UUID

from ..buffers import BodyBuffer
from ..kinds import ComponentKind
from ..kernel.mass_properties import MassProperties
from .meta import ComponentMeta, MultibodyTrait


@dataclass
class Body(MultibodyTrait):
    """
    Rigid body.

    Parameters:
    -----------
    meta : ComponentMeta
        Identity and connectivity
    mass_properties : MassProperties
        Mass, center of mass and inertia (always valid)
    """
    meta: ComponentMeta
    mass_properties: MassProperties
    kind: ClassVar[ComponentKind] = ComponentKind.BODY

    @classmethod
    def from_buffer(cls, component_id: UUID, node_id: UUID, name_id: UUID,
                    buffer: BodyBuffer) -> "Body":
        """
        Build a body from an edit buffer.

        Raises MassPropertiesError if a parsed value is non-positive.
        """
        mass_properties = MassProperties(**buffer.parsed())
        return cls(ComponentMeta(component_id, buffer.id, name_id, node_id), mass_properties)

    def _inherit(self, buffer: BodyBuffer) -> None:
        # validate everything before touching self
        self.mass_properties = MassProperties(**buffer.parsed())

    def to_buffer(self, name: str = "") -> BodyBuffer:
        text = {k: repr(v) for k, v in self.mass_properties.to_dict().items()}
        return BodyBuffer(id=self.origin_id, name=name, **text)
