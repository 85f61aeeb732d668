# multibody_graph/components/meta.py
"""
COMPONENT METADATA AND SHARED ACCESS
====================================

Every component carries a ComponentMeta: its identity (component id,
origin id, name id, node id) and its connectivity record (one optional
upstream id, an ordered list of downstream ids).

Components refer to each other BY ID only. The graph owns the flat
id → component map, so there are no object references to keep in sync
and no ownership cycles.

MultibodyTrait gives uniform access to those fields for every kind of
component. It holds no state of its own; concrete components override
only where their kind differs (e.g. a Base has no upstream).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from uuid import UUID

from ..kinds import ComponentKind


@dataclass
class ComponentMeta:
    """
    Identity and connectivity of one component.

    Attributes:
    -----------
    component_id : UUID
        Unique, stable for the component's lifetime
    origin_id : UUID
        Id of the edit buffer the component was created from
    name_id : UUID
        Key into the graph's name table (display names live there)
    node_id : UUID
        Key of the associated visual node
    from_id : UUID or None
        Upstream component (at most one)
    to_ids : list of UUID
        Downstream components, in connection order, without duplicates
    system_id : int or None
        Index assigned by the last successful resolution
    """
    component_id: UUID
    origin_id: UUID
    name_id: UUID
    node_id: UUID
    from_id: Optional[UUID] = None
    to_ids: List[UUID] = field(default_factory=list)
    system_id: Optional[int] = None

    def connect_to(self, component_id: UUID) -> None:
        if component_id not in self.to_ids:
            self.to_ids.append(component_id)

    def delete_to(self, component_id: UUID) -> None:
        self.to_ids = [i for i in self.to_ids if i != component_id]


class MultibodyTrait:
    """Uniform identity/connectivity access over `self.meta`."""

    kind: ComponentKind
    meta: ComponentMeta

    @property
    def component_id(self) -> UUID:
        return self.meta.component_id

    @component_id.setter
    def component_id(self, value: UUID):
        self.meta.component_id = value

    @property
    def origin_id(self) -> UUID:
        return self.meta.origin_id

    @property
    def name_id(self) -> UUID:
        return self.meta.name_id

    @name_id.setter
    def name_id(self, value: UUID):
        self.meta.name_id = value

    @property
    def node_id(self) -> UUID:
        return self.meta.node_id

    @node_id.setter
    def node_id(self, value: UUID):
        self.meta.node_id = value

    @property
    def from_id(self) -> Optional[UUID]:
        return self.meta.from_id

    @property
    def to_ids(self) -> Tuple[UUID, ...]:
        return tuple(self.meta.to_ids)

    @property
    def system_id(self) -> Optional[int]:
        return self.meta.system_id

    def connect_from(self, component_id: UUID) -> None:
        self.meta.from_id = component_id

    def connect_to(self, component_id: UUID) -> None:
        self.meta.connect_to(component_id)

    def delete_from(self) -> None:
        self.meta.from_id = None

    def delete_to(self, component_id: UUID) -> None:
        self.meta.delete_to(component_id)

    def set_system_id(self, system_id: Optional[int]) -> None:
        self.meta.system_id = system_id

    def inherit_from(self, buffer) -> None:
        """
        Copy the editable fields of `buffer` into this component.

        Raises TypeError if the buffer is for a different kind. Kind
        specific validation errors propagate and leave the component
        unchanged.
        """
        if buffer.kind is not self.kind:
            raise TypeError(
                f"Cannot update a {self.kind.value} from a {buffer.kind.value} buffer"
            )
        self._inherit(buffer)

    def _inherit(self, buffer) -> None:
        pass
