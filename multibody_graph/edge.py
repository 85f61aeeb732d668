# multibody_graph/edge.py
"""
Edges between components.

Each end of an edge is either a component (NodeEndpoint) or a free
point on the canvas (PointEndpoint). A free point only exists while a
connection is being dragged out, before it snaps onto a component.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union
from uuid import UUID


@dataclass(frozen=True)
class NodeEndpoint:
    component_id: UUID


@dataclass(frozen=True)
class PointEndpoint:
    x: float
    y: float


Endpoint = Union[NodeEndpoint, PointEndpoint]


@dataclass
class Edge:
    """
    A drawn connection.

    Attributes:
    -----------
    id : UUID
        Edge identifier
    from_end : Endpoint
        Upstream end
    to_end : Endpoint
        Downstream end (a PointEndpoint while still being dragged)
    """
    id: UUID
    from_end: Endpoint
    to_end: Endpoint

    @property
    def is_pending(self) -> bool:
        return isinstance(self.from_end, PointEndpoint) or isinstance(self.to_end, PointEndpoint)

    def component_ids(self) -> Tuple[UUID, ...]:
        return tuple(
            end.component_id for end in (self.from_end, self.to_end)
            if isinstance(end, NodeEndpoint)
        )

    def touches(self, component_id: UUID) -> bool:
        return component_id in self.component_ids()

    def other_end(self, component_id: UUID) -> Optional[UUID]:
        """Id at the opposite end from `component_id` (None for a free point)."""
        for end, other in ((self.from_end, self.to_end), (self.to_end, self.from_end)):
            if isinstance(end, NodeEndpoint) and end.component_id == component_id:
                return other.component_id if isinstance(other, NodeEndpoint) else None
        return None
