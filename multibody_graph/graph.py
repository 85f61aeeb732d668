# multibody_graph/graph.py
"""
GRAPH: The Editable Component Graph
===================================

PURPOSE:
--------
The Graph is what a UI edits. It owns:

    components       component_id → Base | Body | Revolute
    names            name_id → display name
    nodes            node_id → VisualNode (opaque to the core)
    edges            edge_id → Edge
    component_edges  component_id → ids of the edges it takes part in
    pending_edge     id of the edge currently being dragged, if any

Every public method is one command. A command either completes or
raises before changing anything: a failed connect() or resolve() leaves
the graph exactly as it was.

TYPICAL SESSION:
----------------
    graph = Graph()
    base = graph.add_component(ComponentKind.BASE)
    hinge = graph.add_component(ComponentKind.REVOLUTE)
    arm = graph.add_component(ComponentKind.BODY, BodyBuffer(mass="2.0"))

    graph.connect(base, hinge)
    graph.connect(hinge, arm)

    system = graph.resolve()       # MultibodySystem: 2 bodies, 1 joint
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from uuid import UUID, uuid4

from .buffers import EditBuffer, new_buffer
from .components import Component, component_from_buffer
from .config import CONFIG
from .edge import Edge, NodeEndpoint, PointEndpoint
from .errors import AlreadyConnected, IdNotFound, InvalidConnection
from .kinds import ComponentKind
from .resolver import MultibodySystem, resolve
from .validator import is_valid

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass
class VisualNode:
    """
    What the UI needs to draw a component.

    The core stores the anchor it was given at creation and never
    interprets it.
    """
    node_id: UUID
    component_id: UUID
    kind: ComponentKind
    anchor: Point
    label: str
    size: Tuple[float, float] = CONFIG.node_size


class Graph:
    """Editable graph of multibody components."""

    def __init__(self):
        self.components: Dict[UUID, Component] = {}
        self.names: Dict[UUID, str] = {}
        self.nodes: Dict[UUID, VisualNode] = {}
        self.edges: Dict[UUID, Edge] = {}
        self.component_edges: Dict[UUID, List[UUID]] = {}
        self.pending_edge: Optional[UUID] = None

    def __len__(self) -> int:
        return len(self.components)

    def __contains__(self, component_id: UUID) -> bool:
        return component_id in self.components

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, component_id: UUID) -> Component:
        """Return a component, raising IdNotFound if it does not exist."""
        try:
            return self.components[component_id]
        except KeyError:
            raise IdNotFound(component_id) from None

    def get_name(self, component_id: UUID) -> str:
        return self.names[self.get(component_id).name_id]

    def node_for(self, component_id: UUID) -> VisualNode:
        return self.nodes[self.get(component_id).node_id]

    def edges_of(self, component_id: UUID) -> List[Edge]:
        return [self.edges[e] for e in self.component_edges.get(component_id, [])]

    def edit_buffer(self, component_id: UUID) -> EditBuffer:
        """Edit buffer pre-filled from a live component (for re-opening a form)."""
        component = self.get(component_id)
        return component.to_buffer(self.names[component.name_id])

    # =========================================================================
    # Component commands
    # =========================================================================

    def add_component(
        self,
        kind: ComponentKind,
        buffer: Optional[EditBuffer] = None,
        anchor: Point = (0.0, 0.0),
    ) -> UUID:
        """
        Create a component from an edit buffer and register its visual node.

        Parameters:
        -----------
        kind : ComponentKind
            What to create
        buffer : EditBuffer, optional
            Text the user typed; empty / unparsable numeric fields take
            the configured defaults. An empty buffer is used if omitted.
        anchor : (x, y)
            Where the UI dropped the node; stored, never interpreted

        Returns:
        --------
        UUID
            The new component id

        Raises:
        -------
        TypeError
            If the buffer belongs to a different kind
        MassPropertiesError
            If the buffer holds a non-positive mass or principal inertia
        """
        kind = ComponentKind(kind)
        if buffer is None:
            buffer = new_buffer(kind)

        component_id, node_id, name_id = uuid4(), uuid4(), uuid4()
        component = component_from_buffer(kind, component_id, node_id, name_id, buffer)
        name = buffer.name.strip() or CONFIG.default_names[kind.value]

        self.components[component_id] = component
        self.names[name_id] = name
        self.nodes[node_id] = VisualNode(node_id, component_id, kind, tuple(anchor), name)
        self.component_edges[component_id] = []

        logger.debug("Added %s %r (%s)", kind.value, name, component_id)
        return component_id

    def update_component(self, component_id: UUID, buffer: EditBuffer) -> None:
        """
        Commit an edit buffer onto an existing component.

        If validation fails the component and its name are unchanged.
        """
        component = self.get(component_id)
        component.inherit_from(buffer)
        if buffer.name.strip():
            self.rename(component_id, buffer.name)
        logger.debug("Updated %s", component_id)

    def rename(self, component_id: UUID, name: str) -> None:
        component = self.get(component_id)
        name = name.strip()
        self.names[component.name_id] = name
        self.nodes[component.node_id].label = name

    def delete(self, component_id: UUID) -> None:
        """
        Remove a component, every edge touching it, and every reference
        to it held by other components.

        Deleting the base is allowed; the next resolve() reports NoBase.
        """
        component = self.get(component_id)

        pending = self.edges.get(self.pending_edge) if self.pending_edge else None
        if pending is not None and pending.touches(component_id):
            self.disconnect_pending_edge()

        for edge_id in self.component_edges.pop(component_id, []):
            edge = self.edges.pop(edge_id, None)
            if edge is None:
                continue
            other = edge.other_end(component_id)
            if other in self.component_edges:
                self.component_edges[other] = [
                    e for e in self.component_edges[other] if e != edge_id
                ]

        for other in self.components.values():
            if component_id in other.to_ids:
                other.delete_to(component_id)
            if other.from_id == component_id:
                other.delete_from()

        del self.components[component_id]
        self.names.pop(component.name_id, None)
        self.nodes.pop(component.node_id, None)
        logger.debug("Deleted %s %s", component.kind.value, component_id)

    # =========================================================================
    # Edge commands
    # =========================================================================

    def begin_edge(self, from_id: UUID, point: Point) -> UUID:
        """
        Start dragging a connection out of `from_id`.

        Any previous pending edge is discarded.
        """
        self.get(from_id)
        self.disconnect_pending_edge()
        edge = Edge(uuid4(), NodeEndpoint(from_id), PointEndpoint(*point))
        self.edges[edge.id] = edge
        self.pending_edge = edge.id
        return edge.id

    def drag_pending_edge(self, point: Point) -> None:
        if self.pending_edge is not None:
            self.edges[self.pending_edge].to_end = PointEndpoint(*point)

    def disconnect_pending_edge(self) -> bool:
        """
        Drop the pending edge (the drag ended over empty space).

        Returns True if there was one.
        """
        if self.pending_edge is None:
            return False
        self.edges.pop(self.pending_edge, None)
        self.pending_edge = None
        return True

    def connect(self, from_id: UUID, to_id: UUID) -> UUID:
        """
        Connect `from_id` → `to_id`, committing the pending edge.

        If a pending edge starts at `from_id` it becomes the committed edge,
        otherwise a new edge is created.

        Returns:
        --------
        UUID
            The committed edge id

        Raises:
        -------
        IdNotFound
            Either component does not exist
        InvalidConnection
            The validator rejects the pair of kinds
        AlreadyConnected
            `to_id` already has an upstream component, or the edge exists

        On any failure the pending edge is discarded and nothing else
        changes.
        """
        edge_id = self.pending_edge
        try:
            source = self.get(from_id)
            target = self.get(to_id)
            if not is_valid(source.kind, target.kind):
                raise InvalidConnection(source.kind, target.kind)
            if target.from_id is not None or to_id in source.to_ids:
                raise AlreadyConnected(to_id)
        except (IdNotFound, InvalidConnection, AlreadyConnected) as e:
            logger.warning("Rejected connection %s -> %s: %s", from_id, to_id, e)
            self.disconnect_pending_edge()
            raise

        edge = self.edges.get(edge_id) if edge_id is not None else None
        if edge is None or edge.from_end != NodeEndpoint(from_id):
            self.disconnect_pending_edge()
            edge = Edge(uuid4(), NodeEndpoint(from_id), NodeEndpoint(to_id))
            self.edges[edge.id] = edge
        edge.to_end = NodeEndpoint(to_id)
        self.pending_edge = None

        source.connect_to(to_id)
        target.connect_from(from_id)
        self.component_edges[from_id].append(edge.id)
        self.component_edges[to_id].append(edge.id)

        logger.debug("Connected %s -> %s", from_id, to_id)
        return edge.id

    # =========================================================================
    # Resolution
    # =========================================================================

    def resolve(self) -> MultibodySystem:
        """
        Resolve the graph into a MultibodySystem.

        See resolver.resolve() for the rules and the errors raised.
        """
        return resolve(self)
