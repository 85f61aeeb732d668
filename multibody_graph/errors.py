# multibody_graph/errors.py
"""
Topology errors raised by the graph.

Resolution errors (NoBase, BodyMissingFrom, ...) are terminal for one
resolve() call only; the graph is left untouched and editing can go on.
Connection errors are raised by Graph.connect() and likewise leave the
graph as it was.
"""

from typing import Iterable
from uuid import UUID


class GraphError(RuntimeError):
    """Base class for every structural error in a component graph."""
    pass


class NoBase(GraphError):
    """Raised when the graph holds no Base component."""

    def __init__(self):
        super().__init__("Graph has no base. Add a base before resolving.")


class MultipleBases(GraphError):
    """Raised when the graph holds more than one Base component."""

    def __init__(self, base_ids: Iterable[UUID]):
        self.base_ids = list(base_ids)
        super().__init__(
            f"Graph has {len(self.base_ids)} bases; exactly one is required."
        )


class NoBaseConnections(GraphError):
    """Raised when no joint hangs off the base."""

    def __init__(self):
        super().__init__("Nothing is connected to the base.")


class _ComponentError(GraphError):
    message = "{id}"

    def __init__(self, component_id: UUID):
        self.component_id = component_id
        super().__init__(self.message.format(id=component_id))


class BodyMissingFrom(_ComponentError):
    message = "Body {id} has no inner joint."


class JointMissingFrom(_ComponentError):
    message = "Joint {id} has no inner body."


class JointMissingTo(_ComponentError):
    message = "Joint {id} has no outer body."


class IdNotFound(_ComponentError):
    message = "Component {id} not found."


class CycleDetected(_ComponentError):
    message = "Component {id} reached twice while traversing from the base."


class AlreadyConnected(_ComponentError):
    message = "Component {id} already has an inner connection."


class InvalidConnection(GraphError):
    """Raised when the validator rejects a pair of component kinds."""

    def __init__(self, from_kind, to_kind):
        self.from_kind = from_kind
        self.to_kind = to_kind
        super().__init__(
            f"Cannot connect {from_kind.value} to {to_kind.value}."
        )
