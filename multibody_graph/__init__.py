# multibody_graph - interactive multibody model assembly
"""
MULTIBODY-GRAPH: Assemble Multibody Models as Component Graphs
==============================================================

This package provides:
- Numeric value types (vectors, matrices, quaternions, mass properties)
- Typed multibody components (Base, Body, Revolute)
- An editable component graph with connection rules
- A resolver that turns the graph into an ordered MultibodySystem
  for a downstream dynamics solver

ARCHITECTURE:
-------------
    kernel/          Numeric value types (no graph knowledge)
    kinds.py         The closed set of component kinds
    buffers.py       String-typed edit buffers + silent-default parsing
    components/      Base, Body, Revolute and their shared metadata
    validator.py     Which kinds may be connected
    edge.py          Drawn connections
    graph.py         The editable graph (add / connect / delete)
    resolver.py      Graph → MultibodySystem
    errors.py        GraphError family
    config.py        Defaults
    logging_config.py
"""

from .kinds import ComponentKind
from .buffers import BaseBuffer, BodyBuffer, RevoluteBuffer, new_buffer, parse_float
from .components import Base, Body, Revolute, Joint, Component
from .graph import Graph, VisualNode
from .resolver import MultibodySystem, resolve
from .validator import is_valid
from .errors import GraphError

__version__ = "0.1.0"

__all__ = [
    'ComponentKind',
    'BaseBuffer',
    'BodyBuffer',
    'RevoluteBuffer',
    'new_buffer',
    'parse_float',
    'Base',
    'Body',
    'Revolute',
    'Joint',
    'Component',
    'Graph',
    'VisualNode',
    'MultibodySystem',
    'resolve',
    'is_valid',
    'GraphError',
]
