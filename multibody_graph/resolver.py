# multibody_graph/resolver.py
"""
GRAPH RESOLVER: Component Graph → Ordered Multibody Tree
========================================================

PURPOSE:
--------
A dynamics solver wants bodies and joints as two ordered lists, indexed
by a "system id". This module walks the edited graph from the base and
produces exactly that:

    MultibodySystem(
        bodies = (base, body, body, ...),     system ids 0, 1, 2, ...
        joints = (joint, joint, ...),         system ids 0, 1, ...
    )

RULES (checked in this order):
------------------------------
1. Exactly one Base                        → NoBase / MultipleBases
2. Every joint has an inner and an outer   → JointMissingFrom / JointMissingTo
   component; every body has an inner joint → BodyMissingFrom
3. At least one joint hangs off the base   → NoBaseConnections
4. Depth-first walk from the base, following each component's to_ids
   in the order they were connected. A Base/Body takes the next body
   counter value, a joint takes the next joint counter value.
   An id that is not in the graph          → IdNotFound
   A component reached twice               → CycleDetected

Components that cannot be reached from the base are left out of the
result without error, so a graph with half-built fragments still
resolves.

The traversal order IS the system id order. Do not change it without
changing every consumer that indexes by system id.

SIDE EFFECTS:
-------------
The walk runs on copies. Only after it succeeds are the live
components' system_id fields rewritten (unreached components get None).
A failed resolve leaves the graph untouched.
"""

import copy
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple
from uuid import UUID

import numpy as np

from .components import Base, Body, Component, Joint
from .errors import (
    BodyMissingFrom,
    CycleDetected,
    GraphError,
    IdNotFound,
    JointMissingFrom,
    JointMissingTo,
    MultipleBases,
    NoBase,
    NoBaseConnections,
)
from .kinds import ComponentKind

if TYPE_CHECKING:
    from .graph import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MultibodySystem:
    """
    Resolved multibody tree, ready to hand to a solver.

    Attributes:
    -----------
    bodies : tuple of Base | Body
        Ordered by system id; bodies[0] is the base
    joints : tuple of Joint
        Ordered by system id
    """
    bodies: Tuple[Component, ...]
    joints: Tuple[Joint, ...]

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    @property
    def n_joints(self) -> int:
        return len(self.joints)

    @property
    def base(self) -> Base:
        return self.bodies[0]

    def body_index(self, component_id: UUID) -> int:
        """System id of a base/body by component id (KeyError if absent)."""
        for body in self.bodies:
            if body.component_id == component_id:
                return body.system_id
        raise KeyError(component_id)

    def joint_index(self, component_id: UUID) -> int:
        """System id of a joint by component id (KeyError if absent)."""
        for joint in self.joints:
            if joint.component_id == component_id:
                return joint.system_id
        raise KeyError(component_id)

    def parent_body_indices(self) -> np.ndarray:
        """
        Inner-body system id of each joint, in joint order.

        A joint whose inner component is not a body in this system
        (e.g. it hangs off another joint's outer side) gets -1.
        """
        index = {b.component_id: b.system_id for b in self.bodies}
        return np.array([index.get(j.from_id, -1) for j in self.joints], dtype=int)

    def state_vector(self) -> np.ndarray:
        """
        Initial joint state as [θ_0 .. θ_n-1, ω_0 .. ω_n-1].
        """
        theta = [j.state.theta for j in self.joints]
        omega = [j.state.omega for j in self.joints]
        return np.array(theta + omega, dtype=float)

    def to_dict(self, names: Optional[Dict[UUID, str]] = None) -> dict:
        """
        Plain-data view, e.g. for JSON export.

        Parameters:
        -----------
        names : dict, optional
            name_id → display name (Graph.names); names are omitted if None
        """
        def entry(component: Component) -> dict:
            data = {
                'component_id': str(component.component_id),
                'system_id': component.system_id,
                'kind': component.kind.value,
                'from_id': str(component.from_id) if component.from_id else None,
                'to_ids': [str(i) for i in component.to_ids],
            }
            if names is not None:
                data['name'] = names.get(component.name_id)
            if isinstance(component, Body):
                data['mass_properties'] = component.mass_properties.to_dict()
            if component.kind.is_joint:
                data['parameters'] = {
                    'constant_force': component.parameters.constant_force,
                    'damping': component.parameters.damping,
                    'spring_constant': component.parameters.spring_constant,
                }
                data['state'] = {
                    'theta': component.state.theta,
                    'omega': component.state.omega,
                }
            return data

        return {
            'bodies': [entry(b) for b in self.bodies],
            'joints': [entry(j) for j in self.joints],
        }


def _find_base(components: Dict[UUID, Component]) -> Base:
    bases = [c for c in components.values() if c.kind is ComponentKind.BASE]
    if not bases:
        raise NoBase()
    if len(bases) > 1:
        raise MultipleBases(b.component_id for b in bases)
    return bases[0]


def _check_connectivity(components: Dict[UUID, Component], base: Base) -> None:
    for component in components.values():
        if component.kind.is_joint:
            if component.from_id is None:
                raise JointMissingFrom(component.component_id)
            if not component.to_ids:
                raise JointMissingTo(component.component_id)
        elif component.kind is ComponentKind.BODY:
            if component.from_id is None:
                raise BodyMissingFrom(component.component_id)

    if not any(
        c.kind.is_joint and c.from_id == base.component_id
        for c in components.values()
    ):
        raise NoBaseConnections()


def _traverse(components: Dict[UUID, Component], base: Base) -> Tuple[List[Component], List[Joint]]:
    """
    Depth-first walk from the base over copies of the components.

    Iterative, with children pushed in reverse so they pop in to_ids
    order; the visiting order matches a recursive pre-order walk.
    """
    bodies: List[Component] = []
    joints: List[Joint] = []
    visited = set()
    stack = [base.component_id]

    while stack:
        component_id = stack.pop()
        if component_id not in components:
            raise IdNotFound(component_id)
        if component_id in visited:
            raise CycleDetected(component_id)
        visited.add(component_id)

        component = copy.deepcopy(components[component_id])
        if component.kind.is_body_like:
            component.set_system_id(len(bodies))
            bodies.append(component)
        else:
            component.set_system_id(len(joints))
            joints.append(component)

        stack.extend(reversed(component.to_ids))

    return bodies, joints


def resolve(graph: "Graph") -> MultibodySystem:
    """
    Resolve `graph` into a MultibodySystem.

    Raises:
    -------
    GraphError
        One of NoBase, MultipleBases, JointMissingFrom, JointMissingTo,
        BodyMissingFrom, NoBaseConnections, IdNotFound, CycleDetected.
        The graph is not modified.
    """
    components = graph.components
    try:
        base = _find_base(components)
        _check_connectivity(components, base)
        bodies, joints = _traverse(components, base)
    except GraphError as e:
        logger.info("Resolution failed: %s", e)
        raise

    for component in components.values():
        component.set_system_id(None)
    for resolved in bodies + joints:
        components[resolved.component_id].set_system_id(resolved.system_id)

    unreached = len(components) - len(bodies) - len(joints)
    if unreached:
        logger.info("Resolved graph; %d unreachable component(s) left out", unreached)
    logger.debug("Resolved %d bodies, %d joints", len(bodies), len(joints))

    return MultibodySystem(tuple(bodies), tuple(joints))
