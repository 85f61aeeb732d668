import json
import logging

import numpy as np

from multibody_graph import BodyBuffer, ComponentKind, Graph, RevoluteBuffer
from multibody_graph.errors import GraphError
from multibody_graph.logging_config import setup_logging


def main():
    """
    DOUBLE PENDULUM: BUILD, BREAK, FIX, RESOLVE
    ===========================================
    Builds base → hinge → upper arm → hinge → lower arm the way a user
    would in the editor, then prints what a solver would receive.
    """
    setup_logging(logging.INFO)

    graph = Graph()

    # ========================================================================
    # COMPONENTS: text in, exactly as typed in the forms
    # ========================================================================
    base = graph.add_component(ComponentKind.BASE, anchor=(0.0, 0.0))
    shoulder = graph.add_component(
        ComponentKind.REVOLUTE,
        RevoluteBuffer(name="shoulder", theta=str(np.pi / 4), damping="0.05"),
        anchor=(0.0, 100.0),
    )
    upper = graph.add_component(
        ComponentKind.BODY,
        BodyBuffer(name="upper arm", mass="1.5", cmz="-0.5", ixx="0.1", iyy="0.1", izz="0.01"),
        anchor=(0.0, 200.0),
    )
    elbow = graph.add_component(
        ComponentKind.REVOLUTE,
        RevoluteBuffer(name="elbow", theta="0.0", omega="1.0"),
        anchor=(0.0, 300.0),
    )
    lower = graph.add_component(
        ComponentKind.BODY,
        BodyBuffer(name="lower arm", mass="1.0", cmz="-0.4"),  # inertia left blank → defaults
        anchor=(0.0, 400.0),
    )

    graph.connect(base, shoulder)
    graph.connect(shoulder, upper)
    graph.connect(upper, elbow)

    # ========================================================================
    # RESOLVE TOO EARLY: the elbow has nothing outboard yet
    # ========================================================================
    try:
        graph.resolve()
    except GraphError as e:
        print(f"Not ready: {type(e).__name__}: {e}")

    graph.connect(elbow, lower)
    system = graph.resolve()

    # ========================================================================
    # PRINT RESULTS
    # ========================================================================
    print()
    print("Double Pendulum - Resolved System")
    print("=" * 50)
    for body in system.bodies:
        print(f"body  {body.system_id}: {graph.get_name(body.component_id)}")
    for joint in system.joints:
        print(f"joint {joint.system_id}: {graph.get_name(joint.component_id)}")
    print()
    print(f"Parent body of each joint: {system.parent_body_indices()}")
    print(f"Initial state [θ..., ω...]: {system.state_vector()}")
    print()
    print(json.dumps(system.to_dict(graph.names), indent=2))


if __name__ == "__main__":
    main()
