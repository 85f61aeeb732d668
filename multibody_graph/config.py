# multibody_graph/config.py
"""
Library configuration and defaults.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass
class GraphConfig:
    """Global configuration for graph editing."""

    # Defaults used when an edit-buffer text field is empty or unparsable
    default_mass: float = 1.0
    default_inertia: float = 1.0        # ixx, iyy, izz
    default_product_of_inertia: float = 0.0  # ixy, ixz, iyz
    default_center_of_mass: float = 0.0
    default_joint_parameter: float = 0.0     # constant force, damping, spring constant
    default_joint_state: float = 0.0         # theta, omega

    # Display names used when a buffer carries no name
    default_names: Dict[str, str] = None

    # Visual node footprint handed to the UI (width, height)
    node_size: Tuple[float, float] = (100.0, 50.0)

    log_level: int = logging.WARNING

    def __post_init__(self):
        if self.default_names is None:
            self.default_names = {
                'base': 'Base',
                'body': 'Body',
                'revolute': 'Revolute',
            }


# Global config instance
CONFIG = GraphConfig()
