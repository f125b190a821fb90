"""
Cluster topology configuration: models, loading and validation.
"""
from .models import Config, ControlPlane, Hook, Node, NodeLifecycle, Role
from .validate import validate_config, validate_node

__all__ = [
    'Config',
    'ControlPlane',
    'Hook',
    'Node',
    'NodeLifecycle',
    'Role',
    'validate_config',
    'validate_node',
]
