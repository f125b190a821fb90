"""
Data models for cluster topology configuration.
"""
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple, Union


class Role(str, Enum):
    """Node roles in the cluster."""
    CONTROL_PLANE = 'control-plane'
    WORKER = 'worker'
    EXTERNAL_ETCD = 'external-etcd'
    EXTERNAL_LOAD_BALANCER = 'external-load-balancer'

    @classmethod
    def parse(cls, value: Optional[str]) -> Union['Role', str, None]:
        """Map a raw value to a Role, keeping unknown values as they are."""
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class Hook:
    """A command run at one phase of node bring-up."""
    command: Tuple[str, ...] = ()
    name: Optional[str] = None


@dataclass(frozen=True)
class NodeLifecycle:
    """Hook groups for each phase of a control-plane node's bring-up."""
    pre_boot: Tuple[Hook, ...] = ()
    pre_kubeadm: Tuple[Hook, ...] = ()
    post_kubeadm: Tuple[Hook, ...] = ()
    post_setup: Tuple[Hook, ...] = ()


@dataclass(frozen=True)
class ControlPlane:
    node_lifecycle: Optional[NodeLifecycle] = None


@dataclass(frozen=True)
class Node:
    """Represents a node (or a group of replicas) in the cluster."""
    role: Union[Role, str, None] = None
    image: str = ''
    replicas: Optional[int] = None
    control_plane: Optional[ControlPlane] = None

    def has_role(self, role: Role) -> bool:
        return self.role == role


@dataclass(frozen=True)
class Config:
    """Cluster topology: an ordered list of nodes."""
    nodes: Tuple[Node, ...] = field(default_factory=tuple)

    def bootstrap_control_plane(self) -> Optional[Node]:
        """The first control-plane node in declaration order."""
        for node in self.nodes:
            if node.has_role(Role.CONTROL_PLANE):
                return node
        return None

    def control_planes(self) -> List[Node]:
        return self._with_role(Role.CONTROL_PLANE)

    def workers(self) -> List[Node]:
        return self._with_role(Role.WORKER)

    def external_etcd(self) -> List[Node]:
        return self._with_role(Role.EXTERNAL_ETCD)

    def external_load_balancer(self) -> Optional[Node]:
        balancers = self._with_role(Role.EXTERNAL_LOAD_BALANCER)
        return balancers[0] if balancers else None

    def all_replicas(self) -> List[Node]:
        """Expand every node by its replica count (unset means one)."""
        expanded = []
        for node in self.nodes:
            count = 1 if node.replicas is None else max(node.replicas, 0)
            expanded.extend([node] * count)
        return expanded

    def with_bootstrap_image(self, image: str) -> 'Config':
        """Return a copy whose bootstrap control-plane node boots ``image``."""
        bootstrap = self.bootstrap_control_plane()
        if bootstrap is None:
            return self
        nodes = list(self.nodes)
        index = next(i for i, n in enumerate(nodes) if n is bootstrap)
        nodes[index] = replace(bootstrap, image=image)
        return replace(self, nodes=tuple(nodes))

    def validate(self):
        """Shortcut for :func:`kindctl.cluster.config.validate.validate_config`."""
        from .validate import validate_config
        return validate_config(self)

    def _with_role(self, role: Role) -> List[Node]:
        return [n for n in self.nodes if n.has_role(role)]
