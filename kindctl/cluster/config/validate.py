"""Structural validation of cluster topology configurations."""
from typing import Iterable

from kindctl.util.errors import ErrorList, HOOK, TOPOLOGY
from .models import Config, Hook, Node, Role

# (label used in messages, NodeLifecycle attribute)
HOOK_GROUPS = (
    ("preBoot", "pre_boot"),
    ("preKubeadm", "pre_kubeadm"),
    ("postKubeadm", "post_kubeadm"),
    ("postSetup", "post_setup"),
)


def validate_config(config: Config) -> ErrorList:
    """Return an ErrorList with an entry for each problem in the config.

    Every node is checked even after an earlier one fails, and the topology
    checks always run. An empty result means the config is valid.
    """
    errs = ErrorList()

    for i, node in enumerate(config.nodes):
        node_errs = validate_node(node)
        if node_errs:
            errs.extend(node_errs.wrap_node(i))

    if config.bootstrap_control_plane() is None:
        errs.add("please add at least one node with role ControlPlane", TOPOLOGY)

    if len(config.control_planes()) > 1 and config.external_load_balancer() is None:
        errs.add(
            "please add a node with role ExternalLoadBalancer "
            "because there are multiple ControlPlane nodes",
            TOPOLOGY,
        )

    return errs


def validate_node(node: Node) -> ErrorList:
    """Return an ErrorList with an entry for each problem with the node."""
    errs = ErrorList()

    if node.role not in tuple(Role):
        errs.add("role is a required field")

    if not node.image:
        errs.add("image is a required field")

    if node.replicas is not None and node.replicas < 0:
        errs.add("replicas number should not be a negative number")

    lifecycle = node.control_plane.node_lifecycle if node.control_plane else None
    if lifecycle is not None:
        for label, attr in HOOK_GROUPS:
            if _has_empty_command(getattr(lifecycle, attr)):
                errs.add(f"{label} hooks must set command to a non-empty value", HOOK)

    return errs


def _has_empty_command(hooks: Iterable[Hook]) -> bool:
    # one error per group is enough, stop at the first offender
    for hook in hooks:
        if not hook.command:
            return True
    return False
