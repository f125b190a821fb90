"""Loading cluster configuration files.

Only the document shape is checked here (types of the known keys). Whether
the values make a usable cluster is decided by :mod:`.validate`.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from jsonschema import validate, ValidationError

from kindctl.config import Settings
from kindctl.util.errors import ConfigLoadError
from .models import Config, ControlPlane, Hook, Node, NodeLifecycle, Role

logger = logging.getLogger(__name__)

API_VERSION = "kind.sigs.k8s.io/v1alpha2"
KIND = "Config"

HOOK_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": ["string", "null"]},
        "command": {"type": ["array", "null"], "items": {"type": "string"}},
    },
}

HOOK_GROUP_SCHEMA = {"type": ["array", "null"], "items": HOOK_SCHEMA}

NODE_SCHEMA = {
    "type": "object",
    "properties": {
        "role": {"type": ["string", "null"]},
        "image": {"type": ["string", "null"]},
        "replicas": {"type": ["integer", "null"]},
        "controlPlane": {
            "type": ["object", "null"],
            "properties": {
                "nodeLifecycle": {
                    "type": ["object", "null"],
                    "properties": {
                        "preBoot": HOOK_GROUP_SCHEMA,
                        "preKubeadm": HOOK_GROUP_SCHEMA,
                        "postKubeadm": HOOK_GROUP_SCHEMA,
                        "postSetup": HOOK_GROUP_SCHEMA,
                    },
                },
            },
        },
    },
}

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "kind": {"type": "string"},
        "apiVersion": {"type": "string"},
        "nodes": {"type": ["array", "null"], "items": NODE_SCHEMA},
    },
}


def default_config() -> Config:
    """A single control-plane node running the default node image."""
    return Config(nodes=(Node(role=Role.CONTROL_PLANE, image=Settings.KIND_NODE_IMAGE),))


def load(path: Optional[Union[str, Path]] = None) -> Config:
    """Load a config file, or the default config when no path is given."""
    if not path:
        logger.debug("No config file given, using defaults")
        return default_config()

    path = Path(path).expanduser()
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigLoadError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"invalid YAML in {path}: {e}") from e

    logger.debug(f"Loaded config from {path}")
    return parse(data or {})


def parse(data: Dict[str, Any]) -> Config:
    """Convert a decoded config document into a Config."""
    try:
        validate(instance=data, schema=CONFIG_SCHEMA)
    except ValidationError as ve:
        location = "/".join(str(p) for p in ve.absolute_path) or "<root>"
        raise ConfigLoadError(f"{location}: {ve.message}") from ve

    kind = data.get("kind", KIND)
    if kind != KIND:
        raise ConfigLoadError(f"unsupported kind {kind!r}, expected {KIND!r}")
    api_version = data.get("apiVersion")
    if api_version and api_version != API_VERSION:
        logger.warning(f"apiVersion {api_version} is not {API_VERSION}, decoding anyway")

    raw_nodes = data.get("nodes")
    if raw_nodes is None:
        return default_config()
    return Config(nodes=tuple(_parse_node(n) for n in raw_nodes))


def _parse_node(raw: Dict[str, Any]) -> Node:
    image = raw.get("image")
    control_plane = None
    if raw.get("controlPlane") is not None:
        control_plane = _parse_control_plane(raw["controlPlane"])
    return Node(
        role=Role.parse(raw.get("role")),
        # omitted image falls back to the default, an explicit "" is kept
        image=Settings.KIND_NODE_IMAGE if image is None else image,
        replicas=raw.get("replicas"),
        control_plane=control_plane,
    )


def _parse_control_plane(raw: Dict[str, Any]) -> ControlPlane:
    lifecycle = raw.get("nodeLifecycle")
    if lifecycle is None:
        return ControlPlane()
    return ControlPlane(node_lifecycle=NodeLifecycle(
        pre_boot=_parse_hooks(lifecycle.get("preBoot")),
        pre_kubeadm=_parse_hooks(lifecycle.get("preKubeadm")),
        post_kubeadm=_parse_hooks(lifecycle.get("postKubeadm")),
        post_setup=_parse_hooks(lifecycle.get("postSetup")),
    ))


def _parse_hooks(raw):
    return tuple(
        Hook(name=h.get("name"), command=tuple(h.get("command") or ()))
        for h in raw or ()
    )
