"""Creating and deleting clusters made of Docker container nodes."""
import logging
import subprocess
import time
from collections import Counter
from typing import List, Tuple

from kindctl.config import Settings
from kindctl.util.errors import ClusterCreateError
from .config.models import Config, Node, Role

logger = logging.getLogger(__name__)


class Context:
    """A named cluster and the docker containers backing it."""

    def __init__(self, name: str = "1"):
        self.name = name

    @property
    def label(self) -> str:
        return f"{Settings.CLUSTER_LABEL}={self.name}"

    def node_names(self, config: Config) -> List[Tuple[str, Node]]:
        """Container name for every replica, in creation order."""
        totals = Counter(_role_name(n) for n in config.all_replicas())
        seen = Counter()
        names = []
        for node in config.all_replicas():
            role = _role_name(node)
            seen[role] += 1
            suffix = str(seen[role]) if totals[role] > 1 else ""
            names.append((f"kind-{self.name}-{role}{suffix}", node))
        return names

    def create(self, config: Config, retain: bool = False, wait: float = 0.0) -> None:
        """Boot a container for every node replica in the config.

        Raises:
            ClusterCreateError: If any container fails to start. Containers
                already started are removed first unless ``retain`` is set. Also
                raised when the readiness check cannot run at all.
        """
        created = []
        nodes = self.node_names(config)
        logger.info(f"🚀 Creating cluster {self.name!r} with {len(nodes)} node(s)...")
        for container, node in nodes:
            logger.info(f"📦 Starting node {container} ({node.image})")
            try:
                _docker(
                    "run", "-d", "--privileged",
                    "--name", container,
                    "--hostname", container,
                    "--label", self.label,
                    node.image,
                )
            except (subprocess.CalledProcessError, OSError) as e:
                if retain:
                    logger.warning(f"⚠️  Retaining nodes for debugging: {', '.join(created) or 'none'}")
                else:
                    self._rollback(created)
                detail = (getattr(e, "stderr", None) or "").strip() or str(e)
                raise ClusterCreateError(f"failed to start node {container}: {detail}") from e
            created.append(container)

        if wait > 0:
            bootstrap = config.bootstrap_control_plane()
            container = next((c for c, n in nodes if n is bootstrap), None)
            if container is None:
                logger.warning("⚠️  No control plane node was started, not waiting.")
            else:
                self._wait_ready(container, wait)

        logger.info(f"✅ Cluster {self.name!r} created.")

    def delete(self) -> List[str]:
        """Remove every container labelled for this cluster.

        Raises:
            subprocess.CalledProcessError: If docker cannot list or remove them.
        """
        result = _docker("ps", "-aq", "--filter", f"label={self.label}")
        containers = result.stdout.split()
        if containers:
            logger.info(f"🧹 Removing nodes: {', '.join(containers)}")
            _docker("rm", "-f", *containers)
        return containers

    def _rollback(self, containers: List[str]) -> None:
        if not containers:
            return
        logger.info(f"🧹 Removing nodes: {', '.join(containers)}")
        try:
            _docker("rm", "-f", *containers)
        except (subprocess.CalledProcessError, OSError) as e:
            logger.warning(f"⚠️  Failed to remove nodes: {(getattr(e, 'stderr', None) or '').strip() or e}")

    def _wait_ready(self, container: str, timeout: float) -> bool:
        logger.info(f"⏳ Waiting up to {timeout:g}s for control plane {container} to be ready...")
        deadline = time.monotonic() + timeout
        while True:
            try:
                result = subprocess.run(
                    [Settings.DOCKER_BIN, "exec", container,
                     "kubectl", "--kubeconfig=/etc/kubernetes/admin.conf", "get", "nodes"],
                    capture_output=True, text=True,
                )
            except OSError as e:
                raise ClusterCreateError(f"cannot check control plane {container}: {e}") from e
            if result.returncode == 0:
                logger.info("✅ Control plane is ready.")
                return True
            if time.monotonic() >= deadline:
                logger.warning("⚠️  Timed out waiting for the control plane to be ready.")
                return False
            time.sleep(Settings.WAIT_POLL_INTERVAL)


def _role_name(node: Node) -> str:
    return node.role.value if isinstance(node.role, Role) else str(node.role)


def _docker(*args: str) -> subprocess.CompletedProcess:
    cmd = [Settings.DOCKER_BIN, *args]
    logger.debug(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd, capture_output=True, text=True, check=True)
