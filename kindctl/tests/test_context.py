import subprocess

import pytest

from kindctl.cluster import context as context_mod
from kindctl.cluster.config import Config, Node, Role
from kindctl.cluster.context import Context
from kindctl.util.errors import ClusterCreateError


class FakeDocker:
    """Records docker invocations; fails `run` for names in `fail_on`."""

    def __init__(self, fail_on=(), ready_after=0, ps_output=""):
        self.calls = []
        self.fail_on = set(fail_on)
        self.ready_after = ready_after
        self.ps_output = ps_output

    def __call__(self, cmd, capture_output=False, text=False, check=False):
        self.calls.append(cmd)
        verb = cmd[1]
        if verb == "run" and cmd[cmd.index("--name") + 1] in self.fail_on:
            raise subprocess.CalledProcessError(125, cmd, output="", stderr="boom")
        if verb == "exec":
            self.ready_after -= 1
            code = 0 if self.ready_after < 0 else 1
            return subprocess.CompletedProcess(cmd, code, "", "")
        if verb == "ps":
            return subprocess.CompletedProcess(cmd, 0, self.ps_output, "")
        return subprocess.CompletedProcess(cmd, 0, "id\n", "")

    def verbs(self):
        return [c[1] for c in self.calls]


@pytest.fixture
def docker(monkeypatch):
    fake = FakeDocker()
    monkeypatch.setattr(context_mod.subprocess, "run", fake)
    monkeypatch.setattr(context_mod.time, "sleep", lambda _: None)
    return fake


def ha_config():
    return Config(nodes=(
        Node(role=Role.CONTROL_PLANE, image="cp", replicas=2),
        Node(role=Role.EXTERNAL_LOAD_BALANCER, image="lb"),
        Node(role=Role.WORKER, image="w"),
    ))


def test_node_names():
    names = [n for n, _ in Context("dev").node_names(ha_config())]
    assert names == [
        "kind-dev-control-plane1",
        "kind-dev-control-plane2",
        "kind-dev-external-load-balancer",
        "kind-dev-worker",
    ]


def test_create_starts_every_replica(docker):
    Context("dev").create(ha_config())
    assert docker.verbs() == ["run"] * 4
    first = docker.calls[0]
    assert first[-1] == "cp"
    assert "io.k8s.sigs.kind.cluster=dev" in first


def test_create_failure_removes_started_nodes(docker):
    docker.fail_on = {"kind-dev-external-load-balancer"}
    with pytest.raises(ClusterCreateError, match="boom"):
        Context("dev").create(ha_config())
    assert docker.calls[-1] == ["docker", "rm", "-f", "kind-dev-control-plane1", "kind-dev-control-plane2"]


def test_create_failure_with_retain_keeps_nodes(docker):
    docker.fail_on = {"kind-dev-worker"}
    with pytest.raises(ClusterCreateError):
        Context("dev").create(ha_config(), retain=True)
    assert "rm" not in docker.verbs()


def test_create_waits_for_bootstrap(docker):
    docker.ready_after = 2
    Context("1").create(Config(nodes=(Node(role=Role.CONTROL_PLANE, image="cp"),)), wait=60)
    assert docker.verbs() == ["run", "exec", "exec", "exec"]
    assert docker.calls[1][2] == "kind-1-control-plane"


def test_delete_removes_labelled_containers(docker):
    docker.ps_output = "abc\ndef\n"
    assert Context("dev").delete() == ["abc", "def"]
    assert docker.calls[0][-1] == "label=io.k8s.sigs.kind.cluster=dev"
    assert docker.calls[1] == ["docker", "rm", "-f", "abc", "def"]


def test_delete_propagates_remove_failure(docker, monkeypatch):
    docker.ps_output = "abc\n"

    def failing(cmd, **kwargs):
        if cmd[1] == "rm":
            docker.calls.append(cmd)
            raise subprocess.CalledProcessError(1, cmd, output="", stderr="permission denied")
        return docker(cmd, **kwargs)

    monkeypatch.setattr(context_mod.subprocess, "run", failing)
    with pytest.raises(subprocess.CalledProcessError):
        Context("dev").delete()
    assert docker.verbs() == ["ps", "rm"]


def test_delete_without_nodes_skips_remove(docker):
    assert Context("dev").delete() == []
    assert docker.verbs() == ["ps"]


def test_wait_without_docker_binary_raises_create_error(docker, monkeypatch):
    def missing(cmd, **kwargs):
        if cmd[1] == "exec":
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        return docker(cmd, **kwargs)

    monkeypatch.setattr(context_mod.subprocess, "run", missing)
    with pytest.raises(ClusterCreateError, match="cannot check control plane"):
        Context("1").create(Config(nodes=(Node(role=Role.CONTROL_PLANE, image="cp"),)), wait=5)
