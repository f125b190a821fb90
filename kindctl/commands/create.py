import logging
from typing import Optional

import typer

from kindctl.cluster.config import encoding
from kindctl.cluster.context import Context
from kindctl.util import parse_duration
from kindctl.util.errors import KindctlError

app = typer.Typer()
logger = logging.getLogger(__name__)


def _parse_wait(value: str) -> float:
    try:
        return parse_duration(value)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command("cluster")
def create_cluster_cmd(
    name: str = typer.Option("1", help="Cluster context name"),
    config: Optional[str] = typer.Option(None, help="Path to a kind config file"),
    image: Optional[str] = typer.Option(None, help="Node docker image to use for booting the cluster"),
    retain: bool = typer.Option(False, help="Retain nodes for debugging when cluster creation fails"),
    wait: str = typer.Option("0", help="Wait for control plane node to be ready (e.g. 30s, 1m)"),
):
    """Creates a local Kubernetes cluster using Docker container 'nodes'."""
    wait_seconds = _parse_wait(wait)

    try:
        cfg = encoding.load(config)
    except KindctlError as e:
        logger.error(f"❌ error loading config: {e}")
        raise typer.Exit(code=1)

    errs = cfg.validate()
    if errs:
        logger.error("❌ Invalid configuration!")
        for problem in errs.to_list():
            logger.error(problem)
        logger.error("aborting due to invalid configuration")
        raise typer.Exit(code=1)

    if image:
        cfg = cfg.with_bootstrap_image(image)
        errs = cfg.validate()
        if errs:
            logger.error(f"❌ Invalid flags, configuration failed validation: {'; '.join(errs.to_list())}")
            logger.error("aborting due to invalid configuration")
            raise typer.Exit(code=1)

    try:
        Context(name).create(cfg, retain=retain, wait=wait_seconds)
    except KindctlError as e:
        logger.error(f"❌ failed to create cluster: {e}")
        raise typer.Exit(code=1)
