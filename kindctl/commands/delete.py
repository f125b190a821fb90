import subprocess

import typer

from kindctl.cluster.context import Context

app = typer.Typer()


@app.command("cluster")
def delete_cluster_cmd(
    name: str = typer.Option("1", help="Cluster context name"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
):
    """Delete every node container of a cluster."""
    if not yes:
        confirm = typer.confirm(f"Are you sure you want to delete cluster '{name}'?", default=False)
        if not confirm:
            typer.echo("❌ Deletion cancelled.")
            raise typer.Exit()

    try:
        removed = Context(name).delete()
    except (subprocess.CalledProcessError, OSError) as e:
        typer.echo(f"❌ Could not delete nodes of cluster '{name}': {e}", err=True)
        raise typer.Exit(code=1)

    if not removed:
        typer.echo(f"🔍 No nodes found for cluster '{name}'.")
    else:
        typer.echo(f"✅ Deleted {len(removed)} node(s).")
