import typer

from kindctl.cluster.config import encoding
from kindctl.util.errors import KindctlError

app = typer.Typer()


@app.command("cluster")
def validate_cluster(config: str = typer.Option(..., help="Path to a kind config file")):
    """Validate a cluster config file without creating anything."""
    typer.echo(f"🔍 Validating cluster config: {config}")
    try:
        cfg = encoding.load(config)
    except KindctlError as e:
        typer.echo(f"❌ error loading config: {e}", err=True)
        raise typer.Exit(code=1)

    errs = cfg.validate()
    if errs:
        typer.echo("❌ Invalid configuration!", err=True)
        for problem in errs.to_list():
            typer.echo(f"  {problem}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✅ Configuration is valid ({len(cfg.nodes)} node(s))")
