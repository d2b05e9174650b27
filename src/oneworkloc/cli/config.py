"""CLI: owl config show|set"""

import click
from rich.console import Console

console = Console()


def _load_config() -> dict:
    from oneworkloc.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from oneworkloc.cli.main import _save_config
    _save_config(cfg)


@click.group()
def config():
    """Saved defaults."""


@config.command("show")
def config_show():
    """Show current defaults."""
    for key, value in _load_config().items():
        console.print(f"[bold]{key}[/bold] = {value}")


@config.command("set")
@click.argument("key", type=click.Choice(["host", "version"]))
@click.argument("value")
def config_set(key: str, value: str):
    """Set a default (host or version)."""
    cfg = _load_config()
    if key == "version":
        if not value.isdigit() or int(value) < 1:
            raise click.BadParameter("version must be a positive integer", param_hint="VALUE")
        cfg[key] = int(value)
    else:
        cfg[key] = value.rstrip("/")
    _save_config(cfg)
    console.print(f"[green]{key} set to {cfg[key]}[/green]")
