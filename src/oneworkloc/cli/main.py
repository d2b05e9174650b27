"""
OneWorkLoc CLI — `owl` command.

Commands:
  owl encode [FILE]        Pack a file (or stdin) into a token
  owl decode <token>       Restore content from a token
  owl inspect <token>      Show the parts of a token and check it
  owl config <cmd>         Show or change saved defaults
"""

import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install oneworkloc[cli]")

from oneworkloc.models.envelope import CURRENT_VERSION
from oneworkloc.token import DEFAULT_HOST

console = Console()
CONFIG_FILE = Path.home() / ".oneworkloc" / "config.json"
DEFAULTS = {"host": DEFAULT_HOST, "version": CURRENT_VERSION}


def _load_config() -> dict:
    try:
        saved = json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return dict(DEFAULTS)
    if not isinstance(saved, dict):
        return dict(DEFAULTS)
    return {**DEFAULTS, **saved}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log codec details to stderr")
def main(verbose: bool):
    """OneWorkLoc CLI — share workstates as self-contained tokens."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from oneworkloc.cli.codec import encode_cmd, decode_cmd, inspect_cmd
from oneworkloc.cli.config import config

main.add_command(encode_cmd)
main.add_command(decode_cmd)
main.add_command(inspect_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
