"""CLI: owl encode, owl decode, owl inspect"""

import json
from typing import Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from oneworkloc.encoder import decode_token, encode
from oneworkloc.errors import OneWorkLocError
from oneworkloc.models.envelope import new_metadata
from oneworkloc.token import parse_token

console = Console()
err_console = Console(stderr=True)


def _load_config() -> dict:
    from oneworkloc.cli.main import _load_config
    return _load_config()


def _fail(e: OneWorkLocError) -> None:
    err_console.print(f"[red]{type(e).__name__}:[/red] {e}")
    raise SystemExit(1)


@click.command("encode")
@click.argument("source", type=click.File("rb"), default="-")
@click.option("-t", "--type", "content_type", type=click.Choice(["text", "code", "json", "diagram"]),
              default="text", show_default=True)
@click.option("-l", "--language", default=None, help="Language of the code (required for --type code)")
@click.option("--version", "version", type=int, default=None, help="Format revision")
@click.option("--host", default=None, help="Host prefix for the token")
@click.option("--json-output", "--json", is_flag=True)
def encode_cmd(source, content_type: str, language: Optional[str], version: Optional[int],
               host: Optional[str], json_output: bool):
    """Encode FILE (default stdin) into a token."""
    cfg = _load_config()
    # Read bytes so line endings survive untouched.
    try:
        content = source.read().decode("utf-8")
    except UnicodeDecodeError as e:
        raise click.BadParameter(f"input is not valid UTF-8: {e}", param_hint="SOURCE")
    try:
        metadata = new_metadata(
            content_type, language=language, version=version if version is not None else cfg["version"]
        )
    except ValidationError as e:
        raise click.UsageError(e.errors(include_url=False)[0]["msg"])
    try:
        token = encode(content, metadata, host=host or cfg["host"])
    except OneWorkLocError as e:
        _fail(e)
    if json_output:
        click.echo(json.dumps({"token": token, "metadata": metadata.model_dump(exclude_none=True)}))
    else:
        click.echo(token)


@click.command("decode")
@click.argument("token")
@click.option("-o", "--output", type=click.File("wb"), default=None,
              help="Write content to a file instead of stdout")
@click.option("--json-output", "--json", is_flag=True)
def decode_cmd(token: str, output, json_output: bool):
    """Decode TOKEN back to its content."""
    try:
        result = decode_token(token)
    except OneWorkLocError as e:
        _fail(e)
    if json_output:
        click.echo(result.model_dump_json(exclude_none=True))
    elif output is not None:
        output.write(result.content.encode("utf-8"))
        meta = result.metadata
        console.print(f"[green]Wrote {len(result.content)} chars ({meta.type}, v{meta.version})[/green]")
    else:
        stdout = click.get_binary_stream("stdout")
        stdout.write(result.content.encode("utf-8"))
        stdout.flush()


@click.command("inspect")
@click.argument("token")
def inspect_cmd(token: str):
    """Show the segments of TOKEN and whether it decodes."""
    try:
        parts = parse_token(token)
    except OneWorkLocError as e:
        _fail(e)
    table = Table(title="Token")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Host", parts.host or "")
    table.add_row("Version", str(parts.version))
    table.add_row("Type", parts.type)
    table.add_row("Checksum", parts.checksum)
    table.add_row("Data length", str(len(parts.encoded_data)))
    try:
        result = decode_token(token)
        table.add_row("Status", "[green]ok[/green]")
        if result.metadata.language:
            table.add_row("Language", result.metadata.language)
        table.add_row("Timestamp", str(result.metadata.timestamp))
        table.add_row("Content length", str(len(result.content)))
    except OneWorkLocError as e:
        table.add_row("Status", f"[red]{e.code}[/red]: {e}")
    console.print(table)
