"""Main CLI implementation using Click framework."""
import json
import logging
from typing import Any

import click
from pydantic import BaseModel

from mcp_notes_rpc.common.config import resolve_settings
from mcp_notes_rpc.common.exceptions import NotesRpcError
from mcp_notes_rpc.common.formatter import (
    format_deleted,
    format_note,
    format_note_list,
    format_not_found,
    format_system_info,
)
from mcp_notes_rpc.rpc.api import NotesApi

from .config import create_default_config, get_config_file, load_config

logger = logging.getLogger(__name__)


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump()
    if isinstance(value, list):
        return [_to_jsonable(item) for item in value]
    return value


def _get_api(ctx: click.Context) -> NotesApi:
    return NotesApi.from_settings(ctx.obj["settings"])


def _call(ctx: click.Context, operation, *args, **kwargs):
    """Run a domain operation, turning any failure into an error message and exit 1."""
    try:
        return operation(*args, **kwargs)
    except NotesRpcError as e:
        click.echo(f"Error: {e}", err=True)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        click.echo(f"Error: {type(e).__name__}: {e}", err=True)
    ctx.exit(1)


def _emit(ctx: click.Context, value: Any, text: str) -> None:
    if ctx.obj["json_output"]:
        click.echo(json.dumps(_to_jsonable(value), indent=2))
    else:
        click.echo(text)


@click.group(invoke_without_command=True)
@click.option("--url", help="Base URL of the JSON-RPC server")
@click.option(
    "--timeout", type=click.FloatRange(min=0, min_open=True), help="Seconds to wait for a response"
)
@click.option("--json-output", is_flag=True, help="Output in JSON format")
@click.option("--verbose", "-v", is_flag=True, help="Log RPC traffic to stderr")
@click.option("--config", help="Show configuration file location", is_flag=True)
@click.option("--init-config", help="Create default configuration file", is_flag=True)
@click.pass_context
def cli(ctx, url, timeout, json_output, verbose, config, init_config):
    """notes-rpc - Command-line client for the notes JSON-RPC server.

    \b
    EXAMPLES
        notes-rpc system-info
        notes-rpc notes list
        notes-rpc notes create "Groceries" "milk, eggs"
        notes-rpc notes update <id> "New title"
        notes-rpc --url http://127.0.0.1:4000 notes get <id>
    """
    if config:
        click.echo(f"Configuration file: {get_config_file()}")
        ctx.exit()

    if init_config:
        create_default_config()
        ctx.exit()

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()

    try:
        settings = resolve_settings(load_config(), url=url, timeout=timeout)
    except Exception as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        ctx.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"settings": settings, "json_output": json_output}


@cli.command("system-info")
@click.pass_context
def system_info(ctx):
    """Show application and host information."""
    info = _call(ctx, _get_api(ctx).system_info)
    _emit(ctx, info, format_system_info(info))


@cli.command("echo")
@click.argument("text")
@click.pass_context
def echo(ctx, text):
    """Ask the server to echo TEXT back."""
    result = _call(ctx, _get_api(ctx).echo, text)
    _emit(
        ctx,
        result,
        json.dumps(result, indent=2) if isinstance(result, dict | list) else str(result),
    )


@cli.group("notes")
def notes():
    """Manage notes."""


@notes.command("list")
@click.pass_context
def list_notes(ctx):
    """List all notes."""
    items = _call(ctx, _get_api(ctx).list_notes)
    _emit(ctx, items, format_note_list(items))


@notes.command("get")
@click.argument("id")
@click.pass_context
def get_note(ctx, id):
    """Show the note with the given ID."""
    note = _call(ctx, _get_api(ctx).get_note, id)
    _emit(ctx, note, format_not_found(id) if note is None else format_note(note))


@notes.command("create")
@click.argument("title")
@click.argument("content")
@click.pass_context
def create_note(ctx, title, content):
    """Create a note with TITLE and CONTENT."""
    note = _call(ctx, _get_api(ctx).create_note, title, content)
    _emit(ctx, note, "Note created:\n" + format_note(note))


@notes.command("update")
@click.argument("id")
@click.argument("title", required=False)
@click.argument("content", required=False)
@click.pass_context
def update_note(ctx, id, title, content):
    """Update a note. Omitted TITLE or CONTENT are left unchanged."""
    note = _call(ctx, _get_api(ctx).update_note, id, title=title, content=content)
    if note is None:
        _emit(ctx, None, format_not_found(id))
    else:
        _emit(ctx, note, "Note updated:\n" + format_note(note))


@notes.command("delete")
@click.argument("id")
@click.pass_context
def delete_note(ctx, id):
    """Delete the note with the given ID."""
    deleted = _call(ctx, _get_api(ctx).delete_note, id)
    _emit(ctx, deleted, format_deleted(id, deleted))


if __name__ == "__main__":
    cli()
