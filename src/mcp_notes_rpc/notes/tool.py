"""MCP tools for notes stored behind a JSON-RPC server."""

from mcp.server.fastmcp import FastMCP

from mcp_notes_rpc.cli.config import load_config
from mcp_notes_rpc.common.config import resolve_settings
from mcp_notes_rpc.common.formatter import (
    format_deleted,
    format_note,
    format_note_list,
    format_not_found,
    format_system_info,
)
from mcp_notes_rpc.rpc.api import NotesApi

mcp = FastMCP("Notes RPC")

# Global API instance - can be overridden with set_api()
_api: NotesApi | None = None


def set_api(api: NotesApi | None) -> None:
    """Set the global API instance (used by tests and embedding hosts)."""
    global _api
    _api = api


def get_api() -> NotesApi:
    """Get or create the API instance from the resolved settings."""
    global _api
    if _api is None:
        _api = NotesApi.from_settings(resolve_settings(load_config()))
    return _api


@mcp.tool(
    description="Gets the application name, version, operating system and CPU architecture of the notes server."
)
def system_info() -> str:
    """Get system information from the server."""
    return format_system_info(get_api().system_info())


@mcp.tool(
    description="Lists all notes with their id, title, last update time and a short content preview."
)
def list_notes() -> str:
    """List all notes."""
    return format_note_list(get_api().list_notes())


@mcp.tool(description="Gets the note with the given id, including its full content.")
def get_note(id: str) -> str:
    """Get a note by id.

    Args:
        id: The note id

    Returns:
        The formatted note, or a not-found message
    """
    note = get_api().get_note(id)
    if note is None:
        return format_not_found(id)
    return format_note(note)


@mcp.tool(
    description="Creates a new note. The server assigns the id and timestamps."
)
def create_note(title: str, content: str) -> str:
    """Create a note.

    Args:
        title: Title of the note
        content: Body text of the note

    Returns:
        The formatted note as stored by the server
    """
    note = get_api().create_note(title, content)
    return "Note created:\n" + format_note(note)


@mcp.tool(
    description="Updates a note. Only the fields that are given are changed; omit title or content to keep the current value."
)
def update_note(id: str, title: str | None = None, content: str | None = None) -> str:
    """Update a note.

    Args:
        id: The note id
        title: New title (optional)
        content: New content (optional)

    Returns:
        The formatted updated note, or a not-found message
    """
    note = get_api().update_note(id, title=title, content=content)
    if note is None:
        return format_not_found(id)
    return "Note updated:\n" + format_note(note)


@mcp.tool(description="Deletes the note with the given id.")
def delete_note(id: str) -> str:
    """Delete a note by id."""
    return format_deleted(id, get_api().delete_note(id))
