"""Plain-text rendering of RPC results for the CLI and MCP tools."""

from datetime import datetime

from mcp_notes_rpc.shared.models import Note, SystemInfo


def format_timestamp(epoch_seconds: int) -> str:
    """Render epoch seconds as local time."""
    return datetime.fromtimestamp(epoch_seconds).strftime("%Y-%m-%d %H:%M:%S")


def format_system_info(info: SystemInfo) -> str:
    return f"Application: {info.app_name} v{info.version}\nOS: {info.os} ({info.arch})"


def format_note(note: Note) -> str:
    """Format a single note with all of its fields.

    Args:
        note: The note to render

    Returns:
        Multi-line string with id, title, content and both timestamps
    """
    return "\n".join(
        [
            f"ID: {note.id}",
            f"Title: {note.title}",
            f"Content: {note.content}",
            f"Created: {format_timestamp(note.created_at)}",
            f"Updated: {format_timestamp(note.updated_at)}",
        ]
    )


def format_note_list(notes: list[Note], preview_length: int = 50) -> str:
    """Format notes as a compact listing.

    Args:
        notes: Notes in the order returned by the server
        preview_length: Maximum characters of content to show per note

    Returns:
        Formatted string, or a short message when there are no notes
    """
    if not notes:
        return "No notes found."

    entries = []
    for note in notes:
        preview = note.content[:preview_length]
        if len(note.content) > preview_length:
            preview += "..."
        entries.append(
            f"[{note.id}] {note.title}\n"
            f"Updated: {format_timestamp(note.updated_at)}\n"
            f"Preview: {preview}"
        )

    label = "note" if len(notes) == 1 else "notes"
    return f"{len(notes)} {label}:\n\n" + "\n\n".join(entries)


def format_not_found(id: str) -> str:
    return f"Note {id} not found."


def format_deleted(id: str, deleted: bool) -> str:
    return f"Note {id} deleted." if deleted else format_not_found(id)
