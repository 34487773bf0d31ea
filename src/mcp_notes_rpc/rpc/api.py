"""Typed wrappers for the notes server's RPC methods."""

from typing import Any

from mcp_notes_rpc.common.config import Settings
from mcp_notes_rpc.rpc.transport import JsonRpcTransport
from mcp_notes_rpc.shared.models import Note, SystemInfo


class NotesApi:
    """One method per RPC call; errors from the transport propagate unchanged."""

    def __init__(self, transport: JsonRpcTransport):
        self.transport = transport

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "NotesApi":
        """Create an API bound to the endpoint described by ``settings``."""
        if settings is None:
            settings = Settings()
        return cls(JsonRpcTransport(settings.url, timeout=settings.timeout))

    def system_info(self) -> SystemInfo:
        return SystemInfo.model_validate(self.transport.send("system_info"))

    def echo(self, text: str) -> Any:
        """Ask the server to echo ``text`` back."""
        return self.transport.send("echo", {"message": text})

    def list_notes(self) -> list[Note]:
        """List all notes in server order. An absent result is an empty list."""
        result = self.transport.send("notes_list")
        return [Note.model_validate(item) for item in result or []]

    def get_note(self, id: str) -> Note | None:
        """Fetch one note, or ``None`` if the server has no such id."""
        result = self.transport.send("notes_get", {"id": id})
        return Note.model_validate(result) if result else None

    def create_note(self, title: str, content: str) -> Note:
        result = self.transport.send(
            "notes_create", {"title": title, "content": content}
        )
        return Note.model_validate(result)

    def update_note(
        self, id: str, title: str | None = None, content: str | None = None
    ) -> Note | None:
        """Update a note. Only the fields given here are sent to the server."""
        params: dict[str, Any] = {"id": id}
        if title is not None:
            params["title"] = title
        if content is not None:
            params["content"] = content

        result = self.transport.send("notes_update", params)
        return Note.model_validate(result) if result else None

    def delete_note(self, id: str) -> bool:
        """Delete a note. Returns False when nothing matched ``id``."""
        return bool(self.transport.send("notes_delete", {"id": id}))
