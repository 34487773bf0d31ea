import json

import httpx
import pytest

from mcp_notes_rpc.rpc.api import NotesApi
from mcp_notes_rpc.rpc.transport import JsonRpcTransport

TEST_URL = "http://notes.test:3030"


class FakeNotesServer:
    """In-memory JSON-RPC notes server served through httpx.MockTransport."""

    def __init__(self):
        self.notes: dict[str, dict] = {}
        self.requests: list[dict] = []
        self.clock = 1_700_000_000
        self._next_id = 1

    def handle(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append(payload)

        handler = getattr(self, f"_{payload['method']}", None)
        if handler is None:
            body = {
                "jsonrpc": "2.0",
                "error": {"code": -32601, "message": "Method not found"},
                "id": payload["id"],
            }
        else:
            body = {
                "jsonrpc": "2.0",
                "result": handler(**payload.get("params", {})),
                "id": payload["id"],
            }
        return httpx.Response(200, json=body)

    def _system_info(self):
        return {"app_name": "notes-app", "version": "1.2.0", "os": "linux", "arch": "x86_64"}

    def _echo(self, message):
        return message

    def _notes_list(self):
        return sorted(self.notes.values(), key=lambda n: n["updated_at"], reverse=True)

    def _notes_get(self, id):
        return self.notes.get(id)

    def _notes_create(self, title, content):
        self.clock += 1
        note = {
            "id": f"note-{self._next_id}",
            "title": title,
            "content": content,
            "created_at": self.clock,
            "updated_at": self.clock,
        }
        self._next_id += 1
        self.notes[note["id"]] = note
        return note

    def _notes_update(self, id, title=None, content=None):
        note = self.notes.get(id)
        if note is None:
            return None
        self.clock += 1
        if title is not None:
            note["title"] = title
        if content is not None:
            note["content"] = content
        note["updated_at"] = self.clock
        return note

    def _notes_delete(self, id):
        return self.notes.pop(id, None) is not None


def make_transport(handler, url: str = TEST_URL) -> JsonRpcTransport:
    """Build a transport whose HTTP layer is served by ``handler``."""
    return JsonRpcTransport(url, transport=httpx.MockTransport(handler))


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user config files, .env and NOTES_RPC_* variables out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for var in ("NOTES_RPC_URL", "NOTES_RPC_TIMEOUT", "NOTES_RPC_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def notes_server():
    return FakeNotesServer()


@pytest.fixture
def api(notes_server):
    return NotesApi(make_transport(notes_server.handle))


@pytest.fixture
def failing_api():
    """API whose server always answers HTTP 500."""
    return NotesApi(make_transport(lambda request: httpx.Response(500)))


@pytest.fixture
def transport_for():
    """Factory fixture: ``transport_for(handler)`` returns a mocked transport."""
    return make_transport
