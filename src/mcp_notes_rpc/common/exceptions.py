"""Exceptions raised by the notes RPC client."""


class NotesRpcError(Exception):
    """Base class for errors raised while talking to the RPC server."""


class RpcError(NotesRpcError):
    """Raised when the server answers with a JSON-RPC error object."""

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message
        super().__init__(f"RPC Error: {message}")


class HttpError(NotesRpcError):
    """Raised when the server answers with a non-2xx HTTP status."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"HTTP Error {status_code}: {reason}")


class NoResponseError(NotesRpcError):
    """Raised when the request was sent but no response arrived."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(
            f"No response from the server at {url}. Check that the server is running."
        )


class RequestSetupError(NotesRpcError):
    """Raised when the request could not be built or sent at all."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Request setup error: {message}")
