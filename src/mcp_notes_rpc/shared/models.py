from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request envelope."""

    jsonrpc: Literal["2.0"] = Field(
        default="2.0", description="Protocol version, always '2.0'."
    )
    method: str = Field(..., description="The remote method to invoke.")
    params: dict[str, Any] = Field(
        default_factory=dict, description="Named parameters passed to the method."
    )
    id: int | str = Field(..., description="Identifier echoed back by the server.")


class JsonRpcErrorObject(BaseModel):
    """Application-level error reported by the server."""

    code: int = Field(..., description="Numeric error code.")
    message: str = Field(..., description="Human-readable error description.")
    data: Any = Field(default=None, description="Optional extra error details.")


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response envelope.

    A response carrying neither ``result`` nor ``error`` is an empty success.
    """

    model_config = ConfigDict(extra="ignore")

    jsonrpc: str = Field(default="2.0", description="Protocol version.")
    result: Any = Field(default=None, description="Method result on success.")
    error: JsonRpcErrorObject | None = Field(
        default=None, description="Error details when the call failed."
    )
    id: int | str | None = Field(
        default=None, description="Identifier of the originating request."
    )


class Note(BaseModel):
    """A note record owned by the remote server."""

    id: str = Field(..., description="Server-assigned note identifier.")
    title: str = Field(..., description="The note title.")
    content: str = Field(..., description="The note body text.")
    created_at: int = Field(..., description="Creation time in epoch seconds.")
    updated_at: int = Field(..., description="Last update time in epoch seconds.")


class SystemInfo(BaseModel):
    """Metadata about the application behind the RPC endpoint."""

    app_name: str = Field(..., description="The application name.")
    version: str = Field(..., description="The application version.")
    os: str = Field(..., description="Operating system the server runs on.")
    arch: str = Field(..., description="CPU architecture of the server host.")
