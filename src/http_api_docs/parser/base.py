"""Data models for documented RPC endpoints.

The schema loader converts its input into these models; the
formatters only ever read them.
"""

from enum import Enum

from pydantic import BaseModel


class ArgumentType(str, Enum):
    """Kinds of values an endpoint argument can carry."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT = "float"
    ARRAY = "array"
    FILE = "file"

    @property
    def is_file(self) -> bool:
        # File arguments travel in the multipart body, not the query string.
        return self is ArgumentType.FILE


class Argument(BaseModel):
    """A positional argument or a named option of an endpoint."""

    name: str
    type: ArgumentType
    description: str = ""
    default: str = ""
    required: bool = False
    endpoint: str = ""  # name of the owning endpoint


class Endpoint(BaseModel):
    """A single RPC endpoint with everything needed to document it."""

    name: str  # /api/v0/add
    description: str = ""
    arguments: list[Argument] = []
    options: list[Argument] = []
    response: str = ""
