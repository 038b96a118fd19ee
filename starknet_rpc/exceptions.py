"""
Exceptions for the Starknet RPC client.
"""
from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """
    Closed set of domain error kinds reported to callers.

    Each member carries the JSON-RPC error code the node uses for it and
    the canonical message from the Starknet API specification.
    """
    BLOCK_NOT_FOUND = (24, "Block not found")
    INVALID_TXN_INDEX = (27, "Invalid transaction index in a block")
    HASH_NOT_FOUND = (29, "Transaction hash not found")
    INTERNAL_ERROR = (-32603, "Internal error")

    def __init__(self, code: int, message: str):
        self.code = code
        self.message = message


class StarknetRPCError(Exception):
    """Base exception for the Starknet RPC client."""
    pass


class JSONRPCError(StarknetRPCError):
    """
    Raised by an invoker when the node answers with a JSON-RPC error object.

    This is the raw protocol-level error; query operations never let it reach
    the caller without normalizing it into an RPCError first.
    """

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(f"JSON-RPC error {code}: {message}")

    def __reduce__(self):
        return type(self), (self.code, self.message, self.data)


class RPCError(StarknetRPCError):
    """
    A domain error returned by a query operation.

    Attributes:
        kind: The ErrorKind this error belongs to
        code: JSON-RPC code of the kind
        message: Canonical message of the kind
        data: Optional detail (string or node-supplied data)
        original_error: The underlying error, if this one wraps another
    """

    def __init__(
        self,
        kind: ErrorKind,
        data: Any = None,
        original_error: Optional[BaseException] = None
    ):
        self.kind = kind
        self.data = data
        self.original_error = original_error
        super().__init__(self._describe())

    def __reduce__(self):
        # args only hold the rendered message
        return type(self), (self.kind, self.data, self.original_error)

    @property
    def code(self) -> int:
        return self.kind.code

    @property
    def message(self) -> str:
        return self.kind.message

    def _describe(self) -> str:
        if self.data is None:
            return self.message
        return f"{self.message}: {self.data}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RPCError):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.message == other.message
            and self.data == other.data
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"RPCError(kind={self.kind.name}, data={self.data!r})"
