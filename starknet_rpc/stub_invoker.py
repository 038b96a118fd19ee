"""
Stub invoker for the Starknet RPC client.

This module provides an in-memory invoker that answers from canned
responses. It is used by the test suite and the examples, and is handy for
exercising code that talks to a node without running one.
"""
import copy
import logging
import threading
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import JSONRPCError
from .transport import Invoker, Params

# Configure logger
logger = logging.getLogger(__name__)


class StubInvoker(Invoker):
    """
    An invoker that replies with registered results or errors.

    Responses are keyed by method name. A response registered for a method
    is returned for every call to it. Results are deep-copied on the way out
    so callers never share state with the stub or with each other.
    """

    def __init__(self):
        """Initialize the stub invoker."""
        self._responses: Dict[str, Tuple[str, Any]] = {}
        self._lock = threading.Lock()
        self.calls: List[Tuple[str, Params, Optional[float]]] = []

    def add_result(self, method: str, result: Any) -> None:
        """Answer ``method`` with ``result``."""
        self._responses[method] = ("result", result)

    def add_error(self, method: str, code: int, message: str, data: Any = None) -> None:
        """Answer ``method`` with a JSON-RPC error object."""
        self._responses[method] = ("error", JSONRPCError(code, message, data))

    def add_exception(self, method: str, exc: BaseException) -> None:
        """Raise ``exc`` for ``method``, as a failing transport would."""
        self._responses[method] = ("raise", exc)

    def call(self, method: str, params: Params, timeout: Optional[float] = None) -> Any:
        with self._lock:
            self.calls.append((method, copy.deepcopy(params), timeout))
        logger.debug(f"Stub call {method} with params {params}")

        if method not in self._responses:
            raise JSONRPCError(-32601, "Method not found", method)

        kind, value = self._responses[method]
        if kind == "result":
            return copy.deepcopy(value)
        if kind == "error":
            raise JSONRPCError(value.code, value.message, value.data)
        raise value
