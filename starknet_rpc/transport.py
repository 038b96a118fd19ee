"""
Transport layer for the Starknet RPC client.

This module provides the invoker abstraction the query operations are built
on: given a method name and its parameters, perform one JSON-RPC round trip
and return the decoded ``result``. The HTTP implementation uses requests;
the in-memory StubInvoker lives in ``stub_invoker``.
"""
import itertools
import logging
import threading
import urllib.parse
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

import requests

from .exceptions import JSONRPCError

# Configure logger
logger = logging.getLogger(__name__)

Params = Union[List[Any], Dict[str, Any]]


class Invoker(ABC):
    """
    Abstract base class for JSON-RPC invokers.

    Implementations must raise JSONRPCError when the node answers with an
    error object. Any other failure (network, malformed body) is raised as is
    and left to the caller to classify.
    """

    @abstractmethod
    def call(self, method: str, params: Params, timeout: Optional[float] = None) -> Any:
        """
        Invoke a remote method.

        Args:
            method: JSON-RPC method name
            params: Positional (list) or named (dict) parameters
            timeout: Per-call timeout in seconds, overriding the invoker default

        Returns:
            The decoded ``result`` member of the response

        Raises:
            JSONRPCError: If the node returned a JSON-RPC error object
        """
        pass

    def close(self) -> None:
        """Close any open connections or resources."""
        pass


def validate_rpc_url(rpc_url: str) -> str:
    """
    Check that an RPC URL uses https, unless it points at the local machine.

    Raises:
        ValueError: If the URL is not https and not localhost/127.0.0.1
    """
    parsed = urllib.parse.urlparse(rpc_url)
    host = parsed.hostname or ''
    is_local = host in ('localhost', '127.0.0.1')
    if parsed.scheme != 'https' and not (is_local and parsed.scheme == 'http'):
        raise ValueError(f"rpc_url must use https:// for security (got: {parsed.scheme}://)")
    return rpc_url


class HTTPInvoker(Invoker):
    """
    JSON-RPC 2.0 over HTTP POST.

    One request per call, no retries. The request id counter is shared by all
    threads using this invoker.
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = 30,
        session: Optional[requests.Session] = None
    ):
        self.rpc_url = validate_rpc_url(rpc_url)
        self.timeout = timeout
        self.session = session or requests.Session()
        self._ids = itertools.count(1)
        self._id_lock = threading.Lock()

    def _next_id(self) -> int:
        with self._id_lock:
            return next(self._ids)

    def call(self, method: str, params: Params, timeout: Optional[float] = None) -> Any:
        request_id = self._next_id()
        payload = {
            "jsonrpc": "2.0",
            "method": method,
            "params": params,
            "id": request_id,
        }
        logger.debug(f"RPC request {request_id}: {method}")

        response = self.session.post(
            self.rpc_url,
            json=payload,
            timeout=timeout if timeout is not None else self.timeout
        )
        content_type = response.headers.get('Content-Type', '')
        if 'application/json' not in content_type:
            logger.warning(f"Unexpected Content-Type: {content_type} (expected application/json)")

        if not response.ok:
            # Some nodes pair a JSON-RPC error object with a 4xx/5xx status
            try:
                data = response.json()
            except ValueError:
                data = None
            if not (isinstance(data, dict) and isinstance(data.get("error"), dict)):
                response.raise_for_status()
        else:
            data = response.json()

        if not isinstance(data, dict):
            raise ValueError(f"Invalid JSON-RPC response: {data!r}")
        if data.get("id") != request_id:
            logger.warning(f"Response id {data.get('id')!r} does not match request id {request_id}")

        error = data.get("error")
        if error is not None:
            if not isinstance(error, dict) or "code" not in error:
                raise ValueError(f"Invalid JSON-RPC error object: {error!r}")
            raise JSONRPCError(error["code"], error.get("message", ""), error.get("data"))

        if "result" not in data:
            raise ValueError(f"JSON-RPC response has neither result nor error: {data!r}")
        return data["result"]

    def close(self) -> None:
        self.session.close()


def get_invoker(rpc_url: str, timeout: float = 30) -> Invoker:
    """
    Get the default invoker for an RPC URL.

    Returns:
        An HTTPInvoker bound to ``rpc_url``
    """
    logger.info(f"Using HTTP invoker for {rpc_url}")
    return HTTPInvoker(rpc_url, timeout=timeout)
