"""
Normalization of invoker failures into domain errors.
"""
import logging
from typing import Any, Optional

from .exceptions import ErrorKind, JSONRPCError, RPCError

logger = logging.getLogger(__name__)


def _numeric_code(code: Any) -> Optional[int]:
    # some nodes send the code as a decimal string
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, str):
        try:
            return int(code.strip())
        except ValueError:
            return None
    return None


def try_unwrap_rpc_error(err: BaseException, *candidates: ErrorKind) -> RPCError:
    """
    Map an invoker failure onto the domain error taxonomy.

    The candidate kinds are the failures the calling operation declares as
    legitimate for its RPC method. A node error whose code matches one of them
    becomes that kind; every other failure becomes an internal error that keeps
    the original for inspection.

    Args:
        err: Error raised by the invoker
        *candidates: Error kinds the calling operation expects

    Returns:
        The domain error to raise in place of ``err``
    """
    if isinstance(err, RPCError):
        return err

    if isinstance(err, JSONRPCError):
        code = _numeric_code(err.code)
        for kind in candidates:
            if code == kind.code:
                return RPCError(kind, data=err.data)
        logger.debug(f"Unexpected node error {err.code} ({err.message}), expected one of "
                     f"{[kind.name for kind in candidates]}")
        return RPCError(
            ErrorKind.INTERNAL_ERROR,
            data=f"node returned error {err.code}: {err.message}",
            original_error=err
        )

    return RPCError(ErrorKind.INTERNAL_ERROR, data=str(err), original_error=err)
