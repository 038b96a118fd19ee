"""
Provider - typed query operations against a Starknet JSON-RPC node.
"""
import logging
from typing import Any, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .config import NetworkConfig
from .exceptions import ErrorKind, RPCError
from .felt import felt_to_hex, to_felt
from .models import (
    BlockID,
    DetailedTransactionReceipt,
    TransactionReceiptWithBlockInfo,
    TxnStatusResp,
)
from .normalize import try_unwrap_rpc_error
from .transactions import TXN, Transaction, adapt_transaction
from .transport import Invoker, get_invoker

# Type variable for improved type hinting
M = TypeVar('M', bound=BaseModel)

FeltLike = Union[str, int]


class Provider:
    """
    Client for querying transactions, receipts and statuses.

    Each query is a single round trip through the invoker. A failure is
    normalized into an RPCError whose kind is one of the failures the query
    declares for its RPC method, or INTERNAL_ERROR otherwise. No query
    retries or caches.

    To build a provider, pass one of:
    - ``rpc_url``: a node endpoint
    - ``network``: a name from NetworkConfig (e.g. "mainnet", "sepolia")
    - ``invoker``: any Invoker implementation
    """

    def __init__(
        self,
        rpc_url: Optional[str] = None,
        network: Optional[str] = None,
        invoker: Optional[Invoker] = None,
        timeout: float = 30,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the Provider

        Args:
            rpc_url: Starknet JSON-RPC endpoint URL
            network: Named network to resolve the endpoint from
            invoker: Invoker to use instead of building an HTTP one
            timeout: Default request timeout in seconds
            logger: Optional logger instance to use for debug/info logging

        Raises:
            ValueError: If none of rpc_url, network or invoker is provided
            ValueError: If the URL doesn't use https (unless it's localhost/127.0.0.1)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.timeout = timeout

        if invoker is not None:
            self.invoker = invoker
            self.rpc_url = rpc_url
        else:
            if rpc_url is None and network is None:
                raise ValueError("One of rpc_url, network or invoker must be provided")
            if rpc_url is None:
                rpc_url = NetworkConfig.get_rpc_url(network)
            self.rpc_url = rpc_url
            self.invoker = get_invoker(rpc_url, timeout=timeout)

    def _do(
        self,
        method: str,
        params: List[Any],
        candidates: List[ErrorKind],
        timeout: Optional[float]
    ) -> Any:
        self.logger.debug(f"Calling {method} with params {params}")
        try:
            return self.invoker.call(method, params, timeout=timeout)
        except Exception as e:
            err = try_unwrap_rpc_error(e, *candidates)
            self.logger.warning(f"{method} failed: {err}")
            if err is e:
                raise
            raise err from e

    def _decode(self, model: Type[M], result: Any) -> M:
        try:
            return model.model_validate(result)
        except ValidationError as e:
            self.logger.error(f"Malformed {model.__name__} from node: {e}")
            raise RPCError(
                ErrorKind.INTERNAL_ERROR,
                data=f"malformed {model.__name__}: {e}",
                original_error=e
            ) from e

    def _adapt(self, result: Any) -> Transaction:
        return adapt_transaction(self._decode(TXN, result))

    def transaction_by_hash(
        self,
        transaction_hash: FeltLike,
        timeout: Optional[float] = None
    ) -> Transaction:
        """
        Retrieve a transaction by its hash.

        Args:
            transaction_hash: Hash of the transaction (hex string or int)
            timeout: Optional per-call timeout in seconds

        Returns:
            The concrete Transaction variant

        Raises:
            RPCError: HASH_NOT_FOUND, or INTERNAL_ERROR for anything else
        """
        result = self._do(
            "starknet_getTransactionByHash",
            [felt_to_hex(to_felt(transaction_hash))],
            [ErrorKind.HASH_NOT_FOUND],
            timeout
        )
        return self._adapt(result)

    def transaction_by_block_id_and_index(
        self,
        block_id: BlockID,
        index: int,
        timeout: Optional[float] = None
    ) -> Transaction:
        """
        Retrieve a transaction by its position in a block.

        Args:
            block_id: The block containing the transaction
            index: Index of the transaction within the block
            timeout: Optional per-call timeout in seconds

        Returns:
            The concrete Transaction variant

        Raises:
            RPCError: INVALID_TXN_INDEX, BLOCK_NOT_FOUND, or INTERNAL_ERROR
            ValueError: If index is negative
        """
        if index < 0:
            raise ValueError(f"Transaction index must be non-negative, got {index}")
        result = self._do(
            "starknet_getTransactionByBlockIdAndIndex",
            [block_id.to_rpc(), index],
            [ErrorKind.INVALID_TXN_INDEX, ErrorKind.BLOCK_NOT_FOUND],
            timeout
        )
        return self._adapt(result)

    def transaction_receipt(
        self,
        transaction_hash: FeltLike,
        timeout: Optional[float] = None
    ) -> TransactionReceiptWithBlockInfo:
        """
        Fetch the receipt of a transaction.

        Raises:
            RPCError: HASH_NOT_FOUND, or INTERNAL_ERROR for anything else
        """
        result = self._do(
            "starknet_getTransactionReceipt",
            [felt_to_hex(to_felt(transaction_hash))],
            [ErrorKind.HASH_NOT_FOUND],
            timeout
        )
        return self._decode(TransactionReceiptWithBlockInfo, result)

    def transaction_receipt_detailed(
        self,
        transaction_hash: FeltLike,
        timeout: Optional[float] = None
    ) -> DetailedTransactionReceipt:
        """Fetch the receipt of a transaction in its flattened, plain-typed shape."""
        result = self._do(
            "starknet_getTransactionReceipt",
            [felt_to_hex(to_felt(transaction_hash))],
            [ErrorKind.HASH_NOT_FOUND],
            timeout
        )
        return self._decode(DetailedTransactionReceipt, result)

    def transaction_status(
        self,
        transaction_hash: FeltLike,
        timeout: Optional[float] = None
    ) -> TxnStatusResp:
        """
        Get the status of a transaction, which may still be in the mempool or
        have been dropped from it.

        Raises:
            RPCError: HASH_NOT_FOUND, or INTERNAL_ERROR for anything else
        """
        result = self._do(
            "starknet_getTransactionStatus",
            [felt_to_hex(to_felt(transaction_hash))],
            [ErrorKind.HASH_NOT_FOUND],
            timeout
        )
        return self._decode(TxnStatusResp, result)

    def close(self) -> None:
        """Release the invoker's resources."""
        self.invoker.close()
