"""
Starknet JSON-RPC client: typed transaction, receipt and status queries.
"""
from .client import Provider
from .config import NetworkConfig
from .exceptions import ErrorKind, JSONRPCError, RPCError, StarknetRPCError
from .felt import FIELD_PRIME, Felt, felt_to_hex, to_felt
from .models import (
    BlockID,
    BlockTag,
    DetailedTransactionReceipt,
    TransactionReceipt,
    TransactionReceiptWithBlockInfo,
    TxnStatusResp,
)
from .normalize import try_unwrap_rpc_error
from .stub_invoker import StubInvoker
from .transactions import (
    TXN,
    DeclareTxnV0,
    DeclareTxnV1,
    DeclareTxnV2,
    DeployAccountTxn,
    DeployTxn,
    InvokeTxnV0,
    InvokeTxnV1,
    InvokeTxnV3,
    L1HandlerTxn,
    Transaction,
    TransactionType,
    adapt_transaction,
)
from .transport import HTTPInvoker, Invoker, get_invoker
from .version import __version__

__all__ = [
    "Provider",
    "NetworkConfig",
    "ErrorKind",
    "JSONRPCError",
    "RPCError",
    "StarknetRPCError",
    "FIELD_PRIME",
    "Felt",
    "felt_to_hex",
    "to_felt",
    "BlockID",
    "BlockTag",
    "DetailedTransactionReceipt",
    "TransactionReceipt",
    "TransactionReceiptWithBlockInfo",
    "TxnStatusResp",
    "try_unwrap_rpc_error",
    "StubInvoker",
    "TXN",
    "DeclareTxnV0",
    "DeclareTxnV1",
    "DeclareTxnV2",
    "DeployAccountTxn",
    "DeployTxn",
    "InvokeTxnV0",
    "InvokeTxnV1",
    "InvokeTxnV3",
    "L1HandlerTxn",
    "Transaction",
    "TransactionType",
    "adapt_transaction",
    "HTTPInvoker",
    "Invoker",
    "get_invoker",
    "__version__",
]
