"""
Data models for the Starknet RPC client.

Receipts and statuses are decoded structurally, straight from the node's
JSON. Transaction bodies need tag dispatch and live in ``transactions``.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from .felt import Felt, felt_to_hex, to_felt


class BlockTag(str, Enum):
    LATEST = "latest"
    PENDING = "pending"


@dataclass(frozen=True)
class BlockID:
    """
    Identifies a block by hash, by number or by tag.

    Exactly one of the three forms must be set. Use the ``from_hash``,
    ``from_number``, ``latest`` and ``pending`` constructors.
    """
    hash: Optional[int] = None
    number: Optional[int] = None
    tag: Optional[BlockTag] = None

    def __post_init__(self):
        given = [f for f in (self.hash, self.number, self.tag) if f is not None]
        if len(given) != 1:
            raise ValueError("BlockID needs exactly one of hash, number or tag")
        if self.number is not None and self.number < 0:
            raise ValueError(f"Block number must be non-negative, got {self.number}")

    @classmethod
    def from_hash(cls, block_hash: Union[str, int]) -> "BlockID":
        return cls(hash=to_felt(block_hash))

    @classmethod
    def from_number(cls, number: int) -> "BlockID":
        return cls(number=number)

    @classmethod
    def latest(cls) -> "BlockID":
        return cls(tag=BlockTag.LATEST)

    @classmethod
    def pending(cls) -> "BlockID":
        return cls(tag=BlockTag.PENDING)

    def to_rpc(self) -> Union[str, Dict[str, Any]]:
        """Render the identifier as a JSON-RPC parameter."""
        if self.hash is not None:
            return {"block_hash": felt_to_hex(self.hash)}
        if self.number is not None:
            return {"block_number": self.number}
        return self.tag.value


class PriceUnit(str, Enum):
    WEI = "WEI"
    FRI = "FRI"


class ExecutionStatus(str, Enum):
    SUCCEEDED = "SUCCEEDED"
    REVERTED = "REVERTED"


class FinalityStatus(str, Enum):
    ACCEPTED_ON_L2 = "ACCEPTED_ON_L2"
    ACCEPTED_ON_L1 = "ACCEPTED_ON_L1"


class TxnStatus(str, Enum):
    RECEIVED = "RECEIVED"
    REJECTED = "REJECTED"
    ACCEPTED_ON_L2 = "ACCEPTED_ON_L2"
    ACCEPTED_ON_L1 = "ACCEPTED_ON_L1"


class WireModel(BaseModel):
    """Immutable base for decoded wire records; unknown fields are dropped."""
    model_config = ConfigDict(frozen=True, extra="ignore")


class FeePayment(WireModel):
    amount: Felt
    unit: PriceUnit


class MsgToL1(WireModel):
    from_address: Optional[Felt] = None
    to_address: Felt
    payload: List[Felt]


class Event(WireModel):
    from_address: Felt
    keys: List[Felt]
    data: List[Felt]


class DataAvailability(WireModel):
    l1_gas: int
    l1_data_gas: int


class ExecutionResources(WireModel):
    steps: int
    memory_holes: Optional[int] = None
    range_check_builtin_applications: Optional[int] = None
    pedersen_builtin_applications: Optional[int] = None
    poseidon_builtin_applications: Optional[int] = None
    ec_op_builtin_applications: Optional[int] = None
    ecdsa_builtin_applications: Optional[int] = None
    bitwise_builtin_applications: Optional[int] = None
    keccak_builtin_applications: Optional[int] = None
    segment_arena_builtin: Optional[int] = None
    data_availability: Optional[DataAvailability] = None


class TransactionReceipt(WireModel):
    """Receipt common to every transaction type."""
    transaction_hash: Felt
    type: str
    actual_fee: FeePayment
    execution_status: ExecutionStatus
    finality_status: FinalityStatus
    messages_sent: List[MsgToL1]
    events: List[Event]
    execution_resources: ExecutionResources
    revert_reason: Optional[str] = None
    # DEPLOY and DEPLOY_ACCOUNT only
    contract_address: Optional[Felt] = None
    # L1_HANDLER only
    message_hash: Optional[str] = None


class TransactionReceiptWithBlockInfo(TransactionReceipt):
    """Receipt as returned by starknet_getTransactionReceipt; block fields are absent while pending."""
    block_hash: Optional[Felt] = None
    block_number: Optional[int] = None

    @property
    def is_pending(self) -> bool:
        return self.block_hash is None


class DetailedFee(WireModel):
    amount: str
    unit: str


class DetailedEvent(WireModel):
    data: List[str]
    from_address: str
    keys: List[str]


class DetailedDataAvailability(WireModel):
    l1_data_gas: int
    l1_gas: int


class DetailedExecutionResources(WireModel):
    data_availability: DetailedDataAvailability
    ec_op_builtin_applications: int = 0
    pedersen_builtin_applications: int = 0
    range_check_builtin_applications: int = 0
    steps: int


class DetailedTransactionReceipt(WireModel):
    """
    Flattened, plain-typed receipt shape.

    Decoded from the same starknet_getTransactionReceipt result as
    TransactionReceiptWithBlockInfo, but keeps hashes as the node's strings
    and resource counters as plain integers.
    """
    actual_fee: DetailedFee
    block_hash: Optional[str] = None
    block_number: Optional[int] = None
    events: List[DetailedEvent]
    execution_resources: DetailedExecutionResources
    execution_status: str
    finality_status: str
    messages_sent: List[Any]
    transaction_hash: str
    type: str

    @property
    def is_pending(self) -> bool:
        return self.block_hash is None


class TxnStatusResp(WireModel):
    """Transaction status, possibly still in the mempool or dropped from it."""
    finality_status: TxnStatus
    execution_status: Optional[ExecutionStatus] = None
    failure_reason: Optional[str] = None
