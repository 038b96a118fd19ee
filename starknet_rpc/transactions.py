"""
Transaction envelope, concrete transaction variants and the decoder that
adapts one into the other.

A node returns every transaction in a single untyped shape, the TXN
envelope. The pair (type, version) selects exactly one concrete variant.
The envelope is re-encoded to canonical JSON and validated again against
the variant's own schema, so a body that does not carry every field its
declared tag requires is rejected as a whole.
"""
import logging
from enum import Enum
from typing import Annotated, ClassVar, Dict, List, Optional, Tuple, Type, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .exceptions import ErrorKind, RPCError
from .felt import U64, U128, Felt, felt_to_hex

logger = logging.getLogger(__name__)


class TransactionType(str, Enum):
    """Starknet transaction types as represented in JSON payloads."""
    INVOKE = "INVOKE"
    DECLARE = "DECLARE"
    DEPLOY = "DEPLOY"
    DEPLOY_ACCOUNT = "DEPLOY_ACCOUNT"
    L1_HANDLER = "L1_HANDLER"


class DataAvailabilityMode(str, Enum):
    L1 = "L1"
    L2 = "L2"


class ResourceLimits(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    max_amount: U64
    max_price_per_unit: U128


class ResourceBounds(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    l1_gas: ResourceLimits
    l2_gas: ResourceLimits


class TXN(BaseModel):
    """
    Generic wire shape every transaction is first decoded into.

    ``type`` falls back to the raw string when the tag is not a known
    TransactionType so that the decoder can report it by name.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    transaction_hash: Optional[Felt] = None
    type: Annotated[Union[TransactionType, str], Field(union_mode="left_to_right")]
    version: Felt
    nonce: Optional[Felt] = None
    max_fee: Optional[Felt] = None
    signature: Optional[List[Felt]] = None
    sender_address: Optional[Felt] = None
    contract_address: Optional[Felt] = None
    entry_point_selector: Optional[Felt] = None
    calldata: Optional[List[Felt]] = None
    class_hash: Optional[Felt] = None
    compiled_class_hash: Optional[Felt] = None
    contract_address_salt: Optional[Felt] = None
    constructor_calldata: Optional[List[Felt]] = None
    resource_bounds: Optional[ResourceBounds] = None
    tip: Optional[U64] = None
    paymaster_data: Optional[List[Felt]] = None
    account_deployment_data: Optional[List[Felt]] = None
    nonce_data_availability_mode: Optional[DataAvailabilityMode] = None
    fee_data_availability_mode: Optional[DataAvailabilityMode] = None


class Transaction(BaseModel):
    """
    Abstract result of a transaction query.

    Every concrete variant carries a transaction hash, its type tag and its
    version. Instances are immutable.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    transaction_hash: Felt
    type: TransactionType
    version: Felt

    tx_type: ClassVar[Optional[TransactionType]] = None

    @model_validator(mode="after")
    def check_type_tag(self) -> "Transaction":
        expected = type(self).tx_type
        if expected is not None and self.type != expected:
            raise ValueError(f"{type(self).__name__} requires type {expected.value}, got {self.type.value}")
        return self

    def to_envelope(self) -> TXN:
        """Widen this variant back into the generic wire envelope."""
        return TXN.model_validate(self.model_dump(mode="json"))


class InvokeTxnV0(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.INVOKE
    max_fee: Felt
    signature: List[Felt]
    contract_address: Felt
    entry_point_selector: Felt
    calldata: List[Felt]


class InvokeTxnV1(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.INVOKE
    max_fee: Felt
    signature: List[Felt]
    nonce: Felt
    sender_address: Felt
    calldata: List[Felt]


class InvokeTxnV3(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.INVOKE
    sender_address: Felt
    calldata: List[Felt]
    signature: List[Felt]
    nonce: Felt
    resource_bounds: ResourceBounds
    tip: U64
    paymaster_data: List[Felt]
    account_deployment_data: List[Felt]
    nonce_data_availability_mode: DataAvailabilityMode
    fee_data_availability_mode: DataAvailabilityMode


class DeclareTxnV0(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.DECLARE
    sender_address: Felt
    max_fee: Felt
    signature: List[Felt]
    class_hash: Felt


class DeclareTxnV1(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.DECLARE
    sender_address: Felt
    max_fee: Felt
    signature: List[Felt]
    nonce: Felt
    class_hash: Felt


class DeclareTxnV2(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.DECLARE
    sender_address: Felt
    compiled_class_hash: Felt
    max_fee: Felt
    signature: List[Felt]
    nonce: Felt
    class_hash: Felt


class DeployTxn(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.DEPLOY
    class_hash: Felt
    contract_address_salt: Felt
    constructor_calldata: List[Felt]


class DeployAccountTxn(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.DEPLOY_ACCOUNT
    max_fee: Felt
    signature: List[Felt]
    nonce: Felt
    class_hash: Felt
    contract_address_salt: Felt
    constructor_calldata: List[Felt]


class L1HandlerTxn(Transaction):
    tx_type: ClassVar[TransactionType] = TransactionType.L1_HANDLER
    nonce: Felt
    contract_address: Felt
    entry_point_selector: Felt
    calldata: List[Felt]


# Only INVOKE and DECLARE changed shape across protocol versions.
VERSIONED_VARIANTS: Dict[Tuple[TransactionType, int], Type[Transaction]] = {
    (TransactionType.INVOKE, 0): InvokeTxnV0,
    (TransactionType.INVOKE, 1): InvokeTxnV1,
    (TransactionType.INVOKE, 3): InvokeTxnV3,
    (TransactionType.DECLARE, 0): DeclareTxnV0,
    (TransactionType.DECLARE, 1): DeclareTxnV1,
    (TransactionType.DECLARE, 2): DeclareTxnV2,
}

UNVERSIONED_VARIANTS: Dict[TransactionType, Type[Transaction]] = {
    TransactionType.DEPLOY: DeployTxn,
    TransactionType.DEPLOY_ACCOUNT: DeployAccountTxn,
    TransactionType.L1_HANDLER: L1HandlerTxn,
}


def variant_for(tx_type: Union[TransactionType, str], version: int) -> Type[Transaction]:
    """
    Select the concrete variant for a (type, version) tag pair.

    Raises:
        RPCError: INTERNAL_ERROR naming the tag when no variant exists for it
    """
    if tx_type in UNVERSIONED_VARIANTS:
        return UNVERSIONED_VARIANTS[tx_type]
    variant = VERSIONED_VARIANTS.get((tx_type, version))
    if variant is not None:
        return variant

    if isinstance(tx_type, TransactionType):
        detail = (f"internal error with adapt_transaction() : unsupported {tx_type.value} "
                  f"transaction version {felt_to_hex(version)}")
    else:
        detail = f"internal error with adapt_transaction() : unknown transaction type {tx_type}"
    logger.error(detail)
    raise RPCError(ErrorKind.INTERNAL_ERROR, data=detail)


def adapt_transaction(txn: TXN) -> Transaction:
    """
    Adapt a TXN envelope into its concrete Transaction variant.

    Args:
        txn: The envelope decoded from the node's response

    Returns:
        The concrete variant selected by the envelope's (type, version)

    Raises:
        RPCError: INTERNAL_ERROR if the tag pair is unsupported or the body
            does not match the variant it declares
    """
    raw = txn.model_dump_json(exclude_none=True)
    variant = variant_for(txn.type, txn.version)
    try:
        return variant.model_validate_json(raw)
    except ValidationError as e:
        raise RPCError(
            ErrorKind.INTERNAL_ERROR,
            data=f"transaction does not match {variant.__name__}: {e}",
            original_error=e
        ) from e
