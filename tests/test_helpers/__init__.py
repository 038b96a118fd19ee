"""
Shared wire samples and helpers for the test suite.
"""
from .wire_samples import (
    TEST_RPC_URL,
    TX_HASH,
    WIRE_TRANSACTIONS,
    WIRE_RECEIPT,
    WIRE_PENDING_RECEIPT,
    WIRE_DETAILED_RECEIPT,
    WIRE_STATUS,
    wire_transaction,
)
from .provider_creator import create_test_provider
