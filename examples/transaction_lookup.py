#!/usr/bin/env python3
"""
Example of looking up a transaction, its receipt and its status.
"""
import logging
import os
import sys

from starknet_rpc import BlockID, ErrorKind, NetworkConfig, Provider, RPCError


def main():
    """
    Demonstrate the typed query operations.

    This example shows how to:
    1. Initialize the provider from a network configuration
    2. Fetch a transaction by hash and inspect its concrete variant
    3. Fetch its receipt and status
    4. Fetch the first transaction of the latest block
    5. Handle the domain errors a query can raise
    """
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))

    network = os.environ.get("STARKNET_NETWORK", "sepolia")
    tx_hash = sys.argv[1] if len(sys.argv) > 1 else os.environ.get("TX_HASH")
    if not tx_hash:
        print("usage: transaction_lookup.py <transaction hash>")
        return

    print("Available networks:")
    for network_name in NetworkConfig.load_networks().keys():
        print(f"  - {network_name}")
    print()

    provider = Provider(network=network)
    print(f"Connected to {provider.rpc_url}")

    try:
        tx = provider.transaction_by_hash(tx_hash)
        print(f"{type(tx).__name__}: type={tx.type.value} version={tx.version}")

        receipt = provider.transaction_receipt(tx_hash)
        print(f"Receipt: {receipt.execution_status.value}, fee {receipt.actual_fee.amount} "
              f"{receipt.actual_fee.unit.value}, block {receipt.block_number}")

        status = provider.transaction_status(tx_hash)
        print(f"Status: {status.finality_status.value}")

        first = provider.transaction_by_block_id_and_index(BlockID.latest(), 0)
        print(f"First transaction of latest block: {hex(first.transaction_hash)}")
    except RPCError as e:
        if e.kind is ErrorKind.HASH_NOT_FOUND:
            print(f"No transaction {tx_hash} on {network}")
        else:
            print(f"Query failed: {e}")
    finally:
        provider.close()


if __name__ == "__main__":
    main()
