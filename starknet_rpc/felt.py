"""
Field element and hex quantity types for the Starknet wire format.

Starknet encodes every field element, hash, address and most counters as a
0x-prefixed hex string. The annotated types below decode those strings into
plain Python integers and encode them back into minimal lowercase hex.
"""
import re
from typing import Annotated, Any, Callable

from pydantic import BeforeValidator, PlainSerializer
from web3 import Web3

# 2**251 + 17 * 2**192 + 1
FIELD_PRIME = 0x800000000000011000000000000000000000000000000000000000000000001

_HEX_RE = re.compile(r"^0x[0-9a-fA-F]+$")


def _hex_parser(limit: int, name: str) -> Callable[[Any], int]:
    def parse(value: Any) -> int:
        # bool is an int subclass and never a valid quantity
        if isinstance(value, bool):
            raise ValueError(f"{name} cannot be a boolean")
        if isinstance(value, int):
            number = value
        elif isinstance(value, str):
            if not _HEX_RE.match(value):
                raise ValueError(f"{name} must be a 0x-prefixed hex string, got {value!r}")
            number = Web3.to_int(hexstr=value)
        else:
            raise ValueError(f"{name} must be a hex string or int, got {type(value).__name__}")
        if number < 0 or number >= limit:
            raise ValueError(f"{name} out of range: {value!r}")
        return number

    return parse


_parse_felt = _hex_parser(FIELD_PRIME, "felt")


def to_felt(value: Any) -> int:
    """
    Parse a field element from its wire form.

    Args:
        value: 0x-prefixed hex string or non-negative int

    Returns:
        The integer value of the field element

    Raises:
        ValueError: If the value is malformed or not smaller than FIELD_PRIME
    """
    return _parse_felt(value)


def felt_to_hex(value: int) -> str:
    """Render an integer in minimal lowercase 0x-hex form."""
    return Web3.to_hex(value)


Felt = Annotated[
    int,
    BeforeValidator(_parse_felt),
    PlainSerializer(felt_to_hex, return_type=str),
]

U64 = Annotated[
    int,
    BeforeValidator(_hex_parser(2**64, "u64")),
    PlainSerializer(felt_to_hex, return_type=str),
]

U128 = Annotated[
    int,
    BeforeValidator(_hex_parser(2**128, "u128")),
    PlainSerializer(felt_to_hex, return_type=str),
]
