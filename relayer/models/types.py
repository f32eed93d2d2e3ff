"""Shared type definitions for token identifiers and pair keys.

Tokens are identified by their Ethereum address. Addresses are compared in
lowercase hex, which orders them the same way as their underlying 20 bytes.
"""

from typing import Annotated, Any

from eth_abi.packed import encode_packed
from pydantic import BeforeValidator, Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1

# The null token / unset wrapper identifier
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def validate_uint256(value: Any) -> str:
    """Validate that a value is a valid uint256 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid uint256 as decimal string

    Raises:
        ValueError: If value is not a valid non-negative integer within uint256 range
    """
    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint256 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint256 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint256 cannot be negative: {value}")
    if int_value > UINT256_MAX:
        raise ValueError(f"Uint256 overflow: {value} > 2^256-1")

    return str(int_value)


# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# 256-bit unsigned integer as decimal string (validated)
Uint256 = Annotated[
    str,
    BeforeValidator(validate_uint256),
    Field(description="256-bit unsigned integer as decimal string"),
]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x") or len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def is_zero_address(address: str | None) -> bool:
    """True for the null token: None, empty string, or the zero address."""
    if not address:
        return True
    return normalize_address(address) == ZERO_ADDRESS


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    """Return the pair in canonical order (smaller address first).

    Both addresses are normalized, so the order matches a comparison of
    their raw bytes.
    """
    a = normalize_address(token_a)
    b = normalize_address(token_b)
    return (a, b) if a < b else (b, a)


def pair_key(token_a: str, token_b: str) -> bytes:
    """Derive the routing key for an unordered token pair.

    The key is the packed encoding of the sorted pair, so
    pair_key(a, b) == pair_key(b, a).

    Raises:
        ValueError: If either token is not a valid address
    """
    token0, token1 = sort_tokens(token_a, token_b)
    for token in (token0, token1):
        if not is_valid_address(token):
            raise ValueError(f"Invalid token address: {token}")
    return encode_packed(["address", "address"], [token0, token1])
