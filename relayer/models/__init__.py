"""Token types and API data models.

The HTTP models live in relayer.models.api and are imported from there
directly, since they depend on the router.
"""

from relayer.models.types import (
    ZERO_ADDRESS,
    Address,
    Uint256,
    is_valid_address,
    is_zero_address,
    normalize_address,
    pair_key,
    sort_tokens,
)

__all__ = [
    "Address",
    "Uint256",
    "ZERO_ADDRESS",
    "normalize_address",
    "is_valid_address",
    "is_zero_address",
    "sort_tokens",
    "pair_key",
]
