"""Protocol constants for the quote relayer.

Centralizes well-known addresses and role identifiers.
"""

from relayer.models.types import is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate and return a well-known address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# UniswapV2 factory on mainnet (lowercase for consistency)
# Validated at import time to catch typos early
UNISWAP_V2_FACTORY = _validate_address(
    "UniswapV2 factory", "0x5c69bee701ef814a2b6a3edd4b1652cb9cc5aa6f"
)

# Access control roles
DEFAULT_ADMIN_ROLE = "DEFAULT_ADMIN_ROLE"
GOVERNOR_ROLE = "GOVERNOR_ROLE"
