"""AMM pricing engines."""

from relayer.amm.constant_product import (
    UNISWAP_V2_FEE_DENOMINATOR,
    UNISWAP_V2_FEE_NUMERATOR,
    quote_constant_product,
)

__all__ = [
    "UNISWAP_V2_FEE_NUMERATOR",
    "UNISWAP_V2_FEE_DENOMINATOR",
    "quote_constant_product",
]
