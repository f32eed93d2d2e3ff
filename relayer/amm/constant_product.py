"""Constant product AMM pricing.

Pools following the x * y = k invariant take a proportional fee from the
input amount before applying the curve:

    amount_out = (amount_in * fee_num * reserve_out)
                 / (reserve_in * fee_den + amount_in * fee_num)

The division truncates. That truncation is the protocol's pricing, so no
rounding adjustment follows it.
"""

from __future__ import annotations

from relayer.errors import InsufficientInput, InsufficientLiquidity
from relayer.safe_int import S

# UniswapV2 takes 0.3% of the input
UNISWAP_V2_FEE_NUMERATOR = 997
UNISWAP_V2_FEE_DENOMINATOR = 1000


def quote_constant_product(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    fee_numerator: int = UNISWAP_V2_FEE_NUMERATOR,
    fee_denominator: int = UNISWAP_V2_FEE_DENOMINATOR,
) -> int:
    """Calculate swap output using the constant product formula.

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee_numerator: Share of the input kept after the fee (997 for 0.3%)
        fee_denominator: Fee scale (1000 for UniswapV2)

    Returns:
        Output token amount, always strictly below reserve_out

    Raises:
        InsufficientInput: If amount_in is zero
        InsufficientLiquidity: If either reserve is zero
        Uint256Overflow: If the output does not fit in a uint256
    """
    if amount_in <= 0:
        raise InsufficientInput(amount_in)
    if reserve_in <= 0 or reserve_out <= 0:
        raise InsufficientLiquidity(reserve_in, reserve_out)

    amount_in_with_fee = S(amount_in) * S(fee_numerator)
    numerator = amount_in_with_fee * S(reserve_out)
    denominator = S(reserve_in) * S(fee_denominator) + amount_in_with_fee

    return (numerator // denominator).to_uint256()


__all__ = [
    "UNISWAP_V2_FEE_NUMERATOR",
    "UNISWAP_V2_FEE_DENOMINATOR",
    "quote_constant_product",
]
