"""UniswapV2 protocol wrapper.

Quotes come from the constant product formula applied to the pair's live
reserves: amount_out = (in * 997 * res_out) / (res_in * 1000 + in * 997).
"""

from __future__ import annotations

import structlog

from relayer.amm.constant_product import (
    UNISWAP_V2_FEE_DENOMINATOR,
    UNISWAP_V2_FEE_NUMERATOR,
    quote_constant_product,
)
from relayer.errors import InvalidToken, PairNotFound
from relayer.models.types import is_zero_address, normalize_address
from relayer.pools.types import PoolLookup
from relayer.wrappers.base import ProtocolWrapper

logger = structlog.get_logger()


class UniswapV2Wrapper(ProtocolWrapper):
    """Wrapper for UniswapV2-style constant product venues.

    Args:
        pool_lookup: Resolves pairs and reads reserves for the venue
        fee_numerator: Input share kept after the fee (997 for 0.3%)
        fee_denominator: Fee scale (1000)
        name: Protocol label, for forks that reuse this pricing
    """

    def __init__(
        self,
        pool_lookup: PoolLookup,
        fee_numerator: int = UNISWAP_V2_FEE_NUMERATOR,
        fee_denominator: int = UNISWAP_V2_FEE_DENOMINATOR,
        name: str = "UniswapV2",
    ) -> None:
        if not 0 < fee_numerator <= fee_denominator:
            raise ValueError(f"Invalid fee {fee_numerator}/{fee_denominator}")
        self.pool_lookup = pool_lookup
        self.fee_numerator = fee_numerator
        self.fee_denominator = fee_denominator
        self._name = name

    def protocol_name(self) -> str:
        return self._name

    def is_available(self, token_a: str, token_b: str) -> bool:
        if is_zero_address(token_a) or is_zero_address(token_b):
            return False
        return self.pool_lookup.resolve_pool(token_a, token_b) is not None

    def quote(self, token_in: str, amount_in: int, token_out: str) -> int:
        """Quote a swap against the pair's current reserves.

        Raises:
            InvalidToken: If either token is null or zero
            PairNotFound: If the venue has no pool for the pair
            InsufficientInput: If amount_in is zero
            InsufficientLiquidity: If either reserve is zero
        """
        if is_zero_address(token_in) or is_zero_address(token_out):
            raise InvalidToken(token_in, token_out)

        token_in = normalize_address(token_in)
        token_out = normalize_address(token_out)

        pool = self.pool_lookup.resolve_pool(token_in, token_out)
        if pool is None:
            raise PairNotFound(token_in, token_out, protocol=self._name)

        reserve0, reserve1 = self.pool_lookup.get_reserves(pool)
        if token_in == pool.token0:
            reserve_in, reserve_out = reserve0, reserve1
        else:
            reserve_in, reserve_out = reserve1, reserve0

        amount_out = quote_constant_product(
            amount_in,
            reserve_in,
            reserve_out,
            self.fee_numerator,
            self.fee_denominator,
        )

        logger.debug(
            "v2_quote",
            pool=pool.address[-8:],
            token_in=token_in[-8:],
            token_out=token_out[-8:],
            amount_in=amount_in,
            amount_out=amount_out,
        )
        return amount_out


__all__ = ["UniswapV2Wrapper"]
