"""In-memory pool registry.

PoolRegistry is a PoolLookup backed by a dictionary of UniswapV2-style pools.
It stands in for a venue's factory: one pool per unordered token pair, with
reserves that can be updated between queries.
"""

from __future__ import annotations

import structlog

from relayer.models.types import normalize_address
from relayer.pools.types import PoolHandle, UniswapV2Pool

logger = structlog.get_logger()


class PoolRegistry:
    """Registry of constant product pools keyed by unordered token pair."""

    def __init__(self, pools: list[UniswapV2Pool] | None = None) -> None:
        """Initialize the registry with optional pools.

        Args:
            pools: Initial pools. If None, starts empty.
        """
        self._pools: dict[frozenset[str], UniswapV2Pool] = {}
        self._pools_by_address: dict[str, UniswapV2Pool] = {}

        if pools:
            for pool in pools:
                self.add_pool(pool)

    def add_pool(self, pool: UniswapV2Pool) -> None:
        """Add a pool to the registry.

        Args:
            pool: The pool to add. If a pool for this token pair already exists,
                  it will be replaced.
        """
        pair = frozenset([pool.token0, pool.token1])
        previous = self._pools.get(pair)
        if previous is not None:
            logger.debug(
                "v2_pool_replaced",
                pool=pool.address[-8:],
                previous=previous.address[-8:],
                token0=pool.token0[-8:],
                token1=pool.token1[-8:],
            )
            del self._pools_by_address[previous.address]
        self._pools[pair] = pool
        self._pools_by_address[pool.address] = pool

    def set_reserves(self, address: str, reserve0: int, reserve1: int) -> None:
        """Update a pool's reserves (canonical token order).

        Raises:
            KeyError: If no pool with this address is registered
        """
        pool = self._pools_by_address[normalize_address(address)]
        pool.reserve0 = reserve0
        pool.reserve1 = reserve1

    def get_pool(self, token_a: str, token_b: str) -> UniswapV2Pool | None:
        """Get the pool record for a token pair (order independent)."""
        pair = frozenset([normalize_address(token_a), normalize_address(token_b)])
        return self._pools.get(pair)

    def resolve_pool(self, token_a: str, token_b: str) -> PoolHandle | None:
        pool = self.get_pool(token_a, token_b)
        return pool.handle if pool is not None else None

    def get_reserves(self, pool: PoolHandle) -> tuple[int, int]:
        """Read current reserves for a pool.

        Raises:
            KeyError: If the pool is not (or no longer) registered
        """
        record = self._pools_by_address[normalize_address(pool.address)]
        return record.reserve0, record.reserve1

    def __len__(self) -> int:
        return len(self._pools)


__all__ = ["PoolRegistry"]
