"""Pool types and the lookup interface consumed by protocol wrappers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from relayer.models.types import normalize_address, sort_tokens


@dataclass(frozen=True)
class PoolHandle:
    """Reference to a pool on a liquidity venue.

    token0/token1 are always stored in canonical order (smaller address
    first), which is also the order the venue reports reserves in.
    """

    address: str
    token0: str
    token1: str

    def __post_init__(self) -> None:
        token0, token1 = sort_tokens(self.token0, self.token1)
        object.__setattr__(self, "address", normalize_address(self.address))
        object.__setattr__(self, "token0", token0)
        object.__setattr__(self, "token1", token1)


@dataclass
class UniswapV2Pool:
    """A constant product pool and its current reserves.

    Tokens given out of canonical order are swapped together with their
    reserves, so reserve0 always belongs to the smaller address.
    """

    address: str
    token0: str
    token1: str
    reserve0: int
    reserve1: int

    def __post_init__(self) -> None:
        self.address = normalize_address(self.address)
        token0 = normalize_address(self.token0)
        token1 = normalize_address(self.token1)
        if token0 > token1:
            token0, token1 = token1, token0
            self.reserve0, self.reserve1 = self.reserve1, self.reserve0
        self.token0 = token0
        self.token1 = token1

    @property
    def handle(self) -> PoolHandle:
        return PoolHandle(address=self.address, token0=self.token0, token1=self.token1)


@runtime_checkable
class PoolLookup(Protocol):
    """Resolves pools for token pairs and reads their reserves.

    Reserves are venue-owned state: implementations must read them fresh on
    every call and never serve a cached value.
    """

    def resolve_pool(self, token_a: str, token_b: str) -> PoolHandle | None:
        """Find the pool for an unordered token pair.

        Returns:
            PoolHandle if the venue has a pool for the pair, None otherwise
        """
        ...

    def get_reserves(self, pool: PoolHandle) -> tuple[int, int]:
        """Read (reserve0, reserve1) in the pool's canonical token order."""
        ...


__all__ = ["PoolHandle", "UniswapV2Pool", "PoolLookup"]
