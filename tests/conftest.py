"""Pytest configuration and fixtures."""

import pytest

from relayer.access import RoleBasedAuthorizer
from relayer.errors import RelayerError
from relayer.pools import PoolRegistry, UniswapV2Pool
from relayer.router import Relayer
from relayer.wrappers import ProtocolWrapper, UniswapV2Wrapper
from tests.helpers import ADMIN, DAI, DAI_USDC_POOL, GOVERNOR, USDC, USDC_WETH_POOL, WETH

# =============================================================================
# Mock classes for dependency injection
# =============================================================================


class StubWrapper(ProtocolWrapper):
    """Wrapper with a fixed answer, for routing tests.

    Usage:
        # Always quote 42
        wrapper = StubWrapper("A", amount_out=42)

        # Always fail
        wrapper = StubWrapper("B", error=PairNotFound(DAI, USDC))
    """

    def __init__(
        self,
        name: str,
        amount_out: int = 0,
        error: RelayerError | None = None,
        available: bool = True,
    ) -> None:
        self.name = name
        self.amount_out = amount_out
        self.error = error
        self.available = available
        self.quote_calls: list[tuple[str, int, str]] = []  # Track calls for assertions

    def quote(self, token_in: str, amount_in: int, token_out: str) -> int:
        self.quote_calls.append((token_in, amount_in, token_out))
        if self.error is not None:
            raise self.error
        return self.amount_out

    def is_available(self, token_a: str, token_b: str) -> bool:
        return self.available

    def protocol_name(self) -> str:
        return self.name


class CountingPoolLookup:
    """PoolLookup decorator that records every call made through it."""

    def __init__(self, inner: PoolRegistry) -> None:
        self.inner = inner
        self.resolve_calls: list[tuple[str, str]] = []
        self.reserve_calls = 0

    def resolve_pool(self, token_a, token_b):
        self.resolve_calls.append((token_a, token_b))
        return self.inner.resolve_pool(token_a, token_b)

    def get_reserves(self, pool):
        self.reserve_calls += 1
        return self.inner.get_reserves(pool)


# =============================================================================
# Pytest fixtures
# =============================================================================


@pytest.fixture
def dai_usdc_pool() -> UniswapV2Pool:
    """DAI/USDC pool with 1000/2000 reserves (DAI is token0)."""
    return UniswapV2Pool(
        address=DAI_USDC_POOL,
        token0=DAI,
        token1=USDC,
        reserve0=1000,
        reserve1=2000,
    )


@pytest.fixture
def usdc_weth_pool() -> UniswapV2Pool:
    """A deep USDC/WETH pool (USDC is token0)."""
    return UniswapV2Pool(
        address=USDC_WETH_POOL,
        token0=USDC,
        token1=WETH,
        reserve0=25_000_000 * 10**6,
        reserve1=10_000 * 10**18,
    )


@pytest.fixture
def pool_registry(dai_usdc_pool: UniswapV2Pool, usdc_weth_pool: UniswapV2Pool) -> PoolRegistry:
    return PoolRegistry([dai_usdc_pool, usdc_weth_pool])


@pytest.fixture
def v2_wrapper(pool_registry: PoolRegistry) -> UniswapV2Wrapper:
    return UniswapV2Wrapper(pool_registry)


@pytest.fixture
def authorizer() -> RoleBasedAuthorizer:
    return RoleBasedAuthorizer(admin=ADMIN, governors=[GOVERNOR])


@pytest.fixture
def relayer(authorizer: RoleBasedAuthorizer) -> Relayer:
    """An empty relayer governed by GOVERNOR."""
    return Relayer(authorizer)
