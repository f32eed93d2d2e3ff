"""Test helpers."""

from tests.helpers.constants import (
    ADMIN,
    DAI,
    DAI_USDC_POOL,
    GOVERNOR,
    OUTSIDER,
    USDC,
    USDC_WETH_POOL,
    USDT,
    WETH,
    ZERO,
)

__all__ = [
    "ADMIN",
    "DAI",
    "DAI_USDC_POOL",
    "GOVERNOR",
    "OUTSIDER",
    "USDC",
    "USDC_WETH_POOL",
    "USDT",
    "WETH",
    "ZERO",
]
