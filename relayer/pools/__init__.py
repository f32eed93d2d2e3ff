"""Liquidity pool lookup.

Provides the PoolLookup interface plus an in-memory registry and a
JSON-RPC backed implementation.
"""

from .registry import PoolRegistry
from .rpc import RpcError, RpcPoolLookup
from .types import PoolHandle, PoolLookup, UniswapV2Pool

__all__ = [
    "PoolLookup",
    "PoolHandle",
    "UniswapV2Pool",
    "PoolRegistry",
    "RpcPoolLookup",
    "RpcError",
]
