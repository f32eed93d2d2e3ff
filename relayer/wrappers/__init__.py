"""Protocol wrappers: one uniform quoting interface per liquidity venue."""

from relayer.wrappers.base import ProtocolWrapper
from relayer.wrappers.uniswap_v2 import UniswapV2Wrapper

__all__ = ["ProtocolWrapper", "UniswapV2Wrapper"]
