"""Quote relayer - routes swap quotes to protocol wrappers."""

from relayer.router import Relayer, RouteSelection, RouteTier
from relayer.wrappers import ProtocolWrapper, UniswapV2Wrapper

__version__ = "0.1.0"
__all__ = [
    "Relayer",
    "RouteSelection",
    "RouteTier",
    "ProtocolWrapper",
    "UniswapV2Wrapper",
    "__version__",
]
