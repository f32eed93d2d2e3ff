"""Script to quote a swap against a live UniswapV2-style factory.

Builds a relayer with a single UniswapV2 wrapper as its default route,
backed by JSON-RPC reserve reads, and prints the quote.

Usage:
    python -m scripts.quote_pair --rpc-url https://eth.llamarpc.com \
        --token-in 0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2 \
        --token-out 0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48 \
        --amount-in 1000000000000000000
"""

import argparse

import structlog

from relayer.access import RoleBasedAuthorizer
from relayer.constants import UNISWAP_V2_FACTORY
from relayer.errors import RelayerError
from relayer.pools import RpcError, RpcPoolLookup
from relayer.router import Relayer
from relayer.wrappers import UniswapV2Wrapper

logger = structlog.get_logger()

# Local-only governor; this script never exposes the relayer
SCRIPT_GOVERNOR = "0x0000000000000000000000000000000000000001"


def quote_pair(rpc_url: str, factory: str, token_in: str, token_out: str, amount_in: int) -> int:
    """Quote amount_in of token_in against the live factory."""
    lookup = RpcPoolLookup(rpc_url, factory_address=factory)
    try:
        relayer = Relayer(RoleBasedAuthorizer(governors=[SCRIPT_GOVERNOR]))
        relayer.set_default_wrapper(SCRIPT_GOVERNOR, UniswapV2Wrapper(lookup))
        return relayer.quote(token_in, amount_in, token_out)
    finally:
        lookup.close()


def main() -> None:
    """Entry point for the quote script."""
    parser = argparse.ArgumentParser(description="Quote a swap against a live UniswapV2 factory")
    parser.add_argument("--rpc-url", required=True, help="HTTP JSON-RPC endpoint")
    parser.add_argument("--factory", default=UNISWAP_V2_FACTORY, help="Factory contract address")
    parser.add_argument("--token-in", required=True, help="Input token address")
    parser.add_argument("--token-out", required=True, help="Output token address")
    parser.add_argument("--amount-in", type=int, required=True, help="Input amount (base units)")

    args = parser.parse_args()

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ]
    )

    try:
        amount_out = quote_pair(
            args.rpc_url, args.factory, args.token_in, args.token_out, args.amount_in
        )
    except (RelayerError, RpcError) as e:
        logger.error("quote_failed", error_kind=type(e).__name__, detail=str(e))
        raise SystemExit(1) from e

    print(f"\n{args.amount_in} {args.token_in} -> {amount_out} {args.token_out}")


if __name__ == "__main__":
    main()
