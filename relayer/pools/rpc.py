"""Pool lookup that reads a UniswapV2-style factory over JSON-RPC.

Pairs are resolved with factory.getPair(tokenA, tokenB) and reserves read
with pair.getReserves(), both as eth_call requests against the latest block.
Nothing is cached: every resolve and every reserve read is a fresh call.
"""

from __future__ import annotations

import itertools
from typing import Any

import httpx
import structlog
from eth_abi import decode, encode  # type: ignore[attr-defined]
from eth_abi.exceptions import DecodingError

from relayer.constants import UNISWAP_V2_FACTORY
from relayer.models.types import ZERO_ADDRESS, normalize_address
from relayer.pools.types import PoolHandle

logger = structlog.get_logger()

# Function selectors
GET_PAIR_SELECTOR = "0xe6a43905"  # getPair(address,address)
GET_RESERVES_SELECTOR = "0x0902f1ac"  # getReserves()


class RpcError(Exception):
    """JSON-RPC transport failure or error response."""

    pass


class RpcPoolLookup:
    """PoolLookup backed by eth_call against a live factory contract.

    Args:
        rpc_url: HTTP JSON-RPC endpoint
        factory_address: Factory contract address (defaults to UniswapV2 mainnet)
        timeout: Request timeout in seconds
        client: Optional pre-built httpx client (tests inject a MockTransport)
    """

    def __init__(
        self,
        rpc_url: str,
        factory_address: str = UNISWAP_V2_FACTORY,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.factory_address = normalize_address(factory_address, validate=True)
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._ids = itertools.count(1)

    def close(self) -> None:
        self._client.close()

    def _eth_call(self, to: str, data: str) -> bytes:
        """Execute an eth_call and return the raw result bytes.

        Raises:
            RpcError: On transport errors, HTTP errors, or a JSON-RPC error object
        """
        payload: dict[str, Any] = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": "eth_call",
            "params": [{"to": to, "data": data}, "latest"],
        }
        try:
            response = self._client.post(self.rpc_url, json=payload)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("rpc_call_failed", to=to[-8:], error=str(e))
            raise RpcError(f"eth_call to {to} failed: {e}") from e

        if body.get("error"):
            logger.warning("rpc_error_response", to=to[-8:], error=body["error"])
            raise RpcError(f"eth_call to {to} returned error: {body['error']}")

        result = body.get("result")
        if not isinstance(result, str) or not result.startswith("0x"):
            raise RpcError(f"eth_call to {to} returned malformed result: {result!r}")
        try:
            return bytes.fromhex(result[2:])
        except ValueError as e:
            raise RpcError(f"eth_call to {to} returned malformed result: {result!r}") from e

    def _call_and_decode(self, to: str, data: str, types: list[str]) -> tuple[Any, ...]:
        """eth_call `to` and ABI-decode the result.

        An empty or short result, as returned for a call to an address with
        no code, is an RpcError like any other bad answer from the node.
        """
        raw = self._eth_call(to, data)
        try:
            return tuple(decode(types, raw))
        except DecodingError as e:
            logger.warning("rpc_result_undecodable", to=to[-8:], error=str(e))
            raise RpcError(f"eth_call to {to} returned undecodable result: {e}") from e

    def resolve_pool(self, token_a: str, token_b: str) -> PoolHandle | None:
        token_a = normalize_address(token_a)
        token_b = normalize_address(token_b)
        data = GET_PAIR_SELECTOR + encode(["address", "address"], [token_a, token_b]).hex()
        (pair_address,) = self._call_and_decode(self.factory_address, data, ["address"])
        pair_address = normalize_address(pair_address)

        if pair_address == ZERO_ADDRESS:
            logger.debug("rpc_pair_not_found", token_a=token_a[-8:], token_b=token_b[-8:])
            return None
        return PoolHandle(address=pair_address, token0=token_a, token1=token_b)

    def get_reserves(self, pool: PoolHandle) -> tuple[int, int]:
        # getReserves() returns (uint112 reserve0, uint112 reserve1, uint32 blockTimestampLast)
        reserve0, reserve1, _ = self._call_and_decode(
            pool.address, GET_RESERVES_SELECTOR, ["uint112", "uint112", "uint32"]
        )
        return int(reserve0), int(reserve1)


__all__ = ["RpcPoolLookup", "RpcError", "GET_PAIR_SELECTOR", "GET_RESERVES_SELECTOR"]
