"""Wiring of the relayer with its wrappers and authorizer.

A RelayerService bundles everything the HTTP layer needs: the relayer, the
authorizer guarding it, and the wrappers that may be routed to, indexed by
protocol name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

import structlog

from relayer import config
from relayer.access import RoleBasedAuthorizer
from relayer.pools.registry import PoolRegistry
from relayer.pools.rpc import RpcPoolLookup
from relayer.pools.types import PoolLookup
from relayer.router import Relayer
from relayer.wrappers.base import ProtocolWrapper
from relayer.wrappers.uniswap_v2 import UniswapV2Wrapper

logger = structlog.get_logger()


@dataclass
class RelayerService:
    """A relayer plus the wrappers it can be configured to use."""

    relayer: Relayer
    authorizer: RoleBasedAuthorizer
    wrappers: dict[str, ProtocolWrapper] = field(default_factory=dict)

    def add_wrapper(self, wrapper: ProtocolWrapper) -> None:
        """Make a wrapper routable under its protocol name (last one wins)."""
        name = wrapper.protocol_name()
        if name in self.wrappers:
            logger.debug("wrapper_replaced", protocol=name)
        self.wrappers[name] = wrapper

    def get_wrapper(self, name: str) -> ProtocolWrapper | None:
        return self.wrappers.get(name)


def create_service(
    pool_lookup: PoolLookup,
    admin: str | None = None,
    governors: list[str] | None = None,
) -> RelayerService:
    """Build a service with a UniswapV2 wrapper over `pool_lookup`.

    The routing table starts empty; governors configure it at runtime.
    """
    authorizer = RoleBasedAuthorizer(admin=admin, governors=governors)
    service = RelayerService(relayer=Relayer(authorizer), authorizer=authorizer)
    service.add_wrapper(UniswapV2Wrapper(pool_lookup))
    return service


@lru_cache(maxsize=1)
def get_default_service() -> RelayerService:
    """Create the process-wide service from environment configuration.

    Reserves are read over JSON-RPC if RELAYER_RPC_URL is set, otherwise from
    an empty in-memory registry.
    """
    pool_lookup: PoolLookup
    if config.RPC_URL:
        logger.info("rpc_pool_lookup_enabled", rpc_url=config.RPC_URL[:50] + "...")
        pool_lookup = RpcPoolLookup(
            config.RPC_URL,
            factory_address=config.V2_FACTORY,
            timeout=config.RPC_TIMEOUT,
        )
    else:
        logger.info("rpc_pool_lookup_disabled", reason="RELAYER_RPC_URL not set")
        pool_lookup = PoolRegistry()

    if not config.GOVERNORS:
        logger.warning("no_governors_configured", message="Routing table cannot be changed")

    return create_service(pool_lookup, admin=config.ADMIN, governors=config.GOVERNORS)


__all__ = ["RelayerService", "create_service", "get_default_service"]
