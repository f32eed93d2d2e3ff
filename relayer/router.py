"""Quote routing across protocol wrappers.

The Relayer owns a three-tier routing table and forwards each quote to
exactly one wrapper, chosen in fixed priority order:

1. Pair-level wrapper for the unordered (token_in, token_out) pair
2. Token-level wrapper for token_in (never token_out)
3. Default wrapper

Whatever the chosen wrapper returns or raises is passed back unchanged. A
failing wrapper does not cause a lower tier to be tried.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum

import structlog

from relayer.access import Authorizer
from relayer.errors import InvalidToken, InvalidWrapper, NoWrapperFound, Unauthorized
from relayer.models.types import is_valid_address, is_zero_address, normalize_address, pair_key
from relayer.wrappers.base import ProtocolWrapper

logger = structlog.get_logger()


def _usable_token(token: str | None) -> bool:
    return token is not None and is_valid_address(token) and not is_zero_address(token)


class RouteTier(str, Enum):
    """Which tier of the routing table selected a wrapper."""

    PAIR = "pair"
    TOKEN = "token"
    DEFAULT = "default"


@dataclass(frozen=True)
class RouteSelection:
    """The wrapper chosen for a query and the tier that chose it."""

    wrapper: ProtocolWrapper
    tier: RouteTier


class Relayer:
    """Routes quote requests to protocol wrappers.

    The routing table starts empty. Only callers the authorizer accepts may
    change it; reads are unrestricted. Table access is serialized by a lock,
    while the delegated quote runs outside it.

    Args:
        authorizer: Decides which callers may change the routing table
    """

    def __init__(self, authorizer: Authorizer) -> None:
        self._authorizer = authorizer
        self._pair_wrappers: dict[bytes, ProtocolWrapper] = {}
        self._token_wrappers: dict[str, ProtocolWrapper] = {}
        self._default_wrapper: ProtocolWrapper | None = None
        self._lock = threading.Lock()

    # --- Quoting ---

    def resolve_wrapper(self, token_in: str, token_out: str) -> RouteSelection:
        """Select the wrapper a quote for this pair would be sent to.

        Raises:
            InvalidToken: If either token is null, zero or malformed
            NoWrapperFound: If no tier has a wrapper for the query
        """
        if not (_usable_token(token_in) and _usable_token(token_out)):
            raise InvalidToken(token_in, token_out)

        key = pair_key(token_in, token_out)
        token = normalize_address(token_in)

        with self._lock:
            wrapper = self._pair_wrappers.get(key)
            if wrapper is not None:
                return RouteSelection(wrapper, RouteTier.PAIR)
            wrapper = self._token_wrappers.get(token)
            if wrapper is not None:
                return RouteSelection(wrapper, RouteTier.TOKEN)
            if self._default_wrapper is not None:
                return RouteSelection(self._default_wrapper, RouteTier.DEFAULT)

        raise NoWrapperFound(token_in, token_out)

    def quote(self, token_in: str, amount_in: int, token_out: str) -> int:
        """Quote amount_in of token_in in terms of token_out.

        Raises:
            InvalidToken: If either token is null, zero or malformed
            NoWrapperFound: If no tier has a wrapper for the query
            RelayerError: Any error from the selected wrapper, unchanged
        """
        amount_out, _ = self.quote_with_route(token_in, amount_in, token_out)
        return amount_out

    def quote_with_route(
        self, token_in: str, amount_in: int, token_out: str
    ) -> tuple[int, RouteSelection]:
        """Like quote, but also return the selection that produced the amount."""
        selection = self.resolve_wrapper(token_in, token_out)
        logger.debug(
            "quote_routed",
            token_in=token_in[-8:],
            token_out=token_out[-8:],
            tier=selection.tier.value,
            protocol=selection.wrapper.protocol_name(),
        )
        return selection.wrapper.quote(token_in, amount_in, token_out), selection

    # --- Configuration ---

    def _require_governor(self, caller: str, action: str) -> None:
        if not self._authorizer.is_authorized(caller):
            logger.warning("routing_change_rejected", caller=caller, action=action)
            raise Unauthorized(caller)

    @staticmethod
    def _require_wrapper(wrapper: ProtocolWrapper | None) -> ProtocolWrapper:
        if wrapper is None:
            raise InvalidWrapper()
        return wrapper

    def set_pair_wrapper(
        self,
        caller: str,
        token_a: str,
        token_b: str,
        wrapper: ProtocolWrapper | None,
    ) -> None:
        """Route the unordered pair (token_a, token_b) to `wrapper`.

        Raises:
            Unauthorized: If caller may not change routing
            InvalidWrapper: If wrapper is None
        """
        self._require_governor(caller, "set_pair_wrapper")
        wrapper = self._require_wrapper(wrapper)
        if not (_usable_token(token_a) and _usable_token(token_b)):
            raise InvalidToken(token_a, token_b)
        key = pair_key(token_a, token_b)
        with self._lock:
            self._pair_wrappers[key] = wrapper
        logger.info(
            "pair_wrapper_set",
            token_a=token_a,
            token_b=token_b,
            protocol=wrapper.protocol_name(),
            caller=caller,
        )

    def set_token_wrapper(self, caller: str, token: str, wrapper: ProtocolWrapper | None) -> None:
        """Route quotes whose input token is `token` to `wrapper`.

        Raises:
            Unauthorized: If caller may not change routing
            InvalidWrapper: If wrapper is None
        """
        self._require_governor(caller, "set_token_wrapper")
        wrapper = self._require_wrapper(wrapper)
        if not _usable_token(token):
            raise InvalidToken(token, None)
        with self._lock:
            self._token_wrappers[normalize_address(token)] = wrapper
        logger.info(
            "token_wrapper_set",
            token=token,
            protocol=wrapper.protocol_name(),
            caller=caller,
        )

    def set_default_wrapper(self, caller: str, wrapper: ProtocolWrapper | None) -> None:
        """Route every otherwise unmatched quote to `wrapper`.

        Raises:
            Unauthorized: If caller may not change routing
            InvalidWrapper: If wrapper is None
        """
        self._require_governor(caller, "set_default_wrapper")
        wrapper = self._require_wrapper(wrapper)
        with self._lock:
            self._default_wrapper = wrapper
        logger.info("default_wrapper_set", protocol=wrapper.protocol_name(), caller=caller)

    def get_pair_wrapper(self, token_a: str, token_b: str) -> ProtocolWrapper | None:
        key = pair_key(token_a, token_b)
        with self._lock:
            return self._pair_wrappers.get(key)

    def get_token_wrapper(self, token: str) -> ProtocolWrapper | None:
        with self._lock:
            return self._token_wrappers.get(normalize_address(token))

    def get_default_wrapper(self) -> ProtocolWrapper | None:
        with self._lock:
            return self._default_wrapper


__all__ = ["Relayer", "RouteSelection", "RouteTier"]
