"""Relayer error classes.

Every error is terminal for the call that raised it. Nothing in the relayer
catches these to retry or fall back; callers treat any of them as
"quote unavailable now".
"""

from __future__ import annotations


class RelayerError(Exception):
    """Base error for quoting and routing operations."""

    pass


class InvalidToken(RelayerError):
    """A null, zero or malformed token identifier was supplied."""

    def __init__(self, token_in: str | None, token_out: str | None) -> None:
        self.token_in = token_in
        self.token_out = token_out
        super().__init__(f"Invalid token pair: {token_in!r} -> {token_out!r}")


class InvalidWrapper(RelayerError):
    """A null wrapper was supplied to a routing setter."""

    def __init__(self, message: str = "Wrapper must not be unset") -> None:
        super().__init__(message)


class PairNotFound(RelayerError):
    """No liquidity pool exists for the pair at the chosen venue."""

    def __init__(self, token_a: str, token_b: str, protocol: str | None = None) -> None:
        self.token_a = token_a
        self.token_b = token_b
        self.protocol = protocol
        venue = f" on {protocol}" if protocol else ""
        super().__init__(f"No pool for {token_a}/{token_b}{venue}")


class InsufficientInput(RelayerError):
    """Input amount is zero at pricing time."""

    def __init__(self, amount_in: int) -> None:
        self.amount_in = amount_in
        super().__init__(f"Insufficient input amount: {amount_in}")


class InsufficientLiquidity(RelayerError):
    """A pool reserve is zero at pricing time."""

    def __init__(self, reserve_in: int, reserve_out: int) -> None:
        self.reserve_in = reserve_in
        self.reserve_out = reserve_out
        super().__init__(f"Insufficient liquidity: reserves ({reserve_in}, {reserve_out})")


class NoWrapperFound(RelayerError):
    """No pair, token or default wrapper is configured for the query."""

    def __init__(self, token_in: str, token_out: str) -> None:
        self.token_in = token_in
        self.token_out = token_out
        super().__init__(f"No wrapper configured for {token_in} -> {token_out}")


class Unauthorized(RelayerError):
    """The caller lacks the role required for a mutating call."""

    def __init__(self, caller: str | None, role: str | None = None) -> None:
        self.caller = caller
        self.role = role
        needed = f" (requires {role})" if role else ""
        super().__init__(f"Caller {caller!r} is not authorized{needed}")


__all__ = [
    "RelayerError",
    "InvalidToken",
    "InvalidWrapper",
    "PairNotFound",
    "InsufficientInput",
    "InsufficientLiquidity",
    "NoWrapperFound",
    "Unauthorized",
]
