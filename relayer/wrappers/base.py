"""Base class for protocol wrappers."""

from abc import ABC, abstractmethod


class ProtocolWrapper(ABC):
    """Uniform quoting interface over one liquidity venue.

    The relayer only ever talks to venues through this interface. New venues
    are supported by adding a subclass, never by changing the relayer.
    """

    @abstractmethod
    def quote(self, token_in: str, amount_in: int, token_out: str) -> int:
        """Quote the output amount for swapping amount_in of token_in.

        Args:
            token_in: Input token address
            amount_in: Input token amount
            token_out: Output token address

        Returns:
            Expected output token amount

        Raises:
            RelayerError: Any failure is raised to the caller unmodified
        """
        ...

    @abstractmethod
    def is_available(self, token_a: str, token_b: str) -> bool:
        """Whether the venue can quote the unordered pair."""
        ...

    @abstractmethod
    def protocol_name(self) -> str:
        """Static label identifying the venue (e.g. "UniswapV2")."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.protocol_name()!r})"
