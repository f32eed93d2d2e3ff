"""Pydantic models for the relayer HTTP API."""

from pydantic import BaseModel, Field

from relayer.models.types import Address, Uint256
from relayer.router import RouteTier


class QuoteResponse(BaseModel):
    """A quote and the wrapper that produced it."""

    token_in: Address = Field(alias="tokenIn")
    token_out: Address = Field(alias="tokenOut")
    amount_in: Uint256 = Field(alias="amountIn")
    amount_out: Uint256 = Field(alias="amountOut")
    protocol: str = Field(description="Protocol name of the wrapper that answered.")
    tier: RouteTier = Field(description="Routing tier that selected the wrapper.")

    model_config = {"populate_by_name": True}


class WrapperResponse(BaseModel):
    """The wrapper configured for a routing key, if any."""

    protocol: str | None = None


class SetPairWrapperRequest(BaseModel):
    token_a: Address = Field(alias="tokenA")
    token_b: Address = Field(alias="tokenB")
    protocol: str | None = Field(description="Protocol name of a known wrapper.")

    model_config = {"populate_by_name": True}


class SetTokenWrapperRequest(BaseModel):
    token: Address
    protocol: str | None = Field(description="Protocol name of a known wrapper.")


class SetDefaultWrapperRequest(BaseModel):
    protocol: str | None = Field(description="Protocol name of a known wrapper.")


class ErrorResponse(BaseModel):
    error: str = Field(description="Error kind, e.g. PairNotFound.")
    detail: str


__all__ = [
    "QuoteResponse",
    "WrapperResponse",
    "SetPairWrapperRequest",
    "SetTokenWrapperRequest",
    "SetDefaultWrapperRequest",
    "ErrorResponse",
]
