"""API endpoints for quoting and routing configuration."""

import asyncio
from functools import partial
from typing import Any

import structlog
from fastapi import APIRouter, Depends, Header, Path, Query

from relayer.models.api import (
    ErrorResponse,
    QuoteResponse,
    SetDefaultWrapperRequest,
    SetPairWrapperRequest,
    SetTokenWrapperRequest,
    WrapperResponse,
)
from relayer.models.types import UINT256_MAX
from relayer.service import RelayerService, get_default_service
from relayer.wrappers.base import ProtocolWrapper

logger = structlog.get_logger()

router = APIRouter()

ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"

QUOTE_ERRORS: dict[int | str, dict[str, Any]] = {
    status: {"model": ErrorResponse} for status in (400, 404, 409, 502)
}
ROUTING_ERRORS: dict[int | str, dict[str, Any]] = {
    status: {"model": ErrorResponse} for status in (400, 403)
}


def get_service() -> RelayerService:
    """Dependency provider for the relayer service.

    Override this in tests to inject a configured service:
        app.dependency_overrides[get_service] = lambda: service
    """
    return get_default_service()


def _wrapper_response(wrapper: ProtocolWrapper | None) -> WrapperResponse:
    return WrapperResponse(protocol=wrapper.protocol_name() if wrapper is not None else None)


def _lookup_wrapper(service: RelayerService, protocol: str | None) -> ProtocolWrapper | None:
    """Resolve a protocol name to a known wrapper.

    Unknown or missing names resolve to None, which the relayer rejects as
    InvalidWrapper once the caller has been authorized.
    """
    if not protocol:
        return None
    wrapper = service.get_wrapper(protocol)
    if wrapper is None:
        logger.warning("unknown_wrapper_requested", protocol=protocol)
    return wrapper


@router.get("/quote", response_model_by_alias=True, responses=QUOTE_ERRORS)
async def quote(
    token_in: str = Query(alias="tokenIn", pattern=ADDRESS_PATTERN),
    amount_in: int = Query(alias="amountIn", ge=0, le=UINT256_MAX),
    token_out: str = Query(alias="tokenOut", pattern=ADDRESS_PATTERN),
    service: RelayerService = Depends(get_service),
) -> QuoteResponse:
    """Quote amountIn of tokenIn in terms of tokenOut.

    Pool reads may be network calls, so routing and quoting run in the
    default executor.
    """
    loop = asyncio.get_running_loop()
    amount_out, selection = await loop.run_in_executor(
        None, partial(service.relayer.quote_with_route, token_in, amount_in, token_out)
    )

    logger.info(
        "quote_served",
        token_in=token_in[-8:],
        token_out=token_out[-8:],
        amount_in=amount_in,
        amount_out=amount_out,
        tier=selection.tier.value,
    )

    return QuoteResponse(
        token_in=token_in.lower(),
        token_out=token_out.lower(),
        amount_in=amount_in,
        amount_out=amount_out,
        protocol=selection.wrapper.protocol_name(),
        tier=selection.tier,
    )


@router.get("/routes/pair/{token_a}/{token_b}")
def get_pair_route(
    token_a: str = Path(pattern=ADDRESS_PATTERN),
    token_b: str = Path(pattern=ADDRESS_PATTERN),
    service: RelayerService = Depends(get_service),
) -> WrapperResponse:
    return _wrapper_response(service.relayer.get_pair_wrapper(token_a, token_b))


@router.get("/routes/token/{token}")
def get_token_route(
    token: str = Path(pattern=ADDRESS_PATTERN),
    service: RelayerService = Depends(get_service),
) -> WrapperResponse:
    return _wrapper_response(service.relayer.get_token_wrapper(token))


@router.get("/routes/default")
def get_default_route(service: RelayerService = Depends(get_service)) -> WrapperResponse:
    return _wrapper_response(service.relayer.get_default_wrapper())


@router.put("/routes/pair", responses=ROUTING_ERRORS)
def set_pair_route(
    request: SetPairWrapperRequest,
    caller: str = Header(alias="X-Caller"),
    service: RelayerService = Depends(get_service),
) -> WrapperResponse:
    """Route the unordered pair to the named wrapper (governor only)."""
    service.relayer.set_pair_wrapper(
        caller,
        request.token_a,
        request.token_b,
        _lookup_wrapper(service, request.protocol),
    )
    return _wrapper_response(service.relayer.get_pair_wrapper(request.token_a, request.token_b))


@router.put("/routes/token", responses=ROUTING_ERRORS)
def set_token_route(
    request: SetTokenWrapperRequest,
    caller: str = Header(alias="X-Caller"),
    service: RelayerService = Depends(get_service),
) -> WrapperResponse:
    """Route quotes selling `token` to the named wrapper (governor only)."""
    service.relayer.set_token_wrapper(
        caller, request.token, _lookup_wrapper(service, request.protocol)
    )
    return _wrapper_response(service.relayer.get_token_wrapper(request.token))


@router.put("/routes/default", responses=ROUTING_ERRORS)
def set_default_route(
    request: SetDefaultWrapperRequest,
    caller: str = Header(alias="X-Caller"),
    service: RelayerService = Depends(get_service),
) -> WrapperResponse:
    """Set the fallback wrapper for unmatched quotes (governor only)."""
    service.relayer.set_default_wrapper(caller, _lookup_wrapper(service, request.protocol))
    return _wrapper_response(service.relayer.get_default_wrapper())
