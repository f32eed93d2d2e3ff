"""FastAPI application for the quote relayer."""

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from relayer import config
from relayer.api.endpoints import router
from relayer.errors import (
    InsufficientInput,
    InsufficientLiquidity,
    InvalidToken,
    InvalidWrapper,
    NoWrapperFound,
    PairNotFound,
    RelayerError,
    Unauthorized,
)
from relayer.pools.rpc import RpcError

# HTTP status per error kind; anything unlisted is a 400
ERROR_STATUS: dict[type[RelayerError], int] = {
    InvalidToken: 400,
    InvalidWrapper: 400,
    InsufficientInput: 400,
    Unauthorized: 403,
    PairNotFound: 404,
    NoWrapperFound: 404,
    InsufficientLiquidity: 409,
}

app = FastAPI(
    title="Quote Relayer",
    description="Routes swap quotes to protocol wrappers by pair, token and default rules",
    version="0.1.0",
)


@app.exception_handler(RelayerError)
async def relayer_error_handler(_request: Request, exc: RelayerError) -> JSONResponse:
    """Translate relayer errors into JSON error responses."""
    status = ERROR_STATUS.get(type(exc), 400)
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


@app.exception_handler(RpcError)
async def rpc_error_handler(_request: Request, exc: RpcError) -> JSONResponse:
    """Upstream node failures surface as a bad gateway."""
    return JSONResponse(status_code=502, content={"error": "RpcError", "detail": str(exc)})


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "rpc_enabled": config.RPC_URL is not None}


def run() -> None:
    """Run the relayer API server.

    Configuration via environment variables:
    - RELAYER_HOST: Host to bind to (default: 0.0.0.0)
    - RELAYER_PORT: Port to bind to (default: 8000)
    - RELAYER_DEBUG: Enable debug/reload mode (default: false)
    """
    uvicorn.run(
        "relayer.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=config.DEBUG,
    )


if __name__ == "__main__":
    run()
