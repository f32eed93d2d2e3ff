"""Runtime configuration from environment variables."""

import os

from relayer.constants import UNISWAP_V2_FACTORY

# HTTP server
HOST = os.environ.get("RELAYER_HOST", "0.0.0.0")
PORT = int(os.environ.get("RELAYER_PORT", "8000"))
DEBUG = os.environ.get("RELAYER_DEBUG", "false").lower() in ("true", "1", "yes")

# Pool reserves are read over JSON-RPC when an endpoint is configured,
# otherwise from an in-memory registry that starts empty
RPC_URL = os.environ.get("RELAYER_RPC_URL")
RPC_TIMEOUT = float(os.environ.get("RELAYER_RPC_TIMEOUT", "10"))
V2_FACTORY = os.environ.get("RELAYER_V2_FACTORY", UNISWAP_V2_FACTORY)

# Access control (comma-separated addresses)
ADMIN = os.environ.get("RELAYER_ADMIN")
GOVERNORS = [g.strip() for g in os.environ.get("RELAYER_GOVERNORS", "").split(",") if g.strip()]
