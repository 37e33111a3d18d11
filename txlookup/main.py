import logging

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from txlookup.config import settings
from txlookup.errors import RpcError, TransactionNotFoundError
from txlookup.fetchers import fetch_transaction
from txlookup.models.lookup import ByHash
from txlookup.transport import HttpTransport, Transport
from txlookup.validation.input import parse_block_lookup, validate_index, validate_tx_hash

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("txlookup.main")

app = FastAPI(title="Transaction Lookup API", version="0.1.0")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    logger.info(
        "%s %s -> %s",
        request.method,
        request.url.path,
        response.status_code,
    )
    return response


@app.exception_handler(TransactionNotFoundError)
async def not_found_handler(request: Request, exc: TransactionNotFoundError):
    return JSONResponse(
        status_code=404,
        content={"error": exc.kind, "message": str(exc), "lookup": exc.lookup},
    )


@app.exception_handler(RpcError)
async def rpc_error_handler(request: Request, exc: RpcError):
    logger.error("Upstream RPC error on %s: %s", request.url.path, exc.details)
    return JSONResponse(
        status_code=502,
        content={"error": exc.kind, "message": str(exc), "code": exc.code},
    )


@app.exception_handler(httpx.HTTPStatusError)
async def upstream_status_handler(request: Request, exc: httpx.HTTPStatusError):
    status = exc.response.status_code
    logger.error("RPC endpoint answered HTTP %s on %s", status, request.url.path)
    return JSONResponse(
        status_code=502,
        content={"error": "UpstreamHTTPError", "message": f"RPC endpoint returned HTTP {status}"},
    )


@app.exception_handler(httpx.TimeoutException)
async def timeout_handler(request: Request, exc: httpx.TimeoutException):
    logger.error("RPC request timed out on %s", request.url.path)
    return JSONResponse(status_code=504, content={"detail": "RPC request timed out"})


def get_transport() -> Transport:
    return HttpTransport(settings.rpc_url, timeout=settings.rpc_timeout)


@app.get("/v1/transaction/{tx_hash}")
async def transaction_by_hash(tx_hash: str, transport: Transport = Depends(get_transport)):
    tx_hash = validate_tx_hash(tx_hash)
    logger.info("Lookup by hash %s", tx_hash[:12])
    tx = await fetch_transaction(transport, ByHash(hash=tx_hash))
    return tx.model_dump(by_alias=True)


@app.get("/v1/block/{block}/transaction/{index}")
async def transaction_by_block(
    block: str,
    index: str,
    transport: Transport = Depends(get_transport),
):
    lookup = parse_block_lookup(block, validate_index(index))
    logger.info("Lookup by %s: %s at index %s", lookup.kind, block[:12], lookup.index)
    tx = await fetch_transaction(transport, lookup)
    return tx.model_dump(by_alias=True)
