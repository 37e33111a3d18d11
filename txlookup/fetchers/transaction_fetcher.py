import logging

from txlookup.encoding import number_to_hex
from txlookup.errors import TransactionNotFoundError
from txlookup.models.lookup import ByBlockHash, ByBlockNumber, ByBlockTag, ByHash, LookupRequest
from txlookup.models.transaction import Transaction
from txlookup.normalizer import normalize_transaction
from txlookup.transport import Transport

logger = logging.getLogger(__name__)


def _by_hash(request: ByHash) -> tuple[str, list]:
    return "eth_getTransactionByHash", [request.hash]


def _by_block_hash(request: ByBlockHash) -> tuple[str, list]:
    return "eth_getTransactionByBlockHashAndIndex", [
        request.block_hash,
        number_to_hex(request.index),
    ]


def _by_block_number(request: ByBlockNumber) -> tuple[str, list]:
    return "eth_getTransactionByBlockNumberAndIndex", [
        number_to_hex(request.block_number),
        number_to_hex(request.index),
    ]


def _by_block_tag(request: ByBlockTag) -> tuple[str, list]:
    return "eth_getTransactionByBlockNumberAndIndex", [
        request.block_tag,
        number_to_hex(request.index),
    ]


_QUERIES = {
    "hash": _by_hash,
    "block_hash": _by_block_hash,
    "block_number": _by_block_number,
    "block_tag": _by_block_tag,
}


def build_query(request: LookupRequest) -> tuple[str, list] | None:
    query = _QUERIES.get(request.kind)
    if query is None:
        return None
    return query(request)


async def fetch_transaction(transport: Transport, request: LookupRequest) -> Transaction:
    query = build_query(request)

    raw = None
    if query is not None:
        method, params = query
        logger.info("RPC %s params=%s", method, [str(p)[:12] for p in params])
        raw = await transport.request(method, params)

    if not raw:
        logger.warning("RPC returned no transaction for %s lookup", request.kind)
        raise TransactionNotFoundError.from_request(request)

    return normalize_transaction(raw)
