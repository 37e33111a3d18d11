import re

from fastapi import HTTPException

from txlookup.models.lookup import (
    BLOCK_TAGS,
    ByBlockHash,
    ByBlockNumber,
    ByBlockTag,
    LookupRequest,
)

HASH_32_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")
HEX_NUMBER_RE = re.compile(r"^0x[0-9a-fA-F]{1,64}$")
DECIMAL_RE = re.compile(r"^[0-9]+$")


def validate_tx_hash(tx_hash: str) -> str:
    tx_hash = tx_hash.strip()
    if not HASH_32_RE.match(tx_hash):
        raise HTTPException(
            status_code=400,
            detail="Invalid tx hash. Expected 66-char hex string starting with 0x.",
        )
    return tx_hash


def validate_index(index: str) -> int:
    index = index.strip()
    if not DECIMAL_RE.match(index):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid transaction index '{index}'. Expected a non-negative integer.",
        )
    return int(index)


def parse_block_lookup(block: str, index: int) -> LookupRequest:
    """Turn a block path segment into a lookup.

    Accepts a 32-byte block hash, a decimal or 0x-prefixed block number,
    or one of the block tags.
    """
    block = block.strip()

    if HASH_32_RE.match(block):
        return ByBlockHash(block_hash=block, index=index)
    if HEX_NUMBER_RE.match(block):
        return ByBlockNumber(block_number=int(block, 16), index=index)
    if DECIMAL_RE.match(block):
        return ByBlockNumber(block_number=int(block), index=index)
    if block.lower() in BLOCK_TAGS:
        return ByBlockTag(block_tag=block.lower(), index=index)

    raise HTTPException(
        status_code=400,
        detail=(
            f"Invalid block '{block}'. Expected a block hash, a block number "
            f"or one of: {', '.join(sorted(BLOCK_TAGS))}"
        ),
    )
