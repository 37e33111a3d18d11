from __future__ import annotations

from typing import Annotated, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

BlockTag = Literal["latest", "earliest", "pending", "safe", "finalized"]

BLOCK_TAGS: frozenset[str] = frozenset(get_args(BlockTag))


class _Lookup(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ByHash(_Lookup):
    kind: Literal["hash"] = "hash"
    hash: str


class ByBlockHash(_Lookup):
    kind: Literal["block_hash"] = "block_hash"
    block_hash: str
    index: int = Field(ge=0)


class ByBlockNumber(_Lookup):
    kind: Literal["block_number"] = "block_number"
    block_number: int = Field(ge=0)
    index: int = Field(ge=0)


class ByBlockTag(_Lookup):
    kind: Literal["block_tag"] = "block_tag"
    block_tag: BlockTag = "latest"
    index: int = Field(ge=0)


LookupRequest = Annotated[
    Union[ByHash, ByBlockHash, ByBlockNumber, ByBlockTag],
    Field(discriminator="kind"),
]

_lookup_adapter: TypeAdapter[LookupRequest] = TypeAdapter(LookupRequest)


def parse_lookup(data: dict) -> LookupRequest:
    """Validate a ``{"kind": ..., ...}`` mapping into one of the lookup variants."""
    return _lookup_adapter.validate_python(data)


def lookup_request(
    hash: str | None = None,
    block_hash: str | None = None,
    block_number: int | None = None,
    block_tag: BlockTag | None = None,
    index: int | None = None,
) -> LookupRequest:
    """Build a lookup from loose keyword arguments.

    Identifiers are considered in a fixed order (hash, block hash, block
    number, block tag) and the first one supplied wins; the others are
    dropped. With no identifier at all the lookup targets the ``latest``
    block. Every variant except ``ByHash`` requires ``index``.
    """
    if hash:
        return ByHash(hash=hash)
    if block_hash:
        return ByBlockHash(block_hash=block_hash, index=index)
    if block_number is not None:
        return ByBlockNumber(block_number=block_number, index=index)
    return ByBlockTag(block_tag=block_tag or "latest", index=index)
