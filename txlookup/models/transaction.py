from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

RawTransaction = dict[str, Any]


class Transaction(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    access_list: list[Any] | None = None
    block_hash: str | None = None
    block_number: int
    from_: str = Field(alias="from")
    gas: int
    gas_price: int
    hash: str
    input: str | None = None
    max_fee_per_gas: int | None = None
    max_priority_fee_per_gas: int | None = None
    nonce: int
    r: str | None = None
    s: str | None = None
    to: str | None = None
    transaction_index: int
    v: int
    value: int
