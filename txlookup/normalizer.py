"""
Wire-to-domain transaction normalization.

Numeric fields arrive from the node as hex quantities and are parsed into
plain ints so that large gas, value and nonce figures stay exact. Everything
else is copied through as-is.
"""

from __future__ import annotations

from txlookup.encoding import hex_to_int
from txlookup.models.transaction import RawTransaction, Transaction

REQUIRED_QUANTITIES = ("blockNumber", "gas", "gasPrice", "nonce", "transactionIndex", "v", "value")
OPTIONAL_QUANTITIES = ("maxFeePerGas", "maxPriorityFeePerGas")
PASSTHROUGH_FIELDS = ("accessList", "blockHash", "from", "hash", "input", "r", "s", "to")


def _optional_quantity(value: str | None) -> int | None:
    # "0x0" and "" count as absent, same as a missing key
    if not value:
        return None
    parsed = hex_to_int(value)
    return parsed or None


def normalize_transaction(raw: RawTransaction) -> Transaction:
    fields: dict = {name: raw.get(name) for name in PASSTHROUGH_FIELDS}
    for name in REQUIRED_QUANTITIES:
        fields[name] = hex_to_int(raw.get(name))
    for name in OPTIONAL_QUANTITIES:
        fields[name] = _optional_quantity(raw.get(name))
    return Transaction.model_validate(fields)
