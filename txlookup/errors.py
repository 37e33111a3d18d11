from __future__ import annotations

from typing import Any

from txlookup.models.lookup import LookupRequest


class BaseError(Exception):
    kind = "BaseError"

    def __init__(self, human_message: str, details: str = ""):
        super().__init__(human_message)
        self.human_message = human_message
        self.details = details


class RpcError(BaseError):
    """The node answered with a JSON-RPC ``error`` object."""

    kind = "RpcError"

    def __init__(self, error: Any):
        code = error.get("code") if isinstance(error, dict) else None
        message = error.get("message") if isinstance(error, dict) else str(error)
        super().__init__(f"RPC error: {message}", details=str(error))
        self.code = code
        self.error = error


class TransactionNotFoundError(BaseError):
    kind = "TransactionNotFound"

    def __init__(
        self,
        *,
        hash: str | None = None,
        block_hash: str | None = None,
        block_number: int | None = None,
        block_tag: str | None = None,
        index: int | None = None,
    ):
        identifier = "Transaction"
        if block_hash and index is not None:
            identifier = f'Transaction at block hash "{block_hash}" at index "{index}"'
        if block_tag and index is not None:
            identifier = f'Transaction at block time "{block_tag}" at index "{index}"'
        if block_number is not None and index is not None:
            identifier = f'Transaction at block number "{block_number}" at index "{index}"'
        if hash:
            identifier = f'Transaction with hash "{hash}"'

        super().__init__(f"{identifier} could not be found.", details="transaction not found")
        self.hash = hash
        self.block_hash = block_hash
        self.block_number = block_number
        self.block_tag = block_tag
        self.index = index

    @classmethod
    def from_request(cls, request: LookupRequest) -> TransactionNotFoundError:
        return cls(**request.model_dump(exclude={"kind"}))

    @property
    def lookup(self) -> dict[str, Any]:
        fields = {
            "hash": self.hash,
            "block_hash": self.block_hash,
            "block_number": self.block_number,
            "block_tag": self.block_tag,
            "index": self.index,
        }
        return {key: value for key, value in fields.items() if value is not None}
