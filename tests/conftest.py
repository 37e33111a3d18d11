import pytest

TX_HASH = "0x" + "ab" * 32
BLOCK_HASH = "0x" + "cd" * 32


# --- Mock RPC responses ---

RAW_TX = {
    "accessList": [],
    "blockHash": BLOCK_HASH,
    "blockNumber": "0x1b4",  # 436
    "from": "0x" + "11" * 20,
    "gas": "0x5208",  # 21000
    "gasPrice": "0x3b9aca00",  # 1 gwei
    "hash": TX_HASH,
    "input": "0x",
    "maxFeePerGas": "0x77359400",  # 2 gwei
    "maxPriorityFeePerGas": "0x3b9aca00",
    "nonce": "0x2a",
    "r": "0x" + "01" * 32,
    "s": "0x" + "02" * 32,
    "to": "0x" + "22" * 20,
    "transactionIndex": "0x2",
    "type": "0x2",
    "v": "0x1",
    "value": "0xde0b6b3a7640000",  # 1 ETH
}

RAW_LEGACY_TX = {
    "blockHash": BLOCK_HASH,
    "blockNumber": "0x1b4",
    "from": "0x" + "11" * 20,
    "gas": "0x5208",
    "gasPrice": "0x3b9aca00",
    "hash": TX_HASH,
    "input": "0x",
    "nonce": "0x0",
    "r": "0x" + "01" * 32,
    "s": "0x" + "02" * 32,
    "to": None,
    "transactionIndex": "0x0",
    "v": "0x1c",
    "value": "0x0",
}

MOCK_TX = {"jsonrpc": "2.0", "id": 1, "result": RAW_TX}
MOCK_TX_NULL = {"jsonrpc": "2.0", "id": 1, "result": None}
MOCK_RPC_ERROR = {
    "jsonrpc": "2.0",
    "id": 1,
    "error": {"code": -32602, "message": "invalid argument 0: hex string has length 2, want 64"},
}


class FakeTransport:
    """Records every request and replays a fixed result."""

    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls: list[tuple[str, list]] = []

    async def request(self, method: str, params: list):
        self.calls.append((method, params))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def raw_tx() -> dict:
    return dict(RAW_TX)
