from __future__ import annotations

from pydantic import BaseModel


class NativeCurrency(BaseModel):
    name: str
    symbol: str
    decimals: int = 18


class RpcUrls(BaseModel):
    http: list[str]
    websocket: list[str] | None = None


class Chain(BaseModel):
    id: int
    name: str
    network: str
    native_currency: NativeCurrency
    rpc_urls: dict[str, RpcUrls]
    testnet: bool = False

    @property
    def default_rpc_url(self) -> str:
        return self.rpc_urls["default"].http[0]


zksync_in_memory_node = Chain(
    id=260,
    name="zkSync InMemory Node",
    network="zksync-in-memory-node",
    native_currency=NativeCurrency(name="Ether", symbol="ETH", decimals=18),
    rpc_urls={"default": RpcUrls(http=["http://localhost:8011"])},
    testnet=True,
)

CHAINS: dict[int, Chain] = {
    zksync_in_memory_node.id: zksync_in_memory_node,
}
