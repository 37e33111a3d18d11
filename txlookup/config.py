from pydantic import field_validator
from pydantic_settings import BaseSettings

from txlookup.chains import CHAINS, Chain


class Settings(BaseSettings):
    chain_id: int = 260
    rpc_url_override: str = ""
    rpc_timeout: float = 5.0

    @field_validator("chain_id")
    @classmethod
    def known_chain(cls, value: int) -> int:
        if value not in CHAINS:
            raise ValueError(f"Unknown chain id {value}. Known: {', '.join(map(str, sorted(CHAINS)))}")
        return value

    @property
    def chain(self) -> Chain:
        return CHAINS[self.chain_id]

    @property
    def rpc_url(self) -> str:
        if self.rpc_url_override:
            return self.rpc_url_override
        return self.chain.default_rpc_url

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
