import os
from pydantic import BaseModel, ConfigDict, Field

from token_balances.adapters.multicall import MULTICALL3


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() != "false"


class AppConfig(BaseModel):
    model_config = ConfigDict(validate_default=True)

    rpc_url: str = Field(default_factory=lambda: os.getenv("RPC_URL", "https://rpc.mevblocker.io"))
    address_or_name: str = Field(default_factory=lambda: os.getenv("ADDRESS", "").strip())

    tokens_file: str = Field(default_factory=lambda: os.getenv("TOKENS_FILE", "").strip())
    tokens_url: str = Field(default_factory=lambda: os.getenv("TOKENS_URL", "").strip())

    chunk_size: int = Field(default_factory=lambda: os.getenv("CHUNK_SIZE", "500"), ge=1)
    multicall_address: str = Field(default_factory=lambda: os.getenv("MULTICALL_ADDRESS", MULTICALL3))
    decimals_fallback: int = Field(default_factory=lambda: os.getenv("DECIMALS_FALLBACK", "18"), ge=0)
    call_timeout: float = Field(default_factory=lambda: os.getenv("CALL_TIMEOUT", "30.0"), gt=0)

    out_dir: str = Field(default_factory=lambda: os.getenv("OUT_DIR", "out"))
    write_csv: bool = Field(default_factory=lambda: _flag("CSV", "false"))
    progress: bool = Field(default_factory=lambda: _flag("PROGRESS", "true"))
    debug: bool = Field(default_factory=lambda: _flag("DEBUG", "false"))


def load_env() -> AppConfig:
    from dotenv import load_dotenv
    load_dotenv()
    return AppConfig()
