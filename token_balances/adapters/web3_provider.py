import logging
from typing import Optional

from web3 import AsyncWeb3
from web3.providers import AsyncHTTPProvider

from token_balances.ports import Network, Provider

log = logging.getLogger("web3_provider")

# network names as ethers reports them; anything else is "unknown"
CHAIN_NAMES = {
    1: "homestead",
    5: "goerli",
    10: "optimism",
    56: "bnb",
    100: "xdai",
    137: "matic",
    250: "fantom",
    8453: "base",
    42161: "arbitrum",
    43114: "avalanche",
    11155111: "sepolia",
}


class Web3Provider(Provider):
    """Provider backed by a single AsyncWeb3 client with its own aiohttp session."""

    def __init__(self, rpc_url: str, request_timeout: float = 30.0) -> None:
        if not rpc_url or not rpc_url.strip():
            raise ValueError("Web3Provider: empty RPC URL")
        self._timeout = float(request_timeout)
        self.w3 = AsyncWeb3(AsyncHTTPProvider(rpc_url.strip(), request_kwargs={"timeout": self._timeout}))
        self._network: Optional[Network] = None
        log.info(f"Web3Provider initialized (timeout={self._timeout:.1f}s)")

    async def call(self, to: str, data: bytes) -> bytes:
        return bytes(await self.w3.eth.call({"to": to, "data": data}))

    async def get_network(self) -> Network:
        if self._network is None:
            chain_id = int(await self.w3.eth.chain_id)
            self._network = Network(chain_id=chain_id, name=CHAIN_NAMES.get(chain_id, "unknown"))
        return self._network

    async def resolve_name(self, name: str) -> Optional[str]:
        return await self.w3.ens.address(name)

    async def aclose(self) -> None:
        await self.w3.provider.disconnect()
        log.info("Web3Provider: session closed")
