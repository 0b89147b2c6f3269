import pytest

from token_balances.adapters.web3_provider import Web3Provider
from token_balances.ports import Network


class FakeEth:
    def __init__(self, chain_id: int):
        self._chain_id = chain_id
        self.lookups = 0
        self.sent = []

    @property
    async def chain_id(self) -> int:
        self.lookups += 1
        return self._chain_id

    async def call(self, tx):
        self.sent.append(tx)
        return b"\x01\x02"


class FakeW3:
    def __init__(self, chain_id: int):
        self.eth = FakeEth(chain_id)


def make_provider(chain_id: int) -> Web3Provider:
    provider = Web3Provider("http://localhost:8545", request_timeout=5)
    provider.w3 = FakeW3(chain_id)
    return provider


def test_empty_rpc_url():
    with pytest.raises(ValueError):
        Web3Provider(" ")


@pytest.mark.asyncio
async def test_network_names():
    assert await make_provider(1).get_network() == Network(1, "homestead")
    assert (await make_provider(137).get_network()).display_name == "Matic"
    assert await make_provider(424242).get_network() == Network(424242, "unknown")


@pytest.mark.asyncio
async def test_network_is_looked_up_once():
    provider = make_provider(1)

    await provider.get_network()
    await provider.get_network()

    assert provider.w3.eth.lookups == 1


@pytest.mark.asyncio
async def test_call_returns_bytes():
    provider = make_provider(1)

    assert await provider.call("0xcA11bde05977b3631167028862bE2a173976CA11", b"\x39") == b"\x01\x02"
    assert provider.w3.eth.sent == [{"to": "0xcA11bde05977b3631167028862bE2a173976CA11", "data": b"\x39"}]
