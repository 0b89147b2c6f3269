"""
Shared fixtures: a Provider that answers Multicall3 tryBlockAndAggregate payloads from
a (contract, method) table, so the whole pipeline runs without a node.
"""
from typing import Optional

import pytest
from eth_abi import decode, encode

from token_balances.adapters.multicall import TRY_BLOCK_AND_AGGREGATE_SELECTOR
from token_balances.ports import Network
from token_balances.services.encoder import SELECTORS

METHODS_BY_SELECTOR = {sel: name for name, sel in SELECTORS.items()}

HOLDER = "0x9e0543517f8e678a5c307161405cf644c2dbfbb1"
UNI = "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984"
ZRX = "0xE41d2489571d322189246DaFA5ebDe1F4699F498"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
RPL = "0xD33526068D116cE69F19A9ee46F0bd304F21A51f"
SAI = "0x89d24A6b4CcB1B6fAA2625fE562bDD9a23260359"


def uint(n: int) -> bytes:
    return encode(["uint256"], [n])


def string(s: str) -> bytes:
    return encode(["string"], [s])


def bytes32(s: str) -> bytes:
    return s.encode("utf-8").ljust(32, b"\x00")


def token(symbol, decimals, name, balance) -> dict:
    """Responses for one ERC-20 contract; values are raw return data or None for a revert."""
    return {"symbol": symbol, "decimals": decimals, "name": name, "balanceOf": balance}


class FakeProvider:
    def __init__(
            self,
            tokens: Optional[dict] = None,
            chain_id: int = 1,
            name: str = "homestead",
            ens: Optional[dict] = None,
            error: Optional[Exception] = None,
    ):
        self.tokens = {addr.lower(): responses for addr, responses in (tokens or {}).items()}
        self.network = Network(chain_id=chain_id, name=name)
        self.ens = ens or {}
        self.error = error
        self.requests: list[tuple[str, bytes]] = []
        self.batches: list[list[tuple[str, str]]] = []
        self.network_lookups = 0
        self.resolved: list[str] = []

    async def call(self, to: str, data: bytes) -> bytes:
        self.requests.append((to, data))
        if self.error is not None:
            raise self.error
        assert data[:4] == TRY_BLOCK_AND_AGGREGATE_SELECTOR
        require_success, calls = decode(["bool", "(address,bytes)[]"], data[4:])
        assert require_success is False

        batch, results = [], []
        for target, call_data in calls:
            method = METHODS_BY_SELECTOR[bytes(call_data[:4])]
            batch.append((target.lower(), method))
            ret = self.tokens.get(target.lower(), {}).get(method)
            results.append((False, b"") if ret is None else (True, ret))
        self.batches.append(batch)
        return encode(["uint256", "bytes32", "(bool,bytes)[]"], [1337, b"\x11" * 32, results])

    async def get_network(self) -> Network:
        self.network_lookups += 1
        return self.network

    async def resolve_name(self, name: str) -> Optional[str]:
        self.resolved.append(name)
        return self.ens.get(name)


@pytest.fixture
def tokens() -> dict:
    return {
        UNI: token(string("UNI"), uint(18), string("Uniswap"), uint(0xb50ae81b7c121a29)),
        ZRX: token(string("ZRX"), uint(18), string("0x Protocol Token"), uint(0x27ebcbd6cf1e63a9b)),
        WETH: token(string("WETH"), uint(18), string("Wrapped Ether"), uint(0)),
        RPL: token(string("RPL"), uint(18), string("Rocket Pool"), None),
    }


@pytest.fixture
def provider(tokens) -> FakeProvider:
    return FakeProvider(tokens)
