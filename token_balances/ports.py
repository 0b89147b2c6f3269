from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, TypedDict


@dataclass(frozen=True)
class Call:
    target: str
    call_data: bytes

    def as_tuple(self) -> tuple[str, bytes]:
        return self.target, self.call_data


@dataclass(frozen=True)
class CallResult:
    success: bool
    return_data: bytes


@dataclass(frozen=True)
class AssociatedCallResult:
    contract_address: str
    success: bool
    return_data: bytes


@dataclass(frozen=True)
class CallContext:
    contract_address: str
    method_name: str


@dataclass(frozen=True)
class CallEnvelope:
    """A call together with what its positional result decodes as."""
    call: Call
    context: CallContext


@dataclass(frozen=True)
class AggregateResult:
    block_number: int
    block_hash: bytes
    results: list[CallResult] = field(default_factory=list)


@dataclass(frozen=True)
class Network:
    chain_id: int
    name: str

    @property
    def display_name(self) -> str:
        return self.name[:1].upper() + self.name[1:]


@dataclass(frozen=True)
class Decoded:
    value: Any
    fallback: bool = False


@dataclass(frozen=True)
class MetaDecodeResult:
    meta: dict[str, TokenMeta]
    warnings: list[str] = field(default_factory=list)


class TokenMeta(TypedDict):
    symbol: str
    decimals: int
    name: str


class TokenBalance(TokenMeta):
    balanceOf: str


BalancesByContract = dict[str, TokenBalance]


class Provider(Protocol):
    async def call(self, to: str, data: bytes) -> bytes: ...

    async def get_network(self) -> Network: ...

    async def resolve_name(self, name: str) -> Optional[str]: ...
