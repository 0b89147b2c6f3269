# services/balances.py
from __future__ import annotations

import asyncio
import logging
from time import monotonic
from typing import Sequence

from tqdm.asyncio import tqdm_asyncio

from token_balances.adapters.multicall import MULTICALL3, MulticallClient
from token_balances.config import AppConfig
from token_balances.ports import AssociatedCallResult, BalancesByContract, Provider
from token_balances.services.correlator import (
    build_calls_context, calls_of, contexts_of, get_non_zero_results, result_data_by_contract,
)
from token_balances.services.decoder import decode_meta_results
from token_balances.services.encoder import encode_call
from token_balances.services.formatter import balances_by_contract
from token_balances.services.resolver import get_address
from token_balances.utils.iohelpers import chunk

log = logging.getLogger("balances")

DEFAULT_CHUNK_SIZE = 500


async def _fetch_chunk(mc: MulticallClient, address: str, contract_addresses: Sequence[str]) -> list[AssociatedCallResult]:
    calls = [encode_call(c, "balanceOf", [address]) for c in contract_addresses]
    res = await mc.try_block_and_aggregate(calls)
    return get_non_zero_results(res.results, contract_addresses)


async def fetch_raw_balances(
        address: str,
        contract_addresses: Sequence[str],
        provider: Provider,
        multicall_address: str = MULTICALL3,
) -> list[AssociatedCallResult]:
    """balanceOf(address) on every contract in a single multicall; zero balances are dropped."""
    return await _fetch_chunk(MulticallClient(provider, multicall_address), address, contract_addresses)


async def get_token_balances(
        address_or_name: str,
        contract_addresses: Sequence[str],
        provider: Provider,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        multicall_address: str = MULTICALL3,
        decimals_fallback: int = 18,
        progress: bool = False,
) -> BalancesByContract:
    """
    Non-zero ERC-20 balances of `address_or_name` keyed by contract address.

    Balances are read with one multicall per chunk of `chunk_size` contracts, all
    chunks concurrently. Metadata (symbol, decimals, name) for the contracts that
    hold a balance is then read with one more multicall, which is not chunked.
    A failed network call fails the whole request.
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be a positive integer, got {chunk_size}")

    started = monotonic()
    address = await get_address(address_or_name, provider)
    mc = MulticallClient(provider, multicall_address)

    chunks = chunk(list(contract_addresses), chunk_size)
    jobs = [_fetch_chunk(mc, address, c) for c in chunks]
    if progress:
        per_chunk = await tqdm_asyncio.gather(*jobs, desc="Fetching balances", total=len(jobs))
    else:
        per_chunk = await asyncio.gather(*jobs)
    raw_results = [r for results in per_chunk for r in results]
    log.info("%s: %d/%d contracts with a balance (%d chunks)",
             address, len(raw_results), len(contract_addresses), len(chunks))

    raw_balances = result_data_by_contract(raw_results)
    envelopes = build_calls_context(raw_results)
    meta_res = await mc.try_block_and_aggregate(calls_of(envelopes))
    decoded = decode_meta_results(meta_res.results, contexts_of(envelopes))
    for warning in decoded.warnings:
        log.info(warning)

    balances = balances_by_contract(decoded.meta, raw_balances, decimals_fallback=decimals_fallback)
    log.info("Balances for %s done in %.1fs", address, monotonic() - started)
    return balances


class TokenBalancesService:
    """get_token_balances bound to a provider and the application config."""

    def __init__(self, provider: Provider, cfg: AppConfig) -> None:
        self._provider = provider
        self._cfg = cfg

    async def get_balances(self, address_or_name: str, contract_addresses: Sequence[str]) -> BalancesByContract:
        return await get_token_balances(
            address_or_name,
            contract_addresses,
            self._provider,
            chunk_size=self._cfg.chunk_size,
            multicall_address=self._cfg.multicall_address,
            decimals_fallback=self._cfg.decimals_fallback,
            progress=self._cfg.progress,
        )
