# services/correlator.py
from typing import Sequence

from token_balances.ports import AssociatedCallResult, Call, CallContext, CallEnvelope, CallResult
from token_balances.services.encoder import envelope

ZERO_WORD = b"\x00" * 32
META_METHODS = ("symbol", "decimals", "name")


def associate(results: Sequence[CallResult], contract_addresses: Sequence[str]) -> list[AssociatedCallResult]:
    if len(results) != len(contract_addresses):
        raise ValueError(f"{len(results)} results for {len(contract_addresses)} contracts")
    return [
        AssociatedCallResult(contract_address=addr, success=res.success, return_data=res.return_data)
        for addr, res in zip(contract_addresses, results)
    ]


def _has_balance(result: AssociatedCallResult) -> bool:
    # reverted, empty or oddly sized data counts as no balance
    data = result.return_data
    return result.success and len(data) == len(ZERO_WORD) and data != ZERO_WORD


def get_non_zero_results(
        results: Sequence[CallResult],
        contract_addresses: Sequence[str],
) -> list[AssociatedCallResult]:
    return [r for r in associate(results, contract_addresses) if _has_balance(r)]


def result_data_by_contract(associated: Sequence[AssociatedCallResult]) -> dict[str, bytes]:
    out: dict[str, bytes] = {}
    for r in associated:
        out[r.contract_address] = r.return_data
    return out


def build_calls_context(associated: Sequence[AssociatedCallResult]) -> list[CallEnvelope]:
    """symbol, decimals, name for every contract, in that order."""
    return [
        envelope(r.contract_address, method_name)
        for r in associated
        for method_name in META_METHODS
    ]


def calls_of(envelopes: Sequence[CallEnvelope]) -> list[Call]:
    return [e.call for e in envelopes]


def contexts_of(envelopes: Sequence[CallEnvelope]) -> list[CallContext]:
    return [e.context for e in envelopes]
