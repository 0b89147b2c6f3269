# services/formatter.py
import logging
from typing import Mapping

from eth_abi import decode

from token_balances.ports import BalancesByContract, TokenBalance, TokenMeta

log = logging.getLogger("formatter")


def format_units(value: int, decimals: int) -> str:
    """
    Exact fixed-point rendering of value / 10**decimals, e.g. (1500, 3) -> "1.5",
    (10**18, 18) -> "1.0", (7, 0) -> "7".
    """
    if decimals < 0:
        raise ValueError(f"negative decimals: {decimals}")
    sign = "-" if value < 0 else ""
    whole, frac = divmod(abs(value), 10 ** decimals)
    if decimals == 0:
        return f"{sign}{whole}"
    fraction = str(frac).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction}"


def balances_by_contract(
        meta_by_contract: Mapping[str, TokenMeta],
        raw_by_contract: Mapping[str, bytes],
        decimals_fallback: int = 18,
) -> BalancesByContract:
    out: BalancesByContract = {}
    for contract_address, meta in meta_by_contract.items():
        decimals = meta.get("decimals")
        if not isinstance(decimals, int) or isinstance(decimals, bool):
            log.warning(f"Unusable decimals {decimals!r} for {contract_address}, using {decimals_fallback}")
            decimals = decimals_fallback
        (raw,) = decode(["uint256"], raw_by_contract[contract_address])
        out[contract_address] = TokenBalance(
            **{**meta, "decimals": decimals},
            balanceOf=format_units(int(raw), decimals),
        )
    return out
