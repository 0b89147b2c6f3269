# services/decoder.py
"""
Decoding of ERC-20 metadata results.

ERC-20 is a convention, not something the chain enforces: older tokens (MKR, SAI, ...)
return `symbol()` / `name()` as a fixed bytes32 instead of a dynamic string. Such
results fail type-directed decoding and are read again as a NUL padded bytes32 string.
The functions here never log; fallbacks are reported back as warnings.
"""
from typing import Sequence

from eth_abi import decode
from eth_abi.exceptions import DecodingError

from token_balances.ports import CallContext, CallResult, Decoded, MetaDecodeResult, TokenMeta
from token_balances.services.encoder import output_type


def parse_bytes32_string(data: bytes) -> str:
    word = bytes(data[:32])
    return word.split(b"\x00", 1)[0].decode("utf-8", errors="replace")


def decode_value(method_name: str, data: bytes) -> Decoded:
    type_str = output_type(method_name)
    try:
        (value,) = decode([type_str], data)
    except (DecodingError, OverflowError, ValueError):
        return Decoded(value=parse_bytes32_string(data), fallback=True)
    return Decoded(value=value)


def non_compliance_warning(context: CallContext) -> str:
    return (f"Problem decoding {context.method_name} for {context.contract_address}. "
            f"The contract is likely not ERC-20 compliant.")


def decode_meta_results(results: Sequence[CallResult], contexts: Sequence[CallContext]) -> MetaDecodeResult:
    if len(results) != len(contexts):
        raise ValueError(f"{len(results)} results for {len(contexts)} call contexts")

    meta: dict[str, dict] = {}
    warnings: list[str] = []
    for result, ctx in zip(results, contexts):
        decoded = decode_value(ctx.method_name, result.return_data)
        if decoded.fallback:
            warnings.append(non_compliance_warning(ctx))
        meta[ctx.contract_address] = {**meta.get(ctx.contract_address, {}), ctx.method_name: decoded.value}

    return MetaDecodeResult(meta={addr: TokenMeta(**m) for addr, m in meta.items()}, warnings=warnings)
