import re
from typing import Optional

from web3 import AsyncWeb3

ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")


def parse_addresses_from_text(text: str) -> list[str]:
    address = ADDRESS_RE.findall(text or "")
    return [AsyncWeb3.to_checksum_address(a) for a in address]


def parse_token_list(data: dict, chain_id: Optional[int] = None) -> list[str]:
    """
    Addresses from a token list document ({"tokens": [{"address": ..., "chainId": ...}, ...]}).
    When chain_id is given, entries for other chains are skipped.
    """
    out = []
    for token in data.get("tokens") or []:
        if not isinstance(token, dict) or not token.get("address"):
            continue
        if chain_id is not None and token.get("chainId") not in (None, chain_id):
            continue
        out.append(AsyncWeb3.to_checksum_address(token["address"]))
    return out
