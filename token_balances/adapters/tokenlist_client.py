import logging
from typing import Optional

import aiohttp

from token_balances.utils.parsing import parse_token_list

log = logging.getLogger("tokenlist_client")


class TokenListClient:
    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)

    async def get_token_addresses(self, url: str, chain_id: Optional[int] = None) -> list[str]:
        """Contract addresses from a token list (https://tokenlists.org) served at `url`."""
        async with aiohttp.ClientSession(timeout=self.timeout) as s:
            async with s.get(url) as r:
                r.raise_for_status()
                j = await r.json(content_type=None)
        addresses = parse_token_list(j, chain_id)
        log.info(f"Token list {url}: {len(addresses)} tokens")
        return addresses
