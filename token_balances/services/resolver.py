# services/resolver.py
import logging

from web3 import Web3

from token_balances.core.errors import InvalidNameError, UnsupportedNetworkError
from token_balances.ports import Provider

log = logging.getLogger("resolver")

ENS_CHAIN_ID = 1


async def get_address(address_or_name: str, provider: Provider) -> str:
    """
    Address literals come back unchanged without touching the provider. Names are
    resolved through ENS, which only exists on mainnet: any other chain is rejected
    before a lookup is attempted.
    """
    if Web3.is_address(address_or_name):
        return address_or_name

    network = await provider.get_network()
    if network.chain_id != ENS_CHAIN_ID:
        raise UnsupportedNetworkError(network.display_name)

    address = await provider.resolve_name(address_or_name)
    if not address:
        raise InvalidNameError(address_or_name)
    log.info("Resolved %s -> %s", address_or_name, address)
    return address
