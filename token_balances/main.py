import asyncio
import logging
from pathlib import Path

from tqdm.contrib.logging import logging_redirect_tqdm

from token_balances.adapters.tokenlist_client import TokenListClient
from token_balances.adapters.web3_provider import Web3Provider
from token_balances.config import AppConfig, load_env
from token_balances.core.errors import AddressResolutionError
from token_balances.core.log import setup_logging
from token_balances.services.balances import TokenBalancesService
from token_balances.services.export import write_csv, write_json
from token_balances.utils.iohelpers import read_text, uniq
from token_balances.utils.parsing import parse_addresses_from_text

log = logging.getLogger("main")


async def load_contracts(cfg: AppConfig, provider: Web3Provider) -> list[str]:
    contracts: list[str] = []
    if cfg.tokens_file:
        contracts += parse_addresses_from_text(read_text(Path(cfg.tokens_file)))
    if cfg.tokens_url:
        network = await provider.get_network()
        contracts += await TokenListClient(cfg.call_timeout).get_token_addresses(cfg.tokens_url, network.chain_id)
    return uniq(contracts)


async def run(cfg: AppConfig) -> None:
    if not cfg.address_or_name:
        raise SystemExit("ADDRESS is required (an address or an ENS name)")

    provider = Web3Provider(cfg.rpc_url, request_timeout=cfg.call_timeout)
    try:
        contracts = await load_contracts(cfg, provider)
        if not contracts:
            raise SystemExit("No token contracts: set TOKENS_FILE and/or TOKENS_URL")
        log.info("Address: %s | Contracts: %d | Chunk size: %d",
                 cfg.address_or_name, len(contracts), cfg.chunk_size)

        service = TokenBalancesService(provider, cfg)
        try:
            balances = await service.get_balances(cfg.address_or_name, contracts)
        except AddressResolutionError as e:
            raise SystemExit(str(e)) from e
    finally:
        await provider.aclose()

    for addr, info in balances.items():
        log.info("%s %s (%s): %s", info["symbol"], info["name"], addr, info["balanceOf"])

    out_dir = Path(cfg.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    name = f"balances_{cfg.address_or_name}"
    log.info("Saved: %s", write_json(balances, out_dir / f"{name}.json"))
    if cfg.write_csv:
        log.info("Saved: %s", write_csv(balances, out_dir / f"{name}.csv"))


def main() -> None:
    config = load_env()
    setup_logging(debug=config.debug)
    with logging_redirect_tqdm():
        asyncio.run(run(config))


if __name__ == "__main__":
    main()
