# adapters/multicall.py
import logging
from typing import Sequence

from eth_abi import encode, decode
from web3 import AsyncWeb3

from token_balances.ports import AggregateResult, Call, CallResult, Provider

log = logging.getLogger("multicall")

# Multicall3, same address on every chain it is deployed to
MULTICALL3 = "0xcA11bde05977b3631167028862bE2a173976CA11"
# method: tryBlockAndAggregate(bool requireSuccess, (address target, bytes callData)[] calls)
#   returns (uint256 blockNumber, bytes32 blockHash, (bool success, bytes returnData)[] returnData)
TRY_BLOCK_AND_AGGREGATE_SELECTOR = bytes(AsyncWeb3.keccak(text="tryBlockAndAggregate(bool,(address,bytes)[])")[:4])


def _encode_try_block_and_aggregate(calls: Sequence[Call], require_success: bool = False) -> bytes:
    types = ["bool", "(address,bytes)[]"]
    values = [require_success, [c.as_tuple() for c in calls]]
    return TRY_BLOCK_AND_AGGREGATE_SELECTOR + encode(types, values)


def _decode_try_block_and_aggregate_result(data: bytes) -> AggregateResult:
    block_number, block_hash, results = decode(["uint256", "bytes32", "(bool,bytes)[]"], data)
    return AggregateResult(
        block_number=int(block_number),
        block_hash=bytes(block_hash),
        results=[CallResult(success=bool(ok), return_data=bytes(ret)) for ok, ret in results],
    )


async def aggregate(calls: Sequence[Call], provider: Provider, address: str = MULTICALL3) -> AggregateResult:
    """
    One eth_call to the aggregator for the whole batch. Individual reverts come back as
    success=False entries; a transport failure propagates to the caller.
    """
    if not calls:
        return AggregateResult(block_number=0, block_hash=b"", results=[])
    payload = _encode_try_block_and_aggregate(calls, require_success=False)
    raw = await provider.call(AsyncWeb3.to_checksum_address(address), payload)
    res = _decode_try_block_and_aggregate_result(raw)
    log.debug("aggregate: %d calls @ block %d", len(calls), res.block_number)
    return res


class MulticallClient:
    def __init__(self, provider: Provider, address: str = MULTICALL3):
        self.provider = provider
        self.address = AsyncWeb3.to_checksum_address(address)

    async def try_block_and_aggregate(self, calls: Sequence[Call]) -> AggregateResult:
        return await aggregate(calls, self.provider, self.address)
