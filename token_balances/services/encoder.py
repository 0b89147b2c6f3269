# services/encoder.py
from typing import Sequence

from eth_abi import encode
from web3 import AsyncWeb3

from token_balances.core.errors import UnknownMethodError
from token_balances.ports import Call, CallContext, CallEnvelope

ERC20_ABI = [
    {"constant": True, "inputs": [{"name": "owner", "type": "address"}], "name": "balanceOf",
     "outputs": [{"name": "balance", "type": "uint256"}], "type": "function"},
    {"constant": True, "inputs": [], "name": "symbol", "outputs": [{"name": "", "type": "string"}], "type": "function"},
    {"constant": True, "inputs": [], "name": "decimals", "outputs": [{"name": "", "type": "uint8"}],
     "type": "function"},
    {"constant": True, "inputs": [], "name": "name", "outputs": [{"name": "", "type": "string"}], "type": "function"},
]

_FUNCTIONS = {item["name"]: item for item in ERC20_ABI if item["type"] == "function"}


def _input_types(method_name: str) -> list[str]:
    try:
        fn = _FUNCTIONS[method_name]
    except KeyError:
        raise UnknownMethodError(method_name) from None
    return [i["type"] for i in fn["inputs"]]


def output_type(method_name: str) -> str:
    try:
        return _FUNCTIONS[method_name]["outputs"][0]["type"]
    except KeyError:
        raise UnknownMethodError(method_name) from None


def selector(method_name: str) -> bytes:
    signature = f"{method_name}({','.join(_input_types(method_name))})"
    return bytes(AsyncWeb3.keccak(text=signature)[:4])


SELECTORS = {name: selector(name) for name in _FUNCTIONS}


def encode_call(target: str, method_name: str, args: Sequence = ()) -> Call:
    types = _input_types(method_name)
    data = SELECTORS[method_name] + encode(types, list(args))
    return Call(target=target, call_data=data)


def envelope(target: str, method_name: str, args: Sequence = ()) -> CallEnvelope:
    return CallEnvelope(
        call=encode_call(target, method_name, args),
        context=CallContext(contract_address=target, method_name=method_name),
    )
