from token_balances.adapters.multicall import MULTICALL3, MulticallClient, aggregate
from token_balances.core.errors import (
    AddressResolutionError, InvalidNameError, TokenBalancesError, UnknownMethodError, UnsupportedNetworkError,
)
from token_balances.services.balances import TokenBalancesService, fetch_raw_balances, get_token_balances
from token_balances.services.correlator import build_calls_context, get_non_zero_results, result_data_by_contract
from token_balances.services.decoder import decode_meta_results
from token_balances.services.formatter import balances_by_contract, format_units
from token_balances.services.resolver import get_address
from token_balances.utils.iohelpers import chunk

__version__ = "0.1.0"
