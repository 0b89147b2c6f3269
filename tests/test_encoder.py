import pytest
from eth_abi.exceptions import EncodingError

from conftest import UNI
from token_balances.core.errors import UnknownMethodError
from token_balances.ports import CallContext
from token_balances.services.encoder import SELECTORS, encode_call, envelope, output_type


class TestSelectors:
    def test_erc20_read_selectors(self):
        assert SELECTORS["balanceOf"].hex() == "70a08231"
        assert SELECTORS["symbol"].hex() == "95d89b41"
        assert SELECTORS["decimals"].hex() == "313ce567"
        assert SELECTORS["name"].hex() == "06fdde03"

    def test_output_types(self):
        assert output_type("symbol") == "string"
        assert output_type("decimals") == "uint8"
        assert output_type("name") == "string"
        assert output_type("balanceOf") == "uint256"


class TestEncodeCall:
    def test_balance_of(self):
        call = encode_call(UNI, "balanceOf", ["0x8a6bfcae15e729fd1440574108437dea281a9b3e"])

        assert call.target == UNI
        assert call.call_data.hex() == (
            "70a08231" "0000000000000000000000008a6bfcae15e729fd1440574108437dea281a9b3e"
        )

    def test_no_argument_method_is_selector_only(self):
        assert encode_call(UNI, "symbol").call_data.hex() == "95d89b41"

    def test_unknown_method_is_fatal(self):
        with pytest.raises(UnknownMethodError):
            encode_call(UNI, "transfer", [UNI, 1])
        with pytest.raises(KeyError):
            output_type("totalSupply")

    def test_argument_type_mismatch_is_fatal(self):
        with pytest.raises(EncodingError):
            encode_call(UNI, "balanceOf", [12345])


def test_envelope_bundles_call_and_context():
    env = envelope(UNI, "decimals")

    assert env.call.target == UNI
    assert env.call.call_data.hex() == "313ce567"
    assert env.context == CallContext(contract_address=UNI, method_name="decimals")
