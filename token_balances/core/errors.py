class TokenBalancesError(Exception):
    pass


class AddressResolutionError(TokenBalancesError):
    pass


class InvalidNameError(AddressResolutionError):
    def __init__(self, name: str):
        super().__init__(f"Invalid ENS domain: {name}")
        self.name = name


class UnsupportedNetworkError(AddressResolutionError):
    """Name resolution was requested on a chain without ENS."""

    def __init__(self, network: str):
        super().__init__(f"{network} does not support ENS.")
        self.network = network


class UnknownMethodError(TokenBalancesError, KeyError):
    def __init__(self, method_name: str):
        super().__init__(method_name)
        self.method_name = method_name

    def __str__(self) -> str:
        return f"Method {self.method_name!r} is not part of the ERC-20 read ABI"
