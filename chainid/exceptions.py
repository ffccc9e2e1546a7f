"""Module for custom exceptions. This contains base classes and the errors raised by chain identifier conversions."""


class ChainError(Exception):
    """Base class for chain identifier errors."""


class ChainDataDoesNotExist(ChainError):
    """Cannot find registry data for a specific chain"""


class UnsupportedChain(ChainError):
    """Raised when a numeric chain id does not map to any well-known chain.

    Only raised by :py:meth:`chainid.chain.Chain.as_named`.
    Other accessors treat an unknown chain as a normal condition.
    """

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Unsupported chain: {chain_id}")


class InvalidChainIdentifier(ChainError, ValueError):
    """Text was neither a known chain name nor a non-negative integer.

    Subclasses `ValueError`, so :py:meth:`chainid.chain.Chain.parse`
    can be used as `argparse` `type=` converter as is.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Expected known chain or integer, found: {text}")
