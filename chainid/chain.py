"""Chain identifiers.

A chain is identified either by a well-known name (:py:class:`chainid.named.NamedChain`)
or by a raw numeric chain id. :py:class:`Chain` wraps both so that
configuration files, command line arguments and serialised data can say
"which network" without caring which form the user wrote.

Chain identifiers are kept in canonical form: a numeric chain id
that the registry knows is always presented as :py:class:`Named`, never
as :py:class:`Numeric`. Thus plain structural equality and hashing are enough
to use chains as dictionary keys.

Example:

.. code-block:: python

    from chainid.chain import Chain
    from chainid.named import NamedChain

    assert Chain.from_id(1) == Chain.from_named(NamedChain.mainnet)
    assert Chain.parse("Polygon").id == 137
    assert str(Chain.from_id(999_999_999)) == "999999999"

"""

import operator
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

import numpy as np

from chainid.exceptions import InvalidChainIdentifier, UnsupportedChain
from chainid.named import ExplorerUrls, NamedChain
from chainid.types import JSONChainValue, RawChainId, U64_MAX

#: Accepted numeric chain id literal.
#:
#: Decimal digits with optional plus sign, no underscores.
_DECIMAL_RE = re.compile(r"\+?[0-9]+")


def _check_u64(chain_id) -> RawChainId:
    if isinstance(chain_id, bool):
        raise TypeError(f"Chain id must be an integer, got {chain_id!r}")
    try:
        chain_id = operator.index(chain_id)
    except TypeError as e:
        raise TypeError(f"Chain id must be an integer, got {chain_id.__class__.__name__}") from e
    if not 0 <= chain_id <= U64_MAX:
        raise ValueError(f"Chain id must fit in unsigned 64-bit integer, got {chain_id}")
    return chain_id


class Chain(ABC):
    """Either a well-known chain or a raw chain id.

    Use the constructor helpers instead of instantiating variants directly:

    - :py:meth:`from_id` for numeric chain ids

    - :py:meth:`from_named` for well-known chains

    - :py:meth:`parse` for human input

    - :py:meth:`from_json_value` for serialised data

    The values are immutable.
    """

    __slots__ = ()

    @staticmethod
    def from_id(chain_id: RawChainId) -> "Chain":
        """Create a chain from a numeric chain id.

        All numeric inputs go through here, so a chain id
        the registry knows always becomes :py:class:`Named`.

        :param chain_id:
            Unsigned 64-bit integer.
            Any integer-like value is accepted, e.g. `numpy.uint64`.

        :raise TypeError:
            Not an integer

        :raise ValueError:
            Out of unsigned 64-bit range
        """
        chain_id = _check_u64(chain_id)
        named = NamedChain.get_by_id(chain_id)
        if named is not None:
            return Named(named)
        return Numeric(chain_id)

    @staticmethod
    def from_named(named: NamedChain) -> "Chain":
        """Wrap a well-known chain."""
        return Named(named)

    @staticmethod
    def from_wide_integer(value) -> "Chain":
        """Create a chain from an integer that may be wider than 64 bits.

        E.g. `uint256` chain id returned by a smart contract call.

        .. note::

            Lossy. Only the low 64 bits are kept, the rest is silently discarded.

        :raise ValueError:
            Negative value
        """
        if isinstance(value, bool):
            raise TypeError(f"Chain id must be an integer, got {value!r}")
        value = operator.index(value)
        if value < 0:
            raise ValueError(f"Chain id must be unsigned, got {value}")
        return Chain.from_id(value & U64_MAX)

    @staticmethod
    def parse(text: str) -> "Chain":
        """Parse a chain from human input.

        Accepts a case-insensitive chain name or alias (`Mainnet`, `bsc`),
        or a non-negative decimal chain id (`42161`, `+42161`).
        Whitespace is not stripped.

        :raise InvalidChainIdentifier:
            Not a known chain and not a valid chain id
        """
        assert isinstance(text, str), f"Got {text.__class__}"

        named = NamedChain.get_by_name(text)
        if named is not None:
            return Named(named)

        if _DECIMAL_RE.fullmatch(text):
            chain_id = int(text)
            if chain_id <= U64_MAX:
                return Chain.from_id(chain_id)

        raise InvalidChainIdentifier(text)

    @staticmethod
    def from_json_value(value: JSONChainValue) -> "Chain":
        """Decode a chain from its serialised form.

        The serialised form is an untagged scalar:

        - String is a chain name. Numeric strings are not accepted.

        - Integer is a chain id.

        :raise InvalidChainIdentifier:
            String is not a known chain name

        :raise TypeError:
            Value is not a string or an integer

        :raise ValueError:
            Integer is out of unsigned 64-bit range
        """
        if isinstance(value, str):
            named = NamedChain.get_by_name(value.lower())
            if named is None:
                raise InvalidChainIdentifier(value)
            return Named(named)

        # JSON true/false are not chain ids
        if isinstance(value, int) and not isinstance(value, bool):
            return Chain.from_id(value)

        raise TypeError(f"Expected chain name string or chain id integer, got {value.__class__.__name__}: {value!r}")

    @staticmethod
    def default() -> "Chain":
        """Ethereum mainnet."""
        return Named(NamedChain.mainnet)

    @property
    @abstractmethod
    def id(self) -> RawChainId:
        """The numeric chain id."""

    @abstractmethod
    def as_named(self) -> NamedChain:
        """Get the well-known chain or try converting the chain id into one.

        For code paths that cannot work with an unknown chain.

        :raise UnsupportedChain:
            The chain id is not in the registry
        """

    def is_legacy(self) -> bool:
        """Does this chain only support legacy transactions without EIP-1559.

        Unknown chains are assumed to support EIP-1559.
        """
        try:
            return self.as_named().is_legacy()
        except UnsupportedChain:
            return False

    def get_explorer_urls(self) -> Optional[ExplorerUrls]:
        """Get Etherscan-like explorer URLs.

        :return:
            `None` for unknown chains and chains without an explorer
        """
        try:
            named = self.as_named()
        except UnsupportedChain:
            return None
        return named.get_explorer_urls()

    @abstractmethod
    def to_json_value(self) -> JSONChainValue:
        """Encode to the serialised form.

        Lowercase chain name for well-known chains, integer otherwise.
        """

    def to_uint64(self) -> np.uint64:
        """Chain id as numpy unsigned 64-bit integer."""
        return np.uint64(self.id)

    def __int__(self) -> int:
        return self.id


@dataclass(frozen=True, slots=True)
class Named(Chain):
    """A well-known chain."""

    chain: NamedChain

    def __post_init__(self):
        if not isinstance(self.chain, NamedChain):
            raise TypeError(f"Expected NamedChain, got {self.chain.__class__.__name__}")

    @property
    def id(self) -> RawChainId:
        return self.chain.value

    def as_named(self) -> NamedChain:
        return self.chain

    def to_json_value(self) -> JSONChainValue:
        return self.chain.get_name().lower()

    def __str__(self) -> str:
        return self.chain.get_name()


@dataclass(frozen=True, slots=True)
class Numeric(Chain):
    """A chain id the registry does not know.

    Create with :py:meth:`Chain.from_id`, which picks :py:class:`Named`
    when the chain id is known.

    :raise ValueError:
        The chain id is in the registry, use :py:class:`Named`
    """

    value: RawChainId

    def __post_init__(self):
        # Store numpy and other integer-likes as plain int
        value = _check_u64(self.value)
        named = NamedChain.get_by_id(value)
        if named is not None:
            raise ValueError(f"Chain id {value} is {named.name}, use Chain.from_id()")
        object.__setattr__(self, "value", value)

    @property
    def id(self) -> RawChainId:
        return self.value

    def as_named(self) -> NamedChain:
        named = NamedChain.get_by_id(self.value)
        if named is None:
            raise UnsupportedChain(self.value)
        return named

    def to_json_value(self) -> JSONChainValue:
        return self.value

    def __str__(self) -> str:
        # Do not rely on the construction check alone
        named = NamedChain.get_by_id(self.value)
        if named is not None:
            return named.get_name()
        return str(self.value)
