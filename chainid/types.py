"""Generic units used with chain identifiers.

Types aliases are used to give human-readable meaning for various arguments and return values.
"""
from typing import TypeAlias, Union

#: Chain id that is not a wrapped enum.
#:
#: See :py:class:`chainid.chain.Chain` for details
RawChainId: TypeAlias = int

#: Chain name as written by a human or stored in a config file.
#:
#: E.g. `mainnet`, `Polygon`, `bsc`
#:
ChainName: TypeAlias = str

#: URL as a string type
#:
URL: TypeAlias = str

#: Serialised chain identifier.
#:
#: Lowercase chain name for well-known chains, integer for everything else.
#:
JSONChainValue: TypeAlias = Union[str, int]

#: The largest value a chain id can have.
#:
#: Chain ids are unsigned 64-bit integers.
U64_MAX = 2**64 - 1
