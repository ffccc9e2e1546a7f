"""Chain identifiers in serialised data.

Chains serialise as an untagged JSON scalar:

- Well-known chain is its lowercase name: `"mainnet"`

- Other chains are the plain chain id: `999999999`

Use :py:func:`chain_field` to declare a :py:class:`chainid.chain.Chain` attribute
on a `dataclasses_json` data class:

.. code-block:: python

    @dataclass_json
    @dataclass
    class Deployment:
        chain: Chain = chain_field()
        address: str = ""

    Deployment.from_json('{"chain": "polygon", "address": "0x0"}')

See `Overriding <https://github.com/lidatong/dataclasses-json?tab=readme-ov-file#Overriding>`__.
"""

from dataclasses import field, MISSING

from dataclasses_json import config
from marshmallow import fields

from chainid.chain import Chain
from chainid.exceptions import InvalidChainIdentifier
from chainid.types import JSONChainValue


def encode_chain(chain: Chain) -> JSONChainValue:
    """Encode chain to its serialised form."""
    assert isinstance(chain, Chain), f"Expected Chain, got {chain.__class__}"
    return chain.to_json_value()


def decode_chain(value) -> Chain:
    """Decode chain from its serialised form.

    Already decoded :py:class:`Chain` is passed through,
    as `dataclasses_json` feeds field defaults and marshmallow
    output to the decoder too.
    """
    if isinstance(value, Chain):
        return value
    return Chain.from_json_value(value)


class ChainField(fields.Field):
    """Marshmallow field for :py:class:`chainid.chain.Chain`.

    Used by `Schema.load()` and `Schema.dump()` of `dataclasses_json` classes.
    """

    default_error_messages = {
        "invalid": "Not a valid chain: {error}",
    }

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return encode_chain(value)

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return decode_chain(value)
        except (InvalidChainIdentifier, TypeError, ValueError) as e:
            raise self.make_error("invalid", error=str(e)) from e


def chain_field(default: Chain | None = None, **kwargs):
    """Declare a chain attribute on a `dataclasses_json` data class.

    :param default:
        Default chain. If not given, Ethereum mainnet.

    :param kwargs:
        Passed to `dataclasses.field()`
    """
    if default is None:
        kwargs["default_factory"] = Chain.default
    else:
        kwargs["default"] = default

    assert kwargs.get("metadata", MISSING) is MISSING, "Use dataclasses_json.config() yourself for custom metadata"

    return field(
        metadata=config(
            encoder=encode_chain,
            decoder=decode_chain,
            mm_field=ChainField(),
        ),
        **kwargs,
    )
