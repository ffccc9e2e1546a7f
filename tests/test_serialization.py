"""Chain identifiers in JSON and dataclasses_json data classes."""
import json
from dataclasses import dataclass

import pytest
from dataclasses_json import dataclass_json
from marshmallow import ValidationError

from chainid.chain import Chain, Named, Numeric
from chainid.exceptions import InvalidChainIdentifier
from chainid.named import NamedChain
from chainid.serialization import chain_field, decode_chain, encode_chain


@dataclass_json
@dataclass
class Deployment:
    """Mock data class with chain attributes."""

    address: str

    chain: Chain = chain_field()

    fork_of: Chain = chain_field(default=Chain.from_id(999_999_999))


def test_encode_named():
    assert Chain.from_id(1).to_json_value() == "mainnet"
    assert Chain.parse("bsc").to_json_value() == "binance-smart-chain"


def test_encode_numeric(unknown_chain: Chain):
    value = unknown_chain.to_json_value()
    assert value == 999_999_999
    assert type(value) is int


def test_decode_name():
    assert Chain.from_json_value("mainnet") == Named(NamedChain.mainnet)
    assert Chain.from_json_value("Polygon") == Named(NamedChain.polygon)
    assert Chain.from_json_value("BSC") == Named(NamedChain.binance_smart_chain)


def test_decode_known_id_becomes_named():
    assert Chain.from_json_value(1) == Named(NamedChain.mainnet)
    assert Chain.from_json_value(999_999_999) == Numeric(999_999_999)


def test_decode_numeric_string_is_not_chain_id():
    with pytest.raises(InvalidChainIdentifier):
        Chain.from_json_value("1")


def test_decode_unknown_name():
    with pytest.raises(InvalidChainIdentifier):
        Chain.from_json_value("not-a-chain-!!")


@pytest.mark.parametrize("value", [None, True, False, 1.0, [1], {"chain": 1}])
def test_decode_bad_shape(value):
    with pytest.raises(TypeError):
        Chain.from_json_value(value)


def test_decode_out_of_range():
    with pytest.raises(ValueError):
        Chain.from_json_value(-1)

    with pytest.raises(ValueError):
        Chain.from_json_value(2**64)


def test_json_round_trip():
    chains = [Chain.from_named(named) for named in NamedChain]
    chains += [Chain.from_id(0), Chain.from_id(999_999_999), Chain.from_id(2**64 - 1)]
    for c in chains:
        data = json.dumps(encode_chain(c))
        assert decode_chain(json.loads(data)) == c


def test_decode_passes_chain_through():
    c = Chain.from_id(137)
    assert decode_chain(c) is c


def test_dataclass_json_round_trip():
    deployment = Deployment(address="0x1", chain=Chain.parse("arbitrum"), fork_of=Chain.from_id(123_456))
    data = deployment.to_dict()
    assert data == {"address": "0x1", "chain": "arbitrum", "fork_of": 123456}

    assert Deployment.from_json(deployment.to_json()) == deployment


def test_dataclass_json_decode_mixed_shapes():
    deployment = Deployment.from_json('{"address": "0x1", "chain": 56, "fork_of": "Gnosis"}')
    assert deployment.chain == Named(NamedChain.binance_smart_chain)
    assert deployment.fork_of == Named(NamedChain.gnosis)


def test_dataclass_json_defaults():
    deployment = Deployment.from_dict({"address": "0x1"})
    assert deployment.chain == Chain.default()
    assert deployment.fork_of == Numeric(999_999_999)


def test_dataclass_json_bad_chain():
    with pytest.raises(InvalidChainIdentifier):
        Deployment.from_dict({"address": "0x1", "chain": "not-a-chain-!!"})

    with pytest.raises(TypeError):
        Deployment.from_dict({"address": "0x1", "chain": 1.5})


def test_marshmallow_schema_round_trip():
    schema = Deployment.schema()
    deployment = Deployment(address="0x1", chain=Chain.parse("optimism"), fork_of=Chain.from_id(999_999_999))

    data = schema.dump(deployment)
    assert data == {"address": "0x1", "chain": "optimism", "fork_of": 999_999_999}

    assert schema.load(data) == deployment
    assert schema.load({"address": "0x1", "chain": 10}) == Deployment(address="0x1", chain=Chain.parse("optimism"))


@pytest.mark.parametrize("value", ["not-a-chain-!!", 1.5, True, -1])
def test_marshmallow_schema_bad_chain(value):
    schema = Deployment.schema()
    with pytest.raises(ValidationError) as exc_info:
        schema.load({"address": "0x1", "chain": value})
    assert "chain" in exc_info.value.messages
