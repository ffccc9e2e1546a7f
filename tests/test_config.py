"""Chain selection settings file and environment override."""
import json
import logging
from pathlib import Path

import pytest

from chainid.chain import Chain, Numeric
from chainid.config import (
    Configuration,
    clear_configuration,
    discover_configuration,
    get_explorer_api,
    resolve_chain,
    save_configuration,
)
from chainid.exceptions import InvalidChainIdentifier
from chainid.named import NamedChain


def test_no_settings_file(settings_path: Path):
    assert discover_configuration(settings_path) is None


def test_empty_settings_file(settings_path: Path):
    settings_path.mkdir()
    (settings_path / "settings.json").write_text("")
    assert discover_configuration(settings_path) is None


def test_save_and_discover(settings_path: Path, logger: logging.Logger):
    config = Configuration(chain=Chain.parse("polygon"), etherscan_api_key="xyz")
    save_configuration(config, settings_path)

    data = json.loads((settings_path / "settings.json").read_text())
    assert data == {"chain": "polygon", "etherscan_api_key": "xyz"}

    assert discover_configuration(settings_path) == config


def test_save_unknown_chain(settings_path: Path):
    config = Configuration(chain=Chain.from_id(999_999_999))
    save_configuration(config, settings_path)

    data = json.loads((settings_path / "settings.json").read_text())
    assert data["chain"] == 999_999_999

    assert discover_configuration(settings_path).chain == Numeric(999_999_999)


def test_hand_written_settings_file(settings_path: Path):
    settings_path.mkdir()
    (settings_path / "settings.json").write_text('{"chain": 42161}')
    config = discover_configuration(settings_path)
    assert config.chain == Chain.from_named(NamedChain.arbitrum)
    assert config.etherscan_api_key is None


def test_clear_configuration(settings_path: Path):
    save_configuration(Configuration(), settings_path)
    clear_configuration(settings_path)
    assert discover_configuration(settings_path) is None

    # Clearing twice is fine
    clear_configuration(settings_path)


def test_default_configuration():
    assert Configuration().chain == Chain.default()


def test_resolve_chain_default():
    assert resolve_chain(None, environ={}) == Chain.default()


def test_resolve_chain_from_config():
    config = Configuration(chain=Chain.parse("base"))
    assert resolve_chain(config, environ={}) == Chain.from_named(NamedChain.base)
    assert resolve_chain(config, environ={"CHAIN": ""}) == Chain.from_named(NamedChain.base)


def test_resolve_chain_environment_wins():
    config = Configuration(chain=Chain.parse("base"))
    assert resolve_chain(config, environ={"CHAIN": "Gnosis"}) == Chain.from_named(NamedChain.gnosis)
    assert resolve_chain(config, environ={"CHAIN": "999999999"}) == Numeric(999_999_999)


def test_resolve_chain_os_environ(monkeypatch):
    monkeypatch.setenv("CHAIN", "arbitrum")
    assert resolve_chain() == Chain.from_named(NamedChain.arbitrum)


def test_resolve_chain_bad_environment():
    with pytest.raises(InvalidChainIdentifier):
        resolve_chain(None, environ={"CHAIN": "not-a-chain-!!"})


def test_explorer_api():
    config = Configuration(chain=Chain.parse("arbitrum"), etherscan_api_key="xyz")
    api = get_explorer_api(config, environ={})
    assert api.urls.base_url == "https://arbiscan.io"
    assert api.urls.api_url == "https://api.arbiscan.io/api"
    assert api.api_key == "xyz"


def test_explorer_api_missing():
    config = Configuration(chain=Chain.from_id(999_999_999))
    assert get_explorer_api(config, environ={}) is None
    assert get_explorer_api(config, environ={"CHAIN": "anvil"}) is None
