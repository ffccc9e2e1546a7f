"""Chain selection settings.

Which chain to use is stored in `settings.json` under :py:data:`DEFAULT_SETTINGS_PATH`.
`CHAIN` environment variable overrides the stored chain, so

.. code-block:: shell

    CHAIN=polygon python my_script.py

works without touching the settings file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dataclasses_json import dataclass_json

from chainid.chain import Chain
from chainid.named import ExplorerUrls
from chainid.serialization import chain_field

logger = logging.getLogger(__name__)


#: Where we will store our settings file
#:
#: Store under user home
#:
DEFAULT_SETTINGS_PATH = Path(os.path.expanduser("~/.chainid"))

#: Settings file name inside the settings folder
SETTINGS_FILE_NAME = "settings.json"

#: Environment variable that overrides the configured chain
CHAIN_ENV_VAR = "CHAIN"


@dataclass_json
@dataclass
class Configuration:
    """Chain selection settings."""

    #: Chain to use
    chain: Chain = chain_field()

    #: API key for the chain's Etherscan-like explorer
    etherscan_api_key: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ExplorerApi:
    """Explorer endpoints ready to use with the configured API key."""

    urls: ExplorerUrls

    api_key: Optional[str] = None


def _get_settings_file(settings_path: Path) -> Path:
    assert isinstance(settings_path, Path), f"Got {settings_path.__class__}"
    return settings_path / SETTINGS_FILE_NAME


def discover_configuration(settings_path: Path = DEFAULT_SETTINGS_PATH) -> Optional[Configuration]:
    """Read the settings file.

    :param settings_path:
        Override the default settings path.

        Useful for unit tests.

    :return:
        `None` if there is no settings file or it is empty
    """
    settings_file = _get_settings_file(settings_path)
    if settings_file.exists():
        data = settings_file.read_text()
        if data:
            config = Configuration.from_json(data)
            logger.info("Loaded configuration from %s, chain is %s", settings_file, config.chain)
            return config
    return None


def save_configuration(config: Configuration, settings_path: Path = DEFAULT_SETTINGS_PATH):
    """Write the settings file.

    Creates the settings folder if needed.
    """
    assert config, "Configuration missing"
    settings_file = _get_settings_file(settings_path)
    os.makedirs(settings_path, exist_ok=True)
    settings_file.write_text(config.to_json())
    logger.info("Saved configuration to %s, chain is %s", settings_file, config.chain)


def clear_configuration(settings_path: Path = DEFAULT_SETTINGS_PATH):
    """Delete the saved settings file (if any)"""
    settings_file = _get_settings_file(settings_path)
    if settings_file.exists():
        os.remove(settings_file)


def resolve_chain(
    config: Optional[Configuration] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Chain:
    """Figure out which chain to use.

    In the order of priority

    - `CHAIN` environment variable, chain name or chain id

    - Configured chain

    - Ethereum mainnet

    :param environ:
        Override `os.environ`.

        Useful for unit tests.

    :raise chainid.exceptions.InvalidChainIdentifier:
        Environment variable is set, but is not a chain
    """
    if environ is None:
        environ = os.environ

    text = environ.get(CHAIN_ENV_VAR)
    if text:
        chain = Chain.parse(text)
        logger.info("Using chain %s from %s environment variable", chain, CHAIN_ENV_VAR)
        return chain

    if config is not None:
        return config.chain

    return Chain.default()


def get_explorer_api(
    config: Optional[Configuration] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[ExplorerApi]:
    """Get the block explorer endpoints of the chain in use.

    :return:
        `None` if the chain has no known explorer
    """
    chain = resolve_chain(config, environ)
    urls = chain.get_explorer_urls()
    if urls is None:
        return None
    api_key = config.etherscan_api_key if config else None
    return ExplorerApi(urls=urls, api_key=api_key)
