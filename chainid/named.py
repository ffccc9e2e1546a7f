"""Well-known blockchains.

Registry of the blockchains we know by name.
See :py:class:`NamedChain` enum class for the list of chains.
Each member value is the native `eth_chainId` of the chain.

The registry is a closed set fixed at build time.
Chains outside the registry are still addressable by
their raw numeric id through :py:class:`chainid.chain.Chain`.

Per-chain metadata (display name, aliases, fee model, block explorer)
lives in :py:data:`_CHAIN_DATA` below.
"""

import enum
import logging
import threading
from typing import Dict, NamedTuple, Optional

from chainid.exceptions import ChainDataDoesNotExist
from chainid.types import URL, ChainName, RawChainId

logger = logging.getLogger(__name__)


#: Name, alias and member name -> chain id mapping
_name_map: Dict[ChainName, RawChainId] = {}


#: Prevent _ensure_name_map_lazy_init() duplicates
_init_lock = threading.Lock()


class ExplorerUrls(NamedTuple):
    """Etherscan-like block explorer endpoints of a chain."""

    #: Human facing explorer landing page
    base_url: URL

    #: JSON API endpoint of the explorer
    api_url: URL


def _ensure_name_map_lazy_init():

    global _name_map

    if _name_map:
        # Fully built, read-only from now on
        return

    with _init_lock:

        if _name_map:
            # Already initialized
            return

        name_map = {}
        for chain in NamedChain:
            data = _CHAIN_DATA.get(chain.value)
            if data is None:
                raise ChainDataDoesNotExist(f"Chain data does not exist: {chain.name} ({chain.value})")

            keys = [data["name"], chain.name, *data.get("aliases", [])]
            for key in keys:
                key = key.lower()
                assert name_map.get(key, chain.value) == chain.value, f"Chain name {key} is used by {name_map[key]} and {chain.value}"
                name_map[key] = chain.value

        _name_map = name_map
        logger.debug("Indexed %d names for %d chains", len(_name_map), len(NamedChain))


def _get_name_map() -> Dict[ChainName, RawChainId]:
    _ensure_name_map_lazy_init()
    return _name_map


class NamedChain(enum.IntEnum):
    """Well-known chains and chain metadata helper.

    Member value is the chain id as the chain itself reports it
    with `eth_chainId` JSON-RPC call.

    For the full chain id list see:

    - `chainid.network <https://chainid.network/>`_

    - `chains repo <https://github.com/ethereum-lists/chains>`_
    """

    #: Ethereum mainnet
    mainnet = 1

    #: Old Ethereum testnet
    morden = 2

    #: Deprecated proof-of-work Ethereum testnet
    ropsten = 3

    #: Deprecated proof-of-authority Ethereum testnet
    rinkeby = 4

    #: Ethereum testnet
    goerli = 5

    #: Optimism mainnet
    optimism = 10

    #: Cronos mainnet
    cronos = 25

    #: RSK mainnet
    rsk = 30

    #: Deprecated Parity proof-of-authority Ethereum testnet
    kovan = 42

    #: Binance Smart Chain mainnet
    binance_smart_chain = 56

    #: Optimism testnet on Kovan
    optimism_kovan = 69

    #: Binance Smart Chain testnet
    binance_smart_chain_testnet = 97

    #: Gnosis Chain, formerly xDai
    gnosis = 100

    #: Polygon PoS chain
    polygon = 137

    #: Fantom Opera
    fantom = 250

    #: Boba Network
    boba = 288

    #: zkSync Era mainnet
    zksync = 324

    #: Optimism testnet on Goerli
    optimism_goerli = 420

    #: Moonbeam on Polkadot
    moonbeam = 1284

    #: Moonriver on Kusama
    moonriver = 1285

    #: Local development chain.
    #:
    #: The chain id Ganache and Geth `--dev` use.
    dev = 1337

    #: Fantom testnet
    fantom_testnet = 4002

    #: Base mainnet
    base = 8453

    #: Oasis mainnet
    oasis = 26863

    #: Anvil and Hardhat local test chain
    anvil_hardhat = 31337

    #: Arbitrum One
    arbitrum = 42161

    #: Arbitrum Nova
    arbitrum_nova = 42170

    #: Oasis Emerald ParaTime
    emerald = 42262

    #: Celo mainnet
    celo = 42220

    #: Avalanche Fuji testnet
    avalanche_fuji = 43113

    #: Avalanche C-chain
    avalanche = 43114

    #: Polygon Mumbai testnet
    polygon_mumbai = 80001

    #: Deprecated Arbitrum Rinkeby testnet
    arbitrum_testnet = 421611

    #: Arbitrum testnet on Goerli
    arbitrum_goerli = 421613

    #: Ethereum testnet
    sepolia = 11155111

    #: Aurora on NEAR
    aurora = 1313161554

    @property
    def data(self) -> dict:
        """Get registry data entry for this chain."""
        try:
            return _CHAIN_DATA[self.value]
        except KeyError as e:
            raise ChainDataDoesNotExist(f"Chain data does not exist: {self.name} ({self.value})") from e

    def get_name(self) -> ChainName:
        """Get canonical display name for this blockchain.

        Always lowercase, words separated with a dash.
        E.g. `binance-smart-chain`.
        """
        return self.data["name"]

    def is_legacy(self) -> bool:
        """Does this chain only support legacy transactions.

        Legacy chains do not support EIP-1559 fee market transactions.
        """
        return self.data.get("legacy", False)

    def get_explorer_urls(self) -> Optional[ExplorerUrls]:
        """Get Etherscan-like explorer URLs for this chain.

        :return:
            `None` if we do not know an explorer for the chain
        """
        explorer = self.data.get("explorer")
        if explorer is None:
            return None
        return ExplorerUrls(*explorer)

    @staticmethod
    def get_by_id(chain_id: RawChainId) -> Optional["NamedChain"]:
        """Map a raw chain id back to the well-known chain.

        :return:
            `None` if the chain id is not in the registry
        """
        return NamedChain._value2member_map_.get(chain_id)

    @staticmethod
    def get_by_name(name: ChainName) -> Optional["NamedChain"]:
        """Map a chain name back to the well-known chain.

        Case-insensitive. Accepts canonical names (`binance-smart-chain`),
        aliases (`bsc`) and member names (`binance_smart_chain`).

        :return:
            `None` if the name is not in the registry
        """
        name_map = _get_name_map()
        chain_id_value = name_map.get(name.lower())
        if chain_id_value is None:
            return None
        return NamedChain(chain_id_value)


#: Metadata for each well-known chain, keyed by chain id.
#:
#: - `name`: canonical display name, also used in serialised data
#:
#: - `aliases`: other accepted names
#:
#: - `legacy`: chain does not support EIP-1559 transactions
#:
#: - `explorer`: (base URL, API URL) of Etherscan-like block explorer
#:
_CHAIN_DATA = {
    #
    # Ethereum and its testnets
    #
    NamedChain.mainnet.value: {
        "name": "mainnet",
        "aliases": ["ethlive", "ethereum"],
        "explorer": ("https://etherscan.io", "https://api.etherscan.io/api"),
    },
    NamedChain.morden.value: {
        "name": "morden",
    },
    NamedChain.ropsten.value: {
        "name": "ropsten",
        "explorer": ("https://ropsten.etherscan.io", "https://api-ropsten.etherscan.io/api"),
    },
    NamedChain.rinkeby.value: {
        "name": "rinkeby",
        "explorer": ("https://rinkeby.etherscan.io", "https://api-rinkeby.etherscan.io/api"),
    },
    NamedChain.goerli.value: {
        "name": "goerli",
        "explorer": ("https://goerli.etherscan.io", "https://api-goerli.etherscan.io/api"),
    },
    NamedChain.kovan.value: {
        "name": "kovan",
        "explorer": ("https://kovan.etherscan.io", "https://api-kovan.etherscan.io/api"),
    },
    NamedChain.sepolia.value: {
        "name": "sepolia",
        "explorer": ("https://sepolia.etherscan.io", "https://api-sepolia.etherscan.io/api"),
    },

    #
    # Optimism
    #
    NamedChain.optimism.value: {
        "name": "optimism",
        "explorer": ("https://optimistic.etherscan.io", "https://api-optimistic.etherscan.io/api"),
    },
    NamedChain.optimism_kovan.value: {
        "name": "optimism-kovan",
        "legacy": True,
        "explorer": ("https://kovan-optimistic.etherscan.io", "https://api-kovan-optimistic.etherscan.io/api"),
    },
    NamedChain.optimism_goerli.value: {
        "name": "optimism-goerli",
        "explorer": ("https://goerli-optimism.etherscan.io", "https://api-goerli-optimistic.etherscan.io/api"),
    },

    #
    # Arbitrum
    #
    NamedChain.arbitrum.value: {
        "name": "arbitrum",
        "aliases": ["arbitrum-one"],
        "explorer": ("https://arbiscan.io", "https://api.arbiscan.io/api"),
    },
    NamedChain.arbitrum_nova.value: {
        "name": "arbitrum-nova",
        "explorer": ("https://nova.arbiscan.io", "https://api-nova.arbiscan.io/api"),
    },
    NamedChain.arbitrum_testnet.value: {
        "name": "arbitrum-testnet",
        "legacy": True,
        "explorer": ("https://testnet.arbiscan.io", "https://api-testnet.arbiscan.io/api"),
    },
    NamedChain.arbitrum_goerli.value: {
        "name": "arbitrum-goerli",
        "explorer": ("https://goerli.arbiscan.io", "https://api-goerli.arbiscan.io/api"),
    },

    #
    # BSC
    #
    NamedChain.binance_smart_chain.value: {
        "name": "binance-smart-chain",
        "aliases": ["bsc", "binance"],
        "legacy": True,
        "explorer": ("https://bscscan.com", "https://api.bscscan.com/api"),
    },
    NamedChain.binance_smart_chain_testnet.value: {
        "name": "binance-smart-chain-testnet",
        "aliases": ["bsc-testnet"],
        "legacy": True,
        "explorer": ("https://testnet.bscscan.com", "https://api-testnet.bscscan.com/api"),
    },

    #
    # Polygon
    #
    NamedChain.polygon.value: {
        "name": "polygon",
        "aliases": ["matic"],
        "explorer": ("https://polygonscan.com", "https://api.polygonscan.com/api"),
    },
    NamedChain.polygon_mumbai.value: {
        "name": "polygon-mumbai",
        "aliases": ["mumbai"],
        "explorer": ("https://mumbai.polygonscan.com", "https://api-testnet.polygonscan.com/api"),
    },

    #
    # Avalanche
    #
    NamedChain.avalanche.value: {
        "name": "avalanche",
        "explorer": ("https://snowtrace.io", "https://api.snowtrace.io/api"),
    },
    NamedChain.avalanche_fuji.value: {
        "name": "avalanche-fuji",
        "aliases": ["fuji"],
        "explorer": ("https://testnet.snowtrace.io", "https://api-testnet.snowtrace.io/api"),
    },

    #
    # Fantom
    #
    NamedChain.fantom.value: {
        "name": "fantom",
        "legacy": True,
        "explorer": ("https://ftmscan.com", "https://api.ftmscan.com/api"),
    },
    NamedChain.fantom_testnet.value: {
        "name": "fantom-testnet",
        "legacy": True,
        "explorer": ("https://testnet.ftmscan.com", "https://api-testnet.ftmscan.com/api"),
    },

    #
    # Other EVM chains
    #
    NamedChain.cronos.value: {
        "name": "cronos",
        "legacy": True,
        "explorer": ("https://cronoscan.com", "https://api.cronoscan.com/api"),
    },
    NamedChain.rsk.value: {
        "name": "rsk",
        "legacy": True,
        "explorer": ("https://explorer.rsk.co", "https://blockscout.com/rsk/mainnet/api"),
    },
    NamedChain.gnosis.value: {
        "name": "gnosis",
        "aliases": ["xdai", "gnosis-chain"],
        "explorer": ("https://gnosisscan.io", "https://api.gnosisscan.io/api"),
    },
    NamedChain.boba.value: {
        "name": "boba",
        "legacy": True,
        "explorer": ("https://bobascan.com", "https://api.bobascan.com/api"),
    },
    NamedChain.zksync.value: {
        "name": "zksync",
        "legacy": True,
        "explorer": ("https://explorer.zksync.io", "https://zksync2-mainnet-explorer.zksync.io/"),
    },
    NamedChain.moonbeam.value: {
        "name": "moonbeam",
        "explorer": ("https://moonscan.io", "https://api-moonbeam.moonscan.io/api"),
    },
    NamedChain.moonriver.value: {
        "name": "moonriver",
        "explorer": ("https://moonriver.moonscan.io", "https://api-moonriver.moonscan.io/api"),
    },
    NamedChain.base.value: {
        "name": "base",
        "explorer": ("https://basescan.org", "https://api.basescan.org/api"),
    },
    NamedChain.celo.value: {
        "name": "celo",
        "legacy": True,
        "explorer": ("https://celoscan.io", "https://api.celoscan.io/api"),
    },
    NamedChain.aurora.value: {
        "name": "aurora",
        "explorer": ("https://aurorascan.dev", "https://api.aurorascan.dev/api"),
    },

    # Oasis does not have Etherscan-like explorer
    NamedChain.oasis.value: {
        "name": "oasis",
        "legacy": True,
    },
    NamedChain.emerald.value: {
        "name": "emerald",
        "legacy": True,
    },

    #
    # Local test chains, no explorers
    #
    NamedChain.dev.value: {
        "name": "dev",
        "aliases": ["ganache"],
    },
    NamedChain.anvil_hardhat.value: {
        "name": "anvil-hardhat",
        "aliases": ["anvil", "hardhat"],
    },
}
