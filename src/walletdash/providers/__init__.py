"""Chain, price and explorer providers module."""

from walletdash.providers.chain_client import ChainClient, Web3ChainClient, classify_chain_error
from walletdash.providers.price_provider import PriceProvider, CoinGeckoPriceProvider
from walletdash.providers.explorer_provider import ExplorerProvider, EtherscanExplorer
from walletdash.providers.stub_provider import StubChainClient, StubPriceProvider, StubExplorer

__all__ = [
    "ChainClient",
    "Web3ChainClient",
    "classify_chain_error",
    "PriceProvider",
    "CoinGeckoPriceProvider",
    "ExplorerProvider",
    "EtherscanExplorer",
    "StubChainClient",
    "StubPriceProvider",
    "StubExplorer",
]
