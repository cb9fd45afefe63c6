"""Application settings and configuration."""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from walletdash.core.exceptions import ConfigurationError
from walletdash.domain.models import Network

# Tether USD on Ethereum mainnet
USDT_CONTRACT_ADDRESS = "0xdAC17F958D2ee523a2206206994597C13D831ec7"

_DEFAULT_RPC_URLS = {
    Network.MAINNET: "https://ethereum.publicnode.com",
    Network.SEPOLIA: "https://rpc.sepolia.org",
}

_CHAIN_IDS = {
    Network.MAINNET: 1,
    Network.SEPOLIA: 11155111,
}

_REQUIRED_FIELDS = (
    "etherscan_api_key",
    "wallet_private_key",
    "wallet_public_key",
    "token_address",
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "Wallet Dashboard"
    app_version: str = "0.1.0"

    # Credentials
    etherscan_api_key: str = ""
    wallet_private_key: str = ""
    wallet_public_key: str = ""
    token_address: str = Field(
        default="",
        validation_alias=AliasChoices("token_address", "hash_coin_address"),
    )
    deposit_source_private_key: Optional[str] = None

    # Chain
    network: Network = Network.MAINNET
    rpc_url: Optional[str] = None
    stable_token_address: str = USDT_CONTRACT_ADDRESS

    # App behavior
    offline_mode: bool = False
    log_level: str = "INFO"
    cache_ttl_seconds: int = 60

    # Outbound HTTP
    http_max_attempts: int = 3
    http_retry_delay_seconds: float = 1.0
    http_timeout_seconds: float = 10.0

    @property
    def resolved_rpc_url(self) -> str:
        """RPC endpoint, defaulting to a public node for the configured network."""
        return self.rpc_url or _DEFAULT_RPC_URLS[self.network]

    @property
    def chain_id(self) -> int:
        return _CHAIN_IDS[self.network]

    @property
    def is_test_mode(self) -> bool:
        """True when no real explorer credentials are expected."""
        return self.offline_mode or self.etherscan_api_key == "test_key"

    def validate_credentials(self) -> None:
        """
        Fail fast on missing or malformed credentials.

        Raises ConfigurationError naming every missing variable, rejecting
        placeholder values, and requiring the 0x prefix on keys and addresses.
        """
        missing = [
            name.upper()
            for name in _REQUIRED_FIELDS
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file and provide real values."
            )

        if _is_placeholder(self.etherscan_api_key) or _is_placeholder(self.wallet_private_key):
            raise ConfigurationError(
                "Please provide real environment variables. Placeholder values are not allowed."
            )

        if not self.wallet_private_key.startswith("0x"):
            raise ConfigurationError("WALLET_PRIVATE_KEY must start with 0x")

        if not self.wallet_public_key.startswith("0x"):
            raise ConfigurationError("WALLET_PUBLIC_KEY must start with 0x")

        if not self.token_address.startswith("0x"):
            raise ConfigurationError(
                "TOKEN_ADDRESS must be a valid Ethereum address starting with 0x"
            )

        if self.deposit_source_private_key and not self.deposit_source_private_key.startswith("0x"):
            raise ConfigurationError("DEPOSIT_SOURCE_PRIVATE_KEY must start with 0x")


def _is_placeholder(value: str) -> bool:
    return "your_" in value or "here" in value


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (used by tests and scripts)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
