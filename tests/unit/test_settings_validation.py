"""
Unit tests for Settings and credential validation.

Tests cover:
- Missing variables are all named
- Placeholder rejection
- 0x prefix checks
- Derived RPC URL, chain id and test mode
"""

import pytest

from walletdash.config.settings import Settings, USDT_CONTRACT_ADDRESS
from walletdash.core.exceptions import ConfigurationError
from walletdash.domain.models import Network

from tests.conftest import TOKEN, WALLET, WALLET_KEY


def _settings(**overrides) -> Settings:
    values = {
        "etherscan_api_key": "ABCDEF123456",
        "wallet_private_key": WALLET_KEY,
        "wallet_public_key": WALLET,
        "token_address": TOKEN,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestValidateCredentials:
    """Tests for Settings.validate_credentials()."""

    def test_valid_settings_pass(self):
        _settings().validate_credentials()

    def test_missing_variables_are_listed(self):
        """
        GIVEN no API key and no token address
        WHEN I validate
        THEN ConfigurationError names both variables
        """
        settings = _settings(etherscan_api_key="", token_address="  ")

        with pytest.raises(ConfigurationError) as exc_info:
            settings.validate_credentials()

        message = exc_info.value.message
        assert "ETHERSCAN_API_KEY" in message
        assert "TOKEN_ADDRESS" in message
        assert "WALLET_PUBLIC_KEY" not in message
        assert exc_info.value.code == "CONFIGURATION_ERROR"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("etherscan_api_key", "your_etherscan_key"),
            ("wallet_private_key", "0xput_key_here"),
        ],
    )
    def test_placeholder_values_rejected(self, field, value):
        with pytest.raises(ConfigurationError, match="Placeholder"):
            _settings(**{field: value}).validate_credentials()

    @pytest.mark.parametrize(
        "field, expected",
        [
            ("wallet_private_key", "WALLET_PRIVATE_KEY must start with 0x"),
            ("wallet_public_key", "WALLET_PUBLIC_KEY must start with 0x"),
            ("token_address", "TOKEN_ADDRESS must be a valid Ethereum address"),
        ],
    )
    def test_missing_0x_prefix_rejected(self, field, expected):
        with pytest.raises(ConfigurationError, match=expected):
            _settings(**{field: "1234abcd"}).validate_credentials()

    def test_deposit_source_key_needs_prefix(self):
        with pytest.raises(ConfigurationError, match="DEPOSIT_SOURCE_PRIVATE_KEY"):
            _settings(deposit_source_private_key="abcd").validate_credentials()


class TestDerivedSettings:
    """Tests for derived properties and env loading."""

    def test_mainnet_defaults(self):
        settings = _settings()

        assert settings.network == Network.MAINNET
        assert settings.chain_id == 1
        assert settings.resolved_rpc_url == "https://ethereum.publicnode.com"
        assert settings.stable_token_address == USDT_CONTRACT_ADDRESS

    def test_sepolia(self):
        settings = _settings(network="sepolia")

        assert settings.chain_id == 11155111
        assert settings.resolved_rpc_url == "https://rpc.sepolia.org"

    def test_explicit_rpc_url_wins(self):
        settings = _settings(rpc_url="http://localhost:8545")

        assert settings.resolved_rpc_url == "http://localhost:8545"

    def test_test_mode(self):
        assert _settings(etherscan_api_key="test_key").is_test_mode
        assert _settings(offline_mode=True).is_test_mode
        assert not _settings().is_test_mode

    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("ETHERSCAN_API_KEY", "ENVKEY")
        monkeypatch.setenv("HASH_COIN_ADDRESS", TOKEN)
        monkeypatch.setenv("CACHE_TTL_SECONDS", "30")

        settings = Settings(_env_file=None)

        assert settings.etherscan_api_key == "ENVKEY"
        assert settings.token_address == TOKEN
        assert settings.cache_ttl_seconds == 30
