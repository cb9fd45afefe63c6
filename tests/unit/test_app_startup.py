"""
Unit tests for application startup and the global error handler.
"""

import asyncio
import json

import pytest

from walletdash.config.settings import Settings, reset_settings, set_settings
from walletdash.core.exceptions import ChainError, ConfigurationError
from walletdash.main import app, app_error_handler, lifespan


async def _start_and_stop() -> None:
    async with lifespan(app):
        pass


@pytest.fixture
def restore_settings():
    yield
    reset_settings()


class TestLifespan:
    """Tests for the startup credential check."""

    def test_missing_credentials_abort_startup(self, restore_settings):
        """
        GIVEN no credentials are configured
        WHEN the app starts
        THEN ConfigurationError is raised
        """
        set_settings(Settings(_env_file=None))

        with pytest.raises(ConfigurationError, match="Missing required environment variables"):
            asyncio.run(_start_and_stop())

    def test_offline_mode_skips_credential_check(self, restore_settings):
        set_settings(Settings(_env_file=None, offline_mode=True))

        asyncio.run(_start_and_stop())

    def test_valid_settings_start(self, settings, restore_settings):
        set_settings(settings)

        asyncio.run(_start_and_stop())


class TestAppErrorHandler:
    """Tests for mapping AppError to an HTTP 400 body."""

    def test_configuration_error(self):
        error = ConfigurationError("WALLET_PUBLIC_KEY must start with 0x")

        response = asyncio.run(app_error_handler(None, error))

        assert response.status_code == 400
        assert json.loads(response.body) == {
            "error": "CONFIGURATION_ERROR",
            "message": "WALLET_PUBLIC_KEY must start with 0x",
        }

    def test_chain_error_code(self):
        response = asyncio.run(app_error_handler(None, ChainError("rpc down")))

        assert json.loads(response.body)["error"] == "CHAIN_ERROR"
