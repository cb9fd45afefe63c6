"""Transfer service for depositing to and withdrawing from the dashboard wallet."""

import logging
from decimal import Decimal

from walletdash.config.settings import Settings
from walletdash.core.cache import TimeWindowedCache
from walletdash.core.exceptions import ChainError, ConfigurationError
from walletdash.core.units import eth_to_wei, parse_eth_amount, wei_to_eth
from walletdash.domain.models import TransferErrorKind
from walletdash.domain.views import DepositAddressView, TransactionResult
from walletdash.providers.chain_client import ChainClient

logger = logging.getLogger(__name__)

_FRIENDLY_MESSAGES = {
    TransferErrorKind.INSUFFICIENT_FUNDS: (
        "Insufficient funds. Please ensure you have enough ETH to cover the amount and gas fees."
    ),
    TransferErrorKind.USER_REJECTED: "Transaction was cancelled",
}


def _fmt_eth(amount: Decimal) -> str:
    return f"{amount:.6f}"


class _Rejected(Exception):
    """Internal signal: the transfer failed validation before submission."""

    def __init__(self, message: str, kind: TransferErrorKind):
        self.message = message
        self.kind = kind
        super().__init__(message)


class TransferService:
    """
    Service for native ETH transfers.

    Each operation is a single attempt: validate configuration, re-check the
    sender's balance against amount plus estimated gas, then sign, submit and
    wait for inclusion. Failures come back as TransactionResult(success=False)
    with a user-facing message; nothing is raised to the caller.
    """

    def __init__(
        self,
        chain: ChainClient,
        settings: Settings,
        cache: TimeWindowedCache,
    ):
        self._chain = chain
        self._settings = settings
        self._cache = cache

    def get_deposit_address(self) -> DepositAddressView:
        """Address users should fund, or the configuration problem preventing it."""
        try:
            self._settings.validate_credentials()
        except ConfigurationError as exc:
            logger.error("Error getting deposit address: %s", exc.message)
            return DepositAddressView(success=False, error=exc.message)
        return DepositAddressView(success=True, deposit_address=self._settings.wallet_public_key)

    def withdraw(self, amount: str, recipient_address: str) -> TransactionResult:
        """Send ETH from the dashboard wallet to recipient_address."""
        return self._run(
            action="withdraw",
            amount=amount,
            signer_key=lambda: self._settings.wallet_private_key,
            sender=lambda _key: self._settings.wallet_public_key,
            recipient=recipient_address,
            same_address_message="Cannot withdraw to the same wallet address",
        )

    def deposit(self, amount: str) -> TransactionResult:
        """Fund the dashboard wallet from the configured deposit-source wallet."""
        return self._run(
            action="deposit",
            amount=amount,
            signer_key=self._deposit_source_key,
            sender=self._chain.address_from_key,
            recipient=self._settings.wallet_public_key,
            same_address_message="Cannot deposit from the same wallet address",
        )

    def _deposit_source_key(self) -> str:
        key = self._settings.deposit_source_private_key
        if not key:
            raise _Rejected(
                "Deposit source wallet is not configured (DEPOSIT_SOURCE_PRIVATE_KEY)",
                TransferErrorKind.CONFIGURATION,
            )
        return key

    def _run(
        self,
        action: str,
        amount: str,
        signer_key,
        sender,
        recipient: str,
        same_address_message: str,
    ) -> TransactionResult:
        try:
            self._settings.validate_credentials()
            key = signer_key()
            from_address = sender(key)
            tx_hash = self._transfer(key, from_address, recipient, amount, same_address_message)
        except ConfigurationError as exc:
            logger.error("Error in %s: %s", action, exc.message)
            return TransactionResult.failure(exc.message, TransferErrorKind.CONFIGURATION.value)
        except _Rejected as exc:
            logger.info("Rejected %s: %s", action, exc.message)
            return TransactionResult.failure(exc.message, exc.kind.value)
        except ChainError as exc:
            logger.error("Error in %s: %s", action, exc.message)
            message = _FRIENDLY_MESSAGES.get(exc.kind, exc.message or "Transaction failed")
            return TransactionResult.failure(message, exc.kind.value)
        except Exception as exc:
            logger.exception("Unexpected error in %s", action)
            return TransactionResult.failure(
                str(exc) or "Transaction failed", TransferErrorKind.UNKNOWN.value
            )

        self._cache.clear_identity(self._settings.wallet_public_key)
        logger.info("Completed %s of %s ETH: %s", action, amount, tx_hash)
        return TransactionResult(success=True, tx_hash=tx_hash)

    def _transfer(
        self,
        private_key: str,
        from_address: str,
        to_address: str,
        amount: str,
        same_address_message: str,
    ) -> str:
        try:
            amount_eth = parse_eth_amount(amount)
        except ValueError as exc:
            raise _Rejected(str(exc), TransferErrorKind.INVALID_AMOUNT) from exc
        amount_wei = eth_to_wei(amount_eth)

        balance_wei = self._chain.get_balance(from_address)
        if balance_wei < amount_wei:
            raise _Rejected(
                f"Insufficient balance. Available: {_fmt_eth(wei_to_eth(balance_wei))} ETH, "
                f"requested: {amount} ETH",
                TransferErrorKind.INSUFFICIENT_FUNDS,
            )

        if not self._chain.is_address(to_address):
            raise _Rejected("Invalid recipient address", TransferErrorKind.INVALID_RECIPIENT)

        if to_address.lower() == from_address.lower():
            raise _Rejected(same_address_message, TransferErrorKind.SELF_TRANSFER)

        fee_data = self._chain.get_fee_data()
        estimated_gas = self._chain.estimate_gas(from_address, to_address, amount_wei)
        gas_cost = estimated_gas * fee_data.effective_price

        if balance_wei < amount_wei + gas_cost:
            raise _Rejected(
                f"Insufficient balance. Available: {_fmt_eth(wei_to_eth(balance_wei))} ETH, "
                f"required: {_fmt_eth(wei_to_eth(amount_wei + gas_cost))} ETH (amount + gas)",
                TransferErrorKind.INSUFFICIENT_FUNDS,
            )

        return self._chain.send_transfer(private_key, to_address, amount_wei)
