"""Chain client protocol and the web3 JSON-RPC implementation."""

import logging
from decimal import Decimal
from typing import Any, Callable, Protocol, TypeVar

import requests
from eth_account import Account
from eth_utils.exceptions import ValidationError as EthValidationError
from web3 import Web3
from web3.exceptions import Web3Exception

from walletdash.core.exceptions import ChainError
from walletdash.domain.models import FeeData, TransferErrorKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

ERC20_ABI = [
    {
        "constant": True,
        "inputs": [{"name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# Message fragments nodes and signers use for well-known failures
_ERROR_PATTERNS: tuple[tuple[str, TransferErrorKind], ...] = (
    ("insufficient funds", TransferErrorKind.INSUFFICIENT_FUNDS),
    ("user rejected", TransferErrorKind.USER_REJECTED),
    ("user denied", TransferErrorKind.USER_REJECTED),
)


def classify_chain_error(exc: BaseException) -> TransferErrorKind:
    """Map a raw node/signer exception onto a TransferErrorKind."""
    if isinstance(exc, ChainError):
        return exc.kind
    message = str(exc).lower()
    for fragment, kind in _ERROR_PATTERNS:
        if fragment in message:
            return kind
    return TransferErrorKind.UNKNOWN


class ChainClient(Protocol):
    """
    Protocol for blockchain access.

    Implementations raise ChainError with a classified kind on failure.
    Amounts are integers in Wei unless noted.
    """

    def get_balance(self, address: str) -> int:
        """Native balance of an address."""
        ...

    def get_token_balance(self, token_address: str, owner: str) -> Decimal:
        """ERC-20 balance in whole token units (decimals applied)."""
        ...

    def get_block_number(self) -> int:
        ...

    def estimate_gas(self, from_address: str, to_address: str, value_wei: int) -> int:
        ...

    def get_fee_data(self) -> FeeData:
        ...

    def is_address(self, value: str) -> bool:
        ...

    def address_from_key(self, private_key: str) -> str:
        """Public address controlled by a private key."""
        ...

    def send_transfer(self, private_key: str, to_address: str, value_wei: int) -> str:
        """Sign and submit a native transfer, wait for inclusion, return the tx hash."""
        ...


class Web3ChainClient:
    """ChainClient backed by a web3 HTTP provider."""

    def __init__(self, rpc_url: str, receipt_timeout_seconds: float = 120):
        self._w3 = Web3(Web3.HTTPProvider(rpc_url))
        self._receipt_timeout = receipt_timeout_seconds

    def get_balance(self, address: str) -> int:
        return self._call(lambda: self._w3.eth.get_balance(Web3.to_checksum_address(address)))

    def get_token_balance(self, token_address: str, owner: str) -> Decimal:
        contract = self._w3.eth.contract(
            address=Web3.to_checksum_address(token_address),
            abi=ERC20_ABI,
        )
        owner_checksum = Web3.to_checksum_address(owner)
        raw = self._call(lambda: contract.functions.balanceOf(owner_checksum).call())
        decimals = self._call(lambda: contract.functions.decimals().call())
        return Decimal(raw) / (Decimal(10) ** int(decimals))

    def get_block_number(self) -> int:
        return self._call(lambda: self._w3.eth.block_number)

    def estimate_gas(self, from_address: str, to_address: str, value_wei: int) -> int:
        tx = {
            "from": Web3.to_checksum_address(from_address),
            "to": Web3.to_checksum_address(to_address),
            "value": value_wei,
        }
        return self._call(lambda: self._w3.eth.estimate_gas(tx))

    def get_fee_data(self) -> FeeData:
        gas_price = self._call(lambda: self._w3.eth.gas_price)
        latest = self._call(lambda: self._w3.eth.get_block("latest"))
        base_fee = latest.get("baseFeePerGas")
        max_fee = None
        if base_fee is not None:
            priority = self._call(lambda: self._w3.eth.max_priority_fee)
            max_fee = 2 * base_fee + priority
        return FeeData(gas_price=gas_price, max_fee_per_gas=max_fee)

    def is_address(self, value: str) -> bool:
        return bool(value) and Web3.is_address(value)

    def address_from_key(self, private_key: str) -> str:
        return self._account(private_key).address

    @staticmethod
    def _account(private_key: str):
        try:
            return Account.from_key(private_key)
        except (ValueError, TypeError, EthValidationError) as exc:
            raise ChainError(f"Invalid private key: {exc}", TransferErrorKind.CONFIGURATION) from exc

    def send_transfer(self, private_key: str, to_address: str, value_wei: int) -> str:
        account = self._account(private_key)
        to_checksum = Web3.to_checksum_address(to_address)

        nonce = self._call(lambda: self._w3.eth.get_transaction_count(account.address, "pending"))
        gas = self.estimate_gas(account.address, to_checksum, value_wei)
        fees = self.get_fee_data()
        tx: dict[str, Any] = {
            "to": to_checksum,
            "value": value_wei,
            "gas": gas,
            "nonce": nonce,
            "chainId": self._call(lambda: self._w3.eth.chain_id),
            "gasPrice": fees.effective_price,
        }

        try:
            signed = account.sign_transaction(tx)
        except (ValueError, TypeError, EthValidationError) as exc:
            raise ChainError(f"Could not sign transaction: {exc}", classify_chain_error(exc)) from exc
        tx_hash = self._call(lambda: self._w3.eth.send_raw_transaction(signed.raw_transaction))
        logger.info("Submitted transfer %s, waiting for inclusion", Web3.to_hex(tx_hash))
        self._call(
            lambda: self._w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self._receipt_timeout)
        )
        return Web3.to_hex(tx_hash)

    @staticmethod
    def _call(fn: Callable[[], T]) -> T:
        """Run a node call, converting library errors into classified ChainErrors."""
        try:
            return fn()
        except ChainError:
            raise
        except (Web3Exception, requests.RequestException, ValueError, TimeoutError) as exc:
            raise ChainError(str(exc) or exc.__class__.__name__, classify_chain_error(exc)) from exc
