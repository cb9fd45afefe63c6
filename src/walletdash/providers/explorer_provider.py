"""Transaction-history provider protocol and the Etherscan implementation."""

from typing import Any, Optional, Protocol

import requests

from walletdash.core.exceptions import ExplorerError
from walletdash.core.http import fetch_with_retry
from walletdash.domain.models import ExplorerTransaction

ETHERSCAN_V2_URL = "https://api.etherscan.io/v2/api"
LAST_BLOCK = 99999999

_NO_TRANSACTIONS = "no transactions found"


class ExplorerProvider(Protocol):
    """Protocol for listing an address's native transactions."""

    def get_transactions(self, address: str, start_block: int) -> list[ExplorerTransaction]:
        """Transactions touching address from start_block onward, oldest first."""
        ...


class EtherscanExplorer:
    """ExplorerProvider backed by the Etherscan v2 multichain API."""

    def __init__(
        self,
        api_key: str,
        chain_id: int = 1,
        session: Optional[requests.Session] = None,
        base_url: str = ETHERSCAN_V2_URL,
        max_attempts: int = 3,
        retry_delay: float = 1.0,
        timeout: float = 10.0,
    ):
        self._api_key = api_key
        self._chain_id = chain_id
        self._session = session or requests.Session()
        self._base_url = base_url
        self._max_attempts = max_attempts
        self._retry_delay = retry_delay
        self._timeout = timeout

    def get_transactions(self, address: str, start_block: int) -> list[ExplorerTransaction]:
        params = {
            "chainid": self._chain_id,
            "module": "account",
            "action": "txlist",
            "address": address,
            "startblock": start_block,
            "endblock": LAST_BLOCK,
            "sort": "asc",
            "apikey": self._api_key,
        }
        response = fetch_with_retry(
            self._base_url,
            params,
            session=self._session,
            max_attempts=self._max_attempts,
            retry_delay=self._retry_delay,
            timeout=self._timeout,
        )
        payload = response.json()

        if payload.get("status") != "1":
            message = str(payload.get("message") or "")
            if message.lower() == _NO_TRANSACTIONS:
                return []
            raise ExplorerError(f"Etherscan error: {message or 'unknown'} ({payload.get('result')})")

        result = payload.get("result")
        if not isinstance(result, list):
            raise ExplorerError("Etherscan returned no transaction list")
        return [_parse_transaction(tx) for tx in result]


def _parse_transaction(tx: dict[str, Any]) -> ExplorerTransaction:
    return ExplorerTransaction(
        hash=tx.get("hash") or "",
        from_address=tx.get("from") or "",
        to_address=tx.get("to") or "",
        value_wei=int(tx.get("value") or 0),
        timestamp=int(tx.get("timeStamp") or 0),
    )
