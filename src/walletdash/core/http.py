"""HTTP fetch helper with bounded retry and linear backoff."""

import logging
import time
from typing import Any, Callable, Optional

import requests

from walletdash.core.exceptions import FetchError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_SECONDS = 1.0
DEFAULT_TIMEOUT_SECONDS = 10.0


def fetch_with_retry(
    url: str,
    params: Optional[dict[str, Any]] = None,
    *,
    session: Optional[requests.Session] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_delay: float = DEFAULT_RETRY_DELAY_SECONDS,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> requests.Response:
    """
    GET a URL, retrying on non-2xx responses and network errors.

    Attempt i (0-based) that fails waits (i + 1) * retry_delay before the next
    one; no wait follows the last attempt. Raises FetchError once every attempt
    has failed. Without a session each attempt goes through requests.get.
    """
    http = session if session is not None else requests
    last_reason = "no attempts made"

    for attempt in range(max_attempts):
        try:
            response = http.get(url, params=params, timeout=timeout)
            if response.ok:
                return response
            last_reason = f"HTTP {response.status_code}"
        except requests.RequestException as exc:
            last_reason = str(exc) or exc.__class__.__name__

        if attempt < max_attempts - 1:
            delay = retry_delay * (attempt + 1)
            logger.warning(
                "Request to %s failed (%s), attempt %d/%d; retrying in %.1fs",
                url, last_reason, attempt + 1, max_attempts, delay,
            )
            sleep(delay)

    raise FetchError(url, f"max retries exceeded ({last_reason})")
