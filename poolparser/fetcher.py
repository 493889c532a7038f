"""
poolparser/fetcher.py
Outbound HTTP lookups with a bounded number of retries and a courtesy pause.
"""

import time
import requests
from poolparser.constants import (
    API_HEADERS,
    REQUEST_TIMEOUT,
    WEB_RETRIES,
    WEB_RETRY_MS,
)
from poolparser.exceptions import TransientError
from poolparser.logger import create_logger

logger = create_logger()


class Fetcher:
    """
    Fetches raw response bodies for a single remote source.

    Every successful call is followed by pause_ms of sleep so that the
    third-party site isn't hammered. Failed calls are retried after a fixed
    delay; once the attempts run out the last TransientError is raised.
    """

    def __init__(
        self,
        pause_ms: int,
        retries: int = WEB_RETRIES,
        retry_ms: int = WEB_RETRY_MS,
        timeout: int = REQUEST_TIMEOUT,
    ):
        self.pause_ms = pause_ms
        self.retries = retries
        self.retry_ms = retry_ms
        self.timeout = timeout

    def fetch(self, uri: str) -> bytes:
        last_error = TransientError(uri)
        for attempt in range(1, self.retries + 1):
            try:
                content = self._get(uri)
                time.sleep(self.pause_ms / 1000)
                return content
            except TransientError as error:
                last_error = error
                logger.warning(f"Attempt {attempt}/{self.retries} failed: {error.message}")
                if attempt < self.retries:
                    time.sleep(self.retry_ms / 1000)
        raise last_error

    def _get(self, uri: str) -> bytes:
        try:
            response = requests.get(uri, headers=API_HEADERS, timeout=self.timeout)
        except requests.exceptions.RequestException as error:
            raise TransientError(uri, details={"error": str(error)}) from error

        if response.status_code != 200:
            raise TransientError(uri, status_code=response.status_code)

        return response.content
