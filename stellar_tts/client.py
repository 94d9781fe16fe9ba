"""Client for the stellarapi.io trusted timestamping service."""

import logging
import os
import re
from typing import Any, Dict, Optional, Union

import requests

from .exceptions import (
    ExternalServiceError,
    InvalidArgumentError,
    NotFoundError,
    RateLimitError,
    ServerError,
)
from .models import LedgerRecord, SubmissionRecord, Verdict
from .utils import check_path, compare_hashes, file_exists, hash_file, hash_value

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://stellarapi.io"
DEFAULT_TIMEOUT = 30

STORE_PATH = "/storehash/"
LOOKUP_PATH = "/gethash/"

_WHITESPACE_RE = re.compile(r"\s+")


class StellarTimestampClient:
    """Client for creating and checking trusted timestamps on the Stellar network.

    A digest is anchored with :meth:`submit_hash`, which returns the lookup
    URL of the resulting transaction. Keep that URL: it is what
    :meth:`fetch_record` and the ``validate_*`` methods need later on.

    Args:
        base_url: Override the API base URL (default: ``https://stellarapi.io``).
        timeout: Request timeout in seconds (default: 30).
        session: An existing :class:`requests.Session` to send requests with.

    Example::

        from stellar_tts import StellarTimestampClient

        client = StellarTimestampClient()
        url = client.create_timestamp_for_file("report.pdf")
        ...
        print(client.validate_file(url, "report.pdf"))
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self._session = session if session is not None else requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/json",
                "User-Agent": "stellar-tts-python/0.1.0",
            }
        )

    def _build_url(self, path: str, param: str) -> str:
        return _WHITESPACE_RE.sub("", f"{self.base_url}{path}{param}")

    def _get(self, url: str) -> Dict[str, Any]:
        """Send a GET request to the service and return the parsed JSON object.

        Raises:
            ExternalServiceError: On network failure, a non-200 status or a
                body that is not a JSON object.
        """
        logger.debug("GET %s", url)
        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ExternalServiceError(f"Request failed: {exc}") from exc

        logger.debug("GET %s -> %s", url, resp.status_code)
        if resp.status_code != 200:
            self._handle_error(resp)

        try:
            body = resp.json()
        except ValueError as exc:
            raise ExternalServiceError(
                f"Invalid JSON in service response: {exc}",
                status_code=resp.status_code,
                response=resp.text,
            ) from exc

        if not isinstance(body, dict):
            raise ExternalServiceError(
                "Unexpected service response: expected a JSON object",
                status_code=resp.status_code,
                response=body,
            )
        return body

    @staticmethod
    def _handle_error(resp: requests.Response) -> None:
        """Raise an appropriate exception based on the HTTP response."""
        try:
            body = resp.json()
        except ValueError:
            body = {"message": resp.text}
        if not isinstance(body, dict):
            body = {"message": resp.text}

        message = body.get("message", body.get("error", resp.text)) or f"HTTP {resp.status_code}"
        status = resp.status_code

        if status == 404:
            raise NotFoundError(message, response=body)
        if status == 429:
            raise RateLimitError(message, response=body)
        if status >= 500:
            raise ServerError(message, status_code=status, response=body)

        raise ExternalServiceError(message, status_code=status, response=body)

    def lookup_url(self, transaction_id: str) -> str:
        """Build the ``/gethash`` URL for a ledger transaction id."""
        return self._build_url(LOOKUP_PATH, transaction_id)

    def submit_hash(self, digest: str) -> str:
        """Anchor a precomputed SHA-256 digest on the ledger.

        Args:
            digest: 64-character lowercase hex SHA-256 digest.

        Returns:
            The lookup URL of the transaction holding the digest.
        """
        if not isinstance(digest, str) or not digest.strip():
            raise InvalidArgumentError("digest must be a non-empty string")

        data = self._get(self._build_url(STORE_PATH, digest))
        record = SubmissionRecord.from_dict(data)
        logger.debug("Digest %s stored in transaction %s", digest, record.transaction_id)
        return self.lookup_url(record.transaction_id)

    def fetch_record(self, url: str) -> LedgerRecord:
        """Retrieve the ledger record behind a lookup URL."""
        return LedgerRecord.from_dict(self._get(url))

    def get_hash(self, url: str) -> str:
        """Return the digest stored on the ledger (``memo-hexformat``)."""
        return self.fetch_record(url).memo_hex

    def get_timestamp(self, url: str) -> str:
        """Return the GMT time at which the ledger confirmed the transaction."""
        return self.fetch_record(url).gmt_timestamp

    def get_transaction_link(self, url: str) -> str:
        """Return the URL of the transaction in a Stellar explorer."""
        return self.fetch_record(url).stellar_link

    def create_timestamp_for_value(self, value: Any) -> str:
        """Hash an in-memory value and anchor its digest.

        Returns:
            The lookup URL to keep for later verification.
        """
        return self.submit_hash(hash_value(value))

    def create_timestamp_for_file(
        self,
        path: Union[str, "os.PathLike[str]"],
        missing_ok: bool = True,
    ) -> Optional[str]:
        """Hash a file and anchor its digest.

        Returns ``None`` without contacting the service when the file does
        not exist and *missing_ok* is true.
        """
        digest = hash_file(path, missing_ok=missing_ok)
        if digest is None:
            return None
        return self.submit_hash(digest)

    def validate_value(self, url: str, value: Any) -> Verdict:
        """Check an in-memory value against the digest anchored at *url*.

        Args:
            url: Lookup URL returned when the timestamp was created.
            value: The data to check.

        Returns:
            :attr:`Verdict.CORRECT` if the digests match, otherwise
            :attr:`Verdict.NOT_CORRECT`.
        """
        record = self.fetch_record(url)
        verdict = compare_hashes(hash_value(value), record.memo_hex)
        logger.debug("Validation against %s: %s", url, verdict)
        return verdict

    def validate_file(
        self,
        url: str,
        path: Union[str, "os.PathLike[str]"],
        missing_ok: bool = True,
    ) -> Optional[Verdict]:
        """Check a file against the digest anchored at *url*.

        The path is checked before the service is contacted; a missing file
        gives ``None`` (or :class:`~stellar_tts.exceptions.MissingFileError`
        when *missing_ok* is false).
        """
        p = check_path(path)
        if not file_exists(p, missing_ok):
            return None

        record = self.fetch_record(url)
        digest = hash_file(p, missing_ok=missing_ok)
        if digest is None:
            return None
        verdict = compare_hashes(digest, record.memo_hex)
        logger.debug("Validation of %s against %s: %s", p, url, verdict)
        return verdict
