"""Data models for the stellar-tts library."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from .exceptions import ExternalServiceError


def _require_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value:
        raise ExternalServiceError(
            f"Malformed service response: missing or invalid '{key}'",
            response=data,
        )
    return value


class Verdict(str, Enum):
    """Outcome of comparing a local digest with the digest stored on the ledger.

    Members compare equal to the plain strings ``"correct"`` and
    ``"not correct"``.
    """

    CORRECT = "correct"
    NOT_CORRECT = "not correct"

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return self is Verdict.CORRECT


@dataclass
class SubmissionRecord:
    """Response of the ``/storehash`` endpoint."""

    transaction_id: str
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SubmissionRecord":
        """Create a SubmissionRecord from an API response dictionary."""
        return cls(transaction_id=_require_str(data, "transactionid"), raw=data)


@dataclass
class LedgerRecord:
    """A digest anchored on the Stellar ledger, as reported by ``/gethash``."""

    memo_hex: str
    gmt_timestamp: str
    stellar_link: str
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LedgerRecord":
        """Create a LedgerRecord from an API response dictionary.

        Raises:
            ExternalServiceError: If a required field is absent or not a string.
        """
        return cls(
            memo_hex=_require_str(data, "memo-hexformat"),
            gmt_timestamp=_require_str(data, "GMT-timestamp"),
            stellar_link=_require_str(data, "stellar-link"),
            raw=data,
        )
