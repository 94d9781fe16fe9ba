"""stellar-tts: trusted timestamps for data and files on the Stellar network."""

from .client import StellarTimestampClient
from .exceptions import (
    ExternalServiceError,
    InvalidArgumentError,
    MissingFileError,
    NotFoundError,
    RateLimitError,
    ServerError,
    TimestampError,
)
from .models import LedgerRecord, SubmissionRecord, Verdict
from .utils import compare_hashes, hash_file, hash_value, stellar_hash_to_hex

__version__ = "0.1.0"

__all__ = [
    "StellarTimestampClient",
    "hash_file",
    "hash_value",
    "stellar_hash_to_hex",
    "compare_hashes",
    "LedgerRecord",
    "SubmissionRecord",
    "Verdict",
    "TimestampError",
    "ExternalServiceError",
    "InvalidArgumentError",
    "MissingFileError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
]
