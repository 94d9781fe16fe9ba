"""Digest and encoding helpers for the stellar-tts library."""

import base64
import binascii
import hashlib
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import InvalidArgumentError, MissingFileError
from .models import Verdict

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192

_HEX_RE = re.compile(r"^[0-9a-fA-F]+$")


def _serialize(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    try:
        return json.dumps(
            value, sort_keys=True, separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Cannot serialize value for hashing: {exc}") from exc


def hash_value(value: Any) -> str:
    """Compute the SHA-256 hex digest of an in-memory value.

    Bytes-like values are hashed as they are, strings as UTF-8 and anything
    else as canonical JSON (sorted keys, compact separators), so equal values
    always give the same digest.

    Args:
        value: The data to hash.

    Returns:
        The lowercase hex SHA-256 digest (64 characters).

    Raises:
        InvalidArgumentError: If the value cannot be serialized.
    """
    return hashlib.sha256(_serialize(value)).hexdigest()


def check_path(path: Union[str, "os.PathLike[str]"]) -> Path:
    """Return *path* as a :class:`~pathlib.Path`, rejecting non path-like values."""
    if not isinstance(path, (str, os.PathLike)):
        raise InvalidArgumentError("Please specify a correct path.")
    return Path(path)


def file_exists(path: Path, missing_ok: bool = True) -> bool:
    """Report whether *path* is an existing file.

    A missing file is logged and reported as ``False``, or raised as
    :class:`MissingFileError` when *missing_ok* is false.
    """
    if path.is_file():
        return True
    if not missing_ok:
        raise MissingFileError(str(path))
    logger.warning("File %s not found.", path)
    return False


def hash_file(path: Union[str, "os.PathLike[str]"], missing_ok: bool = True) -> Optional[str]:
    """Compute the SHA-256 hex digest of a file using chunked reading.

    Args:
        path: Path to the file to hash.
        missing_ok: When true a missing file is logged and ``None`` returned,
            otherwise :class:`MissingFileError` is raised.

    Returns:
        The lowercase hex SHA-256 digest (64 characters), or ``None`` if the
        file does not exist.

    Raises:
        InvalidArgumentError: If *path* is not a string or path-like object.
        MissingFileError: If the file is missing and *missing_ok* is false.
    """
    p = check_path(path)
    if not file_exists(p, missing_ok):
        return None

    sha256 = hashlib.sha256()
    with open(p, "rb") as f:
        while True:
            chunk = f.read(CHUNK_SIZE)
            if not chunk:
                break
            sha256.update(chunk)
    return sha256.hexdigest()


def stellar_hash_to_hex(encoded: str) -> str:
    """Convert a base64 encoded hash, as stored in a Stellar memo, to hex.

    Args:
        encoded: The base64 string.

    Returns:
        The decoded bytes as a lowercase hex string without separators.

    Raises:
        InvalidArgumentError: If *encoded* is not a string or not valid base64.
    """
    if not isinstance(encoded, str):
        raise InvalidArgumentError("Encoded hash must be a string")
    try:
        raw = base64.b64decode(encoded.strip(), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidArgumentError(f"Invalid base64 hash: {exc}") from exc
    return raw.hex()


def normalize_ledger_hash(memo: str) -> str:
    """Bring a ledger memo into lowercase hex form.

    Hex memos are lower-cased; memos that are valid base64 but not hex are
    decoded. Anything else is returned unchanged.
    """
    memo = memo.strip()
    if _HEX_RE.match(memo):
        return memo.lower()
    try:
        return stellar_hash_to_hex(memo)
    except InvalidArgumentError:
        return memo


def compare_hashes(local_hash: str, ledger_memo: str) -> Verdict:
    """Compare a freshly computed digest with the memo stored on the ledger."""
    if local_hash == normalize_ledger_hash(ledger_memo):
        return Verdict.CORRECT
    return Verdict.NOT_CORRECT
