"""Decode share documents into (n, k, shares).

Document shape:

    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Every entry whose key parses as an integer and whose value is an object
becomes a share with x = int(key); anything else besides "keys" is
ignored. Share order, and so each share's stable index, is document order.
"""

import json
import logging
import re
from dataclasses import dataclass

from sharevote.errors import DecodeError
from sharevote.share import Share

logger = logging.getLogger(__name__)

MIN_BASE = 2
MAX_BASE = 16


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    shares: tuple


def digit_value(c: str) -> int:
    """Value of one hex-range digit, or -1 if it is not one."""
    if '0' <= c <= '9':
        return ord(c) - ord('0')
    if 'a' <= c <= 'f':
        return 10 + ord(c) - ord('a')
    if 'A' <= c <= 'F':
        return 10 + ord(c) - ord('A')
    return -1


def parse_in_base(value: str, base: int) -> int:
    """Parse an unsigned digit string in base 2..16 into an int."""
    if not (MIN_BASE <= base <= MAX_BASE):
        raise DecodeError(f"Unsupported base: {base}")
    if not value:
        raise DecodeError(f"Empty value for base {base}")
    result = 0
    for c in value:
        d = digit_value(c)
        if d < 0:
            raise DecodeError(f"Invalid digit: {c!r}")
        if d >= base:
            raise DecodeError(f"Digit {c!r} out of range for base {base}")
        result = result * base + d
    return result


def _as_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise DecodeError(f"Expected int for {what}, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise DecodeError(f"Expected int for {what}, got {value!r}")


def _as_text(value, what: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    raise DecodeError(f"Expected string/number for {what}, got {value!r}")


def decode_share(key: str, entry: dict) -> Share:
    base = _as_int(entry.get('base'), f"share {key} base")
    raw = _as_text(entry.get('value'), f"share {key} value")
    return Share(x=int(key), y=parse_in_base(raw, base), base=base, raw=raw)


def decode_document(doc) -> ShareDocument:
    """Turn a parsed JSON object into a ShareDocument."""
    if not isinstance(doc, dict):
        raise DecodeError("Root must be a JSON object")
    keys = doc.get('keys')
    if not isinstance(keys, dict):
        raise DecodeError("Expected object for key 'keys'")
    n = _as_int(keys.get('n'), "keys.n")
    k = _as_int(keys.get('k'), "keys.k")

    shares = []
    for key, entry in doc.items():
        if key == 'keys':
            continue
        if not re.fullmatch(r'[+-]?\d+', key):
            logger.debug("Ignoring non-numeric key %r", key)
            continue
        if not isinstance(entry, dict):
            logger.debug("Ignoring non-object entry for key %r", key)
            continue
        shares.append(decode_share(key, entry))

    if len(shares) != n:
        logger.warning("Declared n=%d but %d share(s) provided", n, len(shares))
    return ShareDocument(n=n, k=k, shares=tuple(shares))


def loads(text: str) -> ShareDocument:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON: {e}") from e
    return decode_document(doc)


def load(fp) -> ShareDocument:
    return loads(fp.read())
