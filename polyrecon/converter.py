import re
from dataclasses import dataclass
from .errors import InputParseError, CountMismatch
from .parser import parse_document
from .base_decoder import decode, MIN_BASE, MAX_BASE
from .newton import Point

KEYS_FIELD = "keys"

_DECIMAL = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ShareEntry:
    key: str
    x: int
    base: int
    digits: str


@dataclass(frozen=True)
class ShareDocument:
    n: int
    k: int
    entries: list[ShareEntry]

    def count_mismatch(self) -> CountMismatch | None:
        if len(self.entries) != self.n:
            return CountMismatch(self.n, len(self.entries))
        return None


def _require_int(value, where: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InputParseError(f"{where} must be an integer (currently {value!r})")
    return value


def _decimal_to_int(text: str, where: str) -> int:
    try:
        return int(text)
    except ValueError:
        # only reachable past the interpreter's int string conversion limit
        raise InputParseError(f"{where} has too many digits ({len(text)})") from None


def _parse_base(value, key: str) -> int:
    # base may be written as a number or as a decimal string
    if isinstance(value, str) and _DECIMAL.fullmatch(value.strip()):
        value = _decimal_to_int(value.strip(), f"base of share '{key}'")
    base = _require_int(value, f"base of share '{key}'")
    if not MIN_BASE <= base <= MAX_BASE:
        raise InputParseError(f"base of share '{key}' must be between {MIN_BASE} and {MAX_BASE} inclusive (currently {base})")
    return base


def _parse_entry(key, record) -> ShareEntry:
    if not _DECIMAL.fullmatch(key):
        raise InputParseError(f"Share key '{key}' is not a decimal integer")
    if not isinstance(record, dict):
        raise InputParseError(f"Share '{key}' must be an object with 'base' and 'value' fields")

    for field in ("base", "value"):
        if field not in record:
            raise InputParseError(f"Share '{key}' is missing the '{field}' field")

    digits = record["value"]
    if not isinstance(digits, str):
        raise InputParseError(f"value of share '{key}' must be a string of digits (currently {digits!r})")

    x = _decimal_to_int(key, "Share key")
    return ShareEntry(key, x, _parse_base(record["base"], key), digits)


def to_share_document(obj) -> ShareDocument:
    """
    Schema-driven conversion of a parsed document into a ShareDocument.

    'keys' holds the fixed fields n and k, every other member is a share.
    Share entries keep the order they appear in, sorting happens in decode_points.
    """
    if not isinstance(obj, dict):
        raise InputParseError("Document must be an object")
    if KEYS_FIELD not in obj:
        raise InputParseError(f"Document is missing the '{KEYS_FIELD}' field")

    keys = obj[KEYS_FIELD]
    if not isinstance(keys, dict):
        raise InputParseError(f"'{KEYS_FIELD}' must be an object with 'n' and 'k' fields")
    for field in ("n", "k"):
        if field not in keys:
            raise InputParseError(f"Document is missing '{KEYS_FIELD}.{field}'")

    n = _require_int(keys["n"], f"{KEYS_FIELD}.n")
    k = _require_int(keys["k"], f"{KEYS_FIELD}.k")
    if n < 0:
        raise InputParseError(f"{KEYS_FIELD}.n must not be negative (currently {n})")
    if k <= 0:
        raise InputParseError(f"{KEYS_FIELD}.k must be at least 1 (currently {k})")

    entries = [
        _parse_entry(key, record)
        for key, record in obj.items()
        if key != KEYS_FIELD
    ]

    return ShareDocument(n, k, entries)


def read_document(text: str) -> ShareDocument:
    return to_share_document(parse_document(text))


def decode_points(document: ShareDocument) -> list[Point]:
    """Decode every share and return the points sorted by x."""
    points = [
        Point(entry.x, decode(entry.digits, entry.base))
        for entry in document.entries
    ]
    # sorted() is stable, so "1" and "01" keep document order
    return sorted(points, key=lambda p: p.x)


def choose_points(document: ShareDocument) -> list[Point]:
    """The first k points in ascending x order."""
    points = decode_points(document)
    if len(points) < document.k:
        raise InputParseError(f"Not enough shares to reconstruct polynomial. (have {len(points)}/{document.k} shares)")
    return points[:document.k]
