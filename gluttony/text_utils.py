"""String helpers and the text form of engine values used by the config files."""

from __future__ import annotations

import re
from collections.abc import Sequence
from enum import Enum
from pathlib import Path, PurePath
from typing import Any

from .data_types import SystemTime, Version
from .unique_id import UUID

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _last_of_any(text: str, delimiter: str) -> int:
    """Index of the last character of ``text`` that occurs in ``delimiter``, or -1."""
    return max((text.rfind(ch) for ch in set(delimiter)), default=-1)


def extract_part_after_delimiter(text: str, delimiter: str, default: str | None = None) -> str:
    """Return what follows the last character of ``text`` found in ``delimiter``.

    ``delimiter`` is a set of characters. If none occurs, ``default`` is
    returned, or ``text`` itself when no default is given.
    """
    found = _last_of_any(text, delimiter)
    if found < 0:
        return text if default is None else default
    return text[found + 1:]


def extract_part_before_delimiter(text: str, delimiter: str, default: str | None = None) -> str:
    """Return what precedes the last character of ``text`` found in ``delimiter``.

    ``delimiter`` is a set of characters. If none occurs, ``default`` is
    returned, or ``text`` itself when no default is given.
    """
    found = _last_of_any(text, delimiter)
    if found < 0:
        return text if default is None else default
    return text[:found]


def extract_variable_name(text: str) -> str:
    """Return the final member name of an access chain such as ``a->b.c``."""
    result = extract_part_after_delimiter(text, "->")
    return extract_part_after_delimiter(result, ".")


def str_to_bool(text: str) -> bool:
    """Return True only for the exact string ``"true"``."""
    return text == "true"


def bool_to_str(value: bool) -> str:
    """Return ``"true"`` or ``"false"`` for the truth value of ``value``."""
    return str(bool(value)).lower()


def add_spaces(multiple: int, spaces_per_indent: int = 2) -> str:
    """Return the indentation for ``multiple`` levels."""
    if multiple == 0:
        return ""
    return " " * (multiple * spaces_per_indent)


def measure_indentation(text: str, spaces_per_indent: int = 2) -> int:
    """Return the number of indentation levels at the start of ``text``."""
    leading = len(text) - len(text.lstrip(" "))
    return leading // spaces_per_indent


def count_lines(text: str) -> int:
    """Count the lines in the first 256 characters of ``text``.

    An empty string counts as one line; a final line without a trailing
    newline is counted too.
    """
    if not text:
        return 1
    count = text[:256].count("\n")
    if len(text) < 256 or text[255] != "\n":
        count += 1
    return count


def extract_after_marker(path: str, marker: str = "GLT") -> str:
    """Return the part of ``path`` after the second occurrence of ``marker`` and one separator.

    Returns an empty string when the marker does not occur twice.
    """
    first = path.find(marker)
    if first < 0:
        return ""
    second = path.find(marker, first + len(marker))
    if second < 0:
        return ""
    start = second + len(marker) + 1
    if start > len(path):
        raise IndexError(f"nothing follows the second {marker!r} in {path!r}")
    return path[start:]


def remove_substring(source: str, remove: str) -> str:
    """Remove occurrences of ``remove`` and turn double quotes into single quotes.

    After a removed occurrence the next character is copied unconditionally,
    so back-to-back occurrences are removed only every other time.
    """
    result: list[str] = []
    i = 0
    length = len(source)
    while i < length:
        if remove and source.startswith(remove, i):
            i += len(remove)
            if i >= length:
                break
        ch = source[i]
        result.append("'" if ch == '"' else ch)
        i += 1
    return "".join(result)


def str_to_num(text: str, kind: type = int) -> int | float:
    """Parse the leading number of ``text`` as ``kind``; 0 when there is none."""
    if isinstance(kind, type) and issubclass(kind, bool):
        raise TypeError("str_to_num does not parse booleans")
    if isinstance(kind, type) and issubclass(kind, int):
        match = _INT_PREFIX.match(text)
        return kind(int(match.group(1))) if match else kind()
    if isinstance(kind, type) and issubclass(kind, float):
        match = _FLOAT_PREFIX.match(text)
        return kind(float(match.group(1))) if match else kind()
    raise TypeError(f"cannot parse a number of type {kind!r}")


def typename_to_string(kind: type) -> str:
    """Return the unqualified name of a type."""
    return kind.__qualname__.rsplit(".", 1)[-1]


def _stream_str(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_string(*args: Any) -> str:
    """Concatenate the stream form of every argument."""
    return "".join(_stream_str(arg) for arg in args)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_string(value: Any) -> str:
    """Return the config-file text form of ``value``.

    Vectors are tuples or lists of 2, 3 or 4 numbers; a 4x4 matrix is a
    sequence of four such rows.
    """
    if isinstance(value, bool):
        return bool_to_str(value)
    if isinstance(value, Version):
        return f"{value.major} {value.minor} {value.patch}"
    if isinstance(value, SystemTime):
        return " ".join(str(part) for part in (
            value.year, value.month, value.day, value.day_of_week,
            value.hour, value.minute, value.second, value.millisecond))
    if isinstance(value, PurePath):
        return str(value)
    if isinstance(value, UUID):
        return str(int(value))
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    if isinstance(value, str):
        return value.replace("\n", "$")
    if isinstance(value, Sequence):
        if len(value) in (2, 3) and all(_is_number(v) for v in value):
            return " ".join(_stream_str(float(v)) for v in value)
        if len(value) == 4 and all(_is_number(v) for v in value):
            return " ".join(f"{float(v):.4f}" for v in value)
        if len(value) == 4 and all(
            isinstance(row, Sequence) and len(row) == 4 and all(_is_number(v) for v in row)
            for row in value
        ):
            return " ".join(_stream_str(float(v)) for row in value for v in row)
    raise TypeError(f"unsupported value for to_string: {value!r}")


def _int_fields(text: str, count: int) -> list[int]:
    tokens = text.split()
    return [str_to_num(tokens[i], int) if i < len(tokens) else 0 for i in range(count)]


def from_string(text: str, kind: type) -> Any:
    """Parse ``text`` written by :func:`to_string` back into a value of ``kind``.

    ``tuple`` yields a tuple of floats, one per whitespace-separated token,
    which covers vectors and flattened matrices.
    """
    if kind is bool:
        return str_to_bool(text)
    if kind is Version:
        return Version(*_int_fields(text, 3))
    if kind is SystemTime:
        return SystemTime(*_int_fields(text, 8))
    if isinstance(kind, type) and issubclass(kind, PurePath):
        return kind(text)
    if kind is Path:
        return Path(text)
    if kind is UUID:
        return UUID(str_to_num(text, int))
    if isinstance(kind, type) and issubclass(kind, Enum):
        return kind(int(text.strip()))
    if kind is str:
        return text.replace("$", "\n")
    if kind is tuple:
        return tuple(float(str_to_num(token, float)) for token in text.split())
    if isinstance(kind, type) and issubclass(kind, (int, float)):
        return str_to_num(text, kind)
    raise TypeError(f"unsupported type for from_string: {kind!r}")