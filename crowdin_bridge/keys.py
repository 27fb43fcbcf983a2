"""Fixed-width sparse keys (`k_007`) used to index sentences in one export.

The width is derived from the largest valid index, so every key of an export
has the same length and plain string sorting gives numeric order.
"""

from __future__ import annotations

import re
from typing import Final

from crowdin_bridge.errors import KeyFormatError

KEY_PREFIX: Final[str] = "k_"
_KEY_RE: Final[re.Pattern[str]] = re.compile(r"k_([0-9]+)")


def max_index_for(count: int) -> int:
    """Largest valid index for `count` entries (0 for an empty export)."""
    if count < 0:
        raise ValueError(f"entry count must be >= 0, got {count}")
    return max(count - 1, 0)


def key_width(max_index: int) -> int:
    if max_index < 0:
        raise ValueError(f"max_index must be >= 0, got {max_index}")
    return len(str(max_index))


def encode_key(index: int, max_index: int) -> str:
    width = key_width(max_index)
    if index < 0 or index > max_index:
        raise ValueError(f"index {index} out of range 0..{max_index}")
    return f"{KEY_PREFIX}{index:0{width}d}"


def decode_key(key: str, max_index: int | None = None) -> int:
    match = _KEY_RE.fullmatch(key)
    if match is None:
        raise KeyFormatError(f"malformed key {key!r}, expected k_<digits>")
    index = int(match.group(1))
    if max_index is not None and index > max_index:
        raise KeyFormatError(f"key {key!r} out of range 0..{max_index}")
    return index
