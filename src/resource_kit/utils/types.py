from collections.abc import Mapping, Sequence
from typing import Any


def is_sequence(obj: Any) -> bool:
    """True for list-like values; strings, bytes and mappings are not sequences here."""
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))


def is_mapping(obj: Any) -> bool:
    return isinstance(obj, Mapping)
