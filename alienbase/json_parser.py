"""Symmetric encoding and decoding of values in a nested settings tree.

The tree is a dict of dicts whose leaves are strings; node paths use '.'.
"""

from __future__ import annotations

import enum
import re
from typing import Any, MutableMapping, TypeVar

T = TypeVar("T")

_INT_PATTERN = re.compile(r"[+-]?\d+")


class ParserTask(enum.Enum):
    ENCODE = "encode"
    DECODE = "decode"


def _encode_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return f"{value:.6f}"
    return str(value)


def _put(tree: MutableMapping[str, Any], node: str, text: str) -> None:
    *parents, leaf = node.split(".")
    current = tree
    for key in parents:
        child = current.get(key)
        if not isinstance(child, dict):
            child = {}
            current[key] = child
        current = child
    current[leaf] = text


def _lookup(tree: MutableMapping[str, Any], node: str) -> Any:
    current: Any = tree
    for key in node.split("."):
        if not isinstance(current, dict) or key not in current:
            raise KeyError(node)
        current = current[key]
    if isinstance(current, dict):
        raise KeyError(node)
    return current


def _convert(text: str, default: Any) -> Any:
    text = text.strip()
    if isinstance(default, bool):
        if text in ("true", "1"):
            return True
        if text in ("false", "0"):
            return False
        raise ValueError(text)
    if isinstance(default, int):
        if not _INT_PATTERN.fullmatch(text):
            raise ValueError(text)
        return int(text)
    if isinstance(default, float):
        return float(text)
    return type(default)(text)


def encode_decode(tree: MutableMapping[str, Any], value: T, default: T, node: str, task: ParserTask) -> T:
    """Write ``value`` to ``node`` or read it from there, depending on ``task``.

    Encoding stores the value as text and returns it unchanged. Decoding returns
    the value at ``node`` converted to the type of ``default``, or ``default``
    when the node is missing or cannot be converted.
    """
    if task is ParserTask.ENCODE:
        _put(tree, node, _encode_text(value))
        return value
    try:
        raw = _lookup(tree, node)
    except KeyError:
        return default
    if isinstance(default, str):
        return raw if isinstance(raw, str) else _encode_text(raw)
    text = raw if isinstance(raw, str) else _encode_text(raw)
    try:
        return _convert(text, default)
    except (ValueError, TypeError):
        return default