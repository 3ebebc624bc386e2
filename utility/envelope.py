"""
Navigation of the upstream generateContent envelope.

    {"candidates": [{"content": {"parts": [{"text": ...} | {"inlineData": {...}}]}}]}

Nothing in this module raises: each lookup returns a PartLookup telling
the caller whether the part was found, absent, or malformed, and where
the chain broke.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class LookupStatus(str, Enum):
    FOUND = "found"
    ABSENT = "absent"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class PartLookup:
    status: LookupStatus
    value: Any = None
    path: str = ""

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    def describe(self) -> str:
        if self.found:
            return f"found {self.path}"
        return f"{self.status.value} at {self.path}"


def _absent(path: str) -> PartLookup:
    return PartLookup(LookupStatus.ABSENT, path=path)


def _malformed(path: str) -> PartLookup:
    return PartLookup(LookupStatus.MALFORMED, path=path)


def _child(node: Any, key: str, path: str) -> PartLookup:
    """Step into node[key], expecting node to be a JSON object."""
    if not isinstance(node, dict):
        return _malformed(path)
    value = node.get(key)
    if value is None:
        return _absent(f"{path}.{key}" if path else key)
    return PartLookup(LookupStatus.FOUND, value, f"{path}.{key}" if path else key)


def _first(node: Any, path: str) -> PartLookup:
    """Step into node[0], expecting node to be a non-empty JSON array."""
    if not isinstance(node, list):
        return _malformed(path)
    if not node:
        return _absent(f"{path}[0]")
    if node[0] is None:
        return _absent(f"{path}[0]")
    return PartLookup(LookupStatus.FOUND, node[0], f"{path}[0]")


def first_part(envelope: Any) -> PartLookup:
    """Return candidates[0].content.parts[0], or the first broken link."""
    step = PartLookup(LookupStatus.FOUND, envelope, "")
    for move in (
        lambda n, p: _child(n, "candidates", p),
        _first,
        lambda n, p: _child(n, "content", p),
        lambda n, p: _child(n, "parts", p),
        _first,
    ):
        step = move(step.value, step.path)
        if not step.found:
            return step

    if not isinstance(step.value, dict):
        return _malformed(step.path)
    return step


def part_text(envelope: Any) -> PartLookup:
    """Text of the first part."""
    part = first_part(envelope)
    if not part.found:
        return part
    text = part.value.get("text")
    path = f"{part.path}.text"
    if text is None:
        return _absent(path)
    if not isinstance(text, str):
        return _malformed(path)
    return PartLookup(LookupStatus.FOUND, text, path)


def part_inline_data(envelope: Any) -> PartLookup:
    """inlineData of the first part as {"data": str, "mimeType": str}."""
    part = first_part(envelope)
    if not part.found:
        return part

    inline = _child(part.value, "inlineData", part.path)
    if not inline.found:
        return inline
    if not isinstance(inline.value, dict):
        return _malformed(inline.path)

    result: Dict[str, Optional[str]] = {}
    for key in ("data", "mimeType"):
        field_value = inline.value.get(key)
        path = f"{inline.path}.{key}"
        if field_value is None or field_value == "":
            return _absent(path)
        if not isinstance(field_value, str):
            return _malformed(path)
        result[key] = field_value

    return PartLookup(LookupStatus.FOUND, result, inline.path)
