"""Placeholder detection in template text."""

from __future__ import annotations

import re
from collections.abc import Iterable

# Fixed priority: the first syntax that matches a text node names it.
PLACEHOLDER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\{\{(\w+)\}\}"),  # {{name}}
    re.compile(r"\$\{(\w+)\}"),  # ${name}
    re.compile(r"%(\w+)%"),  # %name%
    re.compile(r"\[(\w+)\]"),  # [name]
)


def match_placeholder(text: str) -> str | None:
    """Name of the placeholder a single text node stands for, if any."""
    for pattern in PLACEHOLDER_PATTERNS:
        m = pattern.search(text)
        if m:
            return m.group(1)
    return None


def detect_placeholders(content: str) -> list[str]:
    """Every placeholder name in a string, pattern by pattern, first-seen order."""
    names: list[str] = []
    for pattern in PLACEHOLDER_PATTERNS:
        for m in pattern.finditer(content):
            if m.group(1) not in names:
                names.append(m.group(1))
    return names


def merge_placeholders(*groups: Iterable[str]) -> list[str]:
    merged: list[str] = []
    for group in groups:
        for name in group:
            if name not in merged:
                merged.append(name)
    return merged
