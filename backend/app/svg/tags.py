"""Nesting-aware scanning of <g> groups without a DOM."""

from __future__ import annotations

import re
from dataclasses import dataclass

_GROUP_TAG_RE = re.compile(r"<(/?)g\b([^>]*)>", re.IGNORECASE)


@dataclass(frozen=True)
class GroupSpan:
    """One balanced <g>...</g> found at the current nesting level."""

    start: int
    end: int
    open_tag: str
    inner: str


def find_top_level_groups(markup: str) -> list[GroupSpan]:
    """Balanced <g> spans at depth zero, in document order.

    An opening tag that is never closed yields no span; its children are then
    seen at the current level. Stray closing tags are ignored.
    """
    spans: list[GroupSpan] = []
    depth = 0
    open_match: re.Match[str] | None = None

    for m in _GROUP_TAG_RE.finditer(markup):
        is_close = m.group(1) == "/"
        is_self_closing = m.group(2).rstrip().endswith("/")

        if is_close:
            if depth == 0:
                continue
            depth -= 1
            if depth == 0 and open_match is not None:
                spans.append(GroupSpan(
                    start=open_match.start(),
                    end=m.end(),
                    open_tag=open_match.group(0),
                    inner=markup[open_match.end():m.start()],
                ))
                open_match = None
        elif is_self_closing:
            continue
        else:
            if depth == 0:
                open_match = m
            depth += 1

    return spans


def mask_spans(markup: str, spans: list[GroupSpan]) -> str:
    """Blank out spans with spaces so offsets of the remaining text hold."""
    if not spans:
        return markup
    chars = list(markup)
    for span in spans:
        chars[span.start:span.end] = " " * (span.end - span.start)
    return "".join(chars)
