"""
Page selection expressions.

Two checks live here. ``validate_page_range`` is a pure shape check used by
the CLI before the document is opened; ``parse_page_range`` resolves an
expression against the real page count. Any expression accepted by the first
is either accepted by the second or rejected for a bounds reason.
"""
from __future__ import annotations

import re
from typing import Iterable, Tuple

from ..exceptions import PageRangeError

ALL_PAGES = "all"

_CLAUSE = r"\d+(?:-\d+)?"
# Whole expression: clauses separated by commas, whitespace only after a comma.
SYNTAX_RE = re.compile(rf"^{_CLAUSE}(?:,\s*{_CLAUSE})*$", re.ASCII)
# A single trimmed clause: "N" or "A-B".
CLAUSE_RE = re.compile(r"^(\d+)(?:\s*-\s*(\d+))?$", re.ASCII)

PageSelection = Tuple[int, ...]


def _normalize(expression: str) -> str:
    return (expression or "").strip().casefold()


def validate_page_range(expression: str) -> None:
    """Check the shape of a page expression without knowing the page count."""
    normalized = _normalize(expression)
    if normalized in ("", ALL_PAGES):
        return
    if not SYNTAX_RE.match(normalized):
        raise PageRangeError(f"invalid page range format: {expression.strip()}")


def _parse_clause(clause: str, total_pages: int) -> range:
    match = CLAUSE_RE.match(clause)
    if match is None:
        if "-" in clause:
            raise PageRangeError(f"invalid range format: {clause}", clause=clause)
        raise PageRangeError(f"invalid page number: {clause}", clause=clause)

    start = int(match.group(1))
    end = int(match.group(2)) if match.group(2) is not None else start
    low, high = min(start, end), max(start, end)
    if low < 1 or high > total_pages:
        if match.group(2) is None:
            raise PageRangeError(
                f"page number out of range (1-{total_pages}): {clause}", clause=clause
            )
        raise PageRangeError(
            f"page numbers out of range (1-{total_pages}): {clause}", clause=clause
        )
    return range(low, high + 1)


def parse_page_range(expression: str, total_pages: int) -> PageSelection:
    """
    Resolve a page expression against a document with ``total_pages`` pages.

    Returns a strictly ascending tuple of 1-indexed page numbers. Raises
    ``PageRangeError`` for malformed clauses, out-of-bounds pages, or when
    nothing is selected.
    """
    normalized = _normalize(expression)
    if normalized in ("", ALL_PAGES):
        pages = set(range(1, total_pages + 1))
    else:
        pages = set()
        for part in normalized.split(","):
            clause = part.strip()
            if not clause:
                continue
            pages.update(_parse_clause(clause, total_pages))

    if not pages:
        raise PageRangeError("no valid pages specified")
    return tuple(sorted(pages))


def format_page_selection(pages: Iterable[int]) -> str:
    """Serialize a page selection as comma-joined page numbers."""
    return ",".join(str(page) for page in pages)


__all__ = [
    "ALL_PAGES",
    "PageSelection",
    "validate_page_range",
    "parse_page_range",
    "format_page_selection",
]
