"""Typed document tree for Pluma.

All nodes are frozen dataclasses with slots for:
- Immutability: a returned Document is a snapshot, safe to share
- Value equality: documents compare structurally
- Pattern matching: match statements work naturally

Node Hierarchy:
Document
└── Line (one per source line)
    ├── Header
    ├── Paragraph
    ├── Image
    └── Blank
Token (inline content)
├── Regular
├── Bold
├── Italic
├── InlineCode
└── Link

"""

from __future__ import annotations

from typing import TypeAlias

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum


class HeaderLevel(IntEnum):
    """Header level, one per leading ``#`` count."""

    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6

    @classmethod
    def from_marker(cls, marker: str) -> HeaderLevel | None:
        """Return the level for a run of 1-6 ``#`` characters.

        Example:
            >>> HeaderLevel.from_marker("###")
            <HeaderLevel.H3: 3>
            >>> HeaderLevel.from_marker("#######") is None
            True
        """
        if not marker or marker.strip("#") or len(marker) > len(cls):
            return None
        return cls(len(marker))


# =============================================================================
# Inline Tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class Regular:
    """Plain word."""

    text: str


@dataclass(frozen=True, slots=True)
class Bold:
    """Bold span.

    Markup: **text** or __text__

    """

    children: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class Italic:
    """Italic span.

    Markup: *text* or _text_

    """

    children: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class InlineCode:
    """Inline code span. Children are always Regular words.

    Markup: `code`

    """

    children: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink with a tokenized label.

    Markup: [label](url)

    """

    label: tuple[Token, ...]
    url: str


Token: TypeAlias = Regular | Bold | Italic | InlineCode | Link

# Spans whose content lives in ``children``
SPAN_TYPES = (Bold, Italic, InlineCode)


# =============================================================================
# Lines
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header:
    """Header line.

    Markup: # text .. ###### text

    """

    level: HeaderLevel
    tokens: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Line of inline content."""

    tokens: tuple[Token, ...]


@dataclass(frozen=True, slots=True)
class Image:
    """Image line.

    Markup: ![label](url)

    """

    label: tuple[Token, ...]
    url: str


@dataclass(frozen=True, slots=True)
class Blank:
    """Empty or whitespace-only source line."""


Line: TypeAlias = Header | Paragraph | Image | Blank


@dataclass(frozen=True, slots=True)
class Document:
    """Ordered lines, one per source line."""

    lines: tuple[Line, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]
