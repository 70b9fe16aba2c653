"""Scanning and normalising link reference labels."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass

_ASCII_WHITESPACE = frozenset(" \t\n\r\x0b\x0c")
_MAX_CODEPOINTS = 1000

LinebreakHandler = Callable[[str], "int | None"]


class ReferenceKind(enum.Enum):
    """Whether a reference label names a link or a footnote."""

    LINK = "link"
    FOOTNOTE = "footnote"


def normalize_label(label: str) -> str:
    """Return the case-insensitive matching key of a label."""
    return label.casefold()


@dataclass(frozen=True)
class ReferenceLabel:
    """A link or footnote reference label."""

    kind: ReferenceKind
    label: str

    @property
    def key(self) -> str:
        """The label as used for case-insensitive lookup."""
        return normalize_label(self.label)


def _scan_eol(text: str, start: int) -> int | None:
    if start >= len(text):
        return 0
    char = text[start]
    if char == "\n":
        return 1
    if char == "\r":
        return 2 if text.startswith("\n", start + 1) else 1
    return None


def scan_link_label_rest(
    text: str, linebreak_handler: LinebreakHandler
) -> tuple[int, str] | None:
    """Scan a link label whose opening bracket has already been consumed.

    Runs of whitespace that are not a single space are collapsed into one
    space. On a line break, ``linebreak_handler`` receives the text after it
    and returns how many characters to skip, or ``None`` to abort.

    Returns the number of characters consumed, including the closing bracket,
    together with the normalised label, or ``None`` if there is no label.
    """
    ix = 0
    only_whitespace = True
    codepoints = 0
    parts: list[str] = []
    mark = 0

    while True:
        if codepoints >= _MAX_CODEPOINTS or ix >= len(text):
            return None
        char = text[ix]
        if char == "[":
            return None
        if char == "]":
            break
        if char == "\\":
            ix += 2
            codepoints += 2
            only_whitespace = False
        elif char in _ASCII_WHITESPACE:
            whitespaces = 0
            linebreaks = 0
            whitespace_start = ix
            while ix < len(text) and text[ix] in _ASCII_WHITESPACE:
                eol = _scan_eol(text, ix)
                if eol is not None:
                    linebreaks += 1
                    if linebreaks > 1:
                        return None
                    ix += eol
                    skip = linebreak_handler(text[ix:])
                    if skip is None:
                        return None
                    ix += skip
                    whitespaces += 2
                else:
                    whitespaces += 1 if text[ix] == " " else 2
                    ix += 1
            if whitespaces > 1:
                parts.append(text[mark:whitespace_start])
                parts.append(" ")
                mark = ix
                codepoints += ix - whitespace_start
            else:
                codepoints += 1
        else:
            only_whitespace = False
            ix += 1
            if ord(char) >= 0x80:
                codepoints += len(char.encode("utf-8"))

    if only_whitespace:
        return None
    if mark == 0:
        return ix + 1, text[:ix]
    parts.append(text[mark:ix])
    return ix + 1, "".join(parts)