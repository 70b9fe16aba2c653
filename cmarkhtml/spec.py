"""Reading example cases out of CommonMark-style specification files.

Each example in a spec file looks like this::

    ```````````````````````````````` example
    markdown
    .
    expected html output
    ````````````````````````````````

A ``→`` in either part stands for a tab character.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

_FENCE = "`" * 32
_EXAMPLE_OPEN = f"{_FENCE} example\n"
_EXAMPLE_CLOSE = f"{_FENCE}\n"
_SEPARATOR = "\n.\n"
_TAB_MARKER = "→"


@dataclass(frozen=True)
class SpecCase:
    """One example: Markdown input and the HTML it must render to."""

    original: str
    expected: str


def iter_spec_cases(text: str) -> Iterator[SpecCase]:
    """Yield the examples of a spec document in the order they appear.

    Scanning stops at the first example that is not complete.
    """
    rest = text
    while True:
        open_pos = rest.find(_EXAMPLE_OPEN)
        if open_pos < 0:
            return
        input_start = open_pos + len(_EXAMPLE_OPEN)

        separator_pos = rest.find(_SEPARATOR, input_start)
        if separator_pos < 0:
            return
        input_end = separator_pos + 1
        output_start = input_end + 2

        output_end = rest.find(_EXAMPLE_CLOSE, output_start)
        if output_end < 0:
            return

        yield SpecCase(
            original=rest[input_start:input_end].replace(_TAB_MARKER, "\t"),
            expected=rest[output_start:output_end].replace(_TAB_MARKER, "\t"),
        )
        rest = rest[output_end + len(_EXAMPLE_CLOSE):]


def read_spec_file(path: str | os.PathLike[str]) -> list[SpecCase]:
    """Read a spec file and return all of its examples."""
    with open(path, encoding="utf-8") as handle:
        return list(iter_spec_cases(handle.read()))