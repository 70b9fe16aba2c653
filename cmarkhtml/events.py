"""Events and tags produced while parsing a Markdown document."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field


class Alignment(enum.Enum):
    """Alignment of a table column."""

    NONE = "none"
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class LinkType(enum.Enum):
    """How a link or image was written in the source."""

    INLINE = "inline"
    REFERENCE = "reference"
    REFERENCE_UNKNOWN = "reference_unknown"
    COLLAPSED = "collapsed"
    COLLAPSED_UNKNOWN = "collapsed_unknown"
    SHORTCUT = "shortcut"
    SHORTCUT_UNKNOWN = "shortcut_unknown"
    AUTOLINK = "autolink"
    EMAIL = "email"


class TagKind(enum.Enum):
    """The kinds of container element that start and end events enclose."""

    PARAGRAPH = "paragraph"
    HEADING = "heading"
    BLOCK_QUOTE = "block_quote"
    CODE_BLOCK = "code_block"
    LIST = "list"
    ITEM = "item"
    FOOTNOTE_DEFINITION = "footnote_definition"
    TABLE = "table"
    TABLE_HEAD = "table_head"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRIKETHROUGH = "strikethrough"
    LINK = "link"
    IMAGE = "image"


@dataclass(frozen=True)
class Tag:
    """A container element.

    Only the fields that belong to ``kind`` are meaningful: ``level`` for
    headings, ``info`` for code blocks, ``start`` for lists (``None`` for a
    bullet list), ``alignments`` for tables, ``link_type``, ``dest`` and
    ``title`` for links and images, ``name`` for footnote definitions.
    """

    kind: TagKind
    level: int = 0
    info: str = ""
    start: int | None = None
    alignments: tuple[Alignment, ...] = field(default_factory=tuple)
    link_type: LinkType = LinkType.INLINE
    dest: str = ""
    title: str = ""
    name: str = ""

    def __post_init__(self) -> None:
        alignments: Iterable[Alignment] = self.alignments
        object.__setattr__(self, "alignments", tuple(alignments))


class EventKind(enum.Enum):
    """The kinds of event a parser emits."""

    START = "start"
    END = "end"
    TEXT = "text"
    CODE = "code"
    HTML = "html"
    SOFT_BREAK = "soft_break"
    HARD_BREAK = "hard_break"
    RULE = "rule"
    FOOTNOTE_REFERENCE = "footnote_reference"
    TASK_LIST_MARKER = "task_list_marker"


@dataclass(frozen=True)
class Event:
    """A single parse event.

    ``tag`` is set for start and end events; ``value`` holds the text of
    text, code and HTML events and the name of a footnote reference;
    ``checked`` is the state of a task list marker.
    """

    kind: EventKind
    tag: Tag | None = None
    value: str = ""
    checked: bool = False

    @classmethod
    def start(cls, tag: Tag) -> Event:
        """The start of a container element."""
        return cls(EventKind.START, tag=tag)

    @classmethod
    def end(cls, tag: Tag) -> Event:
        """The end of a container element."""
        return cls(EventKind.END, tag=tag)

    @classmethod
    def text(cls, value: str) -> Event:
        """Plain text."""
        return cls(EventKind.TEXT, value=value)

    @classmethod
    def code(cls, value: str) -> Event:
        """An inline code span."""
        return cls(EventKind.CODE, value=value)

    @classmethod
    def html(cls, value: str) -> Event:
        """Raw HTML, passed through unescaped."""
        return cls(EventKind.HTML, value=value)

    @classmethod
    def soft_break(cls) -> Event:
        """A soft line break."""
        return cls(EventKind.SOFT_BREAK)

    @classmethod
    def hard_break(cls) -> Event:
        """A hard line break."""
        return cls(EventKind.HARD_BREAK)

    @classmethod
    def rule(cls) -> Event:
        """A thematic break."""
        return cls(EventKind.RULE)

    @classmethod
    def footnote_reference(cls, name: str) -> Event:
        """A reference to the footnote called ``name``."""
        return cls(EventKind.FOOTNOTE_REFERENCE, value=name)

    @classmethod
    def task_list_marker(cls, checked: bool) -> Event:
        """A task list checkbox."""
        return cls(EventKind.TASK_LIST_MARKER, checked=checked)