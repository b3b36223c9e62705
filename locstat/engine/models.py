"""Data models for the line classification engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class LineKind(Enum):
    """Verdict for one physical line. Every line gets exactly one."""

    CODE = "code"
    COMMENT = "comment"
    BLANK = "blank"


@dataclass(frozen=True)
class BlockPair:
    """A block-comment delimiter pair.

    ``anchored`` pairs are only recognised when the token is the first
    non-whitespace text on the line (Ruby ``=begin``, Perl POD).
    """

    start: str
    end: str
    nestable: bool = False
    anchored: bool = False


@dataclass(frozen=True)
class FixedColumnRule:
    """Comment indicator at a fixed 1-indexed column."""

    column: int
    markers: frozenset[str]


@dataclass(frozen=True)
class LanguageProfile:
    """Comment and quoting grammar for one language."""

    name: str
    line_comments: tuple[str, ...] = ()
    block_comments: tuple[BlockPair, ...] = ()
    doc_comments: tuple[str, ...] = ()
    doc_comments_are_code: bool = False
    quotes: tuple[str, ...] = ()
    # Literals that contain a quote character but do not open a string.
    char_literals: tuple[str, ...] = ()
    quote_escape: str | None = "\\"
    shebang: bool = False
    fixed_column: FixedColumnRule | None = None
    case_sensitive: bool = True

    @property
    def has_comment_tokens(self) -> bool:
        """True when comments can appear anywhere in a line, not only in a fixed column."""
        return bool(self.line_comments or self.block_comments or self.doc_comments)


@dataclass(frozen=True)
class ClassifierState:
    """Per-file scanning state: Normal, or inside ``pair`` at ``depth``."""

    pair: BlockPair | None = None
    depth: int = 0

    @property
    def in_block(self) -> bool:
        return self.pair is not None


NORMAL = ClassifierState()


@dataclass
class Stats:
    """Code/comment/blank counters for a file or an aggregate."""

    code: int = 0
    comment: int = 0
    blank: int = 0

    @property
    def total(self) -> int:
        return self.code + self.comment + self.blank

    def record(self, kind: LineKind) -> None:
        if kind is LineKind.CODE:
            self.code += 1
        elif kind is LineKind.COMMENT:
            self.comment += 1
        else:
            self.blank += 1

    def merge(self, other: Stats) -> None:
        self.code += other.code
        self.comment += other.comment
        self.blank += other.blank

    def __add__(self, other: Stats) -> Stats:
        return Stats(
            code=self.code + other.code,
            comment=self.comment + other.comment,
            blank=self.blank + other.blank,
        )


@dataclass
class FileResult:
    """Outcome of analysing one file: either stats or an error message."""

    path: str
    language: str
    stats: Stats = field(default_factory=Stats)
    error: str | None = None
    skipped: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.skipped
