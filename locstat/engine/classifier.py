"""Line classification engine — the per-file comment state machine.

:func:`classify_line` is pure: it takes one physical line, the language
profile and the current :class:`ClassifierState`, and returns the line's
verdict together with the state to use for the next line. The caller owns
the state, so any number of files can be classified concurrently.

Scanning rules in the Normal state:

* the leftmost token among quotes, char literals, line comments, doc
  comments and block starts wins; at equal columns the longest token wins
* char literals such as Rust ``'"'`` are code and never open a string
* quotes are skipped up to the closing unescaped quote (or end of line)
* a line comment ends the scan
* a block start switches to InBlockComment and scanning continues on the
  same line, so ``a /* b */ c`` is seen as code on both sides

A line is Code if any non-whitespace text outside comments was seen,
otherwise Comment. Whitespace-only lines are Blank unless they sit inside a
block comment.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from locstat.engine.fixed_form import classify_fixed_form
from locstat.engine.models import (
    NORMAL,
    BlockPair,
    ClassifierState,
    LanguageProfile,
    LineKind,
)

SHEBANG = "#!"


class TokenKind(Enum):
    QUOTE = "quote"
    CHAR_LITERAL = "char_literal"
    LINE_COMMENT = "line_comment"
    DOC_COMMENT = "doc_comment"
    BLOCK_START = "block_start"
    BLOCK_END = "block_end"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    pair: BlockPair | None = None
    anchored: bool = False


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _token_regex(text: str) -> str:
    """Escape *text*, adding word boundaries on alphanumeric edges."""
    body = re.escape(text)
    if _is_word_char(text[0]):
        body = r"(?<!\w)" + body
    if _is_word_char(text[-1]):
        body = body + r"(?!\w)"
    return body


class TokenMatcher:
    """Leftmost-longest search over a fixed set of tokens."""

    def __init__(self, tokens: list[Token], case_sensitive: bool = True) -> None:
        # Python's regex alternation is ordered, so longer tokens go first to
        # win ties at the same column. sorted() is stable for equal lengths.
        self._tokens = sorted(tokens, key=lambda t: len(t.text), reverse=True)
        self._regex: re.Pattern[str] | None = None
        if self._tokens:
            pattern = "|".join(f"({_token_regex(t.text)})" for t in self._tokens)
            flags = 0 if case_sensitive else re.IGNORECASE
            self._regex = re.compile(pattern, flags)

    @property
    def tokens(self) -> list[Token]:
        return list(self._tokens)

    def search(self, line: str, pos: int = 0) -> tuple[Token, int, int] | None:
        """Return ``(token, start, end)`` of the first match at or after *pos*."""
        if self._regex is None:
            return None
        while pos <= len(line):
            m = self._regex.search(line, pos)
            if m is None:
                return None
            token = self._tokens[m.lastindex - 1]  # type: ignore[operator]
            if token.anchored and line[: m.start()].strip():
                pos = m.start() + 1
                continue
            return token, m.start(), m.end()
        return None


@lru_cache(maxsize=None)
def normal_matcher(profile: LanguageProfile) -> TokenMatcher:
    """Tokens that are live outside any block comment."""
    tokens: list[Token] = []
    tokens.extend(Token(TokenKind.QUOTE, q) for q in profile.quotes)
    tokens.extend(Token(TokenKind.CHAR_LITERAL, c) for c in profile.char_literals)
    tokens.extend(Token(TokenKind.DOC_COMMENT, d) for d in profile.doc_comments)
    tokens.extend(Token(TokenKind.LINE_COMMENT, c) for c in profile.line_comments)
    tokens.extend(
        Token(TokenKind.BLOCK_START, pair.start, pair=pair, anchored=pair.anchored)
        for pair in profile.block_comments
    )
    return TokenMatcher(tokens, profile.case_sensitive)


@lru_cache(maxsize=None)
def block_matcher(pair: BlockPair, case_sensitive: bool = True) -> TokenMatcher:
    """Tokens that are live inside a block comment of *pair*."""
    tokens = [Token(TokenKind.BLOCK_END, pair.end, pair=pair, anchored=pair.anchored)]
    if pair.nestable and pair.start != pair.end:
        tokens.append(
            Token(TokenKind.BLOCK_START, pair.start, pair=pair, anchored=pair.anchored)
        )
    return TokenMatcher(tokens, case_sensitive)


def skip_quoted(line: str, pos: int, quote: str, escape: str | None) -> int:
    """Return the index just past the closing *quote*, or ``len(line)``."""
    n = len(line)
    while pos < n:
        if escape is not None and line.startswith(escape, pos):
            pos += len(escape) + 1
            continue
        if line.startswith(quote, pos):
            return pos + len(quote)
        pos += 1
    return n


def _scan(
    line: str, profile: LanguageProfile, state: ClassifierState
) -> tuple[bool, ClassifierState]:
    """Walk *line* token by token. Returns (saw code, state after the line)."""
    normal = normal_matcher(profile)
    pos = 0
    has_code = False

    while pos < len(line):
        if state.pair is not None:
            found = block_matcher(state.pair, profile.case_sensitive).search(line, pos)
            if found is None:
                break
            token, _, end = found
            if token.kind is TokenKind.BLOCK_END:
                depth = state.depth - 1
                state = ClassifierState(state.pair, depth) if depth > 0 else NORMAL
            else:
                state = ClassifierState(state.pair, state.depth + 1)
            pos = end
            continue

        found = normal.search(line, pos)
        if found is None:
            if line[pos:].strip():
                has_code = True
            break

        token, start, end = found
        if line[pos:start].strip():
            has_code = True

        if token.kind is TokenKind.QUOTE:
            has_code = True
            pos = skip_quoted(line, end, token.text, profile.quote_escape)
        elif token.kind is TokenKind.CHAR_LITERAL:
            has_code = True
            pos = end
        elif token.kind is TokenKind.BLOCK_START:
            state = ClassifierState(token.pair, 1)
            pos = end
        elif token.kind is TokenKind.DOC_COMMENT and profile.doc_comments_are_code:
            has_code = True
            pos = end
        else:
            # Line comments (and doc comments counted as comments) run to EOL.
            break

    return has_code, state


def classify_line(
    line: str,
    profile: LanguageProfile,
    state: ClassifierState = NORMAL,
    *,
    first_line: bool = False,
) -> tuple[LineKind, ClassifierState]:
    """Classify one physical line (without its line terminator).

    *first_line* enables shebang handling for shebang-significant profiles.
    """
    fixed = classify_fixed_form(line, profile)
    if fixed is not None:
        return fixed, state

    if not state.in_block:
        if first_line and profile.shebang and line.startswith(SHEBANG):
            return LineKind.CODE, state
        if not line.strip():
            return LineKind.BLANK, state
        if not profile.has_comment_tokens:
            return LineKind.CODE, state

    has_code, state = _scan(line, profile, state)
    return (LineKind.CODE if has_code else LineKind.COMMENT), state
