from __future__ import annotations

import re
from typing import Iterator, List, NamedTuple, Optional

# Comment markers inside string or char literals are not recognised.
# Input is expected to be well-formed source without comment-like
# sequences inside literals.
_LINE_COMMENT = re.compile(r"//[^\r\n]*")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.S)

# Fixed token grammar. WORD covers identifiers and type expressions
# (generic angle brackets and array brackets stay glued to the word).
_TOKEN_SPEC = [
    ("WORD", r"[\w<>\[\]]+"),
    ("LBRACE", r"\{"),
    ("RBRACE", r"\}"),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("SEMI", r";"),
    ("SPACE", r"\s+"),
    ("PUNCT", r"."),
]
_TOKEN_RE = re.compile("|".join(f"(?P<{kind}>{pattern})" for kind, pattern in _TOKEN_SPEC), re.S)
_IDENT_RE = re.compile(r"\w+")


class Token(NamedTuple):
    kind: str
    text: str
    start: int
    end: int

    @property
    def is_word(self) -> bool:
        return self.kind == "WORD"

    @property
    def is_identifier(self) -> bool:
        return self.kind == "WORD" and _IDENT_RE.fullmatch(self.text) is not None


def strip_comments(source: str) -> str:
    """
    Remove // line comments, then /* block */ comments (first close wins).
    Newlines inside block comments are kept so line numbers stay stable.
    """
    without_line = _LINE_COMMENT.sub("", source)
    return _BLOCK_COMMENT.sub(lambda m: "\n" * m.group(0).count("\n"), without_line)


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield significant tokens; whitespace is dropped."""
    for m in _TOKEN_RE.finditer(text):
        kind = m.lastgroup or "PUNCT"
        if kind == "SPACE":
            continue
        yield Token(kind, m.group(0), m.start(), m.end())


def tokenize(text: str) -> List[Token]:
    return list(iter_tokens(text))


def match_brace(text: str, open_index: int) -> Optional[int]:
    """
    Brace-depth automaton. Starting at the '{' at open_index, return the
    index of its matching '}', or None when the source ends first.
    """
    depth = 0
    for idx in range(open_index, len(text)):
        ch = text[idx]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return idx
    return None


def next_significant_char(text: str, start: int) -> str:
    """First non-whitespace character at or after start ('' at end)."""
    for idx in range(start, len(text)):
        if not text[idx].isspace():
            return text[idx]
    return ""
