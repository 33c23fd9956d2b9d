"""
Connective grammar and text-level primitives.

A signal is a connective glyph together with the aliases that fold into it:

    IFF      <->  <=>  ⇔  ↔          (binds weakest)
    IMPLIES  ->   =>   →  −
    OR       v    V    ∨
    AND      ^    ∧
    NOT      ~    ¬                  (binds tightest)

Letters are single lowercase characters a-z except "v", which is OR.

Everything in this module works on token lists or on raw text, so it also
accepts fragments that are not (yet) well-formed formulas: group() can
complete "(p" into "(p)" and ungroup() can drop a dangling parenthesis.
"""

import re
from enum import Enum
from types import MappingProxyType
from typing import Optional

from .errors import InvalidAction


class Connective(Enum):
    IFF = "<->"
    IMPLIES = "->"
    OR = "v"
    AND = "^"
    NOT = "~"

    @property
    def glyph(self) -> str:
        return self.value

    @property
    def precedence(self) -> int:
        return PRECEDENCE[self]


PRECEDENCE = MappingProxyType({
    Connective.IFF:     0,
    Connective.IMPLIES: 1,
    Connective.OR:      2,
    Connective.AND:     3,
    Connective.NOT:     4,
})

# Weakest first: the order in which a formula is split.
BINARY = (Connective.IFF, Connective.IMPLIES, Connective.OR, Connective.AND)

ALIASES = MappingProxyType({
    "<->": Connective.IFF, "<=>": Connective.IFF, "⇔": Connective.IFF, "↔": Connective.IFF,
    "->": Connective.IMPLIES, "=>": Connective.IMPLIES, "→": Connective.IMPLIES,
    "−": Connective.IMPLIES,
    "v": Connective.OR, "∨": Connective.OR,
    "^": Connective.AND, "∧": Connective.AND,
    "~": Connective.NOT, "¬": Connective.NOT,
})

GLYPHS = frozenset(c.glyph for c in Connective)

_TOKEN = re.compile("|".join(
    [re.escape(alias) for alias in sorted(ALIASES, key=len, reverse=True)]
    + [r"[()]", r"[a-z]", r"\s+"]
))

_SWAP = {Connective.AND.glyph: Connective.OR.glyph, Connective.OR.glyph: Connective.AND.glyph}


# ── Tokens ────────────────────────────────────────────────────────────────────

def tokenize(text: str) -> list:
    """Lowercase, fold aliases and split into canonical tokens."""
    text = text.lower()
    tokens = []
    pos = 0
    while pos < len(text):
        match = _TOKEN.match(text, pos)
        if match is None:
            raise InvalidAction(f"unexpected character {text[pos]!r} in {text!r}")
        pos = match.end()
        lexeme = match.group()
        if lexeme.isspace():
            continue
        tokens.append(ALIASES[lexeme].glyph if lexeme in ALIASES else lexeme)
    return tokens


def join_tokens(tokens) -> str:
    """Canonical spacing: no space after "~" or "(", none before ")"."""
    out = []
    for i, tok in enumerate(tokens):
        if i and tokens[i - 1] not in ("~", "(") and tok != ")":
            out.append(" ")
        out.append(tok)
    return "".join(out)


def is_letter(token: str) -> bool:
    return len(token) == 1 and token.isalpha() and token not in GLYPHS


def is_enclosed(tokens) -> bool:
    """Is the whole token list one parenthesized group?"""
    if len(tokens) < 2 or tokens[0] != "(" or tokens[-1] != ")":
        return False
    depth = 0
    for i, tok in enumerate(tokens):
        if tok == "(":
            depth += 1
        elif tok == ")":
            depth -= 1
            if depth == 0:
                return i == len(tokens) - 1
    return False


def top_level_index(tokens, connective: Connective) -> Optional[int]:
    """Index of the first occurrence of connective outside any parentheses."""
    depth = 0
    for i, tok in enumerate(tokens):
        if tok == "(":
            depth += 1
        elif tok == ")":
            depth -= 1
        elif depth == 0 and tok == connective.glyph:
            return i
    return None


def top_level_signal(tokens) -> Optional[Connective]:
    for connective in BINARY:
        if top_level_index(tokens, connective) is not None:
            return connective
    return None


def _balance(tokens) -> tuple:
    """(closers with no opener, openers never closed)."""
    depth = 0
    missing = 0
    for tok in tokens:
        if tok == "(":
            depth += 1
        elif tok == ")":
            if depth == 0:
                missing += 1
            else:
                depth -= 1
    return missing, depth


# ── Text ──────────────────────────────────────────────────────────────────────

def clear(line: str) -> str:
    """Lowercase and collapse whitespace. Does not touch tokens."""
    return re.sub(r"\s+", " ", line.lower()).strip()


def prune(line: str) -> str:
    return re.sub(r"\s", "", line)


def normalize(*parts: str) -> str:
    """
    Canonical text of a formula (or fragment).

        normalize("  Qv  r ")         -> "q v r"
        normalize(" q", "=>", "~r")   -> "q -> ~r"
        normalize("~ ( p ∧ q )")      -> "~(p ^ q)"
    """
    return join_tokens(tokenize(" ".join(parts)))


def catch_signal(text: str) -> Optional[Connective]:
    """
    The weakest-binding connective outside any parentheses.

    NOT is never reported; a literal or a negated group has no signal.
    """
    return top_level_signal(tokenize(text))


def split(text: str, connective: Connective) -> tuple:
    """Partition at the first top-level occurrence of connective."""
    tokens = tokenize(text)
    index = top_level_index(tokens, connective)
    if index is None:
        return join_tokens(tokens), ""
    return join_tokens(tokens[:index]), join_tokens(tokens[index + 1:])


def group(*parts: str) -> str:
    """
    Wrap in parentheses unless already enclosed; complete a fragment that
    opens or closes mid-group instead of wrapping it.

        group("p v q")          -> "(p v q)"
        group("~(p v q)")       -> "~(p v q)"
        group("(p")             -> "(p)"
        group("pvq) v (rvs")    -> "(p v q) v (r v s)"
    """
    tokens = tokenize(" ".join(parts))
    missing, unclosed = _balance(tokens)
    if missing or unclosed:
        return join_tokens(["("] * missing + tokens + [")"] * unclosed)
    body = tokens
    while body and body[0] == "~":
        body = body[1:]
    if is_enclosed(body):
        return join_tokens(tokens)
    return join_tokens(["("] + tokens + [")"])


def ungroup(text: str) -> str:
    """Strip one enclosing pair, or a dangling "(" / ")"."""
    tokens = tokenize(text)
    if is_enclosed(tokens):
        return join_tokens(tokens[1:-1])
    missing, unclosed = _balance(tokens)
    if unclosed and tokens[0] == "(":
        return join_tokens(tokens[1:])
    if missing and tokens[-1] == ")":
        return join_tokens(tokens[:-1])
    return join_tokens(tokens)


def invert_signal(text: str) -> str:
    """Swap every top-level AND with OR and vice versa."""
    out = []
    depth = 0
    for tok in tokenize(text):
        if tok == "(":
            depth += 1
        elif tok == ")":
            depth -= 1
        elif depth == 0:
            tok = _SWAP.get(tok, tok)
        out.append(tok)
    return join_tokens(out)
