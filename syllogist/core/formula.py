"""
Core data structures: Literal, Binary, and the parser that builds them.

These are the atoms of the whole system. Nothing in here depends on rules
or on the resolver.

Formulas:
    Literal("p")                       p
    Literal("p", 2)                    ~~p
    Binary(AND, p, q)                  p ^ q
    Binary(OR, p, q, negations=1)      ~(p v q)

    grouped marks a parenthesis pair written in the source. It changes how
    a formula is printed, never equality.

Parsing splits at the first top-level occurrence of the weakest connective,
so chains nest to the right:  p -> q -> r  ==  p -> (q -> r).
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from .errors import InvalidAction
from .signals import (
    Connective, is_enclosed, is_letter, join_tokens,
    tokenize, top_level_index, top_level_signal,
)


@dataclass(frozen=True)
class Literal:
    """A propositional letter with zero or more leading negations."""
    name: str
    negations: int = 0

    @property
    def positive(self) -> bool:
        return self.negations % 2 == 0

    def __str__(self):
        return "~" * self.negations + self.name


@dataclass(frozen=True)
class Binary:
    """Two formulas joined by a binary connective, possibly negated as a group."""
    op: Connective
    left: "Formula"
    right: "Formula"
    negations: int = 0
    grouped: bool = field(default=False, compare=False)

    def __str__(self):
        return render(self)


Formula = Union[Literal, Binary]


def render(node: Formula, parent: Optional[Binary] = None, side: str = "") -> str:
    """
    Canonical text. A sub-formula is parenthesized when it is negated,
    grouped in the source, binds weaker than its parent, or is the left
    operand of its own connective.
    """
    if isinstance(node, Literal):
        return str(node)
    body = (f"{render(node.left, node, 'left')} {node.op.glyph} "
            f"{render(node.right, node, 'right')}")
    if node.negations:
        return "~" * node.negations + f"({body})"
    if node.grouped or _needs_parens(node, parent, side):
        return f"({body})"
    return body


def _needs_parens(node: Binary, parent: Optional[Binary], side: str) -> bool:
    if parent is None:
        return False
    if node.op is parent.op:
        return side == "left"
    return node.op.precedence < parent.op.precedence


def parse(text) -> Formula:
    """Parse formula text. Formulas pass through untouched."""
    if isinstance(text, (Literal, Binary)):
        return text
    return _parse(tokenize(text), text)


def _parse(tokens: list, source: str) -> Formula:
    grouped = False
    while is_enclosed(tokens):
        tokens = tokens[1:-1]
        grouped = True
    if not tokens:
        raise InvalidAction(f"empty formula in {source!r}")

    op = top_level_signal(tokens)
    if op is not None:
        i = top_level_index(tokens, op)
        return Binary(op, _parse(tokens[:i], source), _parse(tokens[i + 1:], source),
                      grouped=grouped)

    count = 0
    while count < len(tokens) and tokens[count] == Connective.NOT.glyph:
        count += 1
    rest = tokens[count:]
    if len(rest) == 1 and is_letter(rest[0]):
        return Literal(rest[0], count)
    if count and is_enclosed(rest):
        inner = _parse(rest, source)
        if isinstance(inner, Literal):
            return replace(inner, negations=inner.negations + count)
        return replace(inner, negations=inner.negations + count, grouped=False)
    raise InvalidAction(f"cannot parse {join_tokens(tokens)!r} in {source!r}")
