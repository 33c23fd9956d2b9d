"""
Plumbing shared by every rule function.

A rule is a plain function:

    rule(lines, targets, operand=None) -> str

    lines:    every line solved so far (formula text)
    targets:  0-based indices into lines
    operand:  auxiliary formula some inference rules read (ad, sim)

Target count is checked before anything else, then every index, then the
rule's own structural precondition.
"""

from enum import Enum

from ..core.errors import InvalidLineReference, MissingTargetLines
from ..core.formula import parse
from ..core.operations import operands, strip_group


class RuleKind(Enum):
    EQUIVALENCE = "equivalence"
    INFERENCE = "inference"


def fetch(lines, targets, minimum: int) -> list:
    """Parse the formulas at targets, after checking there are enough of them."""
    if len(targets) < minimum:
        raise MissingTargetLines(len(targets), minimum)
    formulas = []
    for index in targets:
        if index < 0 or index >= len(lines):
            raise InvalidLineReference(index + 1)
        formulas.append(parse(lines[index]))
    return formulas


def auxiliary(operand, formulas):
    """The explicit operand, else the second target's formula, else None."""
    if operand is not None:
        return parse(operand)
    if len(formulas) > 1:
        return formulas[1]
    return None


def readings(formula) -> list:
    """
    Operand lists of a chain: the parenthesized groups as written first,
    then fully flattened. (p v q) v r reads as [(p v q), r], then [p, q, r].
    """
    grouped = operands(formula, keep_groups=True)
    flat = operands(formula)
    if len(grouped) == len(flat):
        return [flat]
    return [grouped, flat]


def finish(formula) -> str:
    return str(strip_group(formula))
