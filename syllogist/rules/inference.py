"""
Inference rules: derive an entailed formula from one or more target lines.

Rules that consume two lines (mp, mt, sd, sh) accept them in either order.
Dilemmas (dc, dd) read their three conjuncts from one line or spread over
several, in any order.
"""

from ..core.errors import InvalidAction
from ..core.formula import Binary, Literal
from ..core.operations import (
    AND, IMPLIES, OR,
    chain, compare, contradict, is_op, negate, operands, strip_group, wrap,
)
from .base import auxiliary, fetch, finish, readings


def _pairs(formulas):
    first, second = (strip_group(f) for f in formulas[:2])
    return ((first, second), (second, first))


def ad(lines, targets, operand=None):
    """Addition: A, X  ->  A v X. A must be a literal."""
    formulas = fetch(lines, targets, 1)
    target = formulas[0]
    if not isinstance(target, Literal):
        raise InvalidAction(f"{target} is not a literal")
    extra = auxiliary(operand, formulas)
    if extra is None:
        raise InvalidAction("nothing to add")
    return finish(Binary(OR, target, wrap(extra)))


def sim(lines, targets, operand=None):
    """
    Simplification.

        A ^ B, named B         ->  B
        A ^ B -> A             ->  A ^ B -> B
    """
    formulas = fetch(lines, targets, 1)
    base = strip_group(formulas[0])

    if is_op(base, AND):
        named = auxiliary(operand, formulas)
        if named is None:
            raise InvalidAction("no conjunct named")
        for conjuncts in readings(base):
            for conjunct in conjuncts:
                if compare(conjunct, named):
                    return finish(conjunct)
        raise InvalidAction(f"{named} is not a conjunct of {base}")

    if is_op(base, IMPLIES) and is_op(base.left, AND):
        conjuncts = operands(base.left)
        for i, conjunct in enumerate(conjuncts):
            if compare(conjunct, base.right):
                rest = conjuncts[:i] + conjuncts[i + 1:]
                other = rest[0] if len(rest) == 1 else wrap(chain(AND, rest))
                return finish(Binary(IMPLIES, base.left, other))

    raise InvalidAction(f"{base} cannot be simplified")


def mp(lines, targets, operand=None):
    for conditional, data in _pairs(fetch(lines, targets, 2)):
        if is_op(conditional, IMPLIES) and compare(conditional.left, data):
            return finish(conditional.right)
    raise InvalidAction("no conditional whose antecedent is asserted")


def mt(lines, targets, operand=None):
    """A -> B, ~B  ->  ~A; failing that, A -> B, ~A  ->  ~B."""
    pairs = _pairs(fetch(lines, targets, 2))
    for conditional, data in pairs:
        if is_op(conditional, IMPLIES) and compare(data, negate(conditional.right)):
            return finish(contradict(conditional.left))
    for conditional, data in pairs:
        if is_op(conditional, IMPLIES) and compare(data, negate(conditional.left)):
            return finish(contradict(conditional.right))
    raise InvalidAction("no conditional with a denied side")


def sd(lines, targets, operand=None):
    for disjunction, data in _pairs(fetch(lines, targets, 2)):
        if not is_op(disjunction, OR):
            continue
        for items in readings(disjunction):
            for i, item in enumerate(items):
                if compare(negate(item), data):
                    return finish(chain(OR, items[:i] + items[i + 1:]))
    raise InvalidAction("no disjunct is denied")


def sh(lines, targets, operand=None):
    """
    Hypothetical syllogism.

        A -> B, B -> C    ->  A -> C      (either order)
        A -> B -> C       ->  A -> C
    """
    formulas = fetch(lines, targets, 1)
    if len(formulas) == 1:
        target = strip_group(formulas[0])
        items = operands(target) if is_op(target, IMPLIES) else []
        if len(items) < 3:
            raise InvalidAction(f"{target} is not a chain of conditionals")
        return finish(Binary(IMPLIES, items[0], wrap(items[-1])))

    for first, second in _pairs(formulas):
        if not (is_op(first, IMPLIES) and is_op(second, IMPLIES)):
            raise InvalidAction("both lines must be conditionals")
        if compare(first.right, second.left):
            return finish(Binary(IMPLIES, first.left, wrap(second.right)))
    raise InvalidAction("conditionals do not chain")


# ── Dilemmas ──────────────────────────────────────────────────────────────────

def _dilemma(lines, targets):
    """Split target lines into (two conditionals, two disjuncts)."""
    items = []
    for formula in fetch(lines, targets, 1):
        items.extend(strip_group(x) for x in operands(strip_group(formula), AND))
    conditionals = [x for x in items if is_op(x, IMPLIES)]
    disjunctions = [x for x in items if is_op(x, OR)]
    if len(items) != 3 or len(conditionals) != 2 or len(disjunctions) != 1:
        raise InvalidAction("a dilemma needs two conditionals and one disjunction")
    disjuncts = operands(disjunctions[0])
    if len(disjuncts) != 2:
        raise InvalidAction(f"{disjunctions[0]} must have exactly two disjuncts")
    return conditionals, disjuncts


def _match(conditionals, disjuncts, side):
    """Order conditionals so side(conditional) matches each disjunct in turn."""
    first, second = conditionals
    a, b = disjuncts
    if compare(side(first), a) and compare(side(second), b):
        return first, second
    if compare(side(second), a) and compare(side(first), b):
        return second, first
    raise InvalidAction("disjunction does not match the conditionals")


def dc(lines, targets, operand=None):
    """(A -> B) ^ (C -> D) ^ (A v C)  ->  B v D"""
    conditionals, disjuncts = _dilemma(lines, targets)
    ordered = _match(conditionals, disjuncts, lambda c: c.left)
    return finish(chain(OR, [wrap(c.right) for c in ordered]))


def dd(lines, targets, operand=None):
    """(A -> B) ^ (C -> D) ^ (~B v ~D)  ->  ~A v ~C"""
    conditionals, disjuncts = _dilemma(lines, targets)
    ordered = _match(conditionals, disjuncts, lambda c: negate(c.right))
    return finish(chain(OR, [contradict(c.left) for c in ordered]))


def abs_(lines, targets, operand=None):
    """Absorption: A -> B  ->  A -> (A ^ B)"""
    target = strip_group(fetch(lines, targets, 1)[0])
    if not is_op(target, IMPLIES):
        raise InvalidAction(f"{target} is not a conditional")
    absorbed = operands(target.left, AND) + operands(target.right, AND)
    return finish(Binary(IMPLIES, target.left, wrap(chain(AND, absorbed))))


def conj(lines, targets, operand=None):
    formulas = fetch(lines, targets, 2)
    for formula in formulas:
        if not isinstance(formula, Literal):
            raise InvalidAction(f"{formula} is not a literal")
    return finish(chain(AND, formulas))
