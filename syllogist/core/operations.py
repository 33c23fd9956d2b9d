"""
Structural operations every rule is built from.

    negate           NOT applied to the formula as a whole
    map_not          NOT applied operand by operand
    contradict       negate, then cancel the paired negations at the root
    push_negation    De Morgan one level into a negated group
    resolve          one simplification step (push, cancel pairs, ungroup)
    compare          equality up to grouping, paired negations, one resolve

All functions accept formula text or formulas and return formulas.
"""

from dataclasses import replace

from .errors import InvalidAction
from .formula import Binary, Formula, Literal, parse
from .signals import Connective

AND, OR = Connective.AND, Connective.OR
IMPLIES, IFF = Connective.IMPLIES, Connective.IFF

DUAL = {AND: OR, OR: AND}
ASSOCIATIVE = (AND, OR, IFF)
COMMUTATIVE = (AND, OR, IFF)


# ── Shape helpers ─────────────────────────────────────────────────────────────

def is_op(formula, *ops) -> bool:
    """Is formula an un-negated binary (with one of ops, if given)?"""
    return (isinstance(formula, Binary) and not formula.negations
            and (not ops or formula.op in ops))


def operands(formula, op=None, keep_groups=False) -> list:
    """
    Flatten a chain of op into its operands.

    AND, OR and IFF flatten on both sides; IMPLIES only along the right
    spine, since (p -> q) -> r is not p -> q -> r. Negated groups are
    never entered, and with keep_groups neither are parenthesized ones:
    (p v q) v r gives [(p v q), r] rather than [p, q, r].
    """
    f = parse(formula)
    if not isinstance(f, Binary):
        return [f]
    op = op or f.op
    if f.negations or f.op is not op:
        return [f]

    def descend(side):
        if keep_groups and isinstance(side, Binary) and side.grouped:
            return [side]
        return operands(side, op, keep_groups)

    if op is IMPLIES:
        return [f.left] + descend(f.right)
    return descend(f.left) + descend(f.right)


def chain(op: Connective, items) -> Formula:
    """Join items with op, nesting to the right."""
    items = list(items)
    if not items:
        raise InvalidAction(f"nothing to join with {op.glyph}")
    result = items[-1]
    for item in reversed(items[:-1]):
        result = Binary(op, item, result)
    return result


def wrap(formula) -> Formula:
    f = parse(formula)
    if is_op(f):
        return replace(f, grouped=True)
    return f


def strip_group(formula) -> Formula:
    f = parse(formula)
    if isinstance(f, Binary) and f.grouped:
        return replace(f, grouped=False)
    return f


# ── Negation ──────────────────────────────────────────────────────────────────

def negate(formula, times: int = 1) -> Formula:
    f = parse(formula)
    if isinstance(f, Literal):
        return replace(f, negations=f.negations + times)
    return replace(f, negations=f.negations + times, grouped=False)


def contradict(formula) -> Formula:
    """Negate, preferring the form with fewer negations: ~p -> p, p -> ~p."""
    f = negate(formula)
    if f.negations < 2:
        return f
    kept = f.negations % 2
    if isinstance(f, Literal):
        return replace(f, negations=kept)
    return replace(f, negations=kept, grouped=not kept)


def map_not(formula) -> Formula:
    """
    Negate each top-level operand independently. A plain compound operand
    is negated operand by operand in turn; a parenthesized or negated one
    is negated whole.

        p ^ q ^ r            ->  ~p ^ ~q ^ ~r
        p ^ q -> u           ->  ~p ^ ~q -> ~u
        p v q -> (r ^ s)     ->  ~p v ~q -> ~(r ^ s)
        ~(p ^ q) -> u        ->  ~~(p ^ q) -> ~u
    """
    f = strip_group(formula)
    if not is_op(f):
        raise InvalidAction(f"{f} has no top-level connective")
    return chain(f.op, [_negate_part(x) for x in operands(f, keep_groups=True)])


def _negate_part(f: Formula) -> Formula:
    if is_op(f) and not f.grouped:
        return map_not(f)
    return negate(f)


def cancel_double_negations(formula) -> Formula:
    f = parse(formula)
    if isinstance(f, Literal):
        return replace(f, negations=f.negations % 2)
    kept = f.negations % 2
    return replace(
        f,
        left=cancel_double_negations(f.left),
        right=cancel_double_negations(f.right),
        negations=kept,
        grouped=f.grouped or (f.negations > 0 and not kept),
    )


def push_negation(formula) -> Formula:
    """
    Move one negation of a negated group inside it.

        ~(p ^ q)    ->  ~p v ~q
        ~(p -> q)   ->  p ^ ~q
        ~(p <-> q)  ->  p <-> ~q
    """
    f = parse(formula)
    if not isinstance(f, Binary) or not f.negations:
        raise InvalidAction(f"{f} is not a negated group")
    inner = replace(f, negations=0, grouped=False)
    if f.op in DUAL:
        pushed = chain(DUAL[f.op], [contradict(x) for x in operands(inner)])
    elif f.op is IMPLIES:
        pushed = Binary(AND, inner.left, contradict(inner.right))
    else:
        pushed = Binary(IFF, inner.left, contradict(inner.right))
    if f.negations > 1:
        return negate(pushed, f.negations - 1)
    return pushed


# ── Simplification and comparison ─────────────────────────────────────────────

def resolve(formula) -> Formula:
    """One simplification step, used to compare formulas."""
    f = parse(formula)
    if isinstance(f, Binary) and f.negations % 2:
        f = push_negation(f)
    return strip_group(cancel_double_negations(f))


def _shape(f: Formula) -> tuple:
    if isinstance(f, Literal):
        return (f.name, f.negations % 2)
    parity = f.negations % 2
    items = []
    for side in (f.left, f.right):
        shape = _shape(side)
        if f.op in ASSOCIATIVE and len(shape) == 3 and shape[0] is f.op and not shape[1]:
            items.extend(shape[2])
        else:
            items.append(shape)
    return (f.op, parity, tuple(items))


def compare(*cases) -> bool:
    """
    Structural equality after one resolve pass on each case.

    Equal up to whitespace, parenthesization, paired double negation and
    regrouping of AND/OR/IFF chains. Operand order matters: this is not
    logical equivalence.
    """
    shapes = [_shape(resolve(c)) for c in cases]
    return all(shape == shapes[0] for shape in shapes)
