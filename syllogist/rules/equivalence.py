"""
Equivalence rules: reversible rewrites of a single target line.

Each rule checks the shape of the referenced formula and either returns the
rewritten formula (canonical text) or raises InvalidAction.

    dn    Double Negation          ~~A  <->  A
    ip    Idempotence              A v A  ->  A
    com   Commutation              A v B  ->  B v A
    ass   Association              (A v B) v C  <->  A v (B v C)
    dm    De Morgan                ~(A ^ B)  <->  ~A v ~B
    dis   Distribution             A ^ (B v C)  <->  (A ^ B) v (A ^ C)
    cp    Implication-part negation   A -> B  ->  ~A -> ~B
    cond  Transposition            A -> B  ->  ~B -> ~A ;  A v B  ->  ~A -> B
    bi    Material Equivalence     A <-> B  <->  (A -> B) ^ (B -> A)
    inv   Inversion                A op B  ->  B op A
"""

from dataclasses import replace

from ..core.errors import InvalidAction
from ..core.formula import Binary, Literal, parse
from ..core.operations import (
    AND, COMMUTATIVE, DUAL, IFF, IMPLIES, OR,
    chain, compare, contradict, is_op, map_not, negate, operands,
    push_negation, resolve, strip_group, wrap,
)
from ..core.signals import invert_signal
from .base import fetch, finish, readings


def dn(lines, targets, operand=None, direction="auto"):
    """
    Double negation.

    direction="eliminate" removes a leading pair, "introduce" adds one.
    "auto" eliminates when a pair is present and otherwise introduces a
    pair in front of a plain letter; "~p" is left to an explicit direction.
    """
    if direction not in ("auto", "eliminate", "introduce"):
        raise ValueError(f"unknown direction {direction!r}")
    target = fetch(lines, targets, 1)[0]

    if direction == "eliminate" or (direction == "auto" and target.negations >= 2):
        if target.negations < 2:
            raise InvalidAction(f"{target} has no double negation")
        return finish(replace(target, negations=target.negations - 2))
    if direction == "auto" and not (isinstance(target, Literal) and not target.negations):
        raise InvalidAction(f"{target} is not a plain letter")
    return finish(negate(target, 2))


def ip(lines, targets, operand=None):
    target = strip_group(fetch(lines, targets, 1)[0])
    if not is_op(target, AND, OR):
        raise InvalidAction(f"{target} is not a conjunction or disjunction")
    for items in readings(target):
        if all(compare(items[0], item) for item in items[1:]):
            return finish(items[0])
    raise InvalidAction(f"operands of {target} differ")


def com(lines, targets, operand=None):
    """Swap the operands of a commutative connective; a negated group stays negated."""
    target = strip_group(fetch(lines, targets, 1)[0])
    if not isinstance(target, Binary) or target.op not in COMMUTATIVE:
        raise InvalidAction(f"{target} has no commutative connective")
    return finish(replace(target, left=target.right, right=target.left))


def ass(lines, targets, operand=None):
    target = strip_group(fetch(lines, targets, 1)[0])
    if not is_op(target, AND, OR):
        raise InvalidAction(f"{target} is not a conjunction or disjunction")
    op, left, right = target.op, target.left, target.right
    if is_op(left, op):
        return finish(Binary(op, left.left, wrap(Binary(op, left.right, right))))
    if is_op(right, op):
        return finish(Binary(op, wrap(Binary(op, left, right.left)), right.right))
    raise InvalidAction(f"{target} has nothing to regroup")


def dm(lines, targets, operand=None):
    """
    De Morgan.

    A negated AND/OR group has its negation pushed inside; an AND/OR chain
    of plain operands is folded into a negated group of the dual; any other
    compound has each of its AND/OR operands rewritten independently.

        ~(a ^ b ^ c)             ->  ~a v ~b v ~c
        ~a v b                   ->  ~(a ^ ~b)
        ~(p v q) -> ~(r ^ s)     ->  (~p ^ ~q) -> (~r v ~s)
    """
    target = fetch(lines, targets, 1)[0]
    return finish(_de_morgan(target))


def _is_junction(formula) -> bool:
    return isinstance(formula, Binary) and formula.op in DUAL


def _de_morgan(formula):
    if isinstance(formula, Literal):
        raise InvalidAction(f"{formula} is a literal")
    if formula.negations % 2:
        if formula.op not in DUAL:
            raise InvalidAction(f"{formula} is not a negated conjunction or disjunction")
        return push_negation(replace(formula, negations=1))

    base = strip_group(replace(formula, negations=0))
    if base.op in DUAL:
        items = operands(base)
        if not any(_is_junction(item) for item in items):
            inverted = parse(invert_signal(str(base)))
            return negate(chain(inverted.op, [contradict(x) for x in operands(inverted)]))
    else:
        items = [base.left, base.right]
        if not any(_is_junction(item) for item in items):
            raise InvalidAction(f"{formula} has no conjunction or disjunction to rewrite")

    rewritten = [wrap(_de_morgan(x)) if _is_junction(x) else x for x in items]
    if base.op in DUAL:
        return chain(base.op, rewritten)
    return replace(base, left=rewritten[0], right=rewritten[1])


def dis(lines, targets, operand=None, direction="auto"):
    """
    Distribution, n-ary on the inner group:

        p v (q ^ r ^ s)       ->  (p v q) ^ (p v r) ^ (p v s)
        (p ^ q) v (p ^ r)     ->  p ^ (q v r)

    direction="factor" only factors a shared side out, "distribute" only
    distributes. "auto" factors when every operand shares a side and
    distributes otherwise.
    """
    if direction not in ("auto", "factor", "distribute"):
        raise ValueError(f"unknown direction {direction!r}")
    target = strip_group(fetch(lines, targets, 1)[0])
    if not is_op(target, AND, OR):
        raise InvalidAction(f"{target} is not a conjunction or disjunction")
    op, dual = target.op, DUAL[target.op]

    if direction != "distribute":
        factored = _factor(op, dual, operands(target))
        if factored is not None:
            return finish(factored)
        if direction == "factor":
            raise InvalidAction(f"{target} has no common side to factor out")

    if is_op(target.right, dual):
        parts = [wrap(Binary(op, target.left, x)) for x in operands(target.right)]
    elif is_op(target.left, dual):
        parts = [wrap(Binary(op, x, target.right)) for x in operands(target.left)]
    else:
        raise InvalidAction(f"{target} has no group to distribute over")
    return finish(chain(dual, parts))


def _factor(op, dual, items):
    if len(items) < 2 or not all(is_op(item, dual) for item in items):
        return None
    first = items[0]
    if all(compare(first.left, item.left) for item in items[1:]):
        return Binary(dual, first.left, wrap(chain(op, [item.right for item in items])))
    if all(compare(first.right, item.right) for item in items[1:]):
        return Binary(dual, wrap(chain(op, [item.left for item in items])), first.right)
    return None


def cp(lines, targets, operand=None):
    target = strip_group(fetch(lines, targets, 1)[0])
    if not is_op(target):
        raise InvalidAction(f"{target} has no top-level connective")
    return finish(map_not(target))


def cond(lines, targets, operand=None):
    target = strip_group(fetch(lines, targets, 1)[0])
    if is_op(target, IMPLIES):
        return finish(Binary(IMPLIES, contradict(target.right), contradict(target.left)))
    if is_op(target, OR):
        return finish(Binary(IMPLIES, contradict(target.left), wrap(target.right)))
    raise InvalidAction(f"{target} is not a conditional or disjunction")


def bi(lines, targets, operand=None):
    """
    Material equivalence, both directions. A chain p <-> q <-> r becomes
    (p -> q -> r) ^ (r -> q -> p).
    """
    target = strip_group(fetch(lines, targets, 1)[0])
    if is_op(target, IFF):
        items = operands(target)
        forward = wrap(chain(IMPLIES, items))
        backward = wrap(chain(IMPLIES, reversed(items)))
        return finish(Binary(AND, forward, backward))

    if is_op(target, AND) and is_op(target.left, IMPLIES) and is_op(target.right, IMPLIES):
        forward = operands(target.left)
        backward = operands(target.right)
        if len(forward) == len(backward) and all(
            compare(a, b) for a, b in zip(forward, reversed(backward))
        ):
            return finish(chain(IFF, forward))
    raise InvalidAction(f"{target} is not a biconditional")


def inv(lines, targets, operand=None):
    target = fetch(lines, targets, 1)[0]
    if isinstance(target, Binary) and target.negations:
        target = resolve(target)
    target = strip_group(target)
    if not is_op(target):
        raise InvalidAction(f"{target} has no binary connective")
    return finish(replace(target, left=target.right, right=target.left))
