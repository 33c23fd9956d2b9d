from .errors import LogicError, InvalidAction, MissingTargetLines, InvalidLineReference
from .signals import (
    Connective, ALIASES, PRECEDENCE,
    tokenize, clear, prune, normalize, catch_signal, split, group, ungroup, invert_signal,
)
from .formula import Literal, Binary, Formula, parse, render
from .operations import (
    is_op, operands, chain, wrap, strip_group,
    negate, contradict, map_not, cancel_double_negations, push_negation,
    resolve, compare,
)
from .proof import Line, Proof, print_proof

__all__ = [
    "LogicError", "InvalidAction", "MissingTargetLines", "InvalidLineReference",
    "Connective", "ALIASES", "PRECEDENCE",
    "tokenize", "clear", "prune", "normalize", "catch_signal", "split", "group", "ungroup",
    "invert_signal",
    "Literal", "Binary", "Formula", "parse", "render",
    "is_op", "operands", "chain", "wrap", "strip_group",
    "negate", "contradict", "map_not", "cancel_double_negations", "push_negation",
    "resolve", "compare",
    "Line", "Proof", "print_proof",
]
