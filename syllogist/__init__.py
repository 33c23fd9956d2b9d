"""
Syllogist: step-by-step propositional proofs from named rules.

Give it premises and one instruction per line ("mp 1 2", "ad u 10", ...)
and it derives every line, checking each rule's shape as it goes.

Usage:
    python -m syllogist -p "p -> q" -p "p" "mp 1 2"
    python -m syllogist -f exercise.txt --collect
    python -m syllogist --rules
"""

from .core.errors import LogicError, InvalidAction, MissingTargetLines, InvalidLineReference
from .core.formula import Literal, Binary, parse
from .core.operations import compare, negate, map_not, contradict
from .core.signals import normalize
from .core.proof import Line, Proof, print_proof
from .rules import RULES, RuleKind, apply_rule
from .resolver import Instruction, parse_instruction, apply_instruction, build_proof, resolve

__all__ = [
    "LogicError", "InvalidAction", "MissingTargetLines", "InvalidLineReference",
    "Literal", "Binary", "parse",
    "compare", "negate", "map_not", "contradict",
    "normalize",
    "Line", "Proof", "print_proof",
    "RULES", "RuleKind", "apply_rule",
    "Instruction", "parse_instruction", "apply_instruction", "build_proof", "resolve",
]
