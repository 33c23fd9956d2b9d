"""
The resolver: fold a sequence of instructions into a proof.

An instruction is either a rule invocation

    <keyword> [free text] <ref>...          mp 1 2,  AD u em 10,  SIM p em 2

or a bare formula, which passes through as a new line. Refs are 1-based and
may point at any line solved so far: premises, earlier results, or (when
failures are being collected) earlier error entries.

Two modes:
    throw_on_error=True    the first failure propagates, nothing is returned
    throw_on_error=False   the failure's message takes the line's place and
                           the remaining instructions still run
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from .core.errors import InvalidAction, InvalidLineReference, LogicError
from .core.formula import parse
from .core.proof import Proof
from .core.signals import clear, normalize
from .rules import RULES, apply_rule

logger = logging.getLogger(__name__)

_REF = re.compile(r"^-?\d+$")


@dataclass(frozen=True)
class Instruction:
    text: str
    keyword: str
    refs: tuple = ()
    operand: Optional[str] = None

    @property
    def targets(self) -> tuple:
        return tuple(ref - 1 for ref in self.refs)

    @property
    def is_rule(self) -> bool:
        return self.keyword in RULES


def _formula_or_none(word: str) -> Optional[str]:
    try:
        return str(parse(word))
    except InvalidAction:
        return None


def parse_instruction(text: str) -> Instruction:
    """
    Split an instruction into keyword, refs and operand.

    The operand is the first word after the keyword that is not a ref and
    reads as a formula on its own, so it must be written without spaces:
    "ad ~r 1", "sim ~(tvq) 1".
    """
    words = clear(text).split()
    if not words:
        raise InvalidAction("empty instruction")
    keyword = words[0]
    refs = tuple(int(word) for word in words if _REF.match(word))
    operand = None
    for word in words[1:]:
        if _REF.match(word):
            continue
        operand = _formula_or_none(word)
        if operand is not None:
            break
    return Instruction(text, keyword, refs, operand)


def apply_instruction(instruction: Instruction, lines) -> str:
    """
    Apply one instruction to the lines solved so far.

    Every ref is checked against lines before the keyword is looked at.
    """
    for ref in instruction.refs:
        if ref < 1 or ref > len(lines):
            raise InvalidLineReference(ref)
    if instruction.is_rule:
        return apply_rule(instruction.keyword, lines, instruction.targets, instruction.operand)
    if instruction.refs:
        raise InvalidAction(f"unknown rule {instruction.keyword!r}")
    parse(instruction.text)
    return normalize(instruction.text)


def build_proof(instructions, premises=(), throw_on_error: bool = True) -> Proof:
    """Resolve instructions against premises, keeping provenance per line."""
    if isinstance(instructions, str):
        instructions = [instructions]
    proof = Proof.from_premises(premises)

    for text in instructions:
        try:
            instruction = parse_instruction(text)
            result = apply_instruction(instruction, proof.texts)
        except LogicError as error:
            if throw_on_error:
                raise
            logger.debug("line %d: %r failed: %s %s",
                         len(proof) + 1, text, error.kind, getattr(error, "reason", ""))
            proof.append(str(error), error=error)
            continue

        if instruction.is_rule:
            proof.append(result, rule=instruction.keyword, refs=instruction.targets)
        else:
            proof.append(result)
        logger.debug("line %d: %r -> %s", len(proof), text, result)

    return proof


def resolve(lines, premises=(), throw_on_error: bool = True):
    """
    Resolve one instruction or a sequence of them.

        resolve("mp 1 2", ["p -> q", "p"])                    -> "q"
        resolve(["mp 1 2", "ad r 3"], ["p -> q", "p"])        -> ["p -> q", "p", "q", "q v r"]

    A sequence returns every line, premises first (normalized).
    """
    proof = build_proof(lines, premises, throw_on_error)
    if isinstance(lines, str):
        return proof.texts[-1]
    return proof.texts
