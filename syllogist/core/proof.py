"""
Proof transcripts: numbered lines with provenance.

A Proof starts with caller-supplied premises. Every later line is appended
exactly once, by one rule application (or as a pass-through formula, or,
when failures are being collected, as the failure's message).
"""

from dataclasses import dataclass, field
from typing import Optional

from .errors import LogicError
from .signals import normalize


@dataclass(frozen=True)
class Line:
    """One row of a proof. refs are the 0-based indices the rule consumed."""
    index: int
    text: str
    rule: Optional[str] = None
    refs: tuple = ()
    error: Optional[LogicError] = None

    @property
    def number(self) -> int:
        return self.index + 1

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def justification(self) -> str:
        if self.error is not None:
            return f"error: {self.error.kind}"
        if self.rule is None:
            return ""
        refs = ", ".join(str(r + 1) for r in self.refs)
        return f"{self.rule} {refs}".strip()


@dataclass
class Proof:
    """
    Ordered lines of a proof.

    premises:  how many of the leading lines were supplied by the caller
    """
    lines: list = field(default_factory=list)
    premises: int = 0

    @classmethod
    def from_premises(cls, premises) -> "Proof":
        proof = cls()
        for text in premises:
            proof.append(normalize(text))
        proof.premises = len(proof.lines)
        return proof

    @property
    def texts(self) -> list:
        return [line.text for line in self.lines]

    @property
    def derived(self) -> list:
        return self.lines[self.premises:]

    @property
    def errors(self) -> list:
        return [line for line in self.lines if line.failed]

    def append(self, text: str, rule: Optional[str] = None, refs=(),
               error: Optional[LogicError] = None) -> Line:
        line = Line(len(self.lines), text, rule, tuple(refs), error)
        self.lines.append(line)
        return line

    def __len__(self):
        return len(self.lines)

    def to_dict(self):
        def serialize(line):
            entry = {"number": line.number, "text": line.text,
                     "premise": line.index < self.premises}
            if line.rule is not None:
                entry["rule"] = line.rule
                entry["refs"] = [r + 1 for r in line.refs]
            if line.error is not None:
                entry["error"] = line.error.kind
            return entry

        return {
            "premises": self.premises,
            "lines": [serialize(line) for line in self.lines],
        }


def print_proof(proof: Proof):
    """Pretty-print the transcript with a justification column."""
    if not proof.lines:
        print("Empty proof.")
        return
    width = max(len(line.text) for line in proof.lines)
    print(f"\n{'='*60}")
    print("PROOF")
    print(f"{'='*60}")
    for line in proof.lines:
        if line.index < proof.premises:
            why = "premise"
        else:
            why = line.justification or "given"
        print(f"  {line.number:>3}. {line.text:<{width}}  [{why}]")
    print(f"{'='*60}")
    if proof.errors:
        print(f"  {len(proof.errors)} line(s) failed.")
