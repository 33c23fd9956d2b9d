"""
Tests for proof transcripts and error values.

Core claims:
    - Premises are normalized and counted
    - Lines carry 1-based numbers and a readable justification
    - to_dict() is plain data (JSON-serializable)
    - Errors are read-only and str(err) == err.message
"""

import json

import pytest

from syllogist.core.errors import (
    LogicError, InvalidAction, MissingTargetLines, InvalidLineReference,
)
from syllogist.core.proof import Line, Proof, print_proof


class TestErrors:
    def test_missing_target_lines(self):
        err = MissingTargetLines(1, 2)
        assert err.received == 1
        assert err.minimum == 2
        assert str(err) == err.message == "min target lines: 2, received: 1"
        assert err.kind == "missing_target_lines"

    def test_invalid_action(self):
        err = InvalidAction("p is not a conditional")
        assert str(err) == "invalid action"
        assert err.reason == "p is not a conditional"

    def test_invalid_line_reference(self):
        err = InvalidLineReference(-1)
        assert err.line == -1
        assert str(err) == "line '-1' does not exist"

    def test_fields_are_read_only(self):
        err = InvalidLineReference(4)
        with pytest.raises(AttributeError):
            err.line = 5
        with pytest.raises(AttributeError):
            err.message = "something else"

    def test_common_base(self):
        for err in (InvalidAction(), MissingTargetLines(0, 1), InvalidLineReference(3)):
            assert isinstance(err, LogicError)


class TestProof:
    def test_from_premises_normalizes(self):
        proof = Proof.from_premises(["P => Q", " p "])
        assert proof.texts == ["p -> q", "p"]
        assert proof.premises == 2
        assert proof.derived == []

    def test_bad_premise(self):
        with pytest.raises(InvalidAction):
            Proof.from_premises(["p & q"])

    def test_append(self):
        proof = Proof.from_premises(["p -> q", "p"])
        line = proof.append("q", rule="mp", refs=[0, 1])
        assert line.number == 3
        assert line.refs == (0, 1)
        assert line.justification == "mp 1, 2"
        assert proof.derived == [line]
        assert len(proof) == 3

    def test_failed_line(self):
        proof = Proof()
        err = InvalidLineReference(4)
        line = proof.append(str(err), error=err)
        assert line.failed
        assert line.justification == "error: invalid_line_reference"
        assert proof.errors == [line]

    def test_plain_line_has_no_justification(self):
        assert Line(0, "p").justification == ""

    def test_to_dict(self):
        proof = Proof.from_premises(["p -> q", "p"])
        proof.append("q", rule="mp", refs=[0, 1])
        proof.append("invalid action", error=InvalidAction())
        data = json.loads(json.dumps(proof.to_dict()))
        assert data["premises"] == 2
        assert data["lines"][0] == {"number": 1, "text": "p -> q", "premise": True}
        assert data["lines"][2] == {
            "number": 3, "text": "q", "premise": False, "rule": "mp", "refs": [1, 2],
        }
        assert data["lines"][3]["error"] == "invalid_action"


class TestPrintProof:
    def test_prints_justifications(self, capsys):
        proof = Proof.from_premises(["p -> q", "p"])
        proof.append("q", rule="mp", refs=[0, 1])
        proof.append("r")
        print_proof(proof)
        out = capsys.readouterr().out
        assert "PROOF" in out
        assert "[premise]" in out
        assert "[mp 1, 2]" in out
        assert "[given]" in out

    def test_reports_failures(self, capsys):
        proof = Proof()
        proof.append("invalid action", error=InvalidAction())
        print_proof(proof)
        assert "1 line(s) failed." in capsys.readouterr().out

    def test_empty(self, capsys):
        print_proof(Proof())
        assert "Empty proof." in capsys.readouterr().out
