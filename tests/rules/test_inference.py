"""
Tests for the inference rules.

Core claims:
    - Target count is checked first: MissingTargetLines carries the rule's minimum
    - Two-line rules accept their lines in either order
    - Dilemmas find their three conjuncts in any order, on one line or several
    - Auxiliary formulas (ad, sim) come from operand= or the second target
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from syllogist.core.errors import InvalidAction, MissingTargetLines
from syllogist.core.operations import compare
from syllogist.rules import RULES, RuleKind, apply_rule
from syllogist.rules.inference import ad, sim, mp, mt, sd, sh, dc, dd, abs_, conj


def make(*lines):
    return list(lines), list(range(len(lines)))


letters = st.sampled_from("pqrst")
negations = st.sampled_from(["", "~", "~~"])


# ── Unit tests ────────────────────────────────────────────────────────────────

class TestContract:
    def test_inference_rules_registered(self):
        keys = {k for k, rule in RULES.items() if rule["kind"] is RuleKind.INFERENCE}
        assert keys == {"ad", "sim", "mp", "mt", "sd", "sh", "dc", "dd", "abs", "conj"}

    @pytest.mark.parametrize("key", sorted(RULES))
    def test_every_rule_needs_targets(self, key):
        with pytest.raises(MissingTargetLines) as exc:
            RULES[key]["fn"]([], [])
        assert exc.value.minimum == RULES[key]["minimum"]
        assert exc.value.received == 0

    def test_two_line_rules_reject_one(self):
        for key in ("mp", "mt", "sd", "conj"):
            with pytest.raises(MissingTargetLines):
                apply_rule(key, ["p -> q", "p"], [0])

    def test_apply_rule_is_case_insensitive(self):
        assert apply_rule("MP", ["p -> q", "p"], [0, 1]) == "q"

    def test_apply_rule_unknown(self):
        with pytest.raises(InvalidAction):
            apply_rule("xyz", ["p"], [0])


class TestAddition:
    def test_second_target(self):
        assert ad(*make("~m", "~r")) == "~m v ~r"

    def test_operand(self):
        assert ad(["m"], [0], operand="r") == "m v r"
        assert ad(["m"], [0], operand="p ^ q") == "m v (p ^ q)"

    def test_operand_wins_over_second_target(self):
        assert ad(*make("m", "q"), operand="r") == "m v r"

    def test_rejects(self):
        with pytest.raises(InvalidAction):
            ad(*make("m -> r", "r"))
        with pytest.raises(InvalidAction):
            ad(["m"], [0])


class TestSimplification:
    def test_named_conjunct(self):
        assert sim(*make("m ^ r", "m")) == "m"
        assert sim(*make("m ^ r", "r")) == "r"
        assert sim(["m ^ r"], [0], operand="r") == "r"
        assert sim(["m ^ ~(t v q)"], [0], operand="~(tvq)") == "~(t v q)"

    def test_parenthesized_conjunct(self):
        assert sim(*make("(p ^ q) ^ r", "p ^ q")) == "p ^ q"
        assert sim(*make("(p ^ q) ^ r", "q")) == "q"

    def test_conditional_form(self):
        assert sim(*make("m ^ r -> m")) == "m ^ r -> r"
        assert sim(*make("~m ^ ~r -> ~r")) == "~m ^ ~r -> ~m"
        assert sim(*make("p ^ q ^ r -> q")) == "p ^ q ^ r -> (p ^ r)"

    def test_rejects(self):
        for lines in (("m -> r",), ("m ^ r", ""), ("m ^ r", "s"), ("~(m ^ r)", "~m"), ("m ^ r",)):
            with pytest.raises(InvalidAction):
                sim(*make(*lines))


class TestModusPonens:
    def test_either_order(self):
        assert mp(*make("m", "m -> r")) == "r"
        assert mp(*make("m -> r", "m")) == "r"

    def test_compound(self):
        assert mp(*make("m ^ r", "m ^ r -> u")) == "u"
        assert mp(*make("s", "s -> (r -> t)")) == "r -> t"

    def test_antecedent_up_to_compare(self):
        assert mp(*make("~p v q", "~(p ^ ~q) -> ~(r v s)")) == "~(r v s)"
        assert mp(*make("~~p", "p -> q")) == "q"

    def test_rejects(self):
        with pytest.raises(InvalidAction):
            mp(*make("m", "r"))
        with pytest.raises(InvalidAction):
            mp(*make("q -> r", "t"))


class TestModusTollens:
    def test_denied_consequent(self):
        assert mt(*make("m -> r", "~r")) == "~m"
        assert mt(*make("~r", "m -> r")) == "~m"
        assert mt(*make("~m", "~r -> m")) == "r"
        assert mt(*make("~m", "p v ~q -> m")) == "~(p v ~q)"

    def test_denied_compound_consequent(self):
        assert mt(*make("~s -> ~u v ~r", "~(~uv~r)")) == "s"
        assert mt(*make("~m v ~r", "u -> m ^ r")) == "~u"

    def test_denied_antecedent(self):
        assert mt(*make("~m", "m -> r")) == "~r"

    def test_rejects(self):
        with pytest.raises(InvalidAction):
            mt(*make("m", "r"))
        with pytest.raises(InvalidAction):
            mt(*make("m -> r", "r"))


class TestDisjunctiveSyllogism:
    def test_either_order(self):
        assert sd(*make("~m", "m v r")) == "r"
        assert sd(*make("m v r", "~m")) == "r"
        assert sd(*make("m v r", "~r")) == "m"

    def test_remaining_disjuncts(self):
        assert sd(*make("m", "~m v (~q v r)")) == "~q v r"
        assert sd(*make("p v q v r", "~q")) == "p v r"
        assert sd(*make("s v (r -> t)", "~s")) == "r -> t"

    def test_parenthesized_disjunct(self):
        assert sd(*make("(p v q) v r", "~(p v q)")) == "r"
        assert sd(*make("~(p v q)", "r v (p v q)")) == "r"
        assert sd(*make("(p v q) v r", "~q")) == "p v r"

    def test_rejects(self):
        with pytest.raises(InvalidAction):
            sd(*make("m", "r"))
        with pytest.raises(InvalidAction):
            sd(*make("m v r", "m"))


class TestHypotheticalSyllogism:
    def test_single_chain(self):
        assert sh(*make("m -> q -> r")) == "m -> r"
        assert sh(*make("m -> (q -> r)")) == "m -> r"

    def test_two_lines_either_order(self):
        assert sh(*make("m -> q", "q -> r")) == "m -> r"
        assert sh(*make("q -> r", "m -> q")) == "m -> r"

    def test_compound_consequent_kept(self):
        assert sh(*make("q -> m", "m -> (r -> s)")) == "q -> (r -> s)"

    def test_rejects(self):
        for lines in (("m v q", "s -> r"), ("m -> q", "s ^ r"), ("m -> q", "s -> r"), ("p -> q",)):
            with pytest.raises(InvalidAction):
                sh(*make(*lines))


class TestConstructiveDilemma:
    def test_one_line(self):
        assert dc(["(p -> q) ^ (r -> s) ^ (p v r)"], [0]) == "q v s"
        assert dc(*make("(p → ~q) ^ (r → ~s) ^ (p v r)")) == "~q v ~s"
        assert dc(*make("(~p → q) ^ (~r → s) ^ (~p v ~r)")) == "q v s"

    def test_conjunct_order_does_not_matter(self):
        assert compare(dc(["(r -> s) ^ (p -> q) ^ (p v r)"], [0]), "q v s")
        assert dc(*make("(p v r) ^ (p -> q) ^ (r -> s)")) == "q v s"

    def test_follows_disjunction_order(self):
        assert dc(*make("(~p → ~q) ^ (~r → ~s) ^ (~r v ~p)")) == "~s v ~q"

    def test_spread_over_lines(self):
        assert dc(*make("p -> q", "r -> s", "p v r")) == "q v s"
        assert dc(*make("(p -> q) ^ (r -> s)", "p v r")) == "q v s"

    def test_rejects(self):
        for line in ("(p → q) ^ (r → s) ^ (~p v ~r)", "(~p → ~q) ^ (~p v ~r)",
                     "(p -> q) ^ (r -> s) ^ (p v r v t)"):
            with pytest.raises(InvalidAction):
                dc(*make(line))


class TestDestructiveDilemma:
    def test_one_line(self):
        assert dd(*make("(p → q) ^ (r → s) ^ (~q v ~s)")) == "~p v ~r"

    def test_fewer_negations(self):
        assert dd(*make("(~p → ~q) ^ (~r → ~s) ^ (q v s)")) == "p v r"
        assert dd(*make("(~p → q) ^ (~r → s) ^ (~s v ~q)")) == "r v p"

    def test_rejects(self):
        for line in ("(p → q) ^ (r → s) ^ (q v s)", "(~p → q) ^ (~q v ~s)"):
            with pytest.raises(InvalidAction):
                dd(*make(line))


class TestAbsorption:
    def test_absorbs(self):
        assert abs_(*make("p -> q")) == "p -> (p ^ q)"
        assert abs_(*make("p ^ q -> r")) == "p ^ q -> (p ^ q ^ r)"
        assert abs_(*make("~(p ^ q) -> r")) == "~(p ^ q) -> (~(p ^ q) ^ r)"
        assert abs_(*make("~(p ^ q) -> (r -> s)")) == "~(p ^ q) -> (~(p ^ q) ^ (r -> s))"

    def test_registered_as_abs(self):
        assert apply_rule("abs", ["p -> q"], [0]) == "p -> (p ^ q)"

    def test_rejects(self):
        with pytest.raises(InvalidAction):
            abs_(*make("p v q"))


class TestConjunction:
    def test_argument_order(self):
        assert conj(*make("p", "q")) == "p ^ q"
        assert conj(*make("p", "q", "r")) == "p ^ q ^ r"
        assert conj(*make("~p", "q", "~~r")) == "~p ^ q ^ ~~r"
        assert conj(["p", "q"], [1, 0]) == "q ^ p"

    def test_rejects(self):
        for lines in (("p -> q", "r"), ("p", "q v r")):
            with pytest.raises(InvalidAction):
                conj(*make(*lines))


# ── Property-based tests ──────────────────────────────────────────────────────

class TestInferenceProperties:

    @given(letters, letters, negations, negations)
    def test_mp_order_independent(self, a, b, na, nb):
        conditional, data = f"{na}{a} -> {nb}{b}", f"{na}{a}"
        assert mp(*make(conditional, data)) == mp(*make(data, conditional))
        assert compare(mp(*make(conditional, data)), f"{nb}{b}")

    @given(letters, letters)
    def test_mt_gives_negated_antecedent(self, a, b):
        assert compare(mt(*make(f"{a} -> {b}", f"~{b}")), f"~{a}")

    @given(st.permutations(["(p -> q)", "(r -> s)", "(p v r)"]))
    def test_dc_position_independent(self, conjuncts):
        assert dc(*make(" ^ ".join(conjuncts))) == "q v s"

    @given(st.lists(letters, min_size=2, max_size=4))
    def test_conj_then_sim_recovers_each(self, items):
        joined = conj(*make(*items))
        for item in items:
            assert sim([joined], [0], operand=item) == item
