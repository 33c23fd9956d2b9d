"""
Rule registry.

Each rule is a dict describing one named transformation:
    fn:       (lines, targets, operand=None) -> str
    kind:     RuleKind.EQUIVALENCE or RuleKind.INFERENCE
    minimum:  fewest target lines the rule accepts
    title:    str
"""

import logging

from ..core.errors import InvalidAction
from .base import RuleKind
from .equivalence import dn, ip, com, ass, dm, dis, cp, cond, bi, inv
from .inference import ad, sim, mp, mt, sd, sh, dc, dd, abs_, conj

logger = logging.getLogger(__name__)

EQ, INF = RuleKind.EQUIVALENCE, RuleKind.INFERENCE


RULES = {
    # Equivalence
    "dn":   {"fn": dn,   "kind": EQ,  "minimum": 1, "title": "Double Negation"},
    "ip":   {"fn": ip,   "kind": EQ,  "minimum": 1, "title": "Idempotence"},
    "com":  {"fn": com,  "kind": EQ,  "minimum": 1, "title": "Commutation"},
    "ass":  {"fn": ass,  "kind": EQ,  "minimum": 1, "title": "Association"},
    "dm":   {"fn": dm,   "kind": EQ,  "minimum": 1, "title": "De Morgan"},
    "dis":  {"fn": dis,  "kind": EQ,  "minimum": 1, "title": "Distribution"},
    "cp":   {"fn": cp,   "kind": EQ,  "minimum": 1, "title": "Implication-part Negation"},
    "cond": {"fn": cond, "kind": EQ,  "minimum": 1, "title": "Transposition"},
    "bi":   {"fn": bi,   "kind": EQ,  "minimum": 1, "title": "Material Equivalence"},
    "inv":  {"fn": inv,  "kind": EQ,  "minimum": 1, "title": "Inversion"},
    # Inference
    "ad":   {"fn": ad,   "kind": INF, "minimum": 1, "title": "Addition"},
    "sim":  {"fn": sim,  "kind": INF, "minimum": 1, "title": "Simplification"},
    "mp":   {"fn": mp,   "kind": INF, "minimum": 2, "title": "Modus Ponens"},
    "mt":   {"fn": mt,   "kind": INF, "minimum": 2, "title": "Modus Tollens"},
    "sd":   {"fn": sd,   "kind": INF, "minimum": 2, "title": "Disjunctive Syllogism"},
    "sh":   {"fn": sh,   "kind": INF, "minimum": 1, "title": "Hypothetical Syllogism"},
    "dc":   {"fn": dc,   "kind": INF, "minimum": 1, "title": "Constructive Dilemma"},
    "dd":   {"fn": dd,   "kind": INF, "minimum": 1, "title": "Destructive Dilemma"},
    "abs":  {"fn": abs_, "kind": INF, "minimum": 1, "title": "Absorption"},
    "conj": {"fn": conj, "kind": INF, "minimum": 2, "title": "Conjunction"},
}


def apply_rule(key: str, lines, targets, operand=None) -> str:
    """Look up a rule by keyword (case-insensitive) and apply it."""
    rule = RULES.get(key.lower())
    if rule is None:
        raise InvalidAction(f"unknown rule {key!r}")
    logger.debug("%s targets=%s operand=%s", key, list(targets), operand)
    return rule["fn"](lines, targets, operand)


__all__ = ["RULES", "RuleKind", "apply_rule"]
