"""
CLI entry point. Run as: python -m syllogist [-p PREMISE]... [INSTRUCTION]...
"""

import argparse
import json
import logging
import sys

from .core.errors import LogicError
from .core.proof import print_proof
from .resolver import build_proof
from .rules import RULES


def read_instructions(path: str) -> list:
    """One instruction per line; blank lines and # comments are skipped."""
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f
                if line.strip() and not line.lstrip().startswith("#")]


def print_rules():
    for kind in ("equivalence", "inference"):
        print(f"\n{kind.upper()}")
        for key, rule in RULES.items():
            if rule["kind"].value == kind:
                print(f"  {key:<5} {rule['title']:<26} min targets: {rule['minimum']}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Propositional proofs from named rules")
    parser.add_argument("instructions", nargs="*",
                        help='Instructions, e.g. "mp 1 2" (quote each one)')
    parser.add_argument("-p", "--premise", action="append", default=[],
                        help="A premise (repeatable)")
    parser.add_argument("-f", "--file", type=str, default=None,
                        help="Read instructions from file, one per line")
    parser.add_argument("--collect", action="store_true",
                        help="Record failures as lines instead of stopping")
    parser.add_argument("--json",    action="store_true", help="Print the proof as JSON")
    parser.add_argument("--rules",   action="store_true", help="List the rule catalog")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet",   action="store_true", help="Only print the last line")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.rules:
        print_rules()
        return 0

    instructions = list(args.instructions)
    if args.file:
        instructions = read_instructions(args.file) + instructions

    try:
        proof = build_proof(instructions, args.premise, throw_on_error=not args.collect)
    except LogicError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(proof.to_dict(), indent=2))
    elif args.quiet:
        if proof.lines:
            print(proof.lines[-1].text)
    else:
        print_proof(proof)
    return 0


if __name__ == "__main__":
    sys.exit(main())
