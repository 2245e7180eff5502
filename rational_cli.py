#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import Callable, List, Optional, Tuple

from interval import Interval
from rational import FormatError, InvalidArgument, Rational, compare, parse, rational_of

logger = logging.getLogger(__name__)


def demo_checks() -> List[Tuple[str, Callable[[], bool]]]:
    half = rational_of(1, 2)
    third = rational_of(1, 3)
    two_thirds = rational_of(2, 3)
    return [
        ("1/2 + 1/3 == 5/6", lambda: half + third == rational_of(5, 6)),
        ("1/2 - 1/3 == 1/6", lambda: half - third == rational_of(1, 6)),
        ("1/2 * 1/3 == 1/6", lambda: half * third == rational_of(1, 6)),
        ("(1/2) / (1/3) == 3/2", lambda: half / third == rational_of(3, 2)),
        ("-(1/2) == -1/2", lambda: -half == rational_of(-1, 2)),
        ("str(2/1) == '2'", lambda: str(rational_of(2, 1)) == "2"),
        ("str(-2/4) == '-1/2'", lambda: str(rational_of(-2, 4)) == "-1/2"),
        ("parse('117/1098') == 13/122", lambda: str(parse("117/1098")) == "13/122"),
        ("1/2 < 2/3", lambda: half < two_thirds),
        ("1/2 in [1/3, 2/3]", lambda: half in Interval.closed(third, two_thirds)),
        (
            "2000000000/4000000000 == 1/2",
            lambda: rational_of(2000000000, 4000000000) == half,
        ),
        (
            "40-digit fraction reduces to 1/2",
            lambda: rational_of(
                912016490186296920119201192141970416029,
                1824032980372593840238402384283940832058,
            )
            == half,
        ),
    ]


OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "cmp": compare,
}


def run_demo() -> int:
    failed = 0
    for label, check in demo_checks():
        ok = check()
        print(f"{'ok' if ok else 'FAIL'}  {label}")
        if not ok:
            failed += 1
    logger.info("%d demo checks failed", failed)
    return 1 if failed else 0


def evaluate(lhs: str, op: str, rhs: str):
    a: Rational = parse(lhs)
    b: Rational = parse(rhs)
    return OPERATORS[op](a, b)


FLAGS = ("-v", "--verbose", "-h", "--help")


def _split_argv(argv: List[str]) -> List[str]:
    # operands such as -1/3 look like options to argparse
    flags = [a for a in argv if a in FLAGS]
    operands = [a for a in argv if a not in FLAGS and a != "--"]
    return flags + ["--"] + operands


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        description="Exact rational arithmetic",
        epilog="negative operands need no quoting, e.g. -1/2 - -1/3",
    )
    ap.add_argument("lhs", nargs="?", help="left operand, e.g. 1/2")
    ap.add_argument("op", nargs="?", choices=sorted(OPERATORS), help="operator")
    ap.add_argument("rhs", nargs="?", help="right operand, e.g. -3/4")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(_split_argv(sys.argv[1:] if argv is None else list(argv)))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.lhs is None:
        return run_demo()
    if args.op is None or args.rhs is None:
        ap.error("expected LHS OP RHS")

    try:
        result = evaluate(args.lhs, args.op, args.rhs)
    except (FormatError, InvalidArgument) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
