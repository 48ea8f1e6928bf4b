from __future__ import annotations
import argparse, logging, os, sys
from typing import List, Optional
import lkcheck as _lk_pkg
from .errors import LKError
from .core.build import load_proof
from .proof.check import find_invalid_steps
from .proof.render import render
from .report.render import to_markdown
from .fol.tptp import sequent_conjecture


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=f"LK sequent calculus proof checker (v{_lk_pkg.__version__})")
    parser.add_argument("input", nargs="?", help="Path to a proof document (JSON)")
    parser.add_argument("--render", action="store_true", help="Print the derivation as a proof tree")
    parser.add_argument("--report", metavar="OUT.md", help="Write a Markdown check report")
    parser.add_argument("--tptp", action="store_true", help="Print the end sequent as a TPTP FOF conjecture")
    parser.add_argument("--strict-fail", action="store_true", help="Exit with status 1 when any step is invalid (for CI/CD)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("-V", "--version", action="store_true", help="Print version and module path and exit")
    args = parser.parse_args(argv)

    if args.version:
        print(f"lkcheck v{_lk_pkg.__version__} @ {_lk_pkg.__file__}")
        return 0
    if not args.input:
        parser.error("the following arguments are required: input")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        return _run(args)
    except (LKError, OSError) as e:
        print(f"[LK] Error: {e}", file=sys.stderr)
        return 2


def _run(args: argparse.Namespace) -> int:
    lk = load_proof(args.input)
    failures = find_invalid_steps(lk)

    print(f"[LK] End sequent: {lk.conclusion}")
    if failures:
        print(f"\n✗ {len(failures)} invalid step(s):")
        for f in failures:
            print(f"  • {f.where()} ({f.rule}): {f.conclusion}")
    else:
        print("✓ Every step is a valid LK inference.")

    if args.render:
        print()
        print("\n".join(l.rstrip() for l in render(lk).split("\n")))
    if args.tptp:
        print()
        print(sequent_conjecture("end_sequent", lk.conclusion.antecedent, lk.conclusion.succedent))
    if args.report:
        out_dir = os.path.dirname(args.report)
        if out_dir: os.makedirs(out_dir, exist_ok=True)
        title = os.path.splitext(os.path.basename(args.input))[0]
        with open(args.report, "w", encoding="utf-8") as f: f.write(to_markdown(lk, failures, title=title))
        print("Wrote:", args.report)

    if failures and args.strict_fail:
        print("\nExiting with error due to --strict-fail flag.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
