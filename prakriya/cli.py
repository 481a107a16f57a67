"""
prakriya/cli.py

Command-line interface for the derivation engine.

Typical usage:

    prakriya-cli derive \
        --dhatu BU \
        --gana 1 \
        --lakara lat \
        --purusha prathama \
        --vacana eka \
        --trace

    prakriya-cli dhatus --gana 1

The CLI:

- Builds typed arguments from the flags (unknown values exit with status 1).
- Runs the derivation and prints one form per line to stdout.
- With --trace, prints the step history and optional-rule decisions of
  each form; with --json, prints everything as one JSON document.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from prakriya import dhatupatha
from prakriya.args import Dhatu, Lakara, Prayoga, Purusha, TinantaArgs, Vacana
from prakriya.ashtadhyayi import Ashtadhyayi
from prakriya.core import Prakriya
from prakriya.errors import ArgumentError, UnsupportedDerivationError
from utils.logging_setup import get_logger, init_logging

# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prakriya-cli",
        description="Derive Sanskrit verb forms rule by rule.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: settings.LOG_LEVEL, i.e. PRAKRIYA_LOG_LEVEL or INFO).",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # `derive` command
    derive = subparsers.add_parser(
        "derive",
        help="Derive the finite forms of one root for one category.",
    )
    derive.add_argument(
        "--dhatu",
        required=True,
        help="Root in SLP1 with its markers (e.g. 'BU', 'RI\\Y').",
    )
    derive.add_argument(
        "--gana",
        type=int,
        required=True,
        choices=range(1, 11),
        metavar="{1..10}",
        help="Verb class of the root.",
    )
    derive.add_argument(
        "--lakara",
        required=True,
        help="Tense/mood (e.g. 'lat', 'lit', 'lrt', 'lot', 'lan').",
    )
    derive.add_argument("--purusha", default=Purusha.PRATHAMA.value, help="prathama, madhyama or uttama.")
    derive.add_argument("--vacana", default=Vacana.EKA.value, help="eka, dvi or bahu.")
    derive.add_argument("--prayoga", default=Prayoga.KARTARI.value, help="kartari, karmani or bhave.")
    derive.add_argument(
        "--trace",
        action="store_true",
        help="Print the rule history of each form.",
    )
    derive.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON.",
    )

    # `dhatus` command
    dhatus = subparsers.add_parser(
        "dhatus",
        help="List the roots in the root table.",
    )
    dhatus.add_argument("--gana", type=int, default=None, help="Only list roots of this gana.")
    dhatus.add_argument(
        "--path",
        metavar="PATH",
        default=None,
        help="Tab-separated root table (default: bundled table).",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _resolve_dhatu(upadesha: str, gana: int) -> Dhatu:
    """
    Look the root up in the root table so that its sub-list is known.
    Roots missing from the table are used as given.
    """
    found = dhatupatha.find(upadesha, gana)
    if found is not None:
        return found
    return Dhatu(upadesha=upadesha, gana=gana)


def _build_tinanta_args(args: argparse.Namespace) -> TinantaArgs:
    return TinantaArgs(
        lakara=Lakara.from_str(args.lakara),
        purusha=Purusha.from_str(args.purusha),
        vacana=Vacana.from_str(args.vacana),
        prayoga=Prayoga.from_str(args.prayoga),
    )


def _serialize(p: Prakriya) -> Dict[str, Any]:
    return {
        "text": p.text(),
        "history": [{"rule": s.rule, "result": s.result} for s in p.history],
        "rule_decisions": [
            {"rule": rule, "decision": decision.value} for rule, decision in p.rule_decisions
        ],
    }


def _print_trace(p: Prakriya) -> None:
    print(p.text())
    for step in p.history:
        print(f"    {step.rule:<12} {step.result}")
    for rule, decision in p.rule_decisions:
        print(f"    [{decision.value}] {rule}")


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_derive(args: argparse.Namespace) -> int:
    """
    Handle `prakriya-cli derive` command.
    """
    tinanta_args = _build_tinanta_args(args)
    dhatu = _resolve_dhatu(args.dhatu, args.gana)

    results = Ashtadhyayi().derive_tinantas(dhatu, tinanta_args)

    if args.json:
        payload: List[Dict[str, Any]] = [_serialize(p) for p in results]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    elif args.trace:
        for p in results:
            _print_trace(p)
    else:
        for p in results:
            print(p.text())
    return 0


def _cmd_dhatus(args: argparse.Namespace) -> int:
    """
    Handle `prakriya-cli dhatus` command.
    """
    for dhatu, _ in dhatupatha.load_all(args.path):
        if args.gana is not None and dhatu.gana != args.gana:
            continue
        line = f"{dhatu.code()}\t{dhatu.upadesha}"
        if dhatu.antargana is not None:
            line += f"\t{dhatu.antargana.value}"
        print(line)
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    init_logging(args.log_level, force=args.log_level is not None)
    log = get_logger(__name__)

    handlers = {"derive": _cmd_derive, "dhatus": _cmd_dhatus}
    handler = handlers.get(args.command)
    if handler is None:
        parser.error(f"Unknown command: {args.command}")
        return

    try:
        exit_code = handler(args)
    except (ArgumentError, UnsupportedDerivationError, ValidationError, OSError) as exc:
        log.error("cli_failed", command=args.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = 1

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
