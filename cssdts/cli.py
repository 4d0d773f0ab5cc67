"""CLI entrypoints for cssdts commands."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from .config import load_config
from .errors import CssDtsError
from .logging import configure_logging
from .reconciler import Reconciler

COMPILED_SUFFIX = ".js"


def _add_logging_options(parser: argparse.ArgumentParser, *, nested: bool = False) -> None:
    # Subcommand copies default to SUPPRESS so a flag given before the command survives.
    default: object = argparse.SUPPRESS if nested else False
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=default,
        help="Log extraction and comparison details.",
    )
    group.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default,
        help="Only log warnings and errors.",
    )


def _add_reconcile_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "resources",
        nargs="+",
        metavar="RESOURCE",
        help="Style source paths whose declarations should be reconciled.",
    )
    parser.add_argument(
        "--compiled",
        type=Path,
        default=None,
        help=(
            "Compiled module text for a single RESOURCE "
            f"(defaults to '<RESOURCE>{COMPILED_SUFFIX}')."
        ),
    )
    parser.add_argument(
        "--named-exports",
        action="store_true",
        default=None,
        help="Emit `export = cssExports` instead of a default export.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cssdts",
        description="Generate and verify TypeScript declarations for compiled CSS modules.",
    )
    _add_logging_options(parser)
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("."),
        help="Path to .cssdts.yml or the directory containing it.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    emit_parser = subparsers.add_parser(
        "emit",
        help="Write declarations that are missing or out of date.",
    )
    _add_logging_options(emit_parser, nested=True)
    _add_reconcile_arguments(emit_parser)

    verify_parser = subparsers.add_parser(
        "verify",
        help="Fail when a declaration is missing or out of date.",
    )
    _add_logging_options(verify_parser, nested=True)
    _add_reconcile_arguments(verify_parser)

    reconcile_parser = subparsers.add_parser(
        "reconcile",
        help="Emit or verify using the mode from .cssdts.yml or CSSDTS_MODE.",
    )
    _add_logging_options(reconcile_parser, nested=True)
    _add_reconcile_arguments(reconcile_parser)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the reconciliation HTTP service.",
    )
    _add_logging_options(serve_parser, nested=True)
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    return parser


def main(argv: List[str] | None = None) -> None:
    """CLI entrypoint for cssdts commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), quiet=bool(args.quiet))

    if args.command == "serve":
        from .service import run_service

        run_service(host=args.host, port=args.port)
        return

    if args.compiled is not None and len(args.resources) > 1:
        parser.exit(1, "--compiled can only be used with a single RESOURCE\n")

    try:
        config = load_config(args.config)
    except CssDtsError as exc:
        parser.exit(1, f"{exc}\n")

    options = config.options
    if args.command != "reconcile":
        options = replace(options, mode=args.command)
    if args.named_exports is not None:
        options = replace(options, named_exports=True)

    reconciler = Reconciler()
    failures = 0
    for resource in args.resources:
        compiled_path = args.compiled or Path(f"{resource}{COMPILED_SUFFIX}")
        try:
            content = compiled_path.read_text(encoding="utf-8")
            outcome = reconciler.reconcile(content, resource, options=options)
        except (CssDtsError, OSError) as exc:
            failures += 1
            print(f"{resource}: {exc}", file=sys.stderr)
            continue
        rel_path = _relativize(outcome.declaration_path)
        if outcome.written:
            print(f"Declaration written to {rel_path}")
        else:
            print(f"Declaration up to date: {rel_path}")

    if failures:
        parser.exit(1, f"cssdts {args.command} failed for {failures} resource(s)\n")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
