"""Entry point for the callable walkthrough.

Running ``python -m callable_tour`` executes every section's ``run_all`` in
:data:`callable_tour.tour.SECTIONS` order. Each section prints numbered
lines, so a missing step is obvious when reading the output.

To add a section:
1. Create ``tour/<topic>.py`` with numbered ``demo_*`` functions and a
   ``run_all(settings)``.
2. Append ``<topic>`` to ``SECTIONS`` in ``tour/__init__.py``.
"""

from __future__ import annotations

import argparse
import sys
from importlib import import_module
from typing import Callable

from callable_tour.config import Settings, load_settings
from callable_tour.console import heading, setup_logging
from callable_tour.tour import SECTIONS

Runner = Callable[[Settings], None]

MODULES: list[tuple[str, Runner]] = []


def register(module_name: str) -> None:
    module = import_module(f"callable_tour.tour.{module_name}")
    MODULES.append((module_name, module.run_all))


for name in SECTIONS:
    register(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="callable-tour",
        description="Walk through callable references, events, lambdas and lazy queries.",
    )
    parser.add_argument(
        "sections",
        nargs="*",
        metavar="SECTION",
        help="sections to run (default: all, in order)",
    )
    parser.add_argument("--list", action="store_true", help="print section names and exit")
    return parser


def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    if args.list:
        for name, _ in MODULES:
            print(name)
        return 0

    unknown = [s for s in args.sections if s not in SECTIONS]
    if unknown:
        print(f"unknown section(s): {', '.join(unknown)}", file=sys.stderr)
        return 2

    settings = settings if settings is not None else load_settings()
    setup_logging(settings.log_level)
    wanted = set(args.sections) or set(SECTIONS)
    for name, runner in MODULES:
        if name in wanted:
            print(heading(name, color=settings.color))
            runner(settings)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI passthrough only
    sys.exit(main())
