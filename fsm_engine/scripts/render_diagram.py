"""
Diagram Renderer.

Reads a transition table as JSON (an object mapping each state to an object
of {transition: destination}) and prints it as a Mermaid state diagram.

Usage:
    python -m fsm_engine.scripts.render_diagram machine.json
    cat machine.json | python -m fsm_engine.scripts.render_diagram
    python -m fsm_engine.scripts.render_diagram --example sign_in_form

Exits with status 1 if the input is not valid JSON or not a valid table.
"""

import argparse
import json
import sys
from typing import List, Optional

from fsm_engine.data.example_machines import EXAMPLE_MACHINES
from fsm_engine.diagrams import generate_mermaid_diagram
from fsm_engine.domain.models import TransitionTable


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="render_diagram",
        description="Render a JSON transition table as a Mermaid state diagram.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="JSON file with the transition table ('-' or omitted reads stdin).",
    )
    parser.add_argument(
        "--example",
        choices=sorted(EXAMPLE_MACHINES),
        help="Render a built-in example machine instead of reading input.",
    )
    return parser


def load_table(path: str) -> TransitionTable:
    if path == "-":
        raw = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    return TransitionTable(raw)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.example:
        table = EXAMPLE_MACHINES[args.example]
    else:
        try:
            table = load_table(args.path)
        except (OSError, ValueError) as e:
            # ValueError covers JSONDecodeError, UnicodeDecodeError and
            # InvalidTransitionTableError.
            print(f"Error: {e}", file=sys.stderr)
            return 1

    sys.stdout.write(generate_mermaid_diagram(table))
    return 0


if __name__ == "__main__":
    sys.exit(main())
