"""
Command line demonstration for undocalc.

Replays a script of steps against a fresh accumulator and prints the
value after each one:

    undocalc add 8 subtract 3 multiply 4 divide 2 undo redo
    undocalc + 2 x 10 / 0 undo

With no steps the built-in demo runs.
"""

import argparse
import logging
import sys

from . import config
from .accumulator import Accumulator, create_accumulator
from .models import Operation

log = logging.getLogger("undocalc.cli")

UNDO = "undo"
REDO = "redo"

DEMO_SCRIPT = [
    (Operation.ADD, 8.0),
    (Operation.SUBTRACT, 3.0),
    (Operation.MULTIPLY, 4.0),
    (Operation.DIVIDE, 2.0),
]


def parse_steps(tokens: list[str]) -> list[tuple[Operation, float] | str]:
    """
    Turn command line tokens into steps.

    Each step is either UNDO, REDO or an (operation, operand) pair.

    Raises:
        ValueError: On an unknown operation, or a missing or non-numeric operand
    """
    steps: list[tuple[Operation, float] | str] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.lower() in (UNDO, REDO):
            steps.append(token.lower())
            i += 1
            continue

        operation = Operation.parse(token)
        if i + 1 >= len(tokens):
            raise ValueError(f"Missing operand for {token!r}")
        try:
            operand = float(tokens[i + 1])
        except ValueError:
            raise ValueError(
                f"Operand for {token!r} must be a number, got {tokens[i + 1]!r}"
            ) from None
        steps.append((operation, operand))
        i += 2
    return steps


def run_steps(accumulator: Accumulator, steps: list[tuple[Operation, float] | str]) -> list[str]:
    """Apply steps in order and return one output line per step."""
    lines = []
    for step in steps:
        if step == UNDO:
            accumulator.undo()
            label = UNDO
        elif step == REDO:
            accumulator.redo()
            label = REDO
        else:
            operation, operand = step
            accumulator.execute(operation, operand)
            label = f"{operation.value} {operand}"
        lines.append(f"{label}: {accumulator.current_value()}")
    return lines


def run_demo(accumulator: Accumulator) -> list[str]:
    """Run the built-in demo script."""
    for operation, operand in DEMO_SCRIPT:
        accumulator.execute(operation, operand)
    lines = [f"Current Result: {accumulator.current_value()}"]

    accumulator.undo()
    lines.append(f"After Undo: {accumulator.current_value()}")

    accumulator.redo()
    lines.append(f"After Redo: {accumulator.current_value()}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="undocalc",
        description="Undoable arithmetic accumulator",
    )
    parser.add_argument(
        "steps",
        nargs="*",
        help="Steps to replay: OP OPERAND, undo or redo (OP is add/subtract/multiply/divide or + - * /)",
    )
    parser.add_argument("--max-history", type=int, help="Cap the undo history length")

    # Steps given after --max-history come back as extras
    args, extra = parser.parse_known_args(argv)
    tokens = list(args.steps) + extra

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        steps = parse_steps(tokens)
        accumulator = create_accumulator(max_history=args.max_history)
    except ValueError as e:
        parser.error(str(e))

    if steps:
        lines = run_steps(accumulator, steps)
    else:
        log.debug("No steps given, running demo")
        lines = run_demo(accumulator)

    for line in lines:
        print(line)
    log.debug(f"Final status: {accumulator.get_status()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
