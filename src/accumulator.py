"""
Undoable arithmetic accumulator.

Keeps a running value and two stacks of applied commands:
- undo history: executed commands, most recent last
- redo history: undone commands awaiting redo, most recent last

Undo restores the snapshot a command captured when it executed, so no
operation needs an inverse. Redo re-applies the command forward from the
current value. Any new execute clears the redo history.
"""

import logging
from dataclasses import dataclass, field

from . import config
from .models import Command, Operation


@dataclass
class Accumulator:
    """
    Running value with unlimited (or capped) undo/redo.

    Divide-by-zero and undo/redo on an empty history are silent no-ops;
    nothing here raises for them.

    Attributes:
        max_history: Cap on undo history length, oldest entries evicted
            first. None keeps every command.
    """

    max_history: int | None = None

    _value: float = field(default=config.INITIAL_VALUE, init=False, repr=False)
    _undo_stack: list[Command] = field(default_factory=list, init=False, repr=False)
    _redo_stack: list[Command] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.max_history is not None and self.max_history < 1:
            raise ValueError(f"max_history must be positive, got {self.max_history}")
        self.log = logging.getLogger("undocalc.accumulator")

    def current_value(self) -> float:
        """Get the current value."""
        return self._value

    def execute(self, operation: Operation, operand: float) -> None:
        """
        Apply an operation to the current value and record it.

        The redo history is discarded. A zero divisor leaves the value
        unchanged but the command is still recorded, so a following undo
        restores the same value.

        Args:
            operation: Operation to apply
            operand: Right-hand operand
        """
        command = Command(operation, float(operand))
        self._value = command.execute(self._value)
        self._undo_stack.append(command)
        self._redo_stack.clear()

        if operation is Operation.DIVIDE and command.operand == 0:
            self.log.debug(f"Divide by zero skipped, value unchanged at {self._value}")

        if self.max_history is not None:
            while len(self._undo_stack) > self.max_history:
                evicted = self._undo_stack.pop(0)
                self.log.debug(f"History full, evicted oldest command: {evicted.describe()}")

        self.log.debug(f"Executed {command.describe()} -> {self._value}")

    def undo(self) -> bool:
        """
        Undo the most recent command.

        Returns:
            True if a command was undone, False if the history was empty
        """
        if not self._undo_stack:
            self.log.debug("Nothing to undo")
            return False

        command = self._undo_stack.pop()
        self._value = command.undo()
        self._redo_stack.append(command)
        self.log.debug(f"Undid {command.describe()} -> {self._value}")
        return True

    def redo(self) -> bool:
        """
        Redo the most recently undone command from the current value.

        Returns:
            True if a command was redone, False if there was nothing to redo
        """
        if not self._redo_stack:
            self.log.debug("Nothing to redo")
            return False

        command = self._redo_stack.pop()
        self._value = command.execute(self._value)
        self._undo_stack.append(command)
        self.log.debug(f"Redid {command.describe()} -> {self._value}")
        return True

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_history(self) -> list[Command]:
        """Copy of the undo history, oldest first."""
        return list(self._undo_stack)

    @property
    def redo_history(self) -> list[Command]:
        """Copy of the redo history; the next command to redo is last."""
        return list(self._redo_stack)

    def get_undo_description(self) -> str:
        if self._undo_stack:
            return self._undo_stack[-1].describe()
        return ""

    def get_redo_description(self) -> str:
        if self._redo_stack:
            return self._redo_stack[-1].describe()
        return ""

    def get_status(self) -> dict[str, float | int | None]:
        """Get current accumulator status."""
        return {
            "value": self._value,
            "undo_depth": len(self._undo_stack),
            "redo_depth": len(self._redo_stack),
            "max_history": self.max_history,
        }

    def clear(self) -> None:
        """Drop both histories. The current value is kept."""
        self._undo_stack.clear()
        self._redo_stack.clear()
        self.log.debug("History cleared")


def create_accumulator(max_history: int | None = None) -> Accumulator:
    """
    Create an accumulator.

    Args:
        max_history: History cap; None falls back to UNDOCALC_MAX_HISTORY,
            which is unbounded when unset

    Returns:
        Configured Accumulator instance
    """
    if max_history is None:
        max_history = config.get_max_history()
    return Accumulator(max_history=max_history)
