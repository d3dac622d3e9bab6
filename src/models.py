"""
Data models for the undocalc accumulator.
"""

from dataclasses import dataclass
from enum import Enum


class InvalidOperationError(ValueError):
    """Raised when an operation name cannot be resolved."""
    pass


class Operation(Enum):
    """Arithmetic operations an accumulator can apply."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @classmethod
    def parse(cls, name: str) -> "Operation":
        """
        Resolve an operation from a user-supplied name.

        Accepts the enum value ("add"), the enum name in any case ("ADD")
        or an arithmetic symbol ("+", "-", "*", "x", "/").

        Raises:
            InvalidOperationError: If the name matches no operation
        """
        key = name.strip().lower()
        if key in _SYMBOLS:
            return _SYMBOLS[key]
        try:
            return cls(key)
        except ValueError:
            raise InvalidOperationError(f"Unknown operation: {name!r}") from None


_SYMBOLS = {
    "+": Operation.ADD,
    "-": Operation.SUBTRACT,
    "*": Operation.MULTIPLY,
    "x": Operation.MULTIPLY,
    "/": Operation.DIVIDE,
}


def apply_operation(operation: Operation, value: float, operand: float) -> float:
    """Apply one forward transform to value. Division by zero leaves value unchanged."""
    if operation is Operation.ADD:
        return value + operand
    if operation is Operation.SUBTRACT:
        return value - operand
    if operation is Operation.MULTIPLY:
        return value * operand
    if operation is Operation.DIVIDE:
        if operand == 0:
            return value
        return value / operand
    raise InvalidOperationError(f"Unsupported operation: {operation!r}")


@dataclass
class Command:
    """One applied operation, with enough state to undo and redo it."""
    operation: Operation
    operand: float
    previous_value: float = 0.0

    def execute(self, value: float) -> float:
        """Snapshot value and return the result of applying the operation to it."""
        self.previous_value = value
        return apply_operation(self.operation, value, self.operand)

    def undo(self) -> float:
        """Return the value captured when the command last executed."""
        return self.previous_value

    def describe(self) -> str:
        return f"{self.operation.value} {self.operand}"
