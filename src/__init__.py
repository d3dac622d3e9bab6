"""
undocalc - arithmetic accumulator with unlimited undo/redo.

Every operation is recorded as a command on an undo stack. Undo restores
the value the command captured before it ran; redo re-applies it forward.
Executing a new operation discards anything waiting to be redone.

Usage (programmatic):
    from undocalc import Accumulator, Operation

    acc = Accumulator()
    acc.execute(Operation.ADD, 8)
    acc.execute(Operation.DIVIDE, 2)
    acc.undo()
    acc.current_value()  # 8.0

Usage (CLI):
    undocalc add 8 subtract 3 multiply 4 divide 2 undo redo
    undocalc --max-history 10 + 1 + 2 undo
"""

from .models import Command, InvalidOperationError, Operation, apply_operation
from .accumulator import Accumulator, create_accumulator

__all__ = [
    # Models
    "Operation",
    "Command",
    "InvalidOperationError",
    "apply_operation",
    # Accumulator
    "Accumulator",
    "create_accumulator",
]
