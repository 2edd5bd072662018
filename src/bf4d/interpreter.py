from __future__ import annotations

import sys
from typing import BinaryIO, Dict, Optional, Sequence, TextIO

from .errors import make_input_error
from .locator import Direction
from .parser import Instruction, Loop, Op
from .state import MachineState

_MOVES: Dict[Op, Direction] = {
    Op.INCREMENT_X: Direction.X_POS,
    Op.DECREMENT_X: Direction.X_NEG,
    Op.INCREMENT_Y: Direction.Y_POS,
    Op.DECREMENT_Y: Direction.Y_NEG,
    Op.INCREMENT_Z: Direction.Z_POS,
    Op.DECREMENT_Z: Direction.Z_NEG,
    Op.INCREMENT_W: Direction.W_POS,
    Op.DECREMENT_W: Direction.W_NEG,
}


class Interpreter:
    """
    Tree-walking executor for the hypercube language.

    Loops follow the global-nonzero rule: a loop body repeats while any
    cell of the whole cube is non-zero, checked before every repetition.
    A MovementError raised anywhere aborts the entire run; output written
    before the failure is kept.
    """

    def __init__(self, state: MachineState, stdin: Optional[BinaryIO] = None, stdout: Optional[TextIO] = None):
        self.state = state
        self.stdin = stdin
        self.stdout = stdout

    def run(self, instructions: Sequence[Instruction]) -> None:
        for ins in instructions:
            self._execute(ins)

    def _execute(self, ins: Instruction) -> None:
        state = self.state

        if isinstance(ins, Loop):
            while not state.is_blank():
                self.run(ins.body)
            return

        direction = _MOVES.get(ins)
        if direction is not None:
            state.locator.move(direction, 1)
        elif ins is Op.INCREMENT:
            state.cell = (state.cell + 1) & 0xFF
        elif ins is Op.DECREMENT:
            state.cell = (state.cell - 1) & 0xFF
        elif ins is Op.WRITE:
            self._write(state.cell)
        elif ins is Op.READ:
            state.cell = self._read()
        else:
            raise ValueError(f"Unknown instruction: {ins!r}")

    def _write(self, value: int) -> None:
        out = self.stdout if self.stdout is not None else sys.stdout
        out.write(chr(value))
        out.flush()

    def _read(self) -> int:
        # One byte per read; a multibyte character takes several reads.
        src = self.stdin if self.stdin is not None else sys.stdin.buffer
        data = src.read(1)
        if not data:
            raise make_input_error()
        return data[0]
