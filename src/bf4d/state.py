from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .locator import Locator

# Bound 16 -> 65536 cells; beyond this the cube grows fast (bound 64 -> ~16.7M).
LARGE_CUBE_CELLS = 16 ** 4


def cube_cells(count: int) -> int:
    return int(count) ** 4


@dataclass
class MachineState:
    count: int
    memory: np.ndarray
    locator: Locator

    @classmethod
    def create(cls, count: int) -> 'MachineState':
        locator = Locator(count)
        memory = np.zeros((count, count, count, count), dtype=np.uint8)
        return cls(count=locator.count, memory=memory, locator=locator)

    @property
    def cell(self) -> int:
        return int(self.memory[self.locator.position])

    @cell.setter
    def cell(self, value: int) -> None:
        self.memory[self.locator.position] = value & 0xFF

    def is_blank(self) -> bool:
        """True when every cell of the cube is zero."""
        return not self.memory.any()
