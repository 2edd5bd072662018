from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from .errors import make_movement_error


AXES = ('x', 'y', 'z', 'w')


class Direction(Enum):
    X_POS = ('XPos', 0, 1)
    X_NEG = ('XNeg', 0, -1)
    Y_POS = ('YPos', 1, 1)
    Y_NEG = ('YNeg', 1, -1)
    Z_POS = ('ZPos', 2, 1)
    Z_NEG = ('ZNeg', 2, -1)
    W_POS = ('WPos', 3, 1)
    W_NEG = ('WNeg', 3, -1)

    def __init__(self, label: str, axis: int, sign: int):
        self.label = label
        self.axis = axis
        self.sign = sign


class Locator:
    """
    Current position inside the hypercube.

    The position is a 4-tuple (x, y, z, w) with every coordinate in
    [0, count). ``move`` is the only way to change it; a move that would
    leave the cube raises MovementError and leaves the position untouched.
    """

    def __init__(self, count: int):
        count = int(count)
        if count < 1:
            raise ValueError(f"Axis bound must be at least 1, got {count}")
        self.count = count
        self._coords: List[int] = [0, 0, 0, 0]

    @property
    def x(self) -> int:
        return self._coords[0]

    @property
    def y(self) -> int:
        return self._coords[1]

    @property
    def z(self) -> int:
        return self._coords[2]

    @property
    def w(self) -> int:
        return self._coords[3]

    @property
    def position(self) -> Tuple[int, int, int, int]:
        return tuple(self._coords)

    def move(self, direction: Direction, steps: int = 1) -> None:
        if steps < 0:
            raise ValueError(f"Move steps must be non-negative, got {steps}")

        current = self._coords[direction.axis]
        if direction.sign > 0:
            if current + steps >= self.count:
                raise make_movement_error(direction=direction)
            self._coords[direction.axis] = current + steps
        else:
            if current - steps < 0:
                raise make_movement_error(direction=direction)
            self._coords[direction.axis] = current - steps

    def __repr__(self) -> str:
        coords = ', '.join(f"{name}={value}" for name, value in zip(AXES, self._coords))
        return f"Locator({coords}, count={self.count})"
