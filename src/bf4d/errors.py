from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .locator import Direction


class LoopSide(Enum):
    """The half of a bracket pair that is missing."""

    BEGINNING = 'Beginning'
    ENDING = 'Ending'


def _hint_for(kind: str, *, side: Optional[LoopSide] = None) -> Optional[str]:
    if kind == 'loop':
        if side is LoopSide.BEGINNING:
            return 'Remove the stray "]" or add a "[" before it.'
        if side is LoopSide.ENDING:
            return 'Close the loop with a matching "]".'
        return None
    if kind == 'move':
        return 'Every axis runs from 0 to count - 1. Try a larger --count.'
    if kind == 'nesting':
        return 'Flatten the program or raise --max-depth.'
    if kind == 'input':
        return 'The program reads more characters than stdin provides.'
    return None


def _with_hint(message: str, hint: Optional[str]) -> str:
    return f"{message}\nHint: {hint}" if hint else message


@dataclass
class BF4DError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class LoopError(BF4DError):
    side: LoopSide
    index: int


@dataclass
class NestingLimitError(BF4DError):
    index: int
    limit: int


@dataclass
class MovementError(BF4DError):
    direction: 'Direction'


@dataclass
class InputExhaustedError(BF4DError):
    pass


def make_loop_error(*, side: LoopSide, index: int) -> LoopError:
    if side is LoopSide.BEGINNING:
        message = f"ERROR: The loop ending at instruction '{index}' has no beginning."
    else:
        message = f"ERROR: The loop starting at instruction '{index}' has no ending."
    return LoopError(
        message=_with_hint(message, _hint_for('loop', side=side)),
        side=side,
        index=index,
    )


def make_nesting_error(*, index: int, limit: int) -> NestingLimitError:
    message = f"ERROR: The loop starting at instruction '{index}' is nested deeper than {limit} levels."
    return NestingLimitError(
        message=_with_hint(message, _hint_for('nesting')),
        index=index,
        limit=limit,
    )


def make_movement_error(*, direction: 'Direction') -> MovementError:
    message = f"ERROR: Fell off the hypercube, in the {direction.label} direction"
    return MovementError(
        message=_with_hint(message, _hint_for('move')),
        direction=direction,
    )


def make_input_error() -> InputExhaustedError:
    return InputExhaustedError(
        message=_with_hint('ERROR: Failed to read data.', _hint_for('input')),
    )
