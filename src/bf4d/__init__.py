from .api import RunOptions, RunResult, parse_string, run_file, run_string
from .errors import (
    BF4DError,
    InputExhaustedError,
    LoopError,
    LoopSide,
    MovementError,
    NestingLimitError,
)
from .interpreter import Interpreter
from .lexer import Token, tokenize
from .locator import Direction, Locator
from .parser import Instruction, Loop, Op, emit, parse
from .state import MachineState

__all__ = [
    'tokenize',
    'Token',
    'parse',
    'emit',
    'Op',
    'Loop',
    'Instruction',
    'Locator',
    'Direction',
    'MachineState',
    'Interpreter',
    'BF4DError',
    'LoopError',
    'LoopSide',
    'MovementError',
    'NestingLimitError',
    'InputExhaustedError',
    'RunOptions',
    'RunResult',
    'parse_string',
    'run_string',
    'run_file',
]
