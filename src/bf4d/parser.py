from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Tuple, Union

from .errors import LoopSide, make_loop_error, make_nesting_error
from .lexer import Token

DEFAULT_MAX_DEPTH = 256
# Each nesting level costs a few Python frames in the parser and the interpreter.
HARD_MAX_DEPTH = 300


# ---------------- Instruction tree ----------------
class Op(Enum):
    INCREMENT_X = 'IncrementX'
    DECREMENT_X = 'DecrementX'
    INCREMENT_Y = 'IncrementY'
    DECREMENT_Y = 'DecrementY'
    INCREMENT_Z = 'IncrementZ'
    DECREMENT_Z = 'DecrementZ'
    INCREMENT_W = 'IncrementW'
    DECREMENT_W = 'DecrementW'
    INCREMENT = 'Increment'
    DECREMENT = 'Decrement'
    WRITE = 'Write'
    READ = 'Read'


@dataclass(frozen=True)
class Loop:
    body: Tuple["Instruction", ...]


Instruction = Union[Op, Loop]

_TOKEN_OPS: Dict[Token, Op] = {
    Token.INCREMENT_X: Op.INCREMENT_X,
    Token.DECREMENT_X: Op.DECREMENT_X,
    Token.INCREMENT_Y: Op.INCREMENT_Y,
    Token.DECREMENT_Y: Op.DECREMENT_Y,
    Token.INCREMENT_Z: Op.INCREMENT_Z,
    Token.DECREMENT_Z: Op.DECREMENT_Z,
    Token.INCREMENT_W: Op.INCREMENT_W,
    Token.DECREMENT_W: Op.DECREMENT_W,
    Token.INCREMENT: Op.INCREMENT,
    Token.DECREMENT: Op.DECREMENT,
    Token.WRITE: Op.WRITE,
    Token.READ: Op.READ,
}

_OP_SYMBOLS: Dict[Op, str] = {
    Op.INCREMENT: '+',
    Op.DECREMENT: '-',
    Op.INCREMENT_X: '>',
    Op.DECREMENT_X: '<',
    Op.INCREMENT_Y: '^',
    Op.DECREMENT_Y: 'v',
    Op.INCREMENT_Z: '*',
    Op.DECREMENT_Z: 'o',
    Op.INCREMENT_W: '@',
    Op.DECREMENT_W: '?',
    Op.WRITE: '.',
    Op.READ: ',',
}


# ---------------- Parser: tokens -> tree ----------------
def parse(tokens: Sequence[Token], *, max_depth: int = DEFAULT_MAX_DEPTH) -> List[Instruction]:
    """
    Build the instruction tree for a token sequence.

    Brackets are matched with a depth counter. Once the bracket that opened
    a top-level loop is closed, the tokens strictly between the pair are
    parsed again on their own and wrapped in a Loop.

    Raises:
        LoopError: a "]" with no open loop (Beginning side) or a "[" that
            is never closed (Ending side). The index is the position of the
            offending bracket in ``tokens``.
        NestingLimitError: loops nested deeper than ``max_depth``.
    """
    if max_depth < 1 or max_depth > HARD_MAX_DEPTH:
        raise ValueError(f"max_depth must be between 1 and {HARD_MAX_DEPTH}, got {max_depth}")
    return _parse(list(tokens), offset=0, level=0, max_depth=max_depth)


def _parse(tokens: List[Token], *, offset: int, level: int, max_depth: int) -> List[Instruction]:
    instructions: List[Instruction] = []
    depth = 0
    loop_start = 0

    for idx, token in enumerate(tokens):
        if depth == 0:
            if token is Token.LOOP_BEGIN:
                loop_start = idx
                depth += 1
            elif token is Token.LOOP_END:
                raise make_loop_error(side=LoopSide.BEGINNING, index=offset + idx)
            else:
                instructions.append(_TOKEN_OPS[token])
            continue

        if token is Token.LOOP_BEGIN:
            depth += 1
        elif token is Token.LOOP_END:
            depth -= 1
            if depth == 0:
                if level + 1 > max_depth:
                    raise make_nesting_error(index=offset + loop_start, limit=max_depth)
                body = _parse(
                    tokens[loop_start + 1:idx],
                    offset=offset + loop_start + 1,
                    level=level + 1,
                    max_depth=max_depth,
                )
                instructions.append(Loop(tuple(body)))

    if depth != 0:
        raise make_loop_error(side=LoopSide.ENDING, index=offset + loop_start)

    return instructions


# ---------------- Emit + inspection ----------------
def emit(instructions: Sequence[Instruction]) -> str:
    """Render a tree back to canonical source."""
    out: List[str] = []
    for ins in instructions:
        if isinstance(ins, Loop):
            out.append('[' + emit(ins.body) + ']')
        else:
            out.append(_OP_SYMBOLS[ins])
    return ''.join(out)


def nesting_depth(instructions: Sequence[Instruction]) -> int:
    depth = 0
    for ins in instructions:
        if isinstance(ins, Loop):
            depth = max(depth, 1 + nesting_depth(ins.body))
    return depth
