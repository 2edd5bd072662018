from __future__ import annotations

from enum import Enum
from typing import Dict, List


class Token(Enum):
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
    LOOP_BEGIN = 'LoopBegin'
    LOOP_END = 'LoopEnd'


SYMBOLS: Dict[str, Token] = {
    '+': Token.INCREMENT,
    '-': Token.DECREMENT,
    '>': Token.INCREMENT_X,
    '<': Token.DECREMENT_X,
    '^': Token.INCREMENT_Y,
    'V': Token.DECREMENT_Y,
    'v': Token.DECREMENT_Y,
    '*': Token.INCREMENT_Z,
    'O': Token.DECREMENT_Z,
    'o': Token.DECREMENT_Z,
    '@': Token.INCREMENT_W,
    '?': Token.DECREMENT_W,
    '.': Token.WRITE,
    ',': Token.READ,
    '[': Token.LOOP_BEGIN,
    ']': Token.LOOP_END,
}


def tokenize(source: str) -> List[Token]:
    # Characters outside SYMBOLS are comments.
    return [SYMBOLS[ch] for ch in source if ch in SYMBOLS]
