from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, TextIO, Tuple

from .interpreter import Interpreter
from .lexer import tokenize
from .parser import DEFAULT_MAX_DEPTH, Instruction, parse
from .state import MachineState


@dataclass(frozen=True)
class RunOptions:
    count: int = 8
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass(frozen=True)
class RunResult:
    state: MachineState
    instructions: Tuple[Instruction, ...]


def parse_string(source: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> List[Instruction]:
    return parse(tokenize(source), max_depth=max_depth)


def run_string(
    source: str,
    *,
    options: Optional[RunOptions] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> RunResult:
    opts = RunOptions() if options is None else options
    # Parse errors surface before the cube is allocated or anything runs.
    instructions = parse_string(source, max_depth=opts.max_depth)
    state = MachineState.create(opts.count)
    Interpreter(state, stdin=stdin, stdout=stdout).run(instructions)
    return RunResult(state=state, instructions=tuple(instructions))


def run_file(
    path: str | Path,
    *,
    options: Optional[RunOptions] = None,
    encoding: str = "utf-8",
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[TextIO] = None,
) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), options=options, stdin=stdin, stdout=stdout)
