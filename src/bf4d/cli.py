from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .errors import InputExhaustedError, LoopError, MovementError, NestingLimitError
from .interpreter import Interpreter
from .lexer import tokenize
from .parser import DEFAULT_MAX_DEPTH, HARD_MAX_DEPTH, emit, parse
from .state import LARGE_CUBE_CELLS, MachineState, cube_cells

EXIT_OK = 0
EXIT_STRUCTURE = 1
EXIT_MOVEMENT = 3
EXIT_INPUT = 4
EXIT_SOURCE = 5
EXIT_MEMORY = 6


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bf4d",
        description="Interpreter for Brainfuck on a four-dimensional hypercube of byte cells.",
    )
    parser.add_argument("-f", "--file", required=True, help="Program source file")
    parser.add_argument(
        "-c", "--count", type=int, default=8,
        help="Side length of the hypercube (default 8). Memory is count**4 bytes.",
    )
    parser.add_argument(
        "--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
        help=f"Loop nesting limit, 1..{HARD_MAX_DEPTH} (default {DEFAULT_MAX_DEPTH})",
    )
    parser.add_argument("--show-tokens", action="store_true", help="Print the token list to stderr")
    parser.add_argument(
        "--show-instructions", action="store_true",
        help="Print the parsed program as canonical source to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error(f"--count must be at least 1, got {args.count}")
    if not 1 <= args.max_depth <= HARD_MAX_DEPTH:
        parser.error(f"--max-depth must be between 1 and {HARD_MAX_DEPTH}, got {args.max_depth}")

    try:
        source = Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"ERROR: Couldn't read {args.file}: {e}", file=sys.stderr)
        return EXIT_SOURCE

    cells = cube_cells(args.count)
    if cells > LARGE_CUBE_CELLS:
        print(
            f"WARNING: a hypercube of side {args.count} holds {cells} cells ({cells} bytes of memory)",
            file=sys.stderr,
        )

    tokens = tokenize(source)
    if args.show_tokens:
        print(' '.join(t.value for t in tokens), file=sys.stderr)

    try:
        instructions = parse(tokens, max_depth=args.max_depth)
    except (LoopError, NestingLimitError) as e:
        print(e, file=sys.stderr)
        return EXIT_STRUCTURE

    if args.show_instructions:
        print(emit(instructions), file=sys.stderr)

    try:
        state = MachineState.create(args.count)
    except (MemoryError, ValueError) as e:
        print(f"ERROR: Couldn't allocate a hypercube of side {args.count}: {e}", file=sys.stderr)
        return EXIT_MEMORY

    try:
        Interpreter(state).run(instructions)
    except MovementError as e:
        sys.stdout.flush()
        print(e, file=sys.stderr)
        return EXIT_MOVEMENT
    except InputExhaustedError as e:
        sys.stdout.flush()
        print(e, file=sys.stderr)
        return EXIT_INPUT

    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
