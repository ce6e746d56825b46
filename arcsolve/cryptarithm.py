"""Solve letter-addition puzzles such as SEND + MORE = MONEY."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from itertools import product
from typing import Optional

from arcsolve.csp import (
    Assignment,
    BinaryConstraint,
    Constraint,
    UnaryConstraint,
    Value,
    Variables,
    solution,
)

PAD = "#"


def _carry(index: int) -> str:
    return f"CARRY_{index}"


def _hidden(index: int) -> str:
    return f"HIDDEN_{index}"


@dataclass
class Puzzle:
    """The padded words of a puzzle together with its constraint problem."""

    addend0: str
    addend1: str
    total: str
    variables: Variables
    constraints: list[Constraint] = field(default_factory=list)


def _nonzero(entry) -> bool:
    return entry.value != 0


def _distinct(a, b) -> bool:
    if isinstance(a, Value) and isinstance(b, Value):
        return a.value != b.value
    return False


def _is_zero(entry) -> bool:
    return isinstance(entry, Value) and entry.value == 0


def _column_sum(c0: str, c1: str, c2: str, carry_in: str, carry_out: str):
    def holds(entry) -> bool:
        if not isinstance(entry, Value):
            h = entry.mapping
            return h.get(c0, 0) + h.get(c1, 0) + h.get(carry_in, 0) == h.get(
                c2, 0
            ) + 10 * h.get(carry_out, 0)
        return False

    return holds


def _matches(name: str):
    return lambda a, b: a.value == b.mapping[name]


def _domain_of(variables: Variables, symbol: str):
    domain = variables.get(symbol)
    if domain is None:
        raise ValueError(f"unknown symbol {symbol!r}")
    return domain


def build_puzzle(addend0, addend1, total) -> Puzzle:
    """Build the constraint problem for ``addend0 + addend1 = total``."""
    words = (addend0, addend1, total)
    if any(not word for word in words):
        raise ValueError("words must not be empty")

    variables = Variables()
    constraints: list[Constraint] = []

    letters = list(dict.fromkeys(ch for word in words for ch in word.upper()))
    for letter in letters:
        variables.insert(letter, range(10))

    for word in words:
        constraints.append(UnaryConstraint(word[0], _nonzero))

    for x in letters:
        for y in letters:
            if x != y:
                constraints.append(BinaryConstraint(x, y, _distinct))

    width = max(len(word) for word in words)
    padded = [word.rjust(width, PAD) for word in words]

    variables.insert(PAD, [0])
    for index in range(width):
        variables.insert(_carry(index), [0, 1])
    constraints.append(UnaryConstraint(_carry(width - 1), _is_zero))

    for index, (c0, c1, c2) in enumerate(zip(*padded)):
        carry_in = _carry(index)
        carry_out = PAD if index == 0 else _carry(index - 1)
        names = (c0, c1, c2, carry_in, carry_out)
        domains = [_domain_of(variables, name) for name in names]

        hidden_domain = []
        for combo in product(*domains):
            mapping = {}
            for name, entry in zip(names, combo):
                mapping[name] = entry.value
            hidden_domain.append(mapping)

        h_name = _hidden(index)
        variables.insert_hidden(h_name, hidden_domain)
        constraints.append(UnaryConstraint(h_name, _column_sum(*names)))
        for name in names:
            constraints.append(BinaryConstraint(name, h_name, _matches(name)))

    return Puzzle(padded[0], padded[1], padded[2], variables, constraints)


def solve(addend0, addend1, total) -> Optional[Assignment]:
    """Return a full assignment solving the puzzle, or None."""
    puzzle = build_puzzle(addend0, addend1, total)
    return solution(puzzle.variables, puzzle.constraints)


def letter_values(assignment) -> dict[str, int]:
    """The digit given to each letter, without carries, hidden or padding."""
    return {
        name: entry.value
        for name, entry in assignment.items()
        if "CARRY" not in name and "HIDDEN" not in name and name != PAD
    }


def render_equation(puzzle, assignment) -> str:
    """The puzzle with every letter replaced by its digit."""

    def digits(word: str) -> str:
        return "".join(str(assignment[ch].value) for ch in word if ch != PAD)

    return f"{digits(puzzle.addend0)} + {digits(puzzle.addend1)} = {digits(puzzle.total)}"


def _format_values(values: dict[str, int]) -> str:
    return "[" + ", ".join(f'("{k}", {v})' for k, v in values.items()) + "]"


_MISSING = (
    "Missing first input argument",
    "Missing second input argument",
    "Missing output argument",
)


def main(argv=None) -> int:
    """Solve the puzzle given as two addends and a total on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    for position, message in enumerate(_MISSING):
        if len(args) <= position:
            raise SystemExit(message)
    try:
        puzzle = build_puzzle(args[0], args[1], args[2])
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    assignment = solution(puzzle.variables, puzzle.constraints)
    if assignment is None:
        print("No Results")
    else:
        print(_format_values(letter_values(assignment)))
        print(render_equation(puzzle, assignment))
    return 0


if __name__ == "__main__":
    sys.exit(main())