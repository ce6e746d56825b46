# arcsolve

A small constraint-satisfaction solver built on arc consistency (AC-3 style
domain filtering) combined with backtracking search, plus a solver for
cryptarithms: letter addition puzzles such as `SEND + MORE = MONEY`.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Command line

Give the two addends and the sum as words, in upper case:

```
arcsolve SEND MORE MONEY
```

The same command is available as `python -m arcsolve.cryptarithm`.

The command prints the digit chosen for each letter, in the order the letters
first appear in the words, then the equation with digits in place of the
letters:

```
[("S", 9), ("E", 5), ("N", 6), ("D", 7), ("M", 1), ("O", 0), ("R", 8), ("Y", 2)]
9567 + 1085 = 10652
```

If the puzzle has no solution it prints `No Results`.

Distinct letters take distinct digits, the first letter of each word is never
zero, and the sum may not carry beyond the longest word.

If fewer than three words are given, the command exits with
`Missing first input argument`, `Missing second input argument` or
`Missing output argument`. An empty word is rejected with
`words must not be empty`.

## Library use

### Cryptarithms

`arcsolve.cryptarithm` provides:

- `build_puzzle(addend0, addend1, total)` returns a `Puzzle`: the three words
  right-aligned and padded with `#`, together with the `Variables` and the
  list of constraints that describe the addition. Letters become variables
  with digits 0 to 9, each column gets a carry variable (`CARRY_<i>`) and a
  hidden variable (`HIDDEN_<i>`) tying its letters and carries together.
  An empty word raises `ValueError`.
- `solve(addend0, addend1, total)` builds the puzzle and returns a full
  assignment, or `None` when there is no solution.
- `letter_values(assignment)` returns a dict from each letter to its digit,
  leaving out carries, hidden variables and padding.
- `render_equation(puzzle, assignment)` returns the equation as digits, e.g.
  `"9567 + 1085 = 10652"`.
- `main(argv=None)` is the command-line entry point.

```python
from arcsolve.cryptarithm import build_puzzle, solve, letter_values, render_equation

puzzle = build_puzzle("SEND", "MORE", "MONEY")
assignment = solve("SEND", "MORE", "MONEY")
if assignment is not None:
    print(letter_values(assignment))
    print(render_equation(puzzle, assignment))
```

### General constraint problems

`arcsolve.csp` provides the solver itself:

- `Variables` holds a domain, a list of candidate entries, for each named
  variable. `insert(key, values)` adds a plain variable, whose entries are
  wrapped as `Value`; `insert_hidden(key, values)` adds a hidden variable,
  whose entries are mappings from names to values wrapped as `Hidden` and
  which serve to express constraints over more than two variables.
  `get(key)` returns a domain or `None`, `set_domain(key, domain)` replaces
  the domain of an existing variable (`KeyError` otherwise), `names()` lists
  all variables in insertion order, `items()` and `hidden_items()` iterate
  over plain and hidden variables, `values()` and `hidden_values()` return
  them with their entries unwrapped, and `copy()` returns an independent copy.
  `in` and `len()` work on it as well.
- `UnaryConstraint(variable, predicate)` and
  `BinaryConstraint(first, second, predicate)` take a predicate over the
  wrapped entries of one or two variables.
- `filter_domain(variables, constraints)` prunes the domains in place until
  they are arc consistent. A constraint naming an unknown variable raises
  `KeyError`.
- `solution(variables, constraints)` searches with backtracking over the
  variables in insertion order, filtering a copy of the domains after each
  choice. It returns a dict from each assigned name to its chosen `Value` or
  `Hidden`, or `None` if there is none. The variables passed in are left
  unchanged.

```python
from arcsolve.csp import Variables, UnaryConstraint, BinaryConstraint, solution

variables = Variables()
variables.insert("x", [1, 2, 3])
variables.insert("y", [1, 2, 3])

constraints = [
    UnaryConstraint("x", lambda v: v.value > 1),
    BinaryConstraint("x", "y", lambda a, b: a.value < b.value),
]

result = solution(variables, constraints)
# {"x": Value(value=2), "y": Value(value=3)}
```

## Limits

The puzzle solver handles only the sum of two words. It does not handle
subtraction, multiplication or more than two addends, and it reports only the
first solution it finds, not all of them.

## Running the tests

```
pip install .[test]
pytest
```