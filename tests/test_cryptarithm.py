import pytest

from arcsolve.csp import Value
from arcsolve.cryptarithm import (
    build_puzzle,
    letter_values,
    main,
    render_equation,
    solve,
)


def test_build_puzzle_pads_and_adds_helpers():
    puzzle = build_puzzle("TO", "GO", "OUT")
    assert puzzle.addend0 == "#TO"
    assert puzzle.addend1 == "#GO"
    assert puzzle.total == "OUT"
    assert puzzle.variables.get("#") == [Value(0)]
    for index in range(3):
        assert puzzle.variables.get(f"CARRY_{index}") == [Value(0), Value(1)]
    hidden_names = [name for name, _ in puzzle.variables.hidden_items()]
    assert hidden_names == ["HIDDEN_0", "HIDDEN_1", "HIDDEN_2"]


def test_build_puzzle_rejects_empty_word():
    with pytest.raises(ValueError):
        build_puzzle("", "A", "B")


def test_build_puzzle_rejects_lowercase_symbols():
    with pytest.raises(ValueError):
        build_puzzle("to", "go", "out")


def test_solve_single_digits_invariants():
    assignment = solve("A", "B", "C")
    assert assignment is not None
    digits = letter_values(assignment)
    assert set(digits) == {"A", "B", "C"}
    assert digits["A"] + digits["B"] == digits["C"]
    assert len(set(digits.values())) == 3
    assert all(value != 0 for value in digits.values())


def test_solve_known_puzzle():
    assignment = solve("TO", "GO", "OUT")
    assert assignment is not None
    assert letter_values(assignment) == {"T": 2, "O": 1, "G": 8, "U": 0}
    puzzle = build_puzzle("TO", "GO", "OUT")
    assert render_equation(puzzle, assignment) == "21 + 81 = 102"


def test_solve_unsolvable_returns_none():
    assert solve("A", "B", "A") is None


def test_letter_values_skips_helper_variables():
    assignment = {
        "A": Value(3),
        "#": Value(0),
        "CARRY_0": Value(1),
    }
    assert letter_values(assignment) == {"A": 3}


def test_main_prints_solution(capsys):
    assert main(["TO", "GO", "OUT"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[(")
    assert lines[1] == "21 + 81 = 102"


def test_main_reports_no_results(capsys):
    assert main(["A", "B", "A"]) == 0
    assert capsys.readouterr().out.strip() == "No Results"


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "Missing first input argument"),
        (["A"], "Missing second input argument"),
        (["A", "B"], "Missing output argument"),
    ],
)
def test_main_missing_arguments(argv, message):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == message