"""Finite-domain constraint satisfaction with arc-consistency filtering."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class Value:
    """A plain entry of a variable's domain."""

    value: Any


@dataclass(frozen=True)
class Hidden:
    """An entry of a hidden variable's domain: names bound to values."""

    mapping: Mapping[str, Any]


Entry = Union[Value, Hidden]
Assignment = dict[str, Entry]


class Variables:
    """Named variables, each with a list of candidate entries."""

    def __init__(self):
        self._domains: dict[str, list[Entry]] = {}
        self._plain: set[str] = set()
        self._hidden: set[str] = set()

    def insert(self, key, values):
        """Add or replace a plain variable whose domain holds ``values``."""
        self._domains[key] = [Value(v) for v in values]
        self._plain.add(key)

    def insert_hidden(self, key, values):
        """Add or replace a hidden variable whose domain holds the given mappings."""
        self._domains[key] = [Hidden(dict(m)) for m in values]
        self._hidden.add(key)

    def items(self) -> Iterator[tuple[str, list[Entry]]]:
        """Yield ``(name, domain)`` for every plain variable."""
        return ((k, d) for k, d in self._domains.items() if k in self._plain)

    def hidden_items(self) -> Iterator[tuple[str, list[Entry]]]:
        """Yield ``(name, domain)`` for every hidden variable."""
        return ((k, d) for k, d in self._domains.items() if k in self._hidden)

    def values(self) -> list[tuple[str, list[Any]]]:
        """Plain variables with their domains unwrapped to raw values."""
        return [(k, [entry.value for entry in d]) for k, d in self.items()]

    def hidden_values(self) -> list[tuple[str, list[Mapping[str, Any]]]]:
        """Hidden variables with their domains unwrapped to mappings."""
        return [(k, [entry.mapping for entry in d]) for k, d in self.hidden_items()]

    def get(self, key) -> Optional[list[Entry]]:
        """The domain of ``key``, or None if there is no such variable."""
        return self._domains.get(key)

    def set_domain(self, key, domain):
        """Replace the domain of an existing variable."""
        if key not in self._domains:
            raise KeyError(key)
        self._domains[key] = list(domain)

    def names(self) -> list[str]:
        """Names of all variables, plain and hidden, in insertion order."""
        return list(self._domains)

    def copy(self) -> Variables:
        """A copy whose domains can be changed independently."""
        clone = Variables()
        clone._domains = {k: list(d) for k, d in self._domains.items()}
        clone._plain = set(self._plain)
        clone._hidden = set(self._hidden)
        return clone

    def __contains__(self, key) -> bool:
        return key in self._domains

    def __len__(self) -> int:
        return len(self._domains)


@dataclass(frozen=True)
class UnaryConstraint:
    """A predicate on the entries of one variable."""

    variable: str
    predicate: Callable[[Entry], bool]


@dataclass(frozen=True)
class BinaryConstraint:
    """A predicate relating the entries of two variables."""

    first: str
    second: str
    predicate: Callable[[Entry, Entry], bool]


Constraint = Union[UnaryConstraint, BinaryConstraint]


def _domain(variables: Variables, name: str) -> list[Entry]:
    domain = variables.get(name)
    if domain is None:
        raise KeyError(f"unknown variable {name!r}")
    return domain


def _revise(variables: Variables, arcs: Iterable[Constraint]) -> None:
    for arc in arcs:
        if isinstance(arc, BinaryConstraint):
            support = list(_domain(variables, arc.second))
            domain = _domain(variables, arc.first)
            pred = arc.predicate
            variables.set_domain(
                arc.first, [x for x in domain if any(pred(x, y) for y in support)]
            )
        else:
            domain = _domain(variables, arc.variable)
            variables.set_domain(arc.variable, [x for x in domain if arc.predicate(x)])


def _is_consistent(variables: Variables, constraints: Iterable[Constraint]) -> bool:
    for constraint in constraints:
        if isinstance(constraint, BinaryConstraint):
            first = variables.get(constraint.first)
            second = variables.get(constraint.second)
            if first is None or second is None:
                return False
            pred = constraint.predicate
            if any(all(not pred(x, y) for y in second) for x in first):
                return False
        else:
            domain = variables.get(constraint.variable)
            if domain is None:
                return False
            if any(not constraint.predicate(v) for v in domain):
                return False
    return True


def _flipped(predicate: Callable[[Entry, Entry], bool]) -> Callable[[Entry, Entry], bool]:
    return lambda b, a: predicate(a, b)


def _build_arcs(constraints: Iterable[Constraint]) -> list[Constraint]:
    arcs: list[Constraint] = []
    for constraint in constraints:
        arcs.append(constraint)
        if isinstance(constraint, BinaryConstraint):
            arcs.append(
                BinaryConstraint(
                    constraint.second, constraint.first, _flipped(constraint.predicate)
                )
            )
    return arcs


def filter_domain(variables, constraints):
    """Prune ``variables`` in place until every constraint is arc consistent."""
    constraints = list(constraints)
    arcs = _build_arcs(constraints)
    while True:
        _revise(variables, arcs)
        if _is_consistent(variables, constraints):
            break


def _is_solution(assignment: Assignment, constraints: Iterable[Constraint]) -> bool:
    for constraint in constraints:
        if isinstance(constraint, BinaryConstraint):
            if constraint.first not in assignment or constraint.second not in assignment:
                return False
            if not constraint.predicate(
                assignment[constraint.first], assignment[constraint.second]
            ):
                return False
        else:
            if constraint.variable not in assignment:
                return False
            if not constraint.predicate(assignment[constraint.variable]):
                return False
    return True


def _backtrack_filter(
    assignment: Assignment,
    variables: Variables,
    constraints: list[Constraint],
    keys: list[str],
    index: int,
) -> bool:
    if _is_solution(assignment, constraints):
        return True
    if index >= len(keys):
        return False
    key = keys[index]
    domain = variables.get(key)
    if domain is None:
        return False
    for entry in domain:
        assignment[key] = entry
        narrowed = variables.copy()
        narrowed.set_domain(key, [entry])
        filter_domain(narrowed, constraints)
        if _backtrack_filter(assignment, narrowed, constraints, keys, index + 1):
            return True
    return False


def solution(variables, constraints) -> Optional[Assignment]:
    """Search for an assignment satisfying every constraint, or None."""
    constraints = list(constraints)
    assignment: Assignment = {}
    if _backtrack_filter(assignment, variables, constraints, variables.names(), 0):
        return assignment
    return None