"""High-level intermediate representation: blocks, control flow and operators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from clawn.hir import Node


@dataclass(eq=False)
class Block(Node):
    """A sequence of nodes evaluated in order."""

    nodes: list[Node] = field(default_factory=list)

    def children(self) -> list[Node]:
        return list(self.nodes)


@dataclass(eq=False)
class Match(Node):
    """Selecting a branch by the tag of ``target``.

    Each pattern pairs a tag name with the expression evaluated for it;
    ``default_case`` runs when no tag matches.
    """

    target: Node
    patterns: list[tuple[str, Node]] = field(default_factory=list)
    default_case: Optional[Node] = None

    def children(self) -> list[Node]:
        result = [self.target, *(expression for _, expression in self.patterns)]
        if self.default_case is not None:
            result.append(self.default_case)
        return result


@dataclass(eq=False)
class If(Node):
    """A conditional with an optional else branch."""

    condition: Node
    body: Node
    else_body: Optional[Node] = None

    def children(self) -> list[Node]:
        if self.else_body is not None:
            return [self.condition, self.body, self.else_body]
        return [self.condition, self.body]


@dataclass(eq=False)
class Loop(Node):
    """Repeating ``body`` while ``condition`` holds."""

    condition: Node
    body: Node

    def children(self) -> list[Node]:
        return [self.condition, self.body]


class OperatorKind(Enum):
    """The binary operators of the language."""

    ADDITION = auto()
    SUBTRACTION = auto()
    MULTIPLICATION = auto()
    DIVISION = auto()
    GREATER_THAN = auto()
    GREATER_THAN_OR_EQUAL = auto()
    LESS_THAN = auto()
    LESS_THAN_OR_EQUAL = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()
    AND = auto()
    OR = auto()


@dataclass(eq=False)
class BinaryExpression(Node):
    """``targets[0] <kind> targets[1]``."""

    targets: tuple[Node, Node]
    kind: OperatorKind

    def children(self) -> list[Node]:
        first, second = self.targets
        return [first, second]


@dataclass(eq=False)
class SetResult(Node):
    """Making ``expression`` the value of the enclosing block."""

    expression: Node

    def children(self) -> list[Node]:
        return [self.expression]


@dataclass(eq=False)
class Return(Node):
    """Returning ``expression`` from the enclosing function."""

    expression: Node

    def children(self) -> list[Node]:
        return [self.expression]