"""High-level intermediate representation: the core expression nodes."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from clawn.hierarchy import Hierarchy, demangle
from clawn.location import Location

_ids = itertools.count()


def _next_id() -> int:
    return next(_ids)


@dataclass(eq=False)
class Node(ABC):
    """Common part of every node: a unique id, a type and a source location.

    Nodes compare and hash by identity; ``id`` is unique per process.
    """

    type: Any
    location: Optional[Location]
    id: int = field(init=False, repr=False, default_factory=_next_id)

    @abstractmethod
    def children(self) -> list["Node"]:
        """The direct sub-nodes, in evaluation order."""

    def walk(self, functor: Callable[["Node"], Any]) -> None:
        """Call ``functor`` on this node and, recursively, on its descendants.

        A node's children are reported by the parent and again when each
        child walks itself, so every descendant is seen twice.
        """
        functor(self)
        for child in self.children():
            functor(child)
            child.walk(functor)


@dataclass(eq=False)
class Root(Node):
    """The top of a program: its top-level nodes in order."""

    program: list[Node] = field(default_factory=list)

    def children(self) -> list[Node]:
        return list(self.program)

    def insert(self, nodes: list[Node]) -> None:
        """Append ``nodes`` at the end of the program."""
        self.program.extend(nodes)


@dataclass(eq=False)
class Integer(Node):
    """An integer literal."""

    initial_value: int

    def children(self) -> list[Node]:
        return []


@dataclass(eq=False)
class Float(Node):
    """A floating-point literal."""

    initial_value: float

    def children(self) -> list[Node]:
        return []


@dataclass(eq=False)
class String(Node):
    """A string literal."""

    initial_value: str

    def children(self) -> list[Node]:
        return []


@dataclass(eq=False)
class Reference(Node):
    """Taking a reference to an expression."""

    refer_to: Node

    def children(self) -> list[Node]:
        return [self.refer_to]


@dataclass(eq=False)
class Dereference(Node):
    """Reading through a reference."""

    target: Node

    def children(self) -> list[Node]:
        return [self.target]


@dataclass(eq=False)
class List(Node):
    """A list literal."""

    initial_values: list[Node] = field(default_factory=list)

    def children(self) -> list[Node]:
        return list(self.initial_values)


@dataclass(eq=False)
class Variable(Node):
    """A use of a (mangled) variable name."""

    name: str

    def children(self) -> list[Node]:
        return []

    def is_global(self) -> bool:
        """True when the variable lives directly in the global scope."""
        return demangle(self.name)[1] == Hierarchy.root()


@dataclass(eq=False)
class Function(Node):
    """A function definition or, when ``is_declaration_only``, a declaration."""

    name: str
    body: Node
    is_declaration_only: bool = False

    def children(self) -> list[Node]:
        return [self.body]


@dataclass(eq=False)
class Assignment(Node):
    """``left_hand_side = right_hand_side``."""

    right_hand_side: Node
    left_hand_side: Node
    is_both_reference: bool = False

    def children(self) -> list[Node]:
        return [self.left_hand_side, self.right_hand_side]


@dataclass(eq=False)
class FunctionCall(Node):
    """Calling ``function_obj`` with ``arguments``."""

    function_obj: Node
    arguments: list[Node] = field(default_factory=list)

    def children(self) -> list[Node]:
        return [*self.arguments, self.function_obj]


@dataclass(eq=False)
class Argument(Node):
    """A named formal argument."""

    name: str

    def children(self) -> list[Node]:
        return []


@dataclass(eq=False)
class AccessElement(Node):
    """``left_hand_side.element_name``; an empty name reads a union's tag."""

    left_hand_side: Node
    element_name: str

    def children(self) -> list[Node]:
        return [self.left_hand_side]


@dataclass(eq=False)
class AccessList(Node):
    """``list[index]``."""

    list: Node
    index: Node

    def children(self) -> list[Node]:
        return [self.list, self.index]


@dataclass(eq=False)
class Construction(Node):
    """Building a structure from named member values."""

    arguments: list[tuple[str, Node]] = field(default_factory=list)

    def children(self) -> list[Node]:
        return [value for _, value in self.arguments]


@dataclass(eq=False)
class UnionConstruction(Node):
    """Building a union from a single tagged value."""

    argument: tuple[str, Node]

    def children(self) -> list[Node]:
        return [self.argument[1]]