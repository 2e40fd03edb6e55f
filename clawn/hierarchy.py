"""Dotted scope paths and the name mangling built on them."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_SEPARATOR = "/"
ROOT_NAME = "[GLOBAL]"


@dataclass(frozen=True, order=True)
class Hierarchy:
    """A scope path such as ``[GLOBAL]/module/function``.

    Two hierarchies are equal, ordered and hashed by their full text.
    """

    text: str
    separator: str = field(default=DEFAULT_SEPARATOR, compare=False)

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError("separator must be a single character")

    @classmethod
    def parse(cls, name: str, separator: str = DEFAULT_SEPARATOR) -> "Hierarchy":
        """Build a hierarchy from its textual form."""
        return cls(name, separator)

    @classmethod
    def root(cls) -> "Hierarchy":
        """The global scope."""
        return cls(ROOT_NAME)

    @property
    def names(self) -> tuple[str, ...]:
        """The components of the path, outermost first."""
        return tuple(self.text.split(self.separator))

    def __str__(self) -> str:
        return self.text

    def appended(self, name: str) -> "Hierarchy":
        """A new hierarchy one level deeper, ending in ``name``."""
        return Hierarchy(self.text + self.separator + name, self.separator)

    def popped_back(self) -> "Hierarchy":
        """A new hierarchy with the innermost component removed.

        A hierarchy with a single component has nothing to pop and is
        returned unchanged.
        """
        names = self.names
        if len(names) == 1:
            return Hierarchy(self.text, self.separator)
        cut = len(self.text) - len(self.separator) - len(names[-1])
        return Hierarchy(self.text[:cut], self.separator)

    def front(self) -> str:
        """The outermost component."""
        return self.names[0]

    def back(self) -> str:
        """The innermost component."""
        return self.names[-1]

    def is_deeper_than(self, other: "Hierarchy") -> bool:
        """True when ``other`` is this hierarchy or one of its ancestors."""
        mine, theirs = self.names, other.names
        return len(mine) >= len(theirs) and mine[: len(theirs)] == theirs

    def is_shallower_than(self, other: "Hierarchy") -> bool:
        """True when this hierarchy is ``other`` or one of its ancestors."""
        return other.is_deeper_than(self)

    def accessible_hierarchies(self) -> list["Hierarchy"]:
        """Every hierarchy visible from here, outermost first, ending with self."""
        result = []
        prefix: list[str] = []
        for name in self.names:
            prefix.append(name)
            result.append(Hierarchy(self.separator.join(prefix), self.separator))
        return result


def mangle(name: str, hierarchy: Hierarchy) -> str:
    """Qualify ``name`` with the scope it lives in."""
    return hierarchy.text + hierarchy.separator + name


def demangle(mangled_name: str) -> tuple[str, Hierarchy]:
    """Split a mangled name into the bare name and its scope."""
    hierarchy = Hierarchy.parse(mangled_name)
    return hierarchy.back(), hierarchy.popped_back()