"""Source positions attached to compiler nodes."""

from __future__ import annotations

from dataclasses import dataclass

from clawn.hierarchy import Hierarchy


@dataclass(frozen=True)
class TokenInfo:
    """Where a token sits in its line and what it reads."""

    line_number: int
    index_in_line: int
    token_string: str


@dataclass(frozen=True)
class Location:
    """A token together with the file and scope it was found in."""

    filename: str
    token_info: TokenInfo
    scope: Hierarchy

    def key(self) -> str:
        """A string that identifies this location uniquely."""
        info = self.token_info
        return (
            f"{self.scope.text}{self.filename}*"
            f"{info.line_number}:{info.index_in_line}{info.token_string}"
        )

    def __hash__(self) -> int:
        return hash(self.key())