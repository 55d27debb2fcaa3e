"""Typed coordinates into the round/theme/question tree.

Indices are plain values: they are never validated against a package until a
tree operation uses them, and they go stale whenever an ancestor sequence is
edited. Re-check with ``PackageTree.contains_node`` after structural edits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True, order=True)
class RoundIdx:
    """Position of a Round inside its Package."""

    index: int

    @classmethod
    def coerce(cls, value: RoundIdx | int) -> RoundIdx:
        if isinstance(value, RoundIdx):
            return value
        return cls(value)

    def theme(self, index: int) -> ThemeIdx:
        """Theme at ``index`` inside this round."""
        return ThemeIdx(round_index=self.index, index=index)

    def next(self) -> Self:
        return type(self)(index=self.index + 1)

    def __str__(self) -> str:
        return f"[{self.index}]"


@dataclass(frozen=True, order=True)
class ThemeIdx:
    """Position of a Theme: ``(round_index, index)``."""

    round_index: int
    index: int

    @classmethod
    def coerce(cls, value: ThemeIdx | tuple[int, int]) -> ThemeIdx:
        if isinstance(value, ThemeIdx):
            return value
        round_index, index = value
        return cls(round_index=round_index, index=index)

    def parent(self) -> RoundIdx:
        return RoundIdx(index=self.round_index)

    def question(self, index: int) -> QuestionIdx:
        """Question at ``index`` inside this theme."""
        return QuestionIdx(round_index=self.round_index, theme_index=self.index, index=index)

    def next(self) -> Self:
        return type(self)(round_index=self.round_index, index=self.index + 1)

    def __str__(self) -> str:
        return f"[{self.round_index} > {self.index}]"


@dataclass(frozen=True, order=True)
class QuestionIdx:
    """Position of a Question: ``(round_index, theme_index, index)``."""

    round_index: int
    theme_index: int
    index: int

    @classmethod
    def coerce(cls, value: QuestionIdx | tuple[int, int, int]) -> QuestionIdx:
        if isinstance(value, QuestionIdx):
            return value
        round_index, theme_index, index = value
        return cls(round_index=round_index, theme_index=theme_index, index=index)

    def parent(self) -> ThemeIdx:
        return ThemeIdx(round_index=self.round_index, index=self.theme_index)

    def next(self) -> Self:
        return type(self)(
            round_index=self.round_index, theme_index=self.theme_index, index=self.index + 1
        )

    def __str__(self) -> str:
        return f"[{self.round_index} > {self.theme_index} > {self.index}]"


NodeIdx = RoundIdx | ThemeIdx | QuestionIdx

_DEPTH: dict[type, int] = {RoundIdx: 0, ThemeIdx: 1, QuestionIdx: 2}


@dataclass(frozen=True)
class PackageNode:
    """A Round, Theme or Question addressed by its typed index.

    Closed union over exactly three cases; consumers dispatch on ``idx``
    with ``match``. Ordering puts every Round before every Theme before
    every Question, then compares positions lexicographically.

    Example:
        >>> node = PackageNode.from_indices(0, 2, 1)
        >>> node.idx
        QuestionIdx(round_index=0, theme_index=2, index=1)
        >>> node.parent()
        PackageNode(idx=ThemeIdx(round_index=0, index=2))
    """

    idx: NodeIdx

    @classmethod
    def from_indices(cls, *indices: int) -> PackageNode:
        """Build a node from one, two or three raw integers."""
        match indices:
            case (index,):
                return cls(RoundIdx(index))
            case (round_index, index):
                return cls(ThemeIdx(round_index, index))
            case (round_index, theme_index, index):
                return cls(QuestionIdx(round_index, theme_index, index))
            case _:
                raise ValueError(f"Expected 1 to 3 indices, got {len(indices)}")

    def parent(self) -> PackageNode | None:
        """Parent node, or None for a round."""
        match self.idx:
            case RoundIdx():
                return None
            case ThemeIdx() | QuestionIdx():
                return PackageNode(self.idx.parent())

    def index(self) -> int:
        """Position of the node within its own parent."""
        return self.idx.index

    @property
    def depth(self) -> int:
        return _DEPTH[type(self.idx)]

    def _sort_key(self) -> tuple[int, tuple[int, ...]]:
        match self.idx:
            case RoundIdx(index=index):
                return 0, (index,)
            case ThemeIdx(round_index=round_index, index=index):
                return 1, (round_index, index)
            case QuestionIdx(round_index=round_index, theme_index=theme_index, index=index):
                return 2, (round_index, theme_index, index)

    def __lt__(self, other: PackageNode) -> bool:
        if not isinstance(other, PackageNode):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: PackageNode) -> bool:
        if not isinstance(other, PackageNode):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: PackageNode) -> bool:
        if not isinstance(other, PackageNode):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: PackageNode) -> bool:
        if not isinstance(other, PackageNode):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        return str(self.idx)
