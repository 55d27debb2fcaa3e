"""Capability protocol for tree levels."""

from __future__ import annotations

from typing import Protocol, TypeVar

ChildT = TypeVar("ChildT")


class ChildContainer(Protocol[ChildT]):
    """Anything that exposes its ordered, mutable child sequence.

    ``Package`` exposes rounds, ``Round`` themes and ``Theme`` questions.
    The returned list is the live sequence, not a copy: the tree engine
    edits it in place.
    """

    def children(self) -> list[ChildT]:
        """Return the live child sequence."""
        ...
