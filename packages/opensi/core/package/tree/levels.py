"""Generic CRUD over one level of the package tree.

A ``TreeLevel`` knows nothing about rounds, themes or questions. It is
configured with:

- ``resolve``: parent key -> live child list (None when the parent is missing)
- ``locate``: child index -> (parent key, position)
- ``coerce`` / ``coerce_parent``: raw ints/tuples -> typed keys
- ``factory``: sibling list -> new default child

``descend`` derives the next level down from this one: the child level
resolves its parent through ``self.get`` and the parent's ``children()``,
so every level inherits the same operation set.

Every operation is total. A position outside the valid range (including a
negative one) yields None, False or 0 and never raises.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from opensi.core.package.tree.protocols import ChildContainer
from opensi.core.utils.logging import get_logger

logger = get_logger(__name__)

ParentT = TypeVar("ParentT")
IdxT = TypeVar("IdxT")
ChildT = TypeVar("ChildT", bound=BaseModel)
GrandchildT = TypeVar("GrandchildT", bound=BaseModel)
SubIdxT = TypeVar("SubIdxT")


class TreeLevel(Generic[ParentT, IdxT, ChildT]):
    """Count/contains/get/remove/push/insert/duplicate/allocate for one level."""

    def __init__(
        self,
        *,
        name: str,
        resolve: Callable[[ParentT], list[ChildT] | None],
        locate: Callable[[IdxT], tuple[ParentT, int]],
        coerce: Callable[[Any], IdxT],
        coerce_parent: Callable[[Any], ParentT],
        factory: Callable[[list[ChildT]], ChildT],
    ) -> None:
        self.name = name
        self._resolve = resolve
        self._locate = locate
        self._coerce = coerce
        self._coerce_parent = coerce_parent
        self._factory = factory

    @classmethod
    def root(
        cls,
        container: ChildContainer[ChildT],
        *,
        name: str,
        coerce: Callable[[Any], IdxT],
        factory: Callable[[list[ChildT]], ChildT],
    ) -> TreeLevel[None, IdxT, ChildT]:
        """Top level whose only parent is ``container`` itself."""
        return cls(
            name=name,
            resolve=lambda _parent: container.children(),
            locate=lambda idx: (None, idx.index),
            coerce=coerce,
            coerce_parent=lambda _parent: None,
            factory=factory,
        )

    def descend(
        self,
        *,
        name: str,
        locate: Callable[[SubIdxT], tuple[IdxT, int]],
        coerce: Callable[[Any], SubIdxT],
        factory: Callable[[list[GrandchildT]], GrandchildT],
    ) -> TreeLevel[IdxT, SubIdxT, GrandchildT]:
        """Level below this one; entities of this level must be ``ChildContainer``s."""

        def resolve(parent: IdxT) -> list[GrandchildT] | None:
            entity = self.get(parent)
            if entity is None:
                return None
            return entity.children()

        return TreeLevel(
            name=name,
            resolve=resolve,
            locate=locate,
            coerce=coerce,
            coerce_parent=self._coerce,
            factory=factory,
        )

    def _slot(self, idx: Any) -> tuple[list[ChildT] | None, int]:
        parent, position = self._locate(self._coerce(idx))
        return self._resolve(parent), position

    def children(self, parent: Any = None) -> list[ChildT] | None:
        """Live child list under ``parent``, or None if the parent is missing."""
        return self._resolve(self._coerce_parent(parent))

    def count(self, parent: Any = None) -> int:
        """Number of children under ``parent`` (0 when the parent is missing)."""
        children = self.children(parent)
        return len(children) if children is not None else 0

    def contains(self, idx: Any) -> bool:
        children, position = self._slot(idx)
        return children is not None and 0 <= position < len(children)

    def get(self, idx: Any) -> ChildT | None:
        """Entity at ``idx``; the returned object is live and may be edited in place."""
        children, position = self._slot(idx)
        if children is None or not 0 <= position < len(children):
            return None
        return children[position]

    # Python references are already mutable handles.
    get_mut = get

    def remove(self, idx: Any) -> ChildT | None:
        """Detach and return the entity at ``idx``; later siblings shift down."""
        children, position = self._slot(idx)
        if children is None or not 0 <= position < len(children):
            return None
        logger.debug(f"Removing {self.name} {self._coerce(idx)}")
        return children.pop(position)

    def push(self, parent: Any, entity: ChildT) -> ChildT | None:
        """Append ``entity`` under ``parent``."""
        children = self.children(parent)
        if children is None:
            return None
        children.append(entity)
        return entity

    def insert(self, idx: Any, entity: ChildT) -> ChildT | None:
        """Insert at a position in ``[0, count]``; later siblings shift up."""
        children, position = self._slot(idx)
        if children is None or not 0 <= position <= len(children):
            return None
        children.insert(position, entity)
        return entity

    def duplicate(self, idx: Any) -> ChildT | None:
        """Deep-copy the entity at ``idx`` and insert the copy right after it."""
        source = self.get(idx)
        if source is None:
            return None
        typed = self._coerce(idx)
        logger.debug(f"Duplicating {self.name} {typed}")
        return self.insert(typed.next(), source.model_copy(deep=True))

    def allocate(self, parent: Any = None) -> ChildT | None:
        """Append a new default entity built from the current siblings."""
        children = self.children(parent)
        if children is None:
            return None
        entity = self._factory(children)
        children.append(entity)
        return entity
