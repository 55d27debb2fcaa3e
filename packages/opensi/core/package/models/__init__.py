"""Package document models."""

from opensi.core.package.models.components import (
    Answer,
    Atom,
    Info,
    Param,
    Question,
    QuestionType,
    Round,
    Theme,
)
from opensi.core.package.models.enums import AtomKind, ResourceCategory
from opensi.core.package.models.node import (
    NodeIdx,
    PackageNode,
    QuestionIdx,
    RoundIdx,
    ThemeIdx,
)
from opensi.core.package.models.package import Package
from opensi.core.package.models.resource import ResourceKey

__all__ = [
    # Enums
    "AtomKind",
    "ResourceCategory",
    # Addressing
    "NodeIdx",
    "PackageNode",
    "QuestionIdx",
    "RoundIdx",
    "ThemeIdx",
    # Document
    "Answer",
    "Atom",
    "Info",
    "Package",
    "Param",
    "Question",
    "QuestionType",
    "ResourceKey",
    "Round",
    "Theme",
]
