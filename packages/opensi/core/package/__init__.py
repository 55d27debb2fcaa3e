"""Package document model, tree editing and resource resolution."""

from opensi.core.package.errors import PackageError, UnknownResourceError
from opensi.core.package.models import (
    Answer,
    Atom,
    AtomKind,
    Info,
    NodeIdx,
    Package,
    PackageNode,
    Param,
    Question,
    QuestionIdx,
    QuestionType,
    ResourceCategory,
    ResourceKey,
    Round,
    RoundIdx,
    Theme,
    ThemeIdx,
)
from opensi.core.package.naming import node_label
from opensi.core.package.resources import (
    classify_member_path,
    encode_resource_name,
    placeholder_key,
    require_member_key,
    resource_key_for_atom,
)
from opensi.core.package.tree import ChildContainer, PackageTree, TreeLevel

__all__ = [
    # Errors
    "PackageError",
    "UnknownResourceError",
    # Models
    "Answer",
    "Atom",
    "AtomKind",
    "Info",
    "NodeIdx",
    "Package",
    "PackageNode",
    "Param",
    "Question",
    "QuestionIdx",
    "QuestionType",
    "ResourceCategory",
    "ResourceKey",
    "Round",
    "RoundIdx",
    "Theme",
    "ThemeIdx",
    # Tree engine
    "ChildContainer",
    "PackageTree",
    "TreeLevel",
    "node_label",
    # Resources
    "classify_member_path",
    "encode_resource_name",
    "placeholder_key",
    "require_member_key",
    "resource_key_for_atom",
]
