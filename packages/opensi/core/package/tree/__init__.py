"""Generic tree mutation engine for packages."""

from opensi.core.package.tree.editor import PackageTree
from opensi.core.package.tree.levels import TreeLevel
from opensi.core.package.tree.protocols import ChildContainer

__all__ = ["ChildContainer", "PackageTree", "TreeLevel"]
