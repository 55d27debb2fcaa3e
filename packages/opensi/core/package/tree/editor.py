"""Tree editing facade over a Package.

``PackageTree`` composes three ``TreeLevel``s upward from the package:
rounds resolve from the package itself, themes through ``rounds.get``,
questions through ``themes.get``. Node-level composites dispatch on the
closed ``PackageNode`` union.

Example:
    >>> package = Package.new()
    >>> tree = PackageTree(package)
    >>> round_ = tree.rounds.allocate()
    >>> theme = tree.themes.allocate(RoundIdx(0))
    >>> tree.questions.count(ThemeIdx(0, 0))
    5
"""

from __future__ import annotations

from collections.abc import Iterator

from opensi.core.package.models.components import Question, Round, Theme, guess_next_price
from opensi.core.package.models.node import PackageNode, QuestionIdx, RoundIdx, ThemeIdx
from opensi.core.package.models.package import Package
from opensi.core.package.tree.levels import TreeLevel

Entity = Round | Theme | Question


class PackageTree:
    """Index-addressed editing of a package's round/theme/question tree.

    Attributes:
        rounds: Rounds of the package (parent key: None).
        themes: Themes of a round (parent key: RoundIdx).
        questions: Questions of a theme (parent key: ThemeIdx).
    """

    def __init__(self, package: Package) -> None:
        self.package = package
        self.rounds: TreeLevel[None, RoundIdx, Round] = TreeLevel.root(
            package,
            name="round",
            coerce=RoundIdx.coerce,
            factory=lambda _siblings: Round(),
        )
        self.themes: TreeLevel[RoundIdx, ThemeIdx, Theme] = self.rounds.descend(
            name="theme",
            locate=lambda idx: (idx.parent(), idx.index),
            coerce=ThemeIdx.coerce,
            factory=lambda _siblings: Theme.ladder(),
        )
        self.questions: TreeLevel[ThemeIdx, QuestionIdx, Question] = self.themes.descend(
            name="question",
            locate=lambda idx: (idx.parent(), idx.index),
            coerce=QuestionIdx.coerce,
            factory=lambda siblings: Question(price=guess_next_price(siblings)),
        )

    def get_node(self, node: PackageNode) -> Entity | None:
        match node.idx:
            case RoundIdx() as idx:
                return self.rounds.get(idx)
            case ThemeIdx() as idx:
                return self.themes.get(idx)
            case QuestionIdx() as idx:
                return self.questions.get(idx)

    def contains_node(self, node: PackageNode) -> bool:
        return self.get_node(node) is not None

    def duplicate_node(self, node: PackageNode) -> Entity | None:
        """Clone a node and insert the clone right after it."""
        match node.idx:
            case RoundIdx() as idx:
                return self.rounds.duplicate(idx)
            case ThemeIdx() as idx:
                return self.themes.duplicate(idx)
            case QuestionIdx() as idx:
                return self.questions.duplicate(idx)

    def allocate_node(self, node: PackageNode) -> Entity | None:
        """Append a new default sibling of ``node`` under the node's container.

        A round node allocates a new round; a theme node a new theme in its
        round; a question node a new question in its theme.
        """
        match node.idx:
            case RoundIdx():
                return self.rounds.allocate()
            case ThemeIdx() as idx:
                return self.themes.allocate(idx.parent())
            case QuestionIdx() as idx:
                return self.questions.allocate(idx.parent())

    def remove_node(self, node: PackageNode) -> Entity | None:
        match node.idx:
            case RoundIdx() as idx:
                return self.rounds.remove(idx)
            case ThemeIdx() as idx:
                return self.themes.remove(idx)
            case QuestionIdx() as idx:
                return self.questions.remove(idx)

    def walk(self) -> Iterator[PackageNode]:
        """Yield every node in pre-order (round, its themes, their questions)."""
        for round_index, round_ in enumerate(self.package.rounds):
            round_idx = RoundIdx(round_index)
            yield PackageNode(round_idx)
            for theme_index, theme in enumerate(round_.themes):
                theme_idx = round_idx.theme(theme_index)
                yield PackageNode(theme_idx)
                for question_index in range(len(theme.questions)):
                    yield PackageNode(theme_idx.question(question_index))
