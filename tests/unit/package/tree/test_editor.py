"""Tests for PackageTree node-level composites."""

from __future__ import annotations

from opensi.core.package.models import (
    Package,
    PackageNode,
    Question,
    QuestionIdx,
    Round,
    RoundIdx,
    Theme,
    ThemeIdx,
)
from opensi.core.package.tree import PackageTree


def test_allocate_round_theme_question(empty_package: Package) -> None:
    tree = PackageTree(empty_package)

    round_ = tree.rounds.allocate()
    theme = tree.themes.allocate(RoundIdx(0))
    question = tree.questions.allocate(ThemeIdx(0, 0))

    assert round_.name == "Новый раунд"
    assert theme.name == "Новая тема"
    assert len(theme.questions) == 6
    assert question.price == 600


def test_allocate_question_in_empty_theme() -> None:
    package = Package(rounds=[Round(themes=[Theme()])])
    question = PackageTree(package).questions.allocate(ThemeIdx(0, 0))
    assert question.price == 100


def test_get_node(sample_package: Package) -> None:
    tree = PackageTree(sample_package)

    assert tree.get_node(PackageNode.from_indices(1)).name == "Final"
    assert tree.get_node(PackageNode.from_indices(0, 1)).name == "Films"
    assert tree.get_node(PackageNode.from_indices(0, 0, 1)).price == 200
    assert tree.get_node(PackageNode.from_indices(0, 5)) is None


def test_contains_node(sample_package: Package) -> None:
    tree = PackageTree(sample_package)

    assert tree.contains_node(PackageNode(QuestionIdx(1, 0, 0)))
    assert not tree.contains_node(PackageNode(QuestionIdx(1, 0, 1)))
    assert not tree.contains_node(PackageNode(RoundIdx(2)))


def test_duplicate_node_shifts_followers(sample_package: Package) -> None:
    tree = PackageTree(sample_package)

    tree.duplicate_node(PackageNode(ThemeIdx(0, 0)))

    names = [theme.name for theme in sample_package.rounds[0].themes]
    assert names == ["Songs", "Songs", "Films"]


def test_duplicate_question_node(sample_package: Package) -> None:
    tree = PackageTree(sample_package)

    clone = tree.duplicate_node(PackageNode(QuestionIdx(0, 0, 0)))

    prices = [question.price for question in sample_package.rounds[0].themes[0].questions]
    assert prices == [100, 100, 200]
    assert clone == sample_package.rounds[0].themes[0].questions[0]
    assert clone is not sample_package.rounds[0].themes[0].questions[0]


def test_allocate_node_appends_sibling(sample_package: Package) -> None:
    tree = PackageTree(sample_package)

    tree.allocate_node(PackageNode(ThemeIdx(0, 0)))
    question = tree.allocate_node(PackageNode(QuestionIdx(0, 0, 0)))
    tree.allocate_node(PackageNode(RoundIdx(0)))

    assert len(sample_package.rounds) == 3
    assert len(sample_package.rounds[0].themes) == 3
    assert question.price == 300
    assert sample_package.rounds[0].themes[0].questions[-1] is question


def test_allocate_node_with_missing_parent(sample_package: Package) -> None:
    tree = PackageTree(sample_package)
    assert tree.allocate_node(PackageNode(QuestionIdx(7, 0, 0))) is None


def test_remove_node(sample_package: Package) -> None:
    tree = PackageTree(sample_package)

    removed = tree.remove_node(PackageNode(RoundIdx(0)))

    assert removed.name == "Round 1"
    assert [round_.name for round_ in sample_package.rounds] == ["Final"]
    assert tree.remove_node(PackageNode(ThemeIdx(3, 0))) is None


def test_walk_is_pre_order() -> None:
    package = Package(
        rounds=[
            Round(themes=[Theme(questions=[Question(), Question()]), Theme()]),
            Round(),
        ]
    )

    nodes = [str(node) for node in PackageTree(package).walk()]

    assert nodes == ["[0]", "[0 > 0]", "[0 > 0 > 0]", "[0 > 0 > 1]", "[0 > 1]", "[1]"]
