"""Tests for typed tree indices and PackageNode."""

from __future__ import annotations

import pytest

from opensi.core.package.models.node import PackageNode, QuestionIdx, RoundIdx, ThemeIdx


class TestIndices:
    """Tests for RoundIdx/ThemeIdx/QuestionIdx."""

    def test_coerce_from_raw_values(self) -> None:
        assert RoundIdx.coerce(3) == RoundIdx(3)
        assert ThemeIdx.coerce((1, 2)) == ThemeIdx(1, 2)
        assert QuestionIdx.coerce((1, 2, 3)) == QuestionIdx(1, 2, 3)

    def test_coerce_passes_typed_values_through(self) -> None:
        idx = ThemeIdx(0, 4)
        assert ThemeIdx.coerce(idx) is idx

    def test_children_and_parents(self) -> None:
        theme = RoundIdx(2).theme(1)
        question = theme.question(0)

        assert theme == ThemeIdx(round_index=2, index=1)
        assert question == QuestionIdx(round_index=2, theme_index=1, index=0)
        assert question.parent() == theme
        assert theme.parent() == RoundIdx(2)

    def test_next_keeps_ancestors(self) -> None:
        assert RoundIdx(0).next() == RoundIdx(1)
        assert ThemeIdx(3, 1).next() == ThemeIdx(3, 2)
        assert QuestionIdx(3, 1, 4).next() == QuestionIdx(3, 1, 5)

    def test_str(self) -> None:
        assert str(RoundIdx(0)) == "[0]"
        assert str(ThemeIdx(0, 1)) == "[0 > 1]"
        assert str(QuestionIdx(0, 1, 2)) == "[0 > 1 > 2]"

    def test_indices_are_hashable(self) -> None:
        assert len({ThemeIdx(0, 1), ThemeIdx(0, 1), ThemeIdx(1, 0)}) == 2


class TestPackageNode:
    """Tests for the closed node union."""

    @pytest.mark.parametrize(
        ("indices", "expected"),
        [
            ((4,), RoundIdx(4)),
            ((1, 2), ThemeIdx(1, 2)),
            ((1, 2, 3), QuestionIdx(1, 2, 3)),
        ],
    )
    def test_from_indices(self, indices: tuple[int, ...], expected: object) -> None:
        assert PackageNode.from_indices(*indices).idx == expected

    @pytest.mark.parametrize("indices", [(), (1, 2, 3, 4)])
    def test_from_indices_rejects_other_arity(self, indices: tuple[int, ...]) -> None:
        with pytest.raises(ValueError, match="Expected 1 to 3 indices"):
            PackageNode.from_indices(*indices)

    def test_parent_chain(self) -> None:
        node = PackageNode.from_indices(0, 2, 1)

        theme = node.parent()
        assert theme == PackageNode(ThemeIdx(0, 2))
        assert theme.parent() == PackageNode(RoundIdx(0))
        assert theme.parent().parent() is None

    def test_index_and_depth(self) -> None:
        node = PackageNode(QuestionIdx(5, 6, 7))
        assert node.index() == 7
        assert node.depth == 2
        assert PackageNode(RoundIdx(9)).depth == 0

    def test_ordering_groups_by_kind_first(self) -> None:
        nodes = [
            PackageNode(QuestionIdx(0, 0, 0)),
            PackageNode(ThemeIdx(5, 5)),
            PackageNode(RoundIdx(9)),
            PackageNode(ThemeIdx(0, 1)),
            PackageNode(RoundIdx(0)),
        ]

        assert sorted(nodes) == [
            PackageNode(RoundIdx(0)),
            PackageNode(RoundIdx(9)),
            PackageNode(ThemeIdx(0, 1)),
            PackageNode(ThemeIdx(5, 5)),
            PackageNode(QuestionIdx(0, 0, 0)),
        ]

    def test_comparisons(self) -> None:
        round_node = PackageNode(RoundIdx(100))
        theme_node = PackageNode(ThemeIdx(0, 0))

        assert round_node < theme_node
        assert theme_node > round_node
        assert round_node <= PackageNode(RoundIdx(100))
        assert theme_node >= PackageNode(ThemeIdx(0, 0))

    def test_str_delegates_to_index(self) -> None:
        assert str(PackageNode(ThemeIdx(1, 2))) == "[1 > 2]"
