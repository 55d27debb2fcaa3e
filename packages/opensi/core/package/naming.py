"""Human-readable labels for tree nodes."""

from __future__ import annotations

from opensi.core.package.models.components import Question, Round, Theme
from opensi.core.package.models.node import PackageNode, QuestionIdx, RoundIdx, ThemeIdx
from opensi.core.package.tree.editor import PackageTree

UNKNOWN_ROUND = "<Неизвестный раунд>"
UNKNOWN_THEME = "<Неизвестная тема>"
UNKNOWN_QUESTION = "<Неизвестный вопрос>"


def round_label(round_: Round) -> str:
    return round_.name


def theme_label(theme: Theme) -> str:
    return theme.name


def question_label(question: Question) -> str:
    return f"({question.price})"


def node_label(tree: PackageTree, node: PackageNode) -> str:
    """Label for ``node``, or a placeholder when the index no longer exists."""
    match node.idx:
        case RoundIdx() as idx:
            round_ = tree.rounds.get(idx)
            return round_label(round_) if round_ is not None else UNKNOWN_ROUND
        case ThemeIdx() as idx:
            theme = tree.themes.get(idx)
            return theme_label(theme) if theme is not None else UNKNOWN_THEME
        case QuestionIdx() as idx:
            question = tree.questions.get(idx)
            return question_label(question) if question is not None else UNKNOWN_QUESTION
