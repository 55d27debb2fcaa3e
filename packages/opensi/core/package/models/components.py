"""Document components below the package root.

Round, Theme and Question each expose their child sequence through
``children()``; that single method is the capability the tree engine
(``opensi.core.package.tree``) builds its CRUD surface on.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field

from opensi.core.package.models.enums import AtomKind

DEFAULT_ROUND_NAME = "Новый раунд"
DEFAULT_THEME_NAME = "Новая тема"
DEFAULT_QUESTION_PRICE = 100
PRICE_STEP = 100
LADDER_PRICES: tuple[int, ...] = (100, 200, 300, 400, 500)

_QUESTION_TYPE_LABELS: dict[str, str] = {
    "": "Обычный вопрос",
    "simple": "Обычный вопрос",
    "auction": "Вопрос со ставкой",
    "cat": "Вопрос с секретом",
    "bagcat": "Обобщённый Вопрос с секретом",
    "sponsored": "Вопрос без риска",
}
_UNKNOWN_QUESTION_TYPE_LABEL = "Неизвестно"


class Info(BaseModel):
    """Optional free-text metadata attachable to every tree level."""

    model_config = ConfigDict(extra="forbid")

    comments: str = ""
    extension: str = ""
    authors: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.comments or self.extension or self.authors or self.sources)


class Param(BaseModel):
    """Named parameter of a question type."""

    model_config = ConfigDict(extra="forbid")

    name: str
    body: str | None = None


class QuestionType(BaseModel):
    """Question type tag, e.g. ``auction`` or ``cat`` with its parameters."""

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    params: list[Param] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        """Human-readable label for well-known type names."""
        return _QUESTION_TYPE_LABELS.get(self.name, _UNKNOWN_QUESTION_TYPE_LABEL)


class Answer(BaseModel):
    """A right or wrong answer; ``body`` is None for an empty answer element."""

    model_config = ConfigDict(extra="forbid")

    body: str | None = None


class Atom(BaseModel):
    """One unit of scenario content.

    Attributes:
        time: Display duration in seconds, if set.
        kind: TEXT for literal text, otherwise the body names a bundled resource.
        body: Display text, or a resource placeholder such as ``@joker.png``.
    """

    model_config = ConfigDict(extra="forbid")

    time: float | None = None
    kind: AtomKind = AtomKind.TEXT
    body: str = ""


class Question(BaseModel):
    """A priced question with its scenario and answers."""

    model_config = ConfigDict(extra="forbid")

    price: int = DEFAULT_QUESTION_PRICE
    question_type: QuestionType | None = None
    scenario: list[Atom] = Field(default_factory=list)
    right: list[Answer] = Field(default_factory=list)
    wrong: list[Answer] = Field(default_factory=list)
    info: Info | None = None


def guess_next_price(questions: Sequence[Question]) -> int:
    """Price for a question appended after ``questions``.

    - Two or more questions: last price plus the absolute difference
      between the last two prices (in sequence order, not sorted), so
      ``[500, 100]`` gives 500 while ``[100, 500]`` gives 900.
    - One question: its price plus 100.
    - No questions: 100.
    """
    match questions:
        case [*_, previous, last]:
            return last.price + abs(last.price - previous.price)
        case [last]:
            return last.price + PRICE_STEP
        case _:
            return DEFAULT_QUESTION_PRICE


class Theme(BaseModel):
    """A named column of questions."""

    model_config = ConfigDict(extra="forbid")

    name: str = DEFAULT_THEME_NAME
    info: Info | None = None
    questions: list[Question] = Field(default_factory=list)

    @classmethod
    def ladder(cls) -> Theme:
        """Theme seeded with the default 100..500 price ladder."""
        return cls(questions=[Question(price=price) for price in LADDER_PRICES])

    def children(self) -> list[Question]:
        return self.questions

    def guess_next_question_price(self) -> int:
        """Guess the price of a question appended to this theme.

        Example:
            >>> Theme(questions=[Question(price=100), Question(price=250)]).guess_next_question_price()
            400
        """
        return guess_next_price(self.questions)


class Round(BaseModel):
    """A named set of themes, optionally tagged with a round kind (e.g. ``final``)."""

    model_config = ConfigDict(extra="forbid")

    name: str = DEFAULT_ROUND_NAME
    kind: str | None = None
    info: Info | None = None
    themes: list[Theme] = Field(default_factory=list)

    def children(self) -> list[Theme]:
        return self.themes
