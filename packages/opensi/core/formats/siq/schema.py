"""Content document readers, one per schema generation.

Every generation is read into the same canonical model. Writing always
targets the scenario/atom shape (see ``exporter``), so the readers are
stateless and read-only:

- ``V4Reader``: scenario/atom questions with a ``type`` element. This is
  also the canonical shape the exporter writes.
- ``V5Reader``: everything V4 reads, plus questions whose content lives in
  ``params``/``param``/``item`` and whose type is a ``type`` attribute.

``probe_generation`` selects the reader from the root ``version`` attribute.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import IntEnum

from opensi.core.formats.siq.constants import ATOM_KINDS_BY_TYPE
from opensi.core.formats.siq.errors import ParseError
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
from opensi.core.package.models.enums import AtomKind
from opensi.core.package.models.package import DEFAULT_DIFFICULTY, Package
from opensi.core.utils.logging import get_logger

logger = get_logger(__name__)

_V5_QUESTION_PARAM = "question"
_V5_CONTENT_PARAM_TYPE = "content"


class SchemaGeneration(IntEnum):
    """Content document generations this codec can read."""

    V4 = 4
    V5 = 5


def parse_float(value: str, what: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise ParseError(f"Invalid {what}: {value!r}") from e


def parse_int(value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ParseError(f"Invalid {what}: {value!r}") from e


def probe_generation(root: ET.Element) -> SchemaGeneration:
    """Pick the generation from the root ``version`` attribute.

    Versions below 5 (and a missing version) read as V4, everything else as V5.
    """
    version = root.get("version")
    if version is None:
        return SchemaGeneration.V4
    if parse_float(version, "package version") < SchemaGeneration.V5:
        return SchemaGeneration.V4
    return SchemaGeneration.V5


def _text(elem: ET.Element | None) -> str:
    if elem is None or elem.text is None:
        return ""
    return elem.text


def _texts(parent: ET.Element | None, wrapper: str, item: str) -> list[str]:
    if parent is None:
        return []
    container = parent.find(wrapper)
    if container is None:
        return []
    return [_text(child) for child in container.findall(item)]


class V4Reader:
    """Reads the scenario/atom generation."""

    generation = SchemaGeneration.V4

    def read_package(self, root: ET.Element, namespace: str = "") -> Package:
        name = root.get("name")
        if name is None:
            raise ParseError("Missing required attribute: package@name")

        version = root.get("version")
        logo = root.get("logo")
        difficulty = root.get("difficulty")
        rounds_elem = root.find("rounds")

        return Package(
            id=root.get("id", ""),
            name=name,
            version=parse_float(version, "package version") if version is not None else 0.0,
            date=root.get("date", ""),
            difficulty=(
                parse_int(difficulty, "package difficulty")
                if difficulty is not None
                else DEFAULT_DIFFICULTY
            ),
            language=root.get("language", ""),
            logo=logo,
            publisher=root.get("publisher", ""),
            restriction=root.get("restriction", ""),
            namespace=namespace,
            info=self.read_info(root.find("info")) or Info(),
            rounds=[
                self.read_round(elem)
                for elem in (rounds_elem.findall("round") if rounds_elem is not None else [])
            ],
            tags=_texts(root, "tags", "tag"),
        )

    def read_info(self, elem: ET.Element | None) -> Info | None:
        """Info block, or None when absent or empty."""
        if elem is None:
            return None
        info = Info(
            comments=_text(elem.find("comments")),
            extension=_text(elem.find("extension")),
            authors=_texts(elem, "authors", "author"),
            sources=_texts(elem, "sources", "source"),
        )
        return None if info.is_empty() else info

    def read_round(self, elem: ET.Element) -> Round:
        themes_elem = elem.find("themes")
        return Round(
            name=elem.get("name", ""),
            kind=elem.get("type"),
            info=self.read_info(elem.find("info")),
            themes=[
                self.read_theme(theme)
                for theme in (themes_elem.findall("theme") if themes_elem is not None else [])
            ],
        )

    def read_theme(self, elem: ET.Element) -> Theme:
        questions_elem = elem.find("questions")
        return Theme(
            name=elem.get("name", ""),
            info=self.read_info(elem.find("info")),
            questions=[
                self.read_question(question)
                for question in (
                    questions_elem.findall("question") if questions_elem is not None else []
                )
            ],
        )

    def read_question(self, elem: ET.Element) -> Question:
        price = elem.get("price")

        return Question(
            price=0 if price is None else parse_int(price, "question price"),
            question_type=self.read_question_type(elem),
            scenario=self.read_scenario(elem),
            right=self.read_answers(elem.find("right")),
            wrong=self.read_answers(elem.find("wrong")),
            info=self.read_info(elem.find("info")),
        )

    def read_question_type(self, question: ET.Element) -> QuestionType | None:
        type_elem = question.find("type")
        if type_elem is None:
            return None
        return QuestionType(
            name=type_elem.get("name", ""),
            params=[
                Param(name=param.get("name", ""), body=param.text)
                for param in type_elem.findall("param")
            ],
        )

    def read_scenario(self, question: ET.Element) -> list[Atom]:
        scenario = question.find("scenario")
        if scenario is None:
            return []
        return [self.read_atom(atom) for atom in scenario.findall("atom")]

    def read_atom(self, elem: ET.Element) -> Atom:
        time = elem.get("time")
        return Atom(
            time=parse_float(time, "atom time") if time is not None else None,
            kind=ATOM_KINDS_BY_TYPE.get(elem.get("type", ""), AtomKind.TEXT),
            body=_text(elem),
        )

    def read_answers(self, elem: ET.Element | None) -> list[Answer]:
        if elem is None:
            return []
        return [Answer(body=answer.text) for answer in elem.findall("answer")]


class V5Reader(V4Reader):
    """Reads V5 documents, migrating ``params`` content into scenario atoms."""

    generation = SchemaGeneration.V5

    def read_question_type(self, question: ET.Element) -> QuestionType | None:
        if question.find("type") is not None:
            return super().read_question_type(question)

        params = [
            Param(name=param.get("name", ""), body=param.text)
            for param in self._params(question)
            if param.get("type") != _V5_CONTENT_PARAM_TYPE
        ]
        type_name = question.get("type")
        if type_name is None and not params:
            return None
        return QuestionType(name=type_name or "", params=params)

    def read_scenario(self, question: ET.Element) -> list[Atom]:
        if question.find("scenario") is not None:
            return super().read_scenario(question)

        atoms: list[Atom] = []
        for param in self._params(question):
            if param.get("type") != _V5_CONTENT_PARAM_TYPE:
                continue
            if param.get("name") != _V5_QUESTION_PARAM:
                logger.warning(f"Skipping unsupported content parameter {param.get('name')!r}")
                continue
            atoms.extend(self.read_item(item) for item in param.findall("item"))
        return atoms

    def read_item(self, elem: ET.Element) -> Atom:
        duration = elem.get("duration")
        return Atom(
            time=_duration_seconds(duration) if duration else None,
            kind=ATOM_KINDS_BY_TYPE.get(elem.get("type", ""), AtomKind.TEXT),
            body=_text(elem),
        )

    @staticmethod
    def _params(question: ET.Element) -> list[ET.Element]:
        params = question.find("params")
        if params is None:
            return []
        return params.findall("param")


def _duration_seconds(value: str) -> float:
    """Convert ``HH:MM:SS`` (or plain seconds) to seconds."""
    seconds = 0.0
    for part in value.split(":"):
        seconds = seconds * 60 + parse_float(part, "item duration")
    return seconds


_READERS: dict[SchemaGeneration, V4Reader] = {
    SchemaGeneration.V4: V4Reader(),
    SchemaGeneration.V5: V5Reader(),
}


def reader_for(generation: SchemaGeneration) -> V4Reader:
    return _READERS[generation]
