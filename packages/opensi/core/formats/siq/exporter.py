"""SIQ content exporter - write Package models to ``content.xml`` documents.

Always writes the scenario/atom generation, whatever generation the
package was read from.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from opensi.core.formats.siq.constants import ATOM_TYPE_NAMES, ROOT_TAG, XML_PROLOG
from opensi.core.package.models.components import (
    Answer,
    Atom,
    Info,
    Question,
    QuestionType,
    Round,
    Theme,
)
from opensi.core.package.models.package import Package
from opensi.core.utils.logging import get_logger

logger = get_logger(__name__)


def format_number(value: float) -> str:
    """Render a float attribute, dropping the fraction when it is integral.

    Example:
        >>> format_number(5.0)
        '5'
        >>> format_number(2.5)
        '2.5'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


class SIQExporter:
    """Exporter for SIQ content documents.

    Example:
        >>> exporter = SIQExporter()
        >>> xml = exporter.to_string(Package.new())
        >>> xml.startswith('<?xml version="1.0" encoding="utf-8"?><package ')
        True
    """

    def export(self, package: Package, file_path: Path | str, pretty: bool = False) -> None:
        """Write the content document of ``package`` to a file.

        Args:
            package: Package to export (resources are ignored)
            file_path: Destination path
            pretty: Whether to indent the document
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        logger.debug(f"Exporting SIQ content to: {file_path}")
        file_path.write_bytes(self.to_bytes(package, pretty=pretty))

    def to_bytes(self, package: Package, pretty: bool = False) -> bytes:
        return self.to_string(package, pretty=pretty).encode("utf-8")

    def to_string(self, package: Package, pretty: bool = False) -> str:
        """Serialize ``package`` with the XML prolog prepended."""
        root = self.to_element(package)
        if pretty:
            ET.indent(root, space="  ", level=0)
        body = ET.tostring(root, encoding="unicode")
        separator = "\n" if pretty else ""
        return f"{XML_PROLOG}{separator}{body}"

    def to_element(self, package: Package) -> ET.Element:
        attrib = {
            "name": package.name,
            "version": format_number(package.version),
            "id": package.id,
        }
        if package.date:
            attrib["date"] = package.date
        if package.publisher:
            attrib["publisher"] = package.publisher
        attrib["difficulty"] = str(package.difficulty)
        if package.language:
            attrib["language"] = package.language
        if package.logo is not None:
            attrib["logo"] = package.logo
        if package.restriction:
            attrib["restriction"] = package.restriction
        if package.namespace:
            attrib["xmlns"] = package.namespace

        root = ET.Element(ROOT_TAG, attrib)
        self._append_info(root, package.info)

        rounds = ET.SubElement(root, "rounds")
        for round_ in package.rounds:
            rounds.append(self._build_round(round_))

        if package.tags:
            tags = ET.SubElement(root, "tags")
            for tag in package.tags:
                ET.SubElement(tags, "tag").text = tag

        return root

    def _build_round(self, round_: Round) -> ET.Element:
        elem = ET.Element("round", {"name": round_.name})
        if round_.kind is not None:
            elem.set("type", round_.kind)
        self._append_info(elem, round_.info)

        themes = ET.SubElement(elem, "themes")
        for theme in round_.themes:
            themes.append(self._build_theme(theme))
        return elem

    def _build_theme(self, theme: Theme) -> ET.Element:
        elem = ET.Element("theme", {"name": theme.name})
        self._append_info(elem, theme.info)

        questions = ET.SubElement(elem, "questions")
        for question in theme.questions:
            questions.append(self._build_question(question))
        return elem

    def _build_question(self, question: Question) -> ET.Element:
        elem = ET.Element("question", {"price": str(question.price)})
        if question.question_type is not None:
            elem.append(self._build_question_type(question.question_type))

        scenario = ET.SubElement(elem, "scenario")
        for atom in question.scenario:
            scenario.append(self._build_atom(atom))

        self._append_answers(ET.SubElement(elem, "right"), question.right)
        if question.wrong:
            self._append_answers(ET.SubElement(elem, "wrong"), question.wrong)

        self._append_info(elem, question.info)
        return elem

    def _build_question_type(self, question_type: QuestionType) -> ET.Element:
        elem = ET.Element("type", {"name": question_type.name})
        for param in question_type.params:
            ET.SubElement(elem, "param", {"name": param.name}).text = param.body
        return elem

    def _build_atom(self, atom: Atom) -> ET.Element:
        elem = ET.Element("atom")
        if atom.time is not None:
            elem.set("time", format_number(atom.time))
        type_name = ATOM_TYPE_NAMES.get(atom.kind)
        if type_name is not None:
            elem.set("type", type_name)
        elem.text = atom.body
        return elem

    def _append_answers(self, parent: ET.Element, answers: list[Answer]) -> None:
        for answer in answers:
            ET.SubElement(parent, "answer").text = answer.body

    def _append_info(self, parent: ET.Element, info: Info | None) -> None:
        """Append an ``info`` block unless it is missing or empty."""
        if info is None or info.is_empty():
            return

        elem = ET.SubElement(parent, "info")
        if info.authors:
            authors = ET.SubElement(elem, "authors")
            for author in info.authors:
                ET.SubElement(authors, "author").text = author
        if info.sources:
            sources = ET.SubElement(elem, "sources")
            for source in info.sources:
                ET.SubElement(sources, "source").text = source
        if info.comments:
            ET.SubElement(elem, "comments").text = info.comments
        if info.extension:
            ET.SubElement(elem, "extension").text = info.extension
