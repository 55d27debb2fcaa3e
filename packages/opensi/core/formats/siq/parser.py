"""SIQ content parser - read ``content.xml`` documents into Package models.

The root element may carry a default namespace; it is stripped before
mapping and recorded on ``Package.namespace`` so the exporter can write it
back. The schema generation is probed from the root ``version`` attribute.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from opensi.core.formats.siq.constants import ROOT_TAG
from opensi.core.formats.siq.errors import ParseError
from opensi.core.formats.siq.schema import probe_generation, reader_for
from opensi.core.package.models.package import Package
from opensi.core.parsers.xml import XMLParser, strip_namespaces
from opensi.core.utils.logging import get_logger

logger = get_logger(__name__)


class SIQParser:
    """Parser for SIQ content documents.

    Produces a Package without resources; bundled media is attached by the
    archive codec.

    Example:
        >>> parser = SIQParser()
        >>> package = parser.parse_string('<package name="Quiz" version="5"><rounds/></package>')
        >>> package.name
        'Quiz'
    """

    def __init__(self) -> None:
        self._xml_parser = XMLParser()

    def parse(self, file_path: Path | str) -> Package:
        """Parse a content document from disk.

        Args:
            file_path: Path to an extracted ``content.xml``

        Returns:
            Parsed Package

        Raises:
            FileNotFoundError: If file doesn't exist
            ParseError: If XML is invalid or does not describe a package
        """
        file_path = Path(file_path)
        logger.debug(f"Parsing SIQ content file: {file_path}")

        try:
            tree = self._xml_parser.parse(file_path)
        except ValueError as e:
            raise ParseError(str(e)) from e
        return self._parse_root(tree.getroot())

    def parse_string(self, xml_content: str) -> Package:
        """Parse a content document from a string.

        Raises:
            ParseError: If XML is invalid or does not describe a package
        """
        try:
            root = self._xml_parser.parse_string(xml_content)
        except ValueError as e:
            raise ParseError(str(e)) from e
        return self._parse_root(root)

    def parse_bytes(self, data: bytes) -> Package:
        """Parse an encoded content document (as stored in the container).

        Raises:
            ParseError: If XML is invalid or does not describe a package
        """
        try:
            root = self._xml_parser.parse_bytes(data)
        except ValueError as e:
            raise ParseError(str(e)) from e
        return self._parse_root(root)

    def _parse_root(self, root: ET.Element) -> Package:
        namespace = strip_namespaces(root)
        if root.tag != ROOT_TAG:
            raise ParseError(f"Expected <{ROOT_TAG}> root element, found <{root.tag}>")

        generation = probe_generation(root)
        logger.debug(f"Reading content as schema generation {generation.name}")

        package = reader_for(generation).read_package(root, namespace=namespace)
        logger.debug(f"Parsed package {package.name!r} with {len(package.rounds)} rounds")
        return package
