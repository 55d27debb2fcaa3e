"""Generic XML parsing utilities with error handling.

This module provides a small wrapper around ElementTree with consistent
error handling and default-namespace handling for document formats whose
root element carries an ``xmlns`` declaration.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from opensi.core.utils.logging import get_logger

logger = get_logger(__name__)


def split_namespace(tag: str) -> tuple[str, str]:
    """Split a Clark-notation tag into ``(namespace, local_name)``.

    Example:
        >>> split_namespace("{http://example.com/ns}package")
        ('http://example.com/ns', 'package')
        >>> split_namespace("package")
        ('', 'package')
    """
    if tag.startswith("{"):
        namespace, _, local = tag[1:].partition("}")
        return namespace, local
    return "", tag


def strip_namespaces(root: ET.Element) -> str:
    """Remove namespaces from every tag below (and including) ``root``.

    Args:
        root: Element to rewrite in place

    Returns:
        Namespace of the root element ("" when it had none)
    """
    namespace, _ = split_namespace(root.tag)
    for elem in root.iter():
        if isinstance(elem.tag, str):
            _, elem.tag = split_namespace(elem.tag)
    return namespace


class XMLParser:
    """Generic XML parser with error handling.

    Wraps Python's ElementTree with:
    - File existence validation
    - Clear error messages for malformed XML
    - Support for file paths, strings and raw bytes

    Example:
        >>> parser = XMLParser()
        >>> root = parser.parse_string("<root><element>Text</element></root>")
        >>> root.find("element").text
        'Text'
    """

    def parse(self, file_path: Path | str) -> ET.ElementTree:
        """Parse XML file.

        Args:
            file_path: Path to XML file (Path object or string)

        Returns:
            Parsed ElementTree

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If XML is malformed
        """
        path = Path(file_path)

        if not path.exists():
            raise FileNotFoundError(f"XML file does not exist: {path}")

        try:
            logger.debug(f"Parsing XML file: {path}")
            return ET.parse(path)
        except ET.ParseError as e:
            raise ValueError(f"Malformed XML in {path}: {e}") from e

    def parse_string(self, xml_str: str) -> ET.Element:
        """Parse XML from string.

        Args:
            xml_str: XML content as string

        Returns:
            Parsed Element (root element)

        Raises:
            ValueError: If XML is malformed
        """
        try:
            return ET.fromstring(xml_str)
        except ET.ParseError as e:
            raise ValueError(f"Malformed XML string: {e}") from e

    def parse_bytes(self, data: bytes) -> ET.Element:
        """Parse XML from raw bytes, honouring the encoding declared in the prolog.

        Args:
            data: Encoded XML document

        Returns:
            Parsed Element (root element)

        Raises:
            ValueError: If XML is malformed
        """
        try:
            return ET.fromstring(data)
        except ET.ParseError as e:
            raise ValueError(f"Malformed XML document: {e}") from e
