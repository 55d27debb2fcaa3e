"""Parsers for structured text formats."""

from opensi.core.parsers.xml import XMLParser, split_namespace, strip_namespaces

__all__ = ["XMLParser", "split_namespace", "strip_namespaces"]
