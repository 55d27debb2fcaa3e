"""SIQ infrastructure - trivia package container format handling."""

from opensi.core.formats.siq.archive import (
    LoadResult,
    open_package,
    open_package_bytes,
    read_package,
    save_package,
    save_package_bytes,
)
from opensi.core.formats.siq.errors import ArchiveError, ParseError
from opensi.core.formats.siq.exporter import SIQExporter
from opensi.core.formats.siq.parser import SIQParser
from opensi.core.formats.siq.schema import SchemaGeneration, probe_generation

__all__ = [
    "ArchiveError",
    "LoadResult",
    "ParseError",
    "SIQExporter",
    "SIQParser",
    "SchemaGeneration",
    "open_package",
    "open_package_bytes",
    "probe_generation",
    "read_package",
    "save_package",
    "save_package_bytes",
]
