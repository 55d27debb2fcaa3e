"""Exceptions raised while reading SIQ containers."""

from __future__ import annotations

from opensi.core.package.errors import PackageError


class ArchiveError(PackageError):
    """Raised when the container cannot be opened or a required member is missing."""


class ParseError(PackageError):
    """Raised when the content document does not map onto the package model."""
