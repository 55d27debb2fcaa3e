"""Exceptions raised by the package core."""

from __future__ import annotations


class PackageError(Exception):
    """Base exception for all package errors."""


class UnknownResourceError(PackageError):
    """Raised when a container member path matches no known resource category."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Unknown resource type for {path}")
        self.path = path
