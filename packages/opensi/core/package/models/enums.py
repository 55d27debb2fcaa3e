"""Shared enums for package models."""

from __future__ import annotations

from enum import Enum


class AtomKind(str, Enum):
    """What an atom's body means: literal text or a bundled resource."""

    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"

    @property
    def is_text(self) -> bool:
        return self is AtomKind.TEXT


class ResourceCategory(str, Enum):
    """Category of a bundled binary resource."""

    AUDIO = "audio"
    VIDEO = "video"
    IMAGE = "image"
    TEXT = "text"

    @property
    def directory(self) -> str:
        """Container directory holding members of this category."""
        return _DIRECTORIES[self]


_DIRECTORIES: dict[ResourceCategory, str] = {
    ResourceCategory.AUDIO: "Audio",
    ResourceCategory.VIDEO: "Video",
    ResourceCategory.IMAGE: "Images",
    ResourceCategory.TEXT: "Texts",
}
