"""Constants of the SIQ container and its content document."""

from __future__ import annotations

from opensi.core.package.models.enums import AtomKind

CONTENT_MEMBER = "content.xml"
CONTENT_TYPES_MEMBER = "[Content_Types].xml"
RESERVED_MEMBERS: frozenset[str] = frozenset({CONTENT_MEMBER, CONTENT_TYPES_MEMBER})

XML_PROLOG = '<?xml version="1.0" encoding="utf-8"?>'
CONTENT_TYPES_DOCUMENT = (
    '<?xml version="1.0" encoding="utf-8"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="si/xml" />'
    "</Types>"
)

ROOT_TAG = "package"

# Atom "type" attribute values written for each kind; text is never written.
ATOM_TYPE_NAMES: dict[AtomKind, str] = {
    AtomKind.IMAGE: "image",
    AtomKind.AUDIO: "voice",
    AtomKind.VIDEO: "video",
}

# Accepted on read. Legacy types (say, marker, ...) fall back to text.
ATOM_KINDS_BY_TYPE: dict[str, AtomKind] = {
    "text": AtomKind.TEXT,
    "image": AtomKind.IMAGE,
    "voice": AtomKind.AUDIO,
    "audio": AtomKind.AUDIO,
    "video": AtomKind.VIDEO,
}
