"""Resource resolution between atom placeholders and container members.

Members are indexed by their raw container path (``Images/@joker.png``).
Atom bodies are percent-encoded with the "controls + space" set before the
category directory is prefixed, so a placeholder ``@joker.png`` on an image
atom resolves to exactly that member name. The leading ``@`` is part of the
name and is never stripped.
"""

from __future__ import annotations

from urllib.parse import quote

from opensi.core.package.errors import UnknownResourceError
from opensi.core.package.models.components import Atom
from opensi.core.package.models.enums import AtomKind, ResourceCategory
from opensi.core.package.models.resource import ResourceKey

# Every printable ASCII character except space stays as is; controls, space,
# DEL and all non-ASCII UTF-8 bytes are encoded.
_SAFE_CHARACTERS = "".join(chr(code) for code in range(0x21, 0x7F))

_PATH_PREFIXES: tuple[tuple[str, ResourceCategory], ...] = (
    ("Audio", ResourceCategory.AUDIO),
    ("Images", ResourceCategory.IMAGE),
    ("Video", ResourceCategory.VIDEO),
    ("Texts", ResourceCategory.TEXT),
)

_ATOM_CATEGORIES: dict[AtomKind, ResourceCategory] = {
    AtomKind.IMAGE: ResourceCategory.IMAGE,
    AtomKind.AUDIO: ResourceCategory.AUDIO,
    AtomKind.VIDEO: ResourceCategory.VIDEO,
}


def encode_resource_name(body: str) -> str:
    """Percent-encode an atom body the way member names are indexed.

    Example:
        >>> encode_resource_name("@my song.mp3")
        '@my%20song.mp3'
    """
    return quote(body, safe=_SAFE_CHARACTERS)


def placeholder_key(category: ResourceCategory, body: str) -> ResourceKey:
    """Key a placeholder ``body`` maps to inside ``category``."""
    return ResourceKey(category=category, name=f"{category.directory}/{encode_resource_name(body)}")


def category_for_kind(kind: AtomKind) -> ResourceCategory | None:
    """Resource category an atom kind points into (None for text)."""
    return _ATOM_CATEGORIES.get(kind)


def resource_key_for_atom(atom: Atom) -> ResourceKey | None:
    """Key of the resource a non-text atom refers to.

    Returns None for text atoms.

    Example:
        >>> resource_key_for_atom(Atom(kind=AtomKind.IMAGE, body="@joker.png")).name
        'Images/@joker.png'
    """
    category = category_for_kind(atom.kind)
    if category is None:
        return None
    return placeholder_key(category, atom.body)


def classify_member_path(path: str) -> ResourceKey | None:
    """Classify a container member path by its category prefix.

    The full path is kept as the key name. Returns None for paths outside
    the known ``Audio``/``Images``/``Video``/``Texts`` prefixes.
    """
    for prefix, category in _PATH_PREFIXES:
        if path.startswith(prefix):
            return ResourceKey(category=category, name=path)
    return None


def require_member_key(path: str) -> ResourceKey:
    """Strict form of ``classify_member_path``.

    Raises:
        UnknownResourceError: If the path matches no known category
    """
    key = classify_member_path(path)
    if key is None:
        raise UnknownResourceError(path)
    return key


