"""Package root model."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from opensi.core.package.models.components import Atom, Info, Round
from opensi.core.package.models.resource import ResourceKey

DEFAULT_PACKAGE_NAME = "Новый пакет вопросов"
DEFAULT_VERSION = 5.0
DEFAULT_DIFFICULTY = 5


class Package(BaseModel):
    """Complete trivia package: metadata, round tree and bundled resources.

    The package exclusively owns its rounds and its resource map. Resources
    are keyed by ``ResourceKey`` and hold the raw member bytes exactly as
    they were read from (and will be written to) the container.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = ""
    name: str = ""
    version: float = DEFAULT_VERSION
    date: str = ""
    difficulty: int = DEFAULT_DIFFICULTY
    language: str = ""
    logo: str | None = None
    publisher: str = ""
    restriction: str = ""
    namespace: str = ""

    info: Info = Field(default_factory=Info)
    rounds: list[Round] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)

    resources: dict[ResourceKey, bytes] = Field(default_factory=dict)

    @classmethod
    def new(cls) -> Package:
        """Create an empty document with a fresh id and today's date."""
        today = datetime.now(tz=UTC).date()
        return cls(
            id=str(uuid.uuid4()),
            name=DEFAULT_PACKAGE_NAME,
            version=DEFAULT_VERSION,
            date=today.isoformat(),
            difficulty=DEFAULT_DIFFICULTY,
        )

    def children(self) -> list[Round]:
        return self.rounds

    def get_resource(self, atom: Atom) -> bytes | None:
        """Bytes of the resource an atom points at, or None.

        Returns None for text atoms and for placeholders that name a
        resource missing from this package.
        """
        # resources imports the models package, so this import is deferred.
        from opensi.core.package.resources import resource_key_for_atom

        key = resource_key_for_atom(atom)
        if key is None:
            return None
        return self.resources.get(key)
