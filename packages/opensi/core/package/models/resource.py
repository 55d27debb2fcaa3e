"""Resource key model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from opensi.core.package.models.enums import ResourceCategory


class ResourceKey(BaseModel):
    """Category-qualified member path of a bundled resource.

    Used both as the container member name and as the key of
    ``Package.resources``; equality and hashing are structural.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    category: ResourceCategory
    name: str

    def __str__(self) -> str:
        return self.name
