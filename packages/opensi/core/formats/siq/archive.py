"""SIQ container codec.

An ``.siq`` file is a zip archive holding the ``content.xml`` document, a
fixed ``[Content_Types].xml`` member and bundled media under the
``Audio/``, ``Images/``, ``Video/`` and ``Texts/`` directories. Containers
are read and written as whole in-memory buffers.
"""

from __future__ import annotations

import io
import zipfile
import zlib
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field

from opensi.core.config.models import ArchiveConfig
from opensi.core.formats.siq.constants import (
    CONTENT_MEMBER,
    CONTENT_TYPES_DOCUMENT,
    CONTENT_TYPES_MEMBER,
    RESERVED_MEMBERS,
)
from opensi.core.formats.siq.errors import ArchiveError
from opensi.core.formats.siq.exporter import SIQExporter
from opensi.core.formats.siq.parser import SIQParser
from opensi.core.package.models.package import Package
from opensi.core.package.models.resource import ResourceKey
from opensi.core.package.resources import classify_member_path
from opensi.core.utils.logging import get_logger, log_performance

logger = get_logger(__name__)


class LoadResult(BaseModel):
    """Outcome of reading a container.

    Attributes:
        package: Decoded package with its resources attached.
        unknown_members: Member paths skipped because no category matched.
    """

    model_config = ConfigDict(extra="forbid")

    package: Package
    unknown_members: list[str] = Field(default_factory=list)


def _is_safe_member(name: str) -> bool:
    path = PurePosixPath(name)
    return not path.is_absolute() and ".." not in path.parts


def _classify(name: str) -> ResourceKey | None:
    if not _is_safe_member(name):
        return None
    return classify_member_path(name)


@log_performance
def read_package(data: bytes) -> LoadResult:
    """Decode a container buffer.

    Args:
        data: Raw bytes of an ``.siq`` file

    Returns:
        LoadResult with the package and any skipped member paths

    Raises:
        ArchiveError: If the buffer is not a zip archive, a member is corrupt,
            encrypted or uses an unsupported compression method, or
            ``content.xml`` is missing or not UTF-8
        ParseError: If ``content.xml`` is malformed or off-schema
    """
    resources: dict[ResourceKey, bytes] = {}
    unknown_members: list[str] = []

    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            names = archive.namelist()
            if CONTENT_MEMBER not in names:
                raise ArchiveError(f"Container has no {CONTENT_MEMBER} member")

            for info in archive.infolist():
                if info.is_dir() or info.filename in RESERVED_MEMBERS:
                    continue

                key = _classify(info.filename)
                if key is None:
                    logger.warning(f"Skipping member with unknown resource type: {info.filename}")
                    unknown_members.append(info.filename)
                    continue

                logger.debug(f"Member {info.filename} classified as {key.category.value}")
                resources[key] = archive.read(info)

            content = archive.read(CONTENT_MEMBER)
    except (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, OSError) as e:
        raise ArchiveError(f"Unreadable container: {e}") from e

    try:
        document = content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ArchiveError(f"{CONTENT_MEMBER} is not valid UTF-8") from e

    package = SIQParser().parse_string(document)
    package.resources = resources

    logger.debug(
        f"Loaded package {package.name!r}: {len(resources)} resources, "
        f"{len(unknown_members)} unknown members"
    )
    return LoadResult(package=package, unknown_members=unknown_members)


def open_package_bytes(data: bytes) -> Package:
    """Decode a container buffer into a Package.

    Unknown members are logged and dropped; use ``read_package`` to inspect them.
    """
    return read_package(data).package


def open_package(path: Path | str) -> Package:
    """Read and decode an ``.siq`` file.

    Raises:
        FileNotFoundError: If the file does not exist
        ArchiveError: If the container is unreadable
        ParseError: If the content document is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"SIQ file not found: {path}")

    logger.debug(f"Opening SIQ package: {path}")
    return open_package_bytes(path.read_bytes())


@log_performance
def save_package_bytes(package: Package, *, config: ArchiveConfig | None = None) -> bytes:
    """Encode a package into a container buffer.

    Args:
        package: Package to encode
        config: Archive settings (defaults apply when None)

    Returns:
        Raw bytes of a deflated ``.siq`` container
    """
    config = config or ArchiveConfig()
    buffer = io.BytesIO()

    with zipfile.ZipFile(
        buffer,
        mode="w",
        compression=zipfile.ZIP_DEFLATED,
        compresslevel=config.compression_level,
    ) as archive:
        archive.writestr(CONTENT_MEMBER, SIQExporter().to_bytes(package))
        archive.writestr(CONTENT_TYPES_MEMBER, CONTENT_TYPES_DOCUMENT)
        for key, data in package.resources.items():
            archive.writestr(key.name, data)

    logger.debug(f"Saved package {package.name!r} with {len(package.resources)} resources")
    return buffer.getvalue()


def save_package(
    package: Package, path: Path | str, *, config: ArchiveConfig | None = None
) -> None:
    """Encode a package and write it to ``path``.

    I/O errors from the filesystem propagate unchanged.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug(f"Saving SIQ package to: {path}")
    path.write_bytes(save_package_bytes(package, config=config))
