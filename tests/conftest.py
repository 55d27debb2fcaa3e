"""Shared pytest fixtures for OpenSI core tests."""

from __future__ import annotations

import io
import zipfile
from collections.abc import Callable

import pytest

from opensi.core.package.models import (
    Answer,
    Atom,
    AtomKind,
    Info,
    Package,
    Param,
    Question,
    QuestionType,
    ResourceCategory,
    ResourceKey,
    Round,
    Theme,
)

# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def sample_package() -> Package:
    """Two rounds; the first has two themes, the second one final theme."""
    return Package(
        id="0f1e2d3c-4b5a-6978-8796-a5b4c3d2e1f0",
        name="Пробный пакет",
        version=5.0,
        date="2024-03-01",
        difficulty=7,
        publisher="OpenSI",
        language="ru",
        info=Info(authors=["Alice", "Bob"], comments="Warm-up package"),
        tags=["music", "movies"],
        rounds=[
            Round(
                name="Round 1",
                themes=[
                    Theme(
                        name="Songs",
                        questions=[
                            Question(
                                price=100,
                                scenario=[
                                    Atom(body="Name this tune"),
                                    Atom(kind=AtomKind.AUDIO, body="@tune.mp3", time=12.5),
                                ],
                                right=[Answer(body="Yesterday")],
                            ),
                            Question(
                                price=200,
                                question_type=QuestionType(
                                    name="cat",
                                    params=[
                                        Param(name="theme", body="Cinema"),
                                        Param(name="cost", body="300"),
                                    ],
                                ),
                                scenario=[Atom(kind=AtomKind.IMAGE, body="@joker.png")],
                                right=[Answer(body="Joker")],
                                wrong=[Answer(body="Batman")],
                                info=Info(sources=["imdb.com"]),
                            ),
                        ],
                    ),
                    Theme(
                        name="Films",
                        info=Info(comments="Only classics"),
                        questions=[
                            Question(
                                price=100,
                                scenario=[Atom(kind=AtomKind.VIDEO, body="@clip 1.mp4")],
                                right=[Answer(body="Casablanca")],
                            )
                        ],
                    ),
                ],
            ),
            Round(
                name="Final",
                kind="final",
                themes=[
                    Theme(
                        name="History",
                        questions=[
                            Question(
                                price=0,
                                scenario=[Atom(body="Year of the first moon landing?")],
                                right=[Answer(body="1969")],
                            )
                        ],
                    )
                ],
            ),
        ],
        resources={
            ResourceKey(category=ResourceCategory.AUDIO, name="Audio/@tune.mp3"): b"ID3audio",
            ResourceKey(category=ResourceCategory.IMAGE, name="Images/@joker.png"): b"\x89PNG",
            ResourceKey(category=ResourceCategory.VIDEO, name="Video/@clip%201.mp4"): b"mp4data",
        },
    )


@pytest.fixture
def empty_package() -> Package:
    """Freshly created package without rounds."""
    return Package.new()


# ============================================================================
# Container Fixtures
# ============================================================================


@pytest.fixture
def write_zip() -> Callable[[dict[str, bytes | str]], bytes]:
    """Build an in-memory zip from ``{member name: content}``."""

    def _write_zip(members: dict[str, bytes | str]) -> bytes:
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, mode="w", compression=zipfile.ZIP_DEFLATED) as archive:
            for name, content in members.items():
                archive.writestr(name, content)
        return buffer.getvalue()

    return _write_zip


@pytest.fixture
def minimal_content() -> str:
    """Smallest content document the parser accepts."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<package name="Minimal" version="5" id="abc" difficulty="5">'
        "<rounds/>"
        "</package>"
    )
