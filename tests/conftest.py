"""Shared pytest fixtures and configuration for the cast-profiles test suite.

Guidelines
----------
* No network and no terminal interaction in any test.
* questionary and Rich tables are faked at the CLI boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

import pytest

from cast_profiles.config import get_settings
from cast_profiles.core.models import CodecFamily, MediaContainer, Profile


class FakeCapabilities:
    """Approves exactly the listed containers and ``(family, profile, level)`` triples.

    Every query is appended to :attr:`events` so tests can assert on
    call order and count.
    """

    def __init__(
        self,
        containers: Iterable[str] = (),
        codecs: Iterable[tuple[str, str, float | None]] = (),
    ) -> None:
        self.containers: set[str] = set(containers)
        self.codecs: set[tuple[str, str, float | None]] = set(codecs)
        self.events: list[tuple[object, ...]] = []

    def supports_container(self, container: MediaContainer) -> bool:
        self.events.append(("container", container.name))
        return container.name in self.containers

    def supports_codec(
        self,
        family: CodecFamily,
        profile: Profile,
        level: float | None = None,
    ) -> bool:
        self.events.append(("codec", family.name, profile.name, level))
        return (family.name, profile.name, level) in self.codecs


@pytest.fixture()
def fake_capabilities() -> type[FakeCapabilities]:
    """Return the :class:`FakeCapabilities` class for per-test construction."""
    return FakeCapabilities


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip ``CAST_PROFILES_*`` variables and reset the settings cache."""
    for key in list(os.environ):
        if key.startswith("CAST_PROFILES_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
