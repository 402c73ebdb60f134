"""In-memory implementations of :class:`~cast_profiles.core.protocols.CapabilityProvider`.

Rules
-----
* Approval tables are keyed by catalog *names*, so they can be built
  from plain data (see :mod:`cast_profiles.infra.device_file`).
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from cast_profiles.core.models import CodecFamily, MediaContainer, Profile


@dataclass(frozen=True, slots=True)
class StaticCapabilities:
    """Fixed approval tables for one device.

    Attributes
    ----------
    containers : frozenset[str]
        Approved container names (``mp4``, ``webm`` …).
    profiles : frozenset[tuple[str, str]]
        Approved ``(family name, profile name)`` pairs.
    max_levels : Mapping[str, float]
        Highest approved level per video family.  Families without an
        entry are approved at every catalog level.
    """

    containers: frozenset[str] = frozenset()
    profiles: frozenset[tuple[str, str]] = frozenset()
    max_levels: Mapping[str, float] = field(default_factory=dict)

    def supports_container(self, container: MediaContainer) -> bool:
        return container.name in self.containers

    def supports_codec(
        self,
        family: CodecFamily,
        profile: Profile,
        level: float | None = None,
    ) -> bool:
        if (family.name, profile.name) not in self.profiles:
            return False
        limit = self.max_levels.get(family.name)
        return level is None or limit is None or level <= limit


class AllCapabilities:
    """Approves every container and codec in the catalog."""

    def supports_container(self, container: MediaContainer) -> bool:
        return True

    def supports_codec(
        self,
        family: CodecFamily,
        profile: Profile,
        level: float | None = None,
    ) -> bool:
        return True
